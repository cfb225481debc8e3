# Program: Boilerplate Category Dispatcher
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Map a file name to its category and render the complete header.

Rules are evaluated in order and the first match wins: reserved file names
come before naming conventions, which come before plain suffixes. That is
what lets ``CMakeLists.txt`` be a CMake file rather than plain text and
``test_foo.py`` get a test scaffold rather than a script stub.
"""

from __future__ import annotations

import fnmatch
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .comments import CommentStyle, block_style, comment, file_comment, line_style
from .config import Configuration
from .errors import UnrecognizedFileTypeError
from .licensing import render_license

logger = logging.getLogger(__name__)

Matcher = Callable[[str], bool]
BodyFactory = Callable[[Path], str]

HASH = line_style("#")
SLASHES = line_style("//")
SEMICOLONS = line_style(";;")
DASHES = line_style("--")
PERCENT = line_style("%")
QUOTE = line_style('"')
BANG = line_style("!")
REM = line_style("REM")
C_BLOCK = block_style("/*", " *", " */")
ML_BLOCK = block_style("(*", " *", " *)")
MARKUP_BLOCK = block_style("<!--", "", "-->")


@dataclass(frozen=True)
class FileCategory:
    name: str
    style: Optional[CommentStyle]
    preamble: str = ""
    body: Optional[BodyFactory] = None

    @property
    def is_plain_text(self) -> bool:
        return self.style is None


@dataclass(frozen=True)
class Rule:
    matcher: Matcher
    category: FileCategory


def named(*names: str) -> Matcher:
    wanted = frozenset(names)
    return lambda filename: filename in wanted


def suffixed(*suffixes: str) -> Matcher:
    return lambda filename: any(filename.endswith(suffix) for suffix in suffixes)


def globbed(*patterns: str) -> Matcher:
    return lambda filename: any(fnmatch.fnmatchcase(filename, pattern) for pattern in patterns)


def tested_module_name(path: Path) -> str:
    """Best-effort name of the module a test file exercises.

    Strips one leading ``test_`` or, failing that, one trailing ``_test``.
    """
    stem = path.stem
    if stem.startswith("test_"):
        return stem[len("test_"):]
    if stem.endswith("_test"):
        return stem[: -len("_test")]
    return stem


def _camel_case(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[^0-9A-Za-z]+", name) if part)


def python_main_body(_: Path) -> str:
    return (
        "import sys\n"
        "\n"
        "\n"
        "def main(argv):\n"
        "    return 0\n"
        "\n"
        "\n"
        'if __name__ == "__main__":\n'
        "    sys.exit(main(sys.argv))\n"
    )


def python_test_body(path: Path) -> str:
    module = tested_module_name(path)
    lines = ["import unittest", ""]
    # Only import the module under test when it sits next to the test file.
    if module and module.isidentifier() and path.with_name(f"{module}.py").is_file():
        lines += [f"import {module}", ""]
    class_name = _camel_case(module or path.stem) + "Test"
    lines += [
        "",
        f"class {class_name}(unittest.TestCase):",
        "",
        "    def test_something(self):",
        '        self.fail("Write the first test.")',
        "",
        "",
        'if __name__ == "__main__":',
        "    unittest.main()",
    ]
    return "\n".join(lines) + "\n"


def php_body(_: Path) -> str:
    return "declare(strict_types=1);\n\nerror_reporting(E_ALL);\n"


def perl_body(_: Path) -> str:
    return "use strict;\nuse warnings;\n"


PLAIN_TEXT = FileCategory("plain-text", None)
MAKEFILE = FileCategory("makefile", HASH)
CMAKE = FileCategory("cmake", HASH)
DOCKERFILE = FileCategory("dockerfile", HASH)
BAZEL = FileCategory("bazel", HASH)
DEPLOYMENT = FileCategory("deployment-manifest", HASH)
RUBY_MANIFEST = FileCategory("ruby-manifest", HASH)
PYTHON_TEST = FileCategory("python-test", HASH, "#!/usr/bin/env python3", python_test_body)
PYTHON = FileCategory("python", HASH, "#!/usr/bin/env python3", python_main_body)
SHELL = FileCategory("shell", HASH, "#!/bin/bash")
PERL = FileCategory("perl", HASH, "#!/usr/bin/perl", perl_body)
RUBY = FileCategory("ruby", HASH, "#!/usr/bin/env ruby")
PHP = FileCategory("php", SLASHES, "<?php", php_body)
YAML = FileCategory("yaml", HASH)
CONFIG = FileCategory("config", HASH)
R = FileCategory("r", HASH)
TCL = FileCategory("tcl", HASH)
POWERSHELL = FileCategory("powershell", HASH)
NIX = FileCategory("nix", HASH)
C_FAMILY = FileCategory("c-family", SLASHES)
JVM = FileCategory("jvm", SLASHES)
JAVASCRIPT = FileCategory("javascript", SLASHES)
GO = FileCategory("go", SLASHES)
RUST = FileCategory("rust", SLASHES)
SWIFT = FileCategory("swift", SLASHES)
CSHARP = FileCategory("csharp", SLASHES)
PROTO = FileCategory("protobuf", SLASHES)
CSS = FileCategory("css", C_BLOCK)
HTML = FileCategory("html", MARKUP_BLOCK, "<!DOCTYPE html>")
XML = FileCategory("xml", MARKUP_BLOCK, '<?xml version="1.0" encoding="UTF-8"?>')
LISP = FileCategory("lisp", SEMICOLONS)
HASKELL = FileCategory("haskell", DASHES)
LUA = FileCategory("lua", DASHES)
SQL = FileCategory("sql", DASHES)
TEX = FileCategory("tex", PERCENT)
ERLANG = FileCategory("erlang", PERCENT)
MATLAB = FileCategory("matlab", PERCENT)
VIM = FileCategory("vim", QUOTE)
FORTRAN = FileCategory("fortran", BANG)
BATCH = FileCategory("batch", REM)
OCAML = FileCategory("ocaml", ML_BLOCK)

RULES: tuple[Rule, ...] = (
    # Reserved file names.
    Rule(named("Makefile", "makefile", "GNUmakefile"), MAKEFILE),
    Rule(named("CMakeLists.txt"), CMAKE),
    Rule(named("Dockerfile", "Containerfile"), DOCKERFILE),
    Rule(named("BUILD", "BUILD.bazel", "WORKSPACE", "WORKSPACE.bazel", "MODULE.bazel"), BAZEL),
    Rule(named("app.yaml", "cloudbuild.yaml", "docker-compose.yml", "docker-compose.yaml", "Procfile"), DEPLOYMENT),
    Rule(named("Gemfile", "Rakefile", "Vagrantfile", "Guardfile"), RUBY_MANIFEST),
    Rule(named("README", "LICENSE", "AUTHORS", "CONTRIBUTORS"), PLAIN_TEXT),
    Rule(named(".vimrc", "_vimrc", ".gvimrc"), VIM),
    # Naming conventions.
    Rule(globbed("test_*.py", "*_test.py"), PYTHON_TEST),
    # Suffixes.
    Rule(suffixed(".txt", ".md", ".markdown", ".rst"), PLAIN_TEXT),
    Rule(suffixed(".mk"), MAKEFILE),
    Rule(suffixed(".cmake"), CMAKE),
    Rule(suffixed(".dockerfile"), DOCKERFILE),
    Rule(suffixed(".bzl", ".bazel"), BAZEL),
    Rule(suffixed(".py"), PYTHON),
    Rule(suffixed(".sh", ".bash"), SHELL),
    Rule(suffixed(".pl", ".pm"), PERL),
    Rule(suffixed(".rb", ".rake"), RUBY),
    Rule(suffixed(".php"), PHP),
    Rule(suffixed(".yaml", ".yml"), YAML),
    Rule(suffixed(".toml", ".cfg", ".conf", ".ini"), CONFIG),
    Rule(suffixed(".r", ".R"), R),
    Rule(suffixed(".tcl"), TCL),
    Rule(suffixed(".ps1", ".psm1"), POWERSHELL),
    Rule(suffixed(".nix"), NIX),
    Rule(suffixed(".c", ".cc", ".cpp", ".cxx", ".h", ".hh", ".hpp", ".hxx"), C_FAMILY),
    Rule(suffixed(".java", ".kt", ".kts", ".scala", ".groovy", ".gradle"), JVM),
    Rule(suffixed(".js", ".jsx", ".mjs", ".ts", ".tsx"), JAVASCRIPT),
    Rule(suffixed(".go"), GO),
    Rule(suffixed(".rs"), RUST),
    Rule(suffixed(".swift"), SWIFT),
    Rule(suffixed(".cs"), CSHARP),
    Rule(suffixed(".proto"), PROTO),
    Rule(suffixed(".css", ".scss", ".less"), CSS),
    Rule(suffixed(".html", ".htm"), HTML),
    Rule(suffixed(".xml", ".xsd", ".xsl", ".svg"), XML),
    Rule(suffixed(".el", ".lisp", ".cl", ".scm", ".clj"), LISP),
    Rule(suffixed(".hs"), HASKELL),
    Rule(suffixed(".lua"), LUA),
    Rule(suffixed(".sql"), SQL),
    Rule(suffixed(".tex", ".sty", ".cls"), TEX),
    Rule(suffixed(".erl", ".hrl"), ERLANG),
    Rule(suffixed(".m"), MATLAB),
    Rule(suffixed(".vim"), VIM),
    Rule(suffixed(".f90", ".f95", ".f03"), FORTRAN),
    Rule(suffixed(".bat", ".cmd"), BATCH),
    Rule(suffixed(".ml", ".mli"), OCAML),
)


def match_category(path: Path) -> FileCategory:
    filename = path.name
    for rule in RULES:
        if rule.matcher(filename):
            logger.debug("Matched %s to category %s", filename, rule.category.name)
            return rule.category
    raise UnrecognizedFileTypeError(str(path))


def render_header(path: Path, config: Configuration) -> str:
    """Build the header for ``path``; it always ends with one blank line.

    The license is rendered before the file type is looked at, so an invalid
    license name is reported whatever the target is.
    """
    license_text = render_license(config)
    category = match_category(path)
    if category.is_plain_text:
        return license_text + "\n"

    head = f"{category.preamble}\n" if category.preamble else ""
    head += comment(license_text, category.style)
    head += file_comment(category.style, config.separator)

    sections = [head]
    if category.body is not None:
        sections.append(category.body(path))
    return "\n".join(section.rstrip("\n") + "\n" for section in sections) + "\n"


# Created by Dr. Z. Bakhtiyorov
