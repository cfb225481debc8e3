# Program: Comment Formatter Tests
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Line and block comment rendering."""

from __future__ import annotations

import pytest

from boilerplate.comments import (
    block_comment,
    block_style,
    file_comment,
    hash_comment,
    line_style,
    non_hash_comment,
    separator_line,
)
from boilerplate.config import SeparatorStyle

TEXT = "Copyright 2024 Example Corp\n\n    indented line   \nlast"


@pytest.mark.parametrize("prefix", ["//", ";;", "%", "--", '"'])
def test_each_line_gets_prefix_and_loses_trailing_space(prefix: str) -> None:
    rendered = non_hash_comment(TEXT, prefix)

    assert rendered.splitlines() == [
        f"{prefix} Copyright 2024 Example Corp",
        prefix,
        f"{prefix}     indented line",
        f"{prefix} last",
    ]
    assert rendered.endswith("\n")


def test_hash_comment_matches_generic_renderer() -> None:
    assert hash_comment(TEXT) == non_hash_comment(TEXT, "#")
    assert hash_comment("a\n").startswith("# a")


def test_block_comment_wraps_between_delimiters() -> None:
    rendered = block_comment("one\n\ntwo\n", block_style("/*", " *", " */"))
    assert rendered == "/*\n * one\n *\n * two\n */\n"


def test_markup_block_lines_carry_no_leading_space() -> None:
    rendered = block_comment("one  \n\ntwo\n", block_style("<!--", "", "-->"))
    assert rendered == "<!--\none\n\ntwo\n-->\n"


def test_block_comment_requires_delimiters() -> None:
    with pytest.raises(ValueError):
        block_comment("x", line_style("#"))


@pytest.mark.parametrize(("prefix", "count"), [("#", 80), ("//", 40), ("REM", 26)])
def test_ruled_separator_width(prefix: str, count: int) -> None:
    assert separator_line(line_style(prefix), SeparatorStyle.RULED) == prefix * count


def test_blank_separator_and_block_styles_are_empty() -> None:
    assert separator_line(line_style("#"), SeparatorStyle.BLANK) == ""
    assert separator_line(block_style("<!--", "", "-->"), SeparatorStyle.RULED) == ""


def test_file_comment_line_and_block() -> None:
    assert file_comment(line_style("//"), SeparatorStyle.BLANK) == "\n// TODO: High-level file comment.\n"
    assert file_comment(block_style("/*", " *", " */"), SeparatorStyle.BLANK) == (
        "\n/* TODO: High-level file comment. */\n"
    )


# Created by Dr. Z. Bakhtiyorov
