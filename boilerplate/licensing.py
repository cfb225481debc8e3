# Program: Boilerplate License Renderer
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""License lookup by name or alias and placeholder substitution.

License texts live as plain files in the configured license directory, one
per license, and carry the literal tokens ``%YEAR%`` and
``%COPYRIGHT_HOLDER%``. Substitution is plain ``str.replace``; the values are
inserted verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .config import Configuration
from .errors import InvalidLicenseError, LicenseFileError

logger = logging.getLogger(__name__)

YEAR_TOKEN = "%YEAR%"
HOLDER_TOKEN = "%COPYRIGHT_HOLDER%"


@dataclass(frozen=True)
class LicenseSpec:
    key: str
    title: str
    filename: str
    aliases: Sequence[str] = ()

    def names(self) -> tuple[str, ...]:
        return (self.key, *self.aliases)


LICENSES: tuple[LicenseSpec, ...] = (
    LicenseSpec("apache", "Apache License 2.0", "apache-2.0.txt", ("apache2", "apache-2.0", "asl")),
    LicenseSpec("bsd2", "BSD 2-Clause License", "bsd-2-clause.txt", ("bsd-2-clause", "freebsd", "simplified-bsd")),
    LicenseSpec("bsd3", "BSD 3-Clause License", "bsd-3-clause.txt", ("bsd", "bsd-3-clause", "new-bsd", "modified-bsd")),
    LicenseSpec("bsd4", "BSD 4-Clause License", "bsd-4-clause.txt", ("bsd-4-clause", "original-bsd")),
    LicenseSpec("gpl2", "GNU General Public License v2.0", "gpl-2.0.txt", ("gpl", "gplv2", "gpl-2.0")),
    LicenseSpec("gpl3", "GNU General Public License v3.0", "gpl-3.0.txt", ("gplv3", "gpl-3.0")),
    LicenseSpec("lgpl", "GNU Lesser General Public License v2.1", "lgpl-2.1.txt", ("lgpl2", "lgpl2.1", "lgpl-2.1")),
    LicenseSpec("mit", "MIT License", "mit.txt", ("expat",)),
    LicenseSpec("mpl", "Mozilla Public License 2.0", "mpl-2.0.txt", ("mpl2", "mpl-2.0")),
)


def normalize_license_key(name: str) -> str:
    """Lowercase and keep alphanumerics, so ``GPL-2.0`` and ``gpl20`` agree."""
    return "".join(ch for ch in name.lower() if ch.isalnum())


def available_licenses() -> tuple[LicenseSpec, ...]:
    return LICENSES


def resolve_license(name: str) -> LicenseSpec:
    wanted = normalize_license_key(name)
    if wanted:
        for spec in LICENSES:
            if any(normalize_license_key(alias) == wanted for alias in spec.names()):
                return spec
    raise InvalidLicenseError(name, tuple(spec.key for spec in LICENSES))


def load_license_text(spec: LicenseSpec, license_dir: Path) -> str:
    path = license_dir / spec.filename
    if not path.is_file():
        raise LicenseFileError(f"License text for '{spec.key}' not found: {path}")
    return path.read_text(encoding="utf-8")


def substitute(text: str, year: str, holder: str) -> str:
    return text.replace(YEAR_TOKEN, year).replace(HOLDER_TOKEN, holder)


def render_license(config: Configuration) -> str:
    """Resolve, load and fill in the configured license.

    The result has no leading or trailing blank lines and ends with a single
    newline.
    """
    spec = resolve_license(config.license_name)
    logger.debug("Using license %s (%s)", spec.key, spec.title)
    raw = load_license_text(spec, config.license_dir)
    rendered = substitute(raw, config.year, config.copyright_holder)
    return rendered.strip("\n") + "\n"


# Created by Dr. Z. Bakhtiyorov
