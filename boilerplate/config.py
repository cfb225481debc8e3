# Program: Boilerplate Config Utilities
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Run configuration and YAML defaults loading."""

from __future__ import annotations

import datetime as _dt
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

from .errors import ConfigError

DEFAULT_COPYRIGHT_HOLDER = "Google Inc."
DEFAULT_LICENSE = "apache"
DEFAULT_LICENSE_DIR = Path(__file__).resolve().parent / "data" / "licenses"
YEAR_ENV_VAR = "BOILERPLATE_YEAR"


class SeparatorStyle(str, Enum):
    """What sits between the license block and the file comment."""

    BLANK = "blank"
    RULED = "ruled"


@dataclass(frozen=True)
class Configuration:
    copyright_holder: str = DEFAULT_COPYRIGHT_HOLDER
    license_name: str = DEFAULT_LICENSE
    year: str = ""
    in_place: bool = False
    silent: bool = False
    separator: SeparatorStyle = SeparatorStyle.BLANK
    license_dir: Path = DEFAULT_LICENSE_DIR

    def __post_init__(self) -> None:
        if not self.year:
            object.__setattr__(self, "year", default_year())


class HeaderDefaults(BaseModel):
    """Defaults read from a YAML file; the command line overrides each one."""

    copyright_holder: str = DEFAULT_COPYRIGHT_HOLDER
    license: str = DEFAULT_LICENSE
    separator: SeparatorStyle = SeparatorStyle.BLANK
    license_dir: Optional[Path] = None


def default_year() -> str:
    """Current calendar year unless ``BOILERPLATE_YEAR`` says otherwise."""
    return os.environ.get(YEAR_ENV_VAR) or str(_dt.date.today().year)


def load_defaults(path: Path) -> HeaderDefaults:
    """Load YAML defaults with sane fallbacks for missing keys."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")
    try:
        defaults = HeaderDefaults.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    if defaults.license_dir is not None and not defaults.license_dir.is_absolute():
        resolved = (path.resolve().parent / defaults.license_dir).resolve()
        defaults = defaults.model_copy(update={"license_dir": resolved})
    return defaults


def build_configuration(
    defaults: HeaderDefaults,
    *,
    copyright_holder: Optional[str] = None,
    license_name: Optional[str] = None,
    year: Optional[str] = None,
    in_place: bool = False,
    silent: bool = False,
    ruled_separator: bool = False,
) -> Configuration:
    """Merge command-line values over the loaded defaults."""
    return Configuration(
        copyright_holder=copyright_holder if copyright_holder is not None else defaults.copyright_holder,
        license_name=license_name if license_name is not None else defaults.license,
        year=year or default_year(),
        in_place=in_place,
        silent=silent,
        separator=SeparatorStyle.RULED if ruled_separator else defaults.separator,
        license_dir=defaults.license_dir or DEFAULT_LICENSE_DIR,
    )


# Created by Dr. Z. Bakhtiyorov
