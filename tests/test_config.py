# Program: Config Loading Tests
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""YAML defaults and command-line precedence."""

from __future__ import annotations

import datetime as _dt
from pathlib import Path

import pytest

from boilerplate.config import (
    DEFAULT_COPYRIGHT_HOLDER,
    DEFAULT_LICENSE,
    DEFAULT_LICENSE_DIR,
    YEAR_ENV_VAR,
    Configuration,
    HeaderDefaults,
    SeparatorStyle,
    build_configuration,
    load_defaults,
)
from boilerplate.errors import ConfigError


def test_builtin_defaults() -> None:
    cfg = build_configuration(HeaderDefaults())

    assert cfg.copyright_holder == DEFAULT_COPYRIGHT_HOLDER
    assert cfg.license_name == DEFAULT_LICENSE
    assert cfg.year == str(_dt.date.today().year)
    assert cfg.separator is SeparatorStyle.BLANK
    assert cfg.license_dir == DEFAULT_LICENSE_DIR
    assert not cfg.in_place and not cfg.silent


def test_year_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(YEAR_ENV_VAR, "1984")
    assert Configuration().year == "1984"
    assert build_configuration(HeaderDefaults(), year="2001").year == "2001"


def test_load_defaults_from_yaml(tmp_path: Path) -> None:
    cfg_path = tmp_path / "boilerplate.yaml"
    cfg_path.write_text(
        "copyright_holder: Example Corp\nlicense: mit\nseparator: ruled\nlicense_dir: texts\n",
        encoding="utf-8",
    )

    defaults = load_defaults(cfg_path)

    assert defaults.copyright_holder == "Example Corp"
    assert defaults.license == "mit"
    assert defaults.separator is SeparatorStyle.RULED
    assert defaults.license_dir == (tmp_path / "texts").resolve()


def test_command_line_beats_yaml(tmp_path: Path) -> None:
    cfg_path = tmp_path / "boilerplate.yaml"
    cfg_path.write_text("copyright_holder: Example Corp\nlicense: mit\n", encoding="utf-8")

    cfg = build_configuration(load_defaults(cfg_path), copyright_holder="Other", license_name="gpl3")

    assert cfg.copyright_holder == "Other"
    assert cfg.license_name == "gpl3"


def test_empty_yaml_falls_back(tmp_path: Path) -> None:
    cfg_path = tmp_path / "empty.yaml"
    cfg_path.write_text("", encoding="utf-8")
    assert load_defaults(cfg_path) == HeaderDefaults()


@pytest.mark.parametrize("content", ["- a\n- b\n", "separator: zigzag\n", "license: [unclosed\n"])
def test_bad_yaml_raises_config_error(tmp_path: Path, content: str) -> None:
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_defaults(cfg_path)


def test_missing_yaml_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_defaults(tmp_path / "absent.yaml")


# Created by Dr. Z. Bakhtiyorov
