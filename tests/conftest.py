from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the package is importable when running tests without installation
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from boilerplate.config import Configuration, YEAR_ENV_VAR


@pytest.fixture(autouse=True)
def _no_year_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(YEAR_ENV_VAR, raising=False)


@pytest.fixture()
def config() -> Configuration:
    return Configuration(copyright_holder="Example Corp", license_name="apache", year="2024")
