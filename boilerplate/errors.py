# Program: Boilerplate Errors
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Exceptions raised while building or writing a header."""

from __future__ import annotations


class BoilerplateError(RuntimeError):
    """Base class for every error the command line reports and exits on."""


class ConfigError(BoilerplateError):
    """Raised when a YAML defaults file cannot be read or validated."""


class InvalidLicenseError(BoilerplateError):
    """Raised when a license name matches no known license or alias."""

    def __init__(self, name: str, valid: tuple[str, ...] = ()) -> None:
        self.name = name
        message = f"Invalid license '{name}'."
        if valid:
            message += f" Valid licenses: {', '.join(valid)}."
        super().__init__(message)


class LicenseFileError(BoilerplateError):
    """Raised when a known license has no text file in the license directory."""


class UnrecognizedFileTypeError(BoilerplateError):
    """Raised when no category rule matches the target file name."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Unrecognized file type: {filename}")


class TargetFileError(BoilerplateError):
    """Raised when the in-place target cannot be read or replaced."""


# Created by Dr. Z. Bakhtiyorov
