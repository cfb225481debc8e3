# Program: Boilerplate Package Init
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Generate license headers in the comment syntax of the target file."""

from .categories import FileCategory, match_category, render_header, tested_module_name
from .comments import CommentStyle, block_comment, file_comment, hash_comment, non_hash_comment
from .config import Configuration, HeaderDefaults, SeparatorStyle, load_defaults
from .errors import (
    BoilerplateError,
    ConfigError,
    InvalidLicenseError,
    LicenseFileError,
    TargetFileError,
    UnrecognizedFileTypeError,
)
from .licensing import LicenseSpec, render_license, resolve_license
from .writer import write_in_place, write_stream

__all__ = [
    "BoilerplateError",
    "CommentStyle",
    "ConfigError",
    "Configuration",
    "FileCategory",
    "HeaderDefaults",
    "InvalidLicenseError",
    "LicenseFileError",
    "LicenseSpec",
    "SeparatorStyle",
    "TargetFileError",
    "UnrecognizedFileTypeError",
    "block_comment",
    "file_comment",
    "hash_comment",
    "load_defaults",
    "match_category",
    "non_hash_comment",
    "render_header",
    "render_license",
    "resolve_license",
    "tested_module_name",
    "write_in_place",
    "write_stream",
]

# Created by Dr. Z. Bakhtiyorov
