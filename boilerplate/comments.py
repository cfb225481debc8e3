# Program: Boilerplate Comment Formatter
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Render text inside line or block comments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import SeparatorStyle

FILE_COMMENT = "TODO: High-level file comment."
RULE_WIDTH = 80


@dataclass(frozen=True)
class CommentStyle:
    """Line comments use ``prefix`` only; block comments add delimiters.

    For a block style ``prefix`` is the marker put in front of every line
    between the ``open`` and ``close`` lines (``" *"`` for C blocks).
    """

    prefix: str
    open: Optional[str] = None
    close: Optional[str] = None

    @property
    def is_block(self) -> bool:
        return self.open is not None and self.close is not None


def line_style(prefix: str) -> CommentStyle:
    return CommentStyle(prefix=prefix)


def block_style(open_: str, prefix: str, close: str) -> CommentStyle:
    return CommentStyle(prefix=prefix, open=open_, close=close)


def non_hash_comment(text: str, prefix: str) -> str:
    """Prefix every line with ``prefix`` and a space, dropping trailing blanks.

    An empty prefix leaves the lines as they are, for blocks such as
    ``<!-- -->`` whose inner lines carry no marker.
    """
    if not prefix:
        return "\n".join(line.rstrip() for line in text.splitlines()) + "\n"
    lines = [f"{prefix} {line}".rstrip() for line in text.splitlines()]
    return "\n".join(lines) + "\n"


def hash_comment(text: str) -> str:
    return non_hash_comment(text, "#")


def block_comment(text: str, style: CommentStyle) -> str:
    if not style.is_block:
        raise ValueError(f"Comment style {style!r} has no block delimiters.")
    inner = non_hash_comment(text, style.prefix) if text else ""
    return f"{style.open}\n{inner}{style.close}\n"


def comment(text: str, style: CommentStyle) -> str:
    if style.is_block:
        return block_comment(text, style)
    if style.prefix == "#":
        return hash_comment(text)
    return non_hash_comment(text, style.prefix)


def separator_line(style: CommentStyle, separator: SeparatorStyle) -> str:
    """Blank, or a rule of ``80 // len(prefix)`` repeated prefixes."""
    if separator is SeparatorStyle.RULED and not style.is_block and style.prefix:
        return style.prefix * (RULE_WIDTH // len(style.prefix))
    return ""


def file_comment(style: CommentStyle, separator: SeparatorStyle) -> str:
    """Separator line followed by the placeholder file comment."""
    if style.is_block:
        todo = f"{style.open} {FILE_COMMENT} {style.close.strip()}"
    else:
        todo = f"{style.prefix} {FILE_COMMENT}"
    return f"{separator_line(style, separator)}\n{todo}\n"


# Created by Dr. Z. Bakhtiyorov
