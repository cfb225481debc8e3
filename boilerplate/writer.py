# Program: Boilerplate Output Writer
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Print a header or prepend it to the target file."""

from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO

from .categories import render_header
from .config import Configuration
from .errors import TargetFileError

logger = logging.getLogger(__name__)


def write_stream(header: str, stream: Optional[TextIO] = None) -> None:
    target = stream if stream is not None else sys.stdout
    target.write(header)
    target.flush()


def write_in_place(path: Path, config: Configuration) -> str:
    """Prepend the header for ``path`` to its current contents.

    The new contents are assembled in a scratch file beside the target and
    swapped in with ``os.replace``; the scratch file never outlives the call.
    Returns the header that was written.
    """
    header = render_header(path, config)
    # Rewrite the file a symlink points at, not the link.
    target = path.resolve()
    try:
        original = target.read_bytes()
    except OSError as exc:
        raise TargetFileError(f"Cannot read {path}: {exc}") from exc

    fd, scratch_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    scratch = Path(scratch_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(header.encode("utf-8"))
            handle.write(original)
            handle.flush()
            os.fsync(handle.fileno())
        shutil.copymode(target, scratch)
        os.replace(scratch, target)
    except OSError as exc:
        raise TargetFileError(f"Cannot rewrite {path}: {exc}") from exc
    finally:
        if scratch.exists():
            scratch.unlink()

    logger.debug("Prepended %d header bytes to %s", len(header.encode("utf-8")), path)
    return header


# Created by Dr. Z. Bakhtiyorov
