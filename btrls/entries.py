# File: btrls/entries.py
"""
btrls.entries

The Entry record and the metadata extractor that builds one from a path.

Fallbacks for fallible reads live here, one helper per field:
- decode_name: names that are not valid UTF-8 become UNKNOWN_NAME.
- format_modified: a missing modification time becomes "".
- read_entry: unreadable metadata means the entry is skipped (None).
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .sizes import find_length

logger = logging.getLogger(__name__)

# Files that start with "." but are not considered hidden
SPECIAL_FILES = (".gitignore",)

UNKNOWN_NAME = "unknown name"

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH
_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class EntryKind(str, Enum):
    FILE = "File"
    DIR = "Dir"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Entry:
    """One row of a listing. Field order is the table's column order."""
    e_type: EntryKind
    name: str
    len_bytes: str
    modified: str
    read_only: bool
    hidden: bool = False  # drives coloring only, never rendered
    is_exec: bool = False  # drives coloring only, never rendered

    @property
    def is_dir(self) -> bool:
        return self.e_type is EntryKind.DIR

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["e_type"] = self.e_type.value
        return data


def is_hidden_name(name: str) -> bool:
    return name.startswith(".") and name not in SPECIAL_FILES


def decode_name(raw: str) -> str:
    """Return `raw` unless it carries undecodable bytes from the OS."""
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return UNKNOWN_NAME
    return raw


def format_modified(mtime: Optional[float]) -> str:
    """Local time like 'Mar  4 2025 14:07' (day padded to two columns)."""
    if mtime is None:
        return ""
    try:
        date = datetime.fromtimestamp(mtime)
    except (OverflowError, OSError, ValueError):
        return ""
    return f"{date:%b} {date.day:>2} {date:%Y %H:%M}"


def is_read_only(mode: int) -> bool:
    return not (mode & _WRITE_BITS)


def is_executable(mode: int) -> bool:
    if stat.S_ISDIR(mode):
        return False
    return bool(mode & _EXEC_BITS)


def _raw_name(path: Path) -> str:
    # "." has no final component and ".." names no directory; show the one they point at.
    if path.name in ("", os.pardir):
        return path.resolve().name or str(path)
    return path.name


def read_entry(
    path: Path,
    *,
    directory_size: bool = False,
    byte_size: bool = False,
) -> Optional[Entry]:
    """
    Build an Entry for `path`, following symlinks.

    Returns None when the metadata cannot be read; callers drop such entries.
    """
    path = Path(path)
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug("Skipping %s: cannot read metadata (%s)", path, e)
        return None

    kind = EntryKind.DIR if stat.S_ISDIR(st.st_mode) else EntryKind.FILE
    raw_name = _raw_name(path)
    return Entry(
        e_type=kind,
        name=decode_name(raw_name),
        len_bytes=find_length(
            path,
            directory_size=directory_size and kind is EntryKind.DIR,
            byte_size=byte_size,
            stat_result=st,
        ),
        modified=format_modified(getattr(st, "st_mtime", None)),
        read_only=is_read_only(st.st_mode),
        hidden=is_hidden_name(raw_name),
        is_exec=is_executable(st.st_mode),
    )
