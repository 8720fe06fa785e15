from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Iterable, List

from .entries import SPECIAL_FILES, Entry, read_entry

logger = logging.getLogger(__name__)


class ListingError(RuntimeError):
    pass


class NoEntriesError(ListingError):
    pass


class PathNotFoundError(ListingError):
    pass


class VisibilityMode(Enum):
    SHOW_ALL = "all"
    HIDDEN_ONLY = "hidden-only"
    DEFAULT = "default"


def visibility_mode(show_all: bool = False, hidden_only: bool = False) -> VisibilityMode:
    if hidden_only:
        return VisibilityMode.HIDDEN_ONLY
    if show_all:
        return VisibilityMode.SHOW_ALL
    return VisibilityMode.DEFAULT


def get_files(path: Path, *, directory_size: bool = False, byte_size: bool = False) -> List[Entry]:
    """
    List the immediate children of `path`, directories first.

    Both groups keep the order the OS enumerated them in. Children whose
    metadata cannot be read are left out. A path that cannot be opened as a
    directory yields an empty list.
    """
    dirs: List[Entry] = []
    files: List[Entry] = []
    try:
        with os.scandir(path) as it:
            children = [Path(child.path) for child in it]
    except OSError as e:
        logger.debug("Cannot read directory %s: %s", path, e)
        return []

    for child in children:
        entry = read_entry(child, directory_size=directory_size, byte_size=byte_size)
        if entry is None:
            continue
        (dirs if entry.is_dir else files).append(entry)
    return dirs + files


def filter_entries(entries: Iterable[Entry], mode: VisibilityMode) -> List[Entry]:
    if mode is VisibilityMode.SHOW_ALL:
        return list(entries)
    if mode is VisibilityMode.HIDDEN_ONLY:
        return [e for e in entries if e.hidden]
    return [e for e in entries if not e.hidden or e.name in SPECIAL_FILES]


def get_data(
    path: Path,
    *,
    show_all: bool = False,
    hidden_only: bool = False,
    directory_size: bool = False,
    byte_size: bool = False,
) -> List[Entry]:
    """Assemble and filter a listing; an empty result raises NoEntriesError."""
    entries = get_files(path, directory_size=directory_size, byte_size=byte_size)
    entries = filter_entries(entries, visibility_mode(show_all, hidden_only))
    if not entries:
        raise NoEntriesError("No Files or Directories found!")
    return entries


def getting_file_info(path: Path, *, directory_size: bool = False, byte_size: bool = False) -> List[Entry]:
    """Single-row listing describing `path` itself."""
    entry = read_entry(Path(path), directory_size=directory_size, byte_size=byte_size)
    if entry is None:
        raise PathNotFoundError("No such file found")
    return [entry]
