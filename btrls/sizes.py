"""
Size formatting and directory size summation.

- convert: format a byte count with 1024-based units and two decimals.
- format_size: raw byte count or convert(), depending on byte mode.
- calculate_folder_size: recursive sum of the regular files below a directory.
- find_length: the displayable size for one listing entry.

No I/O happens in convert/format_size; the summation swallows per-entry
errors so one unreadable subtree never aborts the whole walk.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def convert(num: float) -> str:
    """
    Format a byte count using 1024-based units with two decimals.

    Examples:
        0 -> "0.00 B"
        1024 -> "1.00 KB"
        1048576 -> "1.00 MB"
        -2048 -> "-2.00 KB"

    Values beyond the YB range stay in YB rather than running off the table.
    """
    negative = "-" if num < 0 else ""
    magnitude = abs(num)
    idx = 0
    while idx < len(UNITS) - 1 and magnitude >= 1024 ** (idx + 1):
        idx += 1
    try:
        value = magnitude / 1024**idx
    except OverflowError:
        # Too large for a float even in YB; keep the integer part.
        return f"{negative}{magnitude // 1024**idx}.00 {UNITS[idx]}"
    return f"{negative}{value:.2f} {UNITS[idx]}"


def format_size(num_bytes: int, *, byte_size: bool = False) -> str:
    if byte_size:
        return str(int(num_bytes))
    return convert(num_bytes)


def calculate_folder_size(path: Path) -> int:
    """
    Return the total size in bytes of every regular file below `path`.

    Traversal is depth-first with an explicit stack. Symlinks are skipped
    (not followed, not counted). Directories that cannot be read and entries
    whose stat fails contribute zero.
    """
    total = 0
    stack: List[str] = [os.fspath(path)]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                children = list(it)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", current, e)
            continue

        for child in children:
            try:
                if child.is_symlink():
                    continue
                if child.is_dir(follow_symlinks=False):
                    stack.append(child.path)
                elif child.is_file(follow_symlinks=False):
                    total += child.stat(follow_symlinks=False).st_size
            except OSError as e:
                logger.debug("Skipping %s: %s", child.path, e)
                continue
    return total


def find_length(
    path: Path,
    *,
    directory_size: bool = False,
    byte_size: bool = False,
    stat_result: Optional[os.stat_result] = None,
) -> str:
    """
    Displayable size for a single entry.

    Files always report their own size. Directories report their raw inode
    size unless `directory_size` is set, in which case their contents are
    summed recursively. Returns "" when the entry cannot be stat-ed at all.
    """
    if stat_result is None:
        try:
            stat_result = os.stat(path)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return ""

    if directory_size and stat.S_ISDIR(stat_result.st_mode):
        num_bytes = calculate_folder_size(path)
    else:
        num_bytes = stat_result.st_size
    return format_size(num_bytes, byte_size=byte_size)
