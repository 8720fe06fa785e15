from __future__ import annotations

import logging
import os
import stat
import sys
from pathlib import Path
from typing import Optional, TextIO

from .entries import decode_name, is_executable, is_hidden_name

logger = logging.getLogger(__name__)

BRANCH = "├──> "
CONTINUATION = "│    "


def recursive_listing(
    path: Path,
    depth: int,
    count: int = 0,
    head: str = "",
    show_hidden: bool = False,
    *,
    out: Optional[TextIO] = None,
) -> None:
    """
    Print the structure below `path` one line per entry, as it is walked.

    `count` is the current descent level and `depth` the last level that is
    still expanded, so depth=0 prints only the immediate children of `path`.
    Executable files are marked with a leading '*'. Directories that cannot
    be read end their branch without an error.
    """
    out = out if out is not None else sys.stdout
    try:
        with os.scandir(path) as it:
            children = list(it)
    except OSError as e:
        logger.debug("Cannot read directory %s: %s", path, e)
        return

    for child in children:
        if not show_hidden and is_hidden_name(child.name):
            continue
        try:
            st = os.stat(child.path)
        except OSError as e:
            logger.debug("Skipping %s: %s", child.path, e)
            continue

        marker = "*" if is_executable(st.st_mode) else ""
        print(f"{head}{BRANCH}{marker}{decode_name(child.name)}", file=out)
        if stat.S_ISDIR(st.st_mode) and count < depth:
            recursive_listing(
                Path(child.path),
                depth,
                count + 1,
                head + CONTINUATION,
                show_hidden,
                out=out,
            )
