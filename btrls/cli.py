#!/usr/bin/env python
"""
Main CLI entry point for btrls, a tabled ls command.

Lists a directory as a colored table, exports it as JSON, prints a
recursive tree, or shows the metadata row of a single file.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console

from . import __version__
from .colors import platform_config_default, reading_config
from .listing import ListingError, filter_entries, get_data, get_files, getting_file_info, visibility_mode
from .render import print_table, to_json
from .tree import recursive_listing

logger = logging.getLogger(__name__)


def _make_console() -> Console:
    if sys.stdout.isatty():
        return Console(highlight=False)
    # Captured or redirected output: keep every column on one line.
    return Console(width=200, highlight=False, soft_wrap=False)


def _epilog() -> str:
    return (
        "Examples:\n"
        "  btrls -a ~/projects\n"
        "  btrls -j . > listing.json\n"
        "  btrls -r -d 2 src\n"
        "  btrls -f -s -b build\n"
        "\n"
        f"Default config path: {platform_config_default()}\n"
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="btrls",
        description="A tabled ls command. Also exports the contents of a directory as JSON.",
        epilog=_epilog(),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("path", nargs="?", default=".", help="Directory (or file with -f) to inspect. Defaults to '.'")
    p.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--json", "-j", action="store_true", help="Presents the directory in JSON format")
    p.add_argument("--all", "-a", action="store_true", help="Displays all the files and directories (including hidden ones)")
    p.add_argument("--only-hidden", "-o", dest="hidden_only", action="store_true",
                   help="Displays the hidden files and directories only")
    p.add_argument("--recursive", "-r", action="store_true", help="Displays the sub-directories and files recursively")
    p.add_argument("--recursive-hidden", "-q", action="store_true",
                   help="Displays all sub-directories and files (including hidden ones) recursively")
    p.add_argument("--depth", "-d", type=int, default=1, help="Recursion depth for -r/-q (default: 1)")
    p.add_argument("--file-info", "-f", action="store_true", help="Provides information about a single file or directory")
    p.add_argument("--directory-size", "-s", action="store_true",
                   help="Sum the contents of directories recursively for the Size column")
    p.add_argument("--byte-size", "-b", action="store_true", help="Shows sizes as raw byte counts")
    p.add_argument("--config", "-c", help="Path to config TOML (overrides BTRLS_CONFIG/env & defaults)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging on stderr")
    return p


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_json(args: argparse.Namespace, path: Path) -> int:
    entries = get_files(path, directory_size=args.directory_size, byte_size=args.byte_size)
    entries = filter_entries(entries, visibility_mode(args.all, args.hidden_only))
    print(to_json(entries))
    return 0


def cmd_recursive(args: argparse.Namespace, path: Path) -> int:
    print(path)
    recursive_listing(path, args.depth, 0, "", args.recursive_hidden)
    return 0


def cmd_file_info(args: argparse.Namespace, path: Path, console: Console) -> int:
    entries = getting_file_info(path, directory_size=args.directory_size, byte_size=args.byte_size)
    print_table(entries, reading_config(args.config), console)
    return 0


def cmd_list(args: argparse.Namespace, path: Path, console: Console) -> int:
    entries = get_data(
        path,
        show_all=args.all,
        hidden_only=args.hidden_only,
        directory_size=args.directory_size,
        byte_size=args.byte_size,
    )
    print_table(entries, reading_config(args.config), console)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    console = _make_console()
    path = Path(args.path)
    try:
        exists = path.exists()
    except OSError as e:
        logger.debug("Cannot check %s: %s", path, e)
        console.print("[red]Error Reading the Directory[/red]")
        return 0
    if not exists:
        console.print("[red]Path does not exist[/red]")
        return 0

    try:
        if args.json:
            return cmd_json(args, path)
        if args.recursive or args.recursive_hidden:
            return cmd_recursive(args, path)
        if args.file_info:
            return cmd_file_info(args, path, console)
        return cmd_list(args, path, console)
    except ListingError as e:
        console.print(str(e), markup=False)
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
