"""btrls: a tabled ls command with JSON export and a recursive tree view."""

__version__ = "0.3.0"

from .entries import Entry, EntryKind, SPECIAL_FILES, read_entry
from .listing import (
    ListingError,
    NoEntriesError,
    PathNotFoundError,
    VisibilityMode,
    filter_entries,
    get_data,
    get_files,
    getting_file_info,
)
from .sizes import calculate_folder_size, convert, find_length
from .tree import recursive_listing
from .colors import ColorConfig, RGB, DEFAULT_PALETTE, reading_config

__all__ = [
    "__version__",
    "Entry",
    "EntryKind",
    "SPECIAL_FILES",
    "read_entry",
    "ListingError",
    "NoEntriesError",
    "PathNotFoundError",
    "VisibilityMode",
    "filter_entries",
    "get_data",
    "get_files",
    "getting_file_info",
    "convert",
    "calculate_folder_size",
    "find_length",
    "recursive_listing",
    "ColorConfig",
    "RGB",
    "DEFAULT_PALETTE",
    "reading_config",
]
