from __future__ import annotations

import dataclasses as dc
import logging
import os
import pathlib
import string
import typing as t

try:
    import tomllib  # py311+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]


logger = logging.getLogger(__name__)

PathLikeStr = str | os.PathLike[str]
ConfigDict = dict[str, t.Any]

CONFIG_ENV = "BTRLS_CONFIG"

# Used when a key is missing from an otherwise readable config file.
DEFAULT_HEX = "#0a0a0a"


@dc.dataclass(frozen=True)
class RGB:
    red: int
    green: int
    blue: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


# Used for a single key whose value is not a valid hex color.
FALLBACK_RGB = RGB(10, 10, 10)


@dc.dataclass(frozen=True)
class ColorConfig:
    title_row: RGB
    leading_col: RGB
    trailing_col: RGB
    executable: RGB
    directory: RGB
    hidden: RGB


COLOR_FIELDS = tuple(f.name for f in dc.fields(ColorConfig))

# Used when the config file is missing, unreadable or not valid TOML.
DEFAULT_PALETTE = ColorConfig(
    title_row=RGB(255, 0, 255),
    leading_col=RGB(0, 255, 255),
    trailing_col=RGB(255, 255, 0),
    executable=RGB(10, 255, 10),
    directory=RGB(10, 10, 255),
    hidden=RGB(128, 128, 128),
)


def platform_config_default() -> pathlib.Path:
    """
    Determine the default config path by OS:
      - Windows: %APPDATA%/btrls/btrls.toml
      - Others:  ~/.config/btrls.toml
    """
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return pathlib.Path(appdata) / "btrls" / "btrls.toml"
    return pathlib.Path.home() / ".config" / "btrls.toml"


def resolve_config_path(path: PathLikeStr | None) -> pathlib.Path:
    """
    Resolve the config file path using the standard precedence order
    (explicit path -> BTRLS_CONFIG env -> platform default).
    """
    if path:
        return pathlib.Path(path).expanduser()
    env = os.environ.get(CONFIG_ENV)
    if env:
        return pathlib.Path(env).expanduser()
    return platform_config_default()


def str_to_hex_converter(hex_str: str) -> RGB:
    """
    Parse '#rrggbb' (or 'rrggbb') into an RGB triple.

    Raises ValueError on anything else.
    """
    digits = hex_str.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) != 6 or any(c not in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {hex_str!r}")
    return RGB(
        red=int(digits[0:2], 16),
        green=int(digits[2:4], 16),
        blue=int(digits[4:6], 16),
    )


def str_to_hex(value: t.Any) -> RGB:
    """Parse one color value, falling back to FALLBACK_RGB for that value only."""
    try:
        return str_to_hex_converter(value)
    except (AttributeError, TypeError, ValueError):
        logger.warning("Invalid color value %r; using %s", value, FALLBACK_RGB.as_tuple())
        return FALLBACK_RGB


def reading_config_file(path: PathLikeStr | None = None) -> ConfigDict:
    """
    Read the TOML config. Raises FileNotFoundError, OSError or
    tomllib.TOMLDecodeError; callers decide how to fall back.
    """
    candidate = resolve_config_path(path)
    if not candidate.is_file():
        raise FileNotFoundError(f"Config file not found: {candidate}")
    with candidate.open("rb") as f:
        return tomllib.load(f)


def to_color_config(data: ConfigDict) -> ColorConfig:
    return ColorConfig(**{name: str_to_hex(data.get(name, DEFAULT_HEX)) for name in COLOR_FIELDS})


def reading_config(path: PathLikeStr | None = None) -> ColorConfig:
    """
    Build the ColorConfig for this run. Never raises.

    A missing or broken file gives DEFAULT_PALETTE; a readable file is parsed
    key by key so one bad value does not discard the others.
    """
    try:
        data = reading_config_file(path)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        logger.debug("Failed to load configuration (%s); using default palette", e)
        return DEFAULT_PALETTE
    logger.debug("Configuration loaded from %s", resolve_config_path(path))
    return to_color_config(data)
