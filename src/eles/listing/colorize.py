"""ANSI coloring of entry names by file type."""

import os
from typing import Final

from eles.listing.entries import DirectoryEntry, FileMetadata

RESET: Final[str] = "\033[0m"

BLUE: Final[str] = "\033[34m"
MAGENTA: Final[str] = "\033[35m"
CYAN: Final[str] = "\033[36m"
BLACK_ON_GREEN: Final[str] = "\033[30;42m"
YELLOW: Final[str] = "\033[33m"
GREEN: Final[str] = "\033[32m"
BRIGHT_MAGENTA: Final[str] = "\033[95m"

IMAGE_EXTENSIONS = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".tiff",
        ".webp",
    }
)

# Symlinks and directories with a dedicated color
SYMLINK_COLORS: Final[dict[str, str]] = {"fd": BLUE, "log": MAGENTA}
HIGHLIGHTED_DIRS = frozenset({"mqueue", "shm"})


def is_image_file(name: str) -> bool:
    """Check if the name carries an image file extension."""
    return os.path.splitext(name)[1].lower() in IMAGE_EXTENSIONS


def name_color(name: str, meta: FileMetadata) -> str | None:
    """Pick the color code for an entry, or None for a plain name."""
    if meta.is_symlink:
        return SYMLINK_COLORS.get(name, CYAN)
    if meta.is_dir:
        return BLACK_ON_GREEN if name in HIGHLIGHTED_DIRS else BLUE
    if meta.is_device or meta.is_fifo:
        return YELLOW
    if meta.is_socket:
        return MAGENTA
    if meta.is_executable:
        return GREEN
    if meta.is_regular and is_image_file(name):
        return BRIGHT_MAGENTA
    return None


def colorize(
    entry: DirectoryEntry,
    bypass_color: bool = False,
    meta: FileMetadata | None = None,
) -> str:
    """Return the entry's display name, wrapped in color codes when enabled.

    Args:
        entry: Entry to display.
        bypass_color: Return the plain name (captured output).
        meta: Already-fetched metadata, to avoid a second stat.

    Returns:
        The name, colored and always reset when a color applies.
    """
    if bypass_color:
        return entry.name

    if meta is None:
        try:
            meta = entry.metadata()
        except OSError:
            return entry.name

    color = name_color(entry.name, meta)
    if color is None:
        return entry.name
    return f"{color}{entry.name}{RESET}"
