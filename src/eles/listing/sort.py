"""Entry ordering: by name or by modification time, optionally reversed."""

from collections.abc import Iterable

from eles.listing.entries import DirectoryEntry

# Buckets: ".", "..", dot-prefixed names, everything else
_DOT, _DOTDOT, _HIDDEN, _REGULAR = range(4)


def name_key(name: str) -> tuple[int, str, str]:
    """Sort key for the base name ordering.

    Names are compared case-insensitively within their bucket; hidden
    names are compared without their leading dot. The raw name is the
    final tie-break so that distinct names never compare equal.
    """
    if name == ".":
        return (_DOT, "", name)
    if name == "..":
        return (_DOTDOT, "", name)
    if name.startswith("."):
        return (_HIDDEN, name[1:].lower(), name)
    return (_REGULAR, name.lower(), name)


def _mtime_ns(entry: DirectoryEntry) -> int:
    try:
        return entry.metadata().mtime_ns
    except OSError:
        return 0


def sort_entries(
    entries: Iterable[DirectoryEntry],
    time_sort: bool = False,
    reverse: bool = False,
) -> list[DirectoryEntry]:
    """Order entries for display.

    Args:
        entries: Entries to order.
        time_sort: Newest first, ties broken by the name ordering.
        reverse: Invert the final order.

    Returns:
        A new, ordered list.
    """
    if time_sort:
        ordered = sorted(entries, key=lambda e: (-_mtime_ns(e), name_key(e.name)))
    else:
        ordered = sorted(entries, key=lambda e: name_key(e.name))

    if reverse:
        ordered.reverse()

    return ordered
