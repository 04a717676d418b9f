"""Hidden-entry filtering and the ``.``/``..`` pseudo-entries."""

import logging
import os
from collections.abc import Iterable

from eles.listing.entries import DirectoryEntry, FileMetadata, make_synthetic_entry


def parent_directory(path: str) -> str:
    """Return the parent of ``path``.

    The current-directory marker resolves against the real working
    directory, so ``.`` at ``/home/user`` has the parent ``/home``.
    """
    if path == ".":
        return os.path.dirname(os.getcwd())
    return os.path.dirname(os.path.abspath(path))


def pseudo_entry(
    path: str, name: str, logger: logging.Logger | None = None
) -> DirectoryEntry | None:
    """Build a pseudo-entry named ``name`` for ``path``, or None if stat fails."""
    try:
        meta = FileMetadata.from_stat(os.stat(path))
    except OSError as e:
        if logger is not None:
            logger.debug(
                "omitting %r: cannot stat %s: %s", name, path, e, extra={"path": path}
            )
        return None
    return make_synthetic_entry(meta, name, path)


def filter_entries(
    entries: Iterable[DirectoryEntry],
    show_hidden: bool,
    directory: str,
    logger: logging.Logger | None = None,
) -> list[DirectoryEntry]:
    """Apply the hidden-entry policy to a directory's raw entries.

    Args:
        entries: Raw entries of ``directory``.
        show_hidden: Keep dotfiles and prepend ``.`` and ``..``.
        directory: The directory the entries were read from.
        logger: Optional logger for omitted pseudo-entries.

    Returns:
        The entries to list, ``.`` and ``..`` first when shown.
    """
    if show_hidden:
        pseudo = [
            pseudo_entry(directory, ".", logger),
            pseudo_entry(parent_directory(directory), "..", logger),
        ]
        return [entry for entry in pseudo if entry is not None] + list(entries)

    return [entry for entry in entries if not entry.name.startswith(".")]
