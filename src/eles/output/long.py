"""Detailed, column-aligned listing (``-l``)."""

import os
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from eles.listing.colorize import colorize
from eles.listing.entries import (
    DirectoryEntry,
    FileMetadata,
    group_name,
    owner_name,
    permission_string,
)
from eles.output.base import EntryRenderer

# Half of a 365-day year
SIX_MONTHS_SECONDS = 365 * 24 * 60 * 60 / 2
TIME_WIDTH = 12


@dataclass
class ColumnWidths:
    """Widest rendered value per aligned column."""

    links: int = 0
    owner: int = 0
    group: int = 0
    size: int = 0


@dataclass
class _Row:
    entry: DirectoryEntry
    meta: FileMetadata
    links: str
    owner: str
    group: str
    size: str


def size_field(meta: FileMetadata) -> str:
    """Byte count, or a ``major, minor`` pair for device files."""
    if meta.is_device:
        return f"{os.major(meta.rdev):3d}, {os.minor(meta.rdev):3d}"
    return str(meta.size)


def format_mod_time(mtime: float, now: float) -> str:
    """Format a modification time the way ls does.

    Times within the last six months show the clock time; older or
    future-dated times show the year instead.
    """
    dt = datetime.fromtimestamp(mtime)
    if now - SIX_MONTHS_SECONDS < mtime <= now:
        return f"{dt:%b} {dt.day:>2} {dt:%H:%M}"
    return f"{dt:%b} {dt.day:>2} {dt.year}"


def link_target(entry: DirectoryEntry) -> str | None:
    """Raw target text of a symlink entry, or None if it cannot be read."""
    try:
        return os.readlink(entry.path)
    except OSError:
        return None


class LongRenderer(EntryRenderer):
    """Renders permissions, links, owner, group, size, time and name."""

    def _rows(self, entries: Sequence[DirectoryEntry]) -> list[_Row]:
        rows = []
        for entry in entries:
            try:
                meta = entry.metadata()
            except OSError:
                continue
            rows.append(
                _Row(
                    entry=entry,
                    meta=meta,
                    links=str(meta.nlink),
                    owner=owner_name(meta),
                    group=group_name(meta),
                    size=size_field(meta),
                )
            )
        return rows

    def column_widths(self, entries: Sequence[DirectoryEntry]) -> ColumnWidths:
        """Compute the aligned column widths for a batch."""
        return self._widths(self._rows(entries))

    @staticmethod
    def _widths(rows: Sequence[_Row]) -> ColumnWidths:
        widths = ColumnWidths()
        for row in rows:
            widths.links = max(widths.links, len(row.links))
            widths.owner = max(widths.owner, len(row.owner))
            widths.group = max(widths.group, len(row.group))
            widths.size = max(widths.size, len(row.size))
        return widths

    def format(self, entries: Sequence[DirectoryEntry], show_total: bool = True) -> str:
        rows = self._rows(entries)
        widths = self._widths(rows)
        now = self.now

        lines: list[str] = []
        if show_total:
            total_blocks = sum(row.meta.blocks for row in rows)
            lines.append(f"total {total_blocks // 2}")

        for row in rows:
            name = colorize(row.entry, self.bypass_color, meta=row.meta)
            if row.meta.is_symlink:
                target = link_target(row.entry)
                if target is not None:
                    name = f"{name} -> {target}"
            mod_time = format_mod_time(row.meta.mtime, now)
            lines.append(
                f"{permission_string(row.meta)} "
                f"{row.links:>{widths.links}} "
                f"{row.owner:<{widths.owner}} "
                f"{row.group:<{widths.group}} "
                f"{row.size:>{widths.size}} "
                f"{mod_time:>{TIME_WIDTH}} "
                f"{name}"
            )

        if not lines:
            return ""
        return "\n".join(lines) + "\n"
