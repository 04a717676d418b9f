"""Single-line name listing."""

from collections.abc import Sequence

from eles.listing.colorize import colorize
from eles.listing.entries import DirectoryEntry
from eles.output.base import EntryRenderer

SEPARATOR = "  "


class CompactRenderer(EntryRenderer):
    """Joins colorized names with two spaces on one line."""

    def format(self, entries: Sequence[DirectoryEntry], show_total: bool = True) -> str:
        if not entries:
            return ""
        names = [colorize(entry, self.bypass_color) for entry in entries]
        return SEPARATOR.join(names) + "\n"
