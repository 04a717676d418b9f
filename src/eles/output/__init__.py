"""Listing renderers and output sinks.

Usage:
    from eles.output import get_renderer

    renderer = get_renderer(long_format=True, bypass_color=True)
    renderer.write(entries, sys.stdout)
"""

from eles.output.base import EntryRenderer
from eles.output.compact import CompactRenderer
from eles.output.long import ColumnWidths, LongRenderer, format_mod_time
from eles.output.sink import TeeWriter, open_output

__all__ = [
    # Base classes
    "EntryRenderer",
    # Renderers
    "CompactRenderer",
    "LongRenderer",
    "ColumnWidths",
    "format_mod_time",
    # Sinks
    "TeeWriter",
    "open_output",
    "get_renderer",
]


def get_renderer(
    long_format: bool,
    bypass_color: bool = False,
    now: float | None = None,
) -> EntryRenderer:
    """Get a renderer for the requested format.

    Args:
        long_format: Use the detailed ``-l`` format.
        bypass_color: Emit plain names.
        now: Reference time for timestamp formatting.

    Returns:
        An EntryRenderer instance.
    """
    if long_format:
        return LongRenderer(bypass_color=bypass_color, now=now)
    return CompactRenderer(bypass_color=bypass_color, now=now)
