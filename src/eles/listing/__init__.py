"""Directory listing core: entries, filtering, ordering and coloring.

The traversal driver lives in ``eles.listing.traversal`` and is imported
from there, since it depends on the renderers in ``eles.output``.
"""

from eles.listing.colorize import colorize
from eles.listing.entries import (
    DirectoryEntry,
    FileMetadata,
    group_name,
    make_synthetic_entry,
    owner_name,
    permission_string,
    read_directory,
)
from eles.listing.filter import filter_entries
from eles.listing.options import ListingOptions
from eles.listing.sort import sort_entries

__all__ = [
    "DirectoryEntry",
    "FileMetadata",
    "ListingOptions",
    "colorize",
    "filter_entries",
    "group_name",
    "make_synthetic_entry",
    "owner_name",
    "permission_string",
    "read_directory",
    "sort_entries",
]
