"""Renderer base class shared by the compact and long formats."""

import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO

from eles.listing.entries import DirectoryEntry


class EntryRenderer(ABC):
    """Abstract base class for entry renderers.

    Renderers turn an already filtered and sorted batch of entries into
    text. They never touch the filesystem beyond re-reading metadata and
    link targets of the entries they are given.
    """

    def __init__(self, bypass_color: bool = False, now: float | None = None) -> None:
        """Initialize the renderer.

        Args:
            bypass_color: Emit plain names without ANSI codes.
            now: Reference time in epoch seconds (defaults to the clock).
        """
        self._bypass_color = bypass_color
        self._now = now

    @property
    def bypass_color(self) -> bool:
        """Whether color codes are suppressed."""
        return self._bypass_color

    @property
    def now(self) -> float:
        """Reference time for recent/old timestamp formatting."""
        return self._now if self._now is not None else time.time()

    @abstractmethod
    def format(self, entries: Sequence[DirectoryEntry], show_total: bool = True) -> str:
        """Format a batch of entries.

        Args:
            entries: The batch, in display order.
            show_total: Emit the block-count header where the format has one.

        Returns:
            The rendered text, empty or newline-terminated.
        """

    def write(
        self,
        entries: Sequence[DirectoryEntry],
        stream: TextIO,
        show_total: bool = True,
    ) -> None:
        """Format a batch and write it to ``stream``."""
        text = self.format(entries, show_total=show_total)
        if text:
            stream.write(text)
