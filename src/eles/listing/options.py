"""Immutable listing options built once from the command line."""

from dataclasses import dataclass

CURRENT_DIRECTORY = "."


@dataclass(frozen=True)
class ListingOptions:
    """What to list and how.

    Attributes:
        long_format: Detailed listing (``-l``).
        recursive: Descend into subdirectories (``-R``).
        show_hidden: Include dotfiles plus ``.`` and ``..`` (``-a``).
        time_sort: Newest first (``-t``).
        reverse: Reverse the final order (``-r``).
        capture: Duplicate output into the capture file (``-c``).
        paths: Paths to list, in command-line order.
    """

    long_format: bool = False
    recursive: bool = False
    show_hidden: bool = False
    time_sort: bool = False
    reverse: bool = False
    capture: bool = False
    paths: tuple[str, ...] = (CURRENT_DIRECTORY,)

    def __post_init__(self) -> None:
        if not self.paths:
            object.__setattr__(self, "paths", (CURRENT_DIRECTORY,))
        elif not isinstance(self.paths, tuple):
            object.__setattr__(self, "paths", tuple(self.paths))

    def to_flags(self) -> str:
        """Active options as a combined short-flag string, e.g. ``-laR``."""
        letters = [
            letter
            for letter, enabled in (
                ("l", self.long_format),
                ("R", self.recursive),
                ("a", self.show_hidden),
                ("t", self.time_sort),
                ("r", self.reverse),
                ("c", self.capture),
            )
            if enabled
        ]
        return "-" + "".join(letters) if letters else ""
