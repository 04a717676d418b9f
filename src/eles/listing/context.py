"""Context object handed to the traversal driver."""

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from eles.listing.options import ListingOptions
from eles.utils.logging import LOGGER_NAME


@dataclass
class ListingContext:
    """Everything a listing run needs, passed in rather than looked up.

    Attributes:
        options: Parsed command-line options.
        stream: Sink for listings (stdout, or a tee into the capture file).
        error_stream: Sink for per-path diagnostics.
        logger: Configured logger for debug records.
        bypass_color: Emit plain names without ANSI codes.
        now: Reference time in epoch seconds; None reads the clock.
    """

    options: ListingOptions
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    error_stream: TextIO = field(default_factory=lambda: sys.stderr)
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(LOGGER_NAME)
    )
    bypass_color: bool = False
    now: float | None = None
