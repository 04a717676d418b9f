"""Context factory for creating a ListingContext from CLI options."""

import logging
from typing import TextIO

from eles.config import get_config
from eles.config.schema import ElesConfig
from eles.listing.context import ListingContext
from eles.listing.options import ListingOptions
from eles.utils.logging import setup_logging


def should_bypass_color(options: ListingOptions, config: ElesConfig) -> bool:
    """Plain names when capturing or when color is switched off in config."""
    return options.capture or not config.output.color


def create_logger(config: ElesConfig, use_color: bool = True) -> logging.Logger:
    """Configure the logger described by ``config.logging``."""
    return setup_logging(
        level=config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
        use_color=use_color,
    )


def create_context(
    options: ListingOptions,
    *,
    stream: TextIO,
    error_stream: TextIO,
    logger: logging.Logger,
    config: ElesConfig | None = None,
) -> ListingContext:
    """Create a ListingContext from parsed options.

    Args:
        options: Parsed command-line options.
        stream: Listing sink (stdout or the capture tee).
        error_stream: Diagnostic sink.
        logger: Configured logger.
        config: Configuration to use. If None, uses global config.

    Returns:
        Fully configured ListingContext.
    """
    if config is None:
        config = get_config()

    return ListingContext(
        options=options,
        stream=stream,
        error_stream=error_stream,
        logger=logger,
        bypass_color=should_bypass_color(options, config),
    )
