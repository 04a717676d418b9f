"""Configuration management."""

from eles.config.loader import get_config, load_config, reset_config
from eles.config.schema import ElesConfig

__all__ = ["ElesConfig", "get_config", "load_config", "reset_config"]
