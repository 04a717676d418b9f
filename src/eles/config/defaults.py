"""Default configuration values and paths."""

import os
from pathlib import Path
from typing import Final

# Default directories
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "eles"

# Default file paths
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_CAPTURE_FILE: Final[Path] = Path("output.txt")

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "ELES_CONFIG"
ENV_LOG_LEVEL: Final[str] = "ELES_LOG_LEVEL"
ENV_CAPTURE_FILE: Final[str] = "ELES_CAPTURE_FILE"
ENV_NO_COLOR: Final[str] = "NO_COLOR"


def get_config_path() -> Path:
    """Get the configuration file path."""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
