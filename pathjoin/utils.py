"""
Shared configuration helpers.
"""

import os
from dotenv import load_dotenv

from pathjoin.schemas import PathStyle

# Load environment variables
load_dotenv()

STYLE_ENV = "PATHJOIN_STYLE"
LOG_LEVEL_ENV = "PATHJOIN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_env(key: str, default: str = None) -> str:
    """Get environment variable with optional default."""
    value = os.getenv(key, default)
    if value is None:
        raise ValueError(f"Environment variable {key} not set")
    return value


def host_style() -> PathStyle:
    """Path style matching the separator of the running interpreter."""
    return PathStyle.WINDOWS if os.sep == "\\" else PathStyle.POSIX


def default_style() -> PathStyle:
    """
    Resolve the path style from PATHJOIN_STYLE, falling back to the host.

    Raises:
        ValueError: If PATHJOIN_STYLE holds an unknown style name
    """
    name = get_env(STYLE_ENV, host_style().value).strip().lower()
    try:
        return PathStyle(name)
    except ValueError:
        choices = ", ".join(s.value for s in PathStyle)
        raise ValueError(f"{STYLE_ENV} must be one of: {choices} (got {name!r})") from None


def log_level() -> str:
    """Log level name from PATHJOIN_LOG_LEVEL."""
    return get_env(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
