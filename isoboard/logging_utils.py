"""Logging utilities for board queries.

Provides color-coded console output so search traces stand apart from errors.
"""

import os
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Searches (pathfind, flood, heat map)
    YELLOW = "\033[93m"    # Index mutations (evictions)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colors_enabled() -> bool:
    """Colours are on unless disabled in config or via ISOBOARD_NO_COLOR."""
    if Config.NO_COLOR:
        return False
    return os.getenv("ISOBOARD_NO_COLOR", "").lower() not in ("1", "true", "yes")


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text, or plain text when colours are disabled
    """
    if not colors_enabled():
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """Log a search or heat-map operation (blue)."""
    print(colored(f"{LOG_TAG_DETERMINISTIC} {message}", Color.BLUE))


def log_mutation(message: str) -> None:
    """Log an index mutation such as an eviction (yellow)."""
    print(colored(f"{LOG_TAG_MUTATION} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


def debug_search_enabled() -> bool:
    """Search tracing is on when ISOBOARD_DEBUG_SEARCH is truthy."""
    if Config.DEBUG_SEARCH:
        return True
    return os.getenv("ISOBOARD_DEBUG_SEARCH", "").lower() in ("1", "true", "yes")


# Markers for operation types (color-blind accessible)
LOG_TAG_DETERMINISTIC = "[•]"  # Search / heat map
LOG_TAG_MUTATION = "[~]"       # Index mutation
LOG_TAG_ERROR = "[!]"          # Error
LOG_TAG_SUCCESS = "[✓]"        # Success
LOG_TAG_INFO = "[i]"           # Information
