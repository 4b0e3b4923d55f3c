"""
Isoboard Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


class Config:
    """Board configuration loaded from environment variables."""

    # Movement range highlighted for a selected unit (rook moves)
    DEFAULT_MOVE_RANGE: int = int(os.getenv("ISOBOARD_MOVE_RANGE", "4"))

    # Print a trace of every search and heat-map regeneration
    DEBUG_SEARCH: bool = _env_flag("ISOBOARD_DEBUG_SEARCH")

    # Disable ANSI colours in console output
    NO_COLOR: bool = _env_flag("ISOBOARD_NO_COLOR")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.DEFAULT_MOVE_RANGE < 0:
            raise ValueError(
                "ISOBOARD_MOVE_RANGE must be zero or positive "
                f"(got {cls.DEFAULT_MOVE_RANGE})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Isoboard Configuration:",
            f"  Default Move Range: {cls.DEFAULT_MOVE_RANGE}",
            f"  Debug Search: {'on' if cls.DEBUG_SEARCH else 'off'}",
            f"  Colours: {'off' if cls.NO_COLOR else 'on'}",
        ]
        return "\n".join(lines)
