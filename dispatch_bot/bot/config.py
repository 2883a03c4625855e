"""
Configuration management for the dispatch bot.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from dispatch_bot.utils.validation import ValidationUtils

# Load environment variables from .env file
env_path = Path.cwd() / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Config:
    """Bot configuration settings."""

    # Discord
    DISCORD_TOKEN: str

    # Commands
    PREFIX: str = "!"
    DEVELOPERS: Tuple[str, ...] = ()

    # Debug
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            DISCORD_TOKEN=os.getenv("DISCORD_TOKEN") or os.getenv("TOKEN", ""),
            PREFIX=os.getenv("PREFIX", "!"),
            DEVELOPERS=tuple(ValidationUtils.split_id_list(os.getenv("DEVELOPERS"))),
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
        )

    @property
    def default_prefix_length(self) -> Optional[int]:
        """Prefix length used when a message gives no prefix of its own."""
        return len(self.PREFIX) or None

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")

    def invalid_developers(self) -> Tuple[str, ...]:
        """Developer IDs that do not look like Discord snowflakes."""
        return tuple(ValidationUtils.invalid_snowflakes(self.DEVELOPERS))


# Global config instance
config = Config.from_env()
