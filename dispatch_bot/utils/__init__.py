"""
Utility modules for the dispatch bot.
"""

from .logger import get_logger, setup_logging, set_default_level
from .discord import DiscordUtils
from .validation import ValidationUtils, ValidationResult
from .error_handler import ErrorHandler, get_error_handler

__all__ = [
    "get_logger",
    "setup_logging",
    "set_default_level",
    "DiscordUtils",
    "ValidationUtils",
    "ValidationResult",
    "ErrorHandler",
    "get_error_handler",
]
