"""
Validation Utilities
Helper functions for validating Discord IDs and definitions
"""

import re
from typing import Any, Iterable, List, Optional, Union

# Discord snowflake ID pattern: 17-20 digits
SNOWFLAKE_REGEX = re.compile(r"^[0-9]{17,20}$")


class ValidationResult:
    """Result of a validation operation."""

    def __init__(
        self,
        valid: bool,
        error: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        self.valid = valid
        self.error = error
        self.value = value

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        if self.valid:
            return "ValidationResult(valid=True)"
        return f"ValidationResult(valid=False, error={self.error!r})"


class ValidationUtils:
    """Utility class for input validation."""

    @staticmethod
    def is_valid_snowflake(id_value: Union[str, int]) -> bool:
        """
        Check if value is a valid Discord snowflake ID.

        Args:
            id_value: ID to validate

        Returns:
            True if valid snowflake
        """
        if isinstance(id_value, bool) or not isinstance(id_value, (str, int)):
            return False
        return bool(SNOWFLAKE_REGEX.match(str(id_value)))

    @staticmethod
    def is_sequence(value: Any) -> bool:
        """Check if value is a list or tuple (strings do not count)."""
        return isinstance(value, (list, tuple))

    @staticmethod
    def split_id_list(raw: Optional[str]) -> List[str]:
        """
        Split a comma-separated ID list, dropping empty entries.

        Args:
            raw: Raw value such as "123,456"

        Returns:
            List of stripped IDs
        """
        if not raw:
            return []
        return [part.strip() for part in raw.split(",") if part.strip()]

    @staticmethod
    def invalid_snowflakes(ids: Iterable[Union[str, int]]) -> List[str]:
        """Return the entries of ids that are not valid snowflakes."""
        return [str(i) for i in ids if not ValidationUtils.is_valid_snowflake(i)]
