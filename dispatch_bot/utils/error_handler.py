"""
Error Handler
Command failure reporting and circuit breaking
"""

import time
import traceback
from typing import Callable, Dict, Optional

from dispatch_bot.utils.logger import get_logger

# Window over which failures are counted, and how long a tripped breaker lasts
ERROR_WINDOW_SECONDS = 60.0
BREAKER_SECONDS = 60.0


class ErrorHandler:
    """Tracks command failures and blocks commands that keep failing."""

    def __init__(
        self,
        max_errors_per_minute: int = 10,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.logger = get_logger("ErrorHandler")
        self.error_counts: Dict[str, int] = {}
        self.circuit_breakers: Dict[str, float] = {}
        self.max_errors_per_minute = max_errors_per_minute
        self._clock = clock
        self._window_started = clock()

    def handle_exception(self, error: BaseException, context: str = "") -> bool:
        """
        Handle an exception.

        Args:
            error: The exception that occurred
            context: Optional context string (the command name)

        Returns:
            True if error count exceeded threshold (circuit broken)
        """
        self._roll_window()

        if context:
            self.logger.error(f"[{context}] {type(error).__name__}: {error}")
        else:
            self.logger.error(f"{type(error).__name__}: {error}")

        tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        self.logger.debug(f"Traceback:\n{tb}")

        count = self.error_counts.get(context, 0) + 1
        self.error_counts[context] = count

        if count >= self.max_errors_per_minute:
            self.logger.warning(f"Circuit breaker triggered for: {context}")
            self.circuit_breakers[context] = self._clock() + BREAKER_SECONDS
            return True

        return False

    def is_circuit_broken(self, context: str) -> bool:
        """Check if a context is circuit broken."""
        break_until = self.circuit_breakers.get(context)
        if break_until is None:
            return False

        if self._clock() > break_until:
            # Circuit breaker expired
            del self.circuit_breakers[context]
            self.error_counts.pop(context, None)
            return False

        return True

    def _roll_window(self) -> None:
        """Reset error counts once the counting window has passed."""
        now = self._clock()
        if now - self._window_started >= ERROR_WINDOW_SECONDS:
            if self.error_counts:
                self.logger.debug("Error counts cleaned up")
            self.error_counts.clear()
            self._window_started = now

    def reset(self) -> None:
        self.error_counts.clear()
        self.circuit_breakers.clear()
        self._window_started = self._clock()


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler
