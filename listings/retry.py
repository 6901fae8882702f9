"""Exponential backoff retry for flaky operations."""
import logging
import time
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def retry(
    operation: Callable[[], T],
    max_attempts: int = 3,
    sleep: Optional[Callable[[float], None]] = None
) -> T:
    """
    Call an operation, retrying with exponential backoff on failure.

    After failed attempt N the wait is 2 ** N seconds, so 2s then 4s with
    the default of three attempts.

    Args:
        operation: Zero-argument callable to run
        max_attempts: Total number of attempts (default: 3)
        sleep: Function used to wait between attempts (default: time.sleep)

    Returns:
        Whatever the operation returns

    Raises:
        Exception: The last failure once all attempts are used
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 0
    while True:
        try:
            return operation()
        except Exception as e:
            attempt += 1
            if attempt >= max_attempts:
                logger.error(
                    f"All {max_attempts} attempts failed. Last error: {e}"
                )
                raise

            delay = 2 ** attempt
            logger.warning(
                f"Attempt {attempt}/{max_attempts} failed: {e}. "
                f"Retrying in {delay} seconds..."
            )
            (sleep or time.sleep)(delay)
