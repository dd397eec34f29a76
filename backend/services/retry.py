"""
Bounded retry with a fixed delay between attempts.
"""

import logging
import time
from typing import Callable, Optional, Tuple, Type, TypeVar

from domain.constants import MAX_RETRIES, RETRY_DELAY_SECONDS

logger = logging.getLogger(__name__)

T = TypeVar("T")


def call_with_retries(
    func: Callable[[], T],
    retry_on: Tuple[Type[BaseException], ...],
    max_retries: int = MAX_RETRIES,
    delay: float = RETRY_DELAY_SECONDS,
    sleep: Optional[Callable[[float], None]] = None,
    description: str = "operation",
) -> T:
    """
    Call func until it succeeds or max_retries extra attempts are used up.

    Only exceptions listed in retry_on are retried; anything else propagates
    at once. After the last failed attempt the last exception is re-raised.

    Args:
        func: Zero-argument callable to run
        retry_on: Exception types that count as transient
        max_retries: Attempts allowed after the first one
        delay: Seconds to wait between attempts
        sleep: Sleep function (defaults to time.sleep)
        description: Label used in log messages

    Returns:
        Whatever func returns on its first successful attempt
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            return func()
        except retry_on as e:
            if attempt > max_retries:
                logger.error(f"{description} failed after {attempt} attempts: {e}")
                raise
            logger.warning(
                f"{description} failed (attempt {attempt}/{max_retries + 1}): {e}; "
                f"retrying in {delay}s"
            )
            (sleep or time.sleep)(delay)
