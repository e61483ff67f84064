"""
RETRY UTILITY
=============

Calls a function and, if it raises one of the given exceptions, waits a fixed
delay and calls it again, up to max_retries extra times. Used for the chat
completion call so a dropped connection or a timeout doesn't immediately cost
the user their turn.

Example:
  body = with_retry(lambda: transport.post_json(url, payload), max_retries=3, delay=0.5)
"""

import logging
import time
from typing import Callable, Tuple, Type, TypeVar


logger = logging.getLogger("chatbot")

# Type variable: with_retry returns whatever the callable returns.
T = TypeVar("T")


def with_retry(
    fn: Callable[[], T],
    max_retries: int = 3,
    delay: float = 0.5,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Execute fn(). If it raises one of retry_on, sleep `delay` seconds and try again.
    The delay is the same every time. At most max_retries + 1 calls are made;
    when the budget is used up the last exception is re-raised.
    Exceptions not listed in retry_on propagate immediately.
    """
    if max_retries < 0:
        raise ValueError("max_retries must be >= 0")

    remaining = max_retries
    attempt = 0
    while True:
        attempt += 1
        try:
            return fn()
        except retry_on as e:
            if remaining <= 0:
                raise
            remaining -= 1
            logger.warning(
                "Attempt %s/%s failed (%s). Retrying in %.1fs: %s",
                attempt,
                max_retries + 1,
                fn.__name__ if hasattr(fn, "__name__") else "call",
                delay,
                e,
            )
            sleep(delay)
