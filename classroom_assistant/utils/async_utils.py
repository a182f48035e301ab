"""Async utility functions."""

import asyncio
import random
from typing import Awaitable, Callable, Tuple, Type, TypeVar

from ..config.logging import get_module_logger

T = TypeVar('T')

logger = get_module_logger("utils.retry")


async def retry_with_backoff(
    func: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay: float = 0.5,
    backoff_factor: float = 2.0,
    max_delay: float = 30.0,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
) -> T:
    """Retry a coroutine factory with exponential backoff and jitter.

    The delay before retry ``n`` is ``base_delay * backoff_factor**(n-1)``
    plus up to half of that again as jitter, capped at ``max_delay``. The
    last failure is re-raised.
    """
    delay = base_delay

    for attempt in range(max_retries + 1):
        try:
            return await func()
        except retry_on as e:
            if attempt == max_retries:
                raise

            wait = min(delay + random.uniform(0, delay / 2), max_delay)
            logger.debug("Retrying after failure", attempt=attempt + 1, wait_seconds=round(wait, 3), error=str(e))
            await asyncio.sleep(wait)
            delay *= backoff_factor
