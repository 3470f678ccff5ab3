"""
utilkit Retry
=============

Repeat an operation until it succeeds or the retry budget runs out.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar, Union

from utilkit.function.base import invoke
from utilkit.function.clock import DEFAULT_CLOCK, Clock
from utilkit.function.errors import RetryExhausted
from utilkit.function.policies import RetryOptions
from utilkit.utils.logger import Logger, null_logger


T = TypeVar("T")


async def with_retry(
    operation: Callable[[], Union[Awaitable[T], T]],
    options: Optional[RetryOptions] = None,
    *,
    clock: Optional[Clock] = None,
    logger: Optional[Logger] = None,
) -> T:
    """
    Execute an operation with retry logic.

    The operation runs at most ``max_retries + 1`` times. Between
    failed attempts the call suspends for the constant ``delay``;
    a zero delay never suspends.

    Args:
        operation: Zero-argument callable (sync or async)
        options: Retry policy
        clock: Time source
        logger: Logger for attempt diagnostics

    Returns:
        Result of the first successful attempt

    Raises:
        RetryExhausted: Every attempt failed
        BaseException: Any exception not listed in ``retry_on``, unwrapped

    Example:
        data = await with_retry(fetch, RetryOptions(max_retries=3, delay=0.5))
    """
    options = options or RetryOptions()
    clock = clock or DEFAULT_CLOCK
    logger = logger or null_logger("utilkit.retry")

    failures = 0
    last_exception: Optional[BaseException] = None

    while failures <= options.max_retries:
        try:
            return await invoke(operation)
        except options.retry_on as e:
            last_exception = e
            failures += 1
            logger.debug(
                "Attempt failed",
                attempt=failures,
                max_retries=options.max_retries,
                error=str(e),
            )

            if failures <= options.max_retries and options.delay > 0:
                await clock.sleep(options.delay)

    last_error = str(last_exception) if last_exception is not None else None
    raise RetryExhausted(options.max_retries, last_error) from last_exception
