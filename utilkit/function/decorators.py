"""
utilkit Function Decorators
===========================

Decorator forms of the control-flow primitives.

Example:
    @retry(max_retries=3, delay=0.5)
    async def fetch_data():
        ...

    @debounce(0.3)
    async def save_draft(text):
        ...
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from utilkit.function.debounce import Debouncer
from utilkit.function.policies import DebounceOptions, RetryOptions, ThrottleOptions
from utilkit.function.retry import with_retry
from utilkit.function.throttle import Throttler
from utilkit.utils.logger import Logger


F = TypeVar("F", bound=Callable[..., Any])


def retry(
    max_retries: int = 3,
    delay: float = 0.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    logger: Optional[Logger] = None,
) -> Callable[[F], F]:
    """
    Retry decorator with a constant delay.

    Args:
        max_retries: Retries after the first attempt
        delay: Delay between attempts in seconds
        exceptions: Exceptions that trigger a retry
        logger: Logger for attempt diagnostics

    Returns:
        Decorator
    """
    options = RetryOptions(max_retries=max_retries, delay=delay, retry_on=exceptions)

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            return await with_retry(
                lambda: func(*args, **kwargs),
                options,
                logger=logger,
            )

        wrapper.options = options  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


def debounce(
    wait: float,
    leading: bool = False,
    trailing: bool = True,
    logger: Optional[Logger] = None,
) -> Callable[[F], F]:
    """
    Debounce decorator (delay execution until calls quiesce).

    Superseded calls raise ``DebounceRejected``. The wrapper exposes
    its ``controller`` and a ``cancel()`` shortcut.
    """
    def decorator(func: F) -> F:
        controller = Debouncer(
            wait,
            DebounceOptions(leading=leading, trailing=trailing),
            logger=logger,
        )

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            return await controller.execute(lambda: func(*args, **kwargs))

        wrapper.controller = controller  # type: ignore[attr-defined]
        wrapper.cancel = controller.cancel  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


def throttle(
    wait: float,
    leading: bool = True,
    trailing: bool = False,
    logger: Optional[Logger] = None,
) -> Callable[[F], F]:
    """
    Throttle decorator (limit execution frequency).

    Calls inside the window raise ``ThrottleRejected``.
    """
    def decorator(func: F) -> F:
        controller = Throttler(
            wait,
            ThrottleOptions(leading=leading, trailing=trailing),
            logger=logger,
        )

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            return await controller.execute(lambda: func(*args, **kwargs))

        wrapper.controller = controller  # type: ignore[attr-defined]
        wrapper.cancel = controller.cancel  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator
