"""
utilkit Poller
==============

Run a task on a fixed interval until its result satisfies a stop
condition.

Lifecycle:
    idle -> active -> succeeded | stopped | retries exhausted

``stop()`` only flips the active flag. The loop notices it before the
next execution, so an in-flight task always runs to completion.

Example:
    poller = Poller(PollingOptions(interval=2.0, immediate=True))

    job = await poller.start(
        lambda: client.get_job(job_id),
        lambda job: job.state in ("done", "failed"),
    )
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from utilkit.function.base import Controller, invoke
from utilkit.function.clock import Clock
from utilkit.function.errors import MaxRetriesExceeded, PollingError, PollingStopped
from utilkit.function.policies import PollingOptions, PollingStatus
from utilkit.utils.logger import Logger


T = TypeVar("T")
StopCondition = Callable[[T], Union[bool, Awaitable[bool]]]


class Poller(Controller):
    """
    Polling controller.

    Counters describe the current (or most recent) ``start`` call and
    are reset whenever a new run begins.
    """

    name = "Poller"

    def __init__(
        self,
        options: Optional[PollingOptions] = None,
        *,
        clock: Optional[Clock] = None,
        logger: Optional[Logger] = None,
    ):
        super().__init__(clock, logger)
        self.options = options or PollingOptions()

        self._active = False
        self._run_id = 0
        self._retry_count = 0
        self._execution_count = 0

    async def start(
        self,
        task: Callable[[], Union[Awaitable[T], T]],
        stop_condition: StopCondition,
    ) -> T:
        """
        Start polling.

        Args:
            task: Zero-argument callable (sync or async); raising counts
                as a failed execution
            stop_condition: Predicate over a successful result (sync or async)

        Returns:
            First result satisfying ``stop_condition``

        Raises:
            MaxRetriesExceeded: ``quit_on_error`` set and ``max_retries`` failures seen
            PollingStopped: ``stop()`` was called or ``max_executions`` was reached
            PollingError: Poller is already running
        """
        with self._lock:
            if self._active:
                raise PollingError("Polling already active")
            self._active = True
            self._run_id += 1
            run_id = self._run_id
            self._retry_count = 0
            self._execution_count = 0

        try:
            return await self._run(run_id, task, stop_condition)
        finally:
            with self._lock:
                if self._run_id == run_id:
                    self._active = False

    async def _run(
        self,
        run_id: int,
        task: Callable[[], Union[Awaitable[T], T]],
        stop_condition: StopCondition,
    ) -> T:
        options = self.options
        self._logger.debug("Polling started", interval=options.interval)

        if options.immediate:
            try:
                result = await invoke(task)
            except Exception as e:
                # Only the loop enforces the retry budget
                self._record_failure(e)
            else:
                if await self._satisfied(stop_condition, result):
                    self._logger.debug("Polling succeeded", immediate=True)
                    return result

        while self._is_current(run_id):
            with self._lock:
                self._execution_count += 1
                execution = self._execution_count

            if options.max_executions is not None and execution > options.max_executions:
                self._logger.debug("Execution cap reached", max_executions=options.max_executions)
                break

            await self._clock.sleep(options.interval)

            if not self._is_current(run_id):
                break

            try:
                result = await invoke(task)
            except Exception as e:
                retries = self._record_failure(e)
                if options.quit_on_error and retries >= options.max_retries:
                    self._logger.debug("Polling gave up", retries=retries)
                    raise MaxRetriesExceeded() from e
                continue

            if await self._satisfied(stop_condition, result):
                self._logger.debug("Polling succeeded", execution=execution)
                return result

        self._logger.debug("Polling stopped")
        raise PollingStopped()

    async def _satisfied(self, stop_condition: StopCondition, result: Any) -> bool:
        return bool(await invoke(lambda: stop_condition(result)))

    def _record_failure(self, error: BaseException) -> int:
        with self._lock:
            self._retry_count += 1
            retries = self._retry_count
        self._logger.debug("Poll task failed", retry_count=retries, error=str(error))
        return retries

    def _is_current(self, run_id: int) -> bool:
        with self._lock:
            return self._active and self._run_id == run_id

    def stop(self) -> None:
        """Stop polling before the next execution."""
        with self._lock:
            self._active = False

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._active

    def status(self) -> PollingStatus:
        """Get polling status."""
        with self._lock:
            return PollingStatus(
                is_active=self._active,
                retry_count=self._retry_count,
                execution_count=self._execution_count,
            )
