"""Fixed-interval scheduler running the ladder scan."""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections.abc import Awaitable, Callable

from ladder_scanner.utils.config import POLL_INTERVAL_SECONDS
from ladder_scanner.utils.logger import ScanMetrics, get_logger

logger = get_logger(__name__)


class LadderScanner:
    """
    Runs a scan once immediately, then once every ``interval`` seconds.

    Every tick is guarded: a failing scan is logged and the schedule goes on.
    A tick that is still in flight when the timer fires again is never
    doubled up, the new firing is skipped instead.
    """

    def __init__(
        self,
        tick: Callable[[], Awaitable[object]],
        interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        """
        Initialize the scanner.

        Args:
            tick: Zero-argument coroutine function performing one scan
            interval: Seconds between two timer firings

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        self.tick = tick
        self.interval = interval
        self.tick_count = 0
        self.failure_count = 0
        self.skipped_count = 0
        self.metrics = ScanMetrics(logger)
        self._task: asyncio.Task[None] | None = None
        self._current_tick: asyncio.Task[bool] | None = None

    @property
    def running(self) -> bool:
        """True while the timer loop is active."""
        return self._task is not None and not self._task.done()

    async def run_tick(self) -> bool:
        """
        Run one scan, logging instead of raising on failure.

        Returns:
            True if the scan completed, False if it raised
        """
        self.tick_count += 1
        started = time.monotonic()
        try:
            await self.tick()
        except Exception as e:
            self.failure_count += 1
            logger.error(f"Scanner error: {e}")
            return False
        finally:
            self.metrics.record("tick_seconds", time.monotonic() - started)
        return True

    def start(self) -> asyncio.Task[None]:
        """
        Start the timer loop on the running event loop.

        Returns:
            The background task driving the schedule

        Raises:
            RuntimeError: If the scanner is already running
        """
        if self.running:
            raise RuntimeError("Scanner is already running")

        logger.info(f"Starting ladder scanner, interval {self.interval:.2f}s")
        self._task = asyncio.create_task(self._run())
        return self._task

    async def wait(self) -> None:
        """Block until the timer loop ends (normally only through stop or cancellation)."""
        if self._task is None:
            raise RuntimeError("Scanner has not been started")
        await self._task

    async def stop(self) -> None:
        """Stop the timer loop and let an in-flight scan run to completion."""
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

        if self._current_tick is not None:
            await self._current_tick
            self._current_tick = None

        self.metrics.record("ticks", float(self.tick_count))
        self.metrics.record("failures", float(self.failure_count))
        self.metrics.record("skipped", float(self.skipped_count))
        self.metrics.log_summary()

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_fire = loop.time()
        while True:
            if self._current_tick is not None and not self._current_tick.done():
                self.skipped_count += 1
                logger.warning("Previous scan still running, skipping this tick")
            else:
                self._current_tick = asyncio.create_task(self.run_tick())

            # Fixed rate; after a stall resume from now instead of bursting
            next_fire = max(next_fire + self.interval, loop.time())
            await asyncio.sleep(next_fire - loop.time())
