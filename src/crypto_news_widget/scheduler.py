from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, Sequence, Set

from loguru import logger

Job = Callable[[], Awaitable[None]]
Sleep = Callable[[float], Awaitable[None]]


class RefreshScheduler:
    """Fires every job immediately, then again every ``interval`` seconds.

    Jobs are spawned as independent tasks and never awaited by the loop, so a
    slow fetch can overlap the next firing.
    """

    def __init__(self, jobs: Sequence[Job], interval: float = 300.0, *, sleep: Sleep = asyncio.sleep) -> None:
        if interval <= 0:
            raise ValueError("Refresh interval must be positive")
        self._jobs = list(jobs)
        self._interval = interval
        self._sleep = sleep
        self._task: Optional[asyncio.Task[None]] = None
        self._inflight: Set[asyncio.Task[None]] = set()
        self.ticks = 0

    @property
    def interval(self) -> float:
        return self._interval

    def fire(self) -> None:
        self.ticks += 1
        logger.debug(f"Refresh tick #{self.ticks}: spawning {len(self._jobs)} jobs")
        for job in self._jobs:
            task = asyncio.create_task(job())
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)

    async def run(self, max_ticks: Optional[int] = None) -> None:
        while True:
            self.fire()
            if max_ticks is not None and self.ticks >= max_ticks:
                return
            await self._sleep(self._interval)

    def start(self) -> None:
        if self._task is None or self._task.done():
            logger.info(f"Starting refresh scheduler (every {self._interval:.0f}s)")
            self._task = asyncio.create_task(self.run())

    async def stop(self) -> None:
        tasks = [t for t in (self._task, *self._inflight) if t is not None and not t.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._task = None
        logger.info("Refresh scheduler stopped")
