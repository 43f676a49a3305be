
"""
Daily scheduler.

Each trigger runs in its own asyncio task: it sleeps until the next
wall-clock occurrence of its time of day, fires its action once, then
waits for the following day. Failures are logged and the loop carries on;
nothing is retried.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyTrigger:
    name: str
    at: time
    action: Callable[[], object]


def next_occurrence(at: time, now: datetime) -> datetime:
    """First moment strictly after ``now`` whose time of day is ``at``."""
    target = datetime.combine(now.date(), at)
    if target <= now:
        target += timedelta(days=1)
    return target


async def fire(trigger: DailyTrigger) -> bool:
    logger.info("Running daily %s at %s...", trigger.name, trigger.at.strftime("%H:%M"))
    try:
        # Store calls block; keep them off the event loop
        await asyncio.to_thread(trigger.action)
    except Exception:
        logger.exception("Daily %s failed", trigger.name)
        return False
    return True


async def run_daily_trigger(trigger: DailyTrigger, clock: Callable[[], datetime] = datetime.now) -> None:
    """Fire ``trigger`` once a day, forever. Cancel the task to stop it."""
    while True:
        target = next_occurrence(trigger.at, clock())
        logger.debug("Next %s at %s", trigger.name, target.isoformat(sep=" "))

        # asyncio.sleep runs on the monotonic clock; re-check the wall clock
        remaining = (target - clock()).total_seconds()
        while remaining > 0:
            await asyncio.sleep(remaining)
            remaining = (target - clock()).total_seconds()

        await fire(trigger)


class TaskScheduler:

    def __init__(self, triggers: List[DailyTrigger], clock: Callable[[], datetime] = datetime.now):
        self.triggers = triggers
        self._clock = clock
        self._running: List[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return bool(self._running)

    def start(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        if self._running:
            return
        loop = loop or asyncio.get_running_loop()
        for trigger in self.triggers:
            self._running.append(
                loop.create_task(run_daily_trigger(trigger, self._clock), name=f"daily-{trigger.name}")
            )
            logger.info("Daily %s scheduled for %s", trigger.name, trigger.at.strftime("%H:%M"))

    async def stop(self):
        running, self._running = self._running, []
        for job in running:
            job.cancel()
        for job in running:
            try:
                await job
            except asyncio.CancelledError:
                pass
