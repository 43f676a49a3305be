# tests/test_scheduler.py

import asyncio
import logging
import threading
from datetime import datetime, time, timedelta

import pytest
from pydantic import ValidationError as SettingsValidationError

from dailytasks.core.config import Settings
from dailytasks.core.scheduler import (
    DailyTrigger,
    TaskScheduler,
    fire,
    next_occurrence,
    run_daily_trigger,
)


def test_next_occurrence_later_today() -> None:
    now = datetime(2026, 10, 16, 12, 0)
    assert next_occurrence(time(23, 59), now) == datetime(2026, 10, 16, 23, 59)


def test_next_occurrence_already_passed_is_tomorrow() -> None:
    now = datetime(2026, 10, 16, 23, 59, 30)
    assert next_occurrence(time(23, 59), now) == datetime(2026, 10, 17, 23, 59)
    assert next_occurrence(time(0, 0), now) == datetime(2026, 10, 17, 0, 0)


def test_next_occurrence_exactly_now_is_tomorrow() -> None:
    now = datetime(2026, 10, 17, 0, 0)
    assert next_occurrence(time(0, 0), now) == datetime(2026, 10, 18, 0, 0)


@pytest.mark.asyncio
async def test_fire_logs_and_swallows_failures(caplog) -> None:
    def boom():
        raise RuntimeError("database is locked")

    with caplog.at_level(logging.ERROR):
        assert await fire(DailyTrigger("task save", time(23, 59), boom)) is False

    assert "Daily task save failed" in caplog.text
    assert "database is locked" in caplog.text


@pytest.mark.asyncio
async def test_fire_runs_action_off_the_event_loop_thread() -> None:
    threads = []
    trigger = DailyTrigger("task reset", time(0, 0), lambda: threads.append(threading.get_ident()))

    assert await fire(trigger) is True

    assert len(threads) == 1
    assert threads[0] != threading.get_ident()


@pytest.mark.asyncio
async def test_trigger_fires_at_wall_clock_time_and_survives_errors() -> None:
    calls = []

    def flaky():
        calls.append(datetime.now())
        raise RuntimeError("transient")

    at = (datetime.now() + timedelta(milliseconds=200)).time()
    runner = asyncio.create_task(run_daily_trigger(DailyTrigger("task save", at, flaky)))

    await asyncio.sleep(0.6)
    assert not runner.done(), "A failing action must not end the loop"

    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_scheduler_start_and_stop() -> None:
    scheduler = TaskScheduler([
        DailyTrigger("task save", time(23, 59), lambda: None),
        DailyTrigger("task reset", time(0, 0), lambda: None),
    ])

    scheduler.start()
    assert scheduler.running

    await scheduler.stop()
    assert not scheduler.running


def test_settings_parse_trigger_times() -> None:
    settings = Settings(ARCHIVE_TIME="22:30", RESET_TIME=" 06:05 ")
    assert settings.archive_at == time(22, 30)
    assert settings.reset_at == time(6, 5)


@pytest.mark.parametrize("value", ["25:00", "noon", "12:75"])
def test_settings_reject_bad_times(value) -> None:
    with pytest.raises(SettingsValidationError):
        Settings(ARCHIVE_TIME=value)
