# File: tests/test_tracker.py
import asyncio

import pytest
from link_scout.crawler.tracker import InFlightTracker


@pytest.mark.asyncio()
async def test_idle_follows_count():
    tracker = InFlightTracker()
    assert tracker.idle
    tracker.started()
    tracker.started()
    assert (tracker.count, tracker.idle) == (2, False)
    tracker.finished()
    assert not tracker.idle
    tracker.finished()
    assert (tracker.count, tracker.idle) == (0, True)


@pytest.mark.asyncio()
async def test_finished_without_start_raises():
    with pytest.raises(RuntimeError):
        InFlightTracker().finished()


@pytest.mark.asyncio()
async def test_wait_idle_wakes_on_last_finish():
    tracker = InFlightTracker()
    tracker.started()

    async def worker():
        await asyncio.sleep(0.05)
        tracker.finished()

    task = asyncio.create_task(worker())
    await asyncio.wait_for(tracker.wait_idle(), timeout=1.0)
    assert tracker.idle
    await task
