# link_scout/crawler/tracker.py
"""Счётчик выполняющихся проверок ссылок (детектор завершения обхода)."""
from __future__ import annotations

import asyncio


class InFlightTracker:
    """Counts running link workers; ``idle`` is set whenever the count is zero."""

    def __init__(self) -> None:
        self._count = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def count(self) -> int:
        return self._count

    @property
    def idle(self) -> bool:
        return self._count == 0

    def started(self) -> None:
        self._count += 1
        self._idle.clear()

    def finished(self) -> None:
        if self._count == 0:
            raise RuntimeError("finished() called more times than started()")
        self._count -= 1
        if self._count == 0:
            self._idle.set()

    async def wait_idle(self) -> None:
        await self._idle.wait()
