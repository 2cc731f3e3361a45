"""
covid_reports/services/snapshot_cache.py

Date-keyed cache of parsed daily snapshots.

A date's upstream report does not change once published, so entries are
never invalidated. A snapshot is fetched and parsed only on a miss, and
concurrent misses for the same date share one in-flight load. Failed loads
are not cached; the next request for that date loads again.
"""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from typing import Awaitable, Callable

from covid_reports.domain.daily_report import Snapshot

logger = logging.getLogger(__name__)

SnapshotLoader = Callable[[str], Awaitable[Snapshot]]


class SnapshotCache:
    """
    Maps ``YYYY-MM-DD`` date strings to snapshots.

    Parameters
    ----------
    loader:
        Coroutine function fetching and parsing the snapshot for one date.
    max_entries:
        Keep at most this many dates, evicting the least recently used one.
        ``0`` keeps every date for the lifetime of the process.
    """

    def __init__(self, *, loader: SnapshotLoader, max_entries: int = 0) -> None:
        self._loader = loader
        self._max_entries = max(0, max_entries)
        self._snapshots: OrderedDict[str, Snapshot] = OrderedDict()
        self._in_flight: dict[str, asyncio.Task[Snapshot]] = {}

    def __contains__(self, date_string: object) -> bool:
        return date_string in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)

    def peek(self, date_string: str) -> Snapshot | None:
        """
        Return the cached snapshot without loading it.
        """

        snapshot = self._snapshots.get(date_string)
        if snapshot is not None:
            self._snapshots.move_to_end(date_string)
        return snapshot

    async def get(self, date_string: str) -> Snapshot:
        """
        Return the snapshot for ``date_string``, loading it on a miss.
        """

        cached = self.peek(date_string)
        if cached is not None:
            logger.debug("Snapshot cache hit date=%s", date_string)
            return cached

        task = self._in_flight.get(date_string)
        if task is None:
            logger.info("Snapshot cache miss date=%s", date_string)
            task = asyncio.create_task(self._load(date_string))
            task.add_done_callback(_consume_exception)
            self._in_flight[date_string] = task
        else:
            logger.debug("Snapshot load already in flight date=%s", date_string)
        # One waiter being cancelled must not cancel the shared load.
        return await asyncio.shield(task)

    async def _load(self, date_string: str) -> Snapshot:
        try:
            snapshot = await self._loader(date_string)
        except Exception as exc:
            logger.warning("Snapshot load failed date=%s error=%s", date_string, exc)
            raise
        finally:
            self._in_flight.pop(date_string, None)

        self._store(date_string, snapshot)
        return snapshot

    def _store(self, date_string: str, snapshot: Snapshot) -> None:
        self._snapshots[date_string] = snapshot
        self._snapshots.move_to_end(date_string)
        if self._max_entries and len(self._snapshots) > self._max_entries:
            evicted, _ = self._snapshots.popitem(last=False)
            logger.debug("Snapshot cache evicted date=%s", evicted)


def _consume_exception(task: asyncio.Task[Snapshot]) -> None:
    # The failure is logged in _load; mark it retrieved for loads nobody awaits.
    if not task.cancelled():
        task.exception()
