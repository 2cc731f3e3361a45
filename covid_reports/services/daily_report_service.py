"""
covid_reports/services/daily_report_service.py

Service layer behind the HTTP routes.

Every public method is a coroutine, whether the snapshot is already cached
or has to be fetched, so callers never branch on hit or miss.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from typing import Callable

from starlette.concurrency import run_in_threadpool

from covid_reports.config import get_daily_reports_settings, get_snapshot_cache_settings
from covid_reports.connectors.daily_report_connector import DailyReportConnector, DailyReportNotFoundError
from covid_reports.domain.daily_report import CountryAggregate, Overview, Snapshot
from covid_reports.parsers.daily_report_parser import DailyReportParser
from covid_reports.services.aggregation_service import find_country, reduce_overview
from covid_reports.services.snapshot_cache import SnapshotCache
from covid_reports.utils.dates import format_date, parse_date_string, yesterday_date_string

logger = logging.getLogger(__name__)


class DailyReportService:
    """
    Serves per-country daily snapshots, overviews and single-country lookups.
    """

    def __init__(
        self,
        *,
        connector: DailyReportConnector,
        parser: DailyReportParser | None = None,
        cache_max_entries: int = 0,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._connector = connector
        self._parser = parser or DailyReportParser()
        self._clock = clock
        self.cache = SnapshotCache(loader=self._load_snapshot, max_entries=cache_max_entries)

    def current_date_string(self) -> str:
        """
        Return the date of the latest complete upstream report (yesterday).
        """

        return yesterday_date_string(self._clock())

    async def get_overview(self) -> Overview:
        """
        Get global totals for yesterday.
        """

        return await self.get_overview_for_date(self.current_date_string())

    async def get_overview_for_date(self, date_string: str) -> Overview:
        snapshot = await self.get_daily_values(date_string)
        return reduce_overview(snapshot)

    async def get_current_daily_values(self) -> Snapshot:
        """
        Get yesterday's data for all countries.
        """

        return await self.get_daily_values(self.current_date_string())

    async def get_daily_values(self, date_string: str) -> Snapshot:
        """
        Get data for all countries for one ``YYYY-MM-DD`` date.

        Not-found errors name the date as the caller wrote it.
        """

        key = format_date(parse_date_string(date_string))
        try:
            return await self.cache.get(key)
        except DailyReportNotFoundError as exc:
            if exc.date_string == date_string:
                raise
            raise DailyReportNotFoundError(date_string) from exc

    async def get_current_daily_values_for_country(self, country: str) -> CountryAggregate | None:
        """
        Get yesterday's data for one country.
        """

        return await self.get_daily_values_for_country(country, self.current_date_string())

    async def get_daily_values_for_country(self, country: str, date_string: str) -> CountryAggregate | None:
        """
        Get one country's data for one date; None when the date has no row
        for that country.
        """

        snapshot = await self.get_daily_values(date_string)
        return find_country(snapshot, country)

    async def _load_snapshot(self, date_string: str) -> Snapshot:
        csv_text = await run_in_threadpool(self._connector.fetch_daily_csv, date_string)
        snapshot = self._parser.parse_text(csv_text)
        logger.info("Daily snapshot parsed date=%s countries=%s", date_string, len(snapshot))
        return snapshot


@lru_cache(maxsize=1)
def get_daily_report_service() -> DailyReportService:
    """
    Build and cache the process-wide daily report service.
    """

    connector = DailyReportConnector(settings=get_daily_reports_settings())
    return DailyReportService(
        connector=connector,
        cache_max_entries=get_snapshot_cache_settings().max_entries,
    )
