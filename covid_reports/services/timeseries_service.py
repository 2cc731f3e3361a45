"""
covid_reports/services/timeseries_service.py

Time series assembled from cached daily snapshots.

Each date in the requested range is served through DailyReportService, so
dates already cached are never fetched again. Dates without an upstream
report are left out of the series; any other upstream failure aborts the
request.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from functools import lru_cache

from covid_reports.config import TimeseriesSettings, get_timeseries_settings
from covid_reports.connectors.daily_report_connector import DailyReportNotFoundError
from covid_reports.domain.daily_report import CountryAggregate, CountryTimeseries, SeriesEntry, Snapshot
from covid_reports.services.aggregation_service import find_country
from covid_reports.services.daily_report_service import DailyReportService, get_daily_report_service
from covid_reports.utils.dates import InvalidDateError, date_range, format_date, parse_date_string

logger = logging.getLogger(__name__)


class TimeseriesService:
    def __init__(self, *, daily_service: DailyReportService, settings: TimeseriesSettings) -> None:
        self._daily_service = daily_service
        self._settings = settings

    def resolve_range(self, start: str | None = None, end: str | None = None) -> list[str]:
        """
        Resolve an inclusive date range. ``end`` defaults to yesterday and
        ``start`` to ``default_days`` days ending at ``end``.
        """

        end_string = end or self._daily_service.current_date_string()
        if start is None:
            end_date = parse_date_string(end_string)
            try:
                start = format_date(end_date - timedelta(days=self._settings.default_days - 1))
            except OverflowError as exc:
                raise InvalidDateError(f"End date {end_string} is out of range.") from exc

        return date_range(start, end_string, max_days=self._settings.max_days)

    async def get_timeseries(self, start: str | None = None, end: str | None = None) -> list[CountryTimeseries]:
        """
        Return one series per country seen anywhere in the range, in first-seen order.
        """

        snapshots = await self._collect_snapshots(self.resolve_range(start, end))
        countries: dict[str, list[tuple[str, CountryAggregate]]] = {}
        for date_string, snapshot in snapshots:
            for aggregate in snapshot:
                countries.setdefault(aggregate.country_region, []).append((date_string, aggregate))
        return [_build_series(points) for points in countries.values()]

    async def get_timeseries_for_country(
        self,
        country: str,
        start: str | None = None,
        end: str | None = None,
    ) -> CountryTimeseries | None:
        """
        Return one country's series, or None when it has no data in the range.
        """

        snapshots = await self._collect_snapshots(self.resolve_range(start, end))
        points: list[tuple[str, CountryAggregate]] = []
        for date_string, snapshot in snapshots:
            aggregate = find_country(snapshot, country)
            if aggregate is not None:
                points.append((date_string, aggregate))
        if not points:
            return None
        return _build_series(points)

    async def _collect_snapshots(self, dates: list[str]) -> list[tuple[str, Snapshot]]:
        snapshots: list[tuple[str, Snapshot]] = []
        for date_string in dates:
            try:
                snapshot = await self._daily_service.get_daily_values(date_string)
            except DailyReportNotFoundError:
                logger.info("Timeseries skipping date without report date=%s", date_string)
                continue
            snapshots.append((date_string, snapshot))
        return snapshots


def _build_series(points: list[tuple[str, CountryAggregate]]) -> CountryTimeseries:
    # Points are in date order; location metadata follows the latest date.
    _, latest = points[-1]
    return CountryTimeseries(
        province_state=latest.province_state,
        country_region=latest.country_region,
        latitude=latest.latitude,
        longitude=latest.longitude,
        series=[
            SeriesEntry(
                date=date_string,
                confirmed=aggregate.confirmed,
                deaths=aggregate.deaths,
                recovered=aggregate.recovered,
            )
            for date_string, aggregate in points
        ],
    )


@lru_cache(maxsize=1)
def get_timeseries_service() -> TimeseriesService:
    return TimeseriesService(
        daily_service=get_daily_report_service(),
        settings=get_timeseries_settings(),
    )
