from __future__ import annotations

import asyncio
from datetime import date

import pytest

from covid_reports.config import TimeseriesSettings
from covid_reports.connectors.base import UpstreamResponseError
from covid_reports.services.daily_report_service import DailyReportService
from covid_reports.services.timeseries_service import TimeseriesService
from covid_reports.utils.dates import InvalidDateError
from tests.conftest import FakeDailyReportConnector

HEADER = "Province_State,Country_Region,Last_Update,Confirmed,Deaths,Recovered,Lat,Long_"


@pytest.fixture()
def timeseries_connector() -> FakeDailyReportConnector:
    return FakeDailyReportConnector(
        {
            "2021-01-01": f"{HEADER}\n,Chile,2021-01-01 05:00,10,1,5,-35.6,-71.5\n",
            "2021-01-03": (
                f"{HEADER}\n"
                ",Chile,2021-01-03 05:00,14,1,7,-35.7,-71.6\n"
                ",Peru,2021-01-03 05:00,3,0,1,-9.2,-75.0\n"
            ),
        }
    )


@pytest.fixture()
def timeseries_service(timeseries_connector: FakeDailyReportConnector) -> TimeseriesService:
    daily = DailyReportService(connector=timeseries_connector, clock=lambda: date(2021, 1, 4))
    return TimeseriesService(daily_service=daily, settings=TimeseriesSettings(default_days=3, max_days=5))


def test_default_range_ends_yesterday(timeseries_service: TimeseriesService) -> None:
    assert timeseries_service.resolve_range() == ["2021-01-01", "2021-01-02", "2021-01-03"]


def test_country_series_skips_missing_dates(timeseries_service: TimeseriesService) -> None:
    chile = asyncio.run(timeseries_service.get_timeseries_for_country("chile"))

    assert chile is not None
    assert [entry.date for entry in chile.series] == ["2021-01-01", "2021-01-03"]
    assert [entry.confirmed for entry in chile.series] == [10, 14]
    assert chile.latitude == pytest.approx(-35.7)


def test_all_countries_series(timeseries_service: TimeseriesService) -> None:
    series = asyncio.run(timeseries_service.get_timeseries("2021-01-01", "2021-01-03"))

    assert [item.country_region for item in series] == ["Chile", "Peru"]
    assert len(series[1].series) == 1


def test_unknown_country_returns_none(timeseries_service: TimeseriesService) -> None:
    assert asyncio.run(timeseries_service.get_timeseries_for_country("Atlantis")) is None


def test_repeat_requests_reuse_cached_days(
    timeseries_service: TimeseriesService,
    timeseries_connector: FakeDailyReportConnector,
) -> None:
    async def scenario() -> None:
        await timeseries_service.get_timeseries()
        await timeseries_service.get_timeseries_for_country("Peru")

    asyncio.run(scenario())

    # The missing day is asked for again; cached days are not.
    assert timeseries_connector.fetched_dates.count("2021-01-01") == 1
    assert timeseries_connector.fetched_dates.count("2021-01-03") == 1
    assert timeseries_connector.fetched_dates.count("2021-01-02") == 2


def test_range_limits(timeseries_service: TimeseriesService) -> None:
    with pytest.raises(InvalidDateError):
        timeseries_service.resolve_range("2021-01-01", "2021-01-10")
    with pytest.raises(InvalidDateError):
        timeseries_service.resolve_range("2021-01-03", "2021-01-01")


def test_upstream_errors_other_than_not_found_propagate() -> None:
    connector = FakeDailyReportConnector(
        {"2021-01-01": UpstreamResponseError(source="test", status_code=500, body="boom")}
    )
    daily = DailyReportService(connector=connector, clock=lambda: date(2021, 1, 2))
    service = TimeseriesService(daily_service=daily, settings=TimeseriesSettings(default_days=1, max_days=5))

    with pytest.raises(UpstreamResponseError):
        asyncio.run(service.get_timeseries())


def test_huge_range_is_rejected_without_listing_dates(
    timeseries_service: TimeseriesService,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def fail_format(_value: date) -> str:
        raise AssertionError("range was enumerated")

    monkeypatch.setattr("covid_reports.utils.dates.format_date", fail_format)

    with pytest.raises(InvalidDateError, match="at most 5"):
        timeseries_service.resolve_range("0001-01-01", "9999-12-31")


def test_default_start_before_year_one_is_invalid(timeseries_service: TimeseriesService) -> None:
    with pytest.raises(InvalidDateError):
        timeseries_service.resolve_range(end="0001-01-01")
