"""
Shared fixtures and test doubles for the daily report tests.
"""

from __future__ import annotations

from datetime import date

import pytest

from covid_reports.connectors.daily_report_connector import DailyReportNotFoundError
from covid_reports.services.daily_report_service import DailyReportService

CURRENT_SCHEME_CSV = (
    "Province_State,Country_Region,Last_Update,Confirmed,Deaths,Recovered,Lat,Long_\n"
    "Alabama,US,2021-01-01 05:00,100,2,50,32.3,-86.9\n"
    "Alaska,US,2021-01-01 06:00,20,0,10,61.2,-149.9\n"
    ',"Korea, South",2021-01-01 04:00,60,1,40,35.9,127.7\n'
    "Bavaria,Germany,2021-01-01 03:00,300,7,200,48.7,11.4\n"
    "Berlin,Germany,2021-01-01 03:00,150,3,100,52.5,13.4\n"
)

LEGACY_SCHEME_CSV = (
    "Province/State,Country/Region,Last Update,Confirmed,Deaths,Recovered,Latitude,Longitude\n"
    "Hubei,Mainland China,2020-03-01T10:13:19,66907,2761,31536,30.9756,112.2707\n"
    "Guangdong,Mainland China,2020-03-01T14:13:18,1349,7,1016,23.3417,113.4244\n"
    ',"Korea, South",2020-03-01T23:43:03,3736,17,30,36.0,128.0\n'
)


class FakeDailyReportConnector:
    """
    Connector double serving CSV text per date and counting fetches.
    """

    def __init__(self, reports: dict[str, object]) -> None:
        self._reports = reports
        self.fetch_count = 0
        self.fetched_dates: list[str] = []

    def fetch_daily_csv(self, date_string: str) -> str:
        self.fetch_count += 1
        self.fetched_dates.append(date_string)
        report = self._reports.get(date_string)
        if report is None:
            raise DailyReportNotFoundError(date_string)
        if isinstance(report, Exception):
            raise report
        return report


@pytest.fixture()
def connector() -> FakeDailyReportConnector:
    return FakeDailyReportConnector(
        {
            "2021-01-01": CURRENT_SCHEME_CSV,
            "2020-03-01": LEGACY_SCHEME_CSV,
        }
    )


@pytest.fixture()
def service(connector: FakeDailyReportConnector) -> DailyReportService:
    """Service whose "yesterday" is 2021-01-01."""
    return DailyReportService(connector=connector, clock=lambda: date(2021, 1, 2))
