"""
covid_reports/schemas package marker.
"""

from covid_reports.schemas.daily_report import (
    CountryDataResponse,
    CountryTimeseriesResponse,
    HealthResponse,
    OverviewResponse,
    SeriesEntryResponse,
)

__all__ = [
    "CountryDataResponse",
    "CountryTimeseriesResponse",
    "HealthResponse",
    "OverviewResponse",
    "SeriesEntryResponse",
]
