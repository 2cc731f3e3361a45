"""
covid_reports/domain package marker.
"""

from covid_reports.domain.daily_report import (
    ColumnIndexes,
    CountryAggregate,
    CountryTimeseries,
    Overview,
    SeriesEntry,
    Snapshot,
)

__all__ = [
    "ColumnIndexes",
    "CountryAggregate",
    "CountryTimeseries",
    "Overview",
    "SeriesEntry",
    "Snapshot",
]
