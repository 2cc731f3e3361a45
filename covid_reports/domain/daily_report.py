"""
covid_reports/domain/daily_report.py

Domain models for the daily report pipeline.

Counts are carried as floats: a non-numeric upstream cell parses to NaN and
is allowed to propagate through sums instead of failing the whole file.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ColumnIndexes:
    """
    Column positions of the semantic fields within one CSV file.

    ``None`` marks a column that is absent from the header.
    """

    province_state: int | None
    country_region: int | None
    last_update: int | None
    confirmed: int | None
    deaths: int | None
    recovered: int | None
    latitude: int | None
    longitude: int | None


@dataclass(frozen=True)
class CountryAggregate:
    """
    One country's figures for one date, merged from its province/state rows.
    """

    province_state: str
    country_region: str
    last_update: str
    confirmed: float
    deaths: float
    recovered: float
    latitude: float
    longitude: float


Snapshot = list[CountryAggregate]


@dataclass(frozen=True)
class Overview:
    """
    Global totals for one date.
    """

    confirmed: float = 0
    deaths: float = 0
    recovered: float = 0


@dataclass(frozen=True)
class SeriesEntry:
    date: str
    confirmed: float
    deaths: float
    recovered: float


@dataclass(frozen=True)
class CountryTimeseries:
    """
    Per-date figures of one country over a date range.
    """

    province_state: str
    country_region: str
    latitude: float
    longitude: float
    series: list[SeriesEntry] = field(default_factory=list)
