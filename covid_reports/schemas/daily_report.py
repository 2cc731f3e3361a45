"""
covid_reports/schemas/daily_report.py

Response schemas for daily report endpoints.

Non-numeric upstream cells surface as NaN in the domain models; JSON has no
NaN, so those values are serialized as null.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from covid_reports.domain.daily_report import CountryAggregate, CountryTimeseries, Overview, SeriesEntry


def _count_or_none(value: float) -> int | None:
    if value is None or math.isnan(value) or math.isinf(value):
        return None
    return int(value)


def _float_or_none(value: float) -> float | None:
    if value is None or math.isnan(value) or math.isinf(value):
        return None
    return float(value)


class OverviewResponse(BaseModel):
    """
    Global totals for one date.
    """

    confirmed: int | None = None
    deaths: int | None = None
    recovered: int | None = None

    @classmethod
    def from_domain(cls, overview: Overview) -> OverviewResponse:
        return cls(
            confirmed=_count_or_none(overview.confirmed),
            deaths=_count_or_none(overview.deaths),
            recovered=_count_or_none(overview.recovered),
        )


class CountryDataResponse(BaseModel):
    """
    One country's figures for one date.
    """

    provincestate: str
    countryregion: str
    lastUpdate: str
    confirmed: int | None = None
    deaths: int | None = None
    recovered: int | None = None
    latitude: float | None = None
    longitude: float | None = None

    @classmethod
    def from_domain(cls, aggregate: CountryAggregate) -> CountryDataResponse:
        return cls(
            provincestate=aggregate.province_state,
            countryregion=aggregate.country_region,
            lastUpdate=aggregate.last_update,
            confirmed=_count_or_none(aggregate.confirmed),
            deaths=_count_or_none(aggregate.deaths),
            recovered=_count_or_none(aggregate.recovered),
            latitude=_float_or_none(aggregate.latitude),
            longitude=_float_or_none(aggregate.longitude),
        )


class SeriesEntryResponse(BaseModel):
    date: str
    confirmed: int | None = None
    deaths: int | None = None
    recovered: int | None = None

    @classmethod
    def from_domain(cls, entry: SeriesEntry) -> SeriesEntryResponse:
        return cls(
            date=entry.date,
            confirmed=_count_or_none(entry.confirmed),
            deaths=_count_or_none(entry.deaths),
            recovered=_count_or_none(entry.recovered),
        )


class CountryTimeseriesResponse(BaseModel):
    """
    Per-date figures of one country.
    """

    provincestate: str
    countryregion: str
    lat: float | None = None
    long: float | None = None
    series: list[SeriesEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, timeseries: CountryTimeseries) -> CountryTimeseriesResponse:
        return cls(
            provincestate=timeseries.province_state,
            countryregion=timeseries.country_region,
            lat=_float_or_none(timeseries.latitude),
            long=_float_or_none(timeseries.longitude),
            series=[SeriesEntryResponse.from_domain(entry) for entry in timeseries.series],
        )


class HealthResponse(BaseModel):
    status: str
    cached_dates: int = Field(..., ge=0)
