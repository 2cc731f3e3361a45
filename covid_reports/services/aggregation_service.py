"""
covid_reports/services/aggregation_service.py

Pure reductions over a daily snapshot.

No I/O happens here; callers obtain the snapshot from SnapshotCache.
"""

from __future__ import annotations

from typing import Iterable

from covid_reports.domain.daily_report import CountryAggregate, Overview


def reduce_overview(snapshot: Iterable[CountryAggregate]) -> Overview:
    """
    Sum confirmed, deaths and recovered across every country, in snapshot
    order. An empty snapshot yields an all-zero overview.
    """

    confirmed: float = 0
    deaths: float = 0
    recovered: float = 0
    for country in snapshot:
        confirmed += country.confirmed
        deaths += country.deaths
        recovered += country.recovered
    return Overview(confirmed=confirmed, deaths=deaths, recovered=recovered)


def find_country(snapshot: Iterable[CountryAggregate], country_name: str) -> CountryAggregate | None:
    """
    Return the first aggregate whose country/region matches ``country_name``
    case-insensitively, or None when the date has no data for that country.
    """

    wanted = country_name.lower()
    for country in snapshot:
        if country.country_region.lower() == wanted:
            return country
    return None
