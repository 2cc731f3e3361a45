"""
covid_reports/parsers/daily_report_parser.py

Parses one upstream daily report CSV into per-country aggregates.

Upstream rows have province/state granularity. Rows of the same country are
folded into one CountryAggregate:

    confirmed / deaths / recovered   summed over all rows
    province_state                   kept only while identical across rows
    last_update / latitude / longitude
                                     taken from the row with the greatest
                                     last-update string (ties keep the first)

Rows with fewer than MIN_ROW_FIELDS fields are skipped; trailing blank lines
and truncated rows are expected in upstream files.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from covid_reports.domain.daily_report import ColumnIndexes, CountryAggregate, Snapshot
from covid_reports.mappers.column_resolver import ColumnResolver

logger = logging.getLogger(__name__)

MIN_ROW_FIELDS = 8
COMMA_SPACE = ", "
PLACEHOLDER = "\x1f"


def parse_number(raw: str | None) -> float:
    """
    Parse a numeric cell. Empty or non-numeric content yields NaN.
    """

    if raw is None:
        return math.nan
    stripped = raw.strip()
    if not stripped:
        return math.nan
    try:
        return float(stripped)
    except ValueError:
        return math.nan


def _cell(row: list[str], index: int | None) -> str | None:
    if index is None or index >= len(row):
        return None
    return row[index]


class DailyReportParser:
    """
    Splits daily report CSV text into rows and folds them per country.
    """

    def __init__(self, *, resolver: ColumnResolver | None = None) -> None:
        self._resolver = resolver or ColumnResolver()

    def parse_text(self, csv_text: str) -> Snapshot:
        """
        Resolve columns from the header line, then parse the data rows.
        """

        lines = csv_text.splitlines()
        if not lines:
            return []
        indexes = self._resolver.resolve(lines[0].split(","))
        return self.parse(csv_text, indexes)

    def parse(self, csv_text: str, indexes: ColumnIndexes) -> Snapshot:
        """
        Parse data rows (every line after the header) with resolved indexes.
        """

        countries: dict[str, CountryAggregate] = {}
        skipped_rows = 0

        for line_number, line in enumerate(csv_text.splitlines()[1:], start=2):
            # "Korea, South" and similar quoted names must survive the split.
            row = line.replace(COMMA_SPACE, PLACEHOLDER).split(",")
            if len(row) < MIN_ROW_FIELDS:
                skipped_rows += 1
                logger.debug(
                    "Skipping short daily report row line=%s fields=%s",
                    line_number,
                    len(row),
                )
                continue

            aggregate = self._row_to_aggregate(row, indexes)
            existing = countries.get(aggregate.country_region)
            if existing is None:
                countries[aggregate.country_region] = aggregate
            else:
                countries[aggregate.country_region] = merge_aggregates(existing, aggregate)

        if skipped_rows:
            logger.debug("Daily report parsed countries=%s skipped_rows=%s", len(countries), skipped_rows)
        return list(countries.values())

    @staticmethod
    def _row_to_aggregate(row: list[str], indexes: ColumnIndexes) -> CountryAggregate:
        country = (_cell(row, indexes.country_region) or "").replace(PLACEHOLDER, COMMA_SPACE)
        province = (_cell(row, indexes.province_state) or "").replace(PLACEHOLDER, COMMA_SPACE)
        return CountryAggregate(
            province_state=province,
            country_region=country.replace('"', ""),
            last_update=_cell(row, indexes.last_update) or "",
            confirmed=parse_number(_cell(row, indexes.confirmed)),
            deaths=parse_number(_cell(row, indexes.deaths)),
            recovered=parse_number(_cell(row, indexes.recovered)),
            latitude=parse_number(_cell(row, indexes.latitude)),
            longitude=parse_number(_cell(row, indexes.longitude)),
        )


def merge_aggregates(accumulated: CountryAggregate, row: CountryAggregate) -> CountryAggregate:
    """
    Fold one more row of the same country into its accumulated aggregate.
    """

    merged = replace(
        accumulated,
        province_state=(
            accumulated.province_state
            if accumulated.province_state == row.province_state
            else ""
        ),
        confirmed=accumulated.confirmed + row.confirmed,
        deaths=accumulated.deaths + row.deaths,
        recovered=accumulated.recovered + row.recovered,
    )
    if row.last_update > accumulated.last_update:
        merged = replace(
            merged,
            last_update=row.last_update,
            latitude=row.latitude,
            longitude=row.longitude,
        )
    return merged


def parse_daily_report(csv_text: str) -> Snapshot:
    """
    Parse CSV text with the default column naming schemes.
    """

    return DailyReportParser().parse_text(csv_text)
