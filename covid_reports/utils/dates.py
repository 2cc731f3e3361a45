"""
covid_reports/utils/dates.py

Date string helpers. API dates are ``YYYY-MM-DD``; upstream file names use
``MM-DD-YYYY``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

API_DATE_FORMAT = "%Y-%m-%d"
UPSTREAM_DATE_FORMAT = "%m-%d-%Y"


class InvalidDateError(ValueError):
    """
    Raised when a date parameter is not a valid ``YYYY-MM-DD`` string or a
    date range is unusable.
    """


def parse_date_string(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string.
    """

    try:
        return datetime.strptime(value.strip(), API_DATE_FORMAT).date()
    except (AttributeError, ValueError) as exc:
        raise InvalidDateError(f"Invalid date '{value}'. Expected YYYY-MM-DD.") from exc


def format_date(value: date) -> str:
    return value.strftime(API_DATE_FORMAT)


def to_upstream_date(value: str) -> str:
    """
    Reformat ``YYYY-MM-DD`` to the upstream ``MM-DD-YYYY`` file name form.
    """

    return parse_date_string(value).strftime(UPSTREAM_DATE_FORMAT)


def yesterday_date_string(today: date | None = None) -> str:
    """
    Return yesterday as ``YYYY-MM-DD``.

    A day's upstream file is published early the following morning, so the
    latest complete report is always yesterday's.
    """

    reference = today or date.today()
    return format_date(reference - timedelta(days=1))


def date_range(start: str, end: str, *, max_days: int | None = None) -> list[str]:
    """
    Return every date from ``start`` to ``end`` inclusive as ``YYYY-MM-DD``.

    The span is checked against ``max_days`` before any date is built.
    """

    first = parse_date_string(start)
    last = parse_date_string(end)
    if first > last:
        raise InvalidDateError(f"Start date {start} is after end date {end}.")
    span = (last - first).days + 1
    if max_days is not None and span > max_days:
        raise InvalidDateError(f"Date range spans {span} days; at most {max_days} are allowed.")
    return [format_date(first + timedelta(days=offset)) for offset in range(span)]
