"""
covid_reports/api/dependencies.py

Shared FastAPI dependencies and pipeline error mapping.
"""

from __future__ import annotations

from fastapi import HTTPException, Query, status

from covid_reports.connectors.base import UpstreamResponseError, UpstreamUnavailableError
from covid_reports.connectors.daily_report_connector import DailyReportNotFoundError
from covid_reports.mappers.column_resolver import MissingColumnError
from covid_reports.utils.dates import InvalidDateError, parse_date_string

PIPELINE_ERRORS = (
    InvalidDateError,
    DailyReportNotFoundError,
    UpstreamResponseError,
    UpstreamUnavailableError,
    MissingColumnError,
)


def get_optional_date(
    date: str | None = Query(default=None, description="Report date in YYYY-MM-DD format"),
) -> str | None:
    """
    Validate the optional ``date`` query parameter, passing it on as sent.
    """

    if date is None:
        return None
    try:
        parse_date_string(date)
    except InvalidDateError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return date


def to_http_exception(exc: Exception) -> HTTPException:
    """
    Translate a pipeline failure into the HTTP error returned to clients.
    """

    if isinstance(exc, InvalidDateError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, DailyReportNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, UpstreamResponseError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"upstream_status": exc.status_code, "body": exc.body},
        )
    if isinstance(exc, UpstreamUnavailableError):
        return HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(exc))
    if isinstance(exc, MissingColumnError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.to_dict())
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Unexpected pipeline failure.")
