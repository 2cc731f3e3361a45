"""
covid_reports/api/routers/countries.py

Per-country daily figures.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from covid_reports.api.dependencies import PIPELINE_ERRORS, get_optional_date, to_http_exception
from covid_reports.schemas.daily_report import CountryDataResponse
from covid_reports.services.daily_report_service import DailyReportService, get_daily_report_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["countries"])


@router.get("/countries", response_model=list[CountryDataResponse])
async def get_countries(
    date: str | None = Depends(get_optional_date),
    service: DailyReportService = Depends(get_daily_report_service),
) -> list[CountryDataResponse]:
    """
    Return every country's figures for ``date``, or for yesterday when omitted.
    """

    try:
        if date is None:
            snapshot = await service.get_current_daily_values()
        else:
            snapshot = await service.get_daily_values(date)
    except PIPELINE_ERRORS as exc:
        raise to_http_exception(exc) from exc

    return [CountryDataResponse.from_domain(aggregate) for aggregate in snapshot]


@router.get("/countries/{country}", response_model=CountryDataResponse)
async def get_country(
    country: str,
    date: str | None = Depends(get_optional_date),
    service: DailyReportService = Depends(get_daily_report_service),
) -> CountryDataResponse:
    """
    Return one country's figures. Country names match case-insensitively.
    """

    try:
        if date is None:
            aggregate = await service.get_current_daily_values_for_country(country)
        else:
            aggregate = await service.get_daily_values_for_country(country, date)
    except PIPELINE_ERRORS as exc:
        raise to_http_exception(exc) from exc

    if aggregate is None:
        logger.info("No country data country=%r date=%s", country, date or "current")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No data for country '{country}'.",
        )
    return CountryDataResponse.from_domain(aggregate)
