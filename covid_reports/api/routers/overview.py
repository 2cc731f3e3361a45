"""
covid_reports/api/routers/overview.py

Global summary endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from covid_reports.api.dependencies import PIPELINE_ERRORS, get_optional_date, to_http_exception
from covid_reports.schemas.daily_report import OverviewResponse
from covid_reports.services.daily_report_service import DailyReportService, get_daily_report_service

router = APIRouter(tags=["overview"])


@router.get("/brief", response_model=OverviewResponse)
async def get_overview(
    date: str | None = Depends(get_optional_date),
    service: DailyReportService = Depends(get_daily_report_service),
) -> OverviewResponse:
    """
    Return global totals for ``date``, or for yesterday when omitted.
    """

    try:
        if date is None:
            overview = await service.get_overview()
        else:
            overview = await service.get_overview_for_date(date)
    except PIPELINE_ERRORS as exc:
        raise to_http_exception(exc) from exc

    return OverviewResponse.from_domain(overview)
