"""
covid_reports/api/routers/timeseries.py

Time series endpoint built from daily snapshots.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from covid_reports.api.dependencies import PIPELINE_ERRORS, to_http_exception
from covid_reports.schemas.daily_report import CountryTimeseriesResponse
from covid_reports.services.timeseries_service import TimeseriesService, get_timeseries_service

router = APIRouter(tags=["timeseries"])


@router.get("/timeseries", response_model=list[CountryTimeseriesResponse])
async def get_timeseries(
    country: str | None = Query(default=None, description="Optional country filter"),
    start: str | None = Query(default=None, description="First date, YYYY-MM-DD"),
    end: str | None = Query(default=None, description="Last date, YYYY-MM-DD; defaults to yesterday"),
    service: TimeseriesService = Depends(get_timeseries_service),
) -> list[CountryTimeseriesResponse]:
    """
    Return per-date series for every country, or for one country when
    ``country`` is given.
    """

    try:
        if country is None:
            series = await service.get_timeseries(start=start, end=end)
        else:
            single = await service.get_timeseries_for_country(country, start=start, end=end)
            if single is None:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"No data for country '{country}'.",
                )
            series = [single]
    except PIPELINE_ERRORS as exc:
        raise to_http_exception(exc) from exc

    return [CountryTimeseriesResponse.from_domain(item) for item in series]
