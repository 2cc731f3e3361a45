from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import Depends, FastAPI

from covid_reports.config import get_daily_reports_settings, get_logging_settings
from covid_reports.schemas.daily_report import HealthResponse
from covid_reports.services.daily_report_service import DailyReportService, get_daily_report_service


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = get_logging_settings().level
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """
    Log the upstream source on boot; nothing to release on exit.
    """

    settings = get_daily_reports_settings()
    logging.getLogger(__name__).info(
        "Daily report service started base_url=%s timeout_seconds=%.1f",
        settings.base_url,
        settings.timeout_seconds,
    )
    yield
    logging.getLogger(__name__).info("Daily report service stopped")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _configure_logging()

    application = FastAPI(
        title="COVID-19 Daily Reports API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from covid_reports.api.routers import countries_router, overview_router, timeseries_router

    application.include_router(overview_router)
    application.include_router(countries_router)
    application.include_router(timeseries_router)

    @application.get("/health", response_model=HealthResponse)
    def healthcheck(
        service: DailyReportService = Depends(get_daily_report_service),
    ) -> HealthResponse:
        return HealthResponse(status="ok", cached_dates=len(service.cache))

    return application


app = create_app()
