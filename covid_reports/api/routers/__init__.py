"""
covid_reports/api/routers package marker.
"""

from covid_reports.api.routers.countries import router as countries_router
from covid_reports.api.routers.overview import router as overview_router
from covid_reports.api.routers.timeseries import router as timeseries_router

__all__ = [
    "countries_router",
    "overview_router",
    "timeseries_router",
]
