"""
covid_reports/services package marker.
"""

from covid_reports.services.aggregation_service import find_country, reduce_overview
from covid_reports.services.daily_report_service import DailyReportService, get_daily_report_service
from covid_reports.services.snapshot_cache import SnapshotCache
from covid_reports.services.timeseries_service import TimeseriesService, get_timeseries_service

__all__ = [
    "DailyReportService",
    "SnapshotCache",
    "TimeseriesService",
    "find_country",
    "get_daily_report_service",
    "get_timeseries_service",
    "reduce_overview",
]
