"""
covid_reports/connectors package marker.
"""

from covid_reports.connectors.base import (
    BaseConnector,
    ConnectorRequestError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from covid_reports.connectors.daily_report_connector import (
    DailyReportConnector,
    DailyReportNotFoundError,
)

__all__ = [
    "BaseConnector",
    "ConnectorRequestError",
    "DailyReportConnector",
    "DailyReportNotFoundError",
    "UpstreamResponseError",
    "UpstreamUnavailableError",
]
