"""
covid_reports/connectors/daily_report_connector.py

Connector for the JHU CSSE per-day CSV reports.
"""

from __future__ import annotations

import logging

import requests

from covid_reports.config import DailyReportsSettings
from covid_reports.connectors.base import BaseConnector, ConnectorRequestError, UpstreamResponseError
from covid_reports.utils.dates import to_upstream_date

logger = logging.getLogger(__name__)


class DailyReportNotFoundError(ConnectorRequestError):
    """
    Raised when upstream has no report for the requested date.
    """

    def __init__(self, date_string: str) -> None:
        super().__init__(f"Requested data for {date_string} not found.")
        self.date_string = date_string


class DailyReportConnector(BaseConnector):
    """
    Fetches raw daily report CSV text for one date.
    """

    def __init__(
        self,
        *,
        settings: DailyReportsSettings,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(
            source="jhu_csse_daily_reports",
            timeout_seconds=settings.timeout_seconds,
            session=session,
        )
        self._settings = settings

    def build_url(self, date_string: str) -> str:
        """
        Build the report URL; ``date_string`` is ``YYYY-MM-DD``.
        """

        return f"{self._settings.base_url.rstrip('/')}/{to_upstream_date(date_string)}.csv"

    def fetch_daily_csv(self, date_string: str) -> str:
        """
        Return the CSV text of the report for ``date_string``.

        Raises DailyReportNotFoundError on HTTP 404 and UpstreamResponseError
        on any other non-2xx status.
        """

        url = self.build_url(date_string)
        try:
            text = self._request_text(method="GET", url=url)
        except UpstreamResponseError as exc:
            if exc.status_code == 404:
                raise DailyReportNotFoundError(date_string) from exc
            raise

        logger.info("Daily report fetched date=%s bytes=%s", date_string, len(text))
        return text
