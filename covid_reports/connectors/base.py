"""
covid_reports/connectors/base.py

Base connector abstraction and shared HTTP mechanics.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class ConnectorRequestError(RuntimeError):
    """
    Raised when a connector cannot fetch data from its upstream source.
    """


class UpstreamResponseError(ConnectorRequestError):
    """
    Raised for a non-2xx upstream response. Keeps the status and body.
    """

    def __init__(self, *, source: str, status_code: int, body: str) -> None:
        super().__init__(f"{source}: upstream responded with HTTP {status_code}.")
        self.source = source
        self.status_code = status_code
        self.body = body


class UpstreamUnavailableError(ConnectorRequestError):
    """
    Raised on timeouts and connection failures. Treated as transient.
    """


class BaseConnector:
    """
    Shared HTTP behavior for upstream connectors.

    Requests are issued once; failures propagate to the caller without
    retries.
    """

    source: str

    def __init__(
        self,
        *,
        source: str,
        timeout_seconds: float,
        session: requests.Session | None = None,
    ) -> None:
        self.source = source
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds

    def _request_text(
        self,
        *,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """
        Execute an HTTP request and return response text.
        """

        response = self._request(method=method, url=url, params=params, headers=headers)
        return response.text

    def _request(
        self,
        *,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """
        Execute one HTTP request and map transport and status failures.
        """

        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
                timeout=self._timeout_seconds,
            )
        except (requests.Timeout, requests.ConnectionError) as exc:
            logger.warning(
                "Connector request unavailable source=%s url=%s error=%s",
                self.source,
                url,
                exc,
            )
            raise UpstreamUnavailableError(f"{self.source}: upstream unavailable.") from exc

        if not 200 <= response.status_code < 300:
            logger.error(
                "Connector request failed source=%s status=%s url=%s",
                self.source,
                response.status_code,
                url,
            )
            raise UpstreamResponseError(
                source=self.source,
                status_code=response.status_code,
                body=response.text,
            )
        return response
