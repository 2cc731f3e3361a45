"""
covid_reports/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_DAILY_REPORTS_BASE_URL = (
    "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/"
    "csse_covid_19_data/csse_covid_19_daily_reports"
)


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class DailyReportsSettings:
    """
    Upstream daily report source settings.
    """

    base_url: str = DEFAULT_DAILY_REPORTS_BASE_URL
    timeout_seconds: float = 15.0


@dataclass(frozen=True)
class SnapshotCacheSettings:
    """
    Date-keyed snapshot cache settings. ``max_entries=0`` means unbounded.
    """

    max_entries: int = 0


@dataclass(frozen=True)
class TimeseriesSettings:
    """
    Limits for time series assembled from daily snapshots.
    """

    default_days: int = 7
    max_days: int = 90


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"


@lru_cache(maxsize=1)
def get_daily_reports_settings() -> DailyReportsSettings:
    """
    Return cached upstream settings from environment variables.
    """

    return DailyReportsSettings(
        base_url=_get_str_env("DAILY_REPORTS_BASE_URL", DEFAULT_DAILY_REPORTS_BASE_URL).rstrip("/"),
        timeout_seconds=max(1.0, _get_float_env("DAILY_REPORTS_TIMEOUT_SECONDS", 15.0)),
    )


@lru_cache(maxsize=1)
def get_snapshot_cache_settings() -> SnapshotCacheSettings:
    """
    Return cached snapshot cache settings from environment variables.
    """

    return SnapshotCacheSettings(
        max_entries=max(0, _get_int_env("SNAPSHOT_CACHE_MAX_ENTRIES", 0)),
    )


@lru_cache(maxsize=1)
def get_timeseries_settings() -> TimeseriesSettings:
    """
    Return cached time series settings from environment variables.
    """

    max_days = max(1, _get_int_env("TIMESERIES_MAX_DAYS", 90))
    return TimeseriesSettings(
        default_days=min(max_days, max(1, _get_int_env("TIMESERIES_DEFAULT_DAYS", 7))),
        max_days=max_days,
    )


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    return LoggingSettings(level=_get_str_env("LOG_LEVEL", "INFO").upper())
