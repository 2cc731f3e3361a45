"""
covid_reports/parsers package marker.
"""

from covid_reports.parsers.daily_report_parser import (
    MIN_ROW_FIELDS,
    DailyReportParser,
    merge_aggregates,
    parse_daily_report,
    parse_number,
)

__all__ = [
    "MIN_ROW_FIELDS",
    "DailyReportParser",
    "merge_aggregates",
    "parse_daily_report",
    "parse_number",
]
