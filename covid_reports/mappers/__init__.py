"""
covid_reports/mappers package marker.
"""

from covid_reports.mappers.column_resolver import (
    ColumnResolver,
    MissingColumnError,
    resolve_columns,
)

__all__ = [
    "ColumnResolver",
    "MissingColumnError",
    "resolve_columns",
]
