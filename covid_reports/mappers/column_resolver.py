"""
covid_reports/mappers/column_resolver.py

Header-driven column resolution for upstream daily report files.

The upstream dataset renamed its columns once (``Country/Region`` became
``Country_Region`` and so on), so every field has a primary name and at most
one historical fallback name.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from covid_reports.domain.daily_report import ColumnIndexes

BYTE_ORDER_MARK = "\ufeff"

DEFAULT_COLUMN_NAMES: dict[str, tuple[str, ...]] = {
    "province_state": ("Province_State", "Province/State"),
    "country_region": ("Country_Region", "Country/Region"),
    "last_update": ("Last_Update", "Last Update"),
    "confirmed": ("Confirmed",),
    "deaths": ("Deaths",),
    "recovered": ("Recovered",),
    "latitude": ("Lat", "Latitude"),
    "longitude": ("Long_", "Longitude"),
}

REQUIRED_FIELDS: tuple[str, ...] = (
    "country_region",
    "last_update",
    "confirmed",
    "deaths",
    "recovered",
)


def normalize_header(header: str) -> str:
    """
    Strip whitespace and a leading byte-order mark from one header cell.
    """

    return header.strip().lstrip(BYTE_ORDER_MARK).strip()


class MissingColumnError(ValueError):
    """
    Raised when a required column is absent under every accepted name.
    """

    def __init__(self, *, missing_fields: Sequence[str], headers: Sequence[str]) -> None:
        self.missing_fields = tuple(missing_fields)
        self.headers = tuple(headers)
        super().__init__(
            "Daily report header is missing required columns: "
            + ", ".join(self.missing_fields)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": str(self),
            "missing_fields": list(self.missing_fields),
            "headers": list(self.headers),
        }


class ColumnResolver:
    """
    Resolves semantic fields to column positions from a header row.
    """

    def __init__(
        self,
        *,
        column_names: Mapping[str, Sequence[str]] | None = None,
        required_fields: Sequence[str] = REQUIRED_FIELDS,
    ) -> None:
        self._column_names: dict[str, tuple[str, ...]] = {
            field: tuple(names)
            for field, names in (column_names or DEFAULT_COLUMN_NAMES).items()
        }
        self._required_fields = tuple(required_fields)

    def resolve(self, header_row: Sequence[str]) -> ColumnIndexes:
        """
        Return the column index of every field, trying the primary name first
        and then its single fallback.

        Raises MissingColumnError listing every required field that could not
        be found. Optional fields resolve to ``None``.
        """

        headers = [normalize_header(cell) for cell in header_row]
        positions: dict[str, int | None] = {}
        missing: list[str] = []

        for field, names in self._column_names.items():
            positions[field] = self._find_first(headers, names)
            if positions[field] is None and field in self._required_fields:
                missing.append(field)

        if missing:
            raise MissingColumnError(missing_fields=missing, headers=headers)

        return ColumnIndexes(**positions)

    @staticmethod
    def _find_first(headers: list[str], names: Sequence[str]) -> int | None:
        for name in names:
            try:
                return headers.index(name)
            except ValueError:
                continue
        return None


def resolve_columns(header_row: Sequence[str]) -> ColumnIndexes:
    """
    Resolve columns with the default naming schemes.
    """

    return ColumnResolver().resolve(header_row)
