from __future__ import annotations

import unittest

from covid_reports.domain.daily_report import ColumnIndexes
from covid_reports.mappers.column_resolver import ColumnResolver, MissingColumnError, resolve_columns


class TestColumnResolver(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = ColumnResolver()

    def test_resolves_current_header_scheme(self) -> None:
        headers = [
            "Province_State",
            "Country_Region",
            "Last_Update",
            "Confirmed",
            "Deaths",
            "Recovered",
            "Lat",
            "Long_",
        ]

        indexes = self.resolver.resolve(headers)

        self.assertEqual(indexes, ColumnIndexes(0, 1, 2, 3, 4, 5, 6, 7))

    def test_falls_back_to_legacy_header_names(self) -> None:
        headers = [
            "Country/Region",
            "Last Update",
            "Confirmed",
            "Deaths",
            "Recovered",
            "Latitude",
            "Longitude",
            "Province/State",
        ]

        indexes = self.resolver.resolve(headers)

        self.assertEqual(indexes.country_region, 0)
        self.assertEqual(indexes.last_update, 1)
        self.assertEqual(indexes.latitude, 5)
        self.assertEqual(indexes.longitude, 6)
        self.assertEqual(indexes.province_state, 7)

    def test_primary_name_wins_over_fallback(self) -> None:
        headers = [
            "Country/Region",
            "Country_Region",
            "Last_Update",
            "Confirmed",
            "Deaths",
            "Recovered",
        ]

        indexes = self.resolver.resolve(headers)

        self.assertEqual(indexes.country_region, 1)

    def test_strips_byte_order_mark_and_whitespace(self) -> None:
        headers = [
            "\ufeffProvince/State",
            "Country/Region ",
            "Last Update",
            "Confirmed",
            "Deaths",
            "Recovered\r",
        ]

        indexes = self.resolver.resolve(headers)

        self.assertEqual(indexes.province_state, 0)
        self.assertEqual(indexes.country_region, 1)
        self.assertEqual(indexes.recovered, 5)

    def test_optional_columns_resolve_to_none(self) -> None:
        headers = ["Country_Region", "Last_Update", "Confirmed", "Deaths", "Recovered"]

        indexes = resolve_columns(headers)

        self.assertIsNone(indexes.province_state)
        self.assertIsNone(indexes.latitude)
        self.assertIsNone(indexes.longitude)

    def test_missing_required_columns_raise_structured_error(self) -> None:
        headers = ["Province_State", "Country_Region", "Last_Update", "Deaths"]

        with self.assertRaises(MissingColumnError) as ctx:
            self.resolver.resolve(headers)

        self.assertEqual(ctx.exception.missing_fields, ("confirmed", "recovered"))
        payload = ctx.exception.to_dict()
        self.assertEqual(payload["missing_fields"], ["confirmed", "recovered"])
        self.assertIn("Country_Region", payload["headers"])

    def test_confirmed_has_no_fallback_name(self) -> None:
        headers = ["Country_Region", "Last_Update", "Confirmed Cases", "Deaths", "Recovered"]

        with self.assertRaises(MissingColumnError) as ctx:
            self.resolver.resolve(headers)

        self.assertEqual(ctx.exception.missing_fields, ("confirmed",))


if __name__ == "__main__":
    unittest.main()
