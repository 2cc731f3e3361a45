"""
Fetch one daily report from CLI and print country aggregates or totals.
"""

from __future__ import annotations

import argparse
import asyncio
import json

from covid_reports.connectors.base import ConnectorRequestError
from covid_reports.mappers.column_resolver import MissingColumnError
from covid_reports.schemas.daily_report import CountryDataResponse, OverviewResponse
from covid_reports.services.aggregation_service import reduce_overview
from covid_reports.services.daily_report_service import get_daily_report_service


async def _run(date_string: str | None, country: str | None, overview: bool) -> object:
    service = get_daily_report_service()
    date_string = date_string or service.current_date_string()

    if country is not None:
        aggregate = await service.get_daily_values_for_country(country, date_string)
        return None if aggregate is None else CountryDataResponse.from_domain(aggregate).model_dump()

    snapshot = await service.get_daily_values(date_string)
    if overview:
        return OverviewResponse.from_domain(reduce_overview(snapshot)).model_dump()
    return [CountryDataResponse.from_domain(aggregate).model_dump() for aggregate in snapshot]


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch and aggregate one JHU CSSE daily report.")
    parser.add_argument(
        "--date",
        dest="date",
        default=None,
        help="Report date in YYYY-MM-DD format. Defaults to yesterday.",
    )
    parser.add_argument(
        "--country",
        dest="country",
        default=None,
        help="Optional country name (case-insensitive).",
    )
    parser.add_argument(
        "--overview",
        action="store_true",
        help="Print global totals instead of per-country rows.",
    )
    args = parser.parse_args()

    try:
        payload = asyncio.run(_run(args.date, args.country, args.overview))
    except (ConnectorRequestError, MissingColumnError, ValueError) as exc:
        print(json.dumps({"error": str(exc)}, indent=2))
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
