"""Join REST Countries metadata with World Bank GDP into CountryRecords.

GDP join policy (first-wins):
    The World Bank returns each country's series most-recent-year-first.
    ``pick_latest_gdp`` keeps the FIRST non-null value seen per country code
    and ignores every later entry for that code. It does not compare years,
    so the result is only "latest" while the upstream keeps that ordering.

GDP key scheme:
    World Bank entries are keyed by ``country.id``, an ISO alpha-2 code, and
    are matched exactly against ``cca2``. Aggregates such as "1W" (World) or
    "ZJ" (Latin America) never match a country and are ignored.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from src.domain.models import DEFAULT_REGION, PLACEHOLDER, CountryRecord
from src.shared.config import Config
from src.shared.utils import setup_logger

#: Separator for multi-currency labels, e.g. "Euro, Swiss franc".
CURRENCY_SEPARATOR = ", "


def pick_latest_gdp(entries: Iterable[Mapping[str, Any]]) -> dict[str, float]:
    """Map country code to its first non-null GDP value in source order."""
    gdp_by_code: dict[str, float] = {}
    for entry in entries:
        code = (entry.get("country") or {}).get("id")
        value = entry.get("value")
        if not code or value is None:
            continue
        if code not in gdp_by_code:
            gdp_by_code[code] = float(value)
    return gdp_by_code


def build_currency_label(currencies: Mapping[str, Mapping[str, Any]] | None) -> str:
    """Join currency names with ", ", or return the placeholder when absent."""
    if not currencies:
        return PLACEHOLDER
    names = [c.get("name") for c in currencies.values() if c.get("name")]
    return CURRENCY_SEPARATOR.join(names) if names else PLACEHOLDER


def _to_population(value: Any) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def to_country_record(
    entry: Mapping[str, Any], gdp_by_code: Mapping[str, float]
) -> CountryRecord | None:
    """Build a CountryRecord from one metadata entry.

    Returns:
        None when either ISO code is missing, otherwise the record.
    """
    cca2 = entry.get("cca2")
    cca3 = entry.get("cca3")
    if not cca2 or not cca3:
        return None

    name = (entry.get("name") or {}).get("common") or cca3
    capitals = entry.get("capital") or []

    return CountryRecord(
        name=name,
        cca2=cca2,
        cca3=cca3,
        capital=capitals[0] if capitals else PLACEHOLDER,
        region=entry.get("region") or DEFAULT_REGION,
        population=_to_population(entry.get("population")),
        currencies=build_currency_label(entry.get("currencies")),
        gdp=gdp_by_code.get(cca2),
    )


def merge_countries(
    countries: Iterable[Mapping[str, Any]],
    gdp_entries: Iterable[Mapping[str, Any]],
    logger: logging.Logger | None = None,
) -> tuple[CountryRecord, ...]:
    """Join metadata and GDP entries into records sorted by population, descending.

    Entries without both ISO codes are dropped. A repeated ``cca3`` keeps its
    first occurrence.

    Args:
        countries: REST Countries entries.
        gdp_entries: World Bank indicator entries, in source order.
        logger: Logger for the merge summary (defaults to a module logger
            configured through setup_logger).
    """
    logger = logger or setup_logger(__name__, level=Config.LOG_LEVEL)
    gdp_by_code = pick_latest_gdp(gdp_entries)

    records: list[CountryRecord] = []
    seen: set[str] = set()
    dropped = 0
    for entry in countries:
        record = to_country_record(entry, gdp_by_code)
        if record is None:
            dropped += 1
            continue
        if record.cca3 in seen:
            logger.warning("Duplicate cca3 %s ignored", record.cca3)
            continue
        seen.add(record.cca3)
        records.append(record)

    if dropped:
        logger.info("Dropped %d entries without ISO codes", dropped)

    matched = sum(1 for r in records if r.gdp is not None)
    logger.info("Merged %d countries, %d with GDP", len(records), matched)

    return tuple(sorted(records, key=lambda r: r.population, reverse=True))
