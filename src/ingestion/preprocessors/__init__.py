"""Preprocessors that reshape raw source payloads into country records."""

from src.ingestion.preprocessors.country_merger import (
    build_currency_label,
    merge_countries,
    pick_latest_gdp,
    to_country_record,
)

__all__ = [
    "build_currency_label",
    "merge_countries",
    "pick_latest_gdp",
    "to_country_record",
]
