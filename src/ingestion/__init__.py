"""Data ingestion module - collectors, the country merger and the aggregator."""

from src.ingestion.aggregator import CountryAggregator, fetch_countries
from src.ingestion.collectors import (
    BaseCollector,
    RestCountriesCollector,
    WorldBankCollector,
)

__all__ = [
    "BaseCollector",
    "CountryAggregator",
    "RestCountriesCollector",
    "WorldBankCollector",
    "fetch_countries",
]
