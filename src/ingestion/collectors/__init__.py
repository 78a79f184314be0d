"""Collectors package."""

from src.ingestion.collectors.base_collector import BaseCollector
from src.ingestion.collectors.rest_countries_collector import RestCountriesCollector
from src.ingestion.collectors.world_bank_collector import WorldBankCollector

__all__ = ["BaseCollector", "RestCountriesCollector", "WorldBankCollector"]
