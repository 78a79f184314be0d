"""
Root pytest configuration.

Shared sample payloads for both upstream sources and a small record set for
the dashboard tests.
"""

import pytest

from src.domain.models import CountryRecord


@pytest.fixture
def rest_countries_payload() -> list[dict]:
    """Sample REST Countries entries (fields-filtered shape)."""
    return [
        {
            "name": {"common": "Germany", "official": "Federal Republic of Germany"},
            "cca2": "DE",
            "cca3": "DEU",
            "capital": ["Berlin"],
            "region": "Europe",
            "population": 83240525,
            "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
        },
        {
            "name": {"common": "India"},
            "cca2": "IN",
            "cca3": "IND",
            "capital": ["New Delhi"],
            "region": "Asia",
            "population": 1380004385,
            "currencies": {"INR": {"name": "Indian rupee", "symbol": "₹"}},
        },
        {
            "name": {"common": "Antarctica"},
            "cca2": "AQ",
            "cca3": "ATA",
            "region": "Antarctic",
            "population": 1000,
        },
        {
            "name": {"common": "Kosovo"},
            "cca2": "XK",
            "cca3": "",
            "capital": ["Pristina"],
            "region": "Europe",
            "population": 1775378,
            "currencies": {"EUR": {"name": "Euro"}},
        },
    ]


@pytest.fixture
def world_bank_payload() -> list:
    """Sample World Bank v2 indicator payload: [metadata, entries]."""
    return [
        {"page": 1, "pages": 1, "per_page": 20000, "total": 5},
        [
            {"country": {"id": "1W", "value": "World"}, "date": "2023", "value": 1.05e14},
            {"country": {"id": "DE", "value": "Germany"}, "date": "2023", "value": None},
            {"country": {"id": "DE", "value": "Germany"}, "date": "2022", "value": 4.08e12},
            {"country": {"id": "DE", "value": "Germany"}, "date": "2021", "value": 4.26e12},
            {"country": {"id": "IN", "value": "India"}, "date": "2023", "value": 3.55e12},
        ],
    ]


@pytest.fixture
def records() -> tuple[CountryRecord, ...]:
    """A small record set, already in aggregator order (population desc)."""
    return (
        CountryRecord("India", "IN", "IND", "New Delhi", "Asia", 1380004385, "Indian rupee", 3.55e12),
        CountryRecord("Germany", "DE", "DEU", "Berlin", "Europe", 83240525, "Euro", 4.08e12),
        CountryRecord("France", "FR", "FRA", "Paris", "Europe", 67391582, "Euro", 2.78e12),
        CountryRecord("Åland Islands", "AX", "ALA", "Mariehamn", "Europe", 29458, "Euro", None),
        CountryRecord("Antarctica", "AQ", "ATA", "—", "Antarctic", 1000, "—", None),
    )
