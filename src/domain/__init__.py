"""Domain types shared by the aggregator and the dashboard."""

from src.domain.models import (
    ALL_REGIONS,
    PLACEHOLDER,
    CountryRecord,
    DashboardState,
    SortDirection,
    SortKey,
)

__all__ = [
    "ALL_REGIONS",
    "PLACEHOLDER",
    "CountryRecord",
    "DashboardState",
    "SortDirection",
    "SortKey",
]
