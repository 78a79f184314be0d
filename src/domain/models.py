"""Country records and dashboard state.

Both types are frozen: the record set produced by the aggregator is never
mutated, and every dashboard interaction yields a new DashboardState.
"""

from dataclasses import dataclass
from enum import Enum

PLACEHOLDER = "—"
DEFAULT_REGION = "Other"
ALL_REGIONS = "All"


class SortKey(str, Enum):
    """Sortable table columns."""

    NAME = "name"
    POPULATION = "population"
    GDP = "gdp"
    CAPITAL = "capital"
    CURRENCIES = "currencies"

    @property
    def is_numeric(self) -> bool:
        return self in (SortKey.POPULATION, SortKey.GDP)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class CountryRecord:
    """Unified, displayable country entry built from both upstream sources."""

    name: str
    cca2: str
    cca3: str
    capital: str = PLACEHOLDER
    region: str = DEFAULT_REGION
    population: int = 0
    currencies: str = PLACEHOLDER
    gdp: float | None = None


@dataclass(frozen=True)
class DashboardState:
    """Ephemeral per-session UI state.

    The selection is held by ``cca3`` so it survives re-derivation of the
    visible list.
    """

    selected_cca3: str | None = None
    search_term: str = ""
    region_filter: str = ALL_REGIONS
    sort_key: SortKey = SortKey.POPULATION
    sort_direction: SortDirection = SortDirection.DESC
