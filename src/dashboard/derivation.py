"""Filter, sort and selection logic behind the dashboard.

Every function here is pure: records are never mutated and state
transitions return a new DashboardState. The visible list is recomputed on
every interaction; record counts are in the hundreds, so nothing is cached.
"""

import locale
import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from src.domain.models import (
    ALL_REGIONS,
    CountryRecord,
    DashboardState,
    SortDirection,
    SortKey,
)

EMPTY_STATE_MESSAGE = "No countries match your filters."

#: First-click direction per column.
DEFAULT_DIRECTIONS: dict[SortKey, SortDirection] = {
    SortKey.NAME: SortDirection.ASC,
    SortKey.CAPITAL: SortDirection.ASC,
    SortKey.POPULATION: SortDirection.DESC,
    SortKey.GDP: SortDirection.DESC,
    SortKey.CURRENCIES: SortDirection.DESC,
}


@dataclass(frozen=True)
class SortOption:
    """One entry of the sort select control."""

    key: SortKey
    direction: SortDirection
    label: str

    @property
    def value(self) -> str:
        return f"{self.key.value}:{self.direction.value}"


SORT_OPTIONS: tuple[SortOption, ...] = (
    SortOption(SortKey.POPULATION, SortDirection.DESC, "Population (high to low)"),
    SortOption(SortKey.POPULATION, SortDirection.ASC, "Population (low to high)"),
    SortOption(SortKey.GDP, SortDirection.DESC, "GDP (high to low)"),
    SortOption(SortKey.GDP, SortDirection.ASC, "GDP (low to high)"),
    SortOption(SortKey.NAME, SortDirection.ASC, "Name (A-Z)"),
    SortOption(SortKey.NAME, SortDirection.DESC, "Name (Z-A)"),
)


def compute_regions(records: Iterable[CountryRecord]) -> list[str]:
    """Return "All" followed by the distinct regions, sorted."""
    return [ALL_REGIONS, *sorted({r.region for r in records})]


def _matches(record: CountryRecord, needle: str, region: str) -> bool:
    if needle not in record.name.casefold():
        return False
    return region == ALL_REGIONS or record.region == region


def collation_key(value: str) -> str:
    """Locale-aware sort key for display strings.

    Accents and case are folded first, so "Åland" sorts next to "Aland" even
    under the C locale. ``locale.strxfrm`` then applies the LC_COLLATE order,
    which the page sets from the environment at startup (``use_system_collation``);
    until then it is the identity.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return locale.strxfrm(stripped.casefold())


def sort_records(
    records: Iterable[CountryRecord], key: SortKey, direction: SortDirection
) -> list[CountryRecord]:
    """Stable sort by one column.

    Records without a value for a numeric column (missing GDP) go last in
    both directions.
    """
    records = list(records)
    key = SortKey(key)
    reverse = SortDirection(direction) is SortDirection.DESC

    if key.is_numeric:
        present = [r for r in records if getattr(r, key.value) is not None]
        missing = [r for r in records if getattr(r, key.value) is None]
        return sorted(present, key=lambda r: getattr(r, key.value), reverse=reverse) + missing

    return sorted(records, key=lambda r: collation_key(getattr(r, key.value)), reverse=reverse)


def compute_visible(
    records: Sequence[CountryRecord], state: DashboardState
) -> list[CountryRecord]:
    """Apply the search term and region filter, then sort."""
    needle = state.search_term.strip().casefold()
    filtered = [r for r in records if _matches(r, needle, state.region_filter)]
    return sort_records(filtered, state.sort_key, state.sort_direction)


def toggle_sort(state: DashboardState, key: SortKey | str) -> DashboardState:
    """Header click: flip the direction on the active column, else switch column.

    Raises:
        ValueError: If ``key`` is not a sortable column.
    """
    key = SortKey(key)
    if key is state.sort_key:
        return replace(state, sort_direction=state.sort_direction.flipped())
    return replace(state, sort_key=key, sort_direction=DEFAULT_DIRECTIONS[key])


def set_sort(
    state: DashboardState, key: SortKey | str, direction: SortDirection | str
) -> DashboardState:
    return replace(state, sort_key=SortKey(key), sort_direction=SortDirection(direction))


def sort_option_for(state: DashboardState) -> SortOption | None:
    """The sort select entry matching the current ordering, if there is one."""
    for option in SORT_OPTIONS:
        if option.key is state.sort_key and option.direction is state.sort_direction:
            return option
    return None


def set_search(state: DashboardState, term: str) -> DashboardState:
    return replace(state, search_term=term)


def set_region(state: DashboardState, region: str) -> DashboardState:
    return replace(state, region_filter=region)


def select(state: DashboardState, record: CountryRecord) -> DashboardState:
    """Replace the selection with ``record``. There is no deselect."""
    return replace(state, selected_cca3=record.cca3)


def selected_record(
    records: Iterable[CountryRecord], state: DashboardState
) -> CountryRecord | None:
    if state.selected_cca3 is None:
        return None
    return next((r for r in records if r.cca3 == state.selected_cca3), None)
