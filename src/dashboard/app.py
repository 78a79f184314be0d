"""Streamlit page: controls, map panel and country table.

Run with ``streamlit run app.py`` from the repository root.

Streamlit re-executes this script on every interaction. The record set is
fetched once per browser session and kept in ``st.session_state`` together
with the DashboardState; everything else is re-derived on each run.
"""

import hashlib
import locale

import geopandas as gpd
import streamlit as st

from src.dashboard.derivation import (
    SORT_OPTIONS,
    SortOption,
    compute_regions,
    compute_visible,
    select,
    selected_record,
    set_region,
    set_search,
    set_sort,
    sort_option_for,
    toggle_sort,
)
from src.dashboard.map_binding import load_boundaries, pick_iso3_column
from src.dashboard.renderers import get_renderer
from src.dashboard.table import (
    empty_state_message,
    selection_badge,
    selection_details,
    table_column_config,
    to_table_frame,
)
from src.domain.models import ALL_REGIONS, CountryRecord, DashboardState, SortDirection, SortKey
from src.ingestion.aggregator import fetch_countries
from src.shared.config import Config
from src.shared.exceptions import DataSourceError
from src.shared.utils import setup_logger

logger = setup_logger("dashboard", level=Config.LOG_LEVEL)

RECORDS_KEY = "country_records"
STATE_KEY = "dashboard_state"

TITLE = "World data explorer"
SUBTITLE = (
    "Browse population, GDP, capitals, and currencies. "
    "Select a row to highlight the country on the map."
)

SORT_BUTTONS: tuple[tuple[SortKey, str], ...] = (
    (SortKey.NAME, "Country"),
    (SortKey.POPULATION, "Population"),
    (SortKey.GDP, "GDP"),
    (SortKey.CAPITAL, "Capital"),
    (SortKey.CURRENCIES, "Currency"),
)


def use_system_collation() -> None:
    """Make ``locale.strxfrm`` follow the user's LC_COLLATE for the name sorts."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning("Could not apply the system collation, keeping the C locale: %s", e)


def load_records() -> tuple[CountryRecord, ...]:
    """Fetch the record set on first use in this session."""
    if RECORDS_KEY not in st.session_state:
        st.session_state[RECORDS_KEY] = fetch_countries()
    return st.session_state[RECORDS_KEY]


@st.cache_resource(show_spinner=False)
def load_map_geometry(url: str) -> tuple[gpd.GeoDataFrame, str]:
    boundaries = load_boundaries(url, logger)
    return boundaries, pick_iso3_column(boundaries)


def _sort_label(option: SortOption | None) -> str:
    return option.label if option is not None else "Custom column order"


def render_controls(records: tuple[CountryRecord, ...], state: DashboardState) -> DashboardState:
    search_col, region_col, sort_col = st.columns([2, 1, 1])

    term = search_col.text_input(
        "Search countries",
        key="search-input",
        placeholder="Search countries",
        label_visibility="collapsed",
    )
    state = set_search(state, term)

    regions = compute_regions(records)
    region = region_col.selectbox(
        "Region", regions, key="region-select", label_visibility="collapsed"
    )
    state = set_region(state, region or ALL_REGIONS)

    current = sort_option_for(state)
    options: list[SortOption | None] = list(SORT_OPTIONS)
    if current is None:
        options.insert(0, None)
    chosen = sort_col.selectbox(
        "Sort",
        options,
        index=options.index(current),
        format_func=_sort_label,
        label_visibility="collapsed",
    )
    if chosen is not None:
        state = set_sort(state, chosen.key, chosen.direction)

    arrow = "▲" if state.sort_direction is SortDirection.ASC else "▼"
    for col, (key, label) in zip(st.columns(len(SORT_BUTTONS)), SORT_BUTTONS):
        text = f"{label} {arrow}" if key is state.sort_key else label
        if col.button(text, key=f"sort-{key.value}", use_container_width=True):
            st.session_state[STATE_KEY] = toggle_sort(state, key)
            st.rerun()

    return state


def _table_key(state: DashboardState) -> str:
    """Widget key that changes with the filters, so row selection resets with them."""
    raw = "|".join(
        [state.search_term, state.region_filter, state.sort_key.value, state.sort_direction.value]
    )
    return "table-" + hashlib.md5(raw.encode("utf-8")).hexdigest()[:12]


def render_table(visible: list[CountryRecord], state: DashboardState) -> DashboardState:
    message = empty_state_message(visible)
    if message:
        st.info(message)
        return state

    event = st.dataframe(
        to_table_frame(visible),
        key=_table_key(state),
        column_config=table_column_config(),
        on_select="rerun",
        selection_mode="single-row",
        hide_index=True,
        use_container_width=True,
    )
    rows = event.selection.rows
    if rows:
        state = select(state, visible[rows[0]])
    return state


def render_map(records: tuple[CountryRecord, ...], state: DashboardState) -> None:
    header_col, badge_col = st.columns([3, 1])
    header_col.subheader("Interactive world map")
    header_col.caption("Tap a country in the table to spotlight it on the map.")
    selected = selected_record(records, state)
    badge_col.markdown(f"**{selection_badge(selected)}**")
    details = selection_details(selected)
    if details:
        badge_col.caption(details)

    try:
        boundaries, iso_column = load_map_geometry(Config.BOUNDARIES_URL)
    except (OSError, RuntimeError, ValueError) as e:
        logger.error("Failed to load boundaries from %s: %s", Config.BOUNDARIES_URL, e)
        st.warning("The world map could not be loaded.")
        return

    get_renderer(Config.MAP_BACKEND).render(boundaries, iso_column, state.selected_cca3)


def main() -> None:
    Config.validate()
    use_system_collation()
    st.set_page_config(page_title=TITLE, layout="wide")
    st.title(TITLE)
    st.caption(SUBTITLE)

    try:
        with st.spinner("Loading country data..."):
            records = load_records()
    except DataSourceError as e:
        logger.error("Country data unavailable: %s", e)
        st.error(f"Failed to load country data. {e}")
        st.stop()

    state = st.session_state.get(STATE_KEY, DashboardState())

    # The table decides the selection, but the map is drawn above it.
    map_panel = st.container(border=True)
    with st.container(border=True):
        state = render_controls(records, state)
        visible = compute_visible(records, state)
        state = render_table(visible, state)

    st.session_state[STATE_KEY] = state
    with map_panel:
        render_map(records, state)
