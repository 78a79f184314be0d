"""Table presentation of the visible records."""

from collections.abc import Sequence

import pandas as pd
import streamlit as st

from src.dashboard.derivation import EMPTY_STATE_MESSAGE
from src.domain.models import CountryRecord

NOT_AVAILABLE = "Not available"
NO_SELECTION_BADGE = "Select a country below"

TABLE_COLUMNS = ["Country", "Population", "GDP", "Capital", "Currency", "Region"]

_COMPACT_SUFFIXES = ("", "K", "M", "B", "T")


def format_compact(value: float) -> str:
    """Compact notation with at most one fraction digit, e.g. 1.4B or 331.9M."""
    sign = "-" if value < 0 else ""
    scaled = abs(float(value))
    magnitude = 0
    while scaled >= 1000 and magnitude < len(_COMPACT_SUFFIXES) - 1:
        scaled /= 1000
        magnitude += 1

    rounded = round(scaled, 1)
    # 999.96K rounds up to 1000.0K; show it as 1M
    if rounded >= 1000 and magnitude < len(_COMPACT_SUFFIXES) - 1:
        rounded = round(rounded / 1000, 1)
        magnitude += 1

    text = f"{rounded:.1f}".rstrip("0").rstrip(".")
    return f"{sign}{text}{_COMPACT_SUFFIXES[magnitude]}"


def format_usd(value: float | None) -> str:
    """Whole US dollars with thousands separators; missing or zero GDP is not available."""
    if not value:
        return NOT_AVAILABLE
    return f"${value:,.0f}"


def to_table_frame(records: Sequence[CountryRecord]) -> pd.DataFrame:
    """Table frame, one row per record, indexed by cca3.

    Population and GDP stay numeric so the grid sorts them by value;
    missing GDP becomes NaN. Display formatting is in ``table_column_config``.
    """
    rows = [
        {
            "Country": r.name,
            "Population": r.population,
            "GDP": r.gdp,
            "Capital": r.capital,
            "Currency": r.currencies,
            "Region": r.region,
        }
        for r in records
    ]
    index = pd.Index([r.cca3 for r in records], name="cca3")
    frame = pd.DataFrame(rows, columns=TABLE_COLUMNS, index=index)
    return frame.astype({"Population": "int64", "GDP": "float64"})


def table_column_config() -> dict[str, dict]:
    """Streamlit column settings for the numeric columns."""
    return {
        "Population": st.column_config.NumberColumn("Population", format="compact"),
        "GDP": st.column_config.NumberColumn("GDP", format="dollar"),
    }



def empty_state_message(records: Sequence[CountryRecord]) -> str | None:
    """Message shown in place of the table body when nothing matches."""
    return EMPTY_STATE_MESSAGE if not records else None


def selection_badge(record: CountryRecord | None) -> str:
    if record is None:
        return NO_SELECTION_BADGE
    return f"{record.name} · {record.capital}"


def selection_details(record: CountryRecord | None) -> str | None:
    """One-line population and GDP summary shown under the badge."""
    if record is None:
        return None
    return f"Population {format_compact(record.population)} · GDP {format_usd(record.gdp)}"
