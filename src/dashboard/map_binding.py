"""Boundary geometry loading and selection highlight lookup."""

import logging

import geopandas as gpd

from src.shared.config import Config
from src.shared.utils import setup_logger

#: ISO alpha-3 like properties, in order of preference. ADM0_A3 comes first
#: because Natural Earth sets ISO_A3 to "-99" for France and Norway.
ISO3_COLUMNS: tuple[str, ...] = ("ADM0_A3", "ISO_A3", "SOV_A3")


def _default_logger() -> logging.Logger:
    return setup_logger(__name__, level=Config.LOG_LEVEL)


def load_boundaries(url: str, logger: logging.Logger | None = None) -> gpd.GeoDataFrame:
    """Read per-country polygons from a GeoJSON or TopoJSON document."""
    logger = logger or _default_logger()
    boundaries = gpd.read_file(url)
    logger.info("Loaded %d boundary features from %s", len(boundaries), url)
    return boundaries


def pick_iso3_column(boundaries: gpd.GeoDataFrame) -> str:
    """Return the property used to match features against CountryRecord.cca3.

    Raises:
        ValueError: If no known ISO3 column is present.
    """
    for column in ISO3_COLUMNS:
        if column in boundaries.columns:
            return column
    raise ValueError(f"No ISO3 column found ({' / '.join(ISO3_COLUMNS)}).")


def resolve_highlight(
    boundaries: gpd.GeoDataFrame,
    cca3: str | None,
    iso_column: str,
    logger: logging.Logger | None = None,
) -> gpd.GeoDataFrame:
    """Features to highlight for the selected country.

    An empty frame means nothing is highlighted, either because there is no
    selection or because the boundary set has no feature for that code.

    Args:
        boundaries: Per-country features.
        cca3: Selected country code, or None.
        iso_column: Feature property holding the ISO3 code.
        logger: Logger for the no-match debug line.
    """
    if cca3 is None:
        return boundaries.iloc[0:0]

    matches = boundaries[boundaries[iso_column] == cca3]
    if matches.empty:
        (logger or _default_logger()).debug("No boundary feature with %s=%s", iso_column, cca3)
    return matches
