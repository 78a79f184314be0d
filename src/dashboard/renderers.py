"""Map rendering adapters.

Both adapters draw the same thing: every boundary feature in a neutral
fill, and the selected country's feature (if any) in the highlight colour.
PlotlyMapRenderer draws a vector choropleth; FoliumMapRenderer draws the
features over raster tiles.
"""

from abc import ABC, abstractmethod

import folium
import geopandas as gpd
import plotly.graph_objects as go
import streamlit as st
from streamlit_folium import st_folium

from src.dashboard.map_binding import resolve_highlight
from src.shared.config import Config
from src.shared.utils import setup_logger

BASE_FILL = "#d9e2ec"
HIGHLIGHT_FILL = "#38bdf8"
BORDER_COLOR = "#ffffff"
MAP_HEIGHT = 460


class MapRenderer(ABC):
    """Draws the boundary set with the selected country highlighted."""

    NAME: str

    def __init__(self) -> None:
        self.logger = setup_logger(self.__class__.__name__, level=Config.LOG_LEVEL)

    @abstractmethod
    def render(
        self, boundaries: gpd.GeoDataFrame, iso_column: str, selected_cca3: str | None
    ) -> None:
        ...


class PlotlyMapRenderer(MapRenderer):
    NAME = "plotly"

    def build_figure(
        self, boundaries: gpd.GeoDataFrame, iso_column: str, selected_cca3: str | None
    ) -> go.Figure:
        highlight = resolve_highlight(boundaries, selected_cca3, iso_column, self.logger)
        highlighted = set(highlight[iso_column])
        codes = boundaries[iso_column].tolist()

        fig = go.Figure(
            go.Choropleth(
                geojson=boundaries.__geo_interface__,
                featureidkey=f"properties.{iso_column}",
                locations=codes,
                z=[1 if code in highlighted else 0 for code in codes],
                zmin=0,
                zmax=1,
                colorscale=[[0, BASE_FILL], [1, HIGHLIGHT_FILL]],
                showscale=False,
                marker_line_color=BORDER_COLOR,
                marker_line_width=0.6,
                hoverinfo="location",
            )
        )
        fig.update_geos(
            visible=False,
            showcountries=False,
            projection_type="natural earth",
            fitbounds="locations",
        )
        fig.update_layout(
            height=MAP_HEIGHT,
            margin={"r": 0, "t": 0, "l": 0, "b": 0},
            geo_bgcolor="rgba(0,0,0,0)",
            paper_bgcolor="rgba(0,0,0,0)",
        )
        return fig

    def render(self, boundaries, iso_column, selected_cca3) -> None:
        fig = self.build_figure(boundaries, iso_column, selected_cca3)
        st.plotly_chart(fig, use_container_width=True)


class FoliumMapRenderer(MapRenderer):
    NAME = "folium"

    TILES = "CartoDB positron"

    def build_map(
        self, boundaries: gpd.GeoDataFrame, iso_column: str, selected_cca3: str | None
    ) -> folium.Map:
        fmap = folium.Map(location=[20, 0], zoom_start=2, tiles=self.TILES)

        def style(feature):
            is_selected = feature["properties"].get(iso_column) == selected_cca3
            return {
                "fillColor": HIGHLIGHT_FILL if is_selected else BASE_FILL,
                "color": BORDER_COLOR,
                "weight": 0.6,
                "fillOpacity": 0.9 if is_selected else 0.6,
            }

        folium.GeoJson(
            boundaries[[iso_column, "geometry"]],
            style_function=style,
            tooltip=folium.GeoJsonTooltip(fields=[iso_column], labels=False),
        ).add_to(fmap)

        highlight = resolve_highlight(boundaries, selected_cca3, iso_column, self.logger)
        if not highlight.empty:
            minx, miny, maxx, maxy = highlight.total_bounds
            fmap.fit_bounds([[miny, minx], [maxy, maxx]])
        return fmap

    def render(self, boundaries, iso_column, selected_cca3) -> None:
        fmap = self.build_map(boundaries, iso_column, selected_cca3)
        st_folium(fmap, height=MAP_HEIGHT, use_container_width=True, returned_objects=[])


_RENDERERS: dict[str, type[MapRenderer]] = {
    PlotlyMapRenderer.NAME: PlotlyMapRenderer,
    FoliumMapRenderer.NAME: FoliumMapRenderer,
}


def get_renderer(name: str) -> MapRenderer:
    """Instantiate the renderer registered under ``name``.

    Raises:
        ValueError: If no renderer has that name.
    """
    try:
        return _RENDERERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown map backend '{name}'. Choose from: {', '.join(_RENDERERS)}"
        ) from None
