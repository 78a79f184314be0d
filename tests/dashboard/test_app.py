"""Page-level tests for the streamlit dashboard using AppTest."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from src.dashboard.derivation import EMPTY_STATE_MESSAGE
from src.shared.config import Config
from src.shared.exceptions import DataSourceError

APP_PATH = Path(__file__).resolve().parents[2] / "app.py"


@pytest.fixture
def local_boundaries(tmp_path, monkeypatch) -> Path:
    """Point the map at a one-feature GeoJSON file instead of the network."""
    collection = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"ADM0_A3": "IND"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[68, 8], [97, 8], [97, 35], [68, 35], [68, 8]]],
                },
            }
        ],
    }
    path = tmp_path / "boundaries.geojson"
    path.write_text(json.dumps(collection), encoding="utf-8")
    monkeypatch.setattr(Config, "BOUNDARIES_URL", str(path))
    monkeypatch.setattr(Config, "MAP_BACKEND", "plotly")
    return path


class TestDashboardPage:
    def test_load_failure_shows_page_error(self, local_boundaries):
        error = DataSourceError("worldbank", "upstream returned a non-success status", 503)
        with patch("src.dashboard.app.fetch_countries", side_effect=error):
            at = AppTest.from_file(str(APP_PATH)).run(timeout=30)

        assert not at.exception
        assert "Failed to load country data" in at.error[0].value
        assert len(at.dataframe) == 0

    def test_renders_table(self, local_boundaries, records):
        with patch("src.dashboard.app.fetch_countries", return_value=records):
            at = AppTest.from_file(str(APP_PATH)).run(timeout=30)

        assert not at.exception
        assert len(at.dataframe) == 1
        assert list(at.dataframe[0].value["Country"])[0] == "India"

    def test_no_match_shows_empty_state(self, local_boundaries, records):
        with patch("src.dashboard.app.fetch_countries", return_value=records):
            at = AppTest.from_file(str(APP_PATH)).run(timeout=30)
            at.text_input(key="search-input").input("atlantis").run(timeout=30)

        assert not at.exception
        assert at.info[0].value == EMPTY_STATE_MESSAGE
        assert len(at.dataframe) == 0

    def test_records_fetched_once_per_session(self, local_boundaries, records):
        with patch("src.dashboard.app.fetch_countries", return_value=records) as mock_fetch:
            at = AppTest.from_file(str(APP_PATH)).run(timeout=30)
            at.selectbox(key="region-select").select("Europe").run(timeout=30)

        assert mock_fetch.call_count == 1
        assert list(at.dataframe[0].value["Country"]) == ["Germany", "France", "Åland Islands"]
