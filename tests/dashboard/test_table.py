"""Tests for table formatting and presentation helpers."""

import math

import pytest

from src.dashboard.table import (
    NOT_AVAILABLE,
    TABLE_COLUMNS,
    empty_state_message,
    format_compact,
    format_usd,
    selection_badge,
    selection_details,
    table_column_config,
    to_table_frame,
)


class TestFormatCompact:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (1380004385, "1.4B"),
            (83240525, "83.2M"),
            (29458, "29.5K"),
            (1000, "1K"),
            (950, "950"),
            (0, "0"),
            (999_960, "1M"),
            (2.5e13, "25T"),
        ],
    )
    def test_values(self, value, expected):
        assert format_compact(value) == expected


class TestFormatUsd:
    def test_whole_dollars_with_separators(self):
        assert format_usd(4.08e12) == "$4,080,000,000,000"

    def test_rounds_to_whole_dollars(self):
        assert format_usd(1234.6) == "$1,235"

    @pytest.mark.parametrize("value", [None, 0])
    def test_missing_is_not_available(self, value):
        assert format_usd(value) == NOT_AVAILABLE


class TestToTableFrame:
    def test_columns_and_index(self, records):
        frame = to_table_frame(records)
        assert list(frame.columns) == TABLE_COLUMNS
        assert frame.index.name == "cca3"
        assert list(frame.index) == ["IND", "DEU", "FRA", "ALA", "ATA"]

    def test_row_values(self, records):
        row = to_table_frame(records).loc["DEU"]
        assert row["Country"] == "Germany"
        assert row["Population"] == 83240525
        assert row["GDP"] == 4.08e12
        assert row["Capital"] == "Berlin"
        assert row["Currency"] == "Euro"
        assert row["Region"] == "Europe"

    def test_numeric_columns_stay_numeric(self, records):
        frame = to_table_frame(records)
        assert frame["Population"].dtype == "int64"
        assert frame["GDP"].dtype == "float64"
        # Sorting the grid column orders by value, not by text
        assert list(frame.sort_values("Population").index[:2]) == ["ATA", "ALA"]

    def test_missing_gdp_is_nan(self, records):
        assert math.isnan(to_table_frame(records).loc["ATA", "GDP"])

    def test_empty(self):
        frame = to_table_frame([])
        assert frame.empty
        assert list(frame.columns) == TABLE_COLUMNS


class TestPresentationHelpers:
    def test_empty_state_message_only_when_empty(self, records):
        assert empty_state_message([]) == "No countries match your filters."
        assert empty_state_message(records) is None

    def test_selection_badge(self, records):
        assert selection_badge(records[0]) == "India · New Delhi"
        assert selection_badge(None) == "Select a country below"

    def test_selection_details(self, records):
        assert selection_details(records[1]) == "Population 83.2M · GDP $4,080,000,000,000"
        assert selection_details(records[4]) == f"Population 1K · GDP {NOT_AVAILABLE}"
        assert selection_details(None) is None


class TestTableColumnConfig:
    def test_numeric_columns_formatted(self):
        config = table_column_config()
        assert config["Population"]["type_config"]["format"] == "compact"
        assert config["GDP"]["type_config"]["format"] == "dollar"
        assert config["GDP"]["type_config"]["type"] == "number"
