"""
Unit tests for measurement oracles.
"""

import math
from unittest.mock import MagicMock

import pytest

from label_toolkit.layout import MeasurementTable, calculate_page_breaks, precompute_measurements
from label_toolkit.layout.measurement import resolve_height


class TestMeasurementTable:
    """Tests for the lookup-map oracle."""

    def test_call_when_recorded_then_returns_height(self):
        # Arrange
        table = MeasurementTable({("a", 0): 12})

        # Act & Assert
        assert table("a", 0) == 12.0
        assert table("a", 1) is None
        assert table("b", 0) is None

    def test_record_when_negative_height_then_raises(self):
        table = MeasurementTable()

        with pytest.raises(ValueError, match="Invalid height"):
            table.record("a", 0, -1)

    def test_record_when_not_finite_then_raises(self):
        with pytest.raises(ValueError, match="Invalid height"):
            MeasurementTable().record("a", 0, math.inf)

    def test_record_when_negative_index_then_raises(self):
        with pytest.raises(ValueError, match="element_index"):
            MeasurementTable().record("a", -1, 10)

    def test_container_protocol_when_populated_then_reports_entries(self):
        table = MeasurementTable({("a", 0): 1, ("a", 1): 2})

        assert len(table) == 2
        assert ("a", 1) in table
        assert ("a", 2) not in table
        assert sorted(table) == [("a", 0), ("a", 1)]
        assert table.get("a", 5, 7.0) == 7.0

    def test_from_dict_when_gaps_then_left_unmeasured(self):
        # Act
        table = MeasurementTable.from_dict({"a": [10, None, 30]})

        # Assert
        assert table("a", 1) is None
        assert table.to_dict() == {"a": [10.0, None, 30.0]}


class TestResolveHeight:
    """Fallback rules for oracle answers."""

    @pytest.mark.parametrize("answer", [None, -3.0, math.nan, math.inf])
    def test_resolve_when_answer_unusable_then_default(self, answer):
        assert resolve_height(lambda sid, i: answer, "a", 0, 16) == 16

    def test_resolve_when_no_oracle_then_default(self):
        assert resolve_height(None, "a", 0, 16) == 16

    def test_resolve_when_zero_then_kept(self):
        assert resolve_height(lambda sid, i: 0.0, "a", 0, 16) == 0.0


class TestPrecomputeMeasurements:
    """Caller-side memoization of an expensive oracle."""

    def test_precompute_when_called_then_queries_each_sized_element_once(
        self, make_design, section
    ):
        # Arrange
        design = make_design(
            [
                section("a", 0),
                section("folded", 1, collapsed=True),
                section("hidden", 2, visible=False),
            ],
            {"a": 3, "folded": 2, "hidden": 2},
        )
        oracle = MagicMock(side_effect=lambda sid, i: 10.0 * (i + 1))

        # Act
        table = precompute_measurements(design, oracle)

        # Assert
        assert oracle.call_count == 3
        assert table.to_dict() == {"a": [10.0, 20.0, 30.0]}

    def test_precompute_when_oracle_partial_then_skips_missing(self, make_design, section):
        design = make_design([section("a")], {"a": 3})

        table = precompute_measurements(design, lambda sid, i: None if i == 1 else 5.0)

        assert len(table) == 2
        assert ("a", 1) not in table

    def test_precompute_when_used_for_planning_then_same_plan(
        self, make_design, section, config_100
    ):
        # Arrange
        design = make_design([section("a", 0), section("b", 1)], {"a": 4, "b": 3})

        def oracle(section_id, index):
            return 35.0 if section_id == "a" else 12.0

        # Act
        table = precompute_measurements(design, oracle)

        # Assert
        assert calculate_page_breaks(design, table, config_100) == calculate_page_breaks(
            design, oracle, config_100
        )
