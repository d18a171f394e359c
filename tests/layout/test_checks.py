"""
Unit tests for page plan checking.
"""

import pytest

from label_toolkit.core.models import LabelSection
from label_toolkit.layout import (
    PageBreakResult,
    PageContent,
    SectionSlice,
    calculate_page_breaks,
    check_page_breaks,
)


@pytest.fixture
def body():
    return LabelSection("body")


def _page(index, *slices):
    return PageContent(index, tuple(slices), sum(s.height for s in slices))


class TestCheckPageBreaks:
    """Each guarantee is reported when broken."""

    def test_check_when_planner_output_then_no_issues(self, make_design, section, heights, config_100):
        # Arrange
        design = make_design([section("a", 0), section("b", 1, collapsed=True)], {"a": 5, "b": 2})
        measure = heights({"a": [40, 40, 40, 300, 10]})
        result = calculate_page_breaks(design, measure, config_100)

        # Act & Assert
        assert check_page_breaks(design, result, measure, config_100) == []

    def test_check_when_no_pages_then_reports(self, make_design):
        assert check_page_breaks(make_design([]), PageBreakResult(pages=())) == ["Plan has no pages"]

    def test_check_when_ranges_have_gap_then_reports(self, make_design, body, config_100):
        # Arrange
        design = make_design([body], {"body": 4})
        result = PageBreakResult(pages=(
            _page(0, SectionSlice("body", body, (0, 1), True, 4, 40)),
            _page(1, SectionSlice("body", body, (2, 4), True, 4, 40)),
        ))

        # Act
        issues = check_page_breaks(design, result, None, config_100)

        # Assert
        assert issues == ["Section 'body' slice (2, 4) does not start at element 1"]

    def test_check_when_elements_missing_then_reports(self, make_design, body, config_100):
        design = make_design([body], {"body": 4})
        result = PageBreakResult(pages=(_page(0, SectionSlice("body", body, (0, 3), True, 4, 60)),))

        issues = check_page_breaks(design, result, None, config_100)

        assert issues == ["Section 'body' covers 3 of 4 elements"]

    def test_check_when_hidden_section_placed_then_reports(self, make_design, config_100):
        # Arrange
        hidden = LabelSection("secret", visible=False)
        design = make_design([hidden])
        result = PageBreakResult(pages=(_page(0, SectionSlice("secret", hidden, (0, 0), False, 0, 21)),))

        # Act
        issues = check_page_breaks(design, result, None, config_100)

        # Assert
        assert issues == ["Page 0 holds hidden or unknown section 'secret'"]

    def test_check_when_section_missing_then_reports(self, make_design, body, config_100):
        design = make_design([body])

        issues = check_page_breaks(design, PageBreakResult(pages=(PageContent(0),)), None, config_100)

        assert issues == ["Section 'body' is missing from the plan"]

    def test_check_when_page_index_skips_then_reports(self, make_design, body, config_100):
        design = make_design([body])
        result = PageBreakResult(pages=(_page(1, SectionSlice("body", body, (0, 0), False, 0, 21)),))

        issues = check_page_breaks(design, result, None, config_100)

        assert issues == ["Page at position 0 has index 1"]

    def test_check_when_page_overflows_with_several_slices_then_reports(
        self, make_design, section, config_100
    ):
        # Arrange
        a, b = section("a", 0), section("b", 1)
        design = make_design([a, b], {"a": 1, "b": 1})
        result = PageBreakResult(pages=(
            _page(0, SectionSlice("a", a, (0, 1), False, 1, 60), SectionSlice("b", b, (0, 1), False, 1, 60)),
        ))

        # Act
        issues = check_page_breaks(design, result, None, config_100)

        # Assert
        assert issues == ["Page 0 overflows: 120px used, 100px available"]

    def test_check_when_oversized_singleton_then_allowed(self, make_design, body, heights, config_100):
        design = make_design([body], {"body": 1})
        measure = heights({"body": [500]})
        result = PageBreakResult(pages=(_page(0, SectionSlice("body", body, (0, 1), False, 1, 521)),))

        assert check_page_breaks(design, result, measure, config_100) == []

    def test_check_when_single_element_would_fit_empty_page_then_overflow_reported(
        self, make_design, body, heights, config_100
    ):
        """A lone element is only excused if it cannot fit an empty page."""
        design = make_design([body], {"body": 1})
        measure = heights({"body": [50]})
        result = PageBreakResult(pages=(_page(0, SectionSlice("body", body, (0, 1), False, 1, 150)),))

        issues = check_page_breaks(design, result, measure, config_100)

        assert issues == ["Page 0 overflows: 150px used, 100px available"]

    def test_check_when_collapsed_section_split_then_reports(self, make_design, config_100):
        folded = LabelSection("folded", collapsed=True)
        design = make_design([folded], {"folded": 3})
        result = PageBreakResult(pages=(_page(0, SectionSlice("folded", folded, (0, 3), False, 3, 27)),))

        issues = check_page_breaks(design, result, None, config_100)

        assert issues == ["Section 'folded' should be a single (0, 0) slice"]
