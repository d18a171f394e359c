"""
Module: layout.models

Purpose:
    Data models for the page plan.
    Immutable dataclasses describing which part of each section lands on
    which page.

Key Classes:
    - SectionSlice: Portion of one section placed on one page
    - PageContent: Ordered slices on a single page
    - PageBreakResult: Complete page plan

Dependencies:
    - dataclasses (std)
    - core.models.design: LabelSection

Used By:
    - layout.paginator: Creates the page plan
    - output: Proof and preview rendering
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from label_toolkit.core.models.design import LabelSection


@dataclass(frozen=True)
class SectionSlice:
    """
    Portion of a section placed on one page.

    Attributes:
        section_id: Section identifier
        section: The section record
        element_range: Half-open (start, end) into the section's sorted elements
        is_partial: True if the range does not cover the whole section
        total_elements: Number of elements in the whole section
        height: Page height consumed by this slice, overhead included (px)

    Example:
        >>> s = SectionSlice("dpp", section, (2, 5), True, total_elements=5)
        >>> s.is_continuation, s.continues
        (True, False)
    """

    section_id: str
    section: LabelSection
    element_range: Tuple[int, int]
    is_partial: bool
    total_elements: int = 0
    height: float = 0

    def __post_init__(self) -> None:
        """Validate range on construction."""
        start, end = self.element_range
        if start < 0 or end < start:
            raise ValueError(f"Invalid element range for {self.section_id}: {self.element_range}")

    @property
    def start(self) -> int:
        return self.element_range[0]

    @property
    def end(self) -> int:
        return self.element_range[1]

    @property
    def element_count(self) -> int:
        """Number of elements in this slice."""
        return self.end - self.start

    @property
    def is_continuation(self) -> bool:
        """Slice continues a section started on an earlier page."""
        return self.is_partial and self.start > 0

    @property
    def continues(self) -> bool:
        """Section carries on onto a later page."""
        return self.is_partial and self.end < self.total_elements

    @property
    def is_collapsed(self) -> bool:
        return self.section.collapsed


@dataclass(frozen=True)
class PageContent:
    """
    Layout plan for a single page.

    Attributes:
        page_index: Page number (0-indexed)
        sections: Slices on this page, in section order
        used_height: Content height consumed, in pixels
    """

    page_index: int
    sections: tuple[SectionSlice, ...] = ()
    used_height: float = 0

    @property
    def slice_count(self) -> int:
        return len(self.sections)

    @property
    def is_empty(self) -> bool:
        """Check if page has no slices."""
        return len(self.sections) == 0

    @property
    def section_ids(self) -> list[str]:
        return [s.section_id for s in self.sections]


@dataclass(frozen=True)
class PageBreakResult:
    """
    Complete page plan.

    Attributes:
        pages: Pages in order, never empty when produced by the planner
        warnings: Oversized-content messages raised while planning

    Example:
        >>> result = calculate_page_breaks(design)
        >>> result.page_count
        2
        >>> result.section_page_map["compliance"]
        [0, 1]
    """

    pages: tuple[PageContent, ...]
    warnings: tuple[str, ...] = field(default=())

    @property
    def page_count(self) -> int:
        """Number of pages in the plan."""
        return len(self.pages)

    @property
    def total_slices(self) -> int:
        return sum(p.slice_count for p in self.pages)

    def slices_for_section(self, section_id: str) -> list[SectionSlice]:
        """All slices of one section, in page order."""
        return [s for page in self.pages for s in page.sections if s.section_id == section_id]

    @property
    def section_page_map(self) -> dict[str, list[int]]:
        """Mapping of section id to the pages it appears on."""
        mapping: dict[str, list[int]] = {}
        for page in self.pages:
            for s in page.sections:
                pages = mapping.setdefault(s.section_id, [])
                if page.page_index not in pages:
                    pages.append(page.page_index)
        return mapping
