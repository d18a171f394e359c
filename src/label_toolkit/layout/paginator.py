"""
Module: layout.paginator

Purpose:
    Split a label design into physical pages.
    Walks visible sections top-to-bottom, accumulating element heights, and
    starts a new page when the page content area is full. Sections may be
    split between elements; individual elements are atomic.

Key Functions:
    - calculate_page_breaks(): Main page planning function
    - plan(): Alias of calculate_page_breaks

Algorithm:
    Single greedy pass:
    1. Visible sections sorted by sort_order
    2. Collapsed section -> fixed header block, never split
    3. Expanded section -> element walk: fill the page, close it, continue
       the section on the next page behind a continuation header
    4. The first element of every slice is always placed; one that does
       not fit moves to a fresh page, and one taller than a page sits
       alone there with a warning instead of looping
    5. An empty design still yields one empty page

Dependencies:
    - layout.config: PageConfig
    - layout.measurement: Height oracle and fallback
    - layout.models: SectionSlice, PageContent, PageBreakResult

Used By:
    - Label preview and print output
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from label_toolkit.core.models.design import LabelDesign, LabelSection
from .config import PageConfig
from .measurement import MeasureFn, resolve_height
from .models import SectionSlice, PageContent, PageBreakResult

logger = logging.getLogger(__name__)


@dataclass
class _PageAccumulator:
    """Page being filled: slices placed so far and the height they use."""

    index: int = 0
    slices: List[SectionSlice] = field(default_factory=list)
    used_height: float = 0

    @property
    def has_content(self) -> bool:
        return bool(self.slices)

    def overflows(self, height: float, limit: float) -> bool:
        return self.used_height + height > limit

    def place(self, section_slice: SectionSlice) -> None:
        self.slices.append(section_slice)
        self.used_height += section_slice.height

    def freeze(self) -> PageContent:
        return PageContent(
            page_index=self.index,
            sections=tuple(self.slices),
            used_height=self.used_height,
        )


def calculate_page_breaks(
    design: LabelDesign,
    measure: Optional[MeasureFn] = None,
    config: Optional[PageConfig] = None,
) -> PageBreakResult:
    """
    Calculate page breaks for a label design.

    Pure: ``design`` is not modified and nothing is cached between calls,
    so identical inputs always give an equal result.

    Args:
        design: Label design with sections and elements
        measure: Oracle returning the pixel height of element
            ``(section_id, element_index)``, or None when not yet measured
            (the default element height is used instead)
        config: Page geometry and layout constants (A6 by default)

    Returns:
        PageBreakResult with at least one page

    Example:
        >>> result = calculate_page_breaks(design, table)
        >>> [p.section_ids for p in result.pages]
        [['identity', 'dpp'], ['dpp', 'compliance']]
    """
    config = config or PageConfig()
    content_height = config.content_height(design.padding)
    assert content_height > 0, (
        f"Page content height must be positive: {content_height} "
        f"(page {config.page_height_px}px, padding {design.padding}pt)"
    )

    pages: List[PageContent] = []
    warnings: List[str] = []
    current = _PageAccumulator()

    sections = design.sorted_sections()
    for section in sections:
        count = len(design.sorted_elements(section.id))

        # Collapsed: header row only, never split
        if section.collapsed:
            block = config.collapsed_height
            if current.overflows(block, content_height) and current.has_content:
                current = _close_page(pages, current)
            current.place(SectionSlice(section.id, section, (0, 0), False, count, block))
            continue

        overhead = config.section_overhead(section)

        # Start the section on a new page if even its header does not fit
        if current.overflows(overhead, content_height) and current.has_content:
            current = _close_page(pages, current)

        if count == 0:
            current.place(SectionSlice(section.id, section, (0, 0), False, 0, overhead))
            continue

        current = _walk_elements(
            section, count, overhead, measure, config, content_height,
            pages, current, warnings,
        )

    if current.has_content:
        pages.append(current.freeze())

    if not pages:
        pages.append(PageContent(page_index=0))

    logger.info(f"Planned {len(sections)} sections onto {len(pages)} pages")

    return PageBreakResult(pages=tuple(pages), warnings=tuple(warnings))


plan = calculate_page_breaks


def _walk_elements(
    section: LabelSection,
    count: int,
    section_overhead: float,
    measure: Optional[MeasureFn],
    config: PageConfig,
    content_height: float,
    pages: List[PageContent],
    current: _PageAccumulator,
    warnings: List[str],
) -> _PageAccumulator:
    """
    Place the elements of one expanded section, splitting across pages.

    Returns:
        The page being filled once the section is fully placed
    """
    start = 0
    first_slice = True

    while start < count:
        overhead = section_overhead if first_slice else config.continuation_overhead

        if current.overflows(overhead, content_height) and current.has_content:
            current = _close_page(pages, current)

        available = content_height - current.used_height - overhead
        end, height = _fill_slice(section.id, start, count, available, measure, config)

        # Only a lone first element can exceed the space left
        if height > available:
            if current.has_content:
                current = _close_page(pages, current)
                continue
            message = (
                f"Element {start} of section {section.id!r} overflows page {current.index}: "
                f"{overhead + height:g}px needed, {content_height:g}px available"
            )
            logger.warning(message)
            warnings.append(message)

        is_partial = start > 0 or end < count
        current.place(SectionSlice(section.id, section, (start, end), is_partial, count, overhead + height))

        start = end
        first_slice = False

        if start < count:
            current = _close_page(pages, current)

    return current


def _fill_slice(
    section_id: str,
    start: int,
    count: int,
    available: float,
    measure: Optional[MeasureFn],
    config: PageConfig,
) -> Tuple[int, float]:
    """
    Take consecutive elements from ``start`` while they fit in ``available``.

    The element at ``start`` is always taken.

    Returns:
        (end, accumulated_height) with end > start
    """
    accumulated = 0.0
    end = start

    for i in range(start, count):
        height = resolve_height(measure, section_id, i, config.default_element_height)
        if accumulated + height > available and i > start:
            break
        accumulated += height
        end = i + 1

        if accumulated >= available:
            break

    return end, accumulated


def _close_page(pages: List[PageContent], current: _PageAccumulator) -> _PageAccumulator:
    """Push the current page and start an empty one."""
    pages.append(current.freeze())
    logger.debug(
        f"Closed page {current.index}: {len(current.slices)} slices, "
        f"{current.used_height:g}px used"
    )
    return _PageAccumulator(index=len(pages))
