"""
Module: layout.checks

Purpose:
    Verify a page plan against the guarantees of the page planner.
    Used by tests and by callers that want to assert a cached plan still
    matches its design.

Key Functions:
    - check_page_breaks(): List every violated guarantee

Checks:
    1. Page indices run 0, 1, 2, ... with no gaps
    2. No slice references a hidden or unknown section
    3. Each visible expanded section's slices cover its elements in order,
       exactly once; collapsed and empty sections have one (0, 0) slice
    4. No page overflows, except a page holding a single element that is
       too tall for any page

Dependencies:
    - layout.config, layout.measurement, layout.models

Used By:
    - tests.layout
"""

from __future__ import annotations

import logging
from typing import List, Optional

from label_toolkit.core.models.design import LabelDesign
from .config import PageConfig
from .measurement import MeasureFn, resolve_height
from .models import PageBreakResult, PageContent

logger = logging.getLogger(__name__)


def check_page_breaks(
    design: LabelDesign,
    result: PageBreakResult,
    measure: Optional[MeasureFn] = None,
    config: Optional[PageConfig] = None,
) -> List[str]:
    """
    Check a page plan for consistency with its design.

    Args:
        design: Design the plan was computed from
        result: Plan to check
        measure: Oracle used for planning
        config: Config used for planning

    Returns:
        Human-readable issues; empty when the plan is valid
    """
    config = config or PageConfig()
    content_height = config.content_height(design.padding)
    issues: List[str] = []

    if not result.pages:
        return ["Plan has no pages"]

    for expected, page in enumerate(result.pages):
        if page.page_index != expected:
            issues.append(f"Page at position {expected} has index {page.page_index}")

    visible = design.sorted_sections()
    visible_ids = {s.id for s in visible}
    for page in result.pages:
        for s in page.sections:
            if s.section_id not in visible_ids:
                issues.append(f"Page {page.page_index} holds hidden or unknown section {s.section_id!r}")

    for section in visible:
        slices = result.slices_for_section(section.id)
        count = len(design.sorted_elements(section.id))
        if not slices:
            issues.append(f"Section {section.id!r} is missing from the plan")
            continue

        if section.collapsed or count == 0:
            if len(slices) != 1 or slices[0].element_range != (0, 0):
                issues.append(f"Section {section.id!r} should be a single (0, 0) slice")
            continue

        position = 0
        for s in slices:
            if s.start != position:
                issues.append(
                    f"Section {section.id!r} slice {s.element_range} "
                    f"does not start at element {position}"
                )
            if s.element_count == 0:
                issues.append(f"Section {section.id!r} has an empty slice {s.element_range}")
            position = s.end
        if position != count:
            issues.append(f"Section {section.id!r} covers {position} of {count} elements")

    for page in result.pages:
        if page.used_height > content_height and not _is_oversized_singleton(
            design, page, measure, config, content_height
        ):
            issues.append(
                f"Page {page.page_index} overflows: "
                f"{page.used_height:g}px used, {content_height:g}px available"
            )

    if issues:
        logger.debug(f"Page plan check found {len(issues)} issues")
    return issues


def _is_oversized_singleton(
    design: LabelDesign,
    page: PageContent,
    measure: Optional[MeasureFn],
    config: PageConfig,
    content_height: float,
) -> bool:
    """True if the page holds one element too tall for an empty page."""
    if page.slice_count != 1:
        return False
    only = page.sections[0]
    if only.element_count != 1:
        return False

    height = resolve_height(measure, only.section_id, only.start, config.default_element_height)
    if only.is_continuation:
        overhead = config.continuation_overhead
    else:
        overhead = config.section_overhead(only.section)
    return overhead + height > content_height
