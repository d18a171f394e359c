"""
Module: layout.config

Purpose:
    Configuration for the page planner.
    Describes the print medium (page height in pixels, point-to-pixel
    factor) and the fixed layout overheads used to estimate section
    heights.

Key Classes:
    - PageConfig: Immutable layout configuration

Key Constants:
    - PAGE_PRESETS: PageConfig for each standard label stock

Dependencies:
    - dataclasses (std)

Used By:
    - layout.paginator: Page break calculation
    - layout.checks: Invariant checking
    - output: Proof and preview rendering
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from label_toolkit.core.models.design import (
    A6_HEIGHT_PT,
    A6_WIDTH_PT,
    A7_HEIGHT_PT,
    A7_WIDTH_PT,
)

if TYPE_CHECKING:
    from label_toolkit.core.models.design import LabelDesign, LabelSection


# CSS pixels per point (96 DPI screen / 72 pt per inch)
PT_TO_PX = 96 / 72

A6_WIDTH_PX = A6_WIDTH_PT * PT_TO_PX
A6_HEIGHT_PX = A6_HEIGHT_PT * PT_TO_PX

# Section header row (label + collapse icon)
SECTION_HEADER_HEIGHT = 18

# Gap below a collapsed section header
SECTION_GAP = 9

# Fallback element height when measurement is unavailable
DEFAULT_ELEMENT_HEIGHT = 16

# Border + margin around a section
BORDER_OVERHEAD = 7
BORDERLESS_OVERHEAD = 3

# Header repeated at the top of a continued section
CONTINUATION_EXTRA = 4


@dataclass(frozen=True)
class PageConfig:
    """
    Configuration for page planning (immutable).

    Heights are in pixels; ``pt_to_px`` converts the design's point-based
    padding into the same unit.

    Attributes:
        page_height_px: Physical page height in pixels
        page_width_px: Physical page width in pixels (previews only)
        pt_to_px: Pixels per point
        section_header_height: Height of a section header row
        section_gap: Gap below a collapsed section header
        default_element_height: Height used for unmeasured elements
        border_overhead: Border + margin of a bordered section
        borderless_overhead: Margin of a section without border
        continuation_extra: Extra space under a continuation header

    Example:
        >>> config = PageConfig(page_height_px=600)
        >>> config.content_height(padding_pt=15)
        560.0
    """

    page_height_px: float = A6_HEIGHT_PX
    page_width_px: float = A6_WIDTH_PX
    pt_to_px: float = PT_TO_PX

    section_header_height: float = SECTION_HEADER_HEIGHT
    section_gap: float = SECTION_GAP
    default_element_height: float = DEFAULT_ELEMENT_HEIGHT
    border_overhead: float = BORDER_OVERHEAD
    borderless_overhead: float = BORDERLESS_OVERHEAD
    continuation_extra: float = CONTINUATION_EXTRA

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_height_px <= 0:
            raise ValueError(f"page_height_px must be positive: {self.page_height_px}")
        if self.page_width_px <= 0:
            raise ValueError(f"page_width_px must be positive: {self.page_width_px}")
        if self.pt_to_px <= 0:
            raise ValueError(f"pt_to_px must be positive: {self.pt_to_px}")
        for name in (
            "section_header_height",
            "section_gap",
            "default_element_height",
            "border_overhead",
            "borderless_overhead",
            "continuation_extra",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative: {getattr(self, name)}")

    @classmethod
    def from_design(cls, design: LabelDesign, **overrides) -> PageConfig:
        """
        Build a config for the page size stored on a design.

        Args:
            design: Design whose page_width/page_height (points) to use
            **overrides: Any other PageConfig field

        Returns:
            PageConfig sized to the design's page
        """
        pt_to_px = overrides.pop("pt_to_px", PT_TO_PX)
        return cls(
            page_height_px=design.page_height * pt_to_px,
            page_width_px=design.page_width * pt_to_px,
            pt_to_px=pt_to_px,
            **overrides,
        )

    @property
    def collapsed_height(self) -> float:
        """Height of a collapsed section."""
        return self.section_header_height + self.section_gap

    @property
    def continuation_overhead(self) -> float:
        """Overhead of a section slice continued from a previous page."""
        return self.section_header_height + self.continuation_extra

    def section_overhead(self, section: LabelSection) -> float:
        """Header, padding and border height of the first slice of a section."""
        border = self.border_overhead if section.show_border else self.borderless_overhead
        return self.section_header_height + section.padding + border

    def padding_px(self, padding_pt: float) -> float:
        """Convert page padding from points to pixels."""
        return padding_pt * self.pt_to_px

    def content_height(self, padding_pt: float) -> float:
        """Usable page height once top and bottom padding are removed."""
        return self.page_height_px - 2 * self.padding_px(padding_pt)


PAGE_PRESETS: dict[str, PageConfig] = {
    "A6": PageConfig(),
    "A7": PageConfig(
        page_height_px=A7_HEIGHT_PT * PT_TO_PX,
        page_width_px=A7_WIDTH_PT * PT_TO_PX,
    ),
}
