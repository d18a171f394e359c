"""
Module: core.models.design

Purpose:
    Immutable value objects describing a label design: the unpaginated
    content model the page planner consumes. A design is an unordered set
    of sections and an unordered set of elements; ordering is always
    derived from ``sort_order`` with ties broken by input order.

Key Classes:
    - LabelSection: Orderable group of elements with layout flags
    - LabelElement: Smallest positioned unit, opaque to layout
    - LabelDesign: Page settings plus sections and elements

Key Functions:
    - default_sections(): The six standard label sections
    - blank_design(): Empty A6 design with default sections

Dependencies:
    - dataclasses (std)

Used By:
    - layout.paginator: Page break calculation
    - core.utils.serialization: Stored design format
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional, Tuple


PageSize = Literal["A6", "A7", "custom"]

DESIGN_FORMAT_VERSION = 2

# A6 dimensions in points
A6_WIDTH_PT = 297.64
A6_HEIGHT_PT = 419.53

# A7 dimensions in points
A7_WIDTH_PT = 209.76
A7_HEIGHT_PT = 297.64

DEFAULT_PADDING_PT = 14.0


@dataclass(frozen=True, slots=True)
class LabelSection:
    """
    Section of a label (immutable).

    Attributes:
        id: Section identifier, e.g. "identity" or "compliance"
        visible: Invisible sections are excluded from layout entirely
        sort_order: Position of the section on the label
        collapsed: Collapsed sections render as a single header row
        padding_top: Extra space above the section content (px)
        padding_bottom: Extra space below the section content (px)
        show_border: Whether the section draws a border
        label: Display label (i18n key), ignored by layout
        border_color: Border colour, ignored by layout
        background_color: Optional background colour, ignored by layout

    Example:
        >>> section = LabelSection("identity", sort_order=0, show_border=True)
        >>> section.padding
        0.0
    """

    id: str
    visible: bool = True
    sort_order: int = 0
    collapsed: bool = False
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    show_border: bool = False
    label: str = ""
    border_color: str = "#d1d5db"
    background_color: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate section on construction."""
        if not self.id:
            raise ValueError("Section id must be non-empty")
        if self.padding_top < 0 or self.padding_bottom < 0:
            raise ValueError(
                f"Section {self.id!r} padding cannot be negative: "
                f"top={self.padding_top}, bottom={self.padding_bottom}"
            )

    @property
    def padding(self) -> float:
        """Combined vertical padding."""
        return self.padding_top + self.padding_bottom


@dataclass(frozen=True, slots=True)
class LabelElement:
    """
    Element placed in a section (immutable).

    Layout only needs the owning section and the ordering; everything else
    the editor stores for an element is kept in ``properties`` untouched.

    Attributes:
        id: Element identifier
        section_id: Owning section identifier
        sort_order: Position within the section
        type: Element kind, e.g. "text", "qr-code", "pictogram"
        properties: Remaining element attributes, opaque to layout
    """

    id: str
    section_id: str
    sort_order: int = 0
    type: str = "text"
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True, slots=True)
class LabelDesign:
    """
    Complete label design (immutable).

    Attributes:
        sections: Sections in input order (unsorted)
        elements: Elements in input order (unsorted)
        padding: Page padding in points, applied top and bottom
        page_size: "A6", "A7" or "custom"
        page_width: Page width in points
        page_height: Page height in points
        background_color: Page background colour
        font_family: Base font family
        base_font_size: Base font size in points
        base_text_color: Base text colour

    Invariants:
        - padding >= 0
        - page_width, page_height > 0

    Example:
        >>> design = LabelDesign(
        ...     sections=(LabelSection("identity"),),
        ...     elements=(LabelElement("el_1", "identity"),),
        ... )
        >>> [e.id for e in design.sorted_elements("identity")]
        ['el_1']
    """

    sections: Tuple[LabelSection, ...] = ()
    elements: Tuple[LabelElement, ...] = ()
    padding: float = DEFAULT_PADDING_PT
    page_size: PageSize = "A6"
    page_width: float = A6_WIDTH_PT
    page_height: float = A6_HEIGHT_PT
    background_color: str = "#ffffff"
    font_family: str = "Helvetica"
    base_font_size: float = 6.5
    base_text_color: str = "#1a1a1a"

    def __post_init__(self) -> None:
        """Validate design on construction."""
        if self.padding < 0:
            raise ValueError(f"padding cannot be negative: {self.padding}")
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError(
                f"page size must be positive: {self.page_width}x{self.page_height}"
            )
        if self.page_size not in ("A6", "A7", "custom"):
            raise ValueError(f"Invalid page size: {self.page_size!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Ordering
    # ─────────────────────────────────────────────────────────────────────────

    def sorted_sections(self, *, visible_only: bool = True) -> list[LabelSection]:
        """
        Sections in layout order.

        ``sorted`` is stable, so sections sharing a sort_order keep their
        input order.

        Args:
            visible_only: Drop sections with visible=False

        Returns:
            New list of sections sorted by sort_order
        """
        sections = [s for s in self.sections if s.visible or not visible_only]
        return sorted(sections, key=lambda s: s.sort_order)

    def sorted_elements(self, section_id: str) -> list[LabelElement]:
        """Elements of one section sorted by sort_order (stable)."""
        elements = [e for e in self.elements if e.section_id == section_id]
        return sorted(elements, key=lambda e: e.sort_order)

    def section(self, section_id: str) -> LabelSection:
        """
        Look up a section by id.

        Raises:
            KeyError: If no section has this id
        """
        for section in self.sections:
            if section.id == section_id:
                return section
        raise KeyError(section_id)

    def orphan_elements(self) -> list[LabelElement]:
        """Elements whose section_id matches no section."""
        known = {s.id for s in self.sections}
        return [e for e in self.elements if e.section_id not in known]


# ─────────────────────────────────────────────────────────────────────────────
# Factories
# ─────────────────────────────────────────────────────────────────────────────

def default_sections() -> tuple[LabelSection, ...]:
    """
    The standard label sections.

    Identity, DPP, compliance and sustainability are visible; custom and
    footer start hidden.
    """
    return (
        LabelSection("identity", True, 0, False, 0, 6, True, "ml.section.identity"),
        LabelSection("dpp", True, 1, False, 0, 6, True, "ml.section.dpp"),
        LabelSection("compliance", True, 2, False, 0, 6, True, "ml.section.compliance"),
        LabelSection("sustainability", True, 3, False, 0, 6, False, "ml.section.sustainability"),
        LabelSection("custom", False, 4, False, 0, 6, False, "ml.section.custom"),
        LabelSection("footer", False, 5, False, 4, 0, False, "ml.section.footer"),
    )


def blank_design() -> LabelDesign:
    """Empty A6 design with the default sections and no elements."""
    return LabelDesign(sections=default_sections())
