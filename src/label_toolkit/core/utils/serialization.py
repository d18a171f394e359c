"""
Serialization Utilities

Converts between the stored label design format (the editor's camelCase
JSON) and the immutable models, and serializes page plans for callers that
cache previews.

- `design_from_dict` / `design_to_dict`: stored format <-> LabelDesign
- `load_design` / `save_design`: the same, from and to JSON files
- `page_breaks_to_dict`: PageBreakResult -> JSON-ready dict

Element attributes the layout does not use (content, font size, colours,
...) are kept in ``LabelElement.properties`` and written back unchanged.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.design import (
    DESIGN_FORMAT_VERSION,
    LabelDesign,
    LabelElement,
    LabelSection,
)
from ..schemas.validator import validate_design, ValidationError

logger = logging.getLogger(__name__)

_ELEMENT_KEYS = ("id", "type", "sectionId", "sortOrder")


# ─────────────────────────────────────────────────────────────────────────────
# Design Serialization
# ─────────────────────────────────────────────────────────────────────────────

def design_from_dict(data: dict[str, Any], *, validate: bool = True) -> LabelDesign:
    """
    Deserialize a LabelDesign from the stored format.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first

    Returns:
        LabelDesign instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If a value is rejected by the models
    """
    if validate:
        validate_design(data)

    defaults = LabelDesign()
    return LabelDesign(
        sections=tuple(_section_from_dict(s) for s in data["sections"]),
        elements=tuple(_element_from_dict(e) for e in data["elements"]),
        padding=data.get("padding", defaults.padding),
        page_size=data.get("pageSize", defaults.page_size),
        page_width=data.get("pageWidth", defaults.page_width),
        page_height=data.get("pageHeight", defaults.page_height),
        background_color=data.get("backgroundColor", defaults.background_color),
        font_family=data.get("fontFamily", defaults.font_family),
        base_font_size=data.get("baseFontSize", defaults.base_font_size),
        base_text_color=data.get("baseTextColor", defaults.base_text_color),
    )


def design_to_dict(design: LabelDesign) -> dict[str, Any]:
    """
    Serialize a LabelDesign to the stored format.

    The output passes ``validate_design`` and round-trips through
    ``design_from_dict``.
    """
    return {
        "_version": DESIGN_FORMAT_VERSION,
        "pageSize": design.page_size,
        "pageWidth": design.page_width,
        "pageHeight": design.page_height,
        "padding": design.padding,
        "backgroundColor": design.background_color,
        "fontFamily": design.font_family,
        "baseFontSize": design.base_font_size,
        "baseTextColor": design.base_text_color,
        "sections": [_section_to_dict(s) for s in design.sections],
        "elements": [_element_to_dict(e) for e in design.elements],
    }


def _section_from_dict(data: dict[str, Any]) -> LabelSection:
    """Deserialize a LabelSection from a dictionary."""
    return LabelSection(
        id=data["id"],
        visible=data["visible"],
        sort_order=data["sortOrder"],
        collapsed=data.get("collapsed", False),
        padding_top=data.get("paddingTop") or 0,
        padding_bottom=data.get("paddingBottom") or 0,
        show_border=data.get("showBorder", False),
        label=data.get("label", ""),
        border_color=data.get("borderColor", "#d1d5db"),
        background_color=data.get("backgroundColor"),
    )


def _section_to_dict(section: LabelSection) -> dict[str, Any]:
    d = {
        "id": section.id,
        "label": section.label,
        "visible": section.visible,
        "collapsed": section.collapsed,
        "sortOrder": section.sort_order,
        "paddingTop": section.padding_top,
        "paddingBottom": section.padding_bottom,
        "showBorder": section.show_border,
        "borderColor": section.border_color,
    }
    if section.background_color is not None:
        d["backgroundColor"] = section.background_color
    return d


def _element_from_dict(data: dict[str, Any]) -> LabelElement:
    """Deserialize a LabelElement, keeping unknown keys as properties."""
    return LabelElement(
        id=data["id"],
        section_id=data["sectionId"],
        sort_order=data["sortOrder"],
        type=data.get("type", "text"),
        properties={k: v for k, v in data.items() if k not in _ELEMENT_KEYS},
    )


def _element_to_dict(element: LabelElement) -> dict[str, Any]:
    d = {
        "id": element.id,
        "type": element.type,
        "sectionId": element.section_id,
        "sortOrder": element.sort_order,
    }
    d.update(element.properties)
    return d


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_design(path: Path) -> LabelDesign:
    """
    Load and validate a design from a JSON file.

    Raises:
        ValidationError: If the file cannot be read, is not JSON, or is
            not a valid design
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read design {path}: {e}", path=str(path)) from e

    design = design_from_dict(data)
    logger.debug(f"Loaded design {path}: {len(design.sections)} sections, {len(design.elements)} elements")
    return design


def save_design(design: LabelDesign, path: Path) -> None:
    """Write a design as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(design_to_dict(design), f, indent=2)


# ─────────────────────────────────────────────────────────────────────────────
# Page Plan Serialization
# ─────────────────────────────────────────────────────────────────────────────

def page_breaks_to_dict(result) -> dict[str, Any]:
    """
    Serialize a PageBreakResult for caching or inspection.

    Sections are referenced by id only; pair the output with the design
    it was computed from.
    """
    return {
        "pages": [
            {
                "pageIndex": page.page_index,
                "usedHeight": page.used_height,
                "sections": [
                    {
                        "sectionId": s.section_id,
                        "elementRange": list(s.element_range),
                        "isPartial": s.is_partial,
                        "height": s.height,
                    }
                    for s in page.sections
                ],
            }
            for page in result.pages
        ],
        "warnings": list(result.warnings),
    }
