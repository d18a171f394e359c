"""
Core Models Package

Immutable label design models consumed by the page planner.

All models in this package are frozen dataclasses: the planner reads a
design without mutating it and may be called from several threads at once.
"""

from .design import (
    LabelDesign,
    LabelElement,
    LabelSection,
    PageSize,
    blank_design,
    default_sections,
)

__all__ = [
    "LabelDesign",
    "LabelElement",
    "LabelSection",
    "PageSize",
    "blank_design",
    "default_sections",
]
