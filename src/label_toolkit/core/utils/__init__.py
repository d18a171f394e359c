"""
Core Utilities Package

Serialization helpers for label designs and page plans.
"""

from .serialization import (
    design_from_dict,
    design_to_dict,
    load_design,
    save_design,
    page_breaks_to_dict,
)

__all__ = [
    "design_from_dict",
    "design_to_dict",
    "load_design",
    "save_design",
    "page_breaks_to_dict",
]
