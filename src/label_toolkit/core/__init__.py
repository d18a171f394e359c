"""
Label Toolkit Core Package

Shared data models, schemas and serialization for label designs.

1. **Immutable Data Models**
   Frozen dataclasses; the page planner reads them and never mutates them.

2. **Derived Ordering**
   Section and element order is always derived from ``sort_order``,
   never stored separately.

3. **Validated Storage Format**
   Stored designs are checked against a JSON schema before loading.
"""

from .models import LabelDesign, LabelElement, LabelSection

__all__ = [
    "LabelDesign",
    "LabelElement",
    "LabelSection",
]
