"""
Module: layout

Purpose:
    Page planning for label designs.
    Splits the sections of a design into physical pages sized to the
    print medium.

Key Functions:
    - calculate_page_breaks(): Main entry point (alias: plan)
    - check_page_breaks(): Verify a plan against its design
    - precompute_measurements(): Memoize an expensive height oracle

Key Classes:
    - PageConfig: Page geometry and layout constants
    - MeasurementTable: Lookup-map height oracle
    - SectionSlice, PageContent, PageBreakResult: The page plan

Dependencies:
    - core.models: LabelDesign

Used By:
    - output: Proof and preview rendering
"""

from .config import PageConfig, PAGE_PRESETS
from .measurement import MeasureFn, MeasurementTable, precompute_measurements
from .models import SectionSlice, PageContent, PageBreakResult
from .paginator import calculate_page_breaks, plan
from .checks import check_page_breaks

__all__ = [
    # Config
    "PageConfig",
    "PAGE_PRESETS",
    # Measurement
    "MeasureFn",
    "MeasurementTable",
    "precompute_measurements",
    # Models
    "SectionSlice",
    "PageContent",
    "PageBreakResult",
    # Functions
    "calculate_page_breaks",
    "plan",
    "check_page_breaks",
]
