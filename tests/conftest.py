import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import label_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from label_toolkit.core.models import LabelDesign, LabelElement, LabelSection
from label_toolkit.layout import MeasurementTable, PageConfig


# Common test fixtures
@pytest.fixture
def make_design():
    """
    Factory building a design from sections and per-section element counts.

    Element ids are ``<section_id>_<n>`` with sort_order n. Padding defaults
    to 0 so the content height equals the page height.
    """
    def _create(sections, counts=None, padding=0.0, extra_elements=()):
        counts = counts or {}
        elements = [
            LabelElement(f"{sid}_{i}", sid, sort_order=i)
            for sid, n in counts.items()
            for i in range(n)
        ]
        elements.extend(extra_elements)
        return LabelDesign(
            sections=tuple(sections),
            elements=tuple(elements),
            padding=padding,
        )
    return _create


@pytest.fixture
def heights():
    """Factory building a MeasurementTable from ``{section_id: [h, ...]}``."""
    def _create(data):
        return MeasurementTable.from_dict(data)
    return _create


@pytest.fixture
def config_100():
    """Page with exactly 100px of content height when padding is 0."""
    return PageConfig(page_height_px=100)


@pytest.fixture
def section():
    """Factory for a visible, expanded, borderless section."""
    def _create(section_id, sort_order=0, **kwargs):
        return LabelSection(section_id, sort_order=sort_order, **kwargs)
    return _create
