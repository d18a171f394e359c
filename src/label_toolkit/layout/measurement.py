"""
Module: layout.measurement

Purpose:
    Element height measurement for the page planner.
    The planner never measures anything itself: heights come from an
    injected oracle ``measure(section_id, element_index)`` that answers
    with a pixel height, or None while the element has not been measured.

Key Classes:
    - MeasurementTable: Pre-populated lookup map usable as an oracle

Key Functions:
    - precompute_measurements(): Ask an oracle once per element, keep answers
    - resolve_height(): Oracle answer or fallback height

Dependencies:
    - math (std)

Used By:
    - layout.paginator: Height lookup during the element walk
    - layout.checks: Overflow verification
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterator, Mapping, Optional, Tuple

from label_toolkit.core.models.design import LabelDesign

logger = logging.getLogger(__name__)

MeasureFn = Callable[[str, int], Optional[float]]


class MeasurementTable:
    """
    Measured element heights keyed by (section_id, element_index).

    Callable with the oracle signature, so it can be handed straight to
    the planner. Missing entries answer None.

    Example:
        >>> table = MeasurementTable({("identity", 0): 24.0})
        >>> table("identity", 0)
        24.0
        >>> table("identity", 1) is None
        True
    """

    def __init__(self, heights: Optional[Mapping[Tuple[str, int], float]] = None):
        self._heights: dict[Tuple[str, int], float] = {}
        for (section_id, index), height in (heights or {}).items():
            self.record(section_id, index, height)

    def __call__(self, section_id: str, element_index: int) -> Optional[float]:
        return self._heights.get((section_id, element_index))

    def __len__(self) -> int:
        return len(self._heights)

    def __contains__(self, key: object) -> bool:
        return key in self._heights

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self._heights)

    def record(self, section_id: str, element_index: int, height: float) -> None:
        """
        Store one measurement.

        Raises:
            ValueError: If index or height is negative, or height is not finite
        """
        if element_index < 0:
            raise ValueError(f"element_index cannot be negative: {element_index}")
        if not math.isfinite(height) or height < 0:
            raise ValueError(f"Invalid height for {section_id}[{element_index}]: {height}")
        self._heights[(section_id, element_index)] = float(height)

    def get(self, section_id: str, element_index: int, default: Optional[float] = None) -> Optional[float]:
        return self._heights.get((section_id, element_index), default)

    @classmethod
    def from_dict(cls, data: Mapping[str, list]) -> MeasurementTable:
        """
        Build from ``{section_id: [height, ...]}``.

        ``None`` entries in a list are left unmeasured.
        """
        table = cls()
        for section_id, heights in data.items():
            for index, height in enumerate(heights):
                if height is not None:
                    table.record(section_id, index, height)
        return table

    def to_dict(self) -> dict[str, list]:
        """Inverse of from_dict; gaps are filled with None."""
        out: dict[str, list] = {}
        for (section_id, index), height in sorted(self._heights.items()):
            row = out.setdefault(section_id, [])
            row.extend([None] * (index + 1 - len(row)))
            row[index] = height
        return out


def resolve_height(
    measure: Optional[MeasureFn],
    section_id: str,
    element_index: int,
    default: float,
) -> float:
    """
    Height of one element, falling back to ``default``.

    The fallback applies when there is no oracle, when it answers None,
    or when the answer is negative or not a finite number.
    """
    if measure is None:
        return default
    height = measure(section_id, element_index)
    if height is None:
        return default
    if not math.isfinite(height) or height < 0:
        logger.debug(f"Ignoring invalid height {height} for {section_id}[{element_index}]")
        return default
    return height


def precompute_measurements(design: LabelDesign, measure: MeasureFn) -> MeasurementTable:
    """
    Query an oracle once for every element the planner may size.

    Collapsed and hidden sections are skipped, matching what the planner
    measures. Use this when the oracle is expensive: the returned table
    answers the planner from memory.

    Args:
        design: Design to measure
        measure: Possibly expensive oracle

    Returns:
        MeasurementTable with every usable answer
    """
    table = MeasurementTable()
    skipped = 0
    for section in design.sorted_sections():
        if section.collapsed:
            continue
        for index in range(len(design.sorted_elements(section.id))):
            height = measure(section.id, index)
            if height is None or not math.isfinite(height) or height < 0:
                skipped += 1
                continue
            table.record(section.id, index, height)

    if skipped:
        logger.debug(f"{skipped} elements had no usable measurement")
    return table
