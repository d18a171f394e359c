"""
Module: output.proof

Purpose:
    Render a page plan to a wireframe proof PDF using ReportLab.
    Each PageContent becomes one page-sized PDF page with a labelled frame
    per section slice, so page breaks can be reviewed without the label
    renderer.

Key Functions:
    - render_proof_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - layout.models: PageBreakResult, PageContent, SectionSlice
    - layout.config: PageConfig

Used By:
    - Print preview diagnostics
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from reportlab.pdfgen import canvas

from label_toolkit.core.models.design import LabelDesign
from label_toolkit.layout.config import PageConfig
from label_toolkit.layout.models import PageBreakResult, PageContent, SectionSlice

logger = logging.getLogger(__name__)

LABEL_FONT = "Helvetica"
LABEL_FONT_SIZE = 5

# RGB fills
COLLAPSED_FILL = (0.85, 0.85, 0.85)
PARTIAL_FILL = (1.0, 0.95, 0.8)
FULL_FILL = (0.9, 0.95, 1.0)
OVERFLOW_COLOR = (0.85, 0.1, 0.1)


def render_proof_pdf(
    result: PageBreakResult,
    output_path: Path,
    *,
    config: Optional[PageConfig] = None,
    design: Optional[LabelDesign] = None,
) -> None:
    """
    Render a page plan to a proof PDF.

    Pixel heights from the plan are converted back to points with
    ``config.pt_to_px``, so the PDF page has the physical label size.

    Args:
        result: Page plan from calculate_page_breaks
        output_path: Path to write PDF
        config: Config the plan was computed with (A6 by default)
        design: Design the plan was computed from; supplies the page
            padding (0 if omitted)

    Raises:
        IOError: If PDF cannot be written

    Example:
        >>> render_proof_pdf(result, Path("out/proof.pdf"), design=design)
    """
    config = config or PageConfig()
    padding_pt = design.padding if design is not None else 0.0

    output_path.parent.mkdir(parents=True, exist_ok=True)

    page_width_pt = config.page_width_px / config.pt_to_px
    page_height_pt = config.page_height_px / config.pt_to_px

    c = canvas.Canvas(str(output_path), pagesize=(page_width_pt, page_height_pt))
    c.setTitle("Label page proof")

    for page in result.pages:
        _render_page(c, page, config, padding_pt, page_width_pt, page_height_pt)
        c.showPage()

    c.save()

    logger.info(f"Rendered proof of {result.page_count} pages to {output_path}")


def _render_page(
    c: canvas.Canvas,
    page: PageContent,
    config: PageConfig,
    padding_pt: float,
    page_width_pt: float,
    page_height_pt: float,
) -> None:
    """Draw the content frame and every slice of one page."""
    content_height_pt = page_height_pt - 2 * padding_pt
    frame_width_pt = page_width_pt - 2 * padding_pt

    c.saveState()
    c.setLineWidth(0.3)
    c.setDash(2, 2)
    c.rect(padding_pt, padding_pt, frame_width_pt, content_height_pt, stroke=1, fill=0)
    c.restoreState()

    # PDF origin is bottom-left; walk down from the top of the content area
    top_pt = page_height_pt - padding_pt
    for section_slice in page.sections:
        height_pt = section_slice.height / config.pt_to_px
        _draw_slice(c, section_slice, padding_pt, top_pt - height_pt, frame_width_pt, height_pt)
        top_pt -= height_pt

    used_pt = page.used_height / config.pt_to_px
    if used_pt > content_height_pt:
        c.saveState()
        c.setStrokeColorRGB(*OVERFLOW_COLOR)
        c.setLineWidth(0.8)
        c.line(0, padding_pt, page_width_pt, padding_pt)
        c.restoreState()

    c.saveState()
    c.setFont(LABEL_FONT, LABEL_FONT_SIZE)
    c.drawRightString(page_width_pt - 2, 2, f"Page {page.page_index + 1}")
    c.restoreState()


def _draw_slice(
    c: canvas.Canvas,
    section_slice: SectionSlice,
    x_pt: float,
    y_pt: float,
    width_pt: float,
    height_pt: float,
) -> None:
    """
    Draw one slice as a filled frame with its label.

    Args:
        c: ReportLab canvas
        section_slice: Slice to draw
        x_pt: Left edge in points
        y_pt: Bottom edge in points
        width_pt: Frame width in points
        height_pt: Frame height in points
    """
    if section_slice.is_collapsed:
        fill = COLLAPSED_FILL
    elif section_slice.is_partial:
        fill = PARTIAL_FILL
    else:
        fill = FULL_FILL

    c.saveState()
    c.setFillColorRGB(*fill)
    c.setLineWidth(0.5)
    c.rect(x_pt, y_pt, width_pt, height_pt, stroke=1, fill=1)

    c.setFillColorRGB(0, 0, 0)
    c.setFont(LABEL_FONT, LABEL_FONT_SIZE)
    c.drawString(x_pt + 2, y_pt + max(height_pt - LABEL_FONT_SIZE - 1, 1), slice_caption(section_slice))
    c.restoreState()


def slice_caption(section_slice: SectionSlice) -> str:
    """
    Short text describing a slice, e.g. ``dpp [3:7) cont. >``.

    ``cont.`` marks a continuation from the previous page, ``>`` a section
    that carries on onto the next page.
    """
    if section_slice.is_collapsed:
        return f"{section_slice.section_id} (collapsed)"
    start, end = section_slice.element_range
    caption = f"{section_slice.section_id} [{start}:{end})"
    if section_slice.is_continuation:
        caption += " cont."
    if section_slice.continues:
        caption += " >"
    return caption
