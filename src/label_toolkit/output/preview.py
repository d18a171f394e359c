"""
Module: output.preview

Purpose:
    Wireframe preview images of a page plan.
    Draws each page as a white sheet with one coloured box per section
    slice, making page breaks, continuations and overflow visible at a
    glance.

Key Functions:
    - render_preview_images(): One PIL image per page
    - save_preview_images(): Write images to disk as PNG

Dependencies:
    - PIL: Image drawing
    - layout.models: PageBreakResult, PageContent

Used By:
    - Print preview diagnostics
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from label_toolkit.core.models.design import LabelDesign
from label_toolkit.layout.config import PageConfig
from label_toolkit.layout.models import PageBreakResult, PageContent, SectionSlice
from .proof import slice_caption

logger = logging.getLogger(__name__)

# Visualization constants
COLORS = {
    "collapsed": (160, 160, 160, 255),   # Grey - header only
    "partial": (230, 140, 0, 255),       # Orange - split section
    "full": (0, 90, 200, 255),           # Blue - whole section
    "overflow": (220, 0, 0, 255),        # Red - content area limit
}

PAGE_COLOR = (255, 255, 255)
FRAME_COLOR = (200, 200, 200)
LABEL_TEXT_COLOR = (0, 0, 0)
BOX_LINE_WIDTH = 1
FONT_SIZE = 10


def render_preview_images(
    result: PageBreakResult,
    *,
    config: Optional[PageConfig] = None,
    design: Optional[LabelDesign] = None,
    scale: float = 1.0,
) -> List[Image.Image]:
    """
    Draw one wireframe image per page.

    Args:
        result: Page plan from calculate_page_breaks
        config: Config the plan was computed with (A6 by default)
        design: Design the plan was computed from; supplies the padding
        scale: Multiplier applied to the page size in pixels

    Returns:
        RGB images, one per page, in page order

    Example:
        >>> images = render_preview_images(result, design=design, scale=2)
        >>> images[0].size
        (794, 1119)
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive: {scale}")
    config = config or PageConfig()
    padding_px = config.padding_px(design.padding) if design is not None else 0.0

    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    return [
        _render_page(page, config, padding_px, scale, font)
        for page in result.pages
    ]


def _render_page(
    page: PageContent,
    config: PageConfig,
    padding_px: float,
    scale: float,
    font: ImageFont.ImageFont,
) -> Image.Image:
    """Draw the slices of one page."""
    width = max(1, round(config.page_width_px * scale))
    height = max(1, round(config.page_height_px * scale))
    img = Image.new("RGB", (width, height), PAGE_COLOR)
    draw = ImageDraw.Draw(img)

    left = padding_px * scale
    right = width - 1 - padding_px * scale
    content_top = padding_px * scale
    content_bottom = height - 1 - padding_px * scale

    draw.rectangle((left, content_top, right, content_bottom), outline=FRAME_COLOR, width=BOX_LINE_WIDTH)

    top = content_top
    for section_slice in page.sections:
        bottom = top + section_slice.height * scale
        _draw_slice_box(draw, section_slice, (left, top, right, bottom), font)
        top = bottom

    if top > content_bottom:
        draw.line((0, content_bottom, width - 1, content_bottom), fill=COLORS["overflow"], width=2)

    return img


def _draw_slice_box(
    draw: ImageDraw.ImageDraw,
    section_slice: SectionSlice,
    bbox: tuple[float, float, float, float],
    font: ImageFont.ImageFont,
) -> None:
    """
    Draw a single slice box with its caption.

    Args:
        draw: ImageDraw object
        section_slice: Slice to draw
        bbox: (left, top, right, bottom) in pixels
        font: Font for the caption
    """
    if section_slice.is_collapsed:
        color = COLORS["collapsed"]
    elif section_slice.is_partial:
        color = COLORS["partial"]
    else:
        color = COLORS["full"]

    x0, y0, x1, y1 = bbox
    draw.rectangle((x0, y0, x1, max(y0, y1)), outline=color, width=BOX_LINE_WIDTH)
    draw.text((x0 + 2, y0 + 1), slice_caption(section_slice), fill=LABEL_TEXT_COLOR, font=font)


def save_preview_images(
    images: Sequence[Image.Image],
    output_dir: Path,
    stem: str = "page",
) -> List[Path]:
    """
    Save preview images as ``<stem>_<n>.png`` (1-based).

    Returns:
        Paths written, in page order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for i, img in enumerate(images, start=1):
        path = output_dir / f"{stem}_{i:02d}.png"
        img.save(path, "PNG")
        paths.append(path)

    logger.info(f"Saved {len(paths)} preview images to {output_dir}")
    return paths
