"""
Module: output

Purpose:
    Diagnostic output for page plans: a wireframe proof PDF and per-page
    preview images.

Key Functions:
    - render_proof_pdf(): Render plan to PDF
    - render_preview_images(): Render plan to PIL images
    - save_preview_images(): Write preview images as PNG

Dependencies:
    - reportlab: PDF generation
    - PIL: Image drawing
    - layout.models: PageBreakResult
"""

from .proof import render_proof_pdf, slice_caption
from .preview import render_preview_images, save_preview_images

__all__ = [
    "render_proof_pdf",
    "slice_caption",
    "render_preview_images",
    "save_preview_images",
]
