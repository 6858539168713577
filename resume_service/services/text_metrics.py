"""
Text measurement backed by PyMuPDF glyph metrics.

Widths come from the same font resource the page writer draws with, so a
substring measured here lines up with the text on the page.
"""

import logging
from typing import Dict, Optional

import fitz  # PyMuPDF

from resume_service.core.exceptions import FontNotRegistered

logger = logging.getLogger(__name__)


class TextMeasurer:
    """Per-render registry of fonts and their metrics."""

    def __init__(self):
        self._fonts: Dict[str, fitz.Font] = {}

    def register(self, font_id: str, fontfile: Optional[str] = None) -> None:
        """Register a base-14 code (no fontfile) or a font file under font_id."""
        if font_id in self._fonts:
            return
        if fontfile:
            self._fonts[font_id] = fitz.Font(fontfile=fontfile)
        else:
            self._fonts[font_id] = fitz.Font(font_id)
        logger.debug(f"Registered font {font_id} ({fontfile or 'base-14'})")

    def is_registered(self, font_id: str) -> bool:
        return font_id in self._fonts

    def font(self, font_id: str) -> fitz.Font:
        try:
            return self._fonts[font_id]
        except KeyError:
            raise FontNotRegistered(font_id) from None

    def measure(self, text: str, font_id: str, size: float) -> float:
        """Rendered width of text in points."""
        font = self.font(font_id)
        if not text:
            return 0.0
        return font.text_length(text, fontsize=size)

    def ascender(self, font_id: str, size: float) -> float:
        """Distance from the top of a line to its baseline."""
        return self.font(font_id).ascender * size

    def line_height(self, font_id: str, size: float) -> float:
        font = self.font(font_id)
        return (font.ascender - font.descender) * size
