"""
Cursor-based page writer on top of PyMuPDF.

Approach:
1. One RenderContext per render call: document, page, pen (x, y), active font/size
2. write() draws text at the pen and advances it (same baseline when continued)
3. Long text wraps greedily: first line from the pen x, continuation lines
   from the left margin
4. Link zones, icons and rules go to absolute positions and never move the pen
5. finalize() serializes the single page to bytes once

Positioning is forward-only: the pen never moves above the current line.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import fitz  # PyMuPDF

from resume_service.core.exceptions import DocumentEncodeError, ResumeRenderError
from resume_service.core.fonts import FontTable
from resume_service.services.text_metrics import TextMeasurer

logger = logging.getLogger(__name__)

PAGE_WIDTH = 612.0  # US Letter
PAGE_HEIGHT = 792.0
MARGIN = 25.0
TEXT_COLOR = (0, 0, 0)

# Tolerance for float comparisons on widths and the pen position
_EPS = 0.01


# ─── Ledger entries ─────────────────────────────────────────────────────────

@dataclass
class TextRun:
    """A piece of text drawn on one visual line."""
    text: str
    x: float
    y: float  # top of the line
    width: float
    font_id: str
    size: float


@dataclass
class LinkZone:
    x: float
    y: float
    width: float
    height: float
    target: str


@dataclass
class IconStamp:
    x: float
    y: float
    size: float


@dataclass
class Rule:
    x1: float
    x2: float
    y: float


@dataclass
class RenderContext:
    """Mutable state of one rendering pass. Never shared between renders."""
    doc: fitz.Document
    page: fitz.Page
    measurer: TextMeasurer
    x: float
    y: float
    font_id: Optional[str] = None
    size: float = 12.0
    runs: List[TextRun] = field(default_factory=list)
    link_zones: List[LinkZone] = field(default_factory=list)
    icons: List[IconStamp] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)
    finalized: bool = False


class PageWriter:
    """Appends styled text, rules, icons and link zones to a single page."""

    def __init__(
        self,
        fonts: FontTable,
        page_width: float = PAGE_WIDTH,
        page_height: float = PAGE_HEIGHT,
        margin: float = MARGIN,
    ):
        self.fonts = fonts
        self.margin = margin

        measurer = TextMeasurer()
        for font_id in fonts.font_ids:
            measurer.register(font_id, fonts.fontfile(font_id))

        doc = fitz.open()
        page = doc.new_page(width=page_width, height=page_height)
        self.ctx = RenderContext(doc=doc, page=page, measurer=measurer, x=margin, y=margin)

    # ── Geometry ──────────────────────────────────────────────────────────

    @property
    def page_width(self) -> float:
        return self.ctx.page.rect.width

    @property
    def left(self) -> float:
        return self.margin

    @property
    def right(self) -> float:
        return self.page_width - self.margin

    @property
    def content_width(self) -> float:
        return self.right - self.left

    @property
    def x(self) -> float:
        return self.ctx.x

    @property
    def y(self) -> float:
        return self.ctx.y

    def reset_x(self) -> "PageWriter":
        self.ctx.x = self.left
        return self

    # ── Style ─────────────────────────────────────────────────────────────

    def set_font(self, font_id: str) -> "PageWriter":
        self.ctx.measurer.font(font_id)  # raises FontNotRegistered
        self.ctx.font_id = font_id
        return self

    def set_size(self, size: float) -> "PageWriter":
        self.ctx.size = size
        return self

    def _active_font(self) -> str:
        if self.ctx.font_id is None:
            raise ResumeRenderError("No font selected before writing")
        return self.ctx.font_id

    def measure(self, text: str, font_id: Optional[str] = None, size: Optional[float] = None) -> float:
        """Width of text in the given (default: active) font and size."""
        return self.ctx.measurer.measure(
            text,
            font_id or self._active_font(),
            self.ctx.size if size is None else size,
        )

    def line_height(self) -> float:
        return self.ctx.measurer.line_height(self._active_font(), self.ctx.size)

    # ── Text ──────────────────────────────────────────────────────────────

    def write(
        self,
        text: str,
        continued: bool = False,
        align: str = "left",
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
    ) -> List[TextRun]:
        """
        Draw text at the pen position and return the runs drawn, one per visual line.

        continued keeps the pen on the last line's baseline, right after the
        text, so the next write extends the same visual line. Otherwise the pen
        moves to the left margin of the next line.
        """
        self._check_open()
        lh = self.line_height()

        if y is not None:
            if y < self.ctx.y - _EPS:
                raise ResumeRenderError(
                    f"Pen cannot move up from y={self.ctx.y:.2f} to y={y:.2f}"
                )
            self.ctx.y = y
        if x is not None:
            self.ctx.x = x

        right = self.ctx.x + width if width is not None else self.right
        lines = self.wrap(text, right - self.ctx.x, right - self.left)

        runs: List[TextRun] = []
        for i, line in enumerate(lines):
            if i > 0:
                self.ctx.y += lh
                self.ctx.x = self.left
            line_width = self.measure(line)
            start = self._aligned_start(line_width, right, align)
            if line:
                runs.append(self._draw_run(line, start, line_width))
            self.ctx.x = start + line_width

        if not continued:
            self.ctx.y += lh
            self.ctx.x = self.left
        return runs

    def wrap(self, text: str, first_width: float, width: float) -> List[str]:
        """
        Greedy word-wrap: the first line gets first_width, the rest get width.

        Leading and trailing whitespace stay attached to the first and last
        word so continued runs keep their spacing. A first line of "" means
        nothing fits on the rest of the current line.
        """
        if not text.strip() or self.measure(text) <= first_width + _EPS:
            return [text]

        words = text.split()
        leading = text[: len(text) - len(text.lstrip())]
        trailing = text[len(text.rstrip()):]
        words[0] = leading + words[0]
        words[-1] = words[-1] + trailing

        lines: List[str] = []
        current: List[str] = []
        current_width = 0.0
        limit = first_width
        space_w = self.measure(" ")

        for word in words:
            word_w = self.measure(word)
            if current:
                test_width = current_width + space_w + word_w
                if test_width > limit + _EPS:
                    lines.append(" ".join(current))
                    current = [word]
                    current_width = word_w
                    limit = width
                else:
                    current.append(word)
                    current_width = test_width
            else:
                if not lines and word_w > limit + _EPS and limit < width:
                    lines.append("")
                    limit = width
                current = [word]
                current_width = word_w

        if current:
            lines.append(" ".join(current))
        return lines

    def _aligned_start(self, line_width: float, right: float, align: str) -> float:
        origin = self.ctx.x
        if align == "right":
            return max(origin, right - line_width)
        if align == "center":
            return origin + max(0.0, right - origin - line_width) / 2
        return origin

    def _draw_run(self, text: str, x: float, width: float) -> TextRun:
        font_id = self._active_font()
        size = self.ctx.size
        baseline = self.ctx.y + self.ctx.measurer.ascender(font_id, size)
        # Same Font object the measurer uses, so glyphs and widths agree
        tw = fitz.TextWriter(self.ctx.page.rect)
        tw.append(fitz.Point(x, baseline), text, font=self.ctx.measurer.font(font_id), fontsize=size)
        tw.write_text(self.ctx.page, color=TEXT_COLOR)
        run = TextRun(text=text, x=x, y=self.ctx.y, width=width, font_id=font_id, size=size)
        self.ctx.runs.append(run)
        return run

    # ── Vertical movement and graphics ────────────────────────────────────

    def move_down(self, lines: float = 1.0) -> "PageWriter":
        """Advance the pen by a fraction (or multiple) of the current line height."""
        self.ctx.y += lines * self.line_height()
        return self

    def draw_line(self, x1: float, x2: float, width: float = 1.0) -> "PageWriter":
        """Horizontal rule at the current pen y."""
        self._check_open()
        y = self.ctx.y
        self.ctx.page.draw_line(fitz.Point(x1, y), fitz.Point(x2, y), color=TEXT_COLOR, width=width)
        self.ctx.rules.append(Rule(x1=x1, x2=x2, y=y))
        return self

    def draw_icon(self, x: float, y: float, size: float) -> IconStamp:
        """Stamp an external-link glyph (box with outgoing arrow) at an absolute position."""
        self._check_open()
        shape = self.ctx.page.new_shape()
        # open box
        shape.draw_polyline([
            fitz.Point(x + size * 0.45, y + size * 0.15),
            fitz.Point(x, y + size * 0.15),
            fitz.Point(x, y + size),
            fitz.Point(x + size * 0.85, y + size),
            fitz.Point(x + size * 0.85, y + size * 0.55),
        ])
        # arrow shaft and head
        shape.draw_line(fitz.Point(x + size * 0.4, y + size * 0.6), fitz.Point(x + size, y))
        shape.draw_polyline([
            fitz.Point(x + size * 0.6, y),
            fitz.Point(x + size, y),
            fitz.Point(x + size, y + size * 0.4),
        ])
        shape.finish(color=TEXT_COLOR, width=size * 0.1, closePath=False)
        shape.commit()

        icon = IconStamp(x=x, y=y, size=size)
        self.ctx.icons.append(icon)
        return icon

    def add_link_zone(self, x: float, y: float, width: float, height: float, target: str) -> LinkZone:
        """Invisible clickable rectangle pointing at a URL, mailto: or tel: target."""
        self._check_open()
        self.ctx.page.insert_link({
            "kind": fitz.LINK_URI,
            "from": fitz.Rect(x, y, x + width, y + height),
            "uri": target,
        })
        zone = LinkZone(x=x, y=y, width=width, height=height, target=target)
        self.ctx.link_zones.append(zone)
        return zone

    # ── Output ────────────────────────────────────────────────────────────

    def finalize(self) -> bytes:
        """Serialize the page into a PDF byte buffer. The writer is closed afterwards."""
        self._check_open()
        self.ctx.finalized = True
        try:
            data = self.ctx.doc.tobytes(garbage=3, deflate=True)
        except Exception as e:
            logger.error(f"PDF encoding failed: {e}")
            raise DocumentEncodeError(f"Failed to encode PDF: {e}") from e
        finally:
            self.ctx.doc.close()
        logger.debug(f"Encoded page: {len(self.ctx.runs)} runs, {len(self.ctx.link_zones)} links, {len(data)} bytes")
        return data

    def close(self) -> None:
        """Discard the page without producing output."""
        if not self.ctx.finalized:
            self.ctx.finalized = True
            self.ctx.doc.close()

    def _check_open(self) -> None:
        if self.ctx.finalized:
            raise ResumeRenderError("Page has already been finalized")
