"""
Page Text — Indexes the positioned text of a PDF page and pulls out the text
that falls inside a given rectangle.

Fragments come from PyMuPDF's span-level text dictionary. Each span becomes a
TextFragment whose origin is the span's baseline start, flipped into
bottom-up document space so that it can be mapped like any other rectangle.
"""

import logging
from dataclasses import dataclass, field

import fitz  # PyMuPDF

from .geometry import pdf_rect_to_pixel_rect, rect_intersects
from .layout import RENDER_SCALE
from .models import Rect, TextFragment, Viewport

logger = logging.getLogger(__name__)


@dataclass
class PageText:
    """Positioned text fragments of one page, in the decoder's native order."""
    page_number: int
    width: float
    height: float
    fragments: list[TextFragment] = field(default_factory=list)

    @classmethod
    def from_fitz_page(cls, page: fitz.Page) -> "PageText":
        page_height = page.rect.height
        fragments = []
        page_dict = page.get_text("dict")
        for block in page_dict.get("blocks", []):
            if block.get("type") != 0:
                continue
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    x0, y0, x1, y1 = span["bbox"]
                    origin_x, origin_y = span["origin"]
                    fragments.append(TextFragment(text=span.get("text", ""),
                                                  x=origin_x, y=page_height - origin_y,
                                                  width=x1 - x0, height=y1 - y0))
        logger.debug(f"  Page {page.number + 1}: indexed {len(fragments)} text fragments")
        return cls(page_number=page.number + 1, width=page.rect.width,
                   height=page_height, fragments=fragments)

    def viewport(self, scale: float = RENDER_SCALE) -> Viewport:
        return Viewport.for_page(self.width, self.height, scale)


def fragment_rect(fragment: TextFragment) -> Rect:
    return Rect(x=fragment.x, y=fragment.y, width=fragment.width or 0, height=fragment.height or 0)


def fragments_in_rect(page: PageText, rect: Rect, scale: float = RENDER_SCALE) -> list[TextFragment]:
    """
    Return the fragments whose box intersects ``rect``.

    Args:
        page: Text index of the page to search.
        rect: Target rectangle in document space.
        scale: Render scale used for the pixel-space comparison.

    Returns:
        Matching fragments in native page order. Zero-height fragments are
        never returned.
    """
    viewport = page.viewport(scale)
    target = pdf_rect_to_pixel_rect(rect, viewport)
    matches = []
    for fragment in page.fragments:
        if not fragment.height:
            continue
        pixel_rect = pdf_rect_to_pixel_rect(fragment_rect(fragment), viewport)
        if rect_intersects(pixel_rect, target):
            matches.append(fragment)
    return matches


def get_text_in_rect(page: PageText, rect: Rect, scale: float = RENDER_SCALE) -> str:
    text = " ".join(f.text for f in fragments_in_rect(page, rect, scale))
    logger.debug(f"  Page {page.page_number} rect ({rect.x}, {rect.y}, {rect.width}x{rect.height}): {text[:60]!r}")
    return text
