"""
Geometry — Maps rectangles between PDF document space and rendered pixel space.

Document space has its origin at the bottom-left of the page with y growing
upward. Pixel space has its origin at the top-left with y growing downward.
Both directions are kept in floating point; nothing is rounded here.
"""

from .models import Rect, Viewport


def pdf_rect_to_pixel_rect(rect: Rect, viewport: Viewport) -> Rect:
    """
    Convert a document-space rectangle into the viewport's pixel space.

    The rectangle's (x, y) is its bottom-left corner in document space; the
    returned rectangle is anchored at its top-left corner in pixel space.
    """
    scale = viewport.scale
    pixel_x = rect.x * scale
    pixel_y = (viewport.height / scale - rect.y) * scale
    pixel_width = rect.width * scale
    pixel_height = rect.height * scale
    return Rect(x=pixel_x, y=pixel_y - pixel_height, width=pixel_width, height=pixel_height)


def pixel_rect_to_pdf_rect(rect: Rect, viewport: Viewport) -> Rect:
    """Inverse of :func:`pdf_rect_to_pixel_rect`."""
    scale = viewport.scale
    width = rect.width / scale
    height = rect.height / scale
    y = viewport.height / scale - (rect.y + rect.height) / scale
    return Rect(x=rect.x / scale, y=y, width=width, height=height)


def rect_intersects(a: Rect, b: Rect) -> bool:
    return a.intersects(b)
