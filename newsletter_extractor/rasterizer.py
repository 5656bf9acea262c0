"""
Rasterizer — Renders PDF pages to JPEG, optionally cropped to a pixel region.
"""

import io
import logging

import fitz  # PyMuPDF
import numpy as np
from PIL import Image as PILImage

from .layout import JPEG_QUALITY, RENDER_SCALE
from .models import Rect

logger = logging.getLogger(__name__)


def render_page_to_array(page: fitz.Page, scale: float = RENDER_SCALE) -> np.ndarray:
    """Render a page into an RGB numpy array (H x W x 3)."""
    pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
    raster = np.frombuffer(pix.samples, dtype=np.uint8).reshape(pix.height, pix.width, pix.n)
    logger.debug(f"  Rendered page {page.number + 1} at {scale}x: {pix.width}x{pix.height}")
    return raster


def encode_jpeg(raster: np.ndarray, quality: int = JPEG_QUALITY) -> bytes:
    pil_img = PILImage.fromarray(raster)
    if pil_img.mode != "RGB":
        pil_img = pil_img.convert("RGB")
    buffer = io.BytesIO()
    pil_img.save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def render_page_to_image(page: fitz.Page, crop_rect: Rect | None = None,
                         scale: float = RENDER_SCALE, quality: int = JPEG_QUALITY) -> bytes:
    """
    Render a page to JPEG bytes.

    Args:
        page: PyMuPDF page to render.
        crop_rect: Optional crop region, already in the rendered pixel space.
            The image always has the crop's size; parts of the region
            beyond the page edge come out white.
        scale: Render scale (2x by default).
        quality: JPEG quality.

    Returns:
        The encoded JPEG image.

    Raises:
        Whatever the underlying render or encode call raised; it is logged first.
    """
    try:
        raster = render_page_to_array(page, scale)
        if crop_rect is not None:
            page_rect = Rect(x=0, y=0, width=raster.shape[1], height=raster.shape[0])
            if not crop_rect.intersects(page_rect):
                raise ValueError(f"Crop region {crop_rect} lies outside the rendered page")
            raster = crop_rect.crop_from(raster)
        return encode_jpeg(raster, quality)
    except Exception as e:
        logger.error(f"Error rendering PDF page {page.number + 1}: {e}")
        raise
