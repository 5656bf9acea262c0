import numpy as np
import pytest

from newsletter_extractor.geometry import pdf_rect_to_pixel_rect, pixel_rect_to_pdf_rect, rect_intersects
from newsletter_extractor.models import Rect, Viewport


def test_maps_document_rect_into_flipped_pixel_space():
    viewport = Viewport.for_page(1200, 1700, 2.0)
    pixel = pdf_rect_to_pixel_rect(Rect(x=785, y=97, width=373, height=120), viewport)
    assert pixel == Rect(x=1570, y=2966, width=746, height=240)


@pytest.mark.parametrize("scale", [0.5, 1.0, 2.0, 3.7])
def test_pixel_mapping_inverts(scale):
    viewport = Viewport.for_page(612, 792, scale)
    rect = Rect(x=12.5, y=301.25, width=99.9, height=0.3)
    back = pixel_rect_to_pdf_rect(pdf_rect_to_pixel_rect(rect, viewport), viewport)
    assert back.x == pytest.approx(rect.x)
    assert back.y == pytest.approx(rect.y)
    assert back.width == pytest.approx(rect.width)
    assert back.height == pytest.approx(rect.height)


@pytest.mark.parametrize("a, b, expected", [
    (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), True),
    (Rect(0, 0, 10, 10), Rect(2, 2, 3, 3), True),
    (Rect(0, 0, 10, 10), Rect(10, 0, 5, 5), False),
    (Rect(0, 0, 10, 10), Rect(0, 10, 5, 5), False),
    (Rect(0, 0, 10, 10), Rect(20, 20, 5, 5), False),
])
def test_intersection_is_symmetric_and_edge_exclusive(a, b, expected):
    assert rect_intersects(a, b) is expected
    assert rect_intersects(b, a) is expected


def test_negative_extent_is_rejected():
    with pytest.raises(ValueError):
        Rect(x=0, y=0, width=-1, height=5)


def _raster(height=4, width=6):
    return np.arange(height * width * 3, dtype=np.uint8).reshape(height, width, 3)


def test_crop_inside_raster():
    raster = _raster()
    crop = Rect(x=1, y=1, width=3, height=2).crop_from(raster)
    assert np.array_equal(crop, raster[1:3, 1:4])


def test_crop_with_negative_origin_is_padded_not_wrapped():
    raster = _raster()
    crop = Rect(x=-2, y=0, width=4, height=2).crop_from(raster)
    assert crop.shape == (2, 4, 3)
    assert (crop[:, :2] == 255).all()
    assert np.array_equal(crop[:, 2:], raster[0:2, 0:2])


def test_crop_past_far_edge_keeps_full_size():
    raster = _raster()
    crop = Rect(x=4, y=3, width=5, height=3).crop_from(raster, fill=0)
    assert crop.shape == (3, 5, 3)
    assert np.array_equal(crop[:1, :2], raster[3:4, 4:6])
    assert (crop[1:] == 0).all()
    assert (crop[:, 2:] == 0).all()
