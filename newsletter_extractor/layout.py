"""
Layout — Fixed field rectangles of the newsletter template.

Text fields are document-space rectangles. The cover crop is a pixel-space
rectangle of the page rendered at ``render_scale``.
"""

import json
import logging
from dataclasses import dataclass, field, fields, replace

from .models import Rect

logger = logging.getLogger(__name__)

DATE_RECT = Rect(x=785, y=97, width=373, height=120)
DESCRIPTION_RECT = Rect(x=49, y=1540, width=1093, height=100)
ISSUE_RECT = Rect(x=936, y=244, width=193, height=73)
EDITORIAL_RECT = Rect(x=80, y=200, width=1064, height=800)
COVER_IMAGE_RECT = Rect(x=60, y=333, width=1068, height=1201)

RENDER_SCALE = 2.0
JPEG_QUALITY = 60

FIELDS_PAGE = 1
EDITORIAL_PAGE = 3

_RECT_FIELDS = ("date", "description", "issue", "editorial", "cover")


@dataclass
class NewsletterLayout:
    date: Rect = field(default_factory=lambda: replace(DATE_RECT))
    description: Rect = field(default_factory=lambda: replace(DESCRIPTION_RECT))
    issue: Rect = field(default_factory=lambda: replace(ISSUE_RECT))
    editorial: Rect = field(default_factory=lambda: replace(EDITORIAL_RECT))
    cover: Rect = field(default_factory=lambda: replace(COVER_IMAGE_RECT))
    fields_page: int = FIELDS_PAGE
    editorial_page: int = EDITORIAL_PAGE
    render_scale: float = RENDER_SCALE
    jpeg_quality: int = JPEG_QUALITY

    @classmethod
    def from_dict(cls, data: dict) -> "NewsletterLayout":
        """Build a layout from a dict of overrides; unknown keys raise ValueError."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown layout keys: {', '.join(sorted(unknown))}")
        kwargs = {}
        for key, value in data.items():
            kwargs[key] = Rect.from_dict(value) if key in _RECT_FIELDS else value
        return cls(**kwargs)


DEFAULT_LAYOUT = NewsletterLayout()


def load_layout(path: str) -> NewsletterLayout:
    """Load layout overrides from a JSON file. Missing keys keep their defaults."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    layout = NewsletterLayout.from_dict(data)
    logger.info(f"Loaded layout overrides from {path}: {', '.join(sorted(data)) or 'none'}")
    return layout
