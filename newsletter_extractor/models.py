"""
Data models used across the newsletter extraction pipeline.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional
import numpy as np


@dataclass
class Rect:
    """An axis-aligned rectangle. Document units or pixels, depending on use."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect extents must be non-negative, got {self.width}x{self.height}")

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rect") -> bool:
        """Open-interval overlap: rectangles that only share an edge do not intersect."""
        return (self.x < other.x2 and self.x2 > other.x
                and self.y < other.y2 and self.y2 > other.y)

    def crop_from(self, raster: np.ndarray, fill: int = 255) -> np.ndarray:
        """
        Crop this region from a raster (H x W x C numpy array).

        The result always has the region's full size; any part lying outside
        the raster is filled with ``fill``.
        """
        x, y = int(self.x), int(self.y)
        width, height = int(self.width), int(self.height)
        crop = np.full((height, width) + raster.shape[2:], fill, dtype=raster.dtype)
        src_x0, src_y0 = max(x, 0), max(y, 0)
        src_x1 = min(x + width, raster.shape[1])
        src_y1 = min(y + height, raster.shape[0])
        if src_x1 > src_x0 and src_y1 > src_y0:
            crop[src_y0 - y:src_y1 - y, src_x0 - x:src_x1 - x] = raster[src_y0:src_y1, src_x0:src_x1]
        return crop

    @classmethod
    def from_dict(cls, data: dict) -> "Rect":
        return cls(x=data["x"], y=data["y"], width=data["width"], height=data["height"])


@dataclass
class TextFragment:
    """One positioned run of text; origin in document space, y growing upward."""
    text: str
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0


@dataclass
class Viewport:
    """Pixel dimensions of a page rendered at a given scale."""
    width: float
    height: float
    scale: float

    @classmethod
    def for_page(cls, page_width: float, page_height: float, scale: float) -> "Viewport":
        return cls(width=page_width * scale, height=page_height * scale, scale=scale)


@dataclass
class ExtractedText:
    """Raw text pulled from each fixed field of a newsletter."""
    date: str = ""
    description: str = ""
    editorial: str = ""
    issue: str = ""


@dataclass
class NewsletterRecord:
    """Everything extracted from a single newsletter PDF."""
    slug: str
    path: str
    issue_date: Optional[date] = None
    issue_number: Optional[int] = None
    text: ExtractedText = field(default_factory=ExtractedText)

    @property
    def description(self) -> str:
        return self.text.description

    @property
    def editorial(self) -> str:
        return self.text.editorial

    def to_data(self) -> dict:
        """Payload written to ``<slug>.json``."""
        return {
            "date": self.issue_date.isoformat() if self.issue_date else None,
            "description": self.description,
            "editorial": self.editorial,
            "issueNumber": self.issue_number,
            "path": f"/pdf/{self.slug}.pdf",
            "slug": self.slug,
        }


@dataclass
class ProcessOptions:
    """Which outputs to produce for a newsletter. A missing directory skips that output."""
    extract_pages_to_image: list[int] = field(default_factory=list)
    output_data_dir: Optional[str] = None
    output_image_dir: Optional[str] = None
    output_pdf_dir: Optional[str] = None
    remove_after_processing: bool = False


@dataclass
class BatchResult:
    """Outcome of processing one file in isolated batch mode."""
    path: str
    record: Optional[NewsletterRecord] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchSummary:
    results: list[BatchResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[BatchResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[BatchResult]:
        return [r for r in self.results if not r.ok]

    @property
    def file_count(self) -> int:
        return len(self.results)
