from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF
import pytest

PAGE_WIDTH = 1200
PAGE_HEIGHT = 1700
FONT_SIZE = 20


def _insert(page: fitz.Page, x: float, doc_y: float, text: str):
    """Insert text with its baseline at ``doc_y`` measured up from the bottom edge."""
    if text:
        page.insert_text((x, PAGE_HEIGHT - doc_y), text, fontsize=FONT_SIZE)


def build_newsletter(path: Path, *, date_text="March 2024", issue_text="Issue 42",
                     description="Spring events and club news",
                     editorial="Welcome to the spring issue.", page_count=5) -> Path:
    doc = fitz.open()
    for n in range(1, page_count + 1):
        page = doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        _insert(page, 600, 50, f"Page {n}")
        if n == 1:
            _insert(page, 800, 120, date_text)
            _insert(page, 950, 260, issue_text)
            _insert(page, 60, 1570, description)
            _insert(page, 100, 1000, "Unrelated")
        if n == 3:
            _insert(page, 100, 500, editorial)
    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def make_newsletter(tmp_path):
    def _make(name: str = "issue.pdf", **kwargs) -> Path:
        return build_newsletter(tmp_path / name, **kwargs)
    return _make


@pytest.fixture
def newsletter_pdf(make_newsletter) -> Path:
    return make_newsletter()
