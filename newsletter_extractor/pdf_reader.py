"""
PDF Reader — Loads a newsletter PDF from disk and decodes it with PyMuPDF.

The whole file is read into memory first, so the source can be copied or
removed while the decoded document is still open.
"""

import logging
import os

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


def open_document(pdf_path: str) -> fitz.Document:
    """
    Read and decode a PDF file.

    Args:
        pdf_path: Path to the PDF file.

    Returns:
        An open PyMuPDF document. Use it as a context manager to release it.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be decoded as a PDF or has no pages.
    """
    if not os.path.isfile(pdf_path):
        raise FileNotFoundError(f"PDF file not found: {pdf_path}")

    with open(pdf_path, "rb") as f:
        pdf_bytes = f.read()

    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        raise RuntimeError(f"Cannot open PDF file: {pdf_path}") from e

    if doc.page_count == 0:
        doc.close()
        raise RuntimeError(f"Cannot open PDF file: {pdf_path} (no pages)")

    logger.debug(f"Opened {pdf_path}: {doc.page_count} pages, {len(pdf_bytes)} bytes")
    return doc


def get_page(doc: fitz.Document, page_number: int) -> fitz.Page:
    """Return a page by its 1-based number."""
    if page_number < 1 or page_number > doc.page_count:
        raise IndexError(f"Page {page_number} out of range (document has {doc.page_count} pages)")
    return doc.load_page(page_number - 1)


def get_document_info(pdf_path: str) -> dict:
    """
    Get basic information about a PDF file.

    Returns:
        Dict with keys: page_count, width, height (first page, document units).
    """
    with open_document(pdf_path) as doc:
        first = doc.load_page(0)
        return {
            "page_count": doc.page_count,
            "width": first.rect.width,
            "height": first.rect.height,
        }
