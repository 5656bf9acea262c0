"""
Scanner — Runs the newsletter processor over every PDF in a directory.

Files are processed one at a time, in name order. By default the first
failure stops the scan. With ``isolate_failures`` every file is attempted and
the outcomes are collected into a BatchSummary instead.
"""

import glob
import logging
import os

from .layout import DEFAULT_LAYOUT, NewsletterLayout
from .models import BatchResult, BatchSummary, NewsletterRecord, ProcessOptions
from .processor import process_newsletter

logger = logging.getLogger(__name__)


def list_pdf_files(directory: str) -> list[str]:
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Newsletter directory not found: {directory}")
    paths = [p for p in glob.glob(os.path.join(directory, "*.pdf")) if p.endswith(".pdf") and os.path.isfile(p)]
    return sorted(paths)


def scan_newsletters(directory: str, options: ProcessOptions | None = None,
                     layout: NewsletterLayout = DEFAULT_LAYOUT,
                     isolate_failures: bool = False) -> list[NewsletterRecord] | BatchSummary:
    """
    Process every PDF in ``directory``.

    Args:
        directory: Directory holding the newsletter PDFs.
        options: Output selection passed to every file.
        layout: Field rectangles and render settings.
        isolate_failures: Keep going after a failed file and return a summary.

    Returns:
        The records in file order, or a BatchSummary when ``isolate_failures``
        is set.
    """
    logger.debug(f"Newsletters path is {directory}")
    pdf_files = list_pdf_files(directory)
    logger.info(f"Found {len(pdf_files)} PDF files in {directory}")

    if isolate_failures:
        return _scan_isolated(pdf_files, options, layout)

    records = []
    for pdf_path in pdf_files:
        record = process_newsletter(pdf_path, options, layout)
        logger.debug(f"  Result: {record}")
        records.append(record)
    return records


def _scan_isolated(pdf_files: list[str], options: ProcessOptions | None,
                   layout: NewsletterLayout) -> BatchSummary:
    summary = BatchSummary()
    for pdf_path in pdf_files:
        try:
            record = process_newsletter(pdf_path, options, layout)
        except Exception as e:
            logger.error(f"  Failed to process {pdf_path}: {e}")
            summary.results.append(BatchResult(path=pdf_path, error=e))
            continue
        logger.debug(f"  Result: {record}")
        summary.results.append(BatchResult(path=pdf_path, record=record))

    logger.info(f"  Processed {summary.file_count} files: "
                f"{len(summary.succeeded)} succeeded, {len(summary.failed)} failed")
    for result in summary.failed:
        logger.info(f"    FAILED {result.path}: {result.error}")
    return summary
