"""
Processor — Extracts one newsletter's fields and writes its artifacts.

Each call is self-contained: the document is opened, read from its fixed
layout rectangles, written out according to the options and closed again.
Any failure propagates to the caller; files already written stay on disk.
"""

import logging

from .layout import DEFAULT_LAYOUT, NewsletterLayout
from .models import ExtractedText, NewsletterRecord, ProcessOptions
from .page_text import PageText, get_text_in_rect
from .parsing import make_slug, parse_issue_number, parse_month_year
from .pdf_reader import get_page, open_document
from .rasterizer import render_page_to_image
from . import writer

logger = logging.getLogger(__name__)


def process_newsletter(pdf_path: str, options: ProcessOptions | None = None,
                       layout: NewsletterLayout = DEFAULT_LAYOUT) -> NewsletterRecord:
    """
    Extract metadata and images from a single newsletter PDF.

    Args:
        pdf_path: Path to the newsletter PDF.
        options: Output selection. Defaults produce no files at all.
        layout: Field rectangles and render settings.

    Returns:
        The extracted NewsletterRecord.
    """
    options = options or ProcessOptions()
    logger.info(f"Processing {pdf_path}")

    with open_document(pdf_path) as doc:
        first_page = get_page(doc, layout.fields_page)
        editorial_page = get_page(doc, layout.editorial_page)

        first_text = PageText.from_fitz_page(first_page)
        editorial_text = PageText.from_fitz_page(editorial_page)
        scale = layout.render_scale

        text = ExtractedText(
            date=get_text_in_rect(first_text, layout.date, scale),
            description=get_text_in_rect(first_text, layout.description, scale),
            issue=get_text_in_rect(first_text, layout.issue, scale),
            editorial=get_text_in_rect(editorial_text, layout.editorial, scale),
        )

        issue_date = parse_month_year(text.date)
        issue_number = parse_issue_number(text.issue)
        slug = make_slug(issue_date, issue_number)
        record = NewsletterRecord(slug=slug, path=pdf_path, issue_date=issue_date,
                                  issue_number=issue_number, text=text)
        logger.info(f"  {slug}: date={issue_date}, issue={issue_number}")

        if options.output_image_dir:
            cover = render_page_to_image(first_page, layout.cover, scale, layout.jpeg_quality)
            writer.write_image(cover, options.output_image_dir, f"{slug}-cover.jpg")
            for page_number in options.extract_pages_to_image:
                page = get_page(doc, page_number)
                image = render_page_to_image(page, scale=scale, quality=layout.jpeg_quality)
                writer.write_image(image, options.output_image_dir, f"{slug}-page-{page_number}.jpg")

        if options.output_data_dir:
            writer.write_record_json(record, options.output_data_dir)

        if options.output_pdf_dir:
            writer.copy_pdf(pdf_path, options.output_pdf_dir, slug)

        if options.remove_after_processing:
            writer.remove_source(pdf_path)

    return record


def extract_page_to_image(pdf_path: str, page_number: int, output_image_dir: str | None = None,
                          layout: NewsletterLayout = DEFAULT_LAYOUT) -> bytes:
    """Render one full page of a PDF to JPEG, saving it as ``page-<N>.jpg`` if a directory is given."""
    with open_document(pdf_path) as doc:
        page = get_page(doc, page_number)
        image = render_page_to_image(page, scale=layout.render_scale, quality=layout.jpeg_quality)

    if output_image_dir:
        writer.write_image(image, output_image_dir, f"page-{page_number}.jpg")
    return image
