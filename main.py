"""
Newsletter Extractor — CLI Entry Point

Usage:
    python main.py scan newsletter/ --data-dir out/data --image-dir out/images --pdf-dir out/pdf
    python main.py process issue.pdf --image-dir out/images --pages 5 -v
    python main.py extract-page issue.pdf 3 --image-dir out/images
"""

import argparse
import json
import logging
import sys
import time

from newsletter_extractor import config
from newsletter_extractor.layout import DEFAULT_LAYOUT, load_layout
from newsletter_extractor.models import BatchSummary, ProcessOptions
from newsletter_extractor.pdf_reader import get_document_info
from newsletter_extractor.processor import extract_page_to_image, process_newsletter
from newsletter_extractor.scanner import scan_newsletters


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else config.log_level()
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")


def _options_from_args(args: argparse.Namespace) -> ProcessOptions:
    return ProcessOptions(extract_pages_to_image=args.pages or [], output_data_dir=args.data_dir,
                          output_image_dir=args.image_dir, output_pdf_dir=args.pdf_dir,
                          remove_after_processing=args.remove)


def _layout_from_args(args: argparse.Namespace):
    return load_layout(args.layout) if args.layout else DEFAULT_LAYOUT


def run_scan(args: argparse.Namespace) -> int:
    logger = logging.getLogger("scan")
    total_start = time.time()
    directory = args.directory or config.newsletters_dir()

    logger.info("=" * 60)
    logger.info(f"Scanning newsletters in {directory}")
    logger.info("=" * 60)
    result = scan_newsletters(directory, _options_from_args(args), _layout_from_args(args),
                              isolate_failures=args.keep_going)

    logger.info("")
    logger.info("=" * 60)
    logger.info("SCAN COMPLETE")
    logger.info("=" * 60)
    if isinstance(result, BatchSummary):
        logger.info(f"  Files processed: {len(result.succeeded)}")
        logger.info(f"  Files failed:    {len(result.failed)}")
        exit_code = 1 if result.failed else 0
    else:
        logger.info(f"  Files processed: {len(result)}")
        exit_code = 0
    logger.info(f"  Total time:      {time.time() - total_start:.1f}s")
    return exit_code


def run_process(args: argparse.Namespace) -> int:
    logger = logging.getLogger("process")
    info = get_document_info(args.input)
    logger.info(f"  Pages: {info['page_count']}, size: {info['width']:.0f}x{info['height']:.0f}")
    record = process_newsletter(args.input, _options_from_args(args), _layout_from_args(args))
    print(json.dumps(record.to_data(), ensure_ascii=False, indent=2))
    return 0


def run_extract_page(args: argparse.Namespace) -> int:
    logger = logging.getLogger("extract-page")
    image = extract_page_to_image(args.input, args.page, args.image_dir, _layout_from_args(args))
    logger.info(f"  Rendered page {args.page} of {args.input} ({len(image)} bytes)")
    return 0


def _add_output_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--data-dir", help="Directory for <slug>.json files")
    parser.add_argument("--image-dir", help="Directory for cover and page JPEGs")
    parser.add_argument("--pdf-dir", help="Directory for <slug>.pdf copies")
    parser.add_argument("--pages", type=int, nargs="+", metavar="N", help="Extra page numbers to render (needs --image-dir)")
    parser.add_argument("--remove", action="store_true", help="Delete each source PDF after processing")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract metadata and images from fixed-layout PDF newsletters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n  python main.py scan newsletter/ --data-dir out/data\n"
               "  python main.py process issue.pdf --image-dir out/images --pages 5")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--layout", help="JSON file overriding the field rectangles")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    scan = subparsers.add_parser("scan", help="Process every PDF in a directory")
    scan.add_argument("directory", nargs="?", help="Newsletter directory (default: $NEWSLETTERS_DIR or ./newsletter)")
    _add_output_arguments(scan)
    scan.add_argument("--keep-going", action="store_true", help="Continue past failed files and report them at the end")
    scan.set_defaults(func=run_scan)

    process = subparsers.add_parser("process", help="Process a single newsletter PDF")
    process.add_argument("input", help="Path to the newsletter PDF")
    _add_output_arguments(process)
    process.set_defaults(func=run_process)

    extract = subparsers.add_parser("extract-page", help="Render one page of a PDF to JPEG")
    extract.add_argument("input", help="Path to the PDF")
    extract.add_argument("page", type=int, help="1-based page number")
    extract.add_argument("--image-dir", help="Directory for page-<N>.jpg")
    extract.set_defaults(func=run_extract_page)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except Exception as e:
        logging.getLogger("pipeline").error(f"{type(e).__name__}: {e}", exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
