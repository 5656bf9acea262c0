"""
Writer — Saves newsletter artifacts (JPEG images, JSON data, PDF copies).
"""

import json
import logging
import os
import shutil

from .models import NewsletterRecord

logger = logging.getLogger(__name__)


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def write_image(image_bytes: bytes, output_dir: str, file_name: str) -> str:
    _ensure_dir(output_dir)
    path = os.path.join(output_dir, file_name)
    with open(path, "wb") as f:
        f.write(image_bytes)
    logger.debug(f"  Saved image: {path} ({len(image_bytes)} bytes)")
    return path


def write_record_json(record: NewsletterRecord, output_dir: str) -> str:
    _ensure_dir(output_dir)
    path = os.path.join(output_dir, f"{record.slug}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(record.to_data(), f, ensure_ascii=False, indent=2)
    logger.debug(f"  Saved data: {path}")
    return path


def copy_pdf(source_path: str, output_dir: str, slug: str) -> str:
    _ensure_dir(output_dir)
    path = os.path.join(output_dir, f"{slug}.pdf")
    shutil.copyfile(source_path, path)
    logger.debug(f"  Copied PDF: {source_path} -> {path}")
    return path


def remove_source(source_path: str):
    os.remove(source_path)
    logger.info(f"  Removed source file: {source_path}")
