"""
Newsletter Extractor

Extracts issue metadata (date, issue number, description, editorial) and
cover/page images from fixed-layout PDF newsletters, and writes them out as
JSON, JPEG and copied PDF files.
"""

__version__ = "1.0.0"
