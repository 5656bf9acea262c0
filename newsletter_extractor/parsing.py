"""
Parsing — Turns raw field text into typed values and builds the file slug.

Parse helpers never raise on bad input; they return None and the caller
carries on with a missing value.
"""

import logging
import re
from datetime import date, datetime

from dateutil import parser as dateparser

logger = logging.getLogger(__name__)

# Two different fallbacks reveal which parts the text did not supply
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 1))
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def parse_month_year(text: str) -> date | None:
    """
    Parse text such as ``"March 2024"``, ``"Sept. 2023"`` or ``"03/2024"`` into
    the first day of that month. Returns None unless both a month and a year
    are present.
    """
    if not text or not text.strip():
        return None
    try:
        first, second = (dateparser.parse(text, fuzzy=True, default=d) for d in _DEFAULTS)
    except (ValueError, OverflowError) as e:
        logger.warning(f"  Could not parse month/year from {text!r}: {e}")
        return None
    if first.year != second.year or first.month != second.month:
        logger.warning(f"  No month and year in {text!r}")
        return None
    return date(first.year, first.month, 1)


def safe_parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None


def parse_issue_number(issue_text: str) -> int | None:
    """The issue number is the second whitespace-separated token, e.g. ``"Issue 42"``."""
    tokens = (issue_text or "").split()
    issue_number = safe_parse_int(tokens[1]) if len(tokens) > 1 else None
    if issue_number is None and issue_text:
        logger.warning(f"  Could not parse issue number from {issue_text!r}")
    return issue_number


def slugify(text: str) -> str:
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def make_slug(issue_date: date | None, issue_number: int | None) -> str:
    """
    Build the artifact base name from year, zero-based month index and issue
    number. Missing parts are written as ``unknown``.
    """
    year = issue_date.year if issue_date else "unknown"
    month_index = issue_date.month - 1 if issue_date else "unknown"
    issue = issue_number if issue_number is not None else "unknown"
    return slugify(f"newsletter-{year}-{month_index}-{issue}")
