"""Date Parsing — accepts day-first and ISO expense dates, emits ISO.

Invariants:
    - ACCEPTED_DATE_FORMATS order is the attempt order: DD-MM-YYYY first, YYYY-MM-DD second
    - Field widths are fixed (two-digit day/month, four-digit year); "1-3-2025" is rejected
    - Output format is always YYYY-MM-DD

Design Decisions:
    - Regex gate before strptime: strptime alone accepts unpadded fields
    - Returns None on failure: the caller decides which FieldViolation to raise
"""

import re
from datetime import date, datetime


ACCEPTED_DATE_FORMATS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"\d{2}-\d{2}-\d{4}"), "%d-%m-%Y"),
    (re.compile(r"\d{4}-\d{2}-\d{2}"), "%Y-%m-%d"),
)
OUTPUT_DATE_FORMAT: str = "%Y-%m-%d"


def parse_expense_date(raw: str) -> date | None:
    """Parse raw into a calendar date, trying each accepted format in order."""
    for pattern, fmt in ACCEPTED_DATE_FORMATS:
        if not pattern.fullmatch(raw):
            continue
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def format_expense_date(value: date) -> str:
    return value.strftime(OUTPUT_DATE_FORMAT)

