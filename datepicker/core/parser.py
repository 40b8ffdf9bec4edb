"""
Strict MM/dd/yyyy parsing and canonical formatting.
"""

import re
from datetime import date

CANONICAL_FORMAT = "MM/dd/yyyy"

# One or two digit month and day, up to four digit year, nothing else
_DATE_PATTERN = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{1,4})")


class InvalidDateError(ValueError):
    """Raised when normalized text does not resolve to a real calendar date."""

    def __init__(self, text: str, message: str = "not a valid date"):
        self.text = text
        self.message = message
        super().__init__(f"'{text}': {message}")


def parse_date_text(text: str) -> date:
    """Parse `text` strictly as MM/dd/yyyy.

    Tokens must be numeric and the month/day/year combination must exist
    on the calendar ("4/31/2024" fails).

    Args:
        text: A normalized date string, e.g. "4/30/2024".

    Returns:
        The resolved date.

    Raises:
        InvalidDateError: If the text is malformed or names no real date.
    """
    match = _DATE_PATTERN.fullmatch(text or "")
    if match is None:
        raise InvalidDateError(text, f"does not match {CANONICAL_FORMAT}")

    month, day, year = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(text, str(e)) from e


def format_date(value: date) -> str:
    """Render a date in the canonical zero-padded MM/dd/yyyy form."""
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"
