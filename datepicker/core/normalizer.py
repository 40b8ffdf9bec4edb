"""
Token normalizer for partially typed dates.

Turns sanitized text such as "4/31" or "13/5/99" into a month/day/year
triple that is always shaped like M/d/y. Missing tokens are filled in and
out-of-range tokens are clamped using the viewed month as context:

- month: defaults to the viewed month, clamped to 1-12
- day:   defaults to 1, clamped to 1..last day of the *viewed* month
- year:  defaults to the viewed year, two-digit years are expanded
         against the viewed year's millennium

Normalization never fails. Whether the result is a real date is decided
by the parser.
"""

import calendar
import math
from datetime import date

TokenTriple = tuple[str | None, str | None, str | None]
NormalizedTriple = tuple[str, str, str]

SEPARATOR = "/"


def split_tokens(text: str) -> TokenTriple:
    """Split text into (month, day, year) tokens.

    Positions the user hasn't typed are None. Anything past the second
    separator stays in the year token.
    """
    parts = text.split(SEPARATOR, 2) if text else []
    parts += [None] * (3 - len(parts))
    return parts[0], parts[1], parts[2]


def _to_int(token: str | None) -> int | None:
    if token is None or not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def last_day_of_month(day: date) -> int:
    """Return the number of days in the month containing `day`."""
    return calendar.monthrange(day.year, day.month)[1]


def normalize_month(token: str | None, viewing: date) -> str:
    if token is None:
        return str(viewing.month)

    value = _to_int(token)
    if value is None or value < 1:
        return "1"
    if value > 12:
        return "12"
    return token


def normalize_day(token: str | None, viewing: date) -> str:
    """Clamp the day token against the viewed month's length.

    The viewed month is used even when the month token names a different
    month, so "2/31" while viewing January normalizes to "2/31" and is
    rejected later by the parser.
    """
    if token is None:
        return "1"

    value = _to_int(token)
    if value is None or value < 1:
        return "1"

    last_day = last_day_of_month(viewing)
    if value > last_day:
        return str(last_day)
    return token


def expand_year(token: str | None, viewing: date) -> str:
    """Fill in or expand the year token.

    Two-digit years are added to the viewed year rounded to the nearest
    thousand: "12" while viewing 2023 becomes "2012". Single-digit and
    three-or-more-digit years are kept literally.
    """
    if not token:
        return str(viewing.year)

    value = _to_int(token)
    if value is None:
        return token

    if len(token) == 2 or 9 < value < 100:
        # Round half up, matching how the year base has always been picked
        millennium = math.floor(viewing.year / 1000 + 0.5) * 1000
        return str(millennium + value)
    return token


def normalize_tokens(text: str, viewing: date) -> NormalizedTriple:
    """Fill and clamp the tokens of `text` using `viewing` as context.

    Args:
        text: Sanitized input text (digits and '/').
        viewing: Any date inside the currently viewed month.

    Returns:
        A (month, day, year) triple of non-empty strings.
    """
    month, day, year = split_tokens(text)
    return (
        normalize_month(month, viewing),
        normalize_day(day, viewing),
        expand_year(year, viewing),
    )


def normalize_date_text(text: str, viewing: date) -> str:
    """Normalize `text` and join the tokens back into an M/d/y string."""
    return SEPARATOR.join(normalize_tokens(text, viewing))
