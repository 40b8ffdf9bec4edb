"""
Keystroke filter for the date input field.

Only ASCII digits and the "/" separator survive. Parsing happens later,
on commit.
"""

import re

# Any run of characters that can't appear in an MM/dd/yyyy string
_DISALLOWED_RUN = re.compile(r"[^0-9/]+")


def sanitize_input(raw: str) -> str:
    """Strip surrounding whitespace and drop everything but digits and '/'.

    Args:
        raw: The literal text currently in the input control.

    Returns:
        The sanitized text (possibly empty).
    """
    if not raw:
        return ""
    return _DISALLOWED_RUN.sub("", raw.strip())
