"""
Dimension cells to inches.

Listing cells hold sizes such as `5'6"`, `6'`, `14"` or a bare `48`.
`to_inches` converts them to a whole number of inches.  The feet token is
taken from its first occurrence anywhere in the text but only cut from
the string when it is the prefix; the inch token is then searched in
whatever remains.  Cells without any digit return `None`.
"""

from __future__ import annotations

import re
from typing import Optional

FEET_PATTERN = re.compile(r"([0-9]+)'")
INCH_PATTERN = re.compile(r'([0-9]+)"')
_NON_DIGITS = re.compile(r"[^0-9]+")

INCHES_PER_FOOT = 12
# CPython 3.11+ default for sys.get_int_max_str_digits(), applied on every version
MAX_DIGIT_RUN = 4300


def to_inches(text: str) -> Optional[int]:
    """Return the size in `text` as integer inches.

    Args:
        text: Raw cell text.

    Returns:
        `feet * 12 + inches` when a feet or inch token was found,
        otherwise the integer formed by every digit in the text.  `None`
        when the text holds no digits at all, or a digit run too long to
        convert.
    """
    try:
        return _parse_inches(text)
    except ValueError:
        return None


def _int(digits: str) -> int:
    if len(digits) > MAX_DIGIT_RUN:
        raise ValueError(f"digit run of {len(digits)} exceeds {MAX_DIGIT_RUN}")
    return int(digits)


def _parse_inches(text: str) -> Optional[int]:
    feet = 0
    inch = 0

    match = FEET_PATTERN.search(text)
    if match:
        feet = _int(match.group(1))
        if match.start() == 0:
            text = text[match.end():]

    match = INCH_PATTERN.search(text)
    if match:
        inch = _int(match.group(1))

    if feet or inch:
        return feet * INCHES_PER_FOOT + inch

    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return None
    return _int(digits)
