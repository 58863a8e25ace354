"""Named string formats — predicates behind the ``format`` keyword.

Static reference table, no I/O. Checks are intentionally permissive:
``email`` only requires an ``@`` and the default ``date`` check does not tell
month from day, so ``9999-99-99`` passes. STRICT_DATES swaps in a real
calendar check.
"""

import re
from datetime import datetime
from typing import Callable

FormatCheck = Callable[[str], bool]

# Four, two and two ASCII digits at the end of the string
DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}\Z", re.ASCII)


def is_email(text: str) -> bool:
    return "@" in text


def is_date(text: str) -> bool:
    return DATE_SHAPE.search(text) is not None


def is_calendar_date(text: str) -> bool:
    """Strict YYYY-MM-DD with a real month and day."""
    if re.fullmatch(r"\d{4}-\d{2}-\d{2}", text, re.ASCII) is None:
        return False
    try:
        datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        return False
    return True


FORMAT_CHECKS: dict[str, FormatCheck] = {
    "email": is_email,
    "date": is_date,
}


def format_checks(strict_dates: bool = False) -> dict[str, FormatCheck]:
    """Return the format table for the given strictness."""
    checks = dict(FORMAT_CHECKS)
    if strict_dates:
        checks["date"] = is_calendar_date
    return checks
