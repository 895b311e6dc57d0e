"""
Shared input normalization rules.

Every record schema validates its fields through these helpers so that
the same input is treated the same way whichever entity receives it:

* required strings are trimmed and must not end up empty;
* optional strings accept ``null`` (clear), a string (trimmed, blank
  becomes ``None``) and reject every other type;
* integers accept ``int`` or a string of digits, never ``bool``, and
  must fit a SQLite INTEGER;
* dates accept ``YYYY-MM-DD`` or an ISO datetime whose date part is kept.

The helpers raise ``ValueError`` with the client‑facing message, which
is what pydantic validators expect.  The request validation handler
returns that message verbatim in the 400 body.
"""

from datetime import date, datetime
from typing import Any, Iterable, List, Optional


# SQLite stores INTEGER as a signed 64-bit value
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def required_string(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(message)
    return value.strip()


def optional_string(value: Any, message: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(message)
    value = value.strip()
    return value or None


def parse_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or ``None`` if it is not integral.

    Numbers outside the SQLite INTEGER range count as not integral.
    """
    number = None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if value.is_integer() else None
    elif isinstance(value, str):
        text = value.strip()
        if text.lstrip("+-").isdigit():
            number = int(text)
    if number is None or not SQLITE_INT_MIN <= number <= SQLITE_INT_MAX:
        return None
    return number


def required_int(value: Any, message: str) -> int:
    number = parse_int(value)
    if number is None:
        raise ValueError(message)
    return number


def parse_date(value: Any) -> Optional[date]:
    """Parse a calendar date, returning ``None`` when ``value`` is not one."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def required_date(value: Any, message: str) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(message)
    return parsed


def optional_date(value: Any, message: str) -> Optional[date]:
    # null and "" both mean "no date"; anything else must parse
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return required_date(value, message)


def nullable_date(value: Any, message: str) -> Optional[date]:
    """Like ``optional_date`` but only ``null`` means "no date"; ``""`` is invalid."""
    if value is None:
        return None
    return required_date(value, message)


def string_list(value: Any, message: str) -> List[str]:
    """Validate an array of strings, dropping blank and non‑string entries."""
    if not isinstance(value, list):
        raise ValueError(message)
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def unique(values: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
