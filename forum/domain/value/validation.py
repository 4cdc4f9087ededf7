"""Validation kernel for forum records.

Each rule takes a raw candidate value and either returns the normalized value
or raises a :class:`~forum.domain.error.ValidationError` subclass. Rules are
pure apart from ``timestamp_or_now``, which asks an injected clock for the
current time when no value is given.
"""

import re
import unicodedata
from datetime import date, datetime
from typing import Any, Callable, Optional

from forum.domain.error import (
    InvalidCalendarDateError,
    InvalidFormatError,
    InvalidInputError,
    InvalidTimeError,
    InvalidTypeError,
    OutOfRangeError,
)

# Column widths of the persisted shapes
EMAIL_MAX_LENGTH = 128
USERNAME_MAX_LENGTH = 32
COMMENT_CONTENT_MAX_LENGTH = 15000

Clock = Callable[[], datetime]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_TIMESTAMP_PATTERN = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2}):([0-9]{2}):([0-9]{2})"
)
# Tags are removed up to the closing bracket, or to the end of the text
# when the tag is never closed.
_TAG_PATTERN = re.compile(r"<[^>]*>?")
_KEPT_CONTROL_CHARACTERS = frozenset("\n\r\t")


def system_clock() -> datetime:
    """Return the current local time at storage resolution (whole seconds)."""
    return datetime.now().replace(microsecond=0)


def _parse_integer(raw: Any) -> Optional[int]:
    """Parse ``raw`` as an integer, returning None when it is not one.

    Accepts ints and strings of digits with an optional sign. Booleans and
    floats are not integers here, even when they hold a whole number.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        candidate = raw.strip()
        if _INTEGER_PATTERN.fullmatch(candidate):
            return int(candidate)
    return None


def positive_identifier(
    raw: Any, field: str = "id", nullable: bool = False
) -> Optional[int]:
    """Normalize a storage identifier.

    Args:
        raw: Candidate value
        field: Field name used in error messages
        nullable: Whether None ("not yet assigned") is accepted

    Returns:
        The identifier as an int, or None when allowed

    Raises:
        InvalidTypeError: If the value is not an integer
        OutOfRangeError: If the value is not positive
    """
    if raw is None and nullable:
        return None

    value = _parse_integer(raw)
    if value is None:
        raise InvalidTypeError(f"{field} is not a valid integer", field=field)
    if value <= 0:
        raise OutOfRangeError(f"{field} is not positive", field=field)
    return value


def _strip_unsafe(text: str) -> str:
    text = _TAG_PATTERN.sub("", text)
    return "".join(
        ch
        for ch in text
        if ch not in "<>"
        and (
            ch in _KEPT_CONTROL_CHARACTERS
            or unicodedata.category(ch) not in ("Cc", "Cf")
        )
    )


def bounded_text(raw: Any, max_length: int, field: str = "text") -> str:
    """Normalize free text for storage and display.

    Leading and trailing whitespace is trimmed, markup tags and stray angle
    brackets are removed, and control characters other than newline, carriage
    return and tab are dropped. Quotes are kept.

    Args:
        raw: Candidate value
        max_length: Maximum length in characters after normalization
        field: Field name used in error messages

    Returns:
        The normalized text

    Raises:
        InvalidTypeError: If the value is not a string
        InvalidInputError: If nothing is left after normalization
        OutOfRangeError: If the normalized text is longer than max_length
    """
    if raw is None:
        raw = ""
    if not isinstance(raw, str):
        raise InvalidTypeError(f"{field} is not a string", field=field)

    text = _strip_unsafe(raw.strip()).strip()
    if not text:
        raise InvalidInputError(f"{field} is empty or insecure", field=field)
    if len(text) > max_length:
        raise OutOfRangeError(
            f"{field} is longer than {max_length} characters", field=field
        )
    return text


def timestamp_or_now(
    raw: Any, field: str = "timestamp", clock: Clock = system_clock
) -> datetime:
    """Normalize a timestamp.

    Args:
        raw: None for "now", a datetime, or a ``YYYY-MM-DD HH:MM:SS`` string
        field: Field name used in error messages
        clock: Source of the current time when raw is None

    Returns:
        The timestamp

    Raises:
        InvalidFormatError: If the value is neither a datetime nor a string
            in the storage format
        InvalidCalendarDateError: If the date does not exist
        InvalidTimeError: If the time of day does not exist
    """
    if raw is None:
        return clock()
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise InvalidFormatError(f"{field} is not a valid date", field=field)

    candidate = raw.strip()
    match = _TIMESTAMP_PATTERN.fullmatch(candidate)
    if match is None:
        raise InvalidFormatError(f"{field} is not a valid date", field=field)

    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        raise InvalidCalendarDateError(
            f"{field} {candidate} is not a Gregorian date", field=field
        )

    if hour >= 24 or minute >= 60 or second >= 60:
        raise InvalidTimeError(f"{field} {candidate} is not a valid time", field=field)

    return datetime(year, month, day, hour, minute, second)


def signed_unit_vote(raw: Any, field: str = "vote") -> Optional[int]:
    """Normalize a vote value.

    Args:
        raw: Candidate value, or None for "no value yet"
        field: Field name used in error messages

    Returns:
        -1, 1, or None

    Raises:
        InvalidTypeError: If the value is not an integer
        OutOfRangeError: If the value is not exactly -1 or 1
    """
    if raw is None:
        return None

    value = _parse_integer(raw)
    if value is None:
        raise InvalidTypeError(f"{field} is not a valid integer", field=field)
    if value not in (-1, 1):
        raise OutOfRangeError(f"{field} is not 1 or -1", field=field)
    return value


def escape_like(value: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so ``value`` matches literally."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )
