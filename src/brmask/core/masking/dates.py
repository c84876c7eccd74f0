"""Date and time input helpers."""

import re
from datetime import date

from brmask.core.masking.canonicalizer import only_digits
from brmask.core.masking.masks import fill_pattern
from brmask.core.rules.mask_rules import ANNIVERSARY_PATTERN, DATE_INPUT_PATTERN

TIME_PATTERN = re.compile(r"([01]?\d|2[0-3]):([0-5]?\d)(?::([0-5]?\d))?")
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

DEFAULT_INPUT_TIME = "09:00"

# February accepts 29 since anniversaries have no year
_DAYS_IN_MONTH = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def mask_anniversary(raw: str) -> str:
    """Mask anniversary date as MM-DD."""
    return fill_pattern(ANNIVERSARY_PATTERN, only_digits(raw))


def is_valid_anniversary(raw: str) -> bool:
    """Validate anniversary date (MM-DD)."""
    digits = only_digits(raw)
    if len(digits) != 4:
        return False

    month = int(digits[:2])
    day = int(digits[2:])
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= _DAYS_IN_MONTH[month - 1]


def mask_date_input(raw: str) -> str:
    """Mask date input as dd/MM/yyyy."""
    return fill_pattern(DATE_INPUT_PATTERN, only_digits(raw))


def is_valid_iso_date(raw: str) -> bool:
    """Validate ISO date (YYYY-MM-DD) that exists in the calendar."""
    value = raw.strip()
    if not ISO_DATE_PATTERN.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_time(raw: str) -> bool:
    """Validate time as HH:mm or HH:mm:ss."""
    return TIME_PATTERN.fullmatch(raw.strip()) is not None


def normalize_time(raw: str) -> str:
    """
    Normalize time to HH:mm:ss.

    Args:
        raw: Time such as "9:5" or "09:05:30"

    Returns:
        Zero-padded "HH:mm:ss", or an empty string if invalid
    """
    match = TIME_PATTERN.fullmatch(raw.strip())
    if match is None:
        return ""
    hours, minutes, seconds = match.groups(default="0")
    return f"{int(hours):02d}:{int(minutes):02d}:{int(seconds):02d}"


def format_time_for_input(raw: str) -> str:
    """Format time as HH:mm for a time input, defaulting to 09:00."""
    normalized = normalize_time(raw)
    return normalized[:5] if normalized else DEFAULT_INPUT_TIME
