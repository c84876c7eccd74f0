"""Reduce raw input to the characters meaningful for a field kind."""

import re

from brmask.core.models.enums import MaskKind
from brmask.core.rules.mask_rules import CNPJ_BASE_LENGTH, MAX_LENGTH

_NON_DIGIT = re.compile(r"[^0-9]")
_NON_ALNUM = re.compile(r"[^0-9A-Z]")


def only_digits(raw: str) -> str:
    """Remove every character that is not an ASCII digit."""
    return _NON_DIGIT.sub("", raw)


def significant_chars(raw: str, kind: MaskKind) -> str:
    """Strip separators and noise without enforcing the kind's length."""
    if kind is MaskKind.CNPJ_ALPHANUMERIC:
        return _NON_ALNUM.sub("", raw.upper())
    return only_digits(raw)


def canonicalize(raw: str, kind: MaskKind) -> str:
    """
    Canonicalize raw input for a field kind.

    Args:
        raw: Raw keystrokes or an already masked value
        kind: Field kind

    Returns:
        Digits (plus uppercase letters for alphanumeric CNPJ), truncated to
        the kind's maximum length
    """
    chars = significant_chars(raw, kind)
    limit = MAX_LENGTH[kind]

    if kind is MaskKind.CNPJ_ALPHANUMERIC:
        # The base accepts letters; the two check digits are always numeric.
        chars = chars[:CNPJ_BASE_LENGTH] + only_digits(chars[CNPJ_BASE_LENGTH:])

    if limit is None:
        return chars
    return chars[:limit]
