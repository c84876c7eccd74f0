"""Progressive input masks for Brazilian identifiers and amounts."""

from typing import Optional

from brmask.core.masking.canonicalizer import canonicalize, only_digits
from brmask.core.models.enums import MaskKind
from brmask.core.rules.mask_rules import (
    ALNUM_SLOT,
    CENT_DIGITS,
    CURRENCY_DECIMAL_SEPARATOR,
    CURRENCY_SYMBOL,
    CURRENCY_THOUSANDS_SEPARATOR,
    DIGIT_SLOT,
    MAX_LENGTH,
    PATTERNS,
    PHONE_MOBILE_LENGTH,
    RG_PATTERN,
)

HIDDEN_CPF = "***.***.***-**"


def fill_pattern(pattern: str, chars: str) -> str:
    """
    Place canonical characters into a mask pattern.

    A literal is written only when another character follows it, so partial
    input renders as the prefix typed so far. Characters beyond the last slot
    are dropped.

    Args:
        pattern: Pattern with ``d``/``X`` slots and literal separators
        chars: Canonical characters

    Returns:
        Masked string
    """
    out: list[str] = []
    index = 0
    for symbol in pattern:
        if index >= len(chars):
            break
        if symbol in (DIGIT_SLOT, ALNUM_SLOT):
            out.append(chars[index])
            index += 1
        else:
            out.append(symbol)
    return "".join(out)


def resolve_phone_kind(canonical: str) -> MaskKind:
    """Pick fixed or mobile phone layout from the number of digits."""
    if len(canonical) == PHONE_MOBILE_LENGTH:
        return MaskKind.PHONE_MOBILE
    return MaskKind.PHONE_FIXED


def render_currency(digits: str) -> str:
    """
    Render a digit run as ``1.234,56``.

    The last two digits are always cents. Leading zeros are dropped, and an
    empty or all-zero run renders as an empty string.
    """
    digits = digits.lstrip("0")
    if not digits:
        return ""

    digits = digits.rjust(CENT_DIGITS + 1, "0")
    integer, cents = digits[:-CENT_DIGITS], digits[-CENT_DIGITS:]
    grouped = f"{int(integer):,}".replace(",", CURRENCY_THOUSANDS_SEPARATOR)
    return f"{grouped}{CURRENCY_DECIMAL_SEPARATOR}{cents}"


def apply_mask(raw: str, kind: MaskKind) -> str:
    """
    Format raw input with the mask of a field kind.

    Args:
        raw: Raw keystrokes or an already masked value
        kind: Field kind

    Returns:
        Masked value; applying the mask again returns the same string
    """
    canonical = canonicalize(raw, kind)

    if kind.is_currency:
        return render_currency(canonical)

    if kind is MaskKind.PHONE_AUTO:
        kind = resolve_phone_kind(canonical)

    return fill_pattern(PATTERNS[kind], canonical)


def mask_document(raw: str) -> str:
    """Mask as CPF up to 11 digits, as CNPJ beyond that."""
    digits = only_digits(raw)
    if len(digits) <= MAX_LENGTH[MaskKind.CPF]:
        return fill_pattern(PATTERNS[MaskKind.CPF], digits)
    return fill_pattern(PATTERNS[MaskKind.CNPJ], digits)


def mask_rg(raw: str) -> str:
    """Mask RG as XX.XXX.XXX-X."""
    return fill_pattern(RG_PATTERN, only_digits(raw))


def hide_cpf(raw: Optional[str]) -> str:
    """Hide CPF for display as ***.***.***-XX (last two digits only)."""
    digits = only_digits(raw or "")[: MAX_LENGTH[MaskKind.CPF]]
    if len(digits) < 2:
        return HIDDEN_CPF
    return f"***.***.***-{digits[-2:]}"


def mask_currency_reais(raw: str) -> str:
    """Currency mask with the R$ prefix, e.g. "R$ 1.234,56"."""
    masked = apply_mask(raw, MaskKind.CURRENCY_REAIS)
    if not masked:
        return ""
    return f"{CURRENCY_SYMBOL} {masked}"


def mask_area(raw: str) -> str:
    """Mask an area in square meters (two decimal places)."""
    return render_currency(only_digits(raw))


def format_phone_display(raw: Optional[str]) -> str:
    """Format a stored phone number for read-only display."""
    if not raw:
        return "N/A"
    return apply_mask(raw, MaskKind.PHONE_AUTO)
