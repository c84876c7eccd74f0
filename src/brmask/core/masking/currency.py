"""Parsing and formatting of Brazilian currency amounts.

Amounts are ``Decimal`` values in reais with two decimal places. Parsing
accepts masked text ("R$ 1.234,56"), bare digits ("1234") and text whose
thousands separators were lost on the way in ("1234,567").
"""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from brmask.core.masking.canonicalizer import canonicalize
from brmask.core.masking.masks import render_currency
from brmask.core.models.enums import MaskKind
from brmask.core.rules.mask_rules import (
    CENT_DIGITS,
    CURRENCY_DECIMAL_SEPARATOR,
    CURRENCY_RECOVERY_MIN_DIGITS,
)
from brmask.shared.exceptions import AmountError

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

_NOT_AMOUNT_CHAR = re.compile(r"[^0-9,]")

AmountLike = Union[Decimal, int, float]


def _to_amount(integer: str, fraction: str) -> Decimal:
    fraction = fraction[:CENT_DIGITS].ljust(CENT_DIGITS, "0")
    return Decimal(f"{integer or '0'}.{fraction}")


def parse_amount(text: str) -> Decimal:
    """
    Parse a currency string into reais.

    Only the digits between the first and second comma are read as the
    fraction; anything after a second comma is ignored.

    Args:
        text: Masked, bare or malformed amount text

    Returns:
        Non-negative Decimal with two decimal places (zero for empty or
        non-numeric text)
    """
    cleaned = _NOT_AMOUNT_CHAR.sub("", text)

    if CURRENCY_DECIMAL_SEPARATOR not in cleaned:
        return _to_amount(cleaned, "")

    integer, fraction = cleaned.split(CURRENCY_DECIMAL_SEPARATOR)[:2]

    if len(fraction) > CENT_DIGITS:
        combined = integer + fraction
        if len(combined) >= CURRENCY_RECOVERY_MIN_DIGITS:
            logger.debug(
                "Recovering malformed amount %r: last %d digits taken as cents",
                text,
                CENT_DIGITS,
            )
            return _to_amount(combined[:-CENT_DIGITS], combined[-CENT_DIGITS:])

    return _to_amount(integer, fraction)


def amount_in_cents(text: str) -> int:
    """Read a cents field as an integer number of cents."""
    digits = canonicalize(text, MaskKind.CURRENCY_CENTS)
    return int(digits) if digits else 0


def read_amount(raw: str, kind: MaskKind) -> Union[Decimal, int]:
    """
    Read back the value of a currency field.

    Args:
        raw: Field text
        kind: CURRENCY_REAIS (Decimal reais) or CURRENCY_CENTS (int cents)

    Returns:
        Field value in the unit of its kind
    """
    if kind is MaskKind.CURRENCY_CENTS:
        return amount_in_cents(raw)
    if kind is MaskKind.CURRENCY_REAIS:
        return parse_amount(raw)
    raise AmountError(f"Campo {kind.value} não é monetário")


def to_decimal(amount: AmountLike) -> Decimal:
    """
    Convert an amount to a Decimal rounded to cents.

    Raises:
        AmountError: If the amount is negative, NaN or infinite
    """
    if isinstance(amount, float):
        # repr gives the shortest decimal that round-trips the float
        amount = Decimal(repr(amount))
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise AmountError(f"Valor inválido: {amount!r}") from e

    if not value.is_finite():
        raise AmountError(f"Valor inválido: {amount!r}")
    if value < 0:
        raise AmountError(f"Valor negativo não é permitido: {amount}")

    # Amounts are unbounded: widen precision so quantize never overflows it
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + CENT_DIGITS + 2)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(amount: AmountLike) -> int:
    """
    Convert an amount in reais to an integer number of cents.

    Raises:
        AmountError: If the amount is negative, NaN or infinite
    """
    value = to_decimal(amount)
    # Quantized to cents, so the coefficient is the number of cents
    return int("".join(map(str, value.as_tuple().digits)))


def format_amount(amount: AmountLike) -> str:
    """
    Format reais as a masked currency value, e.g. "1.234,56".

    Zero renders as an empty string, the same as an empty field.

    Raises:
        AmountError: If the amount is negative, NaN or infinite
    """
    return render_currency(str(to_cents(amount)))
