"""Value formatters for display."""

from decimal import Decimal

from brmask.core.masking.currency import AmountLike, to_cents
from brmask.core.masking.masks import render_currency
from brmask.core.rules.mask_rules import CURRENCY_SYMBOL


def format_currency(value: AmountLike, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Format amount as Brazilian currency for display.

    Unlike the input mask, zero is shown as "R$ 0,00" and negative values
    keep their sign.

    Args:
        value: Amount to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    value = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    # copy_abs is exact, unlike abs() under the decimal context
    cents = to_cents(value.copy_abs())
    negative = value.is_signed() and cents > 0
    formatted = render_currency(str(cents)) or "0,00"

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def limit_text(text: str, max_length: int) -> str:
    """Cut text at max_length characters, appending "..." when cut."""
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def capitalize(text: str) -> str:
    """Capitalize the first letter of every word."""
    return text.lower().title()
