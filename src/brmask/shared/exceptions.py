"""Custom exceptions for brmask."""


class BrMaskError(Exception):
    """Base exception for all brmask errors."""

    pass


class AmountError(BrMaskError, ValueError):
    """Amount outside the accepted range (negative, NaN or infinite)."""

    pass
