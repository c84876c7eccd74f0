"""Domain models for masked fields."""

from brmask.core.models.enums import MaskKind
from brmask.core.models.field import Amount, MaskedField

__all__ = [
    "Amount",
    "MaskKind",
    "MaskedField",
]
