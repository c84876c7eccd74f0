"""Value models for masked form fields."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from brmask.core.masking.canonicalizer import canonicalize
from brmask.core.masking.currency import (
    AmountLike,
    format_amount,
    parse_amount,
    to_cents,
    to_decimal,
)
from brmask.core.masking.masks import apply_mask
from brmask.core.masking.validators import is_valid
from brmask.core.models.enums import MaskKind


class MaskedField(BaseModel):
    """A field value as typed, with its kind."""

    raw: str = Field(default="", description="Raw input as typed")
    kind: MaskKind = Field(..., description="Kind of field")

    @property
    def canonical(self) -> str:
        """Significant characters only."""
        return canonicalize(self.raw, self.kind)

    @property
    def masked(self) -> str:
        """Value formatted for display."""
        return apply_mask(self.raw, self.kind)

    @property
    def is_valid(self) -> bool:
        return is_valid(self.raw, self.kind)

    model_config = {"frozen": True}


class Amount(BaseModel):
    """Non-negative amount in reais, rounded to cents."""

    value: Decimal = Field(default=Decimal("0.00"), description="Amount in reais", ge=0)

    @field_validator("value", mode="before")
    @classmethod
    def round_to_cents(cls, v: AmountLike) -> Decimal:
        """Round to cents, rejecting negative and non-finite values."""
        return to_decimal(v)

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """Build from masked or typed text."""
        return cls(value=parse_amount(text))

    @classmethod
    def from_cents(cls, cents: int) -> "Amount":
        return cls(value=Decimal(f"{cents}E-2"))

    @property
    def cents(self) -> int:
        """Amount in cents."""
        return to_cents(self.value)

    @property
    def masked(self) -> str:
        """Amount formatted as currency input ("" for zero)."""
        return format_amount(self.value)

    model_config = {"frozen": True}
