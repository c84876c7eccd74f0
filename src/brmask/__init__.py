"""brmask - masks and validators for Brazilian identifiers and currency."""

__version__ = "0.1.0"

# Models load first: field.py imports the masking engine, which only needs
# the enums submodule that the models package has loaded by then.
from brmask.core.models import Amount, MaskedField, MaskKind
from brmask.core.masking import (
    apply_mask,
    canonicalize,
    format_amount,
    is_valid,
    is_valid_email,
    parse_amount,
)

__all__ = [
    "Amount",
    "MaskKind",
    "MaskedField",
    "apply_mask",
    "canonicalize",
    "format_amount",
    "is_valid",
    "is_valid_email",
    "parse_amount",
]
