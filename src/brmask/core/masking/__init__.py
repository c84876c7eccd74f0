"""Masking, validation and currency parsing engine."""

from brmask.core.masking.canonicalizer import canonicalize, only_digits, significant_chars
from brmask.core.masking.currency import (
    amount_in_cents,
    format_amount,
    parse_amount,
    read_amount,
)
from brmask.core.masking.dates import (
    format_time_for_input,
    is_valid_anniversary,
    is_valid_iso_date,
    is_valid_time,
    mask_anniversary,
    mask_date_input,
    normalize_time,
)
from brmask.core.masking.masks import (
    apply_mask,
    format_phone_display,
    hide_cpf,
    mask_area,
    mask_currency_reais,
    mask_document,
    mask_rg,
)
from brmask.core.masking.validators import (
    cnpj_check_digits,
    cpf_check_digits,
    is_valid,
    is_valid_credit_score,
    is_valid_email,
    validate_cep,
    validate_cnpj,
    validate_cpf,
    validate_phone,
)

__all__ = [
    # Canonicalizer
    "canonicalize",
    "only_digits",
    "significant_chars",
    # Masks
    "apply_mask",
    "format_phone_display",
    "hide_cpf",
    "mask_area",
    "mask_currency_reais",
    "mask_document",
    "mask_rg",
    # Validators
    "cnpj_check_digits",
    "cpf_check_digits",
    "is_valid",
    "is_valid_credit_score",
    "is_valid_email",
    "validate_cep",
    "validate_cnpj",
    "validate_cpf",
    "validate_phone",
    # Currency
    "amount_in_cents",
    "format_amount",
    "parse_amount",
    "read_amount",
    # Dates
    "format_time_for_input",
    "is_valid_anniversary",
    "is_valid_iso_date",
    "is_valid_time",
    "mask_anniversary",
    "mask_date_input",
    "normalize_time",
]
