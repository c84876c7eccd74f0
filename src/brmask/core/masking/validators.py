"""Check-digit and format validators for masked fields."""

import re

from brmask.core.masking.canonicalizer import canonicalize, only_digits, significant_chars
from brmask.core.models.enums import MaskKind
from brmask.core.rules.mask_rules import (
    CNPJ_BASE_LENGTH,
    CNPJ_CHAR_OFFSET,
    CNPJ_WEIGHTS,
    CPF_BASE_LENGTH,
    CREDIT_SCORE_MAX,
    CREDIT_SCORE_MIN,
    MAX_LENGTH,
    PHONE_VALID_LENGTHS,
)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _cpf_digit(digits: str) -> int:
    # Weights run from len+1 down to 2.
    total = sum(int(d) * (len(digits) + 1 - i) for i, d in enumerate(digits))
    remainder = total * 10 % 11
    return 0 if remainder >= 10 else remainder


def cpf_check_digits(base: str) -> str:
    """
    Compute the two CPF check digits (módulo 11).

    Args:
        base: First 9 CPF digits

    Returns:
        Two-character string with both check digits
    """
    base = only_digits(base)[:CPF_BASE_LENGTH]
    first = _cpf_digit(base)
    second = _cpf_digit(base + str(first))
    return f"{first}{second}"


def _cnpj_value(char: str) -> int:
    return ord(char) - CNPJ_CHAR_OFFSET


def _cnpj_digit(base: str) -> int:
    # Weights are right-aligned: a 12-char base skips the first weight.
    weights = CNPJ_WEIGHTS[len(CNPJ_WEIGHTS) - len(base):]
    total = sum(_cnpj_value(c) * w for c, w in zip(base, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def cnpj_check_digits(base: str) -> str:
    """
    Compute the two CNPJ check digits for a numeric or alphanumeric base.

    Letters are valued as their code point minus 48 (A=17 ... Z=42).

    Args:
        base: First 12 CNPJ characters (digits or uppercase letters)

    Returns:
        Two-character string with both check digits
    """
    base = significant_chars(base, MaskKind.CNPJ_ALPHANUMERIC)[:CNPJ_BASE_LENGTH]
    first = _cnpj_digit(base)
    second = _cnpj_digit(base + str(first))
    return f"{first}{second}"


def validate_cpf(cpf: str) -> bool:
    """
    Validate Brazilian CPF number.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    cpf = only_digits(cpf)

    if len(cpf) != MAX_LENGTH[MaskKind.CPF]:
        return False

    # Sequences of one repeated digit pass the checksum but are never issued
    if cpf == cpf[0] * len(cpf):
        return False

    return cpf[CPF_BASE_LENGTH:] == cpf_check_digits(cpf[:CPF_BASE_LENGTH])


def validate_cnpj(cnpj: str, alphanumeric: bool = False) -> bool:
    """
    Validate Brazilian CNPJ number.

    Args:
        cnpj: CNPJ string (can contain formatting characters)
        alphanumeric: Accept letters in the 12-character base

    Returns:
        True if valid, False otherwise
    """
    kind = MaskKind.CNPJ_ALPHANUMERIC if alphanumeric else MaskKind.CNPJ
    cnpj = significant_chars(cnpj, kind)

    if len(cnpj) != MAX_LENGTH[kind]:
        return False

    first = _cnpj_digit(cnpj[:CNPJ_BASE_LENGTH])
    if str(first) != cnpj[CNPJ_BASE_LENGTH]:
        return False

    second = _cnpj_digit(cnpj[: CNPJ_BASE_LENGTH + 1])
    return str(second) == cnpj[CNPJ_BASE_LENGTH + 1]


def validate_cep(cep: str) -> bool:
    """Validate CEP (exactly 8 digits)."""
    return len(only_digits(cep)) == MAX_LENGTH[MaskKind.CEP]


def validate_phone(phone: str) -> bool:
    """Validate phone number (10 digits fixed or 11 digits mobile)."""
    return len(only_digits(phone)) in PHONE_VALID_LENGTHS


def is_valid(raw: str, kind: MaskKind) -> bool:
    """
    Validate a field value for its kind.

    Separators are stripped but input is not truncated: overlong values are
    invalid even though apply_mask would cut them to a valid prefix.

    Args:
        raw: Raw or masked value
        kind: Field kind

    Returns:
        True if valid, False otherwise (never raises)
    """
    if kind is MaskKind.CPF:
        return validate_cpf(raw)
    if kind is MaskKind.CNPJ:
        return validate_cnpj(raw)
    if kind is MaskKind.CNPJ_ALPHANUMERIC:
        return validate_cnpj(raw, alphanumeric=True)
    if kind is MaskKind.CEP:
        return validate_cep(raw)
    if kind.is_phone:
        return validate_phone(raw)
    # Currency: any non-zero amount typed
    return bool(canonicalize(raw, kind).strip("0"))


def is_valid_email(raw: str) -> bool:
    """Validate e-mail as non-space characters around one @ and a dot."""
    return EMAIL_PATTERN.fullmatch(raw) is not None


def is_valid_credit_score(score: float) -> bool:
    """Validate credit score (0 to 1000)."""
    return CREDIT_SCORE_MIN <= score <= CREDIT_SCORE_MAX
