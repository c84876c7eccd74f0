"""Mask patterns, length limits and check-digit weights.

Patterns use ``d`` for a digit slot and ``X`` for an alphanumeric slot; every
other character is a literal separator.

CNPJ check digits follow the Receita Federal módulo 11 rule, extended to the
alphanumeric CNPJ by mapping each character to its code point minus 48.
"""

from typing import Optional

from brmask.core.models.enums import MaskKind

# === Pattern slots ===
DIGIT_SLOT = "d"
ALNUM_SLOT = "X"

# === Maximum canonical lengths ===
# None means unbounded (currency fields).
MAX_LENGTH: dict[MaskKind, Optional[int]] = {
    MaskKind.CPF: 11,
    MaskKind.CNPJ: 14,
    MaskKind.CNPJ_ALPHANUMERIC: 14,
    MaskKind.CEP: 8,
    MaskKind.PHONE_FIXED: 10,
    MaskKind.PHONE_MOBILE: 11,
    MaskKind.PHONE_AUTO: 11,
    MaskKind.CURRENCY_CENTS: None,
    MaskKind.CURRENCY_REAIS: None,
}

# === Mask patterns ===
PATTERNS: dict[MaskKind, str] = {
    MaskKind.CPF: "ddd.ddd.ddd-dd",
    MaskKind.CNPJ: "dd.ddd.ddd/dddd-dd",
    MaskKind.CNPJ_ALPHANUMERIC: "XX.XXX.XXX/XXXX-dd",
    MaskKind.CEP: "ddddd-ddd",
    MaskKind.PHONE_FIXED: "(dd) dddd-dddd",
    MaskKind.PHONE_MOBILE: "(dd) ddddd-dddd",
}

# Patterns of fields that are not MaskKind members
RG_PATTERN = "dd.ddd.ddd-d"
ANNIVERSARY_PATTERN = "dd-dd"
DATE_INPUT_PATTERN = "dd/dd/dddd"

# === CPF ===
CPF_BASE_LENGTH = 9

# === CNPJ ===
CNPJ_BASE_LENGTH = 12
# Weights for the second check digit; the first uses the rightmost 12.
CNPJ_WEIGHTS = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
# Character value is its code point minus this offset ("0" -> 0, "A" -> 17).
CNPJ_CHAR_OFFSET = ord("0")

# === Phone ===
PHONE_FIXED_LENGTH = 10
PHONE_MOBILE_LENGTH = 11
PHONE_VALID_LENGTHS = (PHONE_FIXED_LENGTH, PHONE_MOBILE_LENGTH)

# === Currency ===
CURRENCY_DECIMAL_SEPARATOR = ","
CURRENCY_THOUSANDS_SEPARATOR = "."
CURRENCY_SYMBOL = "R$"
CENT_DIGITS = 2
# Minimum combined digit run before a malformed "1234,567" input is re-split
# with its last two digits as cents.
CURRENCY_RECOVERY_MIN_DIGITS = 5

# === Credit score ===
CREDIT_SCORE_MIN = 0
CREDIT_SCORE_MAX = 1000
