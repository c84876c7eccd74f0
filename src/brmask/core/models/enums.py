"""Enumerations for masked field kinds."""

from enum import Enum


class MaskKind(str, Enum):
    """Kinds of masked input fields."""

    CPF = "cpf"
    CNPJ = "cnpj"
    CNPJ_ALPHANUMERIC = "cnpj_alfanumerico"
    PHONE_FIXED = "telefone_fixo"
    PHONE_MOBILE = "celular"
    PHONE_AUTO = "telefone"
    CEP = "cep"
    CURRENCY_CENTS = "centavos"
    CURRENCY_REAIS = "reais"

    @property
    def is_phone(self) -> bool:
        return self in (MaskKind.PHONE_FIXED, MaskKind.PHONE_MOBILE, MaskKind.PHONE_AUTO)

    @property
    def is_currency(self) -> bool:
        return self in (MaskKind.CURRENCY_CENTS, MaskKind.CURRENCY_REAIS)

    @property
    def is_cnpj(self) -> bool:
        return self in (MaskKind.CNPJ, MaskKind.CNPJ_ALPHANUMERIC)
