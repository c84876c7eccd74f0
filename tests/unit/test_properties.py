"""Property-based tests for masks, validators and currency parsing."""

from decimal import Decimal

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from brmask.core.masking.canonicalizer import canonicalize
from brmask.core.masking.currency import format_amount, parse_amount
from brmask.core.masking.masks import apply_mask
from brmask.core.masking.validators import (
    cnpj_check_digits,
    cpf_check_digits,
    is_valid,
)
from brmask.core.models.enums import MaskKind
from brmask.core.rules.mask_rules import MAX_LENGTH

ALNUM = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def typed_text_strategy(max_size: int = 40) -> st.SearchStrategy[str]:
    """Text resembling keystrokes: digits, letters, separators and noise."""
    return st.text(
        alphabet=st.one_of(
            st.sampled_from("0123456789"),
            st.sampled_from("abcxyzABCXYZ"),
            st.sampled_from(" .,-/()R$"),
            st.characters(),
        ),
        max_size=max_size,
    )


kinds = st.sampled_from(list(MaskKind))


class TestMaskProperties:
    """Invariants of apply_mask and canonicalize."""

    @pytest.mark.property
    @given(text=typed_text_strategy(), kind=kinds)
    def test_mask_is_idempotent(self, text: str, kind: MaskKind) -> None:
        """Property: masking a masked value changes nothing."""
        once = apply_mask(text, kind)
        assert apply_mask(once, kind) == once

    @pytest.mark.property
    @given(text=typed_text_strategy(max_size=60), kind=kinds)
    def test_canonical_length_bounded(self, text: str, kind: MaskKind) -> None:
        """Property: canonical values never exceed the kind's maximum."""
        limit = MAX_LENGTH[kind]
        assume(limit is not None)
        assert len(canonicalize(text, kind)) <= limit

    @pytest.mark.property
    @given(text=typed_text_strategy(), kind=kinds)
    def test_mask_preserves_canonical(self, text: str, kind: MaskKind) -> None:
        """Property: the masked value canonicalizes back to the input's canonical form."""
        assume(not kind.is_currency)
        assert canonicalize(apply_mask(text, kind), kind) == canonicalize(text, kind)

    @pytest.mark.property
    @given(text=typed_text_strategy())
    def test_alphanumeric_check_positions_numeric(self, text: str) -> None:
        """Property: positions 13 and 14 of an alphanumeric CNPJ are digits."""
        canonical = canonicalize(text, MaskKind.CNPJ_ALPHANUMERIC)
        assert canonical[12:].isdigit() or canonical[12:] == ""


class TestCheckDigitProperties:
    """Generated documents validate; corrupted ones mostly do not."""

    @pytest.mark.property
    @given(base=st.text(alphabet="0123456789", min_size=9, max_size=9))
    def test_generated_cpf_is_valid(self, base: str) -> None:
        assume(base != base[0] * 9)
        cpf = base + cpf_check_digits(base)
        assert is_valid(cpf, MaskKind.CPF)
        assert is_valid(apply_mask(cpf, MaskKind.CPF), MaskKind.CPF)

    @pytest.mark.property
    @given(
        base=st.text(alphabet="0123456789", min_size=9, max_size=9),
        position=st.integers(min_value=9, max_value=10),
        delta=st.integers(min_value=1, max_value=9),
    )
    def test_wrong_cpf_check_digit_rejected(self, base: str, position: int, delta: int) -> None:
        cpf = list(base + cpf_check_digits(base))
        cpf[position] = str((int(cpf[position]) + delta) % 10)
        assert not is_valid("".join(cpf), MaskKind.CPF)

    @pytest.mark.property
    @given(base=st.text(alphabet="0123456789", min_size=12, max_size=12))
    def test_generated_numeric_cnpj_is_valid(self, base: str) -> None:
        cnpj = base + cnpj_check_digits(base)
        assert is_valid(cnpj, MaskKind.CNPJ)
        assert is_valid(cnpj, MaskKind.CNPJ_ALPHANUMERIC)

    @pytest.mark.property
    @given(base=st.text(alphabet=ALNUM, min_size=12, max_size=12))
    def test_generated_alphanumeric_cnpj_is_valid(self, base: str) -> None:
        cnpj = base + cnpj_check_digits(base)
        assert is_valid(cnpj, MaskKind.CNPJ_ALPHANUMERIC)
        assert is_valid(apply_mask(cnpj, MaskKind.CNPJ_ALPHANUMERIC), MaskKind.CNPJ_ALPHANUMERIC)
        assert is_valid(cnpj.lower(), MaskKind.CNPJ_ALPHANUMERIC)

    @pytest.mark.property
    @given(
        base=st.text(alphabet=ALNUM, min_size=12, max_size=12),
        delta=st.integers(min_value=1, max_value=9),
    )
    def test_wrong_cnpj_check_digit_rejected(self, base: str, delta: int) -> None:
        check = cnpj_check_digits(base)
        wrong_first = str((int(check[0]) + delta) % 10)
        assert not is_valid(base + wrong_first + check[1], MaskKind.CNPJ_ALPHANUMERIC)

    @pytest.mark.property
    @given(text=typed_text_strategy(), kind=kinds)
    def test_validators_never_raise(self, text: str, kind: MaskKind) -> None:
        assert is_valid(text, kind) in (True, False)


class TestCurrencyProperties:
    """Round-trips between amounts and masked text."""

    amounts = st.decimals(
        min_value=0,
        max_value=Decimal("1E40"),
        places=2,
        allow_nan=False,
        allow_infinity=False,
    )

    @pytest.mark.property
    @given(amount=amounts)
    def test_format_then_parse_round_trips(self, amount: Decimal) -> None:
        assert parse_amount(format_amount(amount)) == amount

    @pytest.mark.property
    @given(amount=amounts)
    def test_formatted_amount_is_a_fixed_point_of_the_mask(self, amount: Decimal) -> None:
        formatted = format_amount(amount)
        assert apply_mask(formatted, MaskKind.CURRENCY_REAIS) == formatted

    @pytest.mark.property
    @given(cents=st.integers(min_value=0, max_value=10**15))
    def test_masked_digits_parse_to_cents(self, cents: int) -> None:
        """Property: typing N digits into a currency field means N cents."""
        masked = apply_mask(str(cents), MaskKind.CURRENCY_REAIS)
        assert parse_amount(masked) == Decimal(cents) / 100

    @pytest.mark.property
    @given(text=typed_text_strategy())
    def test_parse_never_negative(self, text: str) -> None:
        assert parse_amount(text) >= 0
