"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def valid_cpf() -> str:
    """Known valid CPF (generated for testing)."""
    return "52998224725"


@pytest.fixture
def valid_cnpj() -> str:
    """Known valid numeric CNPJ."""
    return "11222333000181"


@pytest.fixture
def valid_alphanumeric_cnpj() -> str:
    """Alphanumeric CNPJ from the Receita Federal worked example."""
    return "12ABC34501DE35"
