"""Shared exceptions and display formatters."""
