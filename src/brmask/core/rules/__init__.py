"""Constant tables for masks and check digits."""
