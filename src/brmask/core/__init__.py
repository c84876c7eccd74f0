"""Core masking engine, models and rule tables."""
