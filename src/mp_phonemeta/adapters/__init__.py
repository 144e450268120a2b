"""Adapters – concrete document representations for the compiler."""
