"""Utility modules for the book library."""

from .parsing import parse_leading_int

__all__ = [
    "parse_leading_int",
]
