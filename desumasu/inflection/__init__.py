"""Inflection engine converting words between grammatical forms."""

from .table import CONJUGATION_TABLE, convert, supports

__all__ = [
    "CONJUGATION_TABLE",
    "convert",
    "supports",
]
