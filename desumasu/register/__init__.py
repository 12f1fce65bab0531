"""Clause splitting and register transformation rules."""

from .cursor import TokenCursor
from .splitter import ClauseSplitter, SplitStats, split_clauses
from .polite import COPULA_TABLE, PoliteTransformer, copula, make_continuous
from .plain import PlainTransformer
from .pipeline import (
    ConversionResult,
    Register,
    RegisterConverter,
    to_impolite_sentence,
    to_polite_sentence,
)

__all__ = [
    "TokenCursor",
    "ClauseSplitter",
    "SplitStats",
    "split_clauses",
    "COPULA_TABLE",
    "PoliteTransformer",
    "copula",
    "make_continuous",
    "PlainTransformer",
    "ConversionResult",
    "Register",
    "RegisterConverter",
    "to_impolite_sentence",
    "to_polite_sentence",
]
