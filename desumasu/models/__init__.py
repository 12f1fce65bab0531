"""Data models for register conversion."""

from .token import (
    Clause,
    Conjugation,
    ConjugationForm,
    ConjugationKind,
    NO_CONJUGATION,
    Postpositional,
    Symbol,
    Token,
    WordClass,
    create_period,
)

__all__ = [
    "Clause",
    "Conjugation",
    "ConjugationForm",
    "ConjugationKind",
    "NO_CONJUGATION",
    "Postpositional",
    "Symbol",
    "Token",
    "WordClass",
    "create_period",
]
