"""Morphological tokenizers producing classified tokens."""

from .base import Tokenizer
from .factory import create_tokenizer

__all__ = [
    "Tokenizer",
    "create_tokenizer",
]
