"""Switch Japanese text between plain (da) and polite (desu/masu) register.

    >>> from desumasu import create_tokenizer, to_polite_sentence
    >>> to_polite_sentence(create_tokenizer(), "今日は晴天だ。")
    '今日は晴天です。'
"""

__version__ = "0.1.0"

from .errors import RegisterError, UnsupportedConjugation, UnsupportedCopulaPairing
from .register import (
    ConversionResult,
    Register,
    RegisterConverter,
    to_impolite_sentence,
    to_polite_sentence,
)
from .tokenizer import Tokenizer, create_tokenizer

__all__ = [
    "RegisterError",
    "UnsupportedConjugation",
    "UnsupportedCopulaPairing",
    "ConversionResult",
    "Register",
    "RegisterConverter",
    "to_impolite_sentence",
    "to_polite_sentence",
    "Tokenizer",
    "create_tokenizer",
]
