"""Tokenizer backed by spaCy's Japanese (SudachiPy) pipeline."""

from typing import List

from ..config import TokenizerConfig
from ..models import Symbol, Token, WordClass
from ..utils.logging import get_logger
from ..utils.nlp import get_nlp
from .base import Tokenizer
from .unidic import normalize_tokens, parse_inflection, parse_tag

logger = get_logger(__name__)


def _first(values, default: str = "") -> str:
    return values[0] if values else default


def from_spacy_token(span_token) -> List[Token]:
    """Convert one spaCy token into tokens, plus any trailing whitespace.

    Args:
        span_token: ``spacy.tokens.Token`` from a Japanese pipeline.

    Returns:
        The word token, followed by a space symbol when spaCy attached
        whitespace to it.
    """
    word_class, subclass = parse_tag(span_token.tag_)
    lemma = span_token.lemma_ or span_token.text
    reading = _first(span_token.morph.get("Reading"))

    tokens = [
        Token(
            surface=span_token.text,
            lemma=lemma,
            word_class=word_class,
            subclass=subclass,
            conjugation=parse_inflection(_first(span_token.morph.get("Inflection")), lemma),
            reading=reading,
            # Sudachi exposes no separate pronunciation
            pronunciation=reading,
            start=span_token.idx,
        )
    ]

    if span_token.whitespace_:
        tokens.append(
            Token(
                surface=span_token.whitespace_,
                lemma=span_token.whitespace_,
                word_class=WordClass.SYMBOL,
                subclass=Symbol.SPACE,
                start=span_token.idx + len(span_token.text),
            )
        )
    return tokens


class SpacyTokenizer(Tokenizer):
    """Tokenizes Japanese text with spaCy and maps UniDic labels to tokens."""

    def __init__(self, config: TokenizerConfig = None):
        """Initialize the tokenizer.

        Args:
            config: Configuration options. Uses defaults if not provided.
        """
        self.config = config or TokenizerConfig()
        self._nlp = None

    @property
    def backend_name(self) -> str:
        return "spacy"

    @property
    def nlp(self):
        """Lazy load spaCy pipeline."""
        if self._nlp is None:
            self._nlp = get_nlp(self.config.split_mode)
        return self._nlp

    def parse(self, text: str) -> List[Token]:
        if not text:
            return []

        tokens: List[Token] = []
        for span_token in self.nlp(text):
            tokens.extend(from_spacy_token(span_token))

        tokens = normalize_tokens(tokens)
        logger.debug(f"Tokenized {len(text)} characters into {len(tokens)} tokens")
        return tokens
