"""Tokenizer interface consumed by the register converter."""

from abc import ABC, abstractmethod
from typing import List

from ..models import Token


class Tokenizer(ABC):
    """Turns raw text into classified tokens.

    Implementations must cover the whole input in order: concatenating the
    surfaces of the returned tokens reproduces the text.
    """

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Return the name of the backend."""
        pass

    @abstractmethod
    def parse(self, text: str) -> List[Token]:
        """Tokenize text.

        Args:
            text: Raw input text.

        Returns:
            Tokens in source order, each with its character offset.
        """
        pass
