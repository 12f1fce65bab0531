"""Cursor over the tail of an immutable token sequence."""

from typing import Iterable, Optional, Tuple

from ..models import Symbol, Token, WordClass


class TokenCursor:
    """Reads a clause body from its end towards its start.

    The tokens themselves are never mutated; popping only moves the end
    index, and ``push_back`` moves it forward again. A recursive rule gets
    its own cursor through ``copy`` so it cannot disturb the caller.
    """

    def __init__(self, tokens: Iterable[Token], end: Optional[int] = None):
        self._tokens: Tuple[Token, ...] = tuple(tokens)
        self._end = len(self._tokens) if end is None else end

    def __len__(self) -> int:
        return self._end

    def __bool__(self) -> bool:
        return self._end > 0

    def peek(self) -> Optional[Token]:
        """Return the last remaining token without consuming it."""
        if self._end == 0:
            return None
        return self._tokens[self._end - 1]

    def pop(self) -> Optional[Token]:
        """Consume and return the last remaining token."""
        token = self.peek()
        if token is not None:
            self._end -= 1
        return token

    def push_back(self) -> Token:
        """Restore the most recently popped token."""
        if self._end >= len(self._tokens):
            raise IndexError("push_back without a preceding pop")
        self._end += 1
        return self._tokens[self._end - 1]

    def copy(self) -> "TokenCursor":
        return TokenCursor(self._tokens, self._end)

    def remaining(self) -> Tuple[Token, ...]:
        return self._tokens[:self._end]

    def surface(self) -> str:
        """Concatenate the surfaces of all remaining tokens."""
        return "".join(t.surface for t in self.remaining())

    def take_spaces(self) -> str:
        """Pop trailing whitespace tokens and return them in order."""
        spaces = []
        while self and self.peek().is_a(WordClass.SYMBOL, Symbol.SPACE):
            spaces.append(self.pop().surface)
        return "".join(reversed(spaces))

    def take_ends(self) -> str:
        """Pop the run of sentence-final particles and return it in order."""
        ends = []
        while self and self.peek().is_sentence_final_particle:
            ends.append(self.pop().surface)
        return "".join(reversed(ends))
