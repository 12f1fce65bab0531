"""Clause splitter for register conversion.

Splits a token stream at the points where a predicate has to agree with the
target register: sentence periods, and the adversative conjunction が.
Appending politeness only to the clause after が reads unnaturally:

    (NG) 今日は良い天気だが明日は雨のようです。
    (OK) 今日は良い天気ですが明日は雨のようです。

Text inside brackets or quotes is treated as reported speech and never split.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Tuple

from ..config import SplitterConfig
from ..models import Clause, Postpositional, Symbol, Token, WordClass, create_period
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SplitStats:
    """Statistics from clause splitting."""
    tokens_processed: int = 0
    clauses: int = 0
    synthetic_periods: int = 0
    paren_underflows: int = 0


@dataclass
class ClauseSplitter:
    """Partitions an ordered token sequence into clauses."""
    config: SplitterConfig = field(default_factory=SplitterConfig)

    @property
    def break_conjunctions(self) -> FrozenSet[str]:
        return frozenset(self.config.break_conjunctions)

    def split(self, tokens: Iterable[Token]) -> List[Clause]:
        """Split tokens into clauses in a single left-to-right scan.

        Args:
            tokens: Tokens in source order. May be empty.

        Returns:
            Clauses whose bodies and separators concatenate back to the
            input, plus a synthetic period when the input is unterminated.
        """
        clauses, _ = self.split_with_stats(tokens)
        return clauses

    def split_with_stats(self, tokens: Iterable[Token]) -> Tuple[List[Clause], SplitStats]:
        """Split tokens into clauses and report what happened."""
        stats = SplitStats()
        clauses: List[Clause] = []
        body: List[Token] = []
        depth = 0

        for token in tokens:
            stats.tokens_processed += 1

            if token.is_a(WordClass.SYMBOL, Symbol.OPEN_PAREN):
                depth += 1
            elif token.is_a(WordClass.SYMBOL, Symbol.CLOSE_PAREN):
                depth -= 1
                if depth < 0:
                    stats.paren_underflows += 1
                    logger.warning(
                        f"Unmatched closing bracket {token.surface!r}, resetting depth",
                        extra_data={"offset": token.start},
                    )
                    depth = 0

            if self._is_break(token, depth):
                clauses.append(Clause(body=tuple(body), separator=token))
                body = []
            else:
                body.append(token)

        if body:
            clauses.append(Clause(body=tuple(body), separator=create_period(self.config.period)))
            stats.synthetic_periods += 1

        stats.clauses = len(clauses)
        logger.debug(
            f"Split {stats.tokens_processed} tokens into {stats.clauses} clauses",
            extra_data={"paren_underflows": stats.paren_underflows},
        )
        return clauses, stats

    def _is_break(self, token: Token, depth: int) -> bool:
        # Inside brackets is quotation or speech; leave it whole
        if depth >= 1:
            return False

        if token.is_a(WordClass.SYMBOL, Symbol.PERIOD):
            return True

        if token.is_a(WordClass.POSTPOSITIONAL, Postpositional.CONJUNCTION):
            return token.lemma in self.break_conjunctions

        return False


def split_clauses(tokens: Iterable[Token], config: SplitterConfig = None) -> List[Clause]:
    """Convenience function to split tokens with a default splitter."""
    return ClauseSplitter(config or SplitterConfig()).split(tokens)
