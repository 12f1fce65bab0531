"""Document-level register conversion.

Runs tokenizer -> clause splitter -> per-clause transformer and joins the
results in clause order. Each call works on its own tokens and clauses, so
separate documents can be converted concurrently by the caller.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..config import Config
from ..models import Clause
from ..tokenizer import Tokenizer
from ..utils.logging import get_logger, log_conversion, set_document_id
from .plain import PlainTransformer
from .polite import PoliteTransformer
from .splitter import ClauseSplitter, SplitStats

logger = get_logger(__name__)


class Register(Enum):
    """Target speech register."""
    POLITE = "polite"
    PLAIN = "plain"


@dataclass
class ConversionResult:
    """Converted text with the clauses it was built from."""
    text: str
    register: Register
    clauses: List[Clause] = field(default_factory=list)
    stats: SplitStats = field(default_factory=SplitStats)


class RegisterConverter:
    """Converts whole documents between plain and polite register."""

    def __init__(self, tokenizer: Tokenizer, config: Config = None):
        """Initialize the converter.

        Args:
            tokenizer: Morphological tokenizer producing ``Token`` objects.
            config: Configuration options. Uses defaults if not provided.
        """
        self.tokenizer = tokenizer
        self.config = config or Config()
        self.splitter = ClauseSplitter(self.config.splitter)
        self.polite = PoliteTransformer()
        self.plain = PlainTransformer()

    def to_polite(self, text: str) -> str:
        return self.convert(text, Register.POLITE).text

    def to_plain(self, text: str) -> str:
        return self.convert(text, Register.PLAIN).text

    def convert(self, text: str, register: Register) -> ConversionResult:
        """Convert a document into the given register.

        Args:
            text: Source text.
            register: Target register.

        Returns:
            ConversionResult with the converted text.

        Raises:
            RegisterError: If a rule table lacks an entry the input needs.
        """
        set_document_id()
        log = logger.with_context(register=register.value)
        started = time.perf_counter()

        clauses, stats = self.splitter.split_with_stats(self.tokenizer.parse(text))
        log.debug(
            f"{stats.clauses} clauses from {stats.tokens_processed} tokens",
            extra_data={"synthetic_periods": stats.synthetic_periods},
        )
        try:
            if register is Register.POLITE:
                parts = [self.polite.transform(clause) for clause in clauses]
            else:
                parts = [self.plain.transform(clause) for clause in clauses]
        except Exception as e:
            log_conversion(
                log, register.value, len(clauses), len(text),
                int((time.perf_counter() - started) * 1000),
                success=False, error=str(e),
            )
            raise

        log_conversion(
            log, register.value, len(clauses), len(text),
            int((time.perf_counter() - started) * 1000),
        )
        return ConversionResult(
            text="".join(parts),
            register=register,
            clauses=clauses,
            stats=stats,
        )


def to_polite_sentence(tokenizer: Tokenizer, text: str) -> str:
    """Rewrite text into desu/masu style."""
    return RegisterConverter(tokenizer).to_polite(text)


def to_impolite_sentence(tokenizer: Tokenizer, text: str) -> str:
    """Rewrite text into plain da style."""
    return RegisterConverter(tokenizer).to_plain(text)
