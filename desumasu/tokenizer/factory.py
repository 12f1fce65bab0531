"""Factory for creating tokenizers based on backend configuration."""

from ..config import TokenizerConfig
from ..utils.logging import get_logger
from .base import Tokenizer

logger = get_logger(__name__)


def create_tokenizer(config: TokenizerConfig = None) -> Tokenizer:
    """Create a tokenizer for the configured backend.

    Args:
        config: Tokenizer configuration. Uses defaults if not provided.

    Returns:
        Tokenizer instance. Models are loaded on first use.

    Raises:
        ValueError: If the backend is unknown.
    """
    config = config or TokenizerConfig()

    if config.backend == "spacy":
        from .spacy_tokenizer import SpacyTokenizer
        logger.debug(f"Using spaCy tokenizer (split mode {config.split_mode})")
        return SpacyTokenizer(config)

    raise ValueError(f"Unknown tokenizer backend: {config.backend}")
