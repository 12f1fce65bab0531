"""NLP utilities using spaCy's Japanese pipeline."""

from typing import Dict

from .logging import get_logger

logger = get_logger(__name__)

# Lazy-loaded spaCy pipelines, keyed by Sudachi split mode
_nlp: Dict[str, object] = {}


def get_nlp(split_mode: str = "A"):
    """Get the spaCy Japanese pipeline, loading it if necessary.

    Only the tokenizer is needed, so a blank ``ja`` pipeline is used. It
    runs SudachiPy underneath and fills in ``tag_``, lemmas, readings and
    inflection labels.

    Args:
        split_mode: Sudachi unit length, "A" (shortest) to "C" (longest).

    Returns:
        spaCy Language object.

    Raises:
        RuntimeError: If spaCy or SudachiPy cannot be loaded.
    """
    if split_mode not in _nlp:
        try:
            import spacy
        except ImportError:
            raise RuntimeError("spaCy is required. Install with: pip install spacy")

        try:
            nlp = spacy.blank(
                "ja",
                config={"nlp": {"tokenizer": {"split_mode": split_mode}}},
            )
        except ImportError as e:
            raise RuntimeError(
                "SudachiPy is required for Japanese. "
                "Install with: pip install sudachipy sudachidict_core"
            ) from e

        logger.info(f"Loaded spaCy Japanese tokenizer (split mode {split_mode})")
        _nlp[split_mode] = nlp
    return _nlp[split_mode]
