"""Configuration management for register conversion."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .utils.logging import get_logger

logger = get_logger(__name__)

TOKENIZER_BACKENDS = {"spacy"}
SPLIT_MODES = {"A", "B", "C"}


@dataclass
class TokenizerConfig:
    """Configuration for the morphological tokenizer."""
    backend: str = "spacy"
    split_mode: str = "A"  # Sudachi unit length: A (short) to C (long)


@dataclass
class SplitterConfig:
    """Configuration for clause splitting."""
    break_conjunctions: List[str] = field(default_factory=lambda: ["が"])
    period: str = "。"  # Surface of the period appended to unterminated text


@dataclass
class Config:
    """Main configuration container."""
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    splitter: SplitterConfig = field(default_factory=SplitterConfig)
    log_level: str = "INFO"
    log_json: bool = False


def _parse_tokenizer_config(data: Dict) -> TokenizerConfig:
    """Parse tokenizer configuration section."""
    config = TokenizerConfig(
        backend=data.get("backend", "spacy"),
        split_mode=str(data.get("split_mode", "A")).upper(),
    )
    if config.backend not in TOKENIZER_BACKENDS:
        logger.warning(f"Unknown tokenizer backend '{config.backend}', using 'spacy'")
        config.backend = "spacy"
    if config.split_mode not in SPLIT_MODES:
        logger.warning(f"Invalid split mode '{config.split_mode}', using 'A'")
        config.split_mode = "A"
    return config


def load_config(config_path: str = "config.json") -> Config:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Parsed configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            "Please copy config.json.sample to config.json and configure it."
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")

    config = Config()

    if "tokenizer" in data:
        config.tokenizer = _parse_tokenizer_config(data["tokenizer"])

    if "splitter" in data:
        config.splitter = SplitterConfig(
            break_conjunctions=list(data["splitter"].get("break_conjunctions", ["が"])),
            period=data["splitter"].get("period", "。"),
        )

    config.log_level = data.get("log_level", "INFO")
    config.log_json = data.get("log_json", False)

    logger.info(f"Loaded configuration from {config_path}")
    return config


def create_default_config() -> Dict:
    """Create a default configuration dictionary."""
    return {
        "tokenizer": {
            "backend": "spacy",
            "split_mode": "A"
        },
        "splitter": {
            "break_conjunctions": ["が"],
            "period": "。"
        },
        "log_level": "INFO",
        "log_json": False
    }
