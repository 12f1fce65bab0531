"""Structured logging for register conversion.

Every record can carry a dict of ``extra_data`` fields. Loggers from
``get_logger`` accept it as a keyword argument, and ``with_context`` binds
fields that are attached to everything the derived logger emits. The id of
the document being converted is kept in a context variable and added to
each record by both formatters.
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_document_id: ContextVar[Optional[str]] = ContextVar("document_id", default=None)


def get_document_id() -> Optional[str]:
    """Get the id of the document currently being converted."""
    return _document_id.get()


def set_document_id(document_id: Optional[str] = None) -> str:
    """Set the current document id, generating a short one if not provided."""
    if document_id is None:
        document_id = uuid.uuid4().hex[:8]
    _document_id.set(document_id)
    return document_id


def _context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the document id and structured fields attached to a record."""
    fields: Dict[str, Any] = {}
    document_id = get_document_id()
    if document_id:
        fields["document_id"] = document_id
    fields.update(getattr(record, "extra_data", None) or {})
    return fields


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for files and log collectors."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(_context_fields(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Japanese text stays readable in the output
        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    """Single-line console output, colored by level on a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        fields = _context_fields(record)
        document_id = fields.pop("document_id", None)

        level = f"{record.levelname:8}"
        if self.use_color and record.levelname in self.COLORS:
            level = f"{self.COLORS[record.levelname]}{level}{self.RESET}"

        line = f"{level} "
        if document_id:
            line += f"[{document_id}] "
        line += f"{record.name}: {record.getMessage()}"
        if fields:
            line += " | " + ", ".join(f"{k}={v}" for k, v in fields.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter carrying bound context plus per-call ``extra_data``."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = {**self.extra, **kwargs.pop("extra_data", {})}
        kwargs["extra"] = {**kwargs.get("extra", {}), "extra_data": extra_data}
        return msg, kwargs

    def with_context(self, **context) -> "ContextLogger":
        """Derive a logger that attaches ``context`` to every record."""
        return ContextLogger(self.logger, {**self.extra, **context})


def get_logger(name: str) -> ContextLogger:
    """Get a structured logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Optional[str] = None
) -> None:
    """Configure the root logger.

    Console output goes to stderr, leaving stdout to the converted text.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Emit JSON lines on the console instead of text.
        log_file: Optional path that additionally receives JSON lines.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = HumanFormatter(use_color=sys.stderr.isatty())

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    # The tokenizer stack is chatty at DEBUG
    for name in ("spacy", "sudachipy"):
        logging.getLogger(name).setLevel(logging.WARNING)


def log_conversion(
    logger: ContextLogger,
    register: str,
    clauses: int,
    characters: int,
    duration_ms: int,
    success: bool = True,
    error: Optional[str] = None
) -> None:
    """Record the outcome of converting one document."""
    extra = {
        "register": register,
        "clauses": clauses,
        "characters": characters,
        "duration_ms": duration_ms,
        "success": success,
    }
    if error:
        extra["error"] = error

    if success:
        logger.info(f"Converted {clauses} clauses to {register} in {duration_ms}ms", extra_data=extra)
    else:
        logger.error(f"Conversion to {register} failed: {error}", extra_data=extra)
