import logging
from typing import Any, Optional

from app.core.config import settings


DEFAULT_LEVEL = settings.app.log_level.upper()
DEFAULT_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | "
    "instance=%(instance_id)s flashcard=%(flashcard_id)s | %(message)s"
)
CONTEXT_FIELDS = ("instance_id", "flashcard_id")


class ContextFilter(logging.Filter):
    """Fills in context fields missing from a record so the format never fails."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        for name in CONTEXT_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, "-")
        return True


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that merges bound context into each record's extras."""

    def process(self, msg: Any, kwargs: dict) -> tuple[Any, dict]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Initialize the root logger once per process (reloads replace handlers)."""
    resolved_level = getattr(logging, (level or DEFAULT_LEVEL).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved_level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    handler.addFilter(ContextFilter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)


def bind(logger: logging.Logger, **context: Any) -> ContextAdapter:
    """Attach ``instance_id`` / ``flashcard_id`` context to a logger."""
    return ContextAdapter(logger, context)
