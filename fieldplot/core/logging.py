"""
Logging for fieldplot.

Library modules obtain loggers through get_logger() or
get_context_logger() and never touch handlers. Applications that want
to see element creation and sampling summaries call setup_logging(),
which reads FIELDPLOT_LOG_LEVEL, FIELDPLOT_LOG_FORMAT ("text" or "json")
and FIELDPLOT_LOG_FILE from Settings.

Context loggers attach a fixed mapping (e.g. the element type) to every
record as ``record.extra_data``; per-call values are passed with the
``extra_data`` keyword:

    logger = get_context_logger(__name__, element='vectorfield')
    logger.debug("Sampled vector field", extra_data={"grid_points": 81})
"""

import sys
import logging
from typing import Any, Dict, List, MutableMapping, Optional, Tuple
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import Settings, get_settings

# sympy floods DEBUG output while expressions are compiled
QUIET_LOGGERS = ("sympy",)

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s%(context)s"
TEXT_DATE_FORMAT = "%H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record; context fields are merged at top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.lineno}",
        }
        context = getattr(record, "extra_data", None)
        if context:
            entry.update(context)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line text; context fields are appended as key=value pairs."""

    def __init__(self):
        super().__init__(fmt=TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        context = getattr(record, "extra_data", None) or {}
        record.context = "".join(f" {key}={value}" for key, value in context.items())
        return super().format(record)


def _build_formatter(config: Settings) -> logging.Formatter:
    if config.LOG_FORMAT.lower() == "json":
        return StructuredFormatter()
    return TextFormatter()


def _build_handlers(config: Settings, level: int) -> List[logging.Handler]:
    """Console handler on stdout, plus a file handler when LOG_FILE is set."""
    formatter = _build_formatter(config)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.LOG_FILE:
        log_path = Path(config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure the root logger.

    Args:
        config: Settings to read; defaults to get_settings(). Existing root
            handlers are replaced, so calling this again reconfigures.
    """
    config = config or get_settings()
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(level=level, handlers=_build_handlers(config, level), force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger that stores fixed context plus per-call extra_data on each record."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        call_data = kwargs.pop("extra_data", None) or {}
        extra = dict(kwargs.get("extra") or {})
        extra["extra_data"] = {**self.extra, **call_data}
        kwargs["extra"] = extra
        return msg, kwargs


def get_context_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    """Logger for `name` whose records always carry `context`."""
    return ContextLoggerAdapter(get_logger(name), context)
