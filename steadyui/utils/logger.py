# steadyui/utils/logger.py
from __future__ import annotations

"""Logging for steady-ui
------------------------
Everything logs under the `steadyui` logger. On first use it gets a Rich
console handler and, with STEADYUI_LOG_TO_FILE, a rotating JSON-lines file.

Context travels in `record.extra`:
  * `bind()` sets process-wide keys (suite, build, ...), read on every line
  * `log_with_context()` returns a logger that adds its own keys on top,
    which is how each Browser tags its lines with a session id
"""

import json
import logging
import threading
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, MutableMapping, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler

from steadyui.utils.config import get_settings, LogLevel


__all__ = [
    "get_logger",
    "set_log_level",
    "bind",
    "unbind",
    "log_with_context",
    "ContextAdapter",
    "JsonFormatter",
]

ROOT_LOGGER = "steadyui"

_setup_lock = threading.Lock()
_ready = False
_bound: Dict[str, Any] = {}


class JsonFormatter(logging.Formatter):
    """One JSON object per line; bound and session context become top-level keys."""

    default_time_format = "%Y-%m-%dT%H:%M:%S"

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(self.default_time_format),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)

        context = getattr(record, "extra", None)
        if isinstance(context, dict):
            entry.update(context)

        # sessions can be driven from several threads at once
        entry["thread"] = record.threadName
        entry["process"] = record.process
        return json.dumps(entry, ensure_ascii=False, default=str)


class ContextAdapter(logging.LoggerAdapter):
    """
    Attaches `record.extra` = bound context merged with this adapter's own keys.
    The bound context is read per call, so `bind()` after creation still shows up.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        context = dict(_bound)
        context.update(self.extra or {})
        kwargs["extra"] = {**kwargs.get("extra", {}), "extra": context}
        return msg, kwargs


_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


def _setup() -> None:
    """Attach handlers to the `steadyui` logger the first time anyone asks for a logger."""
    global _ready
    if _ready:
        return

    with _setup_lock:
        if _ready:
            return

        settings = get_settings()
        level = _LEVELS.get(settings.LOG_LEVEL, logging.INFO)

        pkg = logging.getLogger(ROOT_LOGGER)
        pkg.setLevel(level)
        for h in list(pkg.handlers):
            pkg.removeHandler(h)

        console = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=settings.COLORIZED_OUTPUT,
            omit_repeated_times=False,
        )
        console.setFormatter(logging.Formatter("%(message)s"))
        console.setLevel(level)
        pkg.addHandler(console)

        if settings.LOG_TO_FILE:
            settings.ensure_dirs()
            json_file = RotatingFileHandler(
                filename=str(settings.LOG_FILE),
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
                delay=True,
            )
            json_file.setLevel(level)
            json_file.setFormatter(JsonFormatter())
            pkg.addHandler(json_file)

        # Selenium logs every wire command at DEBUG
        for name in ("selenium", "urllib3"):
            logging.getLogger(name).setLevel(max(level, logging.WARNING))

        _ready = True


def get_logger(name: Optional[str] = None) -> ContextAdapter:
    _setup()
    return ContextAdapter(logging.getLogger(name or ROOT_LOGGER), {})


def set_log_level(level: LogLevel | str) -> None:
    """Change the level of the `steadyui` logger and its handlers."""
    _setup()
    name = level if isinstance(level, str) else level.value
    py_level = getattr(logging, name.upper(), logging.INFO)
    pkg = logging.getLogger(ROOT_LOGGER)
    pkg.setLevel(py_level)
    for h in pkg.handlers:
        h.setLevel(py_level)


def bind(**kwargs: Any) -> None:
    """Add process-wide context, e.g. bind(suite="checkout", build="1234")."""
    _bound.update(kwargs)


def unbind(*keys: str) -> None:
    for k in keys:
        _bound.pop(k, None)


def log_with_context(logger: logging.LoggerAdapter, **kwargs: Any) -> ContextAdapter:
    """
    Logger for one scope (a Browser session, a test) that adds `kwargs` to every line:
        log = log_with_context(get_logger(__name__), session="7f3a")
        log.info("navigating")
    """
    scoped = dict(logger.extra or {})
    scoped.update(kwargs)
    return ContextAdapter(logger.logger, scoped)
