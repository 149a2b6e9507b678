"""Process-wide logging setup.

Configured from the environment:

- ``BACKEND_LOG_LEVEL``: root level (default INFO)
- ``BACKEND_LOG_DIR``: when set, also write a daily-rotated ``mind_haven.log``
- ``BACKEND_LOG_RETENTION``: rotated files to keep (default 7)
- ``BACKEND_ACCESS_LOG_LEVEL``: uvicorn access log level (default WARNING)
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, List

from core.utils.env import get_bool_env, get_env

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(shortpathname)s:%(lineno)d] - %(message)s"
_LOG_FORMAT_MS = "%(asctime)s.%(msecs)03d %(levelname)s [%(shortpathname)s:%(lineno)d] - %(message)s"

# Libraries that are chatty at INFO/DEBUG
_QUIET_LOGGERS = (
    "httpx",
    "httpcore",
    "openai",
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "multipart",
    "python_multipart",
)

_configured = False
_base_record_factory = logging.getLogRecordFactory()
_PROJECT_ROOT = str(Path(__file__).resolve().parents[1]) + "/"


class _SkipHealthChecks(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return "/health" not in record.getMessage()


def _level(name: str, default: str) -> str:
    value = (get_env(name) or "").strip().upper()
    return value if isinstance(logging.getLevelName(value), int) else default


def _short_path_record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
    """Expose ``shortpathname``: the record path relative to the project root."""

    record = _base_record_factory(*args, **kwargs)
    pathname = record.pathname or ""
    if pathname.startswith(_PROJECT_ROOT):
        pathname = pathname[len(_PROJECT_ROOT):]
    record.shortpathname = pathname
    return record


def _handlers(level: str) -> Dict[str, Dict[str, Any]]:
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stdout",
            "level": level,
        }
    }

    log_dir = get_env("BACKEND_LOG_DIR")
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "formatter": "standard",
            "filename": str(path / "mind_haven.log"),
            "when": "midnight",
            "backupCount": int(get_env("BACKEND_LOG_RETENTION", default="7") or 7),
            "encoding": "utf-8",
            "level": level,
        }
    return handlers


def setup_logging(force: bool = False) -> None:
    """Install the logging configuration once per process (again with ``force``)."""

    global _configured
    if _configured and not force:
        return

    level = _level("BACKEND_LOG_LEVEL", "INFO")
    handlers = _handlers(level)
    handler_names: List[str] = list(handlers)

    logging.setLogRecordFactory(_short_path_record_factory)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": _LOG_FORMAT_MS if get_bool_env("BACKEND_LOG_TIME_MS") else _LOG_FORMAT,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                }
            },
            "handlers": handlers,
            "root": {"level": level, "handlers": handler_names},
            "loggers": {
                "uvicorn": {"level": level, "handlers": handler_names, "propagate": False},
                "uvicorn.error": {"level": level, "handlers": handler_names, "propagate": False},
                "uvicorn.access": {
                    "level": _level("BACKEND_ACCESS_LOG_LEVEL", "WARNING"),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }
    )
    logging.captureWarnings(True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").addFilter(_SkipHealthChecks())

    _configured = True


__all__ = ["setup_logging"]
