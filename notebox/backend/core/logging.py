"""
NoteBox logging.

structlog is layered over the stdlib root logger, so records from
uvicorn and SQLAlchemy come out in the same shape as our own. Settings
live in config/settings/logging.yaml; setup_logging() arguments override
them for a single run (the CLI's --verbose/--debug, for instance).

A JSON record carries timestamp, level, logger, event, func_name and
lineno, plus whatever is bound in contextvars. Inside a request the
middleware binds request_id and source.

    logger = get_logger(__name__)
    logger.info("Note created", extra={"id_note": 12})
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from notebox.backend.core.config import find_project_root, load_yaml_config

VALID_SOURCES = frozenset({"web", "cli", "api", "internal", "unknown"})
"""Values accepted for the ``source`` field; callers set it explicitly."""

# Third-party loggers that are too chatty at INFO.
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")

_logging_config: dict[str, Any] | None = None


def _load_logging_config() -> dict[str, Any]:
    """Read logging.yaml once per process."""
    global _logging_config
    if _logging_config is None:
        _logging_config = load_yaml_config("logging.yaml")
    return _logging_config


def _resolve_log_path(configured_path: str) -> Path:
    return find_project_root() / configured_path


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(pre_chain: list[Processor], renderer: Processor) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
        foreign_pre_chain=pre_chain,
    )


def _file_handler(file_config: dict[str, Any]) -> logging.Handler:
    path = _resolve_log_path(file_config["path"])
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=str(path),
        maxBytes=file_config["max_bytes"],
        backupCount=file_config["backup_count"],
        encoding="utf-8",
    )


def _pick(override: Any, configured: Any) -> Any:
    return configured if override is None else override


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    (Re)configure structlog and the root logger.

    Any argument left as None falls back to logging.yaml. The file
    handler always writes JSON; ``format_type`` only affects the console,
    where "console" gives coloured human-readable output.
    """
    config = _load_logging_config()
    handlers = config["handlers"]

    pre_chain = _shared_processors()
    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = _formatter(pre_chain, structlog.processors.JSONRenderer())
    if _pick(format_type, config["format"]) == "console":
        console_formatter = _formatter(pre_chain, structlog.dev.ConsoleRenderer(colors=True))
    else:
        console_formatter = json_formatter

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(getattr(logging, _pick(level, config["level"]).upper()))

    if _pick(enable_console, handlers["console"]["enabled"]):
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(console_formatter)
        root.addHandler(console)

    if _pick(enable_file_logging, handlers["file"]["enabled"]):
        file_handler = _file_handler(handlers["file"])
        file_handler.setFormatter(json_formatter)
        root.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Emit ``message`` at ``level`` tagged with ``source``.

    For code that runs outside a request (CLI commands, migrations), where
    the middleware has not bound a source. An unknown level name raises
    AttributeError.
    """
    getattr(logger, level.lower())(message, source=source, **kwargs)
