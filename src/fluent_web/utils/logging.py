"""
Logging for fluent-web.

The library logs under the `fluent_web` logger and stays silent by default:
a NullHandler is attached at import and records propagate to whatever the
host test runner configures (pytest's log capture, for instance).

setup_logging() is an opt-in for scripts and debugging sessions that want
fluent-web's wait diagnostics on the console or in a file without touching
the root logger.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any, MutableMapping

if TYPE_CHECKING:
    from fluent_web.config.settings import LoggingSettings


ROOT_LOGGER_NAME = "fluent_web"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Marks handlers installed by setup_logging() so they can be found again.
_OWNED_ATTR = "_fluent_web_owned"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


def setup_logging(settings: "LoggingSettings | None" = None) -> logging.Logger:
    """
    Attach console and/or file handlers to the fluent_web logger.

    Calling it again while handlers are installed is a no-op; call
    reset_logging() first to apply different settings.

    Args:
        settings: Level, format and destinations. Defaults to INFO on stderr.

    Returns:
        The fluent_web logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _owned_handlers(logger):
        return logger

    level = logging.INFO if settings is None else getattr(logging, settings.level)
    formatter = logging.Formatter(
        fmt=DEFAULT_FORMAT if settings is None else settings.format,
        datefmt=None if settings is None else settings.date_format,
    )

    handlers: list[logging.Handler] = []
    if settings is None or settings.log_to_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if settings is not None and settings.file_path is not None:
        settings.file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
        logger.addHandler(handler)

    logger.setLevel(level)
    # Our handlers already print; don't print twice through the root logger.
    logger.propagate = not handlers
    return logger


def reset_logging() -> None:
    """Remove handlers installed by setup_logging() and restore defaults."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Logger for a fluent-web module, e.g. get_logger(__name__).

    Names outside the package are nested under `fluent_web`.
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LoggerAdapter(logging.LoggerAdapter):
    """
    Prefixes every message with the subject a wait is polling.

    >>> log = get_logger_with_context(__name__, subject="browser.element('#x')")
    >>> log.debug("Matched visible")  # browser.element('#x'): Matched visible

    The context is also passed through as `extra`, so formatters can use
    %(subject)s directly.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        subject = self.extra.get("subject") if self.extra else None
        kwargs.setdefault("extra", {}).update(self.extra or {})
        if subject:
            msg = f"{subject}: {msg}"
        return msg, kwargs


def get_logger_with_context(name: str | None = None, **context: str) -> LoggerAdapter:
    """Logger adapter carrying `context` (typically `subject=...`)."""
    return LoggerAdapter(get_logger(name), context)
