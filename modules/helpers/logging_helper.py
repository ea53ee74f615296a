import logging
import os
import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, cast, Optional

from modules.helpers.config_helper import ConfigHelper


F = TypeVar("F", bound=Callable[..., Any])

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
LOGGER_NAME = "MageCharacterDesigner"
DEFAULT_LOG_FILE = "magecharacterdesigner.log"

_LOGGER: Optional[logging.Logger] = None
_LAST_SETTINGS: Optional[tuple[Any, ...]] = None


def _read_settings() -> tuple[bool, str, int]:
    enabled = ConfigHelper.getboolean("Logging", "enabled", fallback=False)
    directory = ConfigHelper.get("Logging", "directory", fallback="logs") or "logs"
    filename = ConfigHelper.get("Logging", "filename", fallback=DEFAULT_LOG_FILE) or DEFAULT_LOG_FILE
    level_name = ConfigHelper.get("Logging", "level", fallback="INFO") or "INFO"

    if not os.path.isabs(directory):
        directory = os.path.join(PROJECT_ROOT, directory)
    log_path = filename if os.path.isabs(filename) else os.path.join(directory, filename)
    return enabled, log_path, getattr(logging, str(level_name).upper(), logging.INFO)


def _swap_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    for existing in list(logger.handlers):
        if getattr(existing, "_mcd_handler", False):
            logger.removeHandler(existing)
            existing.close()
    handler._mcd_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def ensure_logger() -> tuple[logging.Logger, bool]:
    """Return the project logger and whether file logging is on.

    Handlers are rebuilt only when the ``[Logging]`` settings change.
    """
    global _LOGGER, _LAST_SETTINGS

    settings = _read_settings()
    enabled, log_path, level = settings

    if _LOGGER is None:
        _LOGGER = logging.getLogger(LOGGER_NAME)
        _LOGGER.propagate = False

    if settings != _LAST_SETTINGS:
        _LAST_SETTINGS = settings
        if enabled:
            os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", "%Y-%m-%d %H:%M:%S")
            )
            _swap_handler(_LOGGER, file_handler)
            _LOGGER.setLevel(level)
            _LOGGER.info("logging_helper.configure - Logging enabled. Writing to %s", log_path)
        else:
            _swap_handler(_LOGGER, logging.NullHandler())
            _LOGGER.setLevel(logging.CRITICAL)

    return _LOGGER, enabled


def _determine_caller() -> str:
    frame = inspect.currentframe()
    target = frame
    try:
        # Skip this helper, _log and the public log_* wrapper.
        for _ in range(3):
            if target is None:
                break
            target = target.f_back

        if target is None:
            return "unknown"

        module = target.f_globals.get("__name__", "")
        name = target.f_code.co_name
        return f"{module}.{name}" if module else name
    finally:
        del frame
        del target


def _log(level: int, message: str, *, func_name: Optional[str] = None) -> None:
    logger, enabled = ensure_logger()
    if not enabled:
        return

    name = func_name or _determine_caller()
    logger.log(level, "%s - %s", name, message)


def log_debug(message: str, *, func_name: Optional[str] = None) -> None:
    _log(logging.DEBUG, message, func_name=func_name)


def log_info(message: str, *, func_name: Optional[str] = None) -> None:
    _log(logging.INFO, message, func_name=func_name)


def log_warning(message: str, *, func_name: Optional[str] = None) -> None:
    _log(logging.WARNING, message, func_name=func_name)


def log_module_import(module_name: str) -> None:
    """Record that ``module_name`` was imported (debug level only)."""
    _log(logging.DEBUG, "module imported", func_name=module_name)


def log_function(func: F) -> F:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger, enabled = ensure_logger()
        if not enabled:
            return func(*args, **kwargs)

        func_name = func.__qualname__
        _log(logging.DEBUG, "started", func_name=func_name)
        try:
            result = func(*args, **kwargs)
            _log(logging.DEBUG, "completed", func_name=func_name)
            return result
        except Exception as exc:
            logger.exception("%s - failed: %s", func_name, exc)
            raise

    return cast(F, wrapper)


def log_methods(cls: type) -> type:
    """Wrap every public method of ``cls`` with :func:`log_function`."""
    for name, attr in list(cls.__dict__.items()):
        if name.startswith("__"):
            continue

        if isinstance(attr, staticmethod):
            setattr(cls, name, staticmethod(log_function(attr.__func__)))
        elif isinstance(attr, classmethod):
            setattr(cls, name, classmethod(log_function(attr.__func__)))
        elif callable(attr):
            setattr(cls, name, log_function(attr))

    return cls


__all__ = [
    "ensure_logger",
    "log_debug",
    "log_function",
    "log_info",
    "log_methods",
    "log_module_import",
    "log_warning",
]
