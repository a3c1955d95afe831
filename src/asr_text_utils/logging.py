# logging.py
from __future__ import annotations
import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_LEVEL_ENV = "ASR_TEXT_UTILS_LOG_LEVEL"
_DEFAULT_LEVEL = "INFO"

_configured = False


def _resolve_level(raw: str) -> tuple[str, bool]:
    """
    Returns (level name, valid). Unknown names resolve to INFO.
    """
    level = raw.strip().upper() or _DEFAULT_LEVEL
    if isinstance(logging.getLevelName(level), int):
        return level, True
    return _DEFAULT_LEVEL, False


def configure(force: bool = False) -> None:
    """
    Applies basicConfig (unless the host app already has handlers) and sets the
    package level from ASR_TEXT_UTILS_LOG_LEVEL. Runs once unless forced.
    """
    global _configured
    if _configured and not force:
        return
    raw = os.getenv(_LEVEL_ENV, _DEFAULT_LEVEL)
    level, valid = _resolve_level(raw)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    package_logger = logging.getLogger("asr_text_utils")
    package_logger.setLevel(level)
    _configured = True
    if not valid:
        package_logger.warning(f"Unknown {_LEVEL_ENV}={raw!r}; using {_DEFAULT_LEVEL}")


def get_logger(name: str) -> logging.Logger:
    """
    Named logger under the package hierarchy.
    """
    configure()
    if not name.startswith("asr_text_utils"):
        name = f"asr_text_utils.{name}"
    return logging.getLogger(name)
