# merge/logger.py
from __future__ import annotations
import logging

from asr_text_utils.logging import get_logger
from asr_text_utils.merge.reporter import MergeReporter

_log = get_logger("WordMerger")


class SimpleLoggerReporter(MergeReporter):
    """
    Sends merge diagnostics to the package logger.
    Ignored fragments go out at ERROR, per-call summaries at DEBUG.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._log = logger or _log

    def on_ignored(self, index: int, fragment: bytes) -> None:
        self._log.error(f"Ignore fragment {index}: {fragment!r}")

    def on_merged(self, n_fragments: int, n_words: int) -> None:
        self._log.debug(f"Merged {n_fragments} fragment(s) into {n_words} word(s).")
