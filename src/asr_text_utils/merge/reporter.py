# merge/reporter.py
from __future__ import annotations
from typing import Protocol

class MergeReporter(Protocol):
    def on_ignored(self, index: int, fragment: bytes) -> None: ...
    def on_merged(self, n_fragments: int, n_words: int) -> None: ...

class NoOpReporter:
    def on_ignored(self, index: int, fragment: bytes) -> None: pass
    def on_merged(self, n_fragments: int, n_words: int) -> None: pass
