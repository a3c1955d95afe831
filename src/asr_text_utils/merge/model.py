# merge/model.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence


@dataclass
class PendingRun:
    """
    Half-open range [start, end) of consecutive continuation fragments.
    `start` is None while no run is open.
    """
    start: Optional[int] = None
    end: int = 0

    @property
    def active(self) -> bool:
        return self.start is not None

    def extend(self, index: int) -> None:
        if self.start is None:
            self.start = index
        self.end = index + 1

    def flush(self, fragments: Sequence[bytes]) -> bytes:
        word = b"".join(fragments[self.start:self.end])
        self.start = None
        self.end = 0
        return word


_DECODE_ERRORS = ("strict", "replace", "ignore")


@dataclass(frozen=True)
class MergeConfig:
    joiner: str = " "
    errors: str = "replace"  # bytes -> str decoding of merged words

    def __post_init__(self) -> None:
        if not isinstance(self.joiner, str):
            raise ValueError("joiner must be a str")
        if self.errors not in _DECODE_ERRORS:
            raise ValueError(f"errors must be one of {_DECODE_ERRORS}, got {self.errors!r}")

    def to_kwargs(self) -> Dict[str, Any]:
        return dict(
            joiner=self.joiner,
            errors=self.errors,
        )
