# numeric/model.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple

SUPPORTED_DTYPES = ("float32", "float64")


class ParseResult(NamedTuple):
    """
    Outcome of a single conversion. `value` is meaningless when `ok` is False.
    """
    value: float
    ok: bool


@dataclass(frozen=True)
class SplitConfig:
    delimiters: str = ","
    omit_empty: bool = False
    dtype: str = "float64"

    def __post_init__(self) -> None:
        if not self.delimiters:
            raise ValueError("delimiters must contain at least one character")
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(f"dtype must be one of {SUPPORTED_DTYPES}, got {self.dtype!r}")

    def to_kwargs(self) -> Dict[str, Any]:
        return dict(
            delim=self.delimiters,
            omit_empty=self.omit_empty,
            dtype=self.dtype,
        )
