# numeric/service.py
from __future__ import annotations
import math
import re
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from asr_text_utils.logging import get_logger
from asr_text_utils.numeric.literals import lookup_literal
from asr_text_utils.numeric.model import ParseResult, SplitConfig, SUPPORTED_DTYPES

logger = get_logger(__name__)

# C-locale whitespace only; unicode spaces are part of a token.
_WS = re.compile(r"[ \t\n\v\f\r]+")
_RX_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_FAILED = ParseResult(0.0, False)


def _single_token(text: str) -> str | None:
    tokens = [t for t in _WS.split(text) if t]
    if len(tokens) != 1:
        return None
    return tokens[0]


def _narrow(value: float, dtype: str) -> float | None:
    """
    Round to the requested precision. Returns None if a finite value overflows.

    float32 goes through float64 first, so a literal lying almost exactly
    halfway between two float32 values can land 1 ulp away from strtof.
    """
    if dtype == "float32":
        with np.errstate(over="ignore"):
            narrowed = np.float32(value)
        if math.isinf(narrowed) and not math.isinf(value):
            return None
        return float(narrowed)
    return value


def parse_real(text: str, dtype: str = "float64") -> ParseResult:
    """
    Convert `text` to a float, tolerating surrounding whitespace.

    Accepts plain decimal literals and, as a fallback, the spellings in
    INF_NAN_LITERALS (case-insensitive). Anything else, including trailing
    junk after a number or more than one token, returns ok=False.
    Never raises for bad input.
    """
    if dtype not in SUPPORTED_DTYPES:
        raise ValueError(f"dtype must be one of {SUPPORTED_DTYPES}, got {dtype!r}")
    if not text:
        return _FAILED

    token = _single_token(text)
    if token is None:
        return _FAILED

    if _RX_DECIMAL.fullmatch(token):
        value = float(token)
        # out-of-range literals are a failure, not infinity
        if math.isinf(value):
            return _FAILED
        narrowed = _narrow(value, dtype)
        if narrowed is None:
            return _FAILED
        return ParseResult(narrowed, True)

    special = lookup_literal(token)
    if special is None:
        return _FAILED
    return ParseResult(special, True)


def split_string_to_vector(full: str, delim: str, omit_empty: bool = False) -> List[str]:
    """
    Split `full` on any character found in `delim`.

    With omit_empty, zero-length pieces are dropped, including the ones
    produced by delimiters at either end of the string.
    """
    if not delim:
        raise ValueError("delim must contain at least one character")

    out: List[str] = []
    start = 0
    end = len(full)
    while True:
        found = next((i for i in range(start, end) if full[i] in delim), -1)
        piece = full[start:] if found == -1 else full[start:found]
        if not omit_empty or (found != start and start != end):
            out.append(piece)
        if found == -1:
            break
        start = found + 1
    return out


def split_to_floats(
    full: str,
    delim: str = ",",
    omit_empty: bool = False,
    dtype: str = "float64",
) -> Tuple[NDArray[np.floating], bool]:
    """
    Parse a delimited list of numbers.

    An empty string yields an empty array and True. The first piece that
    fails to parse aborts the whole batch: the result is then an empty
    array and False.
    """
    if dtype not in SUPPORTED_DTYPES:
        raise ValueError(f"dtype must be one of {SUPPORTED_DTYPES}, got {dtype!r}")
    if not full:
        return np.empty(0, dtype=dtype), True

    pieces = split_string_to_vector(full, delim, omit_empty)
    values: List[float] = []
    for idx, piece in enumerate(pieces):
        value, ok = parse_real(piece, dtype)
        if not ok:
            logger.debug(f"split_to_floats: element {idx} ({piece!r}) is not a number")
            return np.empty(0, dtype=dtype), False
        values.append(value)
    return np.array(values, dtype=dtype), True


class FloatListParser:
    """
    `split_to_floats` bound to a validated SplitConfig.
    """

    def __init__(self, config: SplitConfig | None = None):
        self.config = config or SplitConfig()

    def parse(self, text: str) -> Tuple[NDArray[np.floating], bool]:
        return split_to_floats(text, **self.config.to_kwargs())
