# numeric/literals.py
# Spellings of infinity/NaN accepted when plain decimal parsing fails.
# Keys are uppercase; lookups fold ASCII case only.
from __future__ import annotations
import math
import string
from types import MappingProxyType
from typing import Mapping, Optional

_INF = math.inf
_NAN = math.nan

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

INF_NAN_LITERALS: Mapping[str, float] = MappingProxyType({
    "INF": _INF,
    "+INF": _INF,
    "-INF": -_INF,
    "INFINITY": _INF,
    "+INFINITY": _INF,
    "-INFINITY": -_INF,
    "NAN": _NAN,
    "+NAN": _NAN,
    "-NAN": -_NAN,  # sign bit set
    # MSVC runtime spellings
    "1.#INF": _INF,
    "-1.#INF": -_INF,
    "1.#QNAN": _NAN,
    "-1.#QNAN": -_NAN,
})


def lookup_literal(token: str) -> Optional[float]:
    """Return the special value for `token`, or None when it is not recognized."""
    return INF_NAN_LITERALS.get(token.translate(_ASCII_UPPER))
