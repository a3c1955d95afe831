import math

import numpy as np
import pytest

from asr_text_utils.numeric.literals import INF_NAN_LITERALS, lookup_literal
from asr_text_utils.numeric.service import parse_real


def test_plain_number():
    assert parse_real("3.14") == (3.14, True)


def test_surrounding_whitespace_is_accepted():
    assert parse_real("  3.14  ") == (3.14, True)
    assert parse_real("\t42\n") == (42.0, True)


@pytest.mark.parametrize("text", ["3.14 junk", "3.14abc", "1 2", "inf inf", "", "   "])
def test_rejects_junk_and_multiple_tokens(text):
    _, ok = parse_real(text)
    assert not ok


@pytest.mark.parametrize("text", ["1_000", "0x10", "١", "1e", "--1"])
def test_rejects_non_c_number_syntax(text):
    assert not parse_real(text).ok


@pytest.mark.parametrize("text,expected", [("+.5", 0.5), ("5.", 5.0), ("-2e3", -2000.0), ("1E-2", 0.01)])
def test_decimal_forms(text, expected):
    value, ok = parse_real(text)
    assert ok
    assert value == expected


def test_infinity_spellings_case_insensitive():
    assert parse_real("inf") == (math.inf, True)
    assert parse_real("-INFINITY") == (-math.inf, True)
    assert parse_real("+Infinity") == (math.inf, True)
    assert parse_real("1.#INF") == (math.inf, True)
    assert parse_real("-1.#inf") == (-math.inf, True)


def test_nan_spellings():
    value, ok = parse_real("NaN")
    assert ok and math.isnan(value)
    value, ok = parse_real("  -nan ")
    assert ok and math.isnan(value)
    assert math.copysign(1.0, value) == -1.0
    value, ok = parse_real("-1.#QNAN")
    assert ok and math.isnan(value) and math.copysign(1.0, value) == -1.0


def test_case_fold_is_ascii_only():
    # dotless i would uppercase to "I" with full unicode folding
    assert not parse_real("ınf").ok


def test_literal_table_is_read_only():
    assert len(INF_NAN_LITERALS) == 13
    with pytest.raises(TypeError):
        INF_NAN_LITERALS["FOO"] = 1.0
    assert lookup_literal("infinity") == math.inf
    assert lookup_literal("infinit") is None


def test_overflow_fails_instead_of_becoming_inf():
    assert not parse_real("1e400").ok
    assert not parse_real("1e39", dtype="float32").ok
    assert parse_real("1e39") == (1e39, True)


def test_float32_rounds_to_single_precision():
    value, ok = parse_real("0.1", dtype="float32")
    assert ok
    assert value == float(np.float32(0.1))
    assert value != 0.1


def test_float32_accepts_special_literals():
    value, ok = parse_real("-inf", dtype="float32")
    assert ok and value == -math.inf


def test_unknown_dtype_raises():
    with pytest.raises(ValueError):
        parse_real("1", dtype="int32")
