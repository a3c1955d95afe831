# merge/classify.py
# Byte-level predicates used by the word merger.
#
# Every recognized diacritic is a two-byte UTF-8 sequence led by 0xC3
# (Latin-1 Supplement). Only the second byte is stored below.
from __future__ import annotations
import string
from typing import FrozenSet

_LEAD = 0xC3

# ä ö ü Ä Ö Ü ß
GERMAN_UMLAUTS: FrozenSet[int] = frozenset({
    0xA4, 0xB6, 0xBC, 0x84, 0x96, 0x9C, 0x9F,
})

# á é í ó ú ü ñ Á É Í Ó Ú Ü Ñ
SPANISH_DIACRITICS: FrozenSet[int] = frozenset({
    0xA1, 0xA9, 0xAD, 0xB3, 0xBA, 0xBC, 0xB1,
    0x81, 0x89, 0x8D, 0x93, 0x9A, 0x9C, 0x91,
})

# é à è ù ç â ê î ô û ë ï ü, then the uppercase forms
FRENCH_DIACRITICS: FrozenSet[int] = frozenset({
    0xA9, 0xA0, 0xA8, 0xB9, 0xA7, 0xA2, 0xAA, 0xAE, 0xB4, 0xBB, 0xAB, 0xAF, 0xBC,
    0x89, 0x80, 0x88, 0x99, 0x87, 0x82, 0x8A, 0x8E, 0x94, 0x9B, 0x8B, 0x8F, 0x9C,
})

# ’ (U+2019), as in "d’impossible"
RIGHT_SINGLE_QUOTE = b"\xe2\x80\x99"

# C-locale isspace()
WHITESPACE_BYTES: FrozenSet[int] = frozenset(b" \t\n\v\f\r")

# C-locale ispunct() without the apostrophe, which can sit inside a word
PUNCT_BYTES: FrozenSet[int] = frozenset(string.punctuation.replace("'", "").encode("ascii"))


def _is_c3_pair(word: bytes, table: FrozenSet[int]) -> bool:
    return len(word) == 2 and word[0] == _LEAD and word[1] in table


def is_german_umlaut(word: bytes) -> bool:
    return _is_c3_pair(word, GERMAN_UMLAUTS)


def is_spanish_diacritic(word: bytes) -> bool:
    return _is_c3_pair(word, SPANISH_DIACRITICS)


def is_french_diacritic(word: bytes) -> bool:
    return _is_c3_pair(word, FRENCH_DIACRITICS)


def is_special(word: bytes) -> bool:
    """
    True for a recognized diacritic pair or the right single quotation mark.
    """
    return (
        is_german_umlaut(word)
        or is_spanish_diacritic(word)
        or is_french_diacritic(word)
        or word == RIGHT_SINGLE_QUOTE
    )


def is_space(byte: int) -> bool:
    return byte in WHITESPACE_BYTES


def is_punct(byte: int) -> bool:
    return byte in PUNCT_BYTES


def is_whitespace_only(word: bytes) -> bool:
    return bool(word) and all(b in WHITESPACE_BYTES for b in word)


def is_self_terminating(word: bytes) -> bool:
    """
    A fragment that is a complete token on its own: anything of three or more
    bytes, a two-byte sequence that is not a known diacritic, or a single
    whitespace/punctuation byte.
    """
    n = len(word)
    if n >= 3:
        return True
    if n == 2:
        return not is_special(word)
    if n == 1:
        return is_punct(word[0]) or is_space(word[0])
    return False


def is_continuation(word: bytes) -> bool:
    """
    A fragment that has to be glued to its neighbours: a lone letter byte or a
    recognized diacritic pair.
    """
    n = len(word)
    if n == 1:
        return not is_self_terminating(word)
    if n == 2:
        return is_special(word)
    return False
