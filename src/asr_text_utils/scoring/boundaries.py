# scoring/boundaries.py
# Words as byte ranges over the concatenated (whitespace-free) stream.
from __future__ import annotations
from typing import Sequence, Set, Tuple

Span = Tuple[int, int]


def word_spans(words: Sequence[bytes]) -> Set[Span]:
    spans: Set[Span] = set()
    offset = 0
    for w in words:
        spans.add((offset, offset + len(w)))
        offset += len(w)
    return spans


def same_stream(hyp_words: Sequence[bytes], ref_words: Sequence[bytes]) -> bool:
    return b"".join(hyp_words) == b"".join(ref_words)


def matched_spans(hyp_words: Sequence[bytes], ref_words: Sequence[bytes]) -> int:
    return len(word_spans(hyp_words) & word_spans(ref_words))
