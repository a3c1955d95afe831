# scoring/model.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


def _ratio(num: int, den: int, empty: float) -> float:
    return num / den if den else empty


@dataclass(frozen=True)
class MergeScore:
    """
    How well one merge reproduced the reference word segmentation.

    Edit ops come from a word alignment of merged words against reference
    words. Span counts compare byte ranges: a merged word is correct only
    if it covers exactly the same bytes as a reference word.
    """
    hits: int
    subs: int
    dels: int
    ins: int
    ref_words: int
    hyp_words: int
    matched_spans: int
    aligned: bool  # both sides are the same byte stream

    @property
    def wer(self) -> float:
        if self.ref_words == 0:
            return 0.0 if self.hyp_words == 0 else 1.0
        return (self.subs + self.dels + self.ins) / self.ref_words

    @property
    def span_precision(self) -> float:
        return _ratio(self.matched_spans, self.hyp_words, 1.0 if self.ref_words == 0 else 0.0)

    @property
    def span_recall(self) -> float:
        return _ratio(self.matched_spans, self.ref_words, 1.0 if self.hyp_words == 0 else 0.0)

    @property
    def span_f1(self) -> float:
        p, r = self.span_precision, self.span_recall
        return 2 * p * r / (p + r) if p + r else 0.0


@dataclass
class CorpusScore:
    per_utterance: List[MergeScore] = field(default_factory=list)

    def _total(self, attr: str) -> int:
        return sum(getattr(s, attr) for s in self.per_utterance)

    @property
    def micro_wer(self) -> float:
        ref = self._total("ref_words")
        if ref == 0:
            return float("nan")
        return (self._total("subs") + self._total("dels") + self._total("ins")) / ref

    @property
    def span_precision(self) -> float:
        return _ratio(self._total("matched_spans"), self._total("hyp_words"), float("nan"))

    @property
    def span_recall(self) -> float:
        return _ratio(self._total("matched_spans"), self._total("ref_words"), float("nan"))

    @property
    def misaligned(self) -> int:
        return sum(1 for s in self.per_utterance if not s.aligned)
