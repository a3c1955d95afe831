# scoring/service.py
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import jiwer

from asr_text_utils.logging import get_logger
from asr_text_utils.merge.reporter import MergeReporter
from asr_text_utils.merge.service import merge_characters_into_words
from asr_text_utils.scoring.boundaries import matched_spans, same_stream
from asr_text_utils.scoring.model import CorpusScore, MergeScore

logger = get_logger(__name__)

# Words are compared verbatim: case, diacritics and punctuation tokens all count.
transform_words = jiwer.Compose([
    jiwer.Strip(),
    jiwer.ReduceToListOfListOfWords(),
])

Reference = Union[str, Sequence[str]]


def _reference_words(reference: Reference) -> List[bytes]:
    words = reference.split() if isinstance(reference, str) else list(reference)
    return [w.encode("utf-8") for w in words]


def _edit_ops(ref_words: List[bytes], hyp_words: List[bytes]) -> Tuple[int, int, int, int]:
    """(hits, subs, dels, ins) of the word alignment."""
    if not ref_words:
        return 0, 0, 0, len(hyp_words)
    if not hyp_words:
        return 0, 0, len(ref_words), 0
    out = jiwer.process_words(
        " ".join(w.decode("utf-8", errors="replace") for w in ref_words),
        " ".join(w.decode("utf-8", errors="replace") for w in hyp_words),
        reference_transform=transform_words,
        hypothesis_transform=transform_words,
    )
    return out.hits, out.substitutions, out.deletions, out.insertions


def score_words(hyp_words: Sequence[bytes], reference: Reference) -> MergeScore:
    """
    Score already-merged words against the reference segmentation.
    `reference` is either a whitespace-separated string or a word list.
    """
    hyp = list(hyp_words)
    ref = _reference_words(reference)
    hits, subs, dels, ins = _edit_ops(ref, hyp)
    return MergeScore(
        hits=hits,
        subs=subs,
        dels=dels,
        ins=ins,
        ref_words=len(ref),
        hyp_words=len(hyp),
        matched_spans=matched_spans(hyp, ref),
        aligned=same_stream(hyp, ref),
    )


def score_merge(
    fragments: Sequence[bytes],
    reference: Reference,
    reporter: Optional[MergeReporter] = None,
) -> MergeScore:
    """Merge `fragments` and score the result against `reference`."""
    return score_words(merge_characters_into_words(fragments, reporter), reference)


def evaluate_merges(cases: Iterable[Tuple[Sequence[bytes], Reference]]) -> CorpusScore:
    result = CorpusScore([score_merge(fragments, reference) for fragments, reference in cases])
    if result.misaligned:
        logger.warning(f"{result.misaligned} utterance(s) differ from their reference beyond segmentation")
    logger.info(
        f"Scored {len(result.per_utterance)} utterance(s): micro WER={result.micro_wer:.4f} "
        f"span P={result.span_precision:.4f} R={result.span_recall:.4f}"
    )
    return result
