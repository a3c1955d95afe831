# merge/service.py
from __future__ import annotations
from typing import List, Optional, Sequence

from asr_text_utils.merge.classify import is_continuation, is_self_terminating, is_whitespace_only
from asr_text_utils.merge.model import PendingRun
from asr_text_utils.merge.reporter import MergeReporter, NoOpReporter


def merge_characters_into_words(
    fragments: Sequence[bytes],
    reporter: Optional[MergeReporter] = None,
) -> List[bytes]:
    """
    Rebuild words from decoder fragments, e.g. [b"o", b"\\xc3\\xa4", b"ffnen"].

    Single bytes and recognized two-byte diacritics accumulate into a pending
    run. Any other fragment closes the run (emitting it as one word) and is
    then emitted itself, unless it is only whitespace. Empty fragments are
    reported and skipped. Order is preserved.
    """
    reporter = reporter or NoOpReporter()
    words: List[bytes] = []
    run = PendingRun()

    for i, w in enumerate(fragments):
        if is_self_terminating(w):
            if run.active:
                words.append(run.flush(fragments))
            if not is_whitespace_only(w):
                words.append(bytes(w))
            continue

        # e.g. öffnen
        if is_continuation(w):
            run.extend(i)
            continue

        reporter.on_ignored(i, w)

    if run.active:
        words.append(run.flush(fragments))

    reporter.on_merged(len(fragments), len(words))
    return words


def merge_tokens(
    tokens: Sequence[str],
    reporter: Optional[MergeReporter] = None,
    errors: str = "replace",
) -> List[str]:
    """
    str-in/str-out wrapper: tokens are UTF-8 encoded, merged, and decoded.
    """
    fragments = [t.encode("utf-8") for t in tokens]
    return [w.decode("utf-8", errors=errors) for w in merge_characters_into_words(fragments, reporter)]
