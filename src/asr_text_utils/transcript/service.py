# transcript/service.py
from __future__ import annotations
from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

from asr_text_utils.logging import get_logger
from asr_text_utils.merge.model import MergeConfig
from asr_text_utils.merge.reporter import MergeReporter
from asr_text_utils.merge.service import merge_tokens
from asr_text_utils.transcript.ports import TokenDecoder

logger = get_logger(__name__)


class TranscriptService:
    """
    Decoder tokens -> merged words -> one transcript string.
    Delegates decoding to the injected TokenDecoder.
    """

    def __init__(
        self,
        decoder: TokenDecoder,
        config: Optional[MergeConfig] = None,
        reporter: Optional[MergeReporter] = None,
    ):
        self.decoder = decoder
        self.config = config or MergeConfig()
        self.reporter = reporter

    def words(self, samples: NDArray[np.float32]) -> List[str]:
        tokens = self.decoder.decode(samples)
        return merge_tokens(tokens, self.reporter, errors=self.config.errors)

    def transcribe(self, samples: NDArray[np.float32]) -> str:
        """
        Decode and merge one utterance.
        Decoder errors are logged and the result is an empty string.
        """
        try:
            return self.config.joiner.join(self.words(samples))
        except Exception as e:
            logger.error(f"TranscriptService.transcribe failed: {e}")
            return ""
