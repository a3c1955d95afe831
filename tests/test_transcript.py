import logging

import numpy as np

from asr_text_utils.merge.model import MergeConfig
from asr_text_utils.transcript.service import TranscriptService


class FakeDecoder:
    def __init__(self, tokens):
        self.tokens = tokens
        self.calls = 0

    def decode(self, samples):
        self.calls += 1
        return list(self.tokens)


class BrokenDecoder:
    def decode(self, samples):
        raise RuntimeError("model not loaded")


SAMPLES = np.zeros(16000, dtype=np.float32)


def test_transcribe_merges_decoder_tokens():
    decoder = FakeDecoder(["ö", "f", "f", "n", "e", "n", " ", "die", " ", "t", "ü", "r"])
    service = TranscriptService(decoder)
    assert service.transcribe(SAMPLES) == "öffnen die tür"
    assert decoder.calls == 1


def test_words_and_custom_joiner():
    decoder = FakeDecoder(["h", "i", ",", " ", "you"])
    service = TranscriptService(decoder, MergeConfig(joiner="|"))
    assert service.words(SAMPLES) == ["hi", ",", "you"]
    assert service.transcribe(SAMPLES) == "hi|,|you"


def test_empty_token_stream():
    assert TranscriptService(FakeDecoder([])).transcribe(SAMPLES) == ""


def test_decoder_failure_is_logged(caplog):
    service = TranscriptService(BrokenDecoder())
    with caplog.at_level(logging.ERROR):
        assert service.transcribe(SAMPLES) == ""
    assert "model not loaded" in caplog.text
