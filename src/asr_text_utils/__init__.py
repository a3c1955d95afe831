from asr_text_utils.merge.service import merge_characters_into_words, merge_tokens
from asr_text_utils.numeric.service import parse_real, split_string_to_vector, split_to_floats

__all__ = [
    "merge_characters_into_words",
    "merge_tokens",
    "parse_real",
    "split_string_to_vector",
    "split_to_floats",
]
