# main.py
import argparse
import sys
from typing import List, Optional

from asr_text_utils.logging import get_logger
from asr_text_utils.merge.logger import SimpleLoggerReporter
from asr_text_utils.merge.model import MergeConfig
from asr_text_utils.merge.service import merge_characters_into_words
from asr_text_utils.numeric.model import SplitConfig, SUPPORTED_DTYPES
from asr_text_utils.numeric.service import FloatListParser
from asr_text_utils.scoring.service import score_words

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asr-text-utils")
    sub = parser.add_subparsers(dest="command", required=True)

    floats = sub.add_parser("parse-floats", help="parse a delimited list of numbers")
    # optional here so "-1.5,2" or "-inf" can arrive as an unrecognized arg
    floats.add_argument("text", nargs="?")
    floats.add_argument("--delim", default=",")
    floats.add_argument("--omit-empty", action="store_true")
    floats.add_argument("--dtype", choices=SUPPORTED_DTYPES, default="float64")

    merge = sub.add_parser("merge", help="merge decoder tokens into words")
    merge.add_argument("tokens", nargs="*", help="tokens; read one per line from stdin if omitted")
    merge.add_argument("--joiner", default=" ")
    merge.add_argument("--reference", help="score the merged words against this space-separated segmentation")
    return parser


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = _build_parser()
    args, extras = parser.parse_known_args(argv)
    if args.command == "parse-floats":
        if args.text is None and len(extras) == 1:
            args.text = extras.pop()
        if args.text is None:
            parser.error("parse-floats: the following arguments are required: text")
    if extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    return args


def _run_parse_floats(args: argparse.Namespace) -> int:
    config = SplitConfig(delimiters=args.delim, omit_empty=args.omit_empty, dtype=args.dtype)
    values, ok = FloatListParser(config).parse(args.text)
    if not ok:
        logger.error(f"Could not parse {args.text!r} as a list of {args.dtype}")
        return 1
    print(" ".join(repr(float(v)) for v in values))
    return 0


def _run_merge(args: argparse.Namespace) -> int:
    tokens = args.tokens or [line.rstrip("\n") for line in sys.stdin]
    config = MergeConfig(joiner=args.joiner)
    words = merge_characters_into_words([t.encode("utf-8") for t in tokens], SimpleLoggerReporter())
    print(config.joiner.join(w.decode("utf-8", errors=config.errors) for w in words))

    if args.reference is not None:
        score = score_words(words, args.reference)
        print(f"WER: {score.wer:.6f}")
        print(f"Span F1: {score.span_f1:.6f}")
        if not score.aligned:
            logger.warning("Merged bytes differ from the reference; span scores only reflect overlap")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.command == "parse-floats":
        return _run_parse_floats(args)
    return _run_merge(args)


if __name__ == "__main__":
    sys.exit(main())
