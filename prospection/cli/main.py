from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from prospection.adapters.lexicon_store import get_lexicon
from prospection.analysis import get_analyzer
from prospection.config import get_settings
from prospection.domain import Encoding, LexiconError, Locale, OutputMode, SortKey
from prospection.workers.score_texts import run as score_texts


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be positive")
    return parsed


def _add_scoring_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--encoding", choices=[e.value for e in Encoding], default=None, help="Word encoding (default: binary, or PROSPECTION_ENCODING)")
    parser.add_argument("--output", dest="output_mode", choices=[m.value for m in OutputMode], default=None, help="Result shape (default: lex)")
    parser.add_argument("--min", dest="min_weight", type=float, default=None, help="Exclude lexicon entries weighted below this value")
    parser.add_argument("--max", dest="max_weight", type=float, default=None, help="Exclude lexicon entries weighted above this value")
    parser.add_argument("--ngrams", type=str, default=None, help="Comma-separated n-gram arities, or 'none' (default: 2,3)")
    parser.add_argument("--wc-grams", action=argparse.BooleanOptionalAction, default=None, help="Count n-grams toward the wordcount")
    parser.add_argument("--overlap", action=argparse.BooleanOptionalAction, default=None, help="Let words inside matched phrases also match on their own")
    parser.add_argument("--locale", choices=[loc.value for loc in Locale], default=None, help="Input spelling convention (default: US)")
    parser.add_argument("--places", type=int, default=None, help="Decimal places for numeric output (default: 9)")
    parser.add_argument("--sort-by", choices=[s.value for s in SortKey], default=None, help="Ordering for match output (default: lex)")
    parser.add_argument("--more", action=argparse.BooleanOptionalAction, default=None, help="Append the winning score to orientation output")


def _add_analyze(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("analyze", help="Score the temporal orientation of a text")
    parser.add_argument("text", nargs="*", help="Text to analyze (reads stdin when omitted)")
    _add_scoring_options(parser)


def _add_batch(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("batch", help="Score one text per line of a file, emitting JSON lines")
    parser.add_argument("input", type=Path, help="Input file with one text per line")
    parser.add_argument("--output-file", type=Path, default=None, help="Write JSON lines here instead of stdout")
    parser.add_argument("--concurrency", type=_positive_int, default=None, help="Optional worker concurrency override")
    parser.add_argument("--limit", type=_positive_int, default=None, help="Max number of texts to score")
    _add_scoring_options(parser)


def _add_lexicon(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser("lexicon", help="Describe the loaded lexicon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prospection", description="Temporal orientation scoring")
    parser.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], default=None, help="Logging level (default: PROSPECTION_LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_analyze(subparsers)
    _add_batch(subparsers)
    _add_lexicon(subparsers)
    return parser


def options_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the scoring options that were given on the command line."""
    mapping = {
        "encoding": args.encoding or get_settings().default_encoding,
        "output": args.output_mode,
        "min": args.min_weight,
        "max": args.max_weight,
        "nGrams": args.ngrams,
        "wcGrams": args.wc_grams,
        "overlap": args.overlap,
        "locale": args.locale,
        "places": args.places,
        "sortBy": args.sort_by,
        "more": args.more,
    }
    return {key: value for key, value in mapping.items() if value is not None}


def _print_result(result: Any) -> None:
    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = (args.log_level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    command = args.command
    try:
        if command == "analyze":
            text = " ".join(args.text) if args.text else sys.stdin.read()
            _print_result(get_analyzer().analyze(text, options_from_args(args)))
        elif command == "batch":
            score_texts(
                args.input,
                args.output_file,
                options=options_from_args(args),
                concurrency=args.concurrency,
                limit=args.limit,
            )
        elif command == "lexicon":
            _print_result(get_lexicon().describe())
        else:
            parser.error(f"Unknown command: {command}")
    except LexiconError as exc:
        parser.exit(2, f"prospection: error: {exc}\n")
    except FileNotFoundError as exc:
        parser.exit(2, f"prospection: error: {exc}\n")


__all__ = ["build_parser", "main", "options_from_args"]


if __name__ == "__main__":
    main()
