import argparse
import logging
import sys

from autocorrect.common.config import SettingsError, load_settings
from autocorrect.spellcheck.corrector import Corrector
from autocorrect.spellcheck.dictionary import DictionaryError, load_dictionary
from autocorrect.spellcheck.engine import normalize_word


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autocorrect",
        description="Suggest the most probable corrections for a word.",
    )
    parser.add_argument("word", help="Word to correct")
    parser.add_argument(
        "--dictionary",
        help="Frequency list with '<rank> <word> <frequency>' lines (default: $AUTOCORRECT_DICTIONARY_PATH)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of suggestions (default: $AUTOCORRECT_SUGGESTION_LIMIT)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search stages")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except SettingsError as exc:
        parser.error(str(exc))

    limit = settings.suggestion_limit if args.limit is None else args.limit
    if limit < 1:
        parser.error(f"--limit must be positive, got {limit}")

    level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(level=level)

    try:
        dictionary = load_dictionary(args.dictionary or settings.dictionary_path)
    except DictionaryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    word = normalize_word(args.word)
    corrector = Corrector(dictionary, limit=limit)

    print(f"Corrections for {word}")
    for suggestion in corrector.corrections(word):
        print(suggestion)
    return 0


if __name__ == "__main__":
    sys.exit(main())
