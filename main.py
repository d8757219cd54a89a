"""CLI entrypoint for the arrow-word crossword generator."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

from arrowword.core.exceptions import CrosswordError
from arrowword.data.frequency import LANGUAGE_TABLES
from arrowword.data.wordlist import WordList
from arrowword.engine.crossword_store import DEFAULT_STORE_DIR, CrosswordStore, build_document
from arrowword.engine.generator import CrosswordGenerator, GeneratorConfig
from arrowword.utils.logger import configure_logging
from arrowword.utils.pretty import print_crossword_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate arrow-word crosswords from a keyword/clue list",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        required=True,
        metavar="FILE",
        help="Word list with one 'KEYWORD clue' entry per line (# comments ignored)",
    )
    parser.add_argument("--width", type=int, help="Grid width in cells (requires --height)")
    parser.add_argument("--height", type=int, help="Grid height in cells (requires --width)")
    parser.add_argument(
        "--fill-up",
        metavar="DOC_ID",
        help="Add words to a stored crossword instead of generating a new one",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=20,
        help="Number of words offered when filling up (default 20)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--language",
        type=str,
        choices=sorted(LANGUAGE_TABLES),
        default="german",
        help="Letter-frequency table used to rank keywords",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=DEFAULT_STORE_DIR,
        help="Directory of stored crosswords",
    )
    parser.add_argument("--no-store", action="store_true", help="Do not persist the result")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid, clues and stats instead of JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if (args.width is None) != (args.height is None):
        parser.error("--width and --height must be given together")
    if args.fill_up and args.width is not None:
        parser.error("--fill-up continues a stored grid and cannot be combined with --width/--height")
    if args.count < 0:
        parser.error("--count must not be negative")

    config = GeneratorConfig(seed=args.seed, language=args.language)

    try:
        word_list = WordList.load(args.words_file)
        dictionary = word_list.to_dictionary(random.Random(args.seed))
        generator = CrosswordGenerator(dictionary, config)
        if args.fill_up:
            grid, placed = CrosswordStore(args.store_dir).load_grid(args.fill_up)
            result = generator.fill_up(dictionary, args.count, grid=grid, placed=placed)
        elif args.width is not None:
            result = generator.generate_random(args.width, args.height)
        else:
            result = generator.generate_from_dictionary()

        doc_id = None if args.no_store else CrosswordStore(args.store_dir).save(result, config)
    except CrosswordError as exc:
        parser.exit(1, f"error: {exc}\n")

    payload = build_document(result, config)
    payload["id"] = doc_id
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")

    if args.pretty:
        print_crossword_stats(result)
        if doc_id:
            print(f"Stored as: {doc_id}")
    elif not args.output:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
