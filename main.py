"""CLI entrypoint for the interlocking crossword generator."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import List

from interlock.core.exceptions import WordSourceError
from interlock.engine.edition_store import EditionStore, PersistedCrossword, PersistedEdition
from interlock.engine.generator import CrosswordGenerator, GeneratorConfig
from interlock.io.word_source import (
    FileWordSource,
    GeminiWordSource,
    StaticWordSource,
    WordSource,
    parse_word_lines,
)
from interlock.utils.logger import configure_logging, get_logger, parse_level
from interlock.utils.pretty import format_solution, pretty_print_puzzle, print_grid_stats


LOGGER = get_logger("interlock.cli")

DEFAULT_TITLE = "Crossword"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an interlocking crossword from words and clues",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--words",
        nargs="+",
        metavar="WORD:CLUE",
        help="Explicit entries in WORD:Clue format",
    )
    source.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    source.add_argument(
        "--topic",
        type=str,
        help="Ask Gemini for words and clues about this topic (needs GEMINI_API_KEY)",
    )
    parser.add_argument("--title", type=str, help="Puzzle title (LLM-suggested when using --topic)")
    parser.add_argument(
        "--language",
        type=str,
        default="English",
        help="Language of LLM-generated words and clues",
    )
    parser.add_argument(
        "--word-count",
        type=int,
        default=8,
        help="Number of words to request from the LLM",
    )
    parser.add_argument("--max-size", type=int, default=15, help="Working grid side length")
    parser.add_argument(
        "--min-words",
        type=int,
        default=1,
        help="Reject the puzzle when fewer words could be placed",
    )
    parser.add_argument("--reveal", action="store_true", help="Print letters instead of numbers")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--edition-store",
        type=Path,
        default=Path("local_db/edition_store.json"),
        help="Path to the edition store JSON document",
    )
    parser.add_argument(
        "--save-edition",
        action="store_true",
        help="Record the puzzle as a new edition in the edition store",
    )
    parser.add_argument(
        "--show-previous",
        action="store_true",
        help="Print the solution of the last stored edition",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_source(args: argparse.Namespace) -> WordSource:
    if args.words:
        return StaticWordSource(parse_word_lines(args.words), title=args.title or DEFAULT_TITLE)
    if args.words_file:
        return FileWordSource(args.words_file, title=args.title or DEFAULT_TITLE)
    return GeminiWordSource(
        topic=args.topic,
        language=args.language,
        limit=args.word_count,
        title=args.title,
    )


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(parse_level(args.log_level))
    except ValueError as exc:
        parser.error(str(exc))

    try:
        config = GeneratorConfig(max_size=args.max_size, min_words=args.min_words)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        content = build_source(args).fetch()
    except WordSourceError as exc:
        LOGGER.error("Could not obtain words: %s", exc)
        return 1

    store = EditionStore(args.edition_store) if (args.save_edition or args.show_previous) else None
    previous = store.last_edition() if store else None

    result = CrosswordGenerator(config).build_puzzle(content.words, content.title)
    if result.puzzle is None:
        LOGGER.error(
            "No puzzle produced (%s of %s words placed)", result.placed, result.requested
        )
        return 1

    puzzle = result.puzzle
    pretty_print_puzzle(puzzle, reveal=args.reveal)
    print_grid_stats(puzzle.grid, result.requested)
    if args.show_previous:
        print()
        if previous is not None:
            print(format_solution(previous))
        else:
            print("No previous edition stored")

    if store is not None and args.save_edition:
        edition = PersistedEdition(
            edition_number=store.next_edition_number(),
            edition_date=date.today().isoformat(),
            crossword=PersistedCrossword.from_puzzle(puzzle),
        )
        store.save_edition(edition)

    if args.output:
        payload = puzzle.to_jsonable()
        payload["validation"] = result.validation.messages if result.validation else []
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Puzzle written to %s", args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
