"""CLI entrypoint: encode a phrase as coordinates into a paginated corpus."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from gridcypher.core.constants import ConstructionMode, DiagonalMode, Direction, all_directions
from gridcypher.core.exceptions import CypherError
from gridcypher.core.models import DisplayOffsets
from gridcypher.data.corpus import CorpusConfig, load_corpus
from gridcypher.engine.service import CypherService, ServiceConfig
from gridcypher.engine.validator import CorpusValidator
from gridcypher.utils.logger import configure_logging, get_logger
from gridcypher.utils.pretty import covered_cells, format_page, parts_to_jsonable, print_cypher

LOGGER = get_logger("gridcypher.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridcypher",
        description="Encode a phrase as runs of letters read from a paginated corpus",
    )
    parser.add_argument(
        "-f", "--file", required=True, help="Corpus file path or http(s) URL"
    )
    parser.add_argument("-i", "--input", default="", help="Phrase to encode")
    parser.add_argument(
        "--ltr",
        action="store_true",
        help="Use greedy left-to-right reconstruction instead of longest-run",
    )
    parser.add_argument(
        "-r", "--right",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Read rows left to right (default on)",
    )
    parser.add_argument("-l", "--left", action="store_true", help="Read rows right to left")
    parser.add_argument("-u", "--up", action="store_true", help="Read columns bottom to top")
    parser.add_argument("-d", "--down", action="store_true", help="Read columns top to bottom")
    parser.add_argument(
        "--diagonal", action="store_true", help="Read all four diagonals under one flag"
    )
    parser.add_argument(
        "--all", dest="all_directions", action="store_true", help="Enable every direction"
    )
    parser.add_argument(
        "--separate-diagonals",
        action="store_true",
        help="With --all, index the four diagonals as distinct directions",
    )
    parser.add_argument(
        "--directions",
        type=str,
        help="Explicit direction set, e.g. 'right|left|right-down' (overrides the flags)",
    )
    parser.add_argument(
        "--random", action="store_true", help="Pick uniformly among tied candidates"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument("--page-offset", "--po", type=int, default=1, help="Added to page numbers")
    parser.add_argument("--row-offset", "--ro", type=int, default=1, help="Added to row numbers")
    parser.add_argument("--col-offset", "--co", type=int, default=1, help="Added to column numbers")
    parser.add_argument("--json", action="store_true", help="Print JSON records instead of text")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--show-pages", action="store_true", help="Print every page used, marking run starts"
    )
    parser.add_argument(
        "--check", action="store_true", help="Only validate the corpus and report invalid cells"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_directions(args: argparse.Namespace) -> Direction:
    if args.directions:
        return Direction.parse(args.directions)
    if args.all_directions:
        mode = DiagonalMode.SEPARATE if args.separate_diagonals else DiagonalMode.COMBINED
        return all_directions(mode)

    directions = Direction(0)
    if args.right:
        directions |= Direction.RIGHT
    if args.left:
        directions |= Direction.LEFT
    if args.up:
        directions |= Direction.UP
    if args.down:
        directions |= Direction.DOWN
    if args.diagonal:
        directions |= Direction.DIAGONAL
    return directions


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.seed is not None and not args.random:
        parser.error("--seed requires --random")
    try:
        directions = resolve_directions(args)
    except ValueError as exc:
        parser.error(str(exc))
    if not directions:
        parser.error("no reading direction enabled")

    try:
        grid = load_corpus(CorpusConfig(source=args.file))
    except CypherError as exc:
        LOGGER.error("Failed to load source %s: %s", args.file, exc)
        return 1

    if args.check:
        result = CorpusValidator(max_messages=50).validate(grid)
        if result.ok:
            print(f"Corpus OK: {grid.page_count} pages, {grid.cell_count} cells")
            return 0
        for message in result.messages:
            print(message)
        return 1

    offsets = DisplayOffsets(page=args.page_offset, row=args.row_offset, col=args.col_offset)
    config = ServiceConfig(
        directions=directions,
        mode=ConstructionMode.LTR if args.ltr else ConstructionMode.LONGEST,
        offsets=offsets,
        random_selection=args.random,
        seed=args.seed,
    )
    try:
        service = CypherService(grid, config)
        parts = service.generate(args.input)
    except CypherError as exc:
        LOGGER.error("Failed to generate cypher: %s", exc)
        return 1

    if args.json or args.output:
        payload: Dict[str, Any] = {
            "phrase": args.input,
            "directions": str(directions),
            "mode": config.mode.value,
            "parts": parts_to_jsonable(parts, offsets),
        }
        output_text = json.dumps(payload, indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
        else:
            print(output_text)
    else:
        print_cypher(parts, offsets)

    if args.show_pages:
        for page in sorted({part.page for part in parts}):
            print(format_page(grid, page, offsets, covered_cells(parts, page)))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
