"""CLI entrypoint for the word ladder solver."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from wordladder.core.constants import DEFAULT_MAX_STEPS, NeighborStrategy, SearchMode
from wordladder.core.exceptions import LexiconLoadError
from wordladder.data.lexicon import LexiconConfig
from wordladder.engine.game import GameConfig, WordLadderGame
from wordladder.engine.search import SearchConfig
from wordladder.utils.logger import configure_logging
from wordladder.utils.pretty import format_ladder, print_ladder_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find word ladders between words of equal length",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--dictionary",
        type=Path,
        help="Word list file; the first token of each line is a word",
    )
    source.add_argument(
        "--dictionary-url",
        type=str,
        help="URL of a plain-text word list (defaults to $WORDLADDER_WORDLIST_URL)",
    )
    parser.add_argument("--start", type=str, help="First word of the ladder")
    parser.add_argument("--end", type=str, help="Last word of the ladder")
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in SearchMode],
        default=SearchMode.BFS.value,
        help="dfs finds some ladder, bfs finds a shortest one",
    )
    parser.add_argument(
        "--exhaustive",
        action="store_true",
        help="Let DFS try every unvisited neighbor instead of only those closer to the end word",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help="Step budget for DFS",
    )
    parser.add_argument(
        "--neighbor-strategy",
        type=str,
        choices=[s.value for s in NeighborStrategy],
        default=NeighborStrategy.INDEX.value,
        help="Neighbor lookup via wildcard index or full scan",
    )
    parser.add_argument("--neighbors", type=str, metavar="WORD", help="List neighbors of WORD")
    parser.add_argument(
        "--check",
        nargs="+",
        metavar="WORD",
        help="Validate the given words as a ladder",
    )
    parser.add_argument("--min-length", type=int, default=1, help="Skip shorter dictionary words")
    parser.add_argument("--max-length", type=int, default=None, help="Skip longer dictionary words")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if not args.neighbors and not args.check and not (args.start and args.end):
        parser.error("provide --start and --end, --neighbors WORD or --check WORD...")

    lexicon_config = LexiconConfig(
        path=args.dictionary,
        url=args.dictionary_url,
        min_length=args.min_length,
        max_length=args.max_length,
    )
    game_config = GameConfig(
        neighbor_strategy=NeighborStrategy(args.neighbor_strategy),
        search=SearchConfig(max_steps=args.max_steps, exhaustive_dfs=args.exhaustive),
    )
    try:
        game = WordLadderGame.from_config(lexicon_config, game_config)
    except LexiconLoadError as exc:
        parser.exit(1, f"error: {exc}\n")

    payload: Dict[str, Any] = {"word_count": game.word_count()}
    lines = []

    if args.neighbors:
        neighbors = game.get_neighbors(args.neighbors)
        payload["neighbors"] = {"word": args.neighbors.lower(), "neighbors": neighbors}
        lines.append(f"Neighbors of {args.neighbors.lower()}: {' '.join(neighbors) or '(none)'}")

    if args.check:
        validation = game.validate(args.check)
        payload["check"] = {
            "sequence": [w.lower() for w in args.check],
            "ok": validation.ok,
            "messages": validation.messages,
        }
        if validation.ok:
            lines.append("Valid ladder:")
            lines.append(format_ladder([w.lower() for w in args.check]))
        else:
            lines.append("Not a ladder: " + "; ".join(validation.messages))

    result = None
    if args.start and args.end:
        result = game.solve(args.start, args.end, SearchMode(args.mode))
        payload["ladder"] = result.to_jsonable()

    if args.output:
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        return

    for line in lines:
        print(line)
    if result is not None:
        if lines:
            print()
        print_ladder_stats(result, game.lexicon)


if __name__ == "__main__":  # pragma: no cover
    main()
