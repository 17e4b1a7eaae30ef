"""Command line front end: analyze one hand and print the ranked suggestions.

Usage: laizi-advisor --hand 111234m567p111s55m [--wildcard 6p] [--json]
"""

import argparse
import sys
from collections.abc import Sequence

import structlog
from pydantic import ValidationError

from advisor.cli.settings import AdvisorSettings
from advisor.logic.analysis import analyze_hand
from advisor.logic.exceptions import AdvisorError
from advisor.logic.shanten import AGARI_STATE
from advisor.logic.tiles import parse_tile, parse_tiles, to_notation
from advisor.logic.types import AnalysisResult, Tile
from shared.logging import setup_logging

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="laizi-advisor",
        description="Recommend discards for a 14-tile hand with a wildcard and 2-5-8 eyes.",
    )
    parser.add_argument("--hand", required=True, help="14 tiles in compact notation, e.g. 111234m567p111s55m")
    parser.add_argument("--wildcard", default=None, help="wildcard tile kind, e.g. 6p or chun")
    parser.add_argument("--json", action="store_true", help="print the analysis as JSON")
    return parser


def _describe_shanten(shanten: int) -> str:
    if shanten == AGARI_STATE:
        return "complete"
    if shanten == 0:
        return "tenpai"
    return f"{shanten}-shanten"


def render_text(hand: Sequence[Tile], wildcard: Tile | None, result: AnalysisResult) -> str:
    """Human-readable summary: the sorted hand, its shanten and one line per suggestion."""
    lines = [f"Hand: {to_notation(hand)}"]
    if wildcard is not None:
        lines.append(f"Wildcard: {to_notation([wildcard])}")
    lines.append(f"Shanten: {_describe_shanten(result.shanten)}")
    lines.append("Suggestions:")
    for rank, suggestion in enumerate(result.suggestions, start=1):
        waits = " ".join(suggestion.waiting_tiles) or "-"
        lines.append(f"  {rank}. {suggestion.discard:<14} score={suggestion.score:<6} {suggestion.comment}  [{waits}]")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = AdvisorSettings()
    except ValidationError as e:
        print(f"error: invalid ADVISOR_* settings: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    setup_logging(log_dir=settings.log_dir)

    try:
        rules = settings.to_rule_set()
        logger.debug("rules loaded", rules=rules.describe())
        hand = parse_tiles(args.hand)
        wildcard = parse_tile(args.wildcard) if args.wildcard else None
        result = analyze_hand(hand, wildcard, rules)
    except AdvisorError as e:
        logger.warning("rejected input", hand=args.hand, wildcard=args.wildcard, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(render_text(hand, wildcard, result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
