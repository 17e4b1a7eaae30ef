"""
Discard analysis for a 14-tile hand.

Every legal discard is scored by the lowest shanten a following draw can
reach and by how many draw kinds reach it (ukeire). The must-declare tile
and an already complete hand get fixed-score suggestions of their own.
"""

from collections.abc import Sequence

import structlog

from advisor.logic.enums import SuggestionKind
from advisor.logic.exceptions import InvalidHandSizeError
from advisor.logic.settings import RuleSet, validate_rule_set
from advisor.logic.shanten import AGARI_STATE, MAX_SHANTEN, TENPAI_STATE, calculate_shanten
from advisor.logic.tiles import TILE_KINDS, count_hand, tile_name, tile_to_34
from advisor.logic.types import AnalysisResult, DiscardEvaluation, Suggestion, Tile

logger = structlog.get_logger()

HAND_SIZE = 14

DECLARE_SCORE = 20000
WIN_SCORE = 9999

# (10 - shanten) * 1000 keeps a lower shanten ahead of any ukeire count
_SHANTEN_CEILING = 10
_SHANTEN_WEIGHT = 1000


def validate_hand(hand: Sequence[Tile]) -> list[int]:
    """
    Check the hand can be evaluated and convert it to 34-format indices.

    Raises InvalidHandSizeError unless the hand holds exactly 14 tiles, and
    InvalidTileError for any tile value outside its suit's range.
    """
    if len(hand) != HAND_SIZE:
        raise InvalidHandSizeError(size=len(hand), expected=HAND_SIZE)
    return [tile_to_34(tile) for tile in hand]


def evaluate_discard(
    hand_34: Sequence[int],
    discard_34: int,
    wildcard_34: int | None,
    rules: RuleSet,
    initial_shanten: int,
) -> DiscardEvaluation:
    """
    Discard one tile of a kind and try every possible draw.

    Only draws that bring the hand strictly below initial_shanten count.
    The must-declare kind is never considered as a draw.
    """
    remainder = list(hand_34)
    remainder.remove(discard_34)

    best_shanten = MAX_SHANTEN
    improving: list[int] = []
    for draw_34 in range(TILE_KINDS):
        if draw_34 == rules.must_declare_34:
            continue
        drawn = count_hand([*remainder, draw_34], wildcard_34, rules.must_declare_34)
        shanten = calculate_shanten(drawn.counts, drawn.wildcards, rules)
        if shanten >= initial_shanten:
            continue
        if shanten < best_shanten:
            best_shanten = shanten
            improving = [draw_34]
        elif shanten == best_shanten:
            improving.append(draw_34)

    return DiscardEvaluation(
        discard_34=discard_34,
        best_shanten=best_shanten,
        improving_draws_34=tuple(improving),
    )


def score_discard(evaluation: DiscardEvaluation) -> int:
    """Rank score: reached shanten first, breadth of acceptance as the tie-break."""
    return (_SHANTEN_CEILING - evaluation.best_shanten) * _SHANTEN_WEIGHT + len(evaluation.improving_draws_34)


def _describe(evaluation: DiscardEvaluation) -> str:
    accepted = len(evaluation.improving_draws_34)
    if accepted == 0:
        return "no improving draws"
    if evaluation.best_shanten == AGARI_STATE:
        return f"waiting to win on {accepted} kinds"
    if evaluation.best_shanten == TENPAI_STATE:
        return f"{accepted} kinds reach tenpai"
    return f"{accepted} kinds reach {evaluation.best_shanten}-shanten"


def _discard_suggestion(evaluation: DiscardEvaluation) -> Suggestion:
    return Suggestion(
        kind=SuggestionKind.DISCARD,
        discard=tile_name(evaluation.discard_34),
        score=score_discard(evaluation),
        waiting_tiles=[tile_name(draw) for draw in evaluation.improving_draws_34],
        comment=_describe(evaluation),
    )


def _declare_suggestion(declare_34: int) -> Suggestion:
    return Suggestion(
        kind=SuggestionKind.DECLARE,
        discard=f"declare {tile_name(declare_34)}",
        score=DECLARE_SCORE,
        waiting_tiles=["kong replacement draw"],
        comment=f"declare {tile_name(declare_34)} as a kong (doubles the payout)",
    )


def _win_suggestion() -> Suggestion:
    return Suggestion(
        kind=SuggestionKind.WIN,
        discard="win",
        score=WIN_SCORE,
        waiting_tiles=["self-draw"],
        comment="hand is already complete",
    )


def _rank(suggestions: list[Suggestion], limit: int) -> list[Suggestion]:
    # stable: equal scores keep their order of first appearance in the hand
    return sorted(suggestions, key=lambda s: s.score, reverse=True)[:limit]


def analyze_hand(
    hand: Sequence[Tile],
    wildcard: Tile | None = None,
    rules: RuleSet | None = None,
) -> AnalysisResult:
    """
    Recommend discards for a 14-tile hand.

    The declare suggestion is added whenever the must-declare tile is held and
    does not stop the discard analysis. A complete hand returns the win
    suggestion without analysing discards.
    """
    if rules is None:
        rules = RuleSet()
    validate_rule_set(rules)
    hand_34 = validate_hand(hand)
    wildcard_34 = tile_to_34(wildcard) if wildcard is not None else None

    hand_counts = count_hand(hand_34, wildcard_34, rules.must_declare_34)
    suggestions: list[Suggestion] = []

    if hand_counts.has_declare_tile and rules.must_declare_34 is not None:
        suggestions.append(_declare_suggestion(rules.must_declare_34))

    initial_shanten = calculate_shanten(hand_counts.counts, hand_counts.wildcards, rules)

    if initial_shanten <= AGARI_STATE:
        logger.info("hand already complete", wildcards=hand_counts.wildcards)
        suggestions.append(_win_suggestion())
        return AnalysisResult(shanten=initial_shanten, suggestions=_rank(suggestions, rules.max_suggestions))

    candidates = [tile_34 for tile_34 in dict.fromkeys(hand_34) if tile_34 != rules.must_declare_34]
    for discard_34 in candidates:
        evaluation = evaluate_discard(hand_34, discard_34, wildcard_34, rules, initial_shanten)
        suggestions.append(_discard_suggestion(evaluation))

    ranked = _rank(suggestions, rules.max_suggestions)
    logger.debug(
        "hand analyzed",
        shanten=initial_shanten,
        wildcards=hand_counts.wildcards,
        candidates=len(candidates),
        suggestions=len(ranked),
    )
    return AnalysisResult(shanten=initial_shanten, suggestions=ranked)
