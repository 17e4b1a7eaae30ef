"""
Pydantic models for the values that cross the engine boundary.

Tiles and rule sets come in from the host surface; suggestions go back out to
be rendered. All models are frozen and created fresh per evaluation call.
"""

from pydantic import BaseModel, ConfigDict

from advisor.logic.enums import Suit, SuggestionKind


class Tile(BaseModel):
    """A physical tile as the host surface knows it."""

    model_config = ConfigDict(frozen=True)

    suit: Suit
    value: int  # 1-9 for numeral suits, 1-7 for honors
    symbol: str | None = None


class HandCounts(BaseModel):
    """Count vector of a hand with wildcards and the must-declare kind pulled out."""

    model_config = ConfigDict(frozen=True)

    counts: tuple[int, ...]
    wildcards: int = 0
    has_declare_tile: bool = False

    @property
    def size(self) -> int:
        return sum(self.counts) + self.wildcards


class DiscardEvaluation(BaseModel):
    """
    Outcome of discarding one tile kind and trying every possible draw.

    best_shanten is the lowest shanten any improving draw reaches, and
    improving_draws_34 holds every draw kind that reaches it. With no
    improving draw at all, best_shanten stays at the search ceiling.
    """

    model_config = ConfigDict(frozen=True)

    discard_34: int
    best_shanten: int
    improving_draws_34: tuple[int, ...] = ()


class Suggestion(BaseModel):
    """One ranked recommendation for the player."""

    model_config = ConfigDict(frozen=True)

    kind: SuggestionKind
    discard: str
    score: int
    waiting_tiles: list[str]
    comment: str


class AnalysisResult(BaseModel):
    """Initial shanten of the evaluated hand and its ranked suggestions."""

    model_config = ConfigDict(frozen=True)

    shanten: int
    suggestions: list[Suggestion]
