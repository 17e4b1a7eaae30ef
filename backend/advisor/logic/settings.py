"""Rule configuration for the discard advisor - the regional variant knobs the search reads."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from advisor.logic.exceptions import UnsupportedRulesError
from advisor.logic.tiles import CHUN_34, NUMERAL_SUITS, NUMERAL_VALUES, TILE_KINDS, tile_name

# Hubei rule: the eye must be a 2, 5 or 8 of a numeral suit
HUBEI_EYE_VALUES = (2, 5, 8)

DEFAULT_MAX_SUGGESTIONS = 5


def numeral_eye_indices(values: Iterable[int] = HUBEI_EYE_VALUES) -> frozenset[int]:
    """Eye candidate indices for the given numeral values, across all three numeral suits."""
    values = tuple(values)
    return frozenset(
        suit_index * NUMERAL_VALUES + value - 1 for suit_index in range(len(NUMERAL_SUITS)) for value in values
    )


class RuleSet(BaseModel):
    """
    Regional rules injected into the search.

    All fields default to the Hubei variant: 2/5/8 eyes and a red dragon
    that must be declared rather than discarded.
    """

    model_config = ConfigDict(frozen=True)

    eye_tiles_34: frozenset[int] = numeral_eye_indices()
    must_declare_34: int | None = CHUN_34
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS

    def describe(self) -> str:
        eyes = ",".join(tile_name(i) for i in sorted(self.eye_tiles_34))
        declare = tile_name(self.must_declare_34) if self.must_declare_34 is not None else "none"
        return f"eyes={eyes} declare={declare} top={self.max_suggestions}"


_NUMERAL_INDICES = frozenset(range(len(NUMERAL_SUITS) * NUMERAL_VALUES))


def validate_rule_set(rules: RuleSet) -> None:
    """Validate that every rule value can be evaluated by the engine.

    Collects every problem and raises UnsupportedRulesError with all of them.
    """
    errors: list[str] = []

    if not rules.eye_tiles_34:
        errors.append("eye_tiles_34 must not be empty")

    out_of_range = sorted(i for i in rules.eye_tiles_34 if not (0 <= i < TILE_KINDS))
    if out_of_range:
        errors.append(f"eye_tiles_34 contains indices outside [0, {TILE_KINDS - 1}]: {out_of_range}")

    if _NUMERAL_INDICES <= rules.eye_tiles_34:
        errors.append("eye_tiles_34 must not cover every numeral tile (the eye set is a restriction)")

    if rules.must_declare_34 is not None and not (0 <= rules.must_declare_34 < TILE_KINDS):
        errors.append(f"must_declare_34={rules.must_declare_34} is outside [0, {TILE_KINDS - 1}]")

    if rules.max_suggestions < 1:
        errors.append(f"max_suggestions={rules.max_suggestions} must be at least 1")

    if errors:
        raise UnsupportedRulesError("; ".join(errors))
