from advisor.logic.tiles import hand_to_34_array, parse_tiles
from advisor.logic.types import Tile

# ============================================================================
# Hand Builder Helpers
# ============================================================================


def make_hand(notation: str) -> list[Tile]:
    """Build a hand from compact notation, e.g. '111234m567p111s55m'."""
    return parse_tiles(notation)


def make_counts(notation: str = "") -> list[int]:
    """Build a 34-array of per-kind counts from compact notation."""
    if not notation:
        return [0] * 34
    return hand_to_34_array(parse_tiles(notation))
