"""
Tile representation utilities.

Maps tiles onto the canonical 34-slot index space used by the search engine
and builds the count vectors it consumes.
"""

import re
from collections.abc import Iterable, Sequence

from advisor.logic.enums import Suit
from advisor.logic.exceptions import InvalidTileError
from advisor.logic.types import HandCounts, Tile

TILE_KINDS = 34

# tile ranges in 34-format (each unique tile type)
MAN_34_START = 0
MAN_34_END = 8
PIN_34_START = 9
PIN_34_END = 17
SOU_34_START = 18
SOU_34_END = 26
HONOR_34_START = 27
HONOR_34_END = 33

NUMERAL_VALUES = 9
HONOR_VALUES = 7

# honor tile indices in 34-format
EAST_34 = 27
SOUTH_34 = 28
WEST_34 = 29
NORTH_34 = 30
HAKU_34 = 31  # white dragon
HATSU_34 = 32  # green dragon
CHUN_34 = 33  # red dragon

NUMERAL_SUITS = (Suit.MAN, Suit.PIN, Suit.SOU)

_SUIT_START_34 = {
    Suit.MAN: MAN_34_START,
    Suit.PIN: PIN_34_START,
    Suit.SOU: SOU_34_START,
    Suit.ZIHAI: HONOR_34_START,
}

_SUIT_LETTERS = {
    Suit.MAN: "m",
    Suit.PIN: "p",
    Suit.SOU: "s",
    Suit.ZIHAI: "z",
}
_LETTER_SUITS = {letter: suit for suit, letter in _SUIT_LETTERS.items()}

HONOR_NAMES = ("east", "south", "west", "north", "haku", "hatsu", "chun")
HONOR_SYMBOLS = ("东", "南", "西", "北", "白", "发", "中")
MAN_SYMBOLS = ("一", "二", "三", "四", "五", "六", "七", "八", "九")

TILE_NAMES_34: tuple[str, ...] = (
    *(f"{v}m" for v in range(1, 10)),
    *(f"{v}p" for v in range(1, 10)),
    *(f"{v}s" for v in range(1, 10)),
    *HONOR_NAMES,
)

_GROUP_PATTERN = re.compile(r"([0-9]+)([mpsz])")


def _max_value(suit: Suit) -> int:
    return HONOR_VALUES if suit == Suit.ZIHAI else NUMERAL_VALUES


def tile_to_34(tile: Tile) -> int:
    """
    Convert a tile to its 34-format index.

    Numeral suits occupy 0-26 in man, pin, sou order; honors occupy 27-33
    in east, south, west, north, haku, hatsu, chun order.
    """
    max_value = _max_value(tile.suit)
    if not (1 <= tile.value <= max_value):
        raise InvalidTileError(f"{tile.suit.value} value must be in [1, {max_value}], got {tile.value}")
    return _SUIT_START_34[tile.suit] + tile.value - 1


def tile_from_34(tile_34: int) -> Tile:
    """Build the canonical tile, with its display symbol, for a 34-format index."""
    if not (0 <= tile_34 < TILE_KINDS):
        raise InvalidTileError(f"tile index must be in [0, {TILE_KINDS - 1}], got {tile_34}")
    if is_honor(tile_34):
        value = tile_34 - HONOR_34_START + 1
        return Tile(suit=Suit.ZIHAI, value=value, symbol=HONOR_SYMBOLS[value - 1])
    suit = NUMERAL_SUITS[tile_34 // NUMERAL_VALUES]
    value = tile_34 % NUMERAL_VALUES + 1
    symbol = MAN_SYMBOLS[value - 1] if suit == Suit.MAN else None
    return Tile(suit=suit, value=value, symbol=symbol)


def tile_name(tile_34: int) -> str:
    """Display label for a 34-format index, e.g. '3m' or 'chun'."""
    return TILE_NAMES_34[tile_34]


def is_honor(tile_34: int) -> bool:
    """
    Check if tile is an honor (wind or dragon).
    """
    return HONOR_34_START <= tile_34 <= HONOR_34_END


def parse_tile(label: str) -> Tile:
    """Parse a single tile label such as '5p', '7z' or 'chun'."""
    name = label.strip().lower()
    if name in HONOR_NAMES:
        return tile_from_34(HONOR_34_START + HONOR_NAMES.index(name))
    tiles = parse_tiles(label)
    if len(tiles) != 1:
        raise InvalidTileError(f"expected a single tile, got {label!r}")
    return tiles[0]


def parse_tiles(notation: str) -> list[Tile]:
    """
    Parse compact hand notation into tiles.

    Digits are followed by their suit letter: '111234m567p111s55m'.
    Honors use 'z' with values 1-7 (east, south, west, north, haku, hatsu, chun).
    """
    compact = "".join(notation.split())
    if not compact or _GROUP_PATTERN.sub("", compact):
        raise InvalidTileError(f"malformed tile notation: {notation!r}")

    tiles = []
    for digits, letter in _GROUP_PATTERN.findall(compact):
        suit = _LETTER_SUITS[letter]
        for digit in digits:
            tile = Tile(suit=suit, value=int(digit))
            tiles.append(tile_from_34(tile_to_34(tile)))
    return tiles


def to_notation(tiles: Iterable[Tile]) -> str:
    """Render tiles back into compact notation, grouped by suit in display order."""
    digits: dict[Suit, list[str]] = {suit: [] for suit in _SUIT_LETTERS}
    for tile in sort_tiles(tiles):
        digits[tile.suit].append(str(tile.value))
    return "".join("".join(values) + _SUIT_LETTERS[suit] for suit, values in digits.items() if values)


def sort_tiles(tiles: Iterable[Tile]) -> list[Tile]:
    """Sort tiles man, pin, sou, honors, then by value."""
    return sorted(tiles, key=tile_to_34)


def count_hand(
    tiles_34: Sequence[int],
    wildcard_34: int | None = None,
    must_declare_34: int | None = None,
) -> HandCounts:
    """
    Build the count vector for a hand given as 34-format indices.

    Wildcard tiles are counted separately. Tiles of the must-declare kind are
    left out of the counts entirely; only their presence is recorded. A tile
    that is both kinds counts as a wildcard.
    """
    counts = [0] * TILE_KINDS
    wildcards = 0
    for tile_34 in tiles_34:
        if tile_34 == wildcard_34:
            wildcards += 1
        elif tile_34 != must_declare_34:
            counts[tile_34] += 1
    has_declare_tile = must_declare_34 is not None and must_declare_34 in tiles_34
    return HandCounts(counts=tuple(counts), wildcards=wildcards, has_declare_tile=has_declare_tile)


def hand_to_34_array(tiles: Iterable[Tile]) -> list[int]:
    """Convert tiles to a 34-array of per-kind counts."""
    tiles_34 = [0] * TILE_KINDS
    for tile in tiles:
        tiles_34[tile_to_34(tile)] += 1
    return tiles_34
