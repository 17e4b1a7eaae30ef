"""
Exhaustive groups-and-partials search over a 34-kind count vector.

For one sub-problem the shanten is 8 - 2*G - P, minus one more when an eye
is already committed, where (G, P) maximizes 2*G + P over every way of
splitting the tiles into groups (triplets, runs), partials (pairs, two-tile
run fragments) and unused singles, subject to G <= 4 and G + P <= 4.
Wildcards may stand in for any tile of a group or of a pair.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from advisor.logic.tiles import HONOR_34_START, NUMERAL_VALUES, TILE_KINDS

BASE_SHANTEN = 8
MAX_GROUPS = 4
MAX_SCORE = 2 * MAX_GROUPS


@contextmanager
def tiles_removed(counts: list[int], *indices: int) -> Iterator[None]:
    """Take one tile of each listed kind out of counts for the duration of the block.

    Repeat an index to take several copies. Counts are restored on every exit path.
    """
    for index in indices:
        counts[index] -= 1
    try:
        yield
    finally:
        for index in indices:
            counts[index] += 1


def _fits_in_suit(index: int, span: int) -> bool:
    # index..index+span all inside the same numeral suit
    return index < HONOR_34_START and index % NUMERAL_VALUES + span < NUMERAL_VALUES


def _final_score(groups: int, partials: int, wildcards: int) -> int:
    """Fold unused wildcards into the tally and apply the hand-size limits."""
    groups += wildcards // 3
    if wildcards % 3 == 2:
        partials += 1
    groups = min(groups, MAX_GROUPS)
    partials = min(partials, MAX_GROUPS - groups)
    return 2 * groups + partials


class _MeldSearch:
    """Backtracking search state for a single search_melds call."""

    def __init__(self, counts: Sequence[int]) -> None:
        self.counts = list(counts)
        self.best_score = 0
        self._visited: set[tuple[int, ...]] = set()

    def run(self, wildcards: int) -> int:
        self._search(0, wildcards, 0, 0)
        return self.best_score

    def _search(self, index: int, wildcards: int, groups: int, partials: int) -> None:
        if groups > MAX_GROUPS or self.best_score == MAX_SCORE:
            return

        counts = self.counts
        while index < TILE_KINDS and counts[index] == 0:
            index += 1

        if index == TILE_KINDS:
            self.best_score = max(self.best_score, _final_score(groups, partials, wildcards))
            return

        # kinds behind the cursor are never touched again, so this fully describes the subtree
        state = (index, wildcards, groups, partials, *counts[index:])
        if state in self._visited:
            return
        self._visited.add(state)

        self._try_triplets(index, wildcards, groups, partials)
        if index < HONOR_34_START:
            self._try_runs(index, wildcards, groups, partials)
        self._try_pairs(index, wildcards, groups, partials)
        self._try_run_fragments(index, wildcards, groups, partials)

        # leave this kind unused
        self._search(index + 1, wildcards, groups, partials)

    def _try_triplets(self, index: int, wildcards: int, groups: int, partials: int) -> None:
        counts = self.counts
        if counts[index] >= 3:
            with tiles_removed(counts, index, index, index):
                self._search(index, wildcards, groups + 1, partials)
        elif counts[index] >= 2 and wildcards >= 1:
            with tiles_removed(counts, index, index):
                self._search(index, wildcards - 1, groups + 1, partials)
        elif wildcards >= 2:
            with tiles_removed(counts, index):
                self._search(index, wildcards - 2, groups + 1, partials)

    def _try_runs(self, index: int, wildcards: int, groups: int, partials: int) -> None:
        counts = self.counts
        has_next = _fits_in_suit(index, 1) and counts[index + 1] > 0
        has_skip = _fits_in_suit(index, 2) and counts[index + 2] > 0

        if has_next and has_skip:
            with tiles_removed(counts, index, index + 1, index + 2):
                self._search(index, wildcards, groups + 1, partials)

        if wildcards >= 1:
            # wildcard as the middle tile
            if has_skip:
                with tiles_removed(counts, index, index + 2):
                    self._search(index, wildcards - 1, groups + 1, partials)
            # wildcard as the end tile, or as the start when the pair sits at the top of the suit
            if has_next:
                with tiles_removed(counts, index, index + 1):
                    self._search(index, wildcards - 1, groups + 1, partials)

        if wildcards >= 2 and not has_next and not has_skip and _fits_in_suit(index, 2):
            with tiles_removed(counts, index):
                self._search(index, wildcards - 2, groups + 1, partials)

    def _try_pairs(self, index: int, wildcards: int, groups: int, partials: int) -> None:
        counts = self.counts
        if counts[index] >= 2:
            with tiles_removed(counts, index, index):
                self._search(index, wildcards, groups, partials + 1)
        elif wildcards >= 1:
            with tiles_removed(counts, index):
                self._search(index, wildcards - 1, groups, partials + 1)

    def _try_run_fragments(self, index: int, wildcards: int, groups: int, partials: int) -> None:
        counts = self.counts
        if _fits_in_suit(index, 1) and counts[index + 1] > 0:
            with tiles_removed(counts, index, index + 1):
                self._search(index, wildcards, groups, partials + 1)
        if _fits_in_suit(index, 2) and counts[index + 2] > 0:
            with tiles_removed(counts, index, index + 2):
                self._search(index, wildcards, groups, partials + 1)


def search_melds(counts: Sequence[int], wildcards: int, *, committed_eye: bool) -> int:
    """
    Calculate the shanten of a count vector that already has (or lacks) its eye.

    The caller's counts are never modified.
    """
    best_score = _MeldSearch(counts).run(wildcards)
    return BASE_SHANTEN - best_score - (1 if committed_eye else 0)
