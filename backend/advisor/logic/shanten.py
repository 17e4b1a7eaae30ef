"""Shanten calculation with a restricted eye set and a wildcard kind."""

from collections.abc import Sequence

from advisor.logic.meld_search import BASE_SHANTEN, search_melds, tiles_removed
from advisor.logic.settings import RuleSet

AGARI_STATE: int = -1
TENPAI_STATE: int = 0
MAX_SHANTEN: int = BASE_SHANTEN

# Without an eye from the restricted set a hand is at best one away: every
# branch able to reach tenpai or a win goes through an explicit eye above.
_NO_EYE_FLOOR: int = 1


def calculate_shanten(counts: Sequence[int], wildcards: int, rules: RuleSet) -> int:
    """Calculate the minimum shanten across every eye choice the rules allow.

    Each eye candidate is tried as a real pair, a real tile plus a wildcard,
    a lone real tile still waiting for its partner, or a pair of wildcards.
    A no-eye baseline covers hands that have no usable eye yet.
    """
    work = list(counts)
    shanten = MAX_SHANTEN

    for eye in sorted(rules.eye_tiles_34):
        held = work[eye]
        if held >= 2:
            with tiles_removed(work, eye, eye):
                shanten = min(shanten, search_melds(work, wildcards, committed_eye=True))
        elif held == 1 and wildcards >= 1:
            with tiles_removed(work, eye):
                shanten = min(shanten, search_melds(work, wildcards - 1, committed_eye=True))
        elif held == 1:
            # half-formed eye: credit it as a partial, but a missing partner is never a win
            with tiles_removed(work, eye):
                half_eye = search_melds(work, wildcards, committed_eye=False) - 1
            shanten = min(shanten, max(TENPAI_STATE, half_eye))
        elif wildcards >= 2:
            shanten = min(shanten, search_melds(work, wildcards - 2, committed_eye=True))

    no_eye = max(_NO_EYE_FLOOR, search_melds(work, wildcards, committed_eye=False))
    return min(shanten, no_eye)
