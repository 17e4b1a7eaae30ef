"""Typed domain exceptions for the discard advisor.

The search itself is total over valid input and raises nothing. Everything
here is raised before a search starts, when a caller hands the engine a
hand or a rule set it cannot evaluate.
"""


class AdvisorError(Exception):
    """Base exception for the discard advisor."""


class PreconditionViolationError(AdvisorError):
    """Caller passed input outside the engine's domain.

    The engine defines no recovery for these; callers are expected to
    validate before invoking it. Caught at the command line boundary and
    turned into an error message.
    """


class InvalidHandSizeError(PreconditionViolationError):
    """Hand does not hold exactly the number of tiles an evaluation needs.

    Attributes:
        size: Number of tiles actually supplied.
        expected: Number of tiles the evaluation requires.

    """

    def __init__(self, *, size: int, expected: int) -> None:
        self.size = size
        self.expected = expected
        super().__init__(f"hand must hold exactly {expected} tiles, got {size}")


class InvalidTileError(PreconditionViolationError):
    """Tile value is outside its suit's range, or tile notation is malformed."""


class UnsupportedRulesError(AdvisorError):
    """Rule set contains values the engine cannot evaluate."""
