"""Answer outcome enumeration for the evaluator."""

from enum import Enum


class Outcome(str, Enum):
    """How a submitted answer relates to the target word."""
    EXACT = "exact"
    SYNONYM = "synonym"
    PREFIX = "prefix"
    SUBSTRING = "substring"
    NEAR_MISS = "near_miss"
    INCORRECT = "incorrect"

    @property
    def is_partial(self) -> bool:
        return self in PARTIAL_OUTCOMES


PARTIAL_OUTCOMES = frozenset({Outcome.PREFIX, Outcome.SUBSTRING, Outcome.NEAR_MISS})
