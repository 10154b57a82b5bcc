"""Fuzzy answer evaluation: exact, synonym, prefix, substring, near-miss."""

from dataclasses import dataclass
from typing import Iterable, Optional

from study.outcomes import Outcome


NEAR_MISS_MAX_DISTANCE = 2

SYNONYM_HINT = "That's a synonym! Try the exact word"
SUBSTRING_HINT = 'Partially correct! Try again'
NEAR_MISS_HINT = 'Close! Check your spelling'


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating one submitted answer."""
    outcome: Outcome
    correct_answer: str
    hint: Optional[str] = None

    @property
    def is_correct(self) -> bool:
        return self.outcome is Outcome.EXACT

    @property
    def is_partial(self) -> bool:
        return self.outcome.is_partial

    @property
    def is_synonym(self) -> bool:
        return self.outcome is Outcome.SYNONYM

    def to_dict(self) -> dict:
        return {
            'outcome': self.outcome.value,
            'is_correct': self.is_correct,
            'is_partial': self.is_partial,
            'is_synonym': self.is_synonym,
            'hint': self.hint,
            'correct_answer': self.correct_answer,
        }


def normalize(text: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return text.strip().lower()


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between two strings.

    Single-character insert, delete and substitute each cost 1. Keeps two
    rows of the DP table, iterating over the shorter string in the inner loop.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,              # deletion
                current[j - 1] + 1,           # insertion
                previous[j - 1] + (ca != cb), # substitution
            ))
        previous = current
    return previous[-1]


def _prefix_hint(remaining: int) -> str:
    letters = 'letter' if remaining == 1 else 'letters'
    return f'Right so far! Keep going... ({remaining} {letters} left)'


def evaluate(
    submitted: str,
    target: str,
    synonyms: Optional[Iterable[str]] = None,
    max_distance: int = NEAR_MISS_MAX_DISTANCE,
) -> Evaluation:
    """
    Classify a submitted answer against the target word.

    Checks run in a fixed order and the first match wins:
        exact -> synonym -> prefix -> substring -> near-miss -> incorrect

    Empty input (after normalization) is never partial. The canonical target
    text is always returned in ``correct_answer``.
    """
    user = normalize(submitted)
    expected = normalize(target)

    if user == expected:
        return Evaluation(Outcome.EXACT, target)

    if not user:
        return Evaluation(Outcome.INCORRECT, target)

    if synonyms and user in {normalize(s) for s in synonyms}:
        return Evaluation(Outcome.SYNONYM, target, SYNONYM_HINT)

    if expected.startswith(user):
        return Evaluation(Outcome.PREFIX, target, _prefix_hint(len(expected) - len(user)))

    if user in expected:
        return Evaluation(Outcome.SUBSTRING, target, SUBSTRING_HINT)

    if levenshtein(user, expected) <= max_distance:
        return Evaluation(Outcome.NEAR_MISS, target, NEAR_MISS_HINT)

    return Evaluation(Outcome.INCORRECT, target)
