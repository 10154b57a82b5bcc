"""Pick the next word to study: oldest unmastered first, never a dead end."""

from typing import Any, Collection, Iterable, List, Optional


def _by_age(words: Iterable[Any]) -> List[Any]:
    """Oldest first; id breaks ties so the order is repeatable."""
    return sorted(words, key=lambda w: (w.created_at, w.id))


def select_next(
    words: Iterable[Any],
    mastered_ids: Collection[int],
    favorite_only: bool = False,
    exclude_id: Optional[int] = None,
) -> Optional[Any]:
    """
    Select the next word to present.

    Args:
        words:         Candidate words. Anything with ``id``, ``created_at``
                       and ``is_favorite`` attributes (ORM rows or dataclasses).
        mastered_ids:  Ids of words that have at least one correct answer.
        favorite_only: Restrict candidates to favourites.
        exclude_id:    Word to skip among unmastered candidates, typically the
                       one just shown.

    Returns:
        The oldest unmastered word, or the oldest word overall once every
        candidate is mastered. None only when the filtered set is empty.
    """
    pool = [w for w in words if w.is_favorite] if favorite_only else list(words)
    if not pool:
        return None

    ordered = _by_age(pool)

    for word in ordered:
        if word.id in mastered_ids or word.id == exclude_id:
            continue
        return word

    # Nothing unmastered besides the excluded word. Step past it only when it
    # is itself unmastered; a fully mastered set restarts from the oldest.
    if exclude_id is not None and exclude_id not in mastered_ids:
        for word in ordered:
            if word.id != exclude_id:
                return word
    return ordered[0]
