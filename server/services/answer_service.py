"""Answer checking, answer history and progress stats."""

import logging
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session as DBSession

from server.db.models import Answer, Word
from server.services.word_service import require_word
from study.evaluator import NEAR_MISS_MAX_DISTANCE, Evaluation, evaluate, normalize
from study.synonyms import SynonymIndex

logger = logging.getLogger("flashwords.answers")


def append_answer(
    db: DBSession,
    word_id: int,
    answer: str,
    is_correct: bool,
    is_synonym: bool = False,
) -> Answer:
    """Record one attempt. Answers are never updated or deleted."""
    record = Answer(
        word_id=word_id,
        answer=answer,
        is_correct=is_correct,
        is_synonym=is_synonym,
    )
    db.add(record)
    db.flush()
    return record


def check_answer(
    db: DBSession,
    word_id: int,
    submitted: str,
    synonyms: Optional[SynonymIndex] = None,
    max_distance: int = NEAR_MISS_MAX_DISTANCE,
) -> Evaluation:
    """
    Evaluate a submitted answer for a word and record the attempt.

    Raises WordNotFoundError if the word does not exist. Only an exact match
    is recorded as correct.
    """
    word = require_word(db, word_id)
    synonym_set = synonyms.lookup(word.english, word.russian) if synonyms is not None else None

    result = evaluate(submitted, word.english, synonym_set, max_distance=max_distance)
    append_answer(
        db,
        word.id,
        normalize(submitted),
        is_correct=result.is_correct,
        is_synonym=result.is_synonym,
    )
    logger.debug("Checked word %d: %s", word.id, result.outcome.value)
    return result


def list_answers(db: DBSession, word_id: int) -> List[Answer]:
    """Answers for a word, newest first."""
    stmt = (
        select(Answer)
        .where(Answer.word_id == word_id)
        .order_by(Answer.created_at.desc(), Answer.id.desc())
    )
    return list(db.scalars(stmt))


def count_answers(db: DBSession, correct_only: bool = False) -> int:
    stmt = select(func.count(Answer.id))
    if correct_only:
        stmt = stmt.where(Answer.is_correct.is_(True))
    return db.scalar(stmt) or 0


def count_words(db: DBSession, favorite_only: bool = False, learned_only: bool = False) -> int:
    stmt = select(func.count(Word.id))
    if favorite_only:
        stmt = stmt.where(Word.is_favorite.is_(True))
    if learned_only:
        stmt = stmt.where(Word.answers.any(Answer.is_correct.is_(True)))
    return db.scalar(stmt) or 0


def _percent(part: int, total: int) -> int:
    """Integer percentage rounded half up; 0 when total is 0."""
    if total <= 0:
        return 0
    return (part * 200 + total) // (2 * total)


def get_stats(db: DBSession) -> Dict:
    """
    Progress summary.

    Returns:
        {total_answers, correct_answers, accuracy (integer percent),
         total_words, learned_words, favorite_words}
    """
    total_answers = count_answers(db)
    correct_answers = count_answers(db, correct_only=True)
    return {
        "total_answers": total_answers,
        "correct_answers": correct_answers,
        "accuracy": _percent(correct_answers, total_answers),
        "total_words": count_words(db),
        "learned_words": count_words(db, learned_only=True),
        "favorite_words": count_words(db, favorite_only=True),
    }
