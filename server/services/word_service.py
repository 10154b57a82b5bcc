"""Word persistence: CRUD, favourites and study-word selection."""

import logging
from typing import Dict, List, Optional, Set

from sqlalchemy import not_, select, update
from sqlalchemy.orm import Session as DBSession

from server.db.models import Answer, Word
from study.evaluator import normalize
from study.selector import select_next

logger = logging.getLogger("flashwords.words")

TEXT_FIELDS = ("english", "russian", "example_en", "example_ru")


class WordNotFoundError(KeyError):
    """No word with the requested id."""

    def __init__(self, word_id: int):
        super().__init__(word_id)
        self.word_id = word_id

    def __str__(self) -> str:
        return f"Word not found: {self.word_id}"


def _clean_fields(fields: Dict) -> Dict:
    """Trim text fields; the English answer is also lowercased."""
    cleaned = {}
    for key, value in fields.items():
        if value is None:
            continue
        if key == "english":
            value = normalize(value)
        elif key in TEXT_FIELDS:
            value = value.strip()
        cleaned[key] = value
    return cleaned


def get_word(db: DBSession, word_id: int) -> Optional[Word]:
    return db.get(Word, word_id)


def require_word(db: DBSession, word_id: int) -> Word:
    word = db.get(Word, word_id)
    if word is None:
        raise WordNotFoundError(word_id)
    return word


def list_words(db: DBSession, favorite_only: bool = False) -> List[Word]:
    """All words (or favourites), newest first."""
    stmt = select(Word)
    if favorite_only:
        stmt = stmt.where(Word.is_favorite.is_(True))
    stmt = stmt.order_by(Word.created_at.desc(), Word.id.desc())
    return list(db.scalars(stmt))


def mastered_word_ids(db: DBSession) -> Set[int]:
    """Ids of words with at least one correct answer."""
    stmt = select(Answer.word_id).where(Answer.is_correct.is_(True)).distinct()
    return set(db.scalars(stmt))


def has_correct_answer(db: DBSession, word_id: int) -> bool:
    stmt = select(Answer.id).where(Answer.word_id == word_id, Answer.is_correct.is_(True)).limit(1)
    return db.scalar(stmt) is not None


def create_word(db: DBSession, english: str, russian: str, example_en: str, example_ru: str) -> Word:
    """Create a word. Raises ValueError if any text is blank."""
    fields = _clean_fields({
        "english": english,
        "russian": russian,
        "example_en": example_en,
        "example_ru": example_ru,
    })
    if any(not fields.get(name) for name in TEXT_FIELDS):
        raise ValueError("All fields are required")
    word = Word(**fields)
    db.add(word)
    db.flush()
    logger.info("Created word %d (%s)", word.id, word.english)
    return word


def update_word(db: DBSession, word_id: int, changes: Dict) -> Word:
    """Apply the supplied fields only. Raises WordNotFoundError / ValueError."""
    word = require_word(db, word_id)
    cleaned = _clean_fields(changes)
    for name in TEXT_FIELDS:
        if name in cleaned and not cleaned[name]:
            raise ValueError(f"{name} cannot be blank")
    for key, value in cleaned.items():
        setattr(word, key, value)
    db.flush()
    return word


def delete_word(db: DBSession, word_id: int) -> None:
    """Delete a word and, by cascade, its answers."""
    word = require_word(db, word_id)
    db.delete(word)
    db.flush()
    logger.info("Deleted word %d", word_id)


def toggle_favorite(db: DBSession, word_id: int) -> Word:
    """
    Flip the favourite flag in a single UPDATE.

    The flag is negated in SQL rather than read and written back, so two
    concurrent toggles cannot overwrite each other.
    """
    result = db.execute(
        update(Word)
        .where(Word.id == word_id)
        .values(is_favorite=not_(Word.is_favorite))
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise WordNotFoundError(word_id)
    word = db.get(Word, word_id)
    db.refresh(word)
    return word


def get_study_word(
    db: DBSession,
    favorite_only: bool = False,
    exclude_id: Optional[int] = None,
) -> Optional[Word]:
    """Next word to study, or None when there are no candidate words."""
    word = select_next(
        list_words(db, favorite_only=favorite_only),
        mastered_word_ids(db),
        favorite_only=favorite_only,
        exclude_id=exclude_id,
    )
    if word is None:
        logger.info("No words available for study (favorite_only=%s)", favorite_only)
    return word
