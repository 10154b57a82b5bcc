"""FastAPI application -- routes for the Flashwords vocabulary trainer."""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session as DBSession

from server.__version__ import __version__
from server.config import Settings
from server.dependencies import get_db_session, get_runtime, get_settings, get_synonyms
from server.schemas import (
    AnswerResponse,
    CheckAnswerRequest,
    CheckAnswerResponse,
    StatsResponse,
    WordCreateRequest,
    WordResponse,
    WordUpdateRequest,
)
from server.services import answer_service, word_service
from server.services.word_service import WordNotFoundError
from study.synonyms import SynonymIndex

logger = logging.getLogger("flashwords")


def setup_logging(settings: Settings) -> None:
    """Root logging format and level. Handlers added elsewhere are kept."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("flashwords").setLevel(settings.log_level)


def _utc_stamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan: configure logging, init DB, load synonym data once."""
    from server.db.session import init_db
    settings = get_settings()
    setup_logging(settings)
    init_db(settings)
    synonyms = get_runtime(settings).get_synonyms()
    logger.info("[%s] Startup: database ready, %d synonym key(s)", _utc_stamp(), len(synonyms))
    yield
    logger.info("[%s] Shutdown: complete", _utc_stamp())


app = FastAPI(title="Flashwords", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- Health (no dependencies, always fast) ----

@app.get("/health")
def health():
    """Minimal health check. No deps, no DB access."""
    return {"ok": True}


# ---- Words ----

@app.get("/words", response_model=List[WordResponse])
def words_list(db: DBSession = Depends(get_db_session)):
    """All words, newest first."""
    return word_service.list_words(db)


@app.get("/words/study", response_model=WordResponse)
def words_study(
    favorite_only: bool = False,
    exclude_id: Optional[int] = None,
    db: DBSession = Depends(get_db_session),
):
    """Next word to study: oldest not yet answered correctly, else oldest overall."""
    word = word_service.get_study_word(db, favorite_only=favorite_only, exclude_id=exclude_id)
    if word is None:
        raise HTTPException(status_code=404, detail="No words available for study")
    return word


@app.get("/words/favorites", response_model=List[WordResponse])
def words_favorites(db: DBSession = Depends(get_db_session)):
    return word_service.list_words(db, favorite_only=True)


@app.get("/words/{word_id}", response_model=WordResponse)
def words_get(word_id: int, db: DBSession = Depends(get_db_session)):
    word = word_service.get_word(db, word_id)
    if word is None:
        raise HTTPException(status_code=404, detail="Word not found")
    return word


@app.post("/words", response_model=WordResponse, status_code=201)
def words_create(body: WordCreateRequest, db: DBSession = Depends(get_db_session)):
    try:
        word = word_service.create_word(
            db, body.english, body.russian, body.example_en, body.example_ru,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    db.commit()
    return word


@app.put("/words/{word_id}", response_model=WordResponse)
def words_update(word_id: int, body: WordUpdateRequest, db: DBSession = Depends(get_db_session)):
    try:
        word = word_service.update_word(db, word_id, body.model_dump(exclude_none=True))
    except WordNotFoundError:
        raise HTTPException(status_code=404, detail="Word not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    db.commit()
    return word


@app.delete("/words/{word_id}")
def words_delete(word_id: int, db: DBSession = Depends(get_db_session)):
    try:
        word_service.delete_word(db, word_id)
    except WordNotFoundError:
        raise HTTPException(status_code=404, detail="Word not found")
    db.commit()
    return {"ok": True}


@app.patch("/words/{word_id}/favorite", response_model=WordResponse)
def words_toggle_favorite(word_id: int, db: DBSession = Depends(get_db_session)):
    try:
        word = word_service.toggle_favorite(db, word_id)
    except WordNotFoundError:
        raise HTTPException(status_code=404, detail="Word not found")
    db.commit()
    return word


# ---- Answers ----

@app.post("/answers/check", response_model=CheckAnswerResponse)
def answers_check(
    body: CheckAnswerRequest,
    db: DBSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
    synonyms: SynonymIndex = Depends(get_synonyms),
):
    """Evaluate an answer and record it. The correct answer is always returned."""
    if not body.answer:
        raise HTTPException(status_code=400, detail="Word ID and answer are required")
    try:
        result = answer_service.check_answer(
            db,
            body.word_id,
            body.answer,
            synonyms=synonyms,
            max_distance=settings.near_miss_max_distance,
        )
    except WordNotFoundError:
        raise HTTPException(status_code=404, detail="Word not found")
    except Exception:
        logger.exception("Answer check failed for word %s", body.word_id)
        raise HTTPException(status_code=500, detail="Failed to check answer")
    db.commit()
    return result.to_dict()


@app.get("/answers/word/{word_id}", response_model=List[AnswerResponse])
def answers_for_word(word_id: int, db: DBSession = Depends(get_db_session)):
    return answer_service.list_answers(db, word_id)


@app.get("/answers/stats", response_model=StatsResponse)
def answers_stats(db: DBSession = Depends(get_db_session)):
    return answer_service.get_stats(db)
