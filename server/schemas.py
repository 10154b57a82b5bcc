"""Pydantic request/response schemas for the Flashwords API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---- Words ----

class WordCreateRequest(BaseModel):
    english: str = Field(..., min_length=1, max_length=255)
    russian: str = Field(..., min_length=1, max_length=255)
    example_en: str = Field(..., min_length=1, max_length=2000)
    example_ru: str = Field(..., min_length=1, max_length=2000)


class WordUpdateRequest(BaseModel):
    english: Optional[str] = Field(default=None, max_length=255)
    russian: Optional[str] = Field(default=None, max_length=255)
    example_en: Optional[str] = Field(default=None, max_length=2000)
    example_ru: Optional[str] = Field(default=None, max_length=2000)
    is_favorite: Optional[bool] = None


class WordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    english: str
    russian: str
    example_en: str
    example_ru: str
    is_favorite: bool
    created_at: datetime
    updated_at: datetime


# ---- Answers ----

class CheckAnswerRequest(BaseModel):
    word_id: int
    answer: str = Field(..., max_length=255)


class CheckAnswerResponse(BaseModel):
    outcome: str
    is_correct: bool
    is_partial: bool
    is_synonym: bool
    hint: Optional[str] = None
    correct_answer: str


class AnswerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    word_id: int
    answer: str
    is_correct: bool
    is_synonym: bool
    created_at: datetime


# ---- Stats ----

class StatsResponse(BaseModel):
    total_answers: int
    correct_answers: int
    accuracy: int
    total_words: int
    learned_words: int
    favorite_words: int
