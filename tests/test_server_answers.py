"""Tests for answer endpoints: check, history, stats."""

import json
import sys
import tempfile
from contextlib import contextmanager
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient
from server.app import app
from server.config import Settings
from server.db.session import init_db, reset_engine
from server.dependencies import get_settings


# ============================================================================
# Helpers
# ============================================================================

SYNONYMS = {
    "big": [{"word": "large", "context_en": "a large house", "context_ru": "большой дом"}],
    "смотреть": [{"word": "watch"}],
}


@contextmanager
def _client(**overrides):
    reset_engine()
    with tempfile.TemporaryDirectory() as tmp:
        tmp_path = Path(tmp)
        synonyms_path = tmp_path / 'synonyms.json'
        synonyms_path.write_text(json.dumps(SYNONYMS, ensure_ascii=False), encoding='utf-8')
        settings = Settings(
            database_url=f"sqlite:///{tmp_path / 'test.db'}",
            synonyms_path=synonyms_path,
            **overrides,
        )
        init_db(settings)
        app.dependency_overrides[get_settings] = lambda: settings
        try:
            yield TestClient(app)
        finally:
            app.dependency_overrides.clear()
            reset_engine()


def _create(client, english='apple', russian='яблоко'):
    r = client.post("/words", json={
        "english": english,
        "russian": russian,
        "example_en": f"Example with {english}.",
        "example_ru": f"Пример: {russian}.",
    })
    assert r.status_code == 201, r.text
    return r.json()


def _check(client, word_id, answer):
    return client.post("/answers/check", json={"word_id": word_id, "answer": answer})


# ============================================================================
# Tests: /answers/check
# ============================================================================

def test_check_exact():
    with _client() as client:
        word = _create(client)
        r = _check(client, word['id'], '  APPLE ')
        assert r.status_code == 200
        assert r.json() == {
            "outcome": "exact",
            "is_correct": True,
            "is_partial": False,
            "is_synonym": False,
            "hint": None,
            "correct_answer": "apple",
        }


def test_check_prefix_hint():
    with _client() as client:
        word = _create(client)
        body = _check(client, word['id'], 'appl').json()
        assert body['outcome'] == 'prefix'
        assert body['is_partial'] is True
        assert body['is_correct'] is False
        assert '1 letter left' in body['hint']


def test_check_substring_and_near_miss():
    with _client() as client:
        word = _create(client)
        assert _check(client, word['id'], 'pple').json()['outcome'] == 'substring'
        assert _check(client, word['id'], 'aplpe').json()['outcome'] == 'near_miss'


def test_check_incorrect_reveals_answer():
    with _client() as client:
        word = _create(client)
        body = _check(client, word['id'], 'xyz').json()
        assert body['outcome'] == 'incorrect'
        assert body['hint'] is None
        assert body['correct_answer'] == 'apple'


def test_check_synonym_by_english_key():
    with _client() as client:
        word = _create(client, english='big', russian='большой')
        body = _check(client, word['id'], 'Large').json()
        assert body['outcome'] == 'synonym'
        assert body['is_synonym'] is True
        assert body['is_correct'] is False
        assert body['hint']


def test_check_synonym_by_russian_key():
    with _client() as client:
        word = _create(client, english='see', russian='смотреть')
        assert _check(client, word['id'], 'watch').json()['outcome'] == 'synonym'


def test_check_whitespace_only_is_incorrect():
    with _client() as client:
        word = _create(client, english='at', russian='в')
        body = _check(client, word['id'], '   ').json()
        assert body['outcome'] == 'incorrect'


def test_check_empty_answer_rejected():
    with _client() as client:
        word = _create(client)
        r = _check(client, word['id'], '')
        assert r.status_code == 400
        assert client.get(f"/answers/word/{word['id']}").json() == []


def test_check_missing_word():
    with _client() as client:
        r = _check(client, 9999, 'apple')
        assert r.status_code == 404
        assert r.json()["detail"] == "Word not found"


def test_check_missing_fields():
    with _client() as client:
        r = client.post("/answers/check", json={"answer": "apple"})
        assert r.status_code == 422


def test_near_miss_threshold_from_settings():
    with _client(near_miss_max_distance=1) as client:
        word = _create(client)
        assert _check(client, word['id'], 'aplpe').json()['outcome'] == 'incorrect'


# ============================================================================
# Tests: /answers/word/{id}
# ============================================================================

def test_answers_recorded_newest_first():
    with _client() as client:
        word = _create(client, english='big', russian='большой')
        _check(client, word['id'], ' Bi ')
        _check(client, word['id'], 'large')
        _check(client, word['id'], 'BIG')

        r = client.get(f"/answers/word/{word['id']}")
        assert r.status_code == 200
        answers = r.json()
        assert [a['answer'] for a in answers] == ['big', 'large', 'bi']
        assert [a['is_correct'] for a in answers] == [True, False, False]
        assert [a['is_synonym'] for a in answers] == [False, True, False]
        assert all(a['word_id'] == word['id'] for a in answers)


def test_answers_for_unknown_word_is_empty():
    with _client() as client:
        assert client.get("/answers/word/9999").json() == []


# ============================================================================
# Tests: /answers/stats
# ============================================================================

def test_stats_empty():
    with _client() as client:
        r = client.get("/answers/stats")
        assert r.status_code == 200
        assert r.json() == {
            "total_answers": 0,
            "correct_answers": 0,
            "accuracy": 0,
            "total_words": 0,
            "learned_words": 0,
            "favorite_words": 0,
        }


def test_stats_counts():
    with _client() as client:
        apple = _create(client)
        cat = _create(client, english='cat', russian='кошка')
        _create(client, english='dog', russian='собака')
        client.patch(f"/words/{cat['id']}/favorite")

        _check(client, apple['id'], 'apple')
        _check(client, apple['id'], 'apple')
        _check(client, cat['id'], 'ca')

        stats = client.get("/answers/stats").json()
        assert stats == {
            "total_answers": 3,
            "correct_answers": 2,
            "accuracy": 67,
            "total_words": 3,
            "learned_words": 1,
            "favorite_words": 1,
        }


def test_stats_accuracy_rounds_half_up():
    with _client() as client:
        word = _create(client)
        _check(client, word['id'], 'apple')
        for _ in range(7):
            _check(client, word['id'], 'xyz')
        # 1/8 = 12.5%
        assert client.get("/answers/stats").json()['accuracy'] == 13
