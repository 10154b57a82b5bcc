"""Tests for server/config.py -- Settings defaults and env overrides."""

import sys
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from server.config import Settings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_defaults():
    with patch.dict('os.environ', {}, clear=True):
        settings = Settings()
    assert settings.database_url == "sqlite:///./flashwords.db"
    assert settings.synonyms_path == PROJECT_ROOT / "data" / "synonyms.json"
    assert settings.cors_origins == ["http://localhost:3000"]
    assert settings.log_level == "INFO"
    assert settings.near_miss_max_distance == 2


def test_env_overrides():
    env = {
        "DATABASE_URL": "sqlite:////tmp/other.db",
        "SYNONYMS_PATH": "/tmp/syn.json",
        "CORS_ORIGINS": "http://a.test, http://b.test ,",
        "LOG_LEVEL": "debug",
        "NEAR_MISS_MAX_DISTANCE": "3",
    }
    with patch.dict('os.environ', env, clear=True):
        settings = Settings()
    assert settings.database_url == "sqlite:////tmp/other.db"
    assert settings.synonyms_path == Path("/tmp/syn.json")
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"
    assert settings.near_miss_max_distance == 3


def test_invalid_int_env_is_ignored():
    with patch.dict('os.environ', {"NEAR_MISS_MAX_DISTANCE": "two"}, clear=True):
        settings = Settings()
    assert settings.near_miss_max_distance == 2


def test_constructor_arguments_win():
    with patch.dict('os.environ', {"DATABASE_URL": "sqlite:////tmp/env.db"}, clear=True):
        settings = Settings(database_url="sqlite:////tmp/arg.db", synonyms_path="rel/syn.json")
    assert settings.database_url == "sqlite:////tmp/arg.db"
    assert settings.synonyms_path == Path("rel/syn.json")
