"""Tests for server/runtime.py -- cached synonym index."""

import json
import sys
import tempfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from server.config import Settings
from server.runtime import runtime_from_settings


def _write(path: Path, data) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding='utf-8')


def test_synonyms_loaded_once_until_reset():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / 'synonyms.json'
        _write(path, {"big": [{"word": "large"}]})
        runtime = runtime_from_settings(
            Settings(database_url="sqlite://", synonyms_path=path)
        )

        first = runtime.get_synonyms()
        assert runtime.get_synonyms() is first
        assert first.lookup('big') == {'large'}

        # File replaced on disk: cache still serves the old index
        _write(path, {"big": [{"word": "huge"}]})
        assert runtime.get_synonyms().lookup('big') == {'large'}

        runtime.reset_synonyms()
        reloaded = runtime.get_synonyms()
        assert reloaded is not first
        assert reloaded.lookup('big') == {'huge'}


def test_missing_file_gives_empty_index():
    with tempfile.TemporaryDirectory() as tmp:
        runtime = runtime_from_settings(
            Settings(database_url="sqlite://", synonyms_path=Path(tmp) / 'nope.json')
        )
        assert len(runtime.get_synonyms()) == 0
