"""Read-only synonym index loaded from static JSON data."""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from study.evaluator import normalize

logger = logging.getLogger("flashwords.synonyms")


class SynonymDataError(ValueError):
    """Synonym file exists but does not have the expected shape."""


@dataclass(frozen=True)
class SynonymEntry:
    """An acceptable alternative for a word, with usage context."""
    word: str
    context_en: str = ''
    context_ru: str = ''

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> 'SynonymEntry':
        if not isinstance(data, dict) or not str(data.get('word', '')).strip():
            raise SynonymDataError(f"Synonym entry needs a non-empty 'word': {data!r}")
        return cls(
            word=str(data['word']).strip(),
            context_en=str(data.get('context_en', '')),
            context_ru=str(data.get('context_ru', '')),
        )


class SynonymIndex:
    """
    Mapping from a normalized key to its synonym entries.

    Keys may be canonical English answers or Russian prompts; ``lookup``
    consults both. The index is never mutated after construction.
    """

    def __init__(self, entries: Optional[Dict[str, Iterable[SynonymEntry]]] = None):
        self._entries: Dict[str, List[SynonymEntry]] = {}
        for key, items in (entries or {}).items():
            self._entries.setdefault(normalize(key), []).extend(items)

    @classmethod
    def from_dict(cls, data: Dict) -> 'SynonymIndex':
        if not isinstance(data, dict):
            raise SynonymDataError("Synonym data must be a JSON object keyed by word")
        entries = {}
        for key, items in data.items():
            if not isinstance(items, list):
                raise SynonymDataError(f"Synonyms for {key!r} must be a list")
            entries[key] = [SynonymEntry.from_dict(item) for item in items]
        return cls(entries)

    @classmethod
    def from_file(cls, path) -> 'SynonymIndex':
        """Load the index from a JSON file. A missing file yields an empty index."""
        path = Path(path)
        if not path.exists():
            logger.warning("Synonym file not found at %s; synonym checks disabled", path)
            return cls()
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise SynonymDataError(f"Invalid JSON in {path}: {e}") from e
        index = cls.from_dict(data)
        logger.info("Loaded synonyms for %d key(s) from %s", len(index), path)
        return index

    def entries(self, english: str, russian: Optional[str] = None) -> List[SynonymEntry]:
        """All entries for the word's English and (optionally) Russian keys."""
        found = list(self._entries.get(normalize(english), []))
        if russian:
            found.extend(self._entries.get(normalize(russian), []))
        return found

    def lookup(self, english: str, russian: Optional[str] = None) -> Set[str]:
        """Normalized synonyms for a word, never including the word itself."""
        canonical = normalize(english)
        return {
            normalize(e.word) for e in self.entries(english, russian)
        } - {canonical}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return normalize(key) in self._entries
