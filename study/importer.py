"""Read word pairs from a vocabulary CSV export."""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple


# Column headers of the phrasebook export the word list is built from
COLUMN_MAP = {
    'Search text': 'english',
    'Translation text': 'russian',
    'Search example': 'example_en',
    'Translation example': 'example_ru',
}


@dataclass
class WordRow:
    english: str
    russian: str
    example_en: str
    example_ru: str


def read_word_csv(path: Path) -> Tuple[List[WordRow], int]:
    """
    Parse a CSV export into word rows.

    Rows with any blank required column are skipped.

    Returns:
        (rows, skipped_count)
    """
    rows: List[WordRow] = []
    skipped = 0
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.DictReader(f)
        missing = [col for col in COLUMN_MAP if col not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"CSV is missing column(s): {', '.join(missing)}")
        for record in reader:
            values = {
                field: (record.get(col) or '').strip()
                for col, field in COLUMN_MAP.items()
            }
            if not all(values.values()):
                skipped += 1
                continue
            rows.append(WordRow(**values))
    return rows, skipped
