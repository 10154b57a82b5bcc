"""
Flashwords CLI.

Usage:
    python -m server.cli add ENGLISH RUSSIAN EXAMPLE_EN EXAMPLE_RU
    python -m server.cli list [--favorites]
    python -m server.cli next [--favorites] [--exclude ID]
    python -m server.cli check WORD_ID ANSWER
    python -m server.cli favorite WORD_ID
    python -m server.cli stats
    python -m server.cli import-csv words.csv

Global options: --database-url URL, --synonyms PATH, --log-level LEVEL
"""

import argparse
import logging
import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from server.config import Settings
from server.db.session import get_db, init_db
from server.services import answer_service, word_service
from server.services.word_service import WordNotFoundError
from study.importer import read_word_csv
from study.synonyms import SynonymIndex


def _settings(args) -> Settings:
    return Settings(
        database_url=args.database_url,
        synonyms_path=args.synonyms,
        log_level=args.log_level,
    )


def _print_word(word, learned: bool = False) -> None:
    star = '*' if word.is_favorite else ' '
    mark = ' [learned]' if learned else ''
    print(f"  {star} #{word.id}  {word.russian} -> {word.english}{mark}")


def cmd_add(args, settings: Settings):
    """Create a word."""
    with get_db(settings) as db:
        try:
            word = word_service.create_word(
                db, args.english, args.russian, args.example_en, args.example_ru,
            )
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        print(f"Added word #{word.id}: {word.english}")


def cmd_list(args, settings: Settings):
    """List words, newest first."""
    with get_db(settings) as db:
        words = word_service.list_words(db, favorite_only=args.favorites)
        if not words:
            print("No words yet. Add some first.")
            return
        mastered = word_service.mastered_word_ids(db)
        print(f"\n{len(words)} word(s):\n")
        for word in words:
            _print_word(word, learned=word.id in mastered)


def cmd_next(args, settings: Settings):
    """Show the next study word."""
    with get_db(settings) as db:
        word = word_service.get_study_word(
            db, favorite_only=args.favorites, exclude_id=args.exclude,
        )
        if word is None:
            print("No words available for study.")
            return
        review = " (learned, reviewing)" if word_service.has_correct_answer(db, word.id) else ""
        print(f"\n#{word.id}  {word.russian}{review}")
        print(f"  {word.example_ru}")


def cmd_check(args, settings: Settings):
    """Evaluate and record an answer."""
    synonyms = SynonymIndex.from_file(settings.synonyms_path)
    with get_db(settings) as db:
        try:
            result = answer_service.check_answer(
                db, args.word_id, args.answer,
                synonyms=synonyms,
                max_distance=settings.near_miss_max_distance,
            )
        except WordNotFoundError as e:
            print(str(e))
            sys.exit(1)
    print(f"  {result.outcome.value}")
    if result.hint:
        print(f"  {result.hint}")
    print(f"  Correct answer: {result.correct_answer}")


def cmd_favorite(args, settings: Settings):
    """Toggle the favourite flag."""
    with get_db(settings) as db:
        try:
            word = word_service.toggle_favorite(db, args.word_id)
        except WordNotFoundError as e:
            print(str(e))
            sys.exit(1)
        state = 'added to' if word.is_favorite else 'removed from'
        print(f"#{word.id} {word.english} {state} favorites")


def cmd_stats(args, settings: Settings):
    """Show progress statistics."""
    with get_db(settings) as db:
        stats = answer_service.get_stats(db)
    print(f"\nWords:     {stats['total_words']} "
          f"(learned {stats['learned_words']}, favorites {stats['favorite_words']})")
    print(f"Answers:   {stats['total_answers']} "
          f"(correct {stats['correct_answers']})")
    print(f"Accuracy:  {stats['accuracy']}%")


def cmd_import_csv(args, settings: Settings):
    """Bulk-create words from a CSV export."""
    try:
        rows, skipped = read_word_csv(Path(args.path))
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    with get_db(settings) as db:
        for row in rows:
            word_service.create_word(db, row.english, row.russian, row.example_en, row.example_ru)
    print(f"Imported {len(rows)} word(s), skipped {skipped} incomplete row(s).")


COMMANDS = {
    'add': cmd_add,
    'list': cmd_list,
    'next': cmd_next,
    'check': cmd_check,
    'favorite': cmd_favorite,
    'stats': cmd_stats,
    'import-csv': cmd_import_csv,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Flashwords: English/Russian vocabulary trainer",
    )
    parser.add_argument(
        '--database-url', default=None,
        help="SQLAlchemy database URL (default: $DATABASE_URL or sqlite:///./flashwords.db)",
    )
    parser.add_argument(
        '--synonyms', default=None,
        help="Path to synonyms JSON (default: $SYNONYMS_PATH or data/synonyms.json)",
    )
    parser.add_argument('--log-level', default=None, help="Logging level (default: INFO)")

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    add_parser = subparsers.add_parser('add', help='Add a word')
    add_parser.add_argument('english', help='English word (the answer)')
    add_parser.add_argument('russian', help='Russian word (the prompt)')
    add_parser.add_argument('example_en', help='English example sentence')
    add_parser.add_argument('example_ru', help='Russian example sentence')

    list_parser = subparsers.add_parser('list', help='List words')
    list_parser.add_argument('--favorites', action='store_true', help='Only favorites')

    next_parser = subparsers.add_parser('next', help='Show the next word to study')
    next_parser.add_argument('--favorites', action='store_true', help='Only favorites')
    next_parser.add_argument('--exclude', type=int, default=None,
                             help='Word id to skip (e.g. the one just shown)')

    check_parser = subparsers.add_parser('check', help='Check an answer')
    check_parser.add_argument('word_id', type=int)
    check_parser.add_argument('answer')

    favorite_parser = subparsers.add_parser('favorite', help='Toggle favorite')
    favorite_parser.add_argument('word_id', type=int)

    subparsers.add_parser('stats', help='Show progress statistics')

    import_parser = subparsers.add_parser('import-csv', help='Import words from CSV')
    import_parser.add_argument('path', help='CSV file with Search/Translation columns')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return

    settings = _settings(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    init_db(settings)
    handler(args, settings)


if __name__ == '__main__':
    main()
