"""
library-indexer — Index a track export and print a library summary.

Usage:
    library-indexer tracks.jsonl
    library-indexer export.csv --unknown-artist "Artiste inconnu"
    library-indexer tracks.txt --format jsonl --verbose
"""

import argparse
import json
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from .config import IndexerSettings
from .errors import RowSourceError
from .indexer import LibraryIndexer
from .sources import open_row_source


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="library-indexer",
        description="Group a flat track export into albums, artists, genres and years.",
    )
    parser.add_argument("path", help="Track source file (JSONL or CSV)")
    parser.add_argument("--format", choices=["jsonl", "csv"], default=None,
                        help="Source format (default: from the file suffix)")
    parser.add_argument("--unknown-artist", default=None, metavar="LABEL",
                        help="Album-artist label for untagged tracks")
    parser.add_argument("--unknown-genre", default=None, metavar="LABEL",
                        help="Label for untagged genres")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show debug logging on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    settings = IndexerSettings.from_env(
        unknown_artist=args.unknown_artist,
        unknown_genre=args.unknown_genre,
    )
    indexer = LibraryIndexer(settings)

    try:
        snapshot = indexer.index(open_row_source(args.path, args.format))
    except RowSourceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"ERROR: ill-formed track row: {e}", file=sys.stderr)
        return 1

    print(json.dumps(snapshot.summary(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
