"""
Library Indexer

Builds an in-memory music library (albums, artists, album artists, genres,
release years) from a flat list of track rows.
"""

from .config import IndexerSettings
from .errors import LibraryIndexerError, RowSourceError
from .indexer import LibraryIndexer
from .models import (
    Album,
    Artist,
    Genre,
    LibrarySnapshot,
    RawTrackRow,
    ReleaseDate,
    Track,
)

__all__ = [
    "Album",
    "Artist",
    "Genre",
    "IndexerSettings",
    "LibraryIndexer",
    "LibraryIndexerError",
    "LibrarySnapshot",
    "RawTrackRow",
    "ReleaseDate",
    "RowSourceError",
    "Track",
]
