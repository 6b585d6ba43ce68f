"""
Grouping Aggregator

Folds normalized tracks, in source order, into five bucket maps plus the
per-track lookup tables. One pass, no backtracking.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from loguru import logger

from .models import Track

AlbumKey = Tuple[str, int]


class GroupingAggregator:
    """
    Owns the buckets for one indexing run.

    Buckets are get-or-create: the first track with a new key opens an empty
    list, later ones append to it.
    """

    def __init__(self, unknown_artist: str) -> None:
        self.unknown_artist = unknown_artist

        self.songs: List[Track] = []

        self.by_album: Dict[AlbumKey, List[Track]] = defaultdict(list)
        self.by_artist: Dict[str, List[Track]] = defaultdict(list)
        self.by_album_artist: Dict[str, List[Track]] = defaultdict(list)
        self.by_genre: Dict[str, List[Track]] = defaultdict(list)
        self.by_year: Dict[int, List[Track]] = defaultdict(list)

        self.durations: Dict[int, int] = {}
        self.file_uris: Dict[int, str] = {}
        self.mime_types: Dict[int, str] = {}

    def add(self, track: Track) -> None:
        self.songs.append(track)

        self.by_album[(track.album, track.year)].append(track)
        self.by_artist[track.artist].append(track)
        # An album artist literally named like the fallback label shares its bucket.
        album_artist = track.album_artist if track.album_artist is not None else self.unknown_artist
        self.by_album_artist[album_artist].append(track)
        if track.genre:
            self.by_genre[track.genre].append(track)
        self.by_year[track.year].append(track)

        self.durations[track.id] = track.duration
        self.file_uris[track.id] = track.path
        self.mime_types[track.id] = track.mime_type

    def add_all(self, tracks: Iterable[Track]) -> "GroupingAggregator":
        for track in tracks:
            self.add(track)
        logger.debug(
            f"Aggregated {len(self.songs)} tracks: {len(self.by_album)} albums, "
            f"{len(self.by_artist)} artists, {len(self.by_genre)} genres, "
            f"{len(self.by_year)} years"
        )
        return self
