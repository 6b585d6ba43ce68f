"""
Library Indexer

Runs the full pipeline (normalize → aggregate → build views → assemble) over
a track source and returns one immutable LibrarySnapshot.

Usage:
    indexer = LibraryIndexer(IndexerSettings(unknown_artist="Unknown Artist"))
    snapshot = indexer.index(rows)
    snapshot.albums[0].songs
"""

from typing import Any, Iterable, Mapping, Optional, Union

from loguru import logger

from .aggregator import GroupingAggregator
from .config import IndexerSettings
from .models import LibrarySnapshot, RawTrackRow
from .normalizer import normalize_row
from .views import build_albums, build_artists, build_dates, build_genres

Row = Union[RawTrackRow, Mapping[str, Any]]


def assemble_snapshot(aggregator: GroupingAggregator) -> LibrarySnapshot:
    """Package the aggregated buckets into a snapshot. Songs keep source order."""
    return LibrarySnapshot(
        songs=tuple(aggregator.songs),
        albums=build_albums(aggregator.by_album),
        album_artists=build_artists(aggregator.by_album_artist),
        artists=build_artists(aggregator.by_artist),
        genres=build_genres(aggregator.by_genre),
        dates=build_dates(aggregator.by_year),
        durations=aggregator.durations,
        file_uris=aggregator.file_uris,
        mime_types=aggregator.mime_types,
    )


class LibraryIndexer:
    """
    Builds library snapshots.

    Each call to index() works on fresh, call-local state; the previous
    snapshot stays valid and is only swapped out once the new one is complete.
    The call is synchronous and consumes the whole source before returning.
    """

    def __init__(self, settings: Optional[IndexerSettings] = None) -> None:
        self.settings = settings or IndexerSettings()
        self.snapshot: Optional[LibrarySnapshot] = None

    def index(self, rows: Iterable[Row]) -> LibrarySnapshot:
        """Index every row of the source and return the new snapshot."""
        aggregator = GroupingAggregator(unknown_artist=self.settings.unknown_artist)
        aggregator.add_all(normalize_row(row, self.settings) for row in rows)

        snapshot = assemble_snapshot(aggregator)
        self.snapshot = snapshot
        logger.info(
            f"Library indexed: {len(snapshot.songs)} tracks, "
            f"{len(snapshot.albums)} albums, {len(snapshot.artists)} artists, "
            f"{len(snapshot.album_artists)} album artists, "
            f"{len(snapshot.genres)} genres, {len(snapshot.dates)} years"
        )
        return snapshot
