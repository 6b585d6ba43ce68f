"""
View Builder

Turns each bucket map into a sorted entity list. Member lists are sorted
first, entities second, and ids are the final 0-based positions.

All sorts are stable and compare strings ordinally (plain ``str`` ordering,
case-sensitive, no locale collation) so results are reproducible anywhere.
"""

from typing import Dict, List, Sequence, Tuple

from .aggregator import AlbumKey
from .models import Album, Artist, Genre, ReleaseDate, Track


# ---------------------------------------------------------------------------
# Member ordering
# ---------------------------------------------------------------------------

def _by_track_number(songs: Sequence[Track]) -> Tuple[Track, ...]:
    return tuple(sorted(songs, key=lambda t: t.track_number))


def _by_title(songs: Sequence[Track]) -> Tuple[Track, ...]:
    return tuple(sorted(songs, key=lambda t: t.title))


def resolve_album_artist(songs: Sequence[Track]) -> str:
    """Display artist of an album: first member's album artist, else its artist."""
    first = songs[0]
    return first.album_artist if first.album_artist is not None else first.artist


# ---------------------------------------------------------------------------
# Entity lists
# ---------------------------------------------------------------------------

def build_albums(buckets: Dict[AlbumKey, List[Track]]) -> Tuple[Album, ...]:
    """Albums ordered by title, then year ascending."""
    entries = sorted(buckets.items(), key=lambda item: (item[0][0], item[0][1]))
    albums = []
    for index, ((title, year), members) in enumerate(entries):
        songs = _by_track_number(members)
        albums.append(Album(
            id=index,
            title=title,
            artist=resolve_album_artist(songs),
            year=year,
            songs=songs,
        ))
    return tuple(albums)


def build_artists(buckets: Dict[str, List[Track]]) -> Tuple[Artist, ...]:
    """Artists (or album artists) ordered by name."""
    entries = sorted(buckets.items(), key=lambda item: item[0])
    return tuple(
        Artist(id=index, title=name, songs=_by_title(members))
        for index, (name, members) in enumerate(entries)
    )


def build_genres(buckets: Dict[str, List[Track]]) -> Tuple[Genre, ...]:
    entries = sorted(buckets.items(), key=lambda item: item[0])
    return tuple(
        Genre(id=index, title=name, songs=_by_title(members))
        for index, (name, members) in enumerate(entries)
    )


def build_dates(buckets: Dict[int, List[Track]]) -> Tuple[ReleaseDate, ...]:
    """Release years, most recent first."""
    entries = sorted(buckets.items(), key=lambda item: item[0], reverse=True)
    return tuple(
        ReleaseDate(id=index, year=year, songs=_by_title(members))
        for index, (year, members) in enumerate(entries)
    )
