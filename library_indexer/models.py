"""
Data Models for the Library Indexer

Raw rows as delivered by a track source, the canonical Track record, the five
grouped entity types and the immutable LibrarySnapshot that bundles them.
"""

from types import MappingProxyType
from typing import Any, Optional, Tuple, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator


# ---------------------------------------------------------------------------
# Source rows
# ---------------------------------------------------------------------------

_NULLABLE_FIELDS = {"album_artist", "genre"}


class RawTrackRow(BaseModel):
    """
    One row from a track source, before normalization.

    A null in a non-nullable field (title, year, ...) falls back to the
    field default instead of failing validation.
    """

    id: int = Field(..., description="Stable unique identifier of the source row")
    title: str = Field("", description="Track title")
    artist: str = Field("", description="Track artist")
    album: str = Field("", description="Album title")
    album_artist: Optional[str] = Field(None, description="Album artist, if tagged")
    path: str = Field("", description="Absolute file location")
    year: int = Field(0, description="Release year (0 = unknown)")
    album_id: int = Field(0, description="Album grouping id used for artwork lookup")
    mime_type: str = Field("", description="Content type, e.g. 'audio/flac'")
    disc_number: int = Field(0, description="Disc number as stored by the source")
    track_number: int = Field(0, description="Track number, possibly disc*100 + track")
    duration: int = Field(0, description="Duration in milliseconds")
    genre: Optional[str] = Field(None, description="Genre tag, if the source has one")

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        return {
            k: v for k, v in data.items()
            if v is not None or k in _NULLABLE_FIELDS
        }


# ---------------------------------------------------------------------------
# Track model
# ---------------------------------------------------------------------------

class Track(BaseModel):
    """Normalized audio file metadata. Produced once per row, never mutated."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    artist: str
    album: str
    album_artist: Optional[str] = None
    year: int = 0
    disc_number: int = 0
    track_number: int = 0
    duration: int = 0
    path: str = ""
    mime_type: str = ""
    genre: Optional[str] = None
    artwork_uri: str = ""


# ---------------------------------------------------------------------------
# Grouped entities
# ---------------------------------------------------------------------------

class Album(BaseModel):
    """Tracks sharing an album title and release year, ordered by track number."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    artist: str
    year: int
    songs: Tuple[Track, ...] = ()


class Artist(BaseModel):
    """Tracks sharing an artist (or album artist) name, ordered by title."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    songs: Tuple[Track, ...] = ()


class Genre(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    songs: Tuple[Track, ...] = ()


class ReleaseDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    year: int
    songs: Tuple[Track, ...] = ()


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

class LibrarySnapshot(BaseModel):
    """
    Result of one indexing run.

    Every entity list references the Track instances held in ``songs``;
    nothing is copied. The snapshot is replaced wholesale on the next run.
    """

    model_config = ConfigDict(frozen=True)

    songs: Tuple[Track, ...] = ()
    albums: Tuple[Album, ...] = ()
    album_artists: Tuple[Artist, ...] = ()
    artists: Tuple[Artist, ...] = ()
    genres: Tuple[Genre, ...] = ()
    dates: Tuple[ReleaseDate, ...] = ()
    durations: Mapping[int, int] = Field(
        default_factory=dict, validate_default=True, description="Track id → duration (ms)"
    )
    file_uris: Mapping[int, str] = Field(
        default_factory=dict, validate_default=True, description="Track id → file location"
    )
    mime_types: Mapping[int, str] = Field(
        default_factory=dict, validate_default=True, description="Track id → content type"
    )

    _id_lookup: Dict[int, Track] = PrivateAttr(default_factory=dict)

    @field_validator("durations", "file_uris", "mime_types", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    def model_post_init(self, __context: Any) -> None:
        # First occurrence wins for duplicate ids.
        for song in self.songs:
            self._id_lookup.setdefault(song.id, song)

    def get_song(self, track_id: int) -> Optional[Track]:
        """Return the track with the given id, or None."""
        return self._id_lookup.get(track_id)

    def summary(self) -> Dict:
        """Counts and top genres, suitable for JSON output."""
        genre_counts: List[Tuple[str, int]] = sorted(
            ((g.title, len(g.songs)) for g in self.genres),
            key=lambda x: x[1],
            reverse=True,
        )[:10]
        return {
            "total": len(self.songs),
            "albums": len(self.albums),
            "album_artists": len(self.album_artists),
            "artists": len(self.artists),
            "genres": len(self.genres),
            "dates": len(self.dates),
            "total_duration_ms": sum(self.durations.values()),
            "top_genres": [f"{g} ({c})" for g, c in genre_counts],
            "newest_year": self.dates[0].year if self.dates else None,
        }
