"""
Track Normalizer

Maps one raw source row onto a canonical Track. Rows are never rejected:
whatever defaults the source supplied are passed through.
"""

from typing import Any, Mapping, Tuple, Union

from loguru import logger

from .config import IndexerSettings
from .models import RawTrackRow, Track

# Some taggers store "disc 1, track 3" as 1003 in the track field.
COMBINED_TRACK_THRESHOLD = 1000
DISC_MULTIPLIER = 100


def decode_track_number(track_number: int, disc_number: int) -> Tuple[int, int]:
    """
    Split a combined track/disc value.

    Returns:
        (disc_number, track_number). Values below 1000 are returned unchanged.
    """
    if track_number >= COMBINED_TRACK_THRESHOLD:
        return track_number // DISC_MULTIPLIER, track_number % DISC_MULTIPLIER
    return disc_number, track_number


def artwork_uri(album_id: int, base_uri: str) -> str:
    return f"{base_uri}/{album_id}"


def normalize_row(
    row: Union[RawTrackRow, Mapping[str, Any]],
    settings: IndexerSettings,
) -> Track:
    """
    Build a Track from a raw row.

    Args:
        row:      RawTrackRow, or a mapping with the same field names.
        settings: Supplies the artwork base URI.
    """
    if not isinstance(row, RawTrackRow):
        row = RawTrackRow.model_validate(row)

    disc_number, track_number = decode_track_number(row.track_number, row.disc_number)
    if track_number != row.track_number:
        logger.debug(
            f"Track {row.id}: combined number {row.track_number} → "
            f"disc {disc_number}, track {track_number}"
        )

    return Track(
        id=row.id,
        title=row.title,
        artist=row.artist,
        album=row.album,
        album_artist=row.album_artist,
        year=row.year,
        disc_number=disc_number,
        track_number=track_number,
        duration=row.duration,
        path=row.path,
        mime_type=row.mime_type,
        genre=row.genre,
        artwork_uri=artwork_uri(row.album_id, settings.artwork_base_uri),
    )
