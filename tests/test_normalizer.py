"""Unit tests for the Track Normalizer."""

import pytest
from pydantic import ValidationError
from library_indexer.config import IndexerSettings
from library_indexer.models import RawTrackRow
from library_indexer.normalizer import artwork_uri, decode_track_number, normalize_row


def make_row(id=1, title="Song", track_number=1, disc_number=0, **kwargs):
    return RawTrackRow(
        id=id,
        title=title,
        artist=kwargs.pop("artist", "Artist"),
        album=kwargs.pop("album", "Album"),
        track_number=track_number,
        disc_number=disc_number,
        **kwargs,
    )


@pytest.fixture
def settings():
    return IndexerSettings()


class TestDecodeTrackNumber:
    def test_combined_value_is_split(self):
        assert decode_track_number(1205, 0) == (12, 5)

    def test_combined_value_overrides_disc(self):
        assert decode_track_number(1001, 3) == (10, 1)

    def test_threshold_boundary(self):
        assert decode_track_number(1000, 0) == (10, 0)
        assert decode_track_number(999, 2) == (2, 999)

    def test_plain_value_unchanged(self):
        assert decode_track_number(7, 2) == (2, 7)

    def test_zero_disc_kept(self):
        assert decode_track_number(3, 0) == (0, 3)


class TestNormalizeRow:
    def test_combined_track_number(self, settings):
        track = normalize_row(make_row(track_number=1205), settings)
        assert track.disc_number == 12
        assert track.track_number == 5

    def test_plain_track_number(self, settings):
        track = normalize_row(make_row(track_number=7, disc_number=2), settings)
        assert track.disc_number == 2
        assert track.track_number == 7

    def test_fields_copied(self, settings):
        row = make_row(
            id=42, title="Come Together", artist="The Beatles", album="Abbey Road",
            album_artist="The Beatles", path="/music/01.flac", year=1969,
            mime_type="audio/flac", duration=259000, genre="Rock",
        )
        track = normalize_row(row, settings)
        assert track.id == 42
        assert track.title == "Come Together"
        assert track.artist == "The Beatles"
        assert track.album == "Abbey Road"
        assert track.album_artist == "The Beatles"
        assert track.path == "/music/01.flac"
        assert track.year == 1969
        assert track.mime_type == "audio/flac"
        assert track.duration == 259000
        assert track.genre == "Rock"

    def test_artwork_uri_from_album_id(self, settings):
        track = normalize_row(make_row(album_id=77), settings)
        assert track.artwork_uri == "content://media/external/audio/albumart/77"

    def test_artwork_uri_custom_base(self):
        settings = IndexerSettings(artwork_base_uri="file:///covers/")
        track = normalize_row(make_row(album_id=5), settings)
        assert track.artwork_uri == "file:///covers/5"

    def test_accepts_mapping(self, settings):
        track = normalize_row({"id": "9", "title": "X", "year": "2001"}, settings)
        assert track.id == 9
        assert track.year == 2001
        assert track.album_artist is None
        assert track.genre is None

    def test_defaults_pass_through(self, settings):
        track = normalize_row({"id": 3}, settings)
        assert track.title == ""
        assert track.artist == ""
        assert track.year == 0
        assert track.track_number == 0

    def test_null_fields_take_defaults(self, settings):
        track = normalize_row(
            {"id": 4, "title": None, "year": None, "track_number": None,
             "album_artist": None, "genre": None},
            settings,
        )
        assert track.title == ""
        assert track.year == 0
        assert track.track_number == 0
        assert track.album_artist is None
        assert track.genre is None

    def test_null_id_rejected(self, settings):
        with pytest.raises(ValidationError):
            normalize_row({"id": None, "title": "x"}, settings)

    def test_track_is_frozen(self, settings):
        track = normalize_row(make_row(), settings)
        with pytest.raises(ValidationError):
            track.title = "Changed"


class TestArtworkUri:
    def test_format(self):
        assert artwork_uri(12, "content://art") == "content://art/12"
