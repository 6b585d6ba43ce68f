"""
Indexer configuration.

Fallback labels are supplied by the caller (they are usually localized) and
default to English. Each setting can also be taken from the environment:

    LIBRARY_UNKNOWN_ARTIST     label for tracks without an album artist
    LIBRARY_UNKNOWN_GENRE      label for untagged genres (carried, not applied)
    LIBRARY_ARTWORK_BASE_URI   collection URI that album ids are appended to
"""

import os
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ARTWORK_BASE_URI = "content://media/external/audio/albumart"

_ENV_VARS = {
    "unknown_artist": "LIBRARY_UNKNOWN_ARTIST",
    "unknown_genre": "LIBRARY_UNKNOWN_GENRE",
    "artwork_base_uri": "LIBRARY_ARTWORK_BASE_URI",
}


class IndexerSettings(BaseModel):
    """Labels and formatting options for one LibraryIndexer."""

    model_config = ConfigDict(frozen=True)

    unknown_artist: str = Field("Unknown Artist", description="Album-artist bucket for untagged tracks")
    unknown_genre: str = Field("Unknown Genre", description="Genre label exposed to callers")
    artwork_base_uri: str = Field(DEFAULT_ARTWORK_BASE_URI, description="Artwork collection base")

    @field_validator("artwork_base_uri")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, **overrides: Optional[str]) -> "IndexerSettings":
        """Build settings from LIBRARY_* environment variables.

        Keyword overrides that are not None win over the environment.
        """
        values = {}
        for field_name, env_name in _ENV_VARS.items():
            env_value = os.environ.get(env_name)
            if env_value:
                logger.debug(f"{env_name} set — using it for {field_name}")
                values[field_name] = env_value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
