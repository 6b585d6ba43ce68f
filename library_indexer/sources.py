"""
Track sources

Thin readers that yield raw row mappings for the indexer. Any iterable of
rows works as a source; these cover the two file formats the CLI accepts:

  * JSONL — one JSON object per line, field names as in RawTrackRow
  * CSV   — a header row with the same field names

Rows carrying a false ``is_music`` flag (ringtones, notifications, ...) are
skipped here, before they reach the indexer.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Protocol, Union

from loguru import logger

from .errors import RowSourceError

_FALSE_FLAGS = {"0", "false", "no"}


class RowSource(Protocol):
    def __iter__(self) -> Iterator[Dict[str, Any]]: ...


def _is_music(value: Any) -> bool:
    """Missing or blank flags count as music."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_FLAGS
    return bool(value)


class JsonlRowSource:
    """Reads rows from a JSON Lines file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        if not self.path.exists():
            raise RowSourceError(f"Track source not found: {self.path}")

        skipped = 0
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                for line_no, line in enumerate(fh, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        record = json.loads(line)
                    except json.JSONDecodeError as exc:
                        raise RowSourceError(f"{self.path}:{line_no}: invalid JSON ({exc.msg})") from exc
                    if not isinstance(record, dict):
                        raise RowSourceError(f"{self.path}:{line_no}: expected a JSON object")
                    if not _is_music(record.pop("is_music", None)):
                        skipped += 1
                        continue
                    yield record
        except (OSError, UnicodeDecodeError) as exc:
            raise RowSourceError(f"{self.path}: {exc}") from exc

        if skipped:
            logger.debug(f"{self.path}: skipped {skipped} non-music rows")


class CsvRowSource:
    """
    Reads rows from a CSV export.

    Empty cells are dropped so the row model's defaults apply; for the
    nullable fields (album_artist, genre) that means None.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        if not self.path.exists():
            raise RowSourceError(f"Track source not found: {self.path}")

        skipped = 0
        try:
            with open(self.path, newline="", encoding="utf-8-sig") as fh:
                reader = csv.DictReader(fh)
                if not reader.fieldnames or "id" not in reader.fieldnames:
                    raise RowSourceError(f"{self.path}: CSV header must include an 'id' column")
                for row in reader:
                    if not _is_music(row.pop("is_music", None)):
                        skipped += 1
                        continue
                    yield {k: v for k, v in row.items() if k is not None and v not in (None, "")}
        except (OSError, UnicodeDecodeError) as exc:
            raise RowSourceError(f"{self.path}: {exc}") from exc

        if skipped:
            logger.debug(f"{self.path}: skipped {skipped} non-music rows")


def open_row_source(path: Union[str, Path], fmt: Optional[str] = None) -> RowSource:
    """Pick a source for *path*; the format defaults to the file suffix."""
    path = Path(path)
    fmt = (fmt or path.suffix.lstrip(".")).lower()
    if fmt in ("jsonl", "ndjson", "json"):
        return JsonlRowSource(path)
    if fmt == "csv":
        return CsvRowSource(path)
    raise RowSourceError(f"Unsupported track source format: {fmt or '(none)'}")
