"""Exceptions raised at the edges of the indexer (sources, CLI)."""


class LibraryIndexerError(Exception):
    """Base class for library_indexer errors."""


class RowSourceError(LibraryIndexerError):
    """A track source could not be read or contained an ill-formed record."""
