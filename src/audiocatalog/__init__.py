"""Catalog audio files stored in a Google Drive folder tree."""

from .builder import CatalogBuilder, RemoteLister
from .classifier import EntryKind, classify
from .errors import CatalogError, CredentialFailure, ListingFailure, WriteFailure
from .exporter import CatalogExporter, render_lines
from .normalizer import normalize_name
from .schema import Catalog, CatalogEntry, CatalogSummary, RemoteEntry, TraversalContext
from .sinks import FileSink, StorageSink

__all__ = [
    "Catalog",
    "CatalogBuilder",
    "CatalogEntry",
    "CatalogError",
    "CatalogExporter",
    "CatalogSummary",
    "CredentialFailure",
    "EntryKind",
    "FileSink",
    "ListingFailure",
    "RemoteEntry",
    "RemoteLister",
    "StorageSink",
    "TraversalContext",
    "WriteFailure",
    "classify",
    "normalize_name",
    "render_lines",
]
