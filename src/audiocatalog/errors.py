"""Exceptions raised while building and exporting an audio catalog."""
from __future__ import annotations


class CatalogError(Exception):
    """Base exception for catalog runs."""


class ListingFailure(CatalogError):
    """Raised when the remote store cannot list the children of a folder."""

    def __init__(self, folder_id: str, reason: object) -> None:
        super().__init__(f"Failed to list children of {folder_id}: {reason}")
        self.folder_id = folder_id


class WriteFailure(CatalogError):
    """Raised when the storage sink rejects the exported catalog."""


class CredentialFailure(CatalogError):
    """Raised when no usable Drive credentials can be obtained."""
