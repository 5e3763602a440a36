"""Classification of remote entries by their Drive MIME type."""
from __future__ import annotations

from enum import Enum

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
AUDIO_MIME_TYPE = "audio/x-m4a"


class EntryKind(str, Enum):
    FOLDER = "folder"
    AUDIO_FILE = "audio_file"
    OTHER = "other"


_KINDS = {
    FOLDER_MIME_TYPE: EntryKind.FOLDER,
    AUDIO_MIME_TYPE: EntryKind.AUDIO_FILE,
}


def classify(type_tag: str) -> EntryKind:
    """Map a MIME type to an :class:`EntryKind`; unknown types are ``OTHER``."""

    return _KINDS.get(type_tag, EntryKind.OTHER)
