from __future__ import annotations

import io
from collections import defaultdict
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from audiocatalog.classifier import AUDIO_MIME_TYPE, FOLDER_MIME_TYPE
from audiocatalog.errors import ListingFailure
from audiocatalog.schema import RemoteEntry

ROOT_ID = "root"


class FakeDrive:
    """In-memory folder tree that lists children ordered by name."""

    def __init__(self) -> None:
        self._children: Dict[str, List[RemoteEntry]] = defaultdict(list)
        self._next_id = 0
        self.calls: List[str] = []
        self.fail_on: Optional[str] = None

    def _add(self, parent_id: str, name: str, mime_type: str) -> str:
        self._next_id += 1
        entry_id = f"id{self._next_id}"
        self._children[parent_id].append(RemoteEntry(id=entry_id, name=name, mimeType=mime_type))
        return entry_id

    def folder(self, parent_id: str, name: str) -> str:
        return self._add(parent_id, name, FOLDER_MIME_TYPE)

    def audio(self, parent_id: str, name: str) -> str:
        return self._add(parent_id, name, AUDIO_MIME_TYPE)

    def other(self, parent_id: str, name: str, mime_type: str = "image/jpeg") -> str:
        return self._add(parent_id, name, mime_type)

    def list_children(self, folder_id: str) -> List[RemoteEntry]:
        self.calls.append(folder_id)
        if folder_id == self.fail_on:
            raise ListingFailure(folder_id, "quota exceeded")
        return sorted(self._children.get(folder_id, []), key=lambda entry: entry.name)


@pytest.fixture
def drive() -> FakeDrive:
    return FakeDrive()


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    return Console(file=console_buffer, width=200, color_system=None)
