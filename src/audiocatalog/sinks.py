"""Storage sinks that persist the exported catalog."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from .utils.logging import get_logger

LOGGER = get_logger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class StorageSink(Protocol):
    """Destination for the rendered catalog bytes."""

    def write(self, data: bytes) -> Optional[bool]:
        ...


class FileSink:
    """Write the catalog to a local file, replacing it atomically."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def write(self, data: bytes) -> None:
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Wrote %d bytes to %s", len(data), self.path)
