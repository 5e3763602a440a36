"""Serialisation of a finished catalog into tab-separated lines."""
from __future__ import annotations

from typing import List

from .errors import WriteFailure
from .schema import Catalog
from .sinks import StorageSink
from .utils.logging import get_logger

LOGGER = get_logger(__name__)


def render_lines(catalog: Catalog) -> List[str]:
    """Return one ``series<TAB>dir<TAB>name`` line per entry, in catalog order."""

    lines: List[str] = []
    for entry in catalog.entries():
        if any("\t" in field or "\n" in field for field in entry.as_record()):
            LOGGER.warning("Entry %r contains a tab or newline; the exported row will be malformed", entry.name)
        lines.append(entry.tsv_line())
    return lines


class CatalogExporter:
    """Render a catalog and hand it to a storage sink in a single write."""

    def __init__(self, sink: StorageSink, encoding: str = "utf-8") -> None:
        self.sink = sink
        self.encoding = encoding

    def export(self, catalog: Catalog) -> List[str]:
        lines = render_lines(catalog)
        data = "".join(lines).encode(self.encoding)
        try:
            accepted = self.sink.write(data)
        except OSError as exc:
            raise WriteFailure(f"Failed to write catalog: {exc}") from exc
        if accepted is False:
            raise WriteFailure("Storage sink rejected the catalog")
        LOGGER.info("Exported %d catalog lines", len(lines))
        return lines
