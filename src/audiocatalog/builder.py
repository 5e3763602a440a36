"""Depth-first walk of a remote folder tree into a grouped audio catalog."""
from __future__ import annotations

from typing import Optional, Protocol, Sequence

from rich.console import Console

from .classifier import EntryKind, classify
from .normalizer import normalize_name
from .schema import Catalog, CatalogEntry, RemoteEntry, TraversalContext
from .utils.logging import get_logger

LOGGER = get_logger(__name__)


class RemoteLister(Protocol):
    """Lists the immediate children of a remote folder, ordered by name."""

    def list_children(self, folder_id: str) -> Sequence[RemoteEntry]:
        ...


class CatalogBuilder:
    """Walk a remote tree and collect its audio files grouped by series.

    The series of a file is the folder directly beneath the root that
    contains it. Errors raised by the lister are not caught; a failed listing
    aborts the whole build.
    """

    def __init__(self, lister: RemoteLister, console: Optional[Console] = None) -> None:
        self.lister = lister
        self.console = console or Console()

    def build(self, root_id: str) -> Catalog:
        LOGGER.info("Building catalog from root %s", root_id)
        catalog = self._walk(TraversalContext.root(root_id), Catalog())
        LOGGER.info("Catalogued %d audio files in %d series", len(catalog), len(catalog.series()))
        return catalog

    def _walk(self, context: TraversalContext, catalog: Catalog) -> Catalog:
        children = self.lister.list_children(context.current_id)
        LOGGER.debug("Listed %d children of %s", len(children), context.current_id)
        for child in children:
            kind = classify(child.type_tag)
            if kind is EntryKind.FOLDER:
                child_context = context.descend(child)
                self._progress(child_context.parent_path)
                catalog = self._walk(child_context, catalog)
                if context.is_root_level:
                    # later root-level files belong to the most recent series
                    context = context.with_series(child.name)
            elif kind is EntryKind.AUDIO_FILE:
                catalog.add(
                    CatalogEntry(
                        series=normalize_name(context.series_name),
                        dir=context.parent_path,
                        name=normalize_name(child.name),
                    )
                )
                self._progress(f"  > {child.name}")
        return catalog

    def _progress(self, line: str) -> None:
        self.console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
