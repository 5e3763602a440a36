"""Pydantic models and helpers describing remote entries and the catalog."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

TSV_COLUMNS = ("series", "dir", "name")


class RemoteEntry(BaseModel):
    """A file or folder as reported by the remote listing API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    type_tag: str = Field(alias="mimeType")


@dataclass(slots=True, frozen=True)
class TraversalContext:
    """Position of the walk in the remote tree.

    A new context is derived for every folder descended into, so sibling
    folders never share path segments.
    """

    series_name: str
    parent_path: str
    current_id: str
    is_root_level: bool = False

    @classmethod
    def root(cls, root_id: str) -> "TraversalContext":
        return cls(series_name="", parent_path="", current_id=root_id, is_root_level=True)

    def child_path(self, folder_name: str) -> str:
        return f"{self.parent_path}/{folder_name}"

    def with_series(self, series_name: str) -> "TraversalContext":
        return replace(self, series_name=series_name)

    def descend(self, folder: RemoteEntry) -> "TraversalContext":
        """Return the context for walking inside ``folder``."""

        series_name = folder.name if self.is_root_level else self.series_name
        return TraversalContext(
            series_name=series_name,
            parent_path=self.child_path(folder.name),
            current_id=folder.id,
        )


class CatalogEntry(BaseModel):
    """One catalogued audio file."""

    series: str
    dir: str
    name: str

    def as_record(self) -> Tuple[str, str, str]:
        """Return the exported columns in ``series, dir, name`` order."""

        return (self.series, self.dir, self.name)

    def tsv_line(self) -> str:
        return "\t".join(self.as_record()) + "\n"


class CatalogSummary(BaseModel):
    """Aggregate summary information of a catalog."""

    total_entries: int
    series: Dict[str, int]

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> "CatalogSummary":
        counts: Dict[str, int] = {}
        total = 0
        for entry in entries:
            counts[entry.series] = counts.get(entry.series, 0) + 1
            total += 1
        return cls(total_entries=total, series=counts)


class Catalog:
    """Audio entries grouped by series, in first-encountered order."""

    def __init__(self) -> None:
        self._groups: Dict[str, List[CatalogEntry]] = {}

    def add(self, entry: CatalogEntry) -> None:
        self._groups.setdefault(entry.series, []).append(entry)

    def series(self) -> List[str]:
        return list(self._groups)

    def group(self, series: str) -> List[CatalogEntry]:
        return list(self._groups.get(series, ()))

    def entries(self) -> Iterator[CatalogEntry]:
        """Yield every entry, group by group, in export order."""

        for group in self._groups.values():
            yield from group

    def summary(self) -> CatalogSummary:
        return CatalogSummary.from_entries(self.entries())

    def __contains__(self, series: object) -> bool:
        return series in self._groups

    def __iter__(self) -> Iterator[Tuple[str, List[CatalogEntry]]]:
        for series, group in self._groups.items():
            yield series, list(group)

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())

    def __repr__(self) -> str:
        return f"Catalog(series={len(self._groups)}, entries={len(self)})"
