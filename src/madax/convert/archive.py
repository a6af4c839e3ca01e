from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from pydantic import BaseModel

from ..parse.archive import ArchiveEntry, RecordLayout


class EntryInfo(BaseModel):
    index: int
    name: str
    offset: int
    length: int
    extracted: bool = True

    @classmethod
    def from_entry(cls, entry: ArchiveEntry, extracted: bool = True) -> EntryInfo:
        return cls(
            index=entry.index,
            name=entry.name,
            offset=entry.offset,
            length=entry.length,
            extracted=extracted,
        )


class ArchiveManifest(BaseModel):
    """All records of a package, in the order they appear in it.

    The game relies on this order, so anything rebuilding a package would
    need it.
    """

    archive: str
    layout: RecordLayout
    entries: List[EntryInfo]

    @classmethod
    def from_entries(
        cls,
        archive: str,
        layout: RecordLayout,
        extracted: Iterable[ArchiveEntry],
        skipped: Iterable[ArchiveEntry],
    ) -> ArchiveManifest:
        infos = [EntryInfo.from_entry(entry) for entry in extracted]
        infos.extend(EntryInfo.from_entry(entry, False) for entry in skipped)
        infos.sort(key=lambda info: info.index)
        return cls(archive=archive, layout=layout, entries=infos)


def manifest_dump(path: Path, manifest: ArchiveManifest) -> None:
    with path.open("w", encoding="utf-8") as f:
        f.write(manifest.model_dump_json(indent=2))


def manifest_load(path: Path) -> ArchiveManifest:
    with path.open("r", encoding="utf-8") as f:
        return ArchiveManifest.model_validate_json(f.read())
