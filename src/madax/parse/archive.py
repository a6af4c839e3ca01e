"""Read MAD/MTD packages.

MAD and MTD are the package formats Hogs of War uses to store and index its
content. A package starts with a table of contents, which is directly followed
by the file data. There is no header and no count. The table is a run of
fixed-size records, and it ends where the data of the first file starts. So
the lowest data offset seen so far is tracked, and once the read position
reaches it, the last record has been read.

This assumes no record points back into the table of contents. It isn't
verified, and a record with a lower offset than the real start of the data
would end the table early.

Two record layouts are known. Both are 24 bytes, but the file name is either
12 bytes followed by a 32-bit value that is never used, or 16 bytes. Nothing in
the package says which one applies, so the caller has to know.

Files within a package are expected to be in a specific order, since the game
and other assets rely on it (for example to know which textures to use). The
order is the order of the records.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from struct import Struct
from typing import Callable, Iterator, Optional, Tuple

from ..errors import (
    ExtractReadError,
    MadArchiveError,
    TruncatedIndexError,
    assert_ascii,
)
from ..utils import file_extension
from .utils import StreamReader, ascii_zterm

LEGACY_RECORD = Struct("<12s i 2I")
assert LEGACY_RECORD.size == 24, LEGACY_RECORD.size
EXTENDED_RECORD = Struct("<16s 2I")
assert EXTENDED_RECORD.size == 24, EXTENDED_RECORD.size

UINT32_MAX = 0xFFFFFFFF

LOG = logging.getLogger(__name__)


class RecordLayout(Enum):
    Legacy = "legacy"
    Extended = "extended"

    def __str__(self) -> str:  # pylint: disable=invalid-str-returned
        return self.value

    @staticmethod
    def from_string(value: str) -> RecordLayout:
        try:
            return RecordLayout(value.lower())
        except ValueError:
            raise ValueError(value) from None

    @property
    def record(self) -> Struct:
        if self == RecordLayout.Legacy:
            return LEGACY_RECORD
        return EXTENDED_RECORD

    def unpack(self, data: bytes) -> Tuple[bytes, int, int]:
        if self == RecordLayout.Legacy:
            raw_name, _padding, offset, length = LEGACY_RECORD.unpack(data)
        else:
            raw_name, offset, length = EXTENDED_RECORD.unpack(data)
        return raw_name, offset, length


@dataclass
class ArchiveEntry:
    index: int
    name: str
    extension: Optional[str]
    offset: int
    length: int


def read_records(
    reader: StreamReader, layout: RecordLayout = RecordLayout.Legacy
) -> Iterator[ArchiveEntry]:
    """Read every record of the table of contents, starting at the reader's
    current position (which should be the start of the package).

    After each entry is yielded, the stream may be used freely, e.g. to read
    the entry's data. When the generator is resumed, the stream is moved back
    to just after the record.

    :raises TruncatedIndexError: If there isn't enough data for a record.
    :raises MadArchiveError: If a file name is not ASCII-encoded.
    """
    record_size = layout.record.size
    lowest_offset = UINT32_MAX
    index = 0
    LOG.debug("Reading %s table of contents...", layout)

    while True:
        index += 1
        data = reader.read_bytes(record_size)
        if len(data) != record_size:
            raise TruncatedIndexError(index, reader.prev)

        position = reader.offset
        raw_name, offset, length = layout.unpack(data)
        lowest_offset = min(lowest_offset, offset)

        with assert_ascii("file name", raw_name, reader.prev, MadArchiveError):
            name = ascii_zterm(raw_name)

        LOG.debug(
            "Entry %d '%s' at %d, data from %d to %d",
            index,
            name,
            reader.prev,
            offset,
            offset + length,
        )
        yield ArchiveEntry(index, name, file_extension(name), offset, length)

        reader.offset = position
        if position >= lowest_offset:
            break

    LOG.debug("Read %d records, data starts at %d", index, lowest_offset)


def scan_index(
    reader: StreamReader,
    layout: RecordLayout = RecordLayout.Legacy,
    on_skip: Optional[Callable[[ArchiveEntry], None]] = None,
) -> Iterator[ArchiveEntry]:
    """Yield the entries of the table of contents that can be extracted.

    Entries without a file extension are skipped, but still count towards
    finding the end of the table.
    """
    for entry in read_records(reader, layout):
        if not entry.extension:
            LOG.warning(
                "Invalid extension for '%s' (index %d), skipping!",
                entry.name,
                entry.index,
            )
            if on_skip:
                on_skip(entry)
            continue
        yield entry


def read_entry_data(reader: StreamReader, entry: ArchiveEntry) -> bytes:
    """Read an entry's data. The stream position is restored afterwards.

    :raises ExtractReadError: If the data extends past the end of the package.
    """
    position = reader.offset
    reader.offset = entry.offset
    try:
        data = reader.read_bytes(entry.length)
    finally:
        reader.offset = position

    if len(data) != entry.length:
        raise ExtractReadError(entry.name, entry.length, len(data))
    return data
