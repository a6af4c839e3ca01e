"""Extract MAD/MTD packages to a directory.

Files are written to ``<extract root>/<package name>_<package extension>/``,
with the package and file names lower-cased. Existing files are overwritten.
"""
import logging
import sys
from argparse import Namespace
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from ..errors import (
    ArchiveNotFoundError,
    ArchiveOpenError,
    ExtractWriteError,
    MadArchiveError,
    assert_eq,
)
from ..parse.archive import (
    ArchiveEntry,
    RecordLayout,
    read_entry_data,
    read_records,
    scan_index,
)
from ..parse.utils import StreamReader
from ..utils import (
    create_directory,
    file_exists,
    file_extension,
    file_name,
    lower_case,
    strip_extension,
)
from .archive import ArchiveManifest, manifest_dump

DEFAULT_EXTRACT_ROOT = Path("extract")

LOG = logging.getLogger(__name__)


@contextmanager
def open_archive(archive_path: Path) -> Iterator[StreamReader]:
    if not file_exists(archive_path):
        raise ArchiveNotFoundError(archive_path)

    try:
        f = archive_path.open("rb")
    except OSError as e:
        raise ArchiveOpenError(archive_path) from e

    with f:
        yield StreamReader(f)


def output_directory(archive_path: Path, extract_root: Path) -> Path:
    name = file_name(archive_path)
    package_name = lower_case(strip_extension(name))
    package_extension = lower_case(file_extension(name) or "")
    return extract_root / f"{package_name}_{package_extension}"


def extract_entry(reader: StreamReader, entry: ArchiveEntry, output_dir: Path) -> Path:
    # entry names are only ever bare file names
    assert_eq(
        "file name", file_name(entry.name), entry.name, entry.index, MadArchiveError
    )
    create_directory(output_dir)
    output_path = output_dir / lower_case(entry.name)

    data = read_entry_data(reader, entry)
    LOG.info("Writing %s...", output_path)
    try:
        with output_path.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise ExtractWriteError(output_path) from e
    return output_path


def extract_archive(
    archive_path: Path,
    extract_root: Path = DEFAULT_EXTRACT_ROOT,
    layout: RecordLayout = RecordLayout.Legacy,
    manifest: bool = False,
) -> List[ArchiveEntry]:
    output_dir = output_directory(archive_path, extract_root)
    extracted: List[ArchiveEntry] = []
    skipped: List[ArchiveEntry] = []

    with open_archive(archive_path) as reader:
        LOG.info("Extracting %s...", file_name(archive_path))
        for entry in scan_index(reader, layout, skipped.append):
            extract_entry(reader, entry, output_dir)
            extracted.append(entry)

    LOG.debug("Extracted %d entries, skipped %d", len(extracted), len(skipped))

    if manifest:
        manifest_path = output_dir.with_name(f"{output_dir.name}.json")
        create_directory(manifest_path.parent)
        LOG.info("Writing %s...", manifest_path)
        info = ArchiveManifest.from_entries(
            file_name(archive_path), layout, extracted, skipped
        )
        try:
            manifest_dump(manifest_path, info)
        except OSError as e:
            raise ExtractWriteError(manifest_path) from e

    return extracted


def list_archive(
    archive_path: Path, layout: RecordLayout = RecordLayout.Legacy
) -> List[ArchiveEntry]:
    with open_archive(archive_path) as reader:
        return list(read_records(reader, layout))


def extract_command(args: Namespace) -> None:
    archive_path = Path(args.extract)
    extract_archive(archive_path, args.output_dir, args.layout, args.manifest)


def list_command(args: Namespace) -> None:
    archive_path = Path(args.list)
    entries = list_archive(archive_path, args.layout)
    for entry in entries:
        status = "" if entry.extension else " (skipped)"
        sys.stdout.write(
            f"{entry.index:4d} {entry.name:<16} "
            f"{entry.offset:10d} {entry.length:10d}{status}\n"
        )
