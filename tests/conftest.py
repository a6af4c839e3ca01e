import logging
from pathlib import Path
from typing import Sequence, Tuple, Union

import pytest

from madax.parse.archive import EXTENDED_RECORD, LEGACY_RECORD, RecordLayout

Name = Union[str, bytes]


def pack_record(layout: RecordLayout, name: Name, offset: int, length: int) -> bytes:
    raw = name.encode("ascii") if isinstance(name, str) else name
    if layout == RecordLayout.Legacy:
        return LEGACY_RECORD.pack(raw, 0, offset, length)
    return EXTENDED_RECORD.pack(raw, offset, length)


def pack_archive(
    files: Sequence[Tuple[Name, bytes]], layout: RecordLayout = RecordLayout.Legacy
) -> bytes:
    """Build a package with the data stored in record order, straight after
    the table of contents."""
    offset = layout.record.size * len(files)
    toc = []
    for name, data in files:
        toc.append(pack_record(layout, name, offset, len(data)))
        offset += len(data)
    return b"".join(toc) + b"".join(data for _, data in files)


@pytest.fixture
def write_archive(tmp_path: Path):
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    root_level = root.level
    yield
    # the CLI configures logging globally
    for handler in list(root.handlers):
        if handler.get_name() == "console":
            root.removeHandler(handler)
    root.setLevel(root_level)
    logger = logging.getLogger("madax")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def deny_open(monkeypatch):
    """Make opening files with the given name fail, as if unreadable."""
    path_open = Path.open

    def _deny(name: str) -> None:
        def _open(self, *args, **kwargs):
            if self.name == name:
                raise PermissionError(13, "Permission denied", str(self))
            return path_open(self, *args, **kwargs)

        monkeypatch.setattr(Path, "open", _open)

    return _deny
