from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Type, TypeVar, Union

from typing_extensions import Protocol

T = TypeVar("T", bound="Comparable")


class Comparable(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __le__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __gt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __ge__(self: T, other: T) -> bool:
        pass  # pragma: no cover


class MadError(Exception):
    """Base error for all errors in the library."""


class MadParseError(MadError):
    """An error when parsing data."""


class MadArchiveError(MadParseError):
    """An error when parsing a MAD/MTD package."""


class ArchiveNotFoundError(MadError):
    """The package file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Failed to find {path}")
        self.path = path


class ArchiveOpenError(MadError):
    """The package file exists, but could not be opened."""

    def __init__(self, path: Path):
        super().__init__(f"Failed to load {path}")
        self.path = path


class TruncatedIndexError(MadArchiveError):
    """Fewer bytes than one index record were left to read."""

    def __init__(self, index: int, location: int):
        super().__init__(f"Unexpected index size for index {index} (at {location})")
        self.index = index
        self.location = location


class DirectoryCreateError(MadError):
    def __init__(self, path: Path):
        super().__init__(f"Failed to create directory at {path}")
        self.path = path


class ExtractReadError(MadArchiveError):
    """An entry's data runs past the end of the package."""

    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(
            f"Failed to read {name}: expected {expected} bytes, got {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class ExtractWriteError(MadError):
    def __init__(self, path: Path):
        super().__init__(f"Failed to write {path}")
        self.path = path


def _assert_base(  # pylint: disable=too-many-arguments
    result: bool,
    operator: str,
    name: str,
    expected: Any,
    actual: Any,
    location: Union[int, str],
    error_class: Type[MadError] = MadParseError,
) -> None:
    if not result:
        raise error_class(f"{name}: {actual!r} {operator} {expected!r} (at {location})")


def assert_eq(
    name: str,
    expected: T,
    actual: T,
    location: Union[int, str],
    error_class: Type[MadError] = MadParseError,
) -> None:
    result = actual == expected
    _assert_base(result, "==", name, expected, actual, location, error_class)


@contextmanager
def assert_ascii(
    name: str,
    actual: bytes,
    location: Union[int, str],
    error_class: Type[MadError] = MadParseError,
) -> Iterator[None]:
    try:
        yield
    except UnicodeDecodeError as e:
        raise error_class(f"{name}: {actual!r} is not ASCII (at {location})") from e
