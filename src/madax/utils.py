"""Path and file name helpers.

These follow the conventions of the game's own tooling: extensions are the
text after the last dot of the final path component, and both ``/`` and ``\\``
separate path components regardless of platform.
"""
import re
from pathlib import Path
from typing import Optional, Union

from .errors import DirectoryCreateError

PathLike = Union[str, Path]

SEPARATORS = re.compile(r"[\\/]")


def file_exists(path: PathLike) -> bool:
    return Path(path).is_file()


def file_name(path: PathLike) -> str:
    return SEPARATORS.split(str(path))[-1]


def strip_extension(name: PathLike) -> str:
    name = file_name(name)
    stem, sep, _ = name.rpartition(".")
    if not sep:
        return name
    return stem


def file_extension(name: PathLike) -> Optional[str]:
    """Return the extension of the file name, without the dot.

    Returns ``None`` if there is no dot, or nothing follows the last one.
    """
    _, sep, ext = file_name(name).rpartition(".")
    if not sep or not ext:
        return None
    return ext


def lower_case(path: str) -> str:
    return path.lower()


def create_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(path) from e
