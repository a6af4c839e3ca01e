"""Extract files from Hogs of War MAD/MTD packages."""
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..errors import MadError
from ..parse.archive import RecordLayout
from ..utils import file_name
from .extract import DEFAULT_EXTRACT_ROOT, extract_command, list_command
from .utils import configure_debug_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="madax", description=__doc__)
    parser.add_argument("--extract", metavar="PACKAGE", help="Package to extract")
    parser.add_argument("--list", metavar="PACKAGE", help="Package to list")
    parser.add_argument(
        "--layout",
        type=RecordLayout.from_string,
        choices=list(RecordLayout),
        default=RecordLayout.Legacy,
        help="Index record layout (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_EXTRACT_ROOT,
        help="Directory to extract into (default: %(default)s)",
    )
    parser.add_argument(
        "--manifest",
        action="store_true",
        help="Also write a JSON manifest of the package's records",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if not args.extract and not args.list:
        return 0

    configure_debug_logging("DEBUG" if args.verbose else "INFO")

    package = args.list
    try:
        if args.list:
            list_command(args)
        if args.extract:
            package = args.extract
            extract_command(args)
    except MadError as e:
        sys.stdout.write(f"{file_name(package)}: {e}\n")
        return 1
    return 0
