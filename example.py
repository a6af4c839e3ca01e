"""This script is an example of how to use the madax library.

Assuming you have installed madax somehow, for example in a virtual
environment (see README), it can be run like this:

.. code-block:: console

    $ python example.py "<install location with the 'chars' directory>"

Every MAD and MTD package found is extracted to ``./extract``, along with a
manifest of each. This script is only an example, and completely unsupported.
"""
import sys
from pathlib import Path

from madax.convert.extract import extract_archive, list_archive
from madax.errors import MadError

base_path = Path(sys.argv[1])
extract_root = Path.cwd() / "extract"

packages = sorted(
    path
    for path in base_path.rglob("*")
    if path.is_file() and path.suffix.lower() in (".mad", ".mtd")
)

for package in packages:
    print(package.relative_to(base_path))
    try:
        records = list_archive(package)
        entries = extract_archive(package, extract_root, manifest=True)
    except MadError as e:
        print("*** ERROR ***", e)
    else:
        print(f"extracted {len(entries)} of {len(records)} records")
