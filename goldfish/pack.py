"""Command that packs a directory tree into a resource archive."""

import os
import sys
from pathlib import Path

from goldfish.resource import Resource
from goldfish.version import get_version

__all__ = ["add_all", "main"]


class _DirectoryError(OSError):
    def __init__(self, directory, added):
        super().__init__(f"Could not open directory: {directory}")
        self.added = added


def add_all(resource, base, path):
    """Add every file below ``base/path`` to ``resource`` and return how many were read.

    Names are stored relative to ``base``. A directory that cannot be opened
    raises ``OSError``; files added before that remain in ``resource``.
    """
    directory = f"{base}/{path}"
    try:
        with os.scandir(directory) as listing:
            entries = sorted(listing, key=lambda entry: entry.name)
    except OSError as exc:
        raise _DirectoryError(directory, 0) from exc

    count = 0
    for entry in entries:
        name = path + entry.name
        if entry.is_dir():
            try:
                count += add_all(resource, base, name + "/")
            except _DirectoryError as exc:
                exc.added += count
                raise
        else:
            try:
                data = Path(entry.path).read_bytes()
            except OSError:
                continue
            resource.add(name, data)
            count += 1
    return count


def main(argv=None):
    """Pack files into an archive; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(f"GoldFish Engine Resource Packer {get_version().full}")

    out = None
    base = "."
    starts = None
    remaining = iter(args)
    for arg in remaining:
        if arg.startswith("-"):
            if arg == "-d":
                base = next(remaining, None)
            else:
                print(f"Invalid flag: {arg}", file=sys.stderr)
                return 1
        elif out is None:
            out = arg
        else:
            starts = [arg, *remaining]
            break

    if out is None or base is None:
        print("Usage: pack [-d basedir] output", file=sys.stderr)
        return 1

    status = 0
    count = 0
    resource = Resource()
    for start in starts if starts is not None else [None]:
        try:
            count += add_all(resource, base, "" if start is None else start + "/")
        except _DirectoryError as exc:
            count += exc.added
            print("Could not open directory", file=sys.stderr)
            status = 1
            break

    print(f"Found {count} files")
    try:
        resource.write(out, progress=True)
    except OSError as exc:
        print(f"Could not write {out}: {exc}", file=sys.stderr)
        status = 1
    return status