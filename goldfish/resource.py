"""Resource archives: zlib-compressed named blobs, or a plain directory."""

import logging
import os
import sys
import zlib
from dataclasses import dataclass
from pathlib import Path

__all__ = ["ResourceError", "Resource"]

log = logging.getLogger(__name__)

CHUNK = 32767
NAME_SIZE = 128
_SIZE_BYTES = 4


class ResourceError(Exception):
    """A resource archive could not be opened or an entry could not be read."""


@dataclass
class _Entry:
    compressed: "bytes | None" = None
    data: "bytes | None" = None


def _encode_name(name):
    return name.encode("utf-8", "surrogateescape")


def _decode_name(raw):
    return raw.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")


def _deflate(data, progress):
    compressor = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION)
    out = bytearray()
    for start in range(0, len(data), CHUNK):
        piece = compressor.compress(data[start : start + CHUNK])
        if start + CHUNK >= len(data):
            piece += compressor.flush()
        out += piece
        if progress:
            print("." * (len(piece) // CHUNK + 1), end="", flush=True)
    return bytes(out)


class Resource:
    """A set of named data blobs backed by an archive file or a directory.

    With no path the resource starts empty. A directory path serves files
    from that directory directly; any other path is read as an archive.
    """

    def __init__(self, path=None):
        self._entries = {}
        self._directory = None
        if path is None:
            log.debug("Created empty resource")
            return
        if os.path.isdir(path):
            self._directory = Path(path)
            log.debug("Created resource")
            return
        self._load(path)

    def _load(self, path):
        try:
            handle = open(path, "rb")
        except OSError as exc:
            log.debug("Failed to create resource")
            raise ResourceError(f"cannot open resource {path}") from exc
        log.debug("Created resource")
        with handle:
            while True:
                header = handle.read(NAME_SIZE)
                if len(header) < NAME_SIZE or header[0] == 0:
                    break
                size_bytes = handle.read(_SIZE_BYTES)
                if len(size_bytes) < _SIZE_BYTES:
                    raise ResourceError(f"truncated entry header in {path}")
                size = int.from_bytes(size_bytes, "big")
                compressed = handle.read(size)
                if len(compressed) < size:
                    raise ResourceError(f"truncated entry data in {path}")
                name = _decode_name(header)
                self._entries[name] = _Entry(compressed=compressed)
                log.debug("%s: Compressed to %d bytes", name, size)

    def get(self, name):
        """Return the data stored under ``name``; raise ``KeyError`` if absent."""
        if self._directory is not None:
            try:
                data = (self._directory / name).read_bytes()
            except OSError as exc:
                raise KeyError(name) from exc
            log.debug("%s: File found", name)
            return data

        entry = self._entries.get(name)
        if entry is None:
            raise KeyError(name)
        if entry.data is None:
            log.debug("%s: Not cached, decompressing", name)
            entry.data = self._inflate(name, entry.compressed)
        else:
            log.debug("%s: Using cache", name)
        return entry.data

    @staticmethod
    def _inflate(name, compressed):
        decompressor = zlib.decompressobj()
        try:
            data = decompressor.decompress(compressed)
        except zlib.error as exc:
            raise ResourceError(f"{name}: corrupt data") from exc
        if not data:
            raise ResourceError(f"{name}: no data")
        if compressed:
            log.debug("%s: Compression rate is %.2f%%", name, len(data) / len(compressed) * 100)
        return data

    def add(self, name, data):
        """Store ``data`` under ``name``; ignored for directories and empty data."""
        if self._directory is not None or not data:
            return
        if len(_encode_name(name)) >= NAME_SIZE:
            raise ValueError(f"name longer than {NAME_SIZE - 1} bytes: {name!r}")
        self._entries[name] = _Entry(data=bytes(data))

    def write(self, path, progress=False):
        """Write the entries to an archive at ``path``; does nothing for directories."""
        if self._directory is not None:
            return
        with open(path, "wb") as out:
            for name, entry in self._entries.items():
                fresh = entry.compressed is None
                if progress and fresh:
                    print(name, end="", flush=True)
                out.write(_encode_name(name).ljust(NAME_SIZE, b"\0"))
                if fresh:
                    entry.compressed = _deflate(entry.data, progress)
                out.write(len(entry.compressed).to_bytes(_SIZE_BYTES, "big"))
                out.write(entry.compressed)
                if progress and fresh:
                    print(f" {len(entry.data) / len(entry.compressed) * 100:.2f}%")
            out.write(bytes(NAME_SIZE))

    def names(self):
        """Return the entry names in insertion order."""
        return list(self._entries)

    def __contains__(self, name):
        if self._directory is not None:
            return (self._directory / name).is_file()
        return name in self._entries