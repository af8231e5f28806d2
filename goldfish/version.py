"""Engine version information."""

import os
import re
import time
import zlib
from dataclasses import dataclass

__all__ = ["VERSION", "Version", "parse_version", "get_version"]

VERSION = "1.0.0"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Version:
    """Describes the engine build."""

    full: str
    date: str
    zlib: str
    driver: str
    backend: str
    thread: str
    major: int
    minor: int
    patch: int


def _leading_int(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_version(text):
    """Split a dotted version string into ``(major, minor, patch)``.

    Each part is read like ``atoi``: leading digits count, the rest is ignored.
    """
    parts = text.split(".", 2)
    if len(parts) < 3:
        raise ValueError(f"version needs three components: {text!r}")
    major, minor, rest = parts
    patch = rest.split(".", 1)[0]
    return _leading_int(major), _leading_int(minor), _leading_int(patch)


def _build_date():
    try:
        stamp = os.path.getmtime(__file__)
    except OSError:
        stamp = time.time()
    moment = time.localtime(stamp)
    return f"{_MONTHS[moment.tm_mon - 1]} {moment.tm_mday:2d} {moment.tm_year}"


def get_version():
    """Return the version information for this engine."""
    major, minor, patch = parse_version(VERSION)
    return Version(
        full=f"{VERSION} -release",
        date=_build_date(),
        zlib=zlib.ZLIB_VERSION,
        driver="none",
        backend="none",
        thread="Win32" if os.name == "nt" else "POSIX",
        major=major,
        minor=minor,
        patch=patch,
    )