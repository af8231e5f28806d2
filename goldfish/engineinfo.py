"""Command that prints information about the engine build."""

import sys

from goldfish.version import get_version

__all__ = ["format_info", "main"]


def format_info(version):
    """Return the information text for ``version``."""
    return (
        f"GoldFish Engine {version.full}\n"
        f"Build Date   : {version.date}\n"
        f"Thread model : {version.thread}\n"
        f"Renderer     : {version.driver} on {version.backend}\n"
    )


def main(argv=None):
    """Print engine information; return the exit status."""
    sys.stdout.write(format_info(get_version()))
    return 0