"""Game engine core: resource packs, UTF-8 decoding, drawing, threads, null sound and GUI widgets."""

__version__ = "1.0.0"