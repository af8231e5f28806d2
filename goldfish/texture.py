"""Textures and the checks a renderer makes before uploading them."""

import re

__all__ = [
    "nearest_power_of_two",
    "resample",
    "has_extension",
    "parse_major_version",
    "supports_npot",
    "Texture",
]

_NPOT_EXTENSIONS = (
    "GL_ARB_texture_non_power_of_two",
    "GL_ARB_texture_rectangle",
    "GL_NV_texture_rectangle",
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def nearest_power_of_two(n):
    """Return the smallest power of two that is at least ``n``."""
    if n < 1:
        raise ValueError(f"size must be positive: {n!r}")
    return 1 << (int(n) - 1).bit_length()


def resample(width, height, data, target_width, target_height):
    """Scale RGBA ``data`` to the target size by nearest-neighbour sampling."""
    data = bytes(data)
    if len(data) != width * height * 4:
        raise ValueError("pixel data does not match the image size")
    if (width, height) == (target_width, target_height):
        return data
    sx = width / target_width
    sy = height / target_height
    out = bytearray()
    for y in range(target_height):
        row = int(y * sy) * width
        for x in range(target_width):
            pos = (row + int(x * sx)) * 4
            out += data[pos : pos + 4]
    return bytes(out)


def has_extension(extensions, query):
    """Tell whether ``query`` appears in a space-separated extension string.

    Only the first occurrence is examined; it counts when a space or the end
    of the string follows it.
    """
    if not extensions:
        return False
    found = extensions.find(query)
    if found < 0:
        return False
    end = found + len(query)
    return end == len(extensions) or extensions[end] == " "


def parse_major_version(text):
    """Return the major number of a version string such as ``"2.1 Mesa"``, or 0."""
    head = text.split(".", 1)[0]
    match = _LEADING_INT.match(head)
    return int(match.group(1)) if match else 0


def supports_npot(version_text, extensions):
    """Tell whether textures whose sides are not powers of two can be used."""
    if version_text is not None and parse_major_version(version_text) >= 2:
        return True
    return any(has_extension(extensions, name) for name in _NPOT_EXTENSIONS)


class Texture:
    """An RGBA image prepared for upload.

    Without ``npot`` support the pixels are stretched to power-of-two sides;
    ``internal_width`` and ``internal_height`` give the stored size.
    """

    def __init__(self, width, height, data, npot=False):
        if width < 1 or height < 1:
            raise ValueError("texture sides must be positive")
        if npot:
            internal_width, internal_height = width, height
        else:
            internal_width = nearest_power_of_two(width)
            internal_height = nearest_power_of_two(height)
        self.width = width
        self.height = height
        self.internal_width = internal_width
        self.internal_height = internal_height
        self.data = resample(width, height, data, internal_width, internal_height)
        self.keep_aspect = False

    def texture_scale(self):
        """Return the ``(x, y)`` factors applied to texture coordinates when drawing."""
        tw = self.width / self.internal_width
        th = self.height / self.internal_height
        sx = sy = 1.0
        if self.keep_aspect:
            if tw > th:
                sx = th / tw
            else:
                sy = tw / th
        return sx, sy