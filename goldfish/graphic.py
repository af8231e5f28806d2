"""Drawing primitives: colours, clip rectangles, camera matrices and a recording canvas."""

import math
from dataclasses import dataclass

__all__ = [
    "Color",
    "ClipStack",
    "perspective_matrix",
    "look_at_matrix",
    "Canvas",
]


@dataclass
class Color:
    """An RGBA colour with channels in the 0-255 range."""

    r: float
    g: float
    b: float
    a: float = 255.0


class ClipStack:
    """A stack of clip rectangles, each clamped to the one below it."""

    def __init__(self):
        self._rects = []

    def __len__(self):
        return len(self._rects)

    def push(self, x, y, w, h):
        """Push a rectangle, clamped to the current one, and return what was pushed."""
        if self._rects:
            old_x, old_y, old_w, old_h = self._rects[-1]
            if x < old_x:
                x = old_x
            if y < old_y:
                y = old_y
            if x + w > old_x + old_w:
                w = (old_x + old_w) - x
            if y + h > old_y + old_h:
                h = (old_y + old_h) - y
        rect = (x, y, w, h)
        self._rects.append(rect)
        return rect

    def pop(self):
        """Remove the top rectangle and return the one now current, or ``None``."""
        if self._rects:
            self._rects.pop()
        return self.current()

    def current(self):
        """Return the active clip rectangle, or ``None`` when nothing clips."""
        return self._rects[-1] if self._rects else None

    def scissor(self, height):
        """Return the current rectangle with its origin at the bottom of a view ``height`` tall."""
        rect = self.current()
        if rect is None:
            return None
        x, y, w, h = rect
        return (x, height - y - h, w, h)


def perspective_matrix(width, height, fovy, znear, zfar):
    """Return a column-major 4x4 perspective projection as a list of 16 floats."""
    if height == 0:
        raise ValueError("height must not be zero")
    if znear == zfar:
        raise ValueError("znear and zfar must differ")
    aspect = width / height
    f = 1.0 / math.tan(fovy / 180 * math.pi / 2)
    matrix = [0.0] * 16
    matrix[0] = f / aspect
    matrix[5] = f
    matrix[10] = (zfar + znear) / (znear - zfar)
    matrix[14] = (2.0 * zfar * znear) / (znear - zfar)
    matrix[11] = -1.0
    return matrix


def _normalize(v):
    length = math.sqrt(sum(c * c for c in v))
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return tuple(c / length for c in v)


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def look_at_matrix(camera, lookat):
    """Return a column-major 4x4 view matrix for a camera looking at ``lookat`` with +Y up."""
    forward = _normalize(tuple(t - c for t, c in zip(lookat, camera)))
    side = _normalize(_cross(forward, (0.0, 1.0, 0.0)))
    up = _cross(side, forward)

    matrix = [0.0] * 16
    for col in range(3):
        matrix[4 * col + 0] = side[col]
        matrix[4 * col + 1] = up[col]
        matrix[4 * col + 2] = -forward[col]
    matrix[12] = -_dot(side, camera)
    matrix[13] = -_dot(up, camera)
    matrix[14] = _dot(forward, camera)
    matrix[15] = 1.0
    return matrix


def _default_measure(size, text):
    lines = text.split("\n")
    width = max(len(line) for line in lines) * size / 2
    return width, size * len(lines)


class Canvas:
    """A 2D drawing surface that records every operation in ``commands``.

    Each command is a ``(kind, color, geometry, clip)`` tuple, where ``clip``
    is the clip rectangle active when it was drawn. ``measure(size, text)``
    returns the ``(width, height)`` of a text; by default each character is
    half the font size wide and each line one font size tall.
    """

    def __init__(self, width, height, measure=None):
        self.width = width
        self.height = height
        self.measure = measure or _default_measure
        self.clip = ClipStack()
        self.commands = []
        self.line_width = 1.0
        self.point_size = 1.0

    def _record(self, kind, color, geometry):
        self.commands.append((kind, color, geometry, self.clip.current()))

    def fill_rect(self, x, y, w, h, color):
        """Fill an axis-aligned rectangle."""
        self._record("rect", color, (x, y, w, h))

    def fill_polygon(self, color, points):
        """Fill a convex polygon given as a sequence of ``(x, y)`` points."""
        points = tuple(tuple(p) for p in points)
        if len(points) < 3:
            raise ValueError("a polygon needs at least three points")
        self._record("polygon", color, points)

    def lines(self, color, points):
        """Draw line segments; ``points`` holds the two ends of each segment in turn."""
        points = tuple(tuple(p) for p in points)
        if len(points) % 2:
            raise ValueError("line segments need an even number of points")
        self._record("lines", color, points)

    def text(self, x, y, size, text, color):
        """Draw ``text`` with its top-left corner at ``(x, y)``."""
        self._record("text", color, (x, y, size, text))

    def text_width(self, size, text):
        """Return the width of ``text`` at font ``size``."""
        return self.measure(size, text)[0]

    def text_height(self, size, text):
        """Return the height of ``text`` at font ``size``."""
        return self.measure(size, text)[1]

    def clip_push(self, x, y, w, h):
        """Restrict drawing to a rectangle inside the current clip; return the rectangle."""
        return self.clip.push(x, y, w, h)

    def clip_pop(self):
        """Drop the innermost clip rectangle; return the one now active, or ``None``."""
        return self.clip.pop()