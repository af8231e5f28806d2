"""A tree of GUI components drawn onto a canvas, with buttons and frames."""

import enum
import itertools
from dataclasses import dataclass, field, replace

from goldfish.graphic import Color

__all__ = ["ComponentType", "GuiEvent", "Component", "Gui", "shift_color"]


class ComponentType(enum.Enum):
    """The kinds of component a GUI can hold."""

    BUTTON = "button"
    FRAME = "frame"
    PROGRESS = "progress"
    RANGE = "range"
    SCROLLBAR = "scrollbar"
    TAB = "tab"
    TEXT = "text"
    WINDOW = "window"


class GuiEvent(enum.Enum):
    """Events passed to component callbacks."""

    PRESS = "press"
    CHANGE = "change"


@dataclass(eq=False)
class Component:
    """One element of the GUI; ``x`` and ``y`` are relative to its parent."""

    key: int
    kind: ComponentType
    x: float
    y: float
    width: float
    height: float
    font: Color
    hover_font: Color
    parent: "int | None" = None
    text: "str | None" = None
    props: dict = field(default_factory=dict)
    callback: object = None
    pressed: bool = False
    texture: object = None


def shift_color(color, dr, dg, db):
    """Return a copy of ``color`` with the given amounts added to its channels."""
    return replace(color, r=color.r + dr, g=color.g + dg, b=color.b + db)


class Gui:
    """Holds components in creation order and draws them onto ``canvas``.

    Callbacks are called as ``callback(gui, key, event)``. ``mouse_x`` and
    ``mouse_y`` hold the pointer position, ``pressed`` and ``hover`` the keys
    of the components under it. When ``button_sound`` is set, clicking a
    button calls ``sound_player(button_sound)``.
    """

    def __init__(self, canvas):
        self.canvas = canvas
        self.border_width = 2.0
        self.border_color_diff = 32
        self.small_font_size = 16.0
        self.base = Color(128, 128, 128)
        self.font = Color(0, 0, 0)
        self.hover_font = Color(0, 0, 0)
        self.pressed = None
        self.hover = None
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.button_sound = None
        self.sound_player = None
        self._components = {}
        self._keys = itertools.count()

    def __iter__(self):
        return iter(list(self._components.values()))

    def __len__(self):
        return len(self._components)

    def add(self, kind, x, y, w, h):
        """Create a component of ``kind`` and return its key."""
        key = next(self._keys)
        self._components[key] = Component(
            key=key,
            kind=ComponentType(kind),
            x=x,
            y=y,
            width=w,
            height=h,
            font=replace(self.font),
            hover_font=replace(self.hover_font),
        )
        return key

    def component(self, key):
        """Return the component with ``key``; raise ``KeyError`` if there is none."""
        try:
            return self._components[key]
        except KeyError:
            raise KeyError(key) from None

    def set_parent(self, key, parent):
        """Place the component ``key`` inside ``parent``."""
        child = self.component(key)
        self.component(parent)
        if parent == key:
            raise ValueError("a component cannot be its own parent")
        child.parent = parent

    def children(self, key):
        """Return the direct children of ``key`` in creation order."""
        return [c for c in self._components.values() if c.parent == key]

    def _subtree(self, key):
        yield key
        for child in self.children(key):
            yield from self._subtree(child.key)

    def remove(self, key):
        """Remove the component ``key`` together with everything inside it."""
        self.component(key)
        doomed = set(self._subtree(key))
        for k in doomed:
            del self._components[k]
        if self.pressed in doomed:
            self.pressed = None
        if self.hover in doomed:
            self.hover = None

    def absolute_rect(self, key):
        """Return ``(x, y, w, h)`` of ``key`` in canvas coordinates.

        A true ``x-base`` or ``y-base`` property measures the offset from the
        right or bottom edge of the parent.
        """
        c = self.component(key)
        if c.parent is None:
            return (c.x, c.y, c.width, c.height)
        px, py, pw, ph = self.absolute_rect(c.parent)
        x = px + pw - c.x - c.width if c.props.get("x-base") else px + c.x
        y = py + ph - c.y - c.height if c.props.get("y-base") else py + c.y
        return (x, y, c.width, c.height)

    def draw_box(self, x, y, w, h, inverted=False):
        """Draw a bevelled box; ``inverted`` makes it look pushed in."""
        d = self.border_color_diff
        b = self.border_width
        light = shift_color(self.base, d, d, d)
        dark = shift_color(self.base, -d, -d, -d)
        top, bottom = (dark, light) if inverted else (light, dark)
        canvas = self.canvas
        canvas.fill_rect(x, y, w, h, self.base)
        canvas.fill_rect(x, y, w, b, top)
        canvas.fill_rect(x, y, b, h, top)
        canvas.fill_rect(x, y + h - b, w, b, bottom)
        canvas.fill_rect(x + w - b, y, b, h, bottom)

    def font_size(self, component):
        """Return the font size of ``component``."""
        return component.props.get("font-size", self.small_font_size)

    def create_button(self, x, y, w, h):
        """Create a button and return its key."""
        return self.add(ComponentType.BUTTON, x, y, w, h)

    def create_frame(self, x, y, w, h):
        """Create a frame and return its key."""
        return self.add(ComponentType.FRAME, x, y, w, h)

    def render_button(self, component):
        """Draw a button: its box, then its label or symbol."""
        c = component
        if c.kind is not ComponentType.BUTTON:
            return
        canvas = self.canvas
        cx, cy, cw, ch = self.absolute_rect(c.key)

        if not c.props.get("no-border"):
            if c.props.get("grab"):
                self.draw_box(cx, cy, cw, ch)
            else:
                self.draw_box(cx, cy, cw, ch, inverted=self.pressed == c.key)

        if c.text is None:
            return

        fsz = self.font_size(c)
        width = canvas.text_width(fsz, c.text)
        height = canvas.text_height(fsz, c.text)
        align = c.props.get("align", 0)
        y = cy + ch / 2 - height / 2
        if align == 0:
            x = cx + cw / 2 - width / 2
        elif align == -1:
            x = cx
        elif align == 1:
            x = cx - width
        else:
            raise ValueError(f"unknown alignment: {align!r}")

        half = self.border_width / 2
        shadow_x, shadow_y = x + half, y + half
        sp = 0.0
        if self.pressed == c.key:
            x += half
            y += half
            sp = half
        color = c.hover_font if self.hover == c.key else c.font

        canvas.clip_push(cx, cy, cw, ch)
        if c.text == "#TriangleUp":
            canvas.fill_polygon(
                color,
                [
                    (cx + cw / 2 + sp, cy + ch / 4 + sp),
                    (cx + cw / 4 + sp, cy + ch / 4 * 3 + sp),
                    (cx + cw / 4 * 3 + sp, cy + ch / 4 * 3 + sp),
                ],
            )
        elif c.text == "#TriangleDown":
            canvas.fill_polygon(
                color,
                [
                    (cx + cw / 2 + sp, cy + ch / 4 * 3 + sp),
                    (cx + cw / 4 * 3 + sp, cy + ch / 4 + sp),
                    (cx + cw / 4 + sp, cy + ch / 4 + sp),
                ],
            )
        elif c.text == "#Cross":
            w = cw / 5 * 3
            h = ch / 5 * 3
            left = cx + sp + cw / 2 - w / 2
            top = cy + sp + ch / 2 - h / 2
            saved = canvas.line_width
            canvas.line_width = 2
            canvas.lines(color, [(left, top), (left + w, top + h)])
            canvas.lines(color, [(left, top + h), (left + w, top)])
            canvas.line_width = saved
        else:
            if c.props.get("no-border"):
                canvas.text(shadow_x, shadow_y, fsz, c.text, Color(0, 0, 0, 128))
            canvas.text(x, y, fsz, c.text, color)
        canvas.clip_pop()

    def render_frame(self, component):
        """Draw the title of a frame centred in it."""
        c = component
        if c.kind is not ComponentType.FRAME or c.text is None:
            return
        canvas = self.canvas
        cx, cy, cw, ch = self.absolute_rect(c.key)
        fsz = self.font_size(c)
        sx = cw / 2 - canvas.text_width(fsz, c.text) / 2
        sy = ch / 2 - canvas.text_height(fsz, c.text) / 2
        canvas.clip_push(cx, cy, cw, ch)
        canvas.text(cx + sx, cy + sy, fsz, c.text, self.font)
        canvas.clip_pop()

    def click_button(self, component):
        """Handle a click on a button: callback, sound, and closing its parent."""
        c = component
        if c.kind is not ComponentType.BUTTON:
            return
        if c.callback is not None:
            c.callback(self, c.key, GuiEvent.PRESS)
        c.pressed = True

        if self.button_sound is not None and not c.props.get("no-sound"):
            if self.sound_player is not None:
                self.sound_player(self.button_sound)

        if c.props.get("close-parent") and c.parent is not None:
            if c.parent in self._components:
                self.remove(c.parent)