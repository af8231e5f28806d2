"""Tabbed panes, scrolling text boxes and windows."""

from goldfish.graphic import Color
from goldfish.gui import ComponentType, shift_color
from goldfish.texture import Texture
from goldfish.widgets import create_scrollbar

__all__ = [
    "SCROLLBAR_WIDTH",
    "TITLE_HEIGHT",
    "WINDOW_ICON",
    "create_tab",
    "tab_headers",
    "render_tab",
    "click_tab",
    "create_text",
    "render_text",
    "create_window",
    "render_window",
    "drag_window",
]

SCROLLBAR_WIDTH = 20
TITLE_HEIGHT = 20
WINDOW_ICON = "base:/winicon.png"


def _require(component, kind):
    if component.kind is not kind:
        raise ValueError(f"expected a {kind.value}, got a {component.kind.value}")


def create_tab(gui, x, y, w, h):
    """Create a tabbed pane; pages are components placed inside its frame."""
    b = gui.border_width
    fsz = gui.small_font_size
    key = gui.add(ComponentType.TAB, x, y, w, h)
    frame = gui.create_frame(b, b * 2 + fsz, w - b * 2, h - b * 3 - fsz)
    gui.set_parent(frame, key)
    c = gui.component(key)
    c.props["selected"] = 0
    c.props["frame"] = frame
    return key


def tab_headers(gui, component):
    """Return ``(page_key, (x, y, w, h))`` for each tab header, left to right."""
    c = component
    _require(c, ComponentType.TAB)
    canvas = gui.canvas
    b = gui.border_width
    fsz = gui.font_size(c)
    cx, cy, _, _ = gui.absolute_rect(c.key)
    headers = []
    x = cx
    for page in gui.children(c.props["frame"]):
        title = page.props.get("title", "")
        bw = canvas.text_width(fsz, title) + b * 2 + fsz
        bh = fsz + b * 2
        headers.append((page.key, (x, cy, bw, bh)))
        x += bw
    return headers


def render_tab(gui, component):
    """Draw a tabbed pane and show only the selected page."""
    c = component
    if c.kind is not ComponentType.TAB:
        return
    canvas = gui.canvas
    b = gui.border_width
    fsz = gui.font_size(c)
    _, _, cw, ch = gui.absolute_rect(c.key)

    frame = gui.component(c.props["frame"])
    frame.x, frame.y = b, b * 2 + fsz
    frame.width, frame.height = cw - b * 2, ch - b * 3 - fsz
    fx, fy, fw, fh = gui.absolute_rect(frame.key)
    gui.draw_box(fx - b, fy - b, fw + b * 2, fh + b * 2)

    selected = c.props.get("selected", 0)
    d = gui.border_color_diff * 2
    for index, (page_key, (x, y, bw, bh)) in enumerate(tab_headers(gui, c)):
        page = gui.component(page_key)
        title = page.props.get("title", "")
        color = c.font
        canvas.clip_push(x, y, bw, bh - b)
        gui.draw_box(x, y, bw, bh)
        canvas.clip_pop()
        if index == selected:
            canvas.fill_rect(x + b, y + fsz + b, bw - b * 2, b, gui.base)
            page.props["hide"] = 0
            color = shift_color(color, -d, d, -d)
        else:
            page.props["hide"] = 1
        w = canvas.text_width(fsz, title)
        h = canvas.text_height(fsz, title)
        canvas.text(x + bw / 2 - w / 2, y + bh / 2 - h / 2, fsz, title, color)


def click_tab(gui, component, mouse_x, mouse_y):
    """Select the page whose header holds the pointer; return its index or ``None``."""
    c = component
    if c.kind is not ComponentType.TAB:
        return None
    for index, (_, (x, y, bw, bh)) in enumerate(tab_headers(gui, c)):
        if x <= mouse_x <= x + bw and y <= mouse_y <= y + bh:
            c.props["selected"] = index
            return index
    return None


def create_text(gui, x, y, w, h):
    """Create a text box with a scrollbar along its right edge; return its key."""
    b = gui.border_width
    key = gui.add(ComponentType.TEXT, x, y, w, h)
    scroll = create_scrollbar(gui, b, b, SCROLLBAR_WIDTH - b, h - b * 2)
    gui.component(scroll).props["x-base"] = 1
    gui.set_parent(scroll, key)
    gui.component(key).props["scrollbar"] = scroll
    return key


def _wrap_lines(canvas, width, size, text):
    lines = []
    for paragraph in text.split("\n"):
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if line and canvas.text_width(size, candidate) > width:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)
    return lines


def _draw_wrapped(canvas, x, y, width, size, text, color):
    height = 0.0
    for line in _wrap_lines(canvas, width, size, text):
        canvas.text(x, y + height, size, line, color)
        height += canvas.text_height(size, line or " ")
    return height


def render_text(gui, component):
    """Draw a text box, wrapping its text and sizing the scrollbar to fit it."""
    c = component
    if c.kind is not ComponentType.TEXT:
        return
    canvas = gui.canvas
    b = gui.border_width
    cx, cy, cw, ch = gui.absolute_rect(c.key)
    gui.draw_box(cx, cy, cw, ch, inverted=True)
    half = gui.border_color_diff // 2
    inner = shift_color(gui.base, -half, -half, -half)
    canvas.fill_rect(cx + b, cy + b, cw - b * 2, ch - b * 2, inner)

    scroll = gui.component(c.props["scrollbar"])
    scroll.width = SCROLLBAR_WIDTH - b
    scroll.height = c.height - b * 2
    scroll.props["step"] = c.height - b * 2
    if c.text is None:
        return
    ax, ay = cx + b, cy + b
    aw = cw - SCROLLBAR_WIDTH - b * 3
    ah = ch - b * 2
    sy = scroll.props["value"]
    canvas.clip_push(ax, ay, aw, ah)
    scroll.props["max-value"] = _draw_wrapped(canvas, ax, ay - sy, aw, gui.font_size(c), c.text, c.font)
    canvas.clip_pop()


def create_window(gui, x, y, w, h):
    """Create a window with a close button and a content frame; return its key."""
    key = gui.add(ComponentType.WINDOW, x, y, w, h)
    gui.component(key).props["icon"] = WINDOW_ICON

    close = gui.create_button(5, 5, TITLE_HEIGHT, TITLE_HEIGHT)
    gui.set_parent(close, key)
    button = gui.component(close)
    button.props.update({"x-base": 1, "close-parent": 1})
    button.text = "#Cross"

    frame = gui.create_frame(5, 10 + TITLE_HEIGHT, w - 10, h - TITLE_HEIGHT - 10 - 5)
    gui.set_parent(frame, key)
    gui.component(key).props["frame"] = frame
    return key


def _load_icon(gui, c):
    loader = getattr(gui, "image_loader", None)
    image = loader(c.props["icon"]) if loader is not None else None
    if image is None:
        del c.props["icon"]
        return
    width, height, data = image
    c.texture = Texture(width, height, data)


def render_window(gui, component):
    """Draw a window with its icon and title, and fit its frame to it.

    The icon named by the ``icon`` property is loaded once through
    ``gui.image_loader(name)``, which returns ``(width, height, rgba)`` or
    ``None``; without a loader, or when loading fails, the property is dropped.
    """
    c = component
    if c.kind is not ComponentType.WINDOW:
        return
    canvas = gui.canvas
    cx, cy, cw, ch = gui.absolute_rect(c.key)

    if "icon" in c.props and c.texture is None:
        _load_icon(gui, c)

    color = gui.font
    if not c.props.get("active"):
        d = gui.border_color_diff * 3 / 2
        color = shift_color(color, -d, -d, -d)

    gui.draw_box(cx, cy, cw, ch)

    shift = 0.0
    if c.texture is not None:
        shift = c.texture.width * (TITLE_HEIGHT / c.texture.height)
        canvas.commands.append(
            (
                "texture",
                Color(255, 255, 255, 255),
                (cx + 10, cy + 10 - TITLE_HEIGHT / 4, shift, TITLE_HEIGHT, c.texture),
                canvas.clip.current(),
            )
        )
        shift += 5

    if c.text is not None:
        fsz = gui.small_font_size
        canvas.clip_push(cx, cy, cw - TITLE_HEIGHT - 10, TITLE_HEIGHT + 10)
        canvas.text(cx + 10 + shift, cy + 10 - fsz / 4, fsz, c.text, color)
        canvas.clip_pop()

    frame_key = c.props.get("frame")
    if frame_key is not None:
        try:
            frame = gui.component(frame_key)
        except KeyError:
            return
        frame.width = c.width - 10
        frame.height = c.height - TITLE_HEIGHT - 10 - 5
        if c.props.get("resizable"):
            frame.height -= TITLE_HEIGHT


def drag_window(gui, component, mouse_x, mouse_y):
    """Move a window so that the grab offset stays under the pointer."""
    c = component
    if c.kind is not ComponentType.WINDOW:
        return
    c.x = mouse_x - c.props.get("diff-x", 0)
    c.y = mouse_y - c.props.get("diff-y", 0)