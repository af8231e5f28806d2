"""Progress bars, range sliders and scrollbars."""

import math

from goldfish.gui import ComponentType, GuiEvent, shift_color

__all__ = [
    "RANGE_GRAB_HEIGHT",
    "LINE_HEIGHT",
    "create_progress",
    "progress_segments",
    "render_progress",
    "create_range",
    "range_value_at",
    "render_range",
    "create_scrollbar",
    "scroll_up",
    "scroll_down",
    "scrollbar_value_at",
    "render_scrollbar",
]

RANGE_GRAB_HEIGHT = 20
LINE_HEIGHT = 8


def _round(value):
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _require(component, kind):
    if component.kind is not kind:
        raise ValueError(f"expected a {kind.value}, got a {component.kind.value}")


def _span(component):
    lo = component.props["min-value"]
    hi = component.props["max-value"]
    if hi == lo:
        raise ValueError("min-value and max-value must differ")
    return lo, hi


def create_progress(gui, x, y, w, h):
    """Create a progress bar running from 0 to 100 in 10 segments; return its key."""
    key = gui.add(ComponentType.PROGRESS, x, y, w, h)
    c = gui.component(key)
    c.props.update({"value": 0.0, "min-value": 0.0, "max-value": 100.0, "split": 10})
    d = gui.border_color_diff * 2
    c.font = shift_color(c.font, -d, d, -d)
    return key


def progress_segments(gui, component):
    """Return the ``(x, y, w, h)`` rectangles filled to show the current value."""
    c = component
    _require(c, ComponentType.PROGRESS)
    lo, hi = _span(c)
    val = c.props["value"]
    split = c.props["split"]
    if split <= 0:
        raise ValueError("split must be positive")
    b = gui.border_width
    cx, cy, cw, ch = gui.absolute_rect(c.key)

    sw = b * 2
    bh = (ch - b * 2) - sw * 2
    bw = (cw - sw - b * 2) / split - sw
    rem = ((val - lo) / (hi - lo)) * (cw - sw - b * 2 - sw * split)
    if rem > 0 and bw <= 0:
        raise ValueError("progress bar is too narrow for its segments")

    segments = []
    x = cx + b
    while rem > 0:
        x += sw
        segments.append((x, cy + b + sw, min(bw, rem), bh))
        x += bw
        rem -= bw
    return segments


def render_progress(gui, component):
    """Draw a progress bar."""
    c = component
    if c.kind is not ComponentType.PROGRESS:
        return
    b = gui.border_width
    cx, cy, cw, ch = gui.absolute_rect(c.key)
    gui.draw_box(cx, cy, cw, ch, inverted=True)
    half = gui.border_color_diff // 2
    inner = shift_color(gui.base, -half, -half, -half)
    gui.canvas.fill_rect(cx + b, cy + b, cw - b * 2, ch - b * 2, inner)
    for rect in progress_segments(gui, c):
        gui.canvas.fill_rect(*rect, c.font)


def create_range(gui, x, y, w, h):
    """Create a slider with a grab button running from 0 to 100; return its key."""
    h = max(h, RANGE_GRAB_HEIGHT + LINE_HEIGHT / 2)
    key = gui.add(ComponentType.RANGE, x, y, w, h)
    c = gui.component(key)
    c.props.update({"value": 0.0, "min-value": 0.0, "max-value": 100.0})

    grab = gui.create_button(0, 0, RANGE_GRAB_HEIGHT / 2, RANGE_GRAB_HEIGHT)
    gui.set_parent(grab, key)
    c.props["grab"] = grab
    gui.component(grab).props.update({"no-sound": 1, "grab": 1})
    return key


def range_value_at(gui, component, mouse_x):
    """Return the slider value for the pointer at ``mouse_x`` while dragging."""
    c = component
    _require(c, ComponentType.RANGE)
    lo, hi = _span(c)
    grab = gui.component(c.props["grab"])
    cx, _, cw, _ = gui.absolute_rect(c.key)
    track = cw - grab.width
    if track == 0:
        raise ValueError("slider has no room to move")

    v = mouse_x - grab.props.get("diff-x", 0) - cx
    d = (v / track) * (hi - lo) + lo
    step = c.props.get("step")
    if step:
        d = _round(d / step) * step
    return min(max(d, lo), hi)


def render_range(gui, component):
    """Draw a slider, place its grab and follow the pointer while it is held."""
    c = component
    if c.kind is not ComponentType.RANGE:
        return
    canvas = gui.canvas
    b = gui.border_width
    grab = gui.component(c.props["grab"])
    cx, cy, cw, ch = gui.absolute_rect(c.key)
    gw, gh = grab.width, grab.height
    lo, hi = _span(c)
    val = c.props["value"]

    half = gui.border_color_diff // 2
    track_color = shift_color(gui.base, -half, -half, -half)
    bw, bh = cw, 4
    bx, by = cx, cy + gh / 2 - bh / 2
    gui.draw_box(bx, by, bw, bh, inverted=True)
    canvas.fill_rect(bx + b, by + b, bw - b * 2, bh - b * 2, track_color)

    step = c.props.get("step")
    if step is not None and step > 0:
        lw = cw - gw
        sw = (step / (hi - lo)) * lw
        if sw >= 1:
            d = gui.border_color_diff
            tick_color = shift_color(gui.base, d, d, d)
            lx = 0.0
            while lx <= lw:
                canvas.fill_rect(cx + lx + gw / 2, cy + (gh - LINE_HEIGHT / 2), 1, LINE_HEIGHT, tick_color)
                lx += sw

    grab.x = (cw - gw) * ((val - lo) / (hi - lo))
    grab.y = 0

    if gui.pressed == grab.key:
        old = c.props["value"]
        new = range_value_at(gui, c, gui.mouse_x)
        c.props["value"] = new
        if old != new and c.callback is not None:
            c.callback(gui, c.key, GuiEvent.CHANGE)


def create_scrollbar(gui, x, y, w, h):
    """Create a vertical scrollbar with arrow buttons and a grab; return its key."""
    key = gui.add(ComponentType.SCROLLBAR, x, y, w, h)
    up = gui.create_button(0, 0, w, w)
    down = gui.create_button(0, 0, w, w)
    grab = gui.create_button(0, w, w, w * 4)

    gui.component(up).text = "#TriangleUp"
    gui.component(down).text = "#TriangleDown"
    gui.component(down).props["y-base"] = 1

    for child in (up, down, grab):
        gui.set_parent(child, key)

    c = gui.component(key)
    c.props.update({"min-value": 0.0, "step": 10.0, "value": 0.0, "max-value": 100.0, "grab": grab})
    gui.component(up).props["scrollbar"] = key
    gui.component(down).props["scrollbar"] = key
    gui.component(grab).props.update({"no-sound": 1, "grab": 1})

    gui.component(up).callback = scroll_up
    gui.component(down).callback = scroll_down
    return key


def _notify_change(gui, bar, old):
    if old != bar.props["value"] and bar.callback is not None:
        bar.callback(gui, bar.key, GuiEvent.CHANGE)


def scroll_up(gui, key, event):
    """Arrow-button callback moving the parent scrollbar up by half a step."""
    if event is not GuiEvent.PRESS:
        return
    bar = gui.component(gui.component(key).parent)
    step = bar.props["step"]
    lim = bar.props["min-value"]
    old = val = bar.props["value"]
    val -= step / 2
    if val < lim:
        val = lim
    if step < lim:
        val = lim
    bar.props["value"] = val
    _notify_change(gui, bar, old)


def scroll_down(gui, key, event):
    """Arrow-button callback moving the parent scrollbar down by half a step."""
    if event is not GuiEvent.PRESS:
        return
    bar = gui.component(gui.component(key).parent)
    step = bar.props["step"]
    lo = bar.props["min-value"]
    lim = bar.props["max-value"]
    old = val = bar.props["value"]
    val += step / 2
    if val > lim - step:
        val = lim - step
    if step > lim:
        val = lo
    bar.props["value"] = val
    _notify_change(gui, bar, old)


def _scroll_params(component):
    lo, hi = _span(component)
    step = min(component.props["step"], hi - lo)
    if step == 0:
        raise ValueError("step must not be zero")
    return lo, hi, step


def scrollbar_value_at(gui, component, mouse_y):
    """Return the scrollbar value for the pointer at ``mouse_y`` while dragging."""
    c = component
    _require(c, ComponentType.SCROLLBAR)
    lo, hi, step = _scroll_params(c)
    grab = gui.component(c.props["grab"])
    _, cy, cw, ch = gui.absolute_rect(c.key)
    track = ch - cw * 2
    if track == 0:
        raise ValueError("scrollbar has no room to move")
    v = int(mouse_y - grab.props.get("diff-y", 0) - (cy + cw))
    d = lo + (hi - lo) / track * v
    if d < lo:
        d = lo
    elif d > hi - step:
        d = hi - step
    return d


def render_scrollbar(gui, component):
    """Draw a scrollbar, size and place its grab, and follow the pointer while held."""
    c = component
    if c.kind is not ComponentType.SCROLLBAR:
        return
    cx, cy, cw, ch = gui.absolute_rect(c.key)
    lighter = gui.border_color_diff * 2 / 3
    gui.canvas.fill_rect(cx, cy, cw, ch, shift_color(gui.base, lighter, lighter, lighter))

    lo, hi, step = _scroll_params(c)
    val = c.props["value"]
    grab = gui.component(c.props["grab"])

    track = ch - cw * 2
    steph = track / ((hi - lo) / step)
    stepy = steph * (val / step)
    if stepy + steph > track:
        stepy = track - steph
    grab.width = cw
    grab.height = steph
    grab.x = 0
    grab.y = cw + stepy

    if gui.pressed == grab.key:
        old = c.props["value"]
        new = scrollbar_value_at(gui, c, gui.mouse_y)
        c.props["value"] = new
        if old != new and c.callback is not None:
            c.callback(gui, c.key, GuiEvent.CHANGE)