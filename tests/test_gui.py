import pytest

from goldfish.graphic import Canvas, Color
from goldfish.gui import ComponentType, Gui, GuiEvent


@pytest.fixture
def gui():
    return Gui(Canvas(640, 480))


def _texts(canvas):
    return [cmd for cmd in canvas.commands if cmd[0] == "text"]


def test_add_returns_distinct_keys(gui):
    a = gui.create_button(0, 0, 10, 10)
    b = gui.create_frame(0, 0, 10, 10)
    assert a != b
    assert gui.component(a).kind is ComponentType.BUTTON
    assert gui.component(b).kind is ComponentType.FRAME
    assert len(gui) == 2


def test_missing_component_raises(gui):
    with pytest.raises(KeyError):
        gui.component(42)


def test_absolute_rect_adds_parent_offset(gui):
    parent = gui.create_frame(10, 20, 100, 50)
    child = gui.create_button(5, 6, 7, 8)
    gui.set_parent(child, parent)
    px, py, _, _ = gui.absolute_rect(parent)
    ax, ay, aw, ah = gui.absolute_rect(child)
    c = gui.component(child)
    assert (ax - px, ay - py, aw, ah) == (c.x, c.y, c.width, c.height)


def test_absolute_rect_x_base_measures_from_right(gui):
    parent = gui.create_frame(10, 20, 100, 50)
    child = gui.create_button(5, 6, 7, 8)
    gui.set_parent(child, parent)
    gui.component(child).props["x-base"] = 1
    px, _, pw, _ = gui.absolute_rect(parent)
    ax, _, aw, _ = gui.absolute_rect(child)
    assert ax + aw + gui.component(child).x == px + pw


def test_set_parent_to_self_rejected(gui):
    key = gui.create_frame(0, 0, 10, 10)
    with pytest.raises(ValueError):
        gui.set_parent(key, key)


def test_remove_takes_descendants(gui):
    root = gui.create_frame(0, 0, 100, 100)
    mid = gui.create_frame(0, 0, 50, 50)
    leaf = gui.create_button(0, 0, 10, 10)
    other = gui.create_button(0, 0, 10, 10)
    gui.set_parent(mid, root)
    gui.set_parent(leaf, mid)
    gui.pressed = leaf
    gui.remove(root)
    assert [c.key for c in gui] == [other]
    assert gui.pressed is None


def test_children_in_creation_order(gui):
    root = gui.create_frame(0, 0, 100, 100)
    first = gui.create_button(0, 0, 10, 10)
    second = gui.create_button(0, 0, 10, 10)
    gui.set_parent(second, root)
    gui.set_parent(first, root)
    assert [c.key for c in gui.children(root)] == [first, second]


def test_click_button_calls_callback_and_marks_pressed(gui):
    key = gui.create_button(0, 0, 10, 10)
    calls = []
    gui.component(key).callback = lambda g, k, ev: calls.append((g, k, ev))
    gui.click_button(gui.component(key))
    assert calls == [(gui, key, GuiEvent.PRESS)]
    assert gui.component(key).pressed is True


def test_click_button_plays_sound_unless_disabled(gui):
    played = []
    gui.button_sound = "base:/click.wav"
    gui.sound_player = played.append
    loud = gui.create_button(0, 0, 10, 10)
    quiet = gui.create_button(0, 0, 10, 10)
    gui.component(quiet).props["no-sound"] = 1
    gui.click_button(gui.component(loud))
    gui.click_button(gui.component(quiet))
    assert played == ["base:/click.wav"]


def test_click_close_parent_removes_parent(gui):
    window = gui.create_frame(0, 0, 100, 100)
    close = gui.create_button(0, 0, 10, 10)
    gui.set_parent(close, window)
    gui.component(close).props["close-parent"] = 1
    gui.click_button(gui.component(close))
    assert len(gui) == 0


def test_render_button_draws_box_and_label(gui):
    key = gui.create_button(10, 10, 100, 30)
    gui.component(key).text = "OK"
    gui.render_button(gui.component(key))
    kinds = [cmd[0] for cmd in gui.canvas.commands]
    assert "rect" in kinds
    texts = _texts(gui.canvas)
    assert len(texts) == 1
    assert texts[0][1] == gui.component(key).font
    assert texts[0][2][3] == "OK"
    assert texts[0][3] == gui.absolute_rect(key)
    assert gui.canvas.clip.current() is None


def test_pressed_button_label_shifts_by_half_border(gui):
    key = gui.create_button(10, 10, 100, 30)
    gui.component(key).text = "OK"
    gui.render_button(gui.component(key))
    plain = _texts(gui.canvas)[-1][2]
    gui.pressed = key
    gui.render_button(gui.component(key))
    pushed = _texts(gui.canvas)[-1][2]
    assert pushed[0] - plain[0] == pytest.approx(gui.border_width / 2)
    assert pushed[1] - plain[1] == pytest.approx(gui.border_width / 2)


def test_hover_uses_hover_font(gui):
    key = gui.create_button(10, 10, 100, 30)
    c = gui.component(key)
    c.text = "OK"
    c.hover_font = Color(255, 0, 0)
    gui.hover = key
    gui.render_button(c)
    assert _texts(gui.canvas)[-1][1] == Color(255, 0, 0)


def test_no_border_button_draws_shadow_and_no_box(gui):
    key = gui.create_button(10, 10, 100, 30)
    c = gui.component(key)
    c.text = "OK"
    c.props["no-border"] = 1
    gui.render_button(c)
    assert all(cmd[0] == "text" for cmd in gui.canvas.commands)
    texts = _texts(gui.canvas)
    assert len(texts) == 2
    assert texts[0][1].a == 128


def test_cross_draws_two_lines_and_restores_width(gui):
    key = gui.create_button(10, 10, 20, 20)
    gui.component(key).text = "#Cross"
    gui.canvas.line_width = 3.5
    gui.render_button(gui.component(key))
    lines = [cmd for cmd in gui.canvas.commands if cmd[0] == "lines"]
    assert len(lines) == 2
    assert gui.canvas.line_width == 3.5


def test_triangle_inside_button(gui):
    key = gui.create_button(10, 10, 20, 20)
    gui.component(key).text = "#TriangleUp"
    gui.render_button(gui.component(key))
    polys = [cmd for cmd in gui.canvas.commands if cmd[0] == "polygon"]
    assert len(polys) == 1
    x, y, w, h = gui.absolute_rect(key)
    for px, py in polys[0][2]:
        assert x <= px <= x + w
        assert y <= py <= y + h


def test_unknown_alignment_rejected(gui):
    key = gui.create_button(10, 10, 20, 20)
    c = gui.component(key)
    c.text = "OK"
    c.props["align"] = 5
    with pytest.raises(ValueError):
        gui.render_button(c)


def test_render_frame(gui):
    key = gui.create_frame(5, 5, 200, 100)
    gui.render_frame(gui.component(key))
    assert gui.canvas.commands == []
    gui.component(key).text = "Title"
    gui.render_frame(gui.component(key))
    texts = _texts(gui.canvas)
    assert len(texts) == 1
    assert texts[0][1] == gui.font
    assert texts[0][3] == gui.absolute_rect(key)


def test_render_ignores_other_kinds(gui):
    frame = gui.create_frame(0, 0, 10, 10)
    gui.component(frame).text = "x"
    gui.render_button(gui.component(frame))
    assert gui.canvas.commands == []