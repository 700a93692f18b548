from vsubfind.scrollbar import SCROLL_LEFT, SCROLL_RIGHT, Rect, ScrollBar


def test_rect_contains_edges():
    r = Rect(10, 0, 5, 5)
    assert r.contains(10, 0)
    assert r.contains(14, 4)
    assert not r.contains(15, 0)
    assert not r.contains(9, 0)


def test_set_position_clamps():
    bar = ScrollBar()
    bar.set_position(-5)
    assert bar.pos == bar.min_pos
    bar.set_position(500)
    assert bar.pos == bar.max_pos
    bar.set_position(42)
    assert bar.pos == 42


def test_set_range_keeps_fraction():
    bar = ScrollBar()
    bar.set_position(50)
    bar.set_range(0, 200)
    assert bar.range == 200
    assert bar.pos / bar.range == 50 / 100


def test_layout_parts_fill_width():
    bar = ScrollBar()
    bar.set_position(30)
    bar.layout(300, 20, 20, 30)
    widths = [bar.left_arrow, bar.left_track, bar.thumb, bar.right_track, bar.right_arrow]
    assert sum(r.width for r in widths) == 300
    assert bar.left_track.x + bar.left_track.width == bar.thumb.x


def test_press_and_drag_on_track():
    seen = []
    bar = ScrollBar(on_scroll=seen.append)
    bar.layout(300, 20, 20, 30)
    assert bar.press(100, 5, 300)
    assert bar.dragging
    assert bar.drag(0, 300)
    assert bar.pos == bar.min_pos
    assert bar.drag(1000, 300)
    assert bar.pos == bar.max_pos
    assert seen[-1] == bar.max_pos
    assert bar.release()
    assert not bar.drag(50, 300)
    assert not bar.release()


def test_arrows_step_by_one():
    seen = []
    bar = ScrollBar(on_scroll=seen.append)
    bar.layout(300, 20, 20, 30)
    assert not bar.press(5, 5, 300)
    assert bar.press(295, 5, 300)
    assert bar.pos == 1
    assert bar.scroll_left()
    assert bar.pos == 0
    assert seen == [SCROLL_RIGHT, SCROLL_LEFT]


def test_scroll_right_stops_at_max():
    bar = ScrollBar()
    bar.set_position(bar.max_pos)
    assert not bar.scroll_right()
    assert bar.pos == bar.max_pos