import pytest

from vsubfind.resizable import Cursor, ResizableWindow


def make():
    return ResizableWindow(x=10, y=10, width=100, height=50)


@pytest.mark.parametrize(
    "point,expected",
    [
        ((0, 0), Cursor.SIZENWSE),
        ((99, 49), Cursor.SIZENWSE),
        ((0, 49), Cursor.SIZENESW),
        ((99, 0), Cursor.SIZENESW),
        ((0, 20), Cursor.SIZEWE),
        ((99, 20), Cursor.SIZEWE),
        ((50, 0), Cursor.SIZENS),
        ((50, 49), Cursor.SIZENS),
        ((50, 20), Cursor.ARROW),
    ],
)
def test_cursor_at(point, expected):
    assert make().cursor_at(*point) is expected


def test_press_in_title_band_moves():
    win = make()
    assert win.press(50, 20)
    assert win.moving and not win.resizing
    assert win.cursor is Cursor.HAND
    assert win.move(55, 25, 500, 500)
    assert (win.x, win.y, win.width, win.height) == (15, 15, 100, 50)


def test_press_in_body_does_nothing():
    win = ResizableWindow(x=0, y=0, width=100, height=100)
    assert not win.press(50, 60)
    assert not win.moving and not win.resizing


def test_resize_from_right():
    win = make()
    assert win.press(99, 20)
    assert win.cursor is Cursor.SIZEWE
    assert win.move(119, 20, 500, 500)
    assert win.width == 10 + 119 - win.x
    assert (win.x, win.y, win.height) == (10, 10, 50)


def test_resize_respects_minimum_size():
    win = make()
    win.press(99, 20)
    assert not win.move(5, 20, 500, 500)
    assert win.width == 100


def test_resize_from_left_keeps_right_edge():
    win = make()
    right = win.x + win.width
    win.press(0, 20)
    assert win.move(-5, 20, 500, 500)
    assert win.x + win.width == right
    assert win.x == 5


def test_release_resets_state():
    win = make()
    win.press(99, 20)
    assert win.release()
    assert win.cursor is Cursor.ARROW
    assert not win.resizing
    assert not win.release()


def test_idle_move_updates_cursor_and_leave_resets():
    win = make()
    assert not win.move(0, 20, 500, 500)
    assert win.cursor is Cursor.SIZEWE
    win.leave()
    assert win.cursor is Cursor.ARROW


def test_leave_while_dragging_keeps_cursor():
    win = make()
    win.press(50, 20)
    win.leave()
    assert win.cursor is Cursor.HAND