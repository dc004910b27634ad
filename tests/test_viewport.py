"""Test viewport scrolling and frame rendering."""

from evy.buffer import LineBuffer
from evy.cursor import CursorModel
from evy.editor import Editor
from evy.keyboard import KeyEvent, KeyType
from evy.modes import CommandMode, InsertMode, NormalMode
from evy.view import ViewportRenderer


def key(ch):
    return KeyEvent(key_type=KeyType.REGULAR, value=ch, raw=ch)


def test_minimal_scroll_down_and_up():
    buf = LineBuffer([f"line {i}" for i in range(100)])
    cur = CursorModel()

    cur.set_position(50, 0)
    cur.normalize(buf, 10)
    assert cur.scroll_offset == 41

    cur.set_position(5, 0)
    cur.normalize(buf, 10)
    assert cur.scroll_offset == 5


def test_scroll_follows_keyboard_motion():
    editor = Editor()
    editor.buffer = LineBuffer([f"line {i}" for i in range(100)])
    editor.resize(80, 11)  # ten text rows plus the status row

    for _ in range(50):
        editor.handle_key_event(key('j'))
    assert editor.cursor.line == 50
    assert editor.cursor.scroll_offset == 41

    for _ in range(45):
        editor.handle_key_event(key('k'))
    assert editor.cursor.line == 5
    assert editor.cursor.scroll_offset == 5


def test_scroll_moves_one_line_at_a_time():
    editor = Editor()
    editor.buffer = LineBuffer([str(i) for i in range(20)])
    editor.resize(80, 6)  # five text rows

    for _ in range(4):
        editor.handle_key_event(key('j'))
    assert editor.cursor.scroll_offset == 0
    editor.handle_key_event(key('j'))
    assert editor.cursor.scroll_offset == 1


def test_frame_shows_visible_slice_and_blank_rows():
    renderer = ViewportRenderer()
    buf = LineBuffer(["a", "b", "c"])
    cur = CursorModel(line=2, column=1, scroll_offset=1)
    frame = renderer.render(buf, cur, NormalMode(), columns=10, rows=5)

    assert frame.lines == ("b", "c", "", "")
    assert frame.status == "-- NORMAL --"
    assert (frame.cursor_x, frame.cursor_y) == (1, 1)
    assert frame.status_row == 4
    assert frame.command_line is False


def test_frame_clips_long_lines_to_width():
    renderer = ViewportRenderer()
    buf = LineBuffer(["abcdefghij", "xy"])
    frame = renderer.render(buf, CursorModel(), NormalMode(), columns=4, rows=3)
    assert frame.lines == ("abcd", "xy")


def test_insert_mode_status_label():
    renderer = ViewportRenderer()
    frame = renderer.render(LineBuffer(), CursorModel(), InsertMode(), columns=20, rows=3)
    assert frame.status == "-- INSERT --"


def test_command_mode_cursor_on_status_row():
    renderer = ViewportRenderer()
    cur = CursorModel(line=1, column=2)
    frame = renderer.render(LineBuffer(["abc", "def"]), cur, CommandMode("w x"),
                            columns=20, rows=6)
    assert frame.status == ":w x"
    assert (frame.cursor_x, frame.cursor_y) == (4, 5)
    assert frame.command_line is True


def test_editor_frame_normalizes_first():
    editor = Editor()
    editor.buffer = LineBuffer(["ab"])
    editor.cursor.set_position(3, 9)
    frame = editor.frame()
    assert (frame.cursor_x, frame.cursor_y) == (2, 0)
    assert len(frame.lines) == editor.rows - 1


def test_resize_keeps_cursor_visible():
    editor = Editor()
    editor.buffer = LineBuffer([str(i) for i in range(40)])
    editor.cursor.set_position(30, 0)
    editor.resize(80, 41)
    assert editor.cursor.scroll_offset == 0
    editor.resize(80, 11)
    assert editor.cursor.scroll_offset == 21


def test_tab_is_painted_as_one_cell():
    buf = LineBuffer(["a\tb"])
    cur = CursorModel()
    cur.set_position(0, 2)
    frame = ViewportRenderer().render(buf, cur, NormalMode(), 20, 5)
    assert frame.lines[0] == "a b"
    assert frame.cursor_x == 2
    assert frame.lines[0][frame.cursor_x] == "b"
