"""Test loading, saving and the ex write/quit commands."""

import logging
import os
import stat

import pytest

from evy.editor import Editor
from evy.interpreter import CommandInterpreter
from evy.keyboard import KeyEvent, KeyType
from evy.modes import NormalMode
from evy.storage import read_lines, write_text


def char(ch):
    return KeyEvent(key_type=KeyType.REGULAR, value=ch, raw=ch)


def special(name):
    return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=f"<{name.upper()}>")


def type_keys(editor, text):
    for ch in text:
        editor.handle_key_event(char(ch))


def run_command(editor, command):
    editor.handle_key_event(char(':'))
    type_keys(editor, command)
    editor.handle_key_event(special('enter'))


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_load_file_reads_lines(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("Line 1\nLine 2\nLine 3", encoding="utf-8")
    editor = Editor()
    editor.load_file(str(path))
    assert editor.buffer.lines == ["Line 1", "Line 2", "Line 3"]
    assert (editor.cursor.line, editor.cursor.column) == (0, 0)


def test_load_nonexistent_file_starts_empty(tmp_path):
    editor = Editor()
    editor.load_file(str(tmp_path / "missing.txt"))
    assert editor.buffer.lines == [""]


def test_load_unreadable_path_starts_empty(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="evy"):
        assert read_lines(str(tmp_path)) == [""]
    assert "Could not read" in caplog.text


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert read_lines(str(path)) == [""]


def test_load_drops_final_newline_and_carriage_returns(tmp_path):
    path = tmp_path / "dos.txt"
    path.write_bytes(b"one\r\ntwo\r\n")
    assert read_lines(str(path)) == ["one", "two"]


def test_round_trip_without_edits(in_tmp):
    (in_tmp / "in.txt").write_text("a\nbb\nccc", encoding="utf-8")
    editor = Editor()
    editor.load_file("in.txt")
    run_command(editor, "w saved.txt")
    assert (in_tmp / "saved.txt").read_bytes() == b"a\nbb\nccc"


def test_round_trip_preserves_invalid_utf8(in_tmp):
    (in_tmp / "latin1.txt").write_bytes(b"caf\xe9\nna\xefve")
    editor = Editor()
    editor.load_file("latin1.txt")
    run_command(editor, "w out.txt")
    assert (in_tmp / "out.txt").read_bytes() == b"caf\xe9\nna\xefve"


def test_type_and_save_end_to_end(in_tmp):
    editor = Editor()
    editor.running = True
    editor.handle_key_event(char('i'))
    type_keys(editor, "hi")
    editor.handle_key_event(special('escape'))
    run_command(editor, "w out.txt")

    assert (in_tmp / "out.txt").read_text(encoding="utf-8") == "hi"
    assert editor.mode == NormalMode()
    assert editor.running is True


def test_write_without_path_uses_default_file(in_tmp):
    editor = Editor()
    editor.buffer.lines = ["x", "y"]
    run_command(editor, "w")
    assert (in_tmp / ".swapfile").read_text(encoding="utf-8") == "x\ny"


def test_write_quit_writes_then_stops(in_tmp):
    editor = Editor()
    editor.running = True
    editor.buffer.lines = ["bye"]
    run_command(editor, "wq final.txt")
    assert (in_tmp / "final.txt").read_text(encoding="utf-8") == "bye"
    assert editor.running is False


def test_write_quit_without_path_uses_default_file(in_tmp):
    editor = Editor()
    editor.running = True
    run_command(editor, "wq")
    assert (in_tmp / ".swapfile").exists()
    assert editor.running is False


def test_quit_does_not_save(in_tmp):
    editor = Editor()
    editor.running = True
    editor.buffer.lines = ["unsaved"]
    run_command(editor, "q")
    assert editor.running is False
    assert list(in_tmp.iterdir()) == []


def test_write_failure_is_silent(in_tmp, caplog):
    editor = Editor()
    editor.running = True
    editor.buffer.lines = ["keep me"]
    with caplog.at_level(logging.WARNING, logger="evy"):
        run_command(editor, "w no/such/dir/out.txt")
    assert editor.buffer.lines == ["keep me"]
    assert editor.mode == NormalMode()
    assert editor.running is True
    assert "Could not write" in caplog.text


def test_write_quit_still_quits_after_failed_write():
    def failing_writer(path, content):
        raise PermissionError("read-only")

    editor = Editor(interpreter=CommandInterpreter(writer=failing_writer))
    editor.running = True
    run_command(editor, "wq locked.txt")
    assert editor.running is False


def test_write_text_new_file_mode(tmp_path):
    umask = os.umask(0)
    os.umask(umask)
    path = tmp_path / "new.txt"
    write_text(str(path), "content")
    assert path.read_text(encoding="utf-8") == "content"
    assert stat.S_IMODE(path.stat().st_mode) == 0o666 & ~umask


def test_write_text_keeps_existing_mode(tmp_path):
    path = tmp_path / "private.txt"
    path.write_text("old", encoding="utf-8")
    os.chmod(path, 0o600)
    write_text(str(path), "new")
    assert path.read_text(encoding="utf-8") == "new"
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_write_text_leaves_no_temp_files(tmp_path):
    write_text(str(tmp_path / "a.txt"), "x")
    assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]


def test_write_text_raises_for_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_text(str(tmp_path / "nope" / "a.txt"), "x")
