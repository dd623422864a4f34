import os

import pytest

from easyedit.commands import (
    CommandRegistry,
    QuitRequested,
    default_registry,
    quit_editor,
    save,
)
from easyedit.editor import Editor


@pytest.fixture
def registry():
    return default_registry()


def _open(tmp_path, content, name="doc.txt"):
    path = tmp_path / name
    if content is not None:
        path.write_text(content)
    editor = Editor(screen_rows=10, screen_cols=80)
    editor.open(str(path))
    return editor, path


def test_unknown_command_reports_name(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    registry.execute(editor, "zz")
    assert editor.status_msg == "Unsupported command: zz"


def test_unknown_command_with_arguments_reports_only_name(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    registry.execute(editor, "zz foo bar")
    assert editor.status_msg == "Unsupported command: zz"


def test_handler_receives_force_and_args(tmp_path):
    editor, _ = _open(tmp_path, "abc\n")
    calls = []
    registry = CommandRegistry()
    registry.register("go", lambda ed, force, args: calls.append((ed, force, args)))
    registry.execute(editor, "!go far away")
    registry.execute(editor, "go")
    assert calls == [(editor, True, "far away"), (editor, False, None)]


def test_registry_is_limited_to_one_hundred_commands():
    registry = CommandRegistry()
    for number in range(100):
        registry.register(f"c{number}", lambda ed, force, args: None)
    with pytest.raises(OverflowError):
        registry.register("extra", lambda ed, force, args: None)


def test_save_reports_byte_count_and_path(tmp_path, registry):
    editor, path = _open(tmp_path, "hello\nworld\n")
    registry.execute(editor, "!w")
    expected = f"{len(path.read_bytes())} bytes written at {os.path.realpath(path)}"
    assert editor.status_msg.startswith(expected[:79])
    assert not (tmp_path / "doc.txt.tmp").exists()


def test_save_with_empty_argument_still_saves(tmp_path, registry):
    editor, path = _open(tmp_path, "abc\n")
    editor.insert_char("z")
    registry.execute(editor, "!w ")
    assert path.read_text() == editor.to_text()


def test_save_rejects_arguments(tmp_path, registry):
    editor, path = _open(tmp_path, "abc\n")
    editor.insert_char("z")
    registry.execute(editor, "w other.txt")
    assert editor.status_msg == "Invalid number of arguments"
    assert path.read_text() == "abc\n"


def test_save_clears_new_file_flag(tmp_path, registry):
    editor, path = _open(tmp_path, None, "fresh.txt")
    assert editor.new_file
    editor.insert_char("q")
    registry.execute(editor, "w")
    assert not editor.new_file
    assert editor.modified == 0
    assert path.read_text() == editor.to_text()


def test_save_reports_backup_failure(tmp_path, registry):
    editor, path = _open(tmp_path, "old\n")
    (tmp_path / "doc.txt.bak").mkdir()
    (tmp_path / "doc.txt.bak" / "keep").write_text("")
    editor.insert_char("x")
    registry.execute(editor, "w")
    assert editor.status_msg.startswith("Error saving: Unable to write backup")
    assert path.read_text() == "old\n"
    assert editor.modified > 0


def test_save_without_filename_reports_error():
    editor = Editor(screen_rows=10, screen_cols=80)
    save(editor, False, None)
    assert editor.status_msg.startswith("Error saving")


def test_quit_unmodified_raises(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    with pytest.raises(QuitRequested):
        registry.execute(editor, "q")


def test_quit_modified_refuses(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    editor.insert_char("x")
    registry.execute(editor, "q")
    assert editor.status_msg.startswith("You have unsaved modifications.")


def test_forced_quit_discards_changes(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    editor.insert_char("x")
    with pytest.raises(QuitRequested):
        registry.execute(editor, "!q")


def test_quit_rejects_arguments(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    registry.execute(editor, "q now")
    assert editor.status_msg == "Invalid number of arguments"


def test_quit_function_directly(tmp_path):
    editor, _ = _open(tmp_path, "abc\n")
    editor.insert_char("x")
    with pytest.raises(QuitRequested):
        quit_editor(editor, True, None)


def test_save_quit_writes_then_quits(tmp_path, registry):
    editor, path = _open(tmp_path, "abc\n")
    editor.insert_char("x")
    with pytest.raises(QuitRequested):
        registry.execute(editor, "wq")
    assert path.read_text() == editor.to_text()


def test_save_quit_stays_when_save_fails(tmp_path, registry):
    editor, path = _open(tmp_path, "abc\n")
    editor.insert_char("x")
    registry.execute(editor, "wq extra")
    assert editor.status_msg.startswith("You have unsaved modifications.")
    assert path.read_text() == "abc\n"


def test_edit_opens_other_file(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    other = tmp_path / "other.txt"
    other.write_text("one\ntwo\n")
    registry.execute(editor, f"e   {other}")
    assert editor.filename == str(other)
    assert [row.chars for row in editor.rows] == ["one", "two"]


def test_edit_requires_argument(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    registry.execute(editor, "e")
    assert editor.status_msg == "Invalid number of arguments"


def test_edit_refuses_with_unsaved_changes(tmp_path, registry):
    editor, path = _open(tmp_path, "abc\n")
    other = tmp_path / "other.txt"
    other.write_text("one\n")
    editor.insert_char("x")
    registry.execute(editor, f"e {other}")
    assert editor.filename == str(path)
    assert editor.status_msg.startswith("You have unsaved modifications")
    registry.execute(editor, f"!e {other}")
    assert editor.filename == str(other)
    assert editor.modified == 0


def test_undo_and_redo_commands(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    editor.push_undo(False)
    editor.insert_char("x")
    changed = editor.to_text()
    registry.execute(editor, "u")
    assert editor.to_text() == "abc\n"
    registry.execute(editor, "r")
    assert editor.to_text() == changed


def test_undo_and_redo_reject_arguments(tmp_path, registry):
    editor, _ = _open(tmp_path, "abc\n")
    editor.push_undo(False)
    editor.insert_char("x")
    changed = editor.to_text()
    registry.execute(editor, "u 2")
    assert editor.status_msg == "Invalid number of arguments"
    assert editor.to_text() == changed
    registry.execute(editor, "r 2")
    assert editor.status_msg == "Invalid number of arguments"