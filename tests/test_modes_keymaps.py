"""Tests for modes, keymaps and command dispatch."""

import pytest

from modedit.commands import (
    BeginSearch, EnterMode, ModeRegistry, MoveCursor, MovePage, MoveToFileEdge,
    MoveToLineEdge, OpenFile, Quit, ToggleLineNumbers, execute_command,
)
from modedit.keyboard import KeyEvent, parse_key
from modedit.modes import EditorMode, Mode


@pytest.fixture
def registry():
    return ModeRegistry()


@pytest.mark.parametrize("token,command", [
    ('q', Quit()),
    ('j', MoveCursor(1, 0)),
    ('<DOWN>', MoveCursor(1, 0)),
    ('k', MoveCursor(-1, 0)),
    ('<UP>', MoveCursor(-1, 0)),
    ('l', MoveCursor(0, 1)),
    ('<RIGHT>', MoveCursor(0, 1)),
    ('h', MoveCursor(0, -1)),
    ('<LEFT>', MoveCursor(0, -1)),
    ('^', MoveToLineEdge(False)),
    ('0', MoveToLineEdge(False)),
    ('<HOME>', MoveToLineEdge(False)),
    ('$', MoveToLineEdge(True)),
    ('<END>', MoveToLineEdge(True)),
    ('g', MoveToFileEdge(False)),
    ('G', MoveToFileEdge(True)),
    ('<SPACE>', MovePage(1)),
    (' ', MovePage(1)),
    ('<PAGEDOWN>', MovePage(1)),
    ('<PAGEUP>', MovePage(-1)),
    ('.', ToggleLineNumbers()),
    ('o', OpenFile()),
    ('/', BeginSearch()),
])
def test_default_command_bindings(registry, token, command):
    assert registry.lookup(EditorMode.COMMAND, parse_key(token)) == command


def test_aliases_share_one_command(registry):
    j = registry.lookup(EditorMode.COMMAND, parse_key('j'))
    down = registry.lookup(EditorMode.COMMAND, parse_key('<DOWN>'))
    assert j is down


def test_unbound_key_returns_none(registry):
    assert registry.lookup(EditorMode.COMMAND, parse_key('z')) is None
    assert registry.lookup(EditorMode.COMMAND, parse_key('<Ctrl-x>')) is None


def test_shifted_letters_are_distinct(registry):
    assert registry.lookup(EditorMode.COMMAND, parse_key('g')) != \
        registry.lookup(EditorMode.COMMAND, parse_key('G'))


def test_insert_and_search_only_bind_escape(registry):
    for mode in (EditorMode.INSERT, EditorMode.SEARCH):
        assert registry.lookup(mode, parse_key('<ESC>')) == EnterMode(EditorMode.COMMAND)
        assert registry.lookup(mode, parse_key('j')) is None
        assert registry.lookup(mode, parse_key('q')) is None


def test_mode_names():
    registry = ModeRegistry()
    assert registry.get_mode(EditorMode.COMMAND).name == "CMD"
    assert registry.get_mode(EditorMode.INSERT).name == "INSERT"
    assert registry.get_mode(EditorMode.SEARCH).name == "SEARCH"


def test_add_command_accepts_key_events():
    mode = Mode(EditorMode.COMMAND)
    mode.add_command([KeyEvent.special('down'), 'x'], Quit())
    assert mode.lookup(parse_key('<DOWN>')) == Quit()
    assert mode.lookup(parse_key('x')) == Quit()


def test_fallback_handles_unbound_keys():
    seen = []

    def self_insert(event):
        seen.append(event.value)
        return MoveCursor(0, 1) if event.is_printable else None

    mode = Mode(EditorMode.INSERT, fallback=self_insert)
    mode.add_command(['<ESC>'], EnterMode(EditorMode.COMMAND))

    assert mode.lookup(parse_key('a')) == MoveCursor(0, 1)
    assert mode.lookup(parse_key('<ESC>')) == EnterMode(EditorMode.COMMAND)
    assert mode.lookup(parse_key('<F1>')) is None
    assert seen == ['a', 'f1']


def test_register_replaces_mode(registry):
    custom = Mode(EditorMode.INSERT)
    custom.add_command(['q'], Quit())
    registry.register(custom)
    assert registry.lookup(EditorMode.INSERT, parse_key('q')) == Quit()
    assert registry.lookup(EditorMode.INSERT, parse_key('<ESC>')) is None


def test_enter_mode_returns_target(make_editor):
    editor = make_editor()
    assert execute_command(editor, EnterMode(EditorMode.INSERT)) == EditorMode.INSERT


def test_quit_keeps_mode(make_editor):
    editor = make_editor()
    assert execute_command(editor, Quit()) == EditorMode.COMMAND
    assert editor.quit is True


def test_unknown_command_is_rejected(make_editor):
    editor = make_editor()
    with pytest.raises(TypeError):
        execute_command(editor, object())


def test_aliased_keys_give_identical_transitions(make_editor):
    lines = [f"line {i}" for i in range(30)]
    by_letter = make_editor(lines)
    by_arrow = make_editor(lines)

    for _ in range(4):
        by_letter.run_cmd(parse_key('j'))
        by_arrow.run_cmd(parse_key('<DOWN>'))
    by_letter.run_cmd(parse_key('$'))
    by_arrow.run_cmd(parse_key('<END>'))

    assert by_letter.cursor == by_arrow.cursor == (4, 6)
    assert by_letter.start_line == by_arrow.start_line == 0


def test_unbound_key_changes_nothing(make_editor):
    editor = make_editor(["abc", "def"])
    editor.redisplay = False

    editor.run_cmd(parse_key('z'))

    assert editor.cursor == (0, 0)
    assert editor.mode == EditorMode.COMMAND
    assert editor.redisplay is False
    assert editor.quit is False


def test_escape_returns_to_command_mode(make_editor):
    editor = make_editor()
    editor.mode = EditorMode.INSERT
    editor.redisplay = False
    editor.run_cmd(parse_key('<ESC>'))
    assert editor.mode == EditorMode.COMMAND
    assert editor.redisplay is True


def test_typing_in_insert_mode_does_not_edit(make_editor):
    editor = make_editor(["abc"])
    editor.mode = EditorMode.INSERT

    editor.run_cmd(parse_key('x'))

    assert editor.buffers.current().line(0).text == "abc"
    assert editor.buffers.current().modified is False
    assert editor.mode == EditorMode.INSERT
