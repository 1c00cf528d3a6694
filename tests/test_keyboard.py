"""Test keyboard input handling."""

import pytest

from modedit.keyboard import KeyboardHandler, KeyEvent, KeyType, parse_key


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self, keys=()):
        self._key_queue = list(keys)

    def get_key(self, timeout=None):
        if self._key_queue:
            return self._key_queue.pop(0)
        return None


@pytest.mark.parametrize("token,expected", [
    ('j', (KeyType.REGULAR, 'j')),
    ('G', (KeyType.REGULAR, 'G')),
    ('$', (KeyType.REGULAR, '$')),
    ('<SPACE>', (KeyType.REGULAR, ' ')),
    (' ', (KeyType.REGULAR, ' ')),
    ('<TAB>', (KeyType.REGULAR, '\t')),
    ('\t', (KeyType.REGULAR, '\t')),
    ('<DOWN>', (KeyType.SPECIAL, 'down')),
    ('<UP>', (KeyType.SPECIAL, 'up')),
    ('<LEFT>', (KeyType.SPECIAL, 'left')),
    ('<RIGHT>', (KeyType.SPECIAL, 'right')),
    ('<HOME>', (KeyType.SPECIAL, 'home')),
    ('<END>', (KeyType.SPECIAL, 'end')),
    ('<PAGEUP>', (KeyType.SPECIAL, 'page_up')),
    ('<PAGEDOWN>', (KeyType.SPECIAL, 'page_down')),
    ('<ESC>', (KeyType.SPECIAL, 'escape')),
    ('\x1b', (KeyType.SPECIAL, 'escape')),
    ('\n', (KeyType.SPECIAL, 'enter')),
    ('\r', (KeyType.SPECIAL, 'enter')),
    ('<Ctrl-j>', (KeyType.SPECIAL, 'enter')),
    ('\x7f', (KeyType.SPECIAL, 'backspace')),
    ('<BACKSPACE>', (KeyType.SPECIAL, 'backspace')),
    ('<Ctrl-x>', (KeyType.CTRL, 'x')),
    ('\x18', (KeyType.CTRL, 'x')),
    ('<Esc+b>', (KeyType.ALT, 'b')),
    ('<Esc+G>', (KeyType.ALT, 'G')),
    ('<F5>', (KeyType.SPECIAL, 'f5')),
])
def test_parse_key(token, expected):
    event = parse_key(token)
    assert event.key == expected
    assert event.raw == token


def test_modifier_flags():
    assert parse_key('<Ctrl-a>').is_ctrl
    assert parse_key('<Esc+x>').is_alt
    assert not parse_key('x').is_ctrl


def test_unknown_token_does_not_shadow_character():
    event = parse_key('<KEY_FOO>')
    assert event.key_type == KeyType.SPECIAL


def test_named_key_constructors():
    assert KeyEvent.char('j') == parse_key('j')
    assert KeyEvent.special('down').key == parse_key('<DOWN>').key
    with pytest.raises(ValueError):
        KeyEvent.special('hyper')


def test_is_printable():
    assert KeyEvent.char('a').is_printable
    assert not KeyEvent.special('enter').is_printable
    assert not parse_key('<Ctrl-a>').is_printable


def test_handler_reads_from_terminal():
    handler = KeyboardHandler(MockTerminal(['j', '<DOWN>']))
    assert handler.get_key_event().key == (KeyType.REGULAR, 'j')
    assert handler.get_key_event().key == (KeyType.SPECIAL, 'down')
    assert handler.get_key_event(timeout=0) is None
