"""Tests for dispatching key events to buffer operations."""

from types import SimpleNamespace

import pytest
from nunitius import TextBuffer
from nunitius.commands import CommandRegistry
from nunitius.keyboard import KeyEvent, KeyType


@pytest.fixture
def editor():
    return SimpleNamespace(buffer=TextBuffer(8), status_message=None, result=None, running=True)


def press(registry, editor, key_type, value):
    return registry.execute(editor, KeyEvent(key_type=key_type, value=value, raw=value))


def test_typing_wraps_text(editor):
    registry = CommandRegistry()

    for ch in "foo bar baz":
        assert press(registry, editor, KeyType.REGULAR, ch) is True

    assert editor.buffer.render() == "foo bar \nbaz"


def test_pasted_text_is_inserted_in_one_event(editor):
    registry = CommandRegistry()

    press(registry, editor, KeyType.REGULAR, "foo bar baz")

    assert editor.buffer.render() == "foo bar \nbaz"
    assert editor.buffer.cursor() == (1, 3)


def test_editing_keys(editor):
    registry = CommandRegistry()
    press(registry, editor, KeyType.REGULAR, "ab")

    assert press(registry, editor, KeyType.SPECIAL, 'backspace') is True
    assert editor.buffer.render() == "a"

    assert press(registry, editor, KeyType.SPECIAL, 'enter') is True
    assert editor.buffer.lines == ["a", ""]
    assert editor.buffer.cursor() == (1, 0)


def test_movement_keys_do_not_modify(editor):
    registry = CommandRegistry()
    press(registry, editor, KeyType.REGULAR, "abc")

    assert press(registry, editor, KeyType.SPECIAL, 'left') is False
    assert editor.buffer.cursor() == (0, 2)
    assert press(registry, editor, KeyType.SPECIAL, 'up') is False
    assert editor.buffer.cursor() == (0, 0)
    assert press(registry, editor, KeyType.SPECIAL, 'down') is False
    assert editor.buffer.cursor() == (0, 3)
    press(registry, editor, KeyType.SPECIAL, 'left')
    assert press(registry, editor, KeyType.SPECIAL, 'right') is False
    assert editor.buffer.cursor() == (0, 3)
    assert editor.buffer.render() == "abc"


def test_submit_hands_back_text(editor):
    registry = CommandRegistry()
    press(registry, editor, KeyType.REGULAR, "hello there")

    press(registry, editor, KeyType.CTRL, 'd')

    assert editor.running is False
    assert editor.result == "hello \nthere"


def test_submit_ignores_blank_message(editor):
    registry = CommandRegistry()
    press(registry, editor, KeyType.REGULAR, "   ")

    press(registry, editor, KeyType.CTRL, 'd')

    assert editor.running is True
    assert editor.result is None
    assert editor.status_message == "Nothing to send"


@pytest.mark.parametrize("key_type, value", [
    (KeyType.SPECIAL, 'escape'),
    (KeyType.CTRL, 'c'),
    (KeyType.CTRL, 'q'),
])
def test_cancel_keys(editor, key_type, value):
    registry = CommandRegistry()
    press(registry, editor, KeyType.REGULAR, "draft")

    press(registry, editor, key_type, value)

    assert editor.running is False
    assert editor.result is None


def test_unbound_keys_are_ignored(editor):
    registry = CommandRegistry()

    assert press(registry, editor, KeyType.SPECIAL, 'f5') is False
    assert press(registry, editor, KeyType.CTRL, 'z') is False
    assert editor.buffer.render() == ""
