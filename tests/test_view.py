"""Tests for scrolling the buffer view."""

import pytest
from nunitius import TextBuffer, BufferView


def make_view(text, width, rows):
    buffer = TextBuffer(width)
    buffer.insert_text(text)
    view = BufferView(buffer, rows)
    view.render()
    return view


def test_view_shows_whole_short_document():
    view = make_view("aa bb", 10, 5)

    assert view.lines == ["aa bb"]
    assert view.top_line == 0
    assert (view.visual_cursor_y, view.visual_cursor_x) == (0, 5)


def test_view_scrolls_to_keep_cursor_visible():
    view = make_view("aa bb cc dd ee", 4, 3)
    assert view.buffer.lines == ["aa ", "bb ", "cc ", "dd ", "ee"]

    assert view.top_line == 2
    assert view.lines == ["cc ", "dd ", "ee"]
    assert (view.visual_cursor_y, view.visual_cursor_x) == (2, 2)


def test_view_scrolls_back_up_with_cursor():
    view = make_view("aa bb cc dd ee", 4, 3)

    for _ in range(4):
        view.buffer.move_up()
    view.render()

    assert view.top_line == 0
    assert view.lines == ["aa ", "bb ", "cc "]
    assert (view.visual_cursor_y, view.visual_cursor_x) == (0, 2)


def test_view_scrolls_minimally():
    view = make_view("aa bb cc dd ee", 4, 3)

    view.buffer.move_up()
    view.buffer.move_up()
    view.render()

    # Line 2 is still on screen, so the view stays put
    assert view.top_line == 2
    assert view.visual_cursor_y == 0


def test_view_resize_reflows_buffer():
    view = make_view("aa bb cc dd ee", 4, 3)

    view.resize(20, 2)
    view.render()

    assert view.num_columns == 20
    assert view.num_rows == 2
    assert view.lines == ["aa bb cc dd ee"]
    assert view.top_line == 0
    assert (view.visual_cursor_y, view.visual_cursor_x) == (0, 14)


def test_view_needs_at_least_one_row():
    with pytest.raises(ValueError):
        BufferView(TextBuffer(10), 0)

    view = BufferView(TextBuffer(10), 1)
    with pytest.raises(ValueError):
        view.resize(10, 0)
