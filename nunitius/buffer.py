"""Text buffer that keeps its paragraphs wrapped while the user types."""

import logging
from typing import Optional

from .wrap import tokenize, wrap

logger = logging.getLogger(__name__)


def is_separator_line(line: str) -> bool:
    """Return True for an empty or whitespace-only line."""
    return not line or line.isspace()


def paragraph_range(lines: list[str], index: int) -> tuple[int, int]:
    """Return the inclusive (start, end) range of the paragraph at ``index``.

    A separator line is a paragraph of its own. Otherwise the paragraph runs
    up and down from ``index`` to the nearest separator lines, which are not
    part of the range.
    """
    if is_separator_line(lines[index]):
        return (index, index)

    start = index
    while start > 0 and not is_separator_line(lines[start - 1]):
        start -= 1
    end = index
    while end < len(lines) - 1 and not is_separator_line(lines[end + 1]):
        end += 1
    return (start, end)


def _is_wrapped_gap(lines: list[str], index: int, width: int) -> bool:
    """Return True if the whitespace line at ``index`` was made by wrapping.

    Wrapping puts a gap on a line of its own only when it fits after neither
    the text before it nor before the text after it. A gap the user typed on
    its own line does not meet that test.
    """
    gap = lines[index]
    if not gap or not gap.isspace():
        return False
    if index == 0 or index == len(lines) - 1:
        return False

    before, after = lines[index - 1], lines[index + 1]
    if is_separator_line(before) or is_separator_line(after):
        return False
    # Adjacent whitespace would have been one token
    if before[-1].isspace() or after[0].isspace():
        return False
    return len(before) + len(gap) > width and len(gap) + len(tokenize(after)[0]) > width


def reflow_ranges(lines: list[str], width: int) -> list[tuple[int, int]]:
    """Split the whole document into paragraph ranges for a full re-flow.

    ``width`` is the width ``lines`` is currently wrapped to. Like
    ``paragraph_range``, except that a whitespace-only line made by wrapping
    (``"a b"`` at width 1) belongs to the surrounding paragraph, so a wider
    re-flow can merge it back.
    """
    ranges: list[tuple[int, int]] = []
    start: Optional[int] = None
    for i, line in enumerate(lines):
        if not is_separator_line(line) or _is_wrapped_gap(lines, i, width):
            if start is None:
                start = i
            continue

        if start is not None:
            ranges.append((start, i - 1))
            start = None
        ranges.append((i, i))

    if start is not None:
        ranges.append((start, len(lines) - 1))
    return ranges


def locate_offset(lines: list[str], offset: int) -> tuple[int, int]:
    """Map a character offset within wrapped lines to (row, column).

    An offset that falls exactly on a line boundary stays at the end of the
    earlier line, so the cursor does not jump to the next row. Offset 0 is
    the start of the first line.
    """
    if offset == 0:
        return (0, 0)

    stepped = 0
    for row, line in enumerate(lines):
        if stepped + len(line) >= offset:
            return (row, offset - stepped)
        stepped += len(line)
    return (len(lines) - 1, len(lines[-1]))


def rewrap_paragraph(lines: list[str], line: int, column: int,
                     width: int) -> tuple[list[str], int, int]:
    """Re-wrap the paragraph holding (line, column) in a copy of ``lines``.

    Returns the new lines and the cursor moved so it keeps its offset in the
    paragraph text. Separator lines come back unchanged.
    """
    start, end = paragraph_range(lines, line)
    if start == end and is_separator_line(lines[start]):
        return (list(lines), line, column)

    offset = sum(len(text) for text in lines[start:line]) + column
    wrapped = wrap(lines[start : end + 1], width)
    row, new_column = locate_offset(wrapped, offset)
    return (lines[:start] + wrapped + lines[end + 1 :], start + row, new_column)


class TextBuffer:
    """An editable document with a cursor, wrapped to a fixed width.

    Every edit re-wraps the paragraph it touched and moves the cursor so it
    keeps its place in the paragraph text.
    """

    def __init__(self, width: int):
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        self._width = width
        self._lines: list[str] = [""]
        self._line = 0
        self._column = 0
        # Column requested by the first of a run of up/down moves
        self._desired_column: Optional[int] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def render(self) -> str:
        return "\n".join(self._lines)

    def cursor(self) -> tuple[int, int]:
        return (self._line, self._column)

    def clear(self):
        """Drop all text and put the cursor back at the start."""
        self._lines = [""]
        self._line = 0
        self._column = 0
        self._desired_column = None

    # --- Editing ---

    def insert(self, char: str):
        """Insert one character at the cursor.

        A newline splits the line instead.
        """
        if char == "\n":
            self.split_line()
            return
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")

        self._desired_column = None
        line = self._lines[self._line]
        self._lines[self._line] = line[: self._column] + char + line[self._column :]
        self._column += 1
        self._rewrap_current_paragraph()

    def insert_text(self, text: str):
        for char in text:
            self.insert(char)

    def backspace(self):
        """Delete the character before the cursor.

        At the start of a line the line break is removed and the cursor ends
        up where the two lines meet. If joining and re-wrapping gives back the
        same layout, the break was only a soft wrap and removing it would do
        nothing, so the character before it is deleted instead.
        """
        self._desired_column = None
        if self._at_start_of_buffer():
            return

        if not self._at_start_of_line():
            line = self._lines[self._line]
            self._lines[self._line] = line[: self._column - 1] + line[self._column :]
            self._column -= 1
            self._rewrap_current_paragraph()
            return

        previous = self._lines[self._line - 1]
        joined = self._lines[: self._line - 1] + [previous + self._lines[self._line]] \
            + self._lines[self._line + 1 :]
        new_lines, line, column = rewrap_paragraph(joined, self._line - 1, len(previous), self._width)
        if new_lines == self._lines and previous:
            text = joined[self._line - 1]
            cut = len(previous)
            joined[self._line - 1] = text[: cut - 1] + text[cut:]
            new_lines, line, column = rewrap_paragraph(joined, self._line - 1, cut - 1, self._width)

        self._lines = new_lines
        self._line = line
        self._column = column

    def split_line(self):
        """Break the cursor line in two at the cursor."""
        self._desired_column = None
        line = self._lines[self._line]
        # The current line keeps everything before the cursor
        self._lines[self._line] = line[: self._column]
        self._lines.insert(self._line + 1, line[self._column :])
        self._line += 1
        self._column = 0

    def resize(self, width: int):
        """Change the wrap width and re-flow the whole document."""
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        if width == self._width:
            return

        logger.debug("Re-flowing %d lines from width %d to %d", len(self._lines), self._width, width)
        ranges = reflow_ranges(self._lines, self._width)
        self._width = width
        self._desired_column = None

        new_lines: list[str] = []
        new_line, new_column = self._line, self._column
        for start, end in ranges:
            holds_cursor = start <= self._line <= end
            if start == end and is_separator_line(self._lines[start]):
                if holds_cursor:
                    new_line = len(new_lines)
                new_lines.append(self._lines[start])
                continue

            wrapped = wrap(self._lines[start : end + 1], width)
            if holds_cursor:
                row, new_column = locate_offset(wrapped, self._offset_in_paragraph(start))
                new_line = len(new_lines) + row
            new_lines.extend(wrapped)

        self._lines = new_lines
        self._line = new_line
        self._column = new_column

    # --- Cursor movement ---

    def move_left(self):
        self._desired_column = None
        if self._at_start_of_buffer():
            return

        if self._at_start_of_line():
            self._line -= 1
            self._move_to_end_of_line()
            return

        self._column -= 1

    def move_right(self):
        self._desired_column = None
        if self._at_end_of_buffer():
            return

        if self._at_end_of_line():
            self._line += 1
            self._column = 0
            return

        self._column += 1

    def move_up(self):
        if self._at_first_line():
            self._desired_column = None
            self._column = 0
            return

        self._move_vertically(-1)

    def move_down(self):
        if self._at_last_line():
            self._desired_column = None
            self._move_to_end_of_line()
            return

        self._move_vertically(1)

    # --- Internals ---

    def _move_vertically(self, delta: int):
        if self._desired_column is None:
            self._desired_column = self._column
        self._line += delta
        self._column = min(self._desired_column, len(self._lines[self._line]))

    def _offset_in_paragraph(self, start: int) -> int:
        """Characters between the start of the paragraph and the cursor."""
        return sum(len(line) for line in self._lines[start : self._line]) + self._column

    def _rewrap_current_paragraph(self):
        self._lines, self._line, self._column = rewrap_paragraph(
            self._lines, self._line, self._column, self._width)

    def _move_to_end_of_line(self):
        self._column = len(self._lines[self._line])

    def _at_start_of_buffer(self) -> bool:
        return self._at_first_line() and self._at_start_of_line()

    def _at_end_of_buffer(self) -> bool:
        return self._at_last_line() and self._at_end_of_line()

    def _at_start_of_line(self) -> bool:
        return self._column == 0

    def _at_end_of_line(self) -> bool:
        return self._column == len(self._lines[self._line])

    def _at_first_line(self) -> bool:
        return self._line == 0

    def _at_last_line(self) -> bool:
        return self._line == len(self._lines) - 1
