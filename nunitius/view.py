"""Vertical viewport over a text buffer."""

from .buffer import TextBuffer


class BufferView:
    """Shows the part of a buffer that fits in ``num_rows`` terminal rows.

    The buffer owns the width; the view only adds a height and a scroll
    offset. Call ``render()`` after every change to refresh ``lines`` and
    the on-screen cursor.
    """

    def __init__(self, buffer: TextBuffer, num_rows: int):
        if num_rows < 1:
            raise ValueError(f"num_rows must be positive, got {num_rows}")
        self.buffer = buffer
        self.num_rows = num_rows
        self.top_line = 0
        self.lines: list[str] = []
        self.visual_cursor_y = 0
        self.visual_cursor_x = 0

    @property
    def num_columns(self) -> int:
        return self.buffer.width

    def resize(self, num_columns: int, num_rows: int):
        """Re-flow the buffer to a new width and adopt a new height."""
        if num_rows < 1:
            raise ValueError(f"num_rows must be positive, got {num_rows}")
        self.buffer.resize(num_columns)
        self.num_rows = num_rows

    def render(self):
        """Scroll just enough to keep the cursor visible and refresh lines."""
        all_lines = self.buffer.lines
        line, column = self.buffer.cursor()

        if line < self.top_line:
            self.top_line = line
        elif line >= self.top_line + self.num_rows:
            self.top_line = line - self.num_rows + 1
        # Don't leave blank rows at the bottom when there is text above
        self.top_line = max(0, min(self.top_line, len(all_lines) - self.num_rows))

        self.lines = all_lines[self.top_line : self.top_line + self.num_rows]
        self.visual_cursor_y = line - self.top_line
        self.visual_cursor_x = column
