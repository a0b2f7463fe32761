"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select

from .constants import EditorConstants


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Last painted frame, for minimal updates
        self._last_lines: Optional[list[str]] = None
        self._last_status: Optional[str] = None

    def setup(self):
        """Enter fullscreen mode and start reading keys."""
        print(self.term.enter_fullscreen + self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input
                # Entering the context puts the terminal in raw mode
                self._curtsies_input = Input(keynames='curtsies')
                self._curtsies_input.__enter__()
            except Exception:
                # Justification: curtsies can fail to initialize without a
                # real tty (CI, pipes). Run without input instead of crashing.
                self._curtsies_input = None

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except Exception:
                # Justification: teardown should never crash the app.
                pass
            finally:
                self._curtsies_input = None

    def invalidate_frame(self) -> None:
        """Forget the last frame so the next update repaints everything."""
        self._last_lines = None
        self._last_status = None

    def update_frame(self, lines: list[str], cursor_y: int, cursor_x: int,
                     status: str = "") -> None:
        """Paint text lines and the status line, then place the cursor.

        Only lines that differ from the last frame are rewritten. The first
        paint, and any change in the number of lines, clears the screen.
        """
        if self._last_lines is None or len(self._last_lines) != len(lines):
            print(self.term.home + self.term.clear, end='')
            self._last_lines = [None] * len(lines)
            self._last_status = None

        for y, line in enumerate(lines):
            if line != self._last_lines[y]:
                print(self.term.move(y, 0) + line + self.term.clear_eol, end='')
                self._last_lines[y] = line

        if status != self._last_status:
            print(self.term.move(self.term.height - 1, 0) + self.term.reverse
                  + status[:self.term.width].ljust(self.term.width) + self.term.normal, end='')
            self._last_status = status

        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name as a string, or None if nothing arrived
        """
        if self._curtsies_input is None:
            return None
        if timeout is not None:
            r, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not r:
                return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - EditorConstants.STATUS_LINES
