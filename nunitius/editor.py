"""Interactive message editor built on the wrapping text buffer."""

import logging
import os
import select
import signal
from typing import Optional

from .buffer import TextBuffer
from .commands import CommandRegistry
from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent
from .terminal import TerminalInterface
from .view import BufferView

logger = logging.getLogger(__name__)


class Editor:
    """Full-screen editor that lets the user compose one message."""

    def __init__(self, width: Optional[int] = None, terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components.

        Args:
            width: Fixed wrap width. When None the width follows the terminal.
            terminal: Terminal to draw on (a new one if not given)
        """
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.fixed_width = width
        self.buffer = TextBuffer(self._wrap_width())
        self.view = BufferView(self.buffer, max(1, self.terminal.height))
        self.command_registry = CommandRegistry()
        self.running = False
        self.result: Optional[str] = None
        self.status_message: Optional[str] = None
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def _wrap_width(self) -> int:
        if self.fixed_width is not None:
            return self.fixed_width
        return max(EditorConstants.MIN_WIDTH, self.terminal.width - EditorConstants.RIGHT_MARGIN)

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def _apply_terminal_size(self):
        """Re-flow the buffer to the current terminal geometry."""
        width = self._wrap_width()
        rows = max(1, self.terminal.height)
        logger.debug("Terminal resized; wrap width %d, %d rows", width, rows)
        self.view.resize(width, rows)
        self.terminal.invalidate_frame()

    def run(self) -> Optional[str]:
        """Run the editor until the user sends or cancels.

        Returns:
            The composed text, or None if the user cancelled
        """
        self.terminal.setup()
        self.running = True
        self.result = None

        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            need_draw = True
            while self.running:
                if need_draw:
                    self._draw()
                    need_draw = False

                # Wait for input on stdin or resize pipe
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                if self._resize_pipe_r in ready:
                    # Clear the pipe
                    os.read(self._resize_pipe_r, 1024)
                    self._apply_terminal_size()
                    need_draw = True
                elif 0 in ready:
                    key_event = self.keyboard.get_key_event(timeout=0)
                    if key_event:
                        self._handle_key_event(key_event)
                        need_draw = True

        except KeyboardInterrupt:
            self.result = None
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

        return self.result

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.view.render()
        line, column = self.buffer.cursor()
        status = self.status_message or EditorConstants.STATUS_HINT
        position = EditorConstants.STATUS_POSITION.format(line + 1, column + 1)
        self.terminal.update_frame(
            self.view.lines,
            self.view.visual_cursor_y,
            self.view.visual_cursor_x,
            status=f" {status}  {position}",
        )

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # Clear status message on any keypress
        self.status_message = None
        self.command_registry.execute(self, key_event)
