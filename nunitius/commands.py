"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the document."""
        self._move(editor, key_event)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_left()


class RightCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_right()


class UpLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_up()


class DownLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_down()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the document."""
        self._edit(editor, key_event)
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.buffer.backspace()


class SplitLineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.buffer.split_line()


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        # Pasted text arrives as one event with several characters
        editor.buffer.insert_text(key_event.value)


class SubmitCommand(EditorCommand):
    """Finish editing and hand the text back to the caller."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        text = editor.buffer.render()
        if not text.strip():
            editor.status_message = "Nothing to send"
            return False
        editor.result = text
        editor.running = False
        return False


class CancelCommand(EditorCommand):
    """Leave the editor without a result."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.result = None
        editor.running = False
        return False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.CTRL, 'h'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), SplitLineCommand())

        # Leaving the editor
        self.register((KeyType.CTRL, 'd'), SubmitCommand())
        self.register((KeyType.CTRL, 'c'), CancelCommand())
        self.register((KeyType.CTRL, 'q'), CancelCommand())
        self.register((KeyType.SPECIAL, 'escape'), CancelCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        # Handle regular text input
        if key_event.key_type == KeyType.REGULAR:
            return InsertTextCommand().execute(editor, key_event)

        return False
