"""Constants and configuration defaults for the nunitius input widget."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Layout
    MIN_WIDTH = 1  # Narrowest wrap width the buffer accepts
    RIGHT_MARGIN = 1  # Columns kept free on the right so the cursor fits after a full line
    STATUS_LINES = 1  # Rows reserved at the bottom of the screen

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Settings
    APP_NAME = "nunitius"
    SETTINGS_FILENAME = "settings.json"

    # Status messages
    STATUS_HINT = "Ctrl-D to send | Esc to cancel"
    STATUS_POSITION = "Ln {}, Col {}"
