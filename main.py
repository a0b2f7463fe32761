#!/usr/bin/env python3
"""Nunitius - compose a message in a wrapping terminal editor.

Usage:
    python main.py [--width N]

Controls:
    Arrow keys: Navigate cursor
    Type to insert text; lines re-wrap as you type
    Backspace: Delete character
    Enter: New line (an empty line separates paragraphs)
    Ctrl-D: Send (prints the message)
    Esc / Ctrl-C: Cancel
"""

import sys
from nunitius.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
