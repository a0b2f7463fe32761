"""Nunitius CLI entry point.

Allows running via `python -m nunitius` and provides the console script
defined in `pyproject.toml`. The composed message is printed on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string

USAGE = "usage: nunitius [--width N] [--log-file PATH] [--keytest] [--version]"


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    # Represent control/escape characters visibly
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print parsed key events until ESC is pressed."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            flags = " flags=ctrl" if ev.is_ctrl else ""
            print(f"type={ev.key_type.value} value={ev.value} raw='{_escape_bytes(ev.raw)}'{flags}\r")
    finally:
        term.cleanup()


def _parse_width(value: str) -> Optional[int]:
    try:
        width = int(value)
    except ValueError:
        return None
    return width if width >= 1 else None


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: width, log file, keyboard test mode and version
    args = list(sys.argv[1:] if argv is None else argv)
    width: Optional[int] = None
    log_file: Optional[str] = None

    while args:
        arg = args.pop(0)
        if arg in ("--version", "-V"):
            print(get_version_string())
            return 0
        if arg in ('--keytest', '--keyboard-test'):
            run_keyboard_test()
            return 0
        if arg in ('--width', '-w') and args:
            width = _parse_width(args.pop(0))
            if width is None:
                print(USAGE, file=sys.stderr)
                print("nunitius: error: --width must be a positive integer", file=sys.stderr)
                return 2
        elif arg == '--log-file' and args:
            log_file = args.pop(0)
        else:
            print(USAGE, file=sys.stderr)
            print(f"nunitius: error: unrecognized argument {arg!r}", file=sys.stderr)
            return 2

    if log_file:
        # The terminal belongs to the editor, so logs only ever go to a file
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        package_logger = logging.getLogger("nunitius")
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .settings import Settings

    if width is None:
        width = Settings().width

    text = Editor(width=width).run()
    if text is None:
        return 1
    print(text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
