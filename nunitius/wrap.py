"""Greedy word wrap over whitespace/non-whitespace tokens."""

import re
from typing import Iterable

_TOKEN_RE = re.compile(r"\s+|\S+")


def tokenize(text: str) -> list[str]:
    """Split text into maximal runs of whitespace and non-whitespace.

    Joining the result gives back ``text`` exactly.
    """
    return _TOKEN_RE.findall(text)


def wrap(fragments: Iterable[str], width: int) -> list[str]:
    """Wrap a paragraph to ``width`` columns.

    ``fragments`` is the paragraph's current line layout; the fragments are
    concatenated as-is (no separator is inserted), so an already wrapped
    paragraph can be wrapped again without knowing where its original line
    breaks were.

    Tokens are packed greedily. A token that does not fit starts a new line,
    even when it is longer than ``width`` on its own: tokens are never split.
    Whitespace that still fits at a wrap point stays at the end of the
    earlier line.

    Args:
        fragments: Pieces of the paragraph text, in order
        width: Maximum line length, at least 1

    Returns:
        Non-empty list of lines whose concatenation equals the input text
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    text = "".join(fragments)
    if not text:
        return [""]

    lines: list[str] = []
    current = ""
    for token in tokenize(text):
        if not current or len(current) + len(token) <= width:
            current += token
        else:
            lines.append(current)
            current = token
    lines.append(current)
    return lines
