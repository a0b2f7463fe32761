"""Nunitius - a wrapping text buffer for terminal input widgets."""

from .wrap import wrap, tokenize
from .buffer import TextBuffer, is_separator_line, paragraph_range
from .view import BufferView

__all__ = [
    'wrap',
    'tokenize',
    'TextBuffer',
    'is_separator_line',
    'paragraph_range',
    'BufferView',
]
