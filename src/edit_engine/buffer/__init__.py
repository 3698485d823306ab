"""Text buffer, cursor state and document persistence."""

from .document import TextBuffer, split_text
from .io import DocumentIOError, read_document, write_document
from .state import ORIGIN, CursorPosition, DocumentMeta
from .validation import BufferValidationError, ensure_cursor

__all__ = [
    "TextBuffer",
    "split_text",
    "CursorPosition",
    "DocumentMeta",
    "ORIGIN",
    "BufferValidationError",
    "ensure_cursor",
    "DocumentIOError",
    "read_document",
    "write_document",
]
