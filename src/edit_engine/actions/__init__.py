"""Session actions keyed by logical key codes and prompt answers."""

from .editing import EDITING_ACTIONS, request_exit, save_document, save_document_as
from .persistence import persist
from .prompts import (
    INVALID_RESPONSE,
    answer_exit_prompt,
    cancel_filename,
    submit_filename,
)

__all__ = [
    "EDITING_ACTIONS",
    "INVALID_RESPONSE",
    "answer_exit_prompt",
    "cancel_filename",
    "persist",
    "request_exit",
    "save_document",
    "save_document_as",
    "submit_filename",
]
