"""Actions for the filename and exit-confirmation prompts."""

from __future__ import annotations

from typing import Callable, Dict

from edit_engine.modes.base_mode import ModeContext, ModeResult, SessionState

from .persistence import persist

INVALID_RESPONSE = "Invalid response. Please enter y, n or c."

ExitResponse = Callable[[ModeContext], ModeResult]


def submit_filename(context: ModeContext, text: str) -> ModeResult:
    if not text.strip():
        return ModeResult(
            consumed=True, status="filename_empty", message="Filename cannot be empty."
        )
    return persist(context, text)


def cancel_filename(context: ModeContext) -> ModeResult:
    context.session.exit_after_save = False
    return ModeResult(
        consumed=True,
        switch_to=SessionState.EDITING,
        status="save_cancelled",
        message="Save cancelled.",
    )


def _save_then_exit(context: ModeContext) -> ModeResult:
    session = context.session
    session.exit_after_save = True
    filename = session.document.filename
    if filename is None:
        return ModeResult(
            consumed=True,
            switch_to=SessionState.PROMPT_SAVE_FILENAME,
            status="prompt_filename",
        )
    return persist(context, filename)


def _discard_and_exit(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(consumed=True, status="exit_discard", terminate=True)


def _return_to_editing(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(
        consumed=True, switch_to=SessionState.EDITING, status="exit_cancelled"
    )


def invalid_response(context: ModeContext) -> ModeResult:
    context.bus.emit("prompt.invalid", SessionState.PROMPT_CONFIRM_EXIT)
    return ModeResult(consumed=True, status="invalid_response", message=INVALID_RESPONSE)


EXIT_RESPONSES: Dict[str, ExitResponse] = {
    "y": _save_then_exit,
    "n": _discard_and_exit,
    "c": _return_to_editing,
}


def answer_exit_prompt(context: ModeContext, answer: str) -> ModeResult:
    handler = EXIT_RESPONSES.get(answer.lower(), invalid_response)
    return handler(context)


__all__ = [
    "INVALID_RESPONSE",
    "EXIT_RESPONSES",
    "answer_exit_prompt",
    "cancel_filename",
    "invalid_response",
    "submit_filename",
]
