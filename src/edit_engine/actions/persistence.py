"""Saving from inside the session state machine."""

from __future__ import annotations

from edit_engine.buffer import DocumentIOError
from edit_engine.modes.base_mode import ModeContext, ModeResult, SessionState


def persist(context: ModeContext, filename: str) -> ModeResult:
    """Save to ``filename`` and finish a pending exit if one was requested.

    A failed save cancels the pending exit and drops back to editing with the
    error as the notice; buffer and ``modified`` flag are left as they were.
    """

    session = context.session
    try:
        session.save(filename)
    except DocumentIOError as exc:
        session.exit_after_save = False
        return ModeResult(
            consumed=True,
            switch_to=SessionState.EDITING,
            status="save_failed",
            message=str(exc),
        )

    if session.exit_after_save:
        return ModeResult(
            consumed=True, status="saved_exit", message=f"Saved {filename}", terminate=True
        )
    return ModeResult(
        consumed=True,
        switch_to=SessionState.EDITING,
        status="saved",
        message=f"Saved {filename}",
    )


__all__ = ["persist"]
