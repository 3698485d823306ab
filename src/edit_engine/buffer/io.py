"""Whole-file read/write helpers used by the session's save and load hooks."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from edit_engine.runtime import telemetry


class DocumentIOError(RuntimeError):
    """Raised when a document cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: str, operation: str) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation


def read_document(path: str, *, encoding: str = "utf-8") -> Optional[str]:
    """Return the full text at ``path`` or ``None`` when nothing exists there."""

    target = Path(path)
    with telemetry.span(
        "io::read", component="io", metadata={"path": path}
    ) as handle:
        if not target.exists():
            handle.add_metadata("status", "missing")
            return None
        try:
            # newline="" leaves line endings to split_text.
            with open(target, encoding=encoding, newline="") as stream:
                text = stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentIOError(
                f"Cannot read '{path}': {exc}", path=path, operation="read"
            ) from exc
        handle.add_metadata("chars", len(text))
        return text


def write_document(path: str, text: str, *, encoding: str = "utf-8") -> None:
    """Replace the contents of ``path`` with ``text``."""

    with telemetry.span(
        "io::write", component="io", metadata={"path": path, "chars": len(text)}
    ):
        try:
            # newline="" keeps the session's separator byte-for-byte.
            with open(path, "w", encoding=encoding, newline="") as handle:
                handle.write(text)
        except (OSError, UnicodeEncodeError) as exc:
            raise DocumentIOError(
                f"Cannot write '{path}': {exc}", path=path, operation="write"
            ) from exc


__all__ = ["DocumentIOError", "read_document", "write_document"]
