"""Editor settings resolved from keyword overrides and the environment."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX, record_event

_SEPARATORS = {"lf": "\n", "crlf": "\r\n"}


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Knobs shared by the session and the host adapters."""

    line_separator: str = "\n"
    encoding: str = "utf-8"
    show_scrollbar: bool = True
    # Used by hosts that cannot measure their text area yet.
    fallback_height: int = 24

    def __post_init__(self) -> None:
        if self.line_separator not in _SEPARATORS.values():
            raise ValueError(f"Unsupported line separator {self.line_separator!r}")
        codecs.lookup(self.encoding)
        if self.fallback_height < 0:
            raise ValueError("fallback_height cannot be negative")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides: object
    ) -> "EditorSettings":
        env = os.environ if environ is None else environ
        settings = cls()

        separator = env.get(f"{ENV_PREFIX}LINE_SEPARATOR")
        if separator is not None:
            value = _SEPARATORS.get(separator.strip().lower())
            if value is None:
                _ignored("LINE_SEPARATOR", separator)
            else:
                settings = replace(settings, line_separator=value)

        encoding = env.get(f"{ENV_PREFIX}ENCODING")
        if encoding:
            try:
                codecs.lookup(encoding)
            except LookupError:
                _ignored("ENCODING", encoding)
            else:
                settings = replace(settings, encoding=encoding)

        scrollbar = env.get(f"{ENV_PREFIX}SCROLLBAR")
        if scrollbar is not None:
            settings = replace(
                settings,
                show_scrollbar=scrollbar.strip().lower() in {"1", "true", "yes", "on"},
            )

        height = env.get(f"{ENV_PREFIX}FALLBACK_HEIGHT")
        if height is not None:
            try:
                settings = replace(settings, fallback_height=max(0, int(height)))
            except ValueError:
                _ignored("FALLBACK_HEIGHT", height)

        if overrides:
            settings = replace(settings, **overrides)  # type: ignore[arg-type]
        return settings


def _ignored(name: str, value: str) -> None:
    record_event(
        "settings.ignored",
        level="warning",
        data={"variable": f"{ENV_PREFIX}{name}", "value": value},
    )


__all__ = ["EditorSettings"]
