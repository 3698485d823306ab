"""Logical key codes, key events and the bindings that produce them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class KeyCode(str, Enum):
    """Logical codes the edit session understands."""

    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    SAVE = "save"
    SAVE_AS = "save_as"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """One logical key press; ``char`` is set only for ``KeyCode.CHAR``."""

    code: KeyCode
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError("CHAR events carry exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.code.value} events do not carry a character")

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, char)


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = (m.strip().lower() for m in modifiers)
    return tuple(sorted(dict.fromkeys(value for value in values if value)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Host key press as reported by the terminal framework."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"ctrl+s"`` style tokens; the last part is the key."""

        if token == "+":
            return cls("+")
        parts = token.split("+")
        return cls(parts[-1], tuple(parts[:-1]))


@dataclass(frozen=True, slots=True)
class Binding:
    id: str
    stroke: KeyStroke
    code: KeyCode
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if self.code is KeyCode.CHAR:
            raise ValueError("character input is resolved from key text, not bound")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["KeyCode", "KeyEvent", "KeyStroke", "Binding"]
