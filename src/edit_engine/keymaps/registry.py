"""Registry mapping host key strokes to logical key events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from edit_engine.runtime.telemetry import span

from .models import Binding, KeyEvent, KeyStroke

# Modifiers that turn a printable key into a command rather than text.
_COMMAND_MODIFIERS = frozenset({"ctrl", "alt", "meta", "super"})


@dataclass(slots=True)
class RegistryStats:
    binding_count: int
    signatures: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when two bindings claim the same key stroke."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on '{binding.key_signature}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns bindings and resolves strokes into ``KeyEvent`` values."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._by_signature: Dict[str, str] = {}
        self._logger_name = logger_name

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "stroke": binding.key_signature},
        ) as handle:
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            holder = self._by_signature.get(binding.key_signature)
            if holder is not None and holder != binding.id:
                if not replace:
                    handle.add_metadata("conflict", holder)
                    raise KeymapConflictError(binding, self._bindings[holder])
                self.unregister_binding(holder)

            previous = self._bindings.get(binding.id)
            if previous is not None:
                self._by_signature.pop(previous.key_signature, None)

            self._bindings[binding.id] = binding
            self._by_signature[binding.key_signature] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is not None:
            self._by_signature.pop(binding.key_signature, None)
        return binding

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def lookup(self, stroke: KeyStroke) -> Optional[Binding]:
        binding_id = self._by_signature.get(stroke.token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def resolve(
        self, stroke: KeyStroke, *, text: Optional[str] = None
    ) -> Optional[KeyEvent]:
        """Turn a host stroke into a logical event, or ``None`` if unbound.

        Bound strokes win. Otherwise a single printable character of ``text``
        becomes a ``CHAR`` event unless a command modifier is held.
        """

        binding = self.lookup(stroke)
        if binding is not None:
            return KeyEvent(binding.code)
        if _COMMAND_MODIFIERS.intersection(stroke.modifiers):
            return None
        if text is not None and len(text) == 1 and text.isprintable():
            return KeyEvent.character(text)
        return None

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            signatures=tuple(sorted(self._by_signature)),
        )


__all__ = ["KeymapRegistry", "KeymapConflictError", "RegistryStats"]
