"""Host key strokes resolved into logical key events."""

from .models import Binding, KeyCode, KeyEvent, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "Binding",
    "KeyCode",
    "KeyEvent",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
