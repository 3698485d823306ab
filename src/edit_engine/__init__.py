"""Terminal plain-text editor: buffer, viewport and edit session engine."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "modes",
    "runtime",
    "session",
    "viewport",
]

__version__ = "0.1.0"
