"""Session states and the mode protocol they implement.

Concrete modes live in :mod:`edit_engine.modes.editing_mode` and
:mod:`edit_engine.modes.prompt_modes`; they import the action tables, which in
turn import this package, so they are not re-exported here.
"""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult, SessionState

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "SessionState",
]
