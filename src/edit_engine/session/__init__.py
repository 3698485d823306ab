"""Edit session state machine and launch menu."""

from .menu import LaunchMenu, MenuChoice, MenuOutcome
from .session import EditSession

__all__ = ["EditSession", "LaunchMenu", "MenuChoice", "MenuOutcome"]
