"""Drill-down navigation and its terminal collaborators."""

from .controller import NavigationState, SelectionProvider, Jumper, navigate
from .providers import TerminalSelectionProvider, PrintJumper, EditorJumper

__all__ = [
    "NavigationState",
    "SelectionProvider",
    "Jumper",
    "navigate",
    "TerminalSelectionProvider",
    "PrintJumper",
    "EditorJumper",
]
