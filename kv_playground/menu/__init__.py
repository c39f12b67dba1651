"""Menu module for KV Playground."""

from .commands import Choice, ChoiceType, CommandRegistry, MenuOption, build_registry
from .dispatcher import run_menu, show_menu

__all__ = [
    "Choice",
    "ChoiceType",
    "CommandRegistry",
    "MenuOption",
    "build_registry",
    "run_menu",
    "show_menu",
]
