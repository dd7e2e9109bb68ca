"""
Input System Package

Key readers and phase-aware key bindings that turn key presses
into game session triggers.
"""

from .interfaces import IKeyReader, ScriptedKeyReader
from .keyboard_reader import KeyboardReader
from .key_bindings import KeyBindings, ControlCommand

__all__ = [
    "IKeyReader",
    "ScriptedKeyReader",
    "KeyboardReader",
    "KeyBindings",
    "ControlCommand"
]
