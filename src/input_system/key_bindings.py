"""
Key bindings - translate raw keys into session triggers for the current phase
"""

import enum
from typing import Optional, Union

from game_system.snapshot import GamePhase
from game_system.triggers import Trigger

ENTER_KEYS = ("\n", "\r")
CONFIRM_KEYS = ENTER_KEYS + (" ",)
CLEAR_KEYS = ("c", "C", "\x7f", "\b")
RESTART_KEYS = ENTER_KEYS + ("r", "R")
HOME_KEYS = ("h", "H")
QUIT_KEYS = ("q", "Q", "\x03")
RESET_KEYS = ("\x1b",)


class ControlCommand(enum.Enum):
    """Loop-level commands that are not session triggers"""
    QUIT = "quit"
    RESET = "reset"


class KeyBindings:
    """
    Phase-aware key map.

    START:     1-9 select level, Enter/Space start
    READY:     Enter/Space go
    ANSWERING: 0-9 digit, c/Backspace clear, Enter submit
    RESULT:    Enter/r restart, h home
    Any phase: Esc reset to START, q/Ctrl+C quit
    """

    def resolve(self, key: str, phase: GamePhase) -> Optional[Union[Trigger, ControlCommand]]:
        """
        Returns:
            Trigger or ControlCommand for the key, None if the key is unbound
        """
        if key in QUIT_KEYS:
            return ControlCommand.QUIT
        if key in RESET_KEYS:
            return ControlCommand.RESET

        if phase is GamePhase.START:
            if key.isdigit() and key != "0":
                return Trigger.select_preset(int(key) - 1)
            if key in CONFIRM_KEYS:
                return Trigger.start_game()

        elif phase is GamePhase.READY:
            if key in CONFIRM_KEYS:
                return Trigger.advance()

        elif phase is GamePhase.ANSWERING:
            if key.isdigit():
                return Trigger.digit(int(key))
            if key in CLEAR_KEYS:
                return Trigger.clear()
            if key in ENTER_KEYS:
                return Trigger.submit()

        elif phase is GamePhase.RESULT:
            if key in RESTART_KEYS:
                return Trigger.restart()
            if key in HOME_KEYS:
                return Trigger.go_home()

        return None
