"""
Terminal keyboard reader - non-blocking single key capture from stdin
"""

import select
import sys
import termios
import tty
from typing import List

from .interfaces import IKeyReader

ESC = "\x1b"


def split_keys(text: str) -> List[str]:
    """
    Split raw terminal input into keys.

    Arrow, function and navigation keys arrive as escape sequences
    (ESC [ ... final, or ESC O x). Each sequence is returned as one key so
    only a lone ESC reads as the Escape key.
    """
    keys: List[str] = []
    i = 0
    while i < len(text):
        if text[i] == ESC and i + 1 < len(text) and text[i + 1] in "[O":
            end = i + 2
            if text[i + 1] == "[":
                # Parameter bytes until a final byte in @..~
                while end < len(text) and not ("\x40" <= text[end] <= "\x7e"):
                    end += 1
            keys.append(text[i:end + 1])
            i = end + 1
        else:
            keys.append(text[i])
            i += 1
    return keys


class KeyboardReader(IKeyReader):
    """
    Reads single key presses from an interactive terminal.

    Puts stdin in cbreak mode (no line buffering, no echo, Ctrl+C still
    raises KeyboardInterrupt) and polls it with select, so it works over
    SSH and never blocks the game loop.

    Example:
        reader = KeyboardReader(logger=logger)
        reader.setup()
        keys = reader.read_keys()   # e.g. ['1', '\\n']
        reader.cleanup()
    """

    def __init__(self, logger, stream=None):
        """
        Args:
            logger: ClassLogger instance for logging
            stream: Input stream (defaults to sys.stdin)
        """
        self._logger = logger
        self._stream = stream or sys.stdin
        self._original_terminal_settings = None
        self._cbreak_enabled = False

    def _check_stdin_available(self) -> bool:
        """Check if the stream is an accessible TTY"""
        try:
            if not self._stream.isatty():
                return False
            select.select([self._stream], [], [], 0)
            return True
        except (OSError, ValueError):
            return False

    def setup(self) -> None:
        """Enable cbreak mode for immediate key capture"""
        if not self._check_stdin_available():
            self._logger.error("❌ Keyboard input not available (stdin not accessible or not a TTY)")
            raise RuntimeError("Keyboard input not available")

        try:
            self._original_terminal_settings = termios.tcgetattr(self._stream)
            tty.setcbreak(self._stream.fileno())
            self._cbreak_enabled = True
        except termios.error as e:
            self._logger.error(f"❌ Could not enable cbreak terminal mode: {e}")
            raise RuntimeError("Failed to enable cbreak terminal mode") from e

        self._logger.info("🎮 Keyboard reader initialized")

    def read_keys(self) -> List[str]:
        keys: List[str] = []
        if not self._cbreak_enabled:
            return keys

        try:
            while select.select([self._stream], [], [], 0)[0]:
                key = self._stream.read(1)
                if not key:  # EOF
                    break
                keys.append(key)
        except (OSError, ValueError) as e:
            self._logger.warning(f"Keyboard input error: {e}")
        return split_keys("".join(keys))

    def cleanup(self) -> None:
        """Restore original terminal settings"""
        if self._cbreak_enabled and self._original_terminal_settings:
            try:
                termios.tcsetattr(
                    self._stream.fileno(),
                    termios.TCSADRAIN,
                    self._original_terminal_settings
                )
            except termios.error as e:
                self._logger.warning(f"Could not restore terminal settings: {e}")
            self._cbreak_enabled = False
            self._logger.info("Keyboard reader cleaned up")
