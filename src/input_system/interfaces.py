"""
Abstract interfaces for key input sources
"""

from abc import ABC, abstractmethod
from typing import List


class IKeyReader(ABC):
    """
    Abstract interface for reading key presses.

    Allows different implementations: terminal keyboard, scripted, network, etc.
    """

    @abstractmethod
    def setup(self) -> None:
        """Initialize the input device/resources"""
        pass

    @abstractmethod
    def read_keys(self) -> List[str]:
        """
        Return every key pressed since the last call, oldest first.

        Must not block.
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """
        Release any resources used by the reader.

        Should be called before program exit (restores terminal modes, etc.)
        """
        pass


class ScriptedKeyReader(IKeyReader):
    """
    Key reader fed from a prepared list of frames.

    Each call to read_keys() returns the next frame's keys; once the
    script runs out it returns no keys.

    Example:
        reader = ScriptedKeyReader([["\\n"], [], ["\\n"]])
    """

    def __init__(self, frames: List[List[str]]):
        self._frames = [list(frame) for frame in frames]
        self.setup_called = False
        self.cleanup_called = False

    def setup(self) -> None:
        self.setup_called = True

    def read_keys(self) -> List[str]:
        if not self._frames:
            return []
        return self._frames.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self._frames

    def cleanup(self) -> None:
        self.cleanup_called = True
