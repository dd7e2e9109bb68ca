"""
Utilities package - logging, clocks and loop throttling for Flash Anzan
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .clock import MonotonicClock, FakeClock
from .once_in_ms import OnceInMs

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'MonotonicClock',
    'FakeClock',
    'OnceInMs'
]
