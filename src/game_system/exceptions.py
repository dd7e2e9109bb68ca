"""
Game exceptions

All rejectable conditions of the game core live here.
"""


class FlashAnzanError(Exception):
    """Base class for all game errors"""
    pass


class InvalidConfiguration(FlashAnzanError, ValueError):
    """A preset or runtime setting is out of its valid range"""
    pass
