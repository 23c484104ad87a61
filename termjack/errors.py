"""Exceptions raised by the card and game engine."""


class CardError(Exception):
    """Base class for all card engine errors."""


class InvalidArgumentError(CardError, ValueError):
    """A malformed deck or hand, or a value outside its enumeration."""


class NoDataError(CardError, IndexError):
    """A card was requested from an empty deck."""


class OutputError(CardError, OSError):
    """Writing a listing to the output stream failed."""
