"""Exceptions raised by the game."""


class WordfallError(Exception):
    """Base class for all wordfall errors."""


class TerminalIOError(WordfallError):
    """A terminal operation (size, write, flush, key poll) failed."""


class WordSourceError(WordfallError):
    """The word list could not be read or contains no words."""
