"""WORDFALL - a falling-words typing game for the terminal."""

__version__ = '0.1.0'
