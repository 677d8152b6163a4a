"""
Input Matcher
==============
Turns key presses into entry-editing actions and resolves a submitted
entry against the falling words.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import logging

from .words import FallingWord, WordBank

logger = logging.getLogger(__name__)

SUBMIT_CHARS = ('\r', '\n')
BACKSPACE_CHARS = ('\x7f', '\x08')


class ActionKind(Enum):
    """What a key press does to the pending entry."""
    APPEND = auto()
    BACKSPACE = auto()
    SUBMIT = auto()
    QUIT = auto()
    IGNORE = auto()


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    char: str = ''


IGNORE = Action(ActionKind.IGNORE)


def classify_key(key) -> Action:
    """Map a blessed Keystroke from inkey() to an Action."""
    if key is None or not key:
        return IGNORE

    name = key.name
    if name == 'KEY_ESCAPE':
        return Action(ActionKind.QUIT)
    if name == 'KEY_ENTER':
        return Action(ActionKind.SUBMIT)
    if name in ('KEY_BACKSPACE', 'KEY_DELETE'):
        return Action(ActionKind.BACKSPACE)
    if key.is_sequence:
        return IGNORE

    # Some terminals deliver these unsequenced
    text = str(key)
    if text in SUBMIT_CHARS:
        return Action(ActionKind.SUBMIT)
    if text in BACKSPACE_CHARS:
        return Action(ActionKind.BACKSPACE)
    if text == '\x1b':
        return Action(ActionKind.QUIT)
    if len(text) == 1 and text.isprintable():
        return Action(ActionKind.APPEND, text)
    return IGNORE


def normalize_entry(entry: str) -> str:
    return entry.lower().strip()


def find_match(entry: str, bank: WordBank) -> Optional[FallingWord]:
    """Earliest-spawned active word equal to the normalized entry."""
    wanted = normalize_entry(entry)
    if not wanted:
        return None
    for word in bank.active:
        if word.text.strip() == wanted:
            return word
    return None


def submit(entry: str, bank: WordBank) -> Optional[FallingWord]:
    """
    Resolve a submitted entry.

    Removes and returns exactly one matching word, or None when nothing
    matches. Clearing the entry and scoring are up to the caller.
    """
    word = find_match(entry, bank)
    if word is not None:
        bank.remove(word)
        logger.debug(f"Matched {word.text!r} at row {word.row}")
    return word
