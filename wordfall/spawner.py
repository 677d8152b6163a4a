"""
Word Spawner
=============
Places new words at the top of the play field without horizontal
overlap against the words already falling.
"""

import logging
import random
from typing import Optional

from .config import SPAWN_ATTEMPTS
from .words import FallingWord, WordBank

logger = logging.getLogger(__name__)


def column_range(word_len: int, field_width: int) -> int:
    """Highest legal starting column for a word (0 if it does not fit)."""
    if field_width > word_len:
        return field_width - word_len
    return 0


def is_span_free(bank: WordBank, start: int, end: int) -> bool:
    """Check that [start, end) overlaps none of the active words."""
    return not any(word.overlaps(start, end) for word in bank.active)


def pick_column(bank: WordBank, word_len: int, field_width: int,
                rng: random.Random, attempts: int = SPAWN_ATTEMPTS) -> int:
    """
    Draw random columns until one gives a free span.

    Falls back to column 0 after `attempts` misses so a crowded field
    never stalls the game.
    """
    max_col = column_range(word_len, field_width)
    for _ in range(attempts):
        col = rng.randint(0, max_col)
        if is_span_free(bank, col, col + word_len):
            return col

    logger.debug(f"No free span for width {word_len} after {attempts} attempts, using column 0")
    return 0


def spawn(bank: WordBank, field_width: int,
          rng: Optional[random.Random] = None,
          attempts: int = SPAWN_ATTEMPTS) -> Optional[FallingWord]:
    """
    Spawn a random pool word at row 0 and add it to the active list.

    Returns the new word, or None if the pool is empty.
    """
    if field_width <= 0:
        raise ValueError(f'field width must be positive, got {field_width}')
    if not bank.pool:
        return None

    rng = rng or random.Random()
    text = rng.choice(bank.pool)
    column = pick_column(bank, len(text), field_width, rng, attempts)

    word = FallingWord(text=text, column=column, row=0)
    bank.add(word)
    logger.debug(f"Spawned {text!r} at column {column}")
    return word
