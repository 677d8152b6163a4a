"""
Fall Scheduler
===============
Moves falling words down on their own cadence, decoupled from the
frame rate, and removes the ones that reach the bottom.
"""

import logging
from typing import List

from .words import FallingWord, WordBank

logger = logging.getLogger(__name__)


class FallScheduler:
    """
    Counts rendered frames and reports when a fall tick is due.

    With 30 frames per fall and a 30 FPS loop, words drop one row
    per second regardless of how long each frame's work takes.
    """

    def __init__(self, frames_per_fall: int):
        if frames_per_fall < 1:
            raise ValueError(f'frames per fall must be at least 1, got {frames_per_fall}')
        self.frames_per_fall = frames_per_fall
        self.frame_count = 0

    def tick(self) -> bool:
        """Advance one frame. True when this frame is a fall tick."""
        self.frame_count += 1
        if self.frame_count >= self.frames_per_fall:
            self.frame_count = 0
            return True
        return False


def advance(bank: WordBank, bottom_row: int) -> int:
    """
    Run one fall tick over the active words.

    Words already on `bottom_row` escape and are removed; every other
    word drops one row. Returns the health delta (-1 per escape).
    """
    survivors: List[FallingWord] = []
    escaped = 0

    for word in bank.active:
        if word.row >= bottom_row:
            escaped += 1
            logger.debug(f"Word {word.text!r} escaped at column {word.column}")
        else:
            word.row += 1
            survivors.append(word)

    bank.active = survivors
    return -escaped
