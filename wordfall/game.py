"""
Game State Machine
===================
Intro -> playing -> game over. One Game owns all mutable state and
advances it a frame at a time.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple
import logging
import random
import time

from .config import (
    GameConfig, STATUS_ROWS,
    INTRO_LINES, LOST_MESSAGE, QUIT_MESSAGE, SCORE_MESSAGE,
)
from .engine import NEON_RED, NEON_YELLOW
from .matcher import ActionKind, classify_key, submit
from .renderer import Renderer
from .scheduler import FallScheduler, advance
from .spawner import spawn
from .words import WordBank

logger = logging.getLogger(__name__)

# Game phases
PHASE_INTRO = 'intro'
PHASE_PLAYING = 'playing'
PHASE_GAME_OVER = 'game_over'


@dataclass
class GameState:
    """Score, health and entry for one session, sized once at startup."""
    columns: int
    rows: int
    health: int
    score: int = 0
    quit_requested: bool = False
    pending: str = ''
    phase: str = PHASE_INTRO
    frame: int = 0
    words_matched: int = 0
    words_escaped: int = 0

    @property
    def bottom_row(self) -> int:
        """Row at which a falling word escapes."""
        return self.rows - STATUS_ROWS

    @property
    def lost(self) -> bool:
        return self.health <= 0


class Game:
    """
    Central game controller. `step()` advances exactly one frame and
    may be called repeatedly until `is_over` becomes true.
    """

    def __init__(self, surface, words: Sequence[str],
                 config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 sleep: Optional[Callable[[float], None]] = None):
        self.surface = surface
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self._sleep = sleep or time.sleep

        columns, rows = surface.size()
        self.state = GameState(columns=columns, rows=rows,
                               health=self.config.starting_health)
        self.bank = WordBank(pool=tuple(words))
        self.scheduler = FallScheduler(self.config.frames_per_fall)
        self.renderer = Renderer(surface, columns, rows)
        self.final_lines: Tuple[str, ...] = ()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def health(self) -> int:
        return self.state.health

    @property
    def quit_requested(self) -> bool:
        return self.state.quit_requested

    @property
    def phase(self) -> str:
        return self.state.phase

    @property
    def is_over(self) -> bool:
        return self.state.phase == PHASE_GAME_OVER

    @property
    def lost(self) -> bool:
        return self.state.lost

    def request_quit(self):
        self.state.quit_requested = True

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def _show_message(self, lines: Sequence[str], color: int):
        self.surface.clear_screen()
        self.renderer.buffer.mark_cleared()
        self.surface.write(self.renderer.render_message(lines, color))
        self.surface.flush()

    def intro(self):
        """Show the instructions for a fixed delay, then start playing."""
        if self.state.phase != PHASE_INTRO:
            return
        self._show_message(INTRO_LINES, NEON_YELLOW)
        self._sleep(self.config.intro_delay)

        self.surface.clear_screen()
        self.renderer.buffer.mark_cleared()
        self.surface.flush()

        self.state.phase = PHASE_PLAYING
        logger.info(f"Game started on a {self.state.columns}x{self.state.rows} terminal")

    def game_over(self):
        """Show the final score, hold it, then hand the terminal back."""
        lost = self.state.lost
        self.state.phase = PHASE_GAME_OVER
        self.final_lines = (
            LOST_MESSAGE if lost else QUIT_MESSAGE,
            SCORE_MESSAGE.format(score=self.state.score),
        )
        logger.info(
            f"Game over ({'lost' if lost else 'quit'}): score {self.state.score}, "
            f"{self.state.words_matched} matched, {self.state.words_escaped} escaped, "
            f"{self.state.frame} frames"
        )

        self._show_message(self.final_lines, NEON_RED if lost else NEON_YELLOW)
        self._sleep(self.config.game_over_delay)

        self.surface.clear_screen()
        self.surface.show_cursor()
        self.surface.flush()

    # -------------------------------------------------------------------------
    # Frame
    # -------------------------------------------------------------------------

    def handle_input(self):
        """Drain every key press waiting this frame."""
        key = self.surface.poll(0)
        while key:
            action = classify_key(key)
            if action.kind == ActionKind.APPEND:
                self.state.pending += action.char
            elif action.kind == ActionKind.BACKSPACE:
                self.state.pending = self.state.pending[:-1]
            elif action.kind == ActionKind.SUBMIT:
                self._submit()
            elif action.kind == ActionKind.QUIT:
                self.state.quit_requested = True
                return
            key = self.surface.poll(0)

    def _submit(self):
        word = submit(self.state.pending, self.bank)
        if word is not None:
            self.state.score += 1
            self.state.words_matched += 1
        self.state.pending = ''

    def _fall(self):
        if not self.scheduler.tick():
            return
        delta = advance(self.bank, self.state.bottom_row)
        if delta:
            self.state.health += delta
            self.state.words_escaped -= delta
            logger.debug(f"Health {self.state.health} after {-delta} escape(s)")

    def _spawn(self):
        if len(self.bank) < self.config.max_active_words:
            spawn(self.bank, self.state.columns, self.rng, self.config.spawn_attempts)

    def step(self) -> bool:
        """
        Advance one frame. Returns False once the game is over.

        Runs the intro first if it has not been shown yet.
        """
        if self.state.phase == PHASE_GAME_OVER:
            return False
        if self.state.phase == PHASE_INTRO:
            self.intro()
            return True

        self.handle_input()
        self._fall()
        self._spawn()

        self.surface.write(self.renderer.render(
            self.bank, self.state.pending, self.state.score, self.state.health
        ))
        self.surface.flush()
        self.state.frame += 1

        if self.state.lost or self.state.quit_requested:
            self.game_over()
            return False
        return True
