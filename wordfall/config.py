"""
Game Configuration
===================
Frame pacing, fall cadence, and the fixed layout/glyph constants.
"""

from dataclasses import dataclass


# =============================================================================
# TIMING
# =============================================================================

TARGET_FPS = 30
FALL_ROWS_PER_SECOND = 1.0
INTRO_DELAY = 3.0  # seconds
GAME_OVER_DELAY = 3.0  # seconds

# =============================================================================
# GAMEPLAY
# =============================================================================

MAX_ACTIVE_WORDS = 3
STARTING_HEALTH = 3
SPAWN_ATTEMPTS = 100

# =============================================================================
# LAYOUT
# =============================================================================

STATUS_ROWS = 3  # Input/score/health boxes at the bottom
MIN_WIDTH = 64  # Health box (a quarter of the width) must fit 3 markers
MIN_HEIGHT = 10

HEALTH_CHAR = 'o'

# Rounded box glyphs: top-left, horizontal, top-right, vertical,
# bottom-right, bottom-left
BOX_TOP_LEFT = '╭'
BOX_HORIZONTAL = '─'
BOX_TOP_RIGHT = '╮'
BOX_VERTICAL = '│'
BOX_BOTTOM_RIGHT = '╯'
BOX_BOTTOM_LEFT = '╰'

# =============================================================================
# MESSAGES
# =============================================================================

INTRO_LINES = (
    'Type the falling words as fast as you can!',
    'Get as many points as possible without depleting your health!',
)
LOST_MESSAGE = 'You lost all your health!'
QUIT_MESSAGE = 'Goodbye!'
SCORE_MESSAGE = 'Your final score: {score}'


@dataclass
class GameConfig:
    """Tunable settings for one game session."""
    fps: int = TARGET_FPS
    fall_rows_per_second: float = FALL_ROWS_PER_SECOND
    max_active_words: int = MAX_ACTIVE_WORDS
    starting_health: int = STARTING_HEALTH
    spawn_attempts: int = SPAWN_ATTEMPTS
    intro_delay: float = INTRO_DELAY
    game_over_delay: float = GAME_OVER_DELAY

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f'fps must be positive, got {self.fps}')
        if self.fall_rows_per_second <= 0:
            raise ValueError(
                f'fall rate must be positive, got {self.fall_rows_per_second}'
            )
        if self.max_active_words < 1:
            raise ValueError(
                f'max active words must be at least 1, got {self.max_active_words}'
            )
        if self.starting_health < 1:
            raise ValueError(
                f'starting health must be at least 1, got {self.starting_health}'
            )
        if self.spawn_attempts < 1:
            raise ValueError(
                f'spawn attempts must be at least 1, got {self.spawn_attempts}'
            )
        if self.intro_delay < 0 or self.game_over_delay < 0:
            raise ValueError('delays must not be negative')

    @property
    def frame_time(self) -> float:
        """Seconds per rendered frame."""
        return 1.0 / self.fps

    @property
    def frames_per_fall(self) -> int:
        """Frames between two fall ticks (never less than one)."""
        return max(1, round(self.fps / self.fall_rows_per_second))
