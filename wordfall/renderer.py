"""
Game Renderer
==============
Draws the play field, the boxed status bar, and the centred message
screens into the double buffer.
"""

from typing import Sequence

from .config import (
    STATUS_ROWS, HEALTH_CHAR,
    BOX_TOP_LEFT, BOX_HORIZONTAL, BOX_TOP_RIGHT,
    BOX_VERTICAL, BOX_BOTTOM_RIGHT, BOX_BOTTOM_LEFT,
)
from .engine import DoubleBuffer, GRAY_DARK, GRAY_LIGHT, NEON_CYAN, NEON_GREEN, NEON_RED, NEON_YELLOW, WHITE
from .words import WordBank


def fit(content: str, width: int) -> str:
    """Left-align content in `width` columns, clipping the overflow."""
    if width <= 0:
        return ''
    return content[:width].ljust(width)


def box_lines(content: str, width: int) -> Sequence[str]:
    """Top, middle and bottom lines of a rounded box `width` columns wide."""
    inner = width - 2
    top = BOX_TOP_LEFT + BOX_HORIZONTAL * inner + BOX_TOP_RIGHT
    mid = BOX_VERTICAL + fit(content, inner) + BOX_VERTICAL
    bot = BOX_BOTTOM_LEFT + BOX_HORIZONTAL * inner + BOX_BOTTOM_RIGHT
    return top, mid, bot


HEALTH_LABEL = 'Health: '


def health_text(health: int) -> str:
    return HEALTH_LABEL + f'{HEALTH_CHAR} ' * max(0, health)


def max_health_markers(width: int) -> int:
    """Most health markers the health box fits on a terminal `width` wide."""
    inner = width // 4 - 2
    return max(0, (inner - len(HEALTH_LABEL)) // 2)


class Renderer:
    """
    Owns the double buffer for one terminal size.

    The play field is every row above the status bar. A word sitting
    on the bottom row has reached the status bar and is drawn over its
    top border until the next fall tick removes it.
    """

    def __init__(self, surface, width: int, height: int):
        self.surface = surface
        self.buffer = DoubleBuffer(surface, width, height)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    @property
    def field_height(self) -> int:
        """Rows available to falling words."""
        return max(0, self.height - STATUS_ROWS)

    @property
    def status_top(self) -> int:
        return self.height - STATUS_ROWS

    # -------------------------------------------------------------------------
    # Regions
    # -------------------------------------------------------------------------

    def render_play_field(self, bank: WordBank):
        self.buffer.clear_rows(0, self.field_height - 1)
        for word in bank.active:
            if word.row < self.field_height:
                self.buffer.put_string(word.column, word.row, word.text, WHITE)

    def render_status_bar(self, pending: str, score: int, health: int):
        self.buffer.clear_rows(self.status_top, self.height - 1)

        half = self.width // 2
        quarter = self.width // 4
        self.draw_box(0, self.status_top, half, pending, NEON_CYAN)
        self.draw_box(half, self.status_top, quarter, f'Score: {score}', NEON_YELLOW)
        self.draw_box(half + quarter, self.status_top, quarter, health_text(health),
                      NEON_RED if health <= 1 else NEON_GREEN)

    def render_escaping(self, bank: WordBank):
        for word in bank.active:
            if word.row >= self.field_height:
                self.buffer.put_string(word.column, self.status_top, word.text, NEON_RED)

    def draw_box(self, x: int, y: int, w: int, content: str, color: int = GRAY_LIGHT):
        """Draw a 3-row rounded box with its top-left corner at (x, y)."""
        if w < 2:
            return
        top, mid, bot = box_lines(content, w)
        self.buffer.put_string(x, y, top, GRAY_DARK)
        self.buffer.put_string(x, y + 1, BOX_VERTICAL, GRAY_DARK)
        self.buffer.put_string(x + 1, y + 1, mid[1:-1], color)
        self.buffer.put_string(x + w - 1, y + 1, BOX_VERTICAL, GRAY_DARK)
        self.buffer.put_string(x, y + 2, bot, GRAY_DARK)

    # -------------------------------------------------------------------------
    # Frames
    # -------------------------------------------------------------------------

    def render(self, bank: WordBank, pending: str, score: int, health: int) -> str:
        """Draw one gameplay frame and return the changed-cell output."""
        self.render_play_field(bank)
        self.render_status_bar(pending, score, health)
        self.render_escaping(bank)
        return self.buffer.present()

    def render_message(self, lines: Sequence[str], color: int = NEON_YELLOW) -> str:
        """Blank the grid and centre the given lines around the middle row."""
        self.buffer.clear_back()
        for offset, line in enumerate(lines):
            x = max(0, self.width // 2 - len(line) // 2)
            self.buffer.put_string(x, self.height // 2 + offset, line, color)
        return self.buffer.present()
