"""
Rendering Engine
=================
Double-buffered character grid. Frames are drawn into a back buffer
and only the cells that differ from the last presented frame are
emitted.
"""

from dataclasses import dataclass
from typing import List


# ANSI 256 color constants
NEON_CYAN = 51
NEON_YELLOW = 226
NEON_GREEN = 46
NEON_RED = 196

GRAY_LIGHT = 252
GRAY_DARK = 238

WHITE = 255
DEFAULT_FG = 7


@dataclass
class Cell:
    """A single cell in the render buffer."""
    char: str = ' '
    fg_color: int = DEFAULT_FG

    def matches(self, other: 'Cell') -> bool:
        """Check if two cells are visually identical."""
        return self.char == other.char and self.fg_color == other.fg_color

    def reset(self):
        """Reset to empty state."""
        self.char = ' '
        self.fg_color = DEFAULT_FG


class DoubleBuffer:
    """
    Double-buffered terminal renderer.

    Writes to a back buffer, then swaps to front buffer,
    only updating cells that changed. Regions of the back buffer
    are cleared independently so the play field and the status
    bar can be redrawn on their own.
    """

    def __init__(self, surface, width: int, height: int):
        self.surface = surface
        self.width = width
        self.height = height
        self.front: List[List[Cell]] = []
        self.back: List[List[Cell]] = []
        self._init_buffers()
        self._normal = surface.normal

    def _init_buffers(self):
        self.front = [
            [Cell() for _ in range(self.width)]
            for _ in range(self.height)
        ]
        self.back = [
            [Cell() for _ in range(self.width)]
            for _ in range(self.height)
        ]

    def clear_rows(self, top: int, bottom: int):
        """Reset back-buffer rows top..bottom (inclusive) in place."""
        for y in range(max(0, top), min(self.height, bottom + 1)):
            for cell in self.back[y]:
                cell.reset()

    def clear_back(self):
        self.clear_rows(0, self.height - 1)

    def mark_cleared(self):
        """Sync both buffers with a terminal that was just cleared."""
        for front_row, back_row in zip(self.front, self.back):
            for cell in front_row:
                cell.reset()
            for cell in back_row:
                cell.reset()

    def put(self, x: int, y: int, char: str, fg_color: int = DEFAULT_FG):
        """Put a character in the back buffer; off-grid writes are dropped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.back[y][x]
            cell.char = char
            cell.fg_color = fg_color

    def put_string(self, x: int, y: int, text: str, fg_color: int = DEFAULT_FG):
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg_color)

    def row_text(self, y: int) -> str:
        """Plain text of one row of the presented frame."""
        return ''.join(cell.char or ' ' for cell in self.front[y])

    def present(self) -> str:
        """
        Swap buffers and generate output for changed cells only.

        The back buffer is then seeded with the presented frame, so a
        region that is not cleared next frame keeps its content.
        """
        output_parts = []
        normal = self._normal
        surface = self.surface

        for y in range(self.height):
            for x in range(self.width):
                back_cell = self.back[y][x]
                front_cell = self.front[y][x]

                if not back_cell.matches(front_cell):
                    output_parts.append(surface.move_xy(x, y))
                    output_parts.append(normal)
                    output_parts.append(surface.color(back_cell.fg_color))
                    output_parts.append(back_cell.char if back_cell.char else ' ')

        self.front, self.back = self.back, self.front
        for back_row, front_row in zip(self.back, self.front):
            for back_cell, front_cell in zip(back_row, front_row):
                back_cell.char = front_cell.char
                back_cell.fg_color = front_cell.fg_color

        if output_parts:
            output_parts.append(normal)
        return ''.join(output_parts)
