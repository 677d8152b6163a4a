"""
Terminal Surface
=================
Thin wrapper over blessed.Terminal. Output is queued during a frame
and written with a single flush; every OSError from the terminal is
re-raised as TerminalIOError.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from blessed import Terminal

from .errors import TerminalIOError


class TerminalSurface:
    """Cursor addressing, clearing, batched writes and key polling."""

    def __init__(self, term: Optional[Terminal] = None):
        self.term = term if term is not None else Terminal()
        self._pending: List[str] = []

    def size(self) -> Tuple[int, int]:
        """Current (columns, rows)."""
        try:
            return self.term.width, self.term.height
        except OSError as e:
            raise TerminalIOError(f'Could not query terminal size: {e}') from e

    @contextmanager
    def session(self) -> Iterator['TerminalSurface']:
        """Fullscreen, unbuffered keys without echo, hidden cursor."""
        try:
            with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
                yield self
        except OSError as e:
            raise TerminalIOError(f'Terminal mode change failed: {e}') from e
        finally:
            self._pending.clear()

    def poll(self, timeout: float = 0):
        """Next key press, or an empty Keystroke if none arrives in time."""
        try:
            return self.term.inkey(timeout=timeout)
        except OSError as e:
            raise TerminalIOError(f'Could not read key: {e}') from e

    # -------------------------------------------------------------------------
    # Sequences (returned, not written)
    # -------------------------------------------------------------------------

    def move_xy(self, x: int, y: int) -> str:
        return self.term.move_xy(x, y)

    def color(self, fg_color: int) -> str:
        return self.term.color(fg_color)

    @property
    def normal(self) -> str:
        return self.term.normal

    # -------------------------------------------------------------------------
    # Queued output
    # -------------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Queue raw text at the current cursor position."""
        if text:
            self._pending.append(text)

    def clear_screen(self) -> None:
        self.write(self.term.home + self.term.clear)

    def show_cursor(self) -> None:
        self.write(self.term.normal_cursor)

    def flush(self) -> None:
        """Write everything queued this frame in one go."""
        output = ''.join(self._pending)
        self._pending.clear()
        try:
            self.term.stream.write(output)
            self.term.stream.flush()
        except OSError as e:
            raise TerminalIOError(f'Could not write to terminal: {e}') from e
