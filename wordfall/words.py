"""
Word Bank
==========
The pool of candidate words and the words currently falling.
"""

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional, Tuple
import logging

from .errors import WordSourceError

logger = logging.getLogger(__name__)

LEXICON_RESOURCE = 'lexicon.txt'


@dataclass
class FallingWord:
    """A word on screen. Column is fixed at spawn, row only grows."""
    text: str
    column: int = 0
    row: int = 0

    @property
    def width(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        """Exclusive end of the horizontal span."""
        return self.column + self.width

    def overlaps(self, start: int, end: int) -> bool:
        """Check if the span [start, end) shares any column with this word."""
        return not (end <= self.column or start >= self.end)


@dataclass
class WordBank:
    """
    Immutable pool of candidate strings plus the active falling words.

    Drawing from the pool never removes the string, so the same word
    can fall more than once per session.
    """
    pool: Tuple[str, ...] = ()
    active: List[FallingWord] = field(default_factory=list)

    def __post_init__(self):
        self.pool = tuple(self.pool)

    def __len__(self) -> int:
        return len(self.active)

    def add(self, word: FallingWord) -> None:
        self.active.append(word)

    def remove(self, word: FallingWord) -> None:
        """Remove one word by identity, leaving equal-text duplicates alone."""
        self.active = [w for w in self.active if w is not word]


def parse_words(lines: Iterable[str]) -> List[str]:
    """Strip each line and drop the blank ones."""
    return [line.strip() for line in lines if line.strip()]


def load_words(path: Optional[str] = None) -> List[str]:
    """
    Load the word list.

    Reads the bundled lexicon unless a path is given. Raises
    WordSourceError if the file cannot be read or holds no words.
    """
    try:
        if path is None:
            text = resources.files('wordfall.data').joinpath(LEXICON_RESOURCE).read_text(
                encoding='utf-8'
            )
            source = f'bundled {LEXICON_RESOURCE}'
        else:
            text = Path(path).read_text(encoding='utf-8')
            source = path
    except (OSError, UnicodeDecodeError) as e:
        raise WordSourceError(f'Could not read word list {path or LEXICON_RESOURCE!r}: {e}') from e

    words = parse_words(text.splitlines())
    if not words:
        raise WordSourceError(f'Word list {source} contains no words')

    logger.info(f"Loaded {len(words)} words from {source}")
    return words
