import random

import pytest

from wordfall.spawner import column_range, is_span_free, pick_column, spawn
from wordfall.words import FallingWord, WordBank


def test_column_range_clamps_wide_words():
    assert column_range(3, 80) == 77
    assert column_range(10, 10) == 0
    assert column_range(12, 10) == 0


def test_spawn_places_word_at_row_zero_within_field():
    bank = WordBank(pool=('cat',))
    word = spawn(bank, 80, random.Random(0))

    assert word is not None
    assert word.text == 'cat'
    assert word.row == 0
    assert 0 <= word.column <= 77
    assert bank.active == [word]


def test_spawn_returns_none_for_empty_pool():
    bank = WordBank(pool=())
    assert spawn(bank, 80, random.Random(0)) is None
    assert bank.active == []


def test_spawn_rejects_non_positive_width():
    with pytest.raises(ValueError):
        spawn(WordBank(pool=('cat',)), 0)


@pytest.mark.parametrize('seed', range(20))
def test_spawned_spans_never_overlap(seed):
    rng = random.Random(seed)
    bank = WordBank(pool=('apple', 'cat', 'river', 'stone', 'window'))
    for _ in range(3):
        new = spawn(bank, 40, rng)
        others = [w for w in bank.active if w is not new]
        assert all(not w.overlaps(new.column, new.end) for w in others)


def test_fallback_to_column_zero_when_field_is_full():
    bank = WordBank(pool=('cat',))
    bank.add(FallingWord('abcdefghij', column=0, row=4))

    word = spawn(bank, 10, random.Random(0), attempts=100)

    assert word.column == 0
    assert word.overlaps(0, 10)


def test_pick_column_finds_the_only_gap():
    bank = WordBank(pool=())
    bank.add(FallingWord('aaaa', column=0))
    bank.add(FallingWord('bbbb', column=7))
    # Only columns 4..4 leave "xyz" clear of both words in an 11-wide field
    assert pick_column(bank, 3, 11, random.Random(3), attempts=1000) == 4


def test_is_span_free_treats_span_end_as_exclusive():
    bank = WordBank(pool=())
    bank.add(FallingWord('cat', column=5))
    assert is_span_free(bank, 2, 5)
    assert is_span_free(bank, 8, 10)
    assert not is_span_free(bank, 7, 9)
