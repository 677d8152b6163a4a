import random

from conftest import FakeSurface
from wordfall.config import GameConfig, LOST_MESSAGE, QUIT_MESSAGE
from wordfall.game import Game, PHASE_GAME_OVER, PHASE_INTRO, PHASE_PLAYING
from wordfall.words import FallingWord


def one_row_per_frame(**kwargs):
    """Config where every frame is a fall tick."""
    return dict(fps=1, fall_rows_per_second=1, **kwargs)


def assert_cursor_restored(surface):
    """Cursor comes back once, after the final-score screen is flushed."""
    assert surface.events.count('show_cursor') == 1
    assert surface.events[-3:] == ['flush', 'show_cursor', 'flush']


def test_intro_runs_once_then_playing():
    sleeps = []
    surface = FakeSurface()
    game = Game(surface, ['cat'], GameConfig(), rng=random.Random(0), sleep=sleeps.append)

    assert game.phase == PHASE_INTRO
    assert game.step() is True
    assert game.phase == PHASE_PLAYING
    assert sleeps == [3.0]
    assert game.renderer.buffer.row_text(12).strip() == ''
    assert game.bank.active == []


def test_scenario_a_unmatched_word_costs_one_health(make_game):
    game = make_game(words=('cat',), **one_row_per_frame(max_active_words=1))

    game.step()
    word = game.bank.active[0]
    assert word.text == 'cat'
    assert word.row == 0
    assert 0 <= word.column <= 77

    for _ in range(21):
        game.step()
    assert game.bank.active == [word]
    assert word.row == 21
    assert game.health == 3

    game.step()
    assert game.health == 2
    assert all(w is not word for w in game.bank.active)
    assert game.state.words_escaped == 1


def test_scenario_b_typing_a_word_scores(make_game):
    game = make_game()
    game.bank.add(FallingWord('cat', column=10, row=5))

    game.surface.type('c', 'a', 't', 'ENTER')
    game.handle_input()

    assert game.score == 1
    assert game.bank.active == []
    assert game.state.pending == ''


def test_non_matching_submit_only_clears_entry(make_game):
    game = make_game()
    game.bank.add(FallingWord('cat', column=10, row=5))

    game.surface.type('d', 'o', 'g', 'ENTER', 'ENTER')
    game.handle_input()

    assert game.score == 0
    assert [w.text for w in game.bank.active] == ['cat']
    assert game.state.pending == ''


def test_backspace_edits_pending_entry(make_game):
    game = make_game()
    game.surface.type('c', 'a', 'BACKSPACE', 'BACKSPACE', 'BACKSPACE', 'o')
    game.handle_input()
    assert game.state.pending == 'o'


def test_scenario_c_losing_all_health_ends_game(make_game):
    game = make_game(**one_row_per_frame(max_active_words=1))
    game.state.health = 1
    game.state.score = 4
    game.bank.add(FallingWord('owl', column=0, row=game.state.bottom_row))

    assert game.step() is False
    assert game.phase == PHASE_GAME_OVER
    assert game.health == 0
    assert game.final_lines == (LOST_MESSAGE, 'Your final score: 4')
    assert game.lost
    assert game.renderer.buffer.row_text(12).strip() == LOST_MESSAGE
    assert_cursor_restored(game.surface)

    frame = game.state.frame
    assert game.step() is False
    assert game.state.frame == frame


def test_scenario_d_escape_quits_with_score(make_game):
    game = make_game()
    game.state.score = 2
    game.surface.type('a', 'b', 'ESC', 'c')

    assert game.step() is False
    assert game.quit_requested
    assert game.phase == PHASE_GAME_OVER
    assert game.health == 3
    assert game.state.pending == 'ab'
    assert not game.lost
    assert game.final_lines == (QUIT_MESSAGE, 'Your final score: 2')
    assert_cursor_restored(game.surface)


def test_active_words_never_exceed_cap(make_game):
    game = make_game(words=('cat', 'dog', 'owl', 'bee'),
                     **one_row_per_frame(max_active_words=3, starting_health=1000))
    for _ in range(100):
        game.step()
        assert len(game.bank) <= 3
    assert len(game.bank) == 3


def test_health_never_increases(make_game):
    game = make_game(words=('cat', 'dog'), rows=10,
                     **one_row_per_frame(starting_health=50))
    previous = game.health
    for _ in range(60):
        game.step()
        assert game.health <= previous
        previous = game.health
    assert game.health < 50


def test_columns_never_change_and_rows_only_grow(make_game):
    game = make_game(words=('cat', 'dog', 'owl'),
                     **one_row_per_frame(starting_health=1000))
    seen = {}
    for _ in range(40):
        game.step()
        for word in game.bank.active:
            # Holding the word keeps its id from being reused
            if id(word) in seen:
                _, column, row = seen[id(word)]
                assert word.column == column
                assert word.row >= row
            seen[id(word)] = (word, word.column, word.row)


def test_fall_cadence_is_independent_of_frames(make_game):
    game = make_game(max_active_words=1)  # 30 FPS, one row per second
    game.step()
    word = game.bank.active[0]
    for _ in range(29):
        game.step()
    assert word.row == 1


def test_each_frame_flushes_once(make_game):
    game = make_game()
    before = game.surface.flushes
    game.step()
    game.step()
    assert game.surface.flushes == before + 2
