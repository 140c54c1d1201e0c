import random

import pytest

from schulte.colors import (
    DEFAULT_BUTTON_COLOR,
    DISABLED_BUTTON_COLOR,
    HOVERED_BUTTON_COLOR,
    INCORRECT_START_COLOR,
    CORRECT_START_COLOR,
)
from schulte.counter import Correct, Incorrect, Visited
from schulte.game import Interaction, SchulteGame
from schulte.timer import TimerState


@pytest.fixture
def game() -> SchulteGame:
    return SchulteGame(3, random.Random(5))


def test_new_game_state(game):
    assert game.timer.state is TimerState.PAUSED
    assert game.timer_text() == "00:00.000"
    assert game.counter.max_level == 9
    assert not game.completed


def test_timer_view_in_timer_slot(game):
    assert game.timer_view.parent is game.main_panel.timer_view_slot
    game.update(0.0)
    assert game.timer_view.style["text"] == game.timer_text()


def test_first_click_starts_timer(game):
    assert game.handle_click(1) == Correct(is_first=True)
    assert game.timer.state is TimerState.RUNNING
    assert game.timer.elapsed == 0.0
    assert game.board[1].background == CORRECT_START_COLOR


def test_second_click_not_first(game):
    game.handle_click(1)
    assert game.handle_click(2) == Correct(is_first=False)


def test_incorrect_click(game):
    assert game.handle_click(3) == Incorrect()
    assert game.board[3].background == INCORRECT_START_COLOR
    assert game.timer.state is TimerState.PAUSED


def test_visited_click(game):
    game.handle_click(1)
    assert game.handle_click(1) == Visited()


def test_timer_runs_only_after_start(game):
    game.update(2.0)
    assert game.timer.elapsed == 0.0
    game.handle_click(1)
    assert game.update(1.5) == "00:01.500"
    assert game.timer.elapsed == pytest.approx(1.5)


def test_completion_pauses_timer(game):
    for index in range(1, 10):
        game.handle_click(index)
        game.update(0.25)
    assert game.completed
    assert game.timer.state is TimerState.PAUSED
    elapsed = game.timer.elapsed
    game.update(3.0)
    assert game.timer.elapsed == elapsed


def test_correct_tween_finishes_disabled(game):
    game.handle_click(1)
    game.update(0.5)
    cell = game.board[1]
    assert cell.tween is None
    assert cell.background.to_rgb8() == DISABLED_BUTTON_COLOR.to_rgb8()


def test_incorrect_tween_returns_to_default(game):
    game.handle_click(4)
    game.update(0.2)
    assert game.board[4].tween is not None
    game.update(0.3)
    assert game.board[4].background.to_rgb8() == DEFAULT_BUTTON_COLOR.to_rgb8()


def test_hover_unvisited_cell(game):
    game.handle_hover(5, Interaction.HOVERED)
    assert game.board[5].background == HOVERED_BUTTON_COLOR
    game.handle_hover(5, Interaction.NONE)
    assert game.board[5].background == DEFAULT_BUTTON_COLOR


def test_hover_skips_visited_cell(game):
    game.handle_click(1)
    game.update(1.0)
    game.handle_hover(1, Interaction.NONE)
    assert game.board[1].background.to_rgb8() == DISABLED_BUTTON_COLOR.to_rgb8()


def test_set_interaction_acts_only_on_change(game):
    assert game.set_interaction(2, Interaction.PRESSED) == Incorrect()
    assert game.set_interaction(2, Interaction.PRESSED) is None
    assert game.set_interaction(2, Interaction.HOVERED) is None
    assert game.board[2].background == HOVERED_BUTTON_COLOR


def test_set_interaction_press_sequence(game):
    results = []
    for index in (1, 2):
        game.set_interaction(index, Interaction.HOVERED)
        results.append(game.set_interaction(index, Interaction.PRESSED))
    assert results == [Correct(is_first=True), Correct(is_first=False)]
    assert game.counter.current_level == 2


def test_unknown_index(game):
    with pytest.raises(KeyError):
        game.set_interaction(42, Interaction.PRESSED)
    with pytest.raises(KeyError):
        game.handle_click(42)


def test_negative_dt(game):
    with pytest.raises(ValueError):
        game.update(-0.1)


@pytest.mark.parametrize("size", [0, 16])
def test_bad_grid_size(size):
    with pytest.raises(ValueError):
        SchulteGame(size, random.Random(1))