import pytest

from schulte.counter import Correct, Incorrect, SequentialCounter, Visited


def test_new_counter_state():
    counter = SequentialCounter(9)
    assert counter.current_level == 0
    assert counter.max_level == 9
    assert not counter.is_level_completed()


def test_full_sequence_completes():
    counter = SequentialCounter(9)
    results = [counter.check_cell(i) for i in range(1, 10)]
    assert results[0] == Correct(is_first=True)
    assert all(r == Correct(is_first=False) for r in results[1:])
    assert counter.current_level == 9
    assert counter.is_level_completed()


def test_skipping_ahead_is_incorrect_and_does_not_advance():
    counter = SequentialCounter(9)
    assert counter.check_cell(3) == Incorrect()
    assert counter.current_level == 0


def test_clicking_cleared_cell_is_visited():
    counter = SequentialCounter(9)
    counter.check_cell(1)
    counter.check_cell(2)
    assert counter.check_cell(1) == Visited()
    assert counter.check_cell(2) == Visited()
    assert counter.current_level == 2


def test_zero_counts_as_visited_at_start():
    counter = SequentialCounter(9)
    assert counter.check_cell(0) == Visited()


def test_visited_boundary():
    counter = SequentialCounter(9)
    counter.check_cell(1)
    assert counter.visited(1)
    assert not counter.visited(2)


def test_incorrect_then_correct_still_first():
    counter = SequentialCounter(4)
    assert counter.check_cell(4) == Incorrect()
    assert counter.check_cell(1) == Correct(is_first=True)


def test_zero_max_level_is_complete_immediately():
    assert SequentialCounter(0).is_level_completed()


def test_negative_max_level_rejected():
    with pytest.raises(ValueError):
        SequentialCounter(-1)