import random

import pytest

from fizzgrid.app import ITERATIONS, main, run, simulate
from fizzgrid.grid import ALT_BALL, BALL, Event, fizzbuzz_events
from fizzgrid.sound import tone_for


class RecordingRenderer:
    def __init__(self):
        self.snapshots = []

    def draw(self, grid):
        self.snapshots.append(list(grid))


def _balls(grid):
    return grid.count(BALL) + grid.count(ALT_BALL)


def test_default_iterations_run_one_hundred_steps():
    steps = [n for n, _, _ in simulate(ITERATIONS, random.Random(0))]
    assert steps == list(range(1, 101))


def test_simulate_steps_and_events():
    steps = [(n, events) for n, events, _ in simulate(30, random.Random(1))]
    assert [n for n, _ in steps] == list(range(1, 31))
    for n, events in steps:
        assert events == fizzbuzz_events(n)


def test_simulate_ball_counts():
    previous = 0
    for n, events, grid in simulate(45, random.Random(2)):
        total = _balls(grid)
        if Event.FIZZBUZZ in events:
            assert total == 2
        else:
            assert total == previous + 1 + len(events)
        previous = total


def test_simulate_is_deterministic_with_seed():
    first = [list(grid) for _, _, grid in simulate(20, random.Random(7))][-1]
    second = [list(grid) for _, _, grid in simulate(20, random.Random(7))][-1]
    assert first == second


def test_simulate_rejects_negative():
    with pytest.raises(ValueError):
        list(simulate(-1))


def test_run_prints_steps_and_events(capsys):
    run(7, random.Random(0))
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1", "2", "3", "Fizz!", "4", "5", "Buzz!", "6", "Fizz!", "7"]


def test_run_prints_fizzbuzz_before_fizz(capsys):
    run(15, random.Random(0))
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == ["15", "FizzBuzz!", "Fizz!"]


def test_run_plays_tones_in_order(capsys):
    tones = []
    run(3, random.Random(0), audio=tones.append)
    assert tones == [tone_for(None), tone_for(None), tone_for(Event.FIZZ), tone_for(None)]


def test_run_draws_initial_board_and_every_step(capsys):
    renderer = RecordingRenderer()
    grid = run(5, random.Random(4), renderer=renderer)
    assert len(renderer.snapshots) == 6
    assert renderer.snapshots[-1] == list(grid)
    assert all(BALL not in row for row in renderer.snapshots[0])


def test_main_without_window_or_audio(capsys):
    status = main(["--iterations", "5", "--seed", "1", "--no-audio", "--no-window"])
    assert status == 0
    assert "Buzz!" in capsys.readouterr().out.splitlines()


def test_main_rejects_negative_iterations():
    with pytest.raises(SystemExit):
        main(["--iterations", "-3", "--no-window", "--no-audio"])