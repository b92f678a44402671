"""Running the FizzBuzz board: count, recolour, play tones and draw."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence, Tuple

from fizzgrid.grid import Event, Grid
from fizzgrid.sound import Tone, play_tone, tone_for

ITERATIONS = 100


class _Drawer(Protocol):
    def draw(self, grid: Grid) -> Any: ...


def simulate(
    iterations: int = ITERATIONS, rng: Optional[random.Random] = None
) -> Iterator[Tuple[int, List[Event], Grid]]:
    """Run the count from 1 to ``iterations``.

    Each step drops one ball and then applies that step's events. Yields
    the step number, its events and the board, which is the same object
    on every step.
    """
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    grid = Grid()
    for n in range(1, iterations + 1):
        grid.randomize_cell(rng)
        events = grid.apply_fizzbuzz(n, rng)
        yield n, events, grid


def run(
    iterations: int = ITERATIONS,
    rng: Optional[random.Random] = None,
    renderer: Optional[_Drawer] = None,
    audio: Optional[Callable[[Tone], Any]] = None,
) -> Grid:
    """Play the count, printing each step and its events.

    ``audio`` is called with the tone of every event and with the step
    tone after each step; ``renderer`` draws the board at the start and
    after every step. Returns the final board.
    """
    grid = Grid()
    if renderer is not None:
        renderer.draw(grid)
    for n, events, grid in simulate(iterations, rng):
        print(n)
        for event in events:
            print(event.message)
            if audio is not None:
                audio(tone_for(event))
        if audio is not None:
            audio(tone_for(None))
        if renderer is not None:
            renderer.draw(grid)
    return grid


def _wait_until_closed() -> None:
    import pygame

    while pygame.event.wait().type != pygame.QUIT:
        pass


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fizzgrid", description="A FizzBuzz board.")
    parser.add_argument("--iterations", type=_non_negative, default=ITERATIONS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--textures", default="textures")
    parser.add_argument("--no-audio", action="store_true")
    parser.add_argument("--no-window", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    rng = random.Random(args.seed)
    audio = None if args.no_audio else play_tone

    if args.no_window:
        run(args.iterations, rng, None, audio)
        return 0

    from fizzgrid.render import Renderer, load_textures
    import pygame

    try:
        textures = load_textures(args.textures)
        renderer = Renderer(textures)
    except (OSError, pygame.error) as exc:
        print(f"Error, render impossible: {exc}", file=sys.stderr)
        return 1
    with renderer:
        run(args.iterations, rng, renderer, audio)
        _wait_until_closed()
    return 0


if __name__ == "__main__":
    sys.exit(main())