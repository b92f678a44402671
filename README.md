# fizzgrid

fizzgrid runs FizzBuzz as an animation on a grid of tiles. Each step first
puts a ball on a random empty cell in the playing area, which is 20 rows by 40
columns. The step number then decides which events happen:

- **Fizz** (a multiple of 3): every ball turns into a second-colour ball.
- **Buzz** (a multiple of 5 but not of 3): every second-colour ball turns back.
- **FizzBuzz** (a multiple of 15): the board is cleared. A Fizz follows,
  because 15 is also a multiple of 3.

Each event recolours the board and then drops one more ball. For every step
the program prints the step number, followed by the name of each event that
happened. Each event plays a short square-wave tone, and another tone plays
after every step. The board is drawn in a window at the start and again after
each step.

## Installation

```
pip install .
```

This also installs pygame, which provides the window and the sound.

## Running

```
fizzgrid
```

The program runs all the steps and then keeps the window open until you close
it. It accepts these options:

- `--iterations N`: the number of steps to run. The default is 100.
- `--seed N`: a seed for the random placement of balls.
- `--textures DIR`: the directory that holds the tile images. The default is
  `textures`.
- `--no-audio`: play no tones.
- `--no-window`: print the steps without opening a window. The program exits
  as soon as the steps are done.

The window is 2560 × 1370 pixels. Each cell is drawn as a 64-pixel tile.

The program loads three images from the textures directory: `floor` for empty
cells, `balls` for balls and `balls_2` for second-colour balls. For each name
it tries the extensions `.xpm`, `.png` and `.bmp`, in that order. If an image
is missing or the window cannot be opened, the program prints an error and
exits with status 1. If the audio device cannot be opened for a tone, the
program prints an audio error, skips that tone and carries on.

## Using it as a library

The grid logic does not need pygame:

```python
import random

from fizzgrid.grid import Grid, fizzbuzz_events

rng = random.Random(42)
grid = Grid()
for n in range(1, 16):
    grid.randomize_cell(rng)
    grid.apply_fizzbuzz(n, rng)
    print(n, fizzbuzz_events(n), grid.count("1"), grid.count("2"))
```

- `Grid.randomize_cell` raises `RuntimeError` when the playing area has no
  empty cell left.
- `fizzgrid.app.simulate(iterations, rng)` yields each step number together
  with its events and the board. It opens no window and plays no sound.
- `fizzgrid.app.run(iterations, rng, renderer, audio)` runs a whole session.
  Any object with a `draw(grid)` method can serve as the renderer, and any
  callable that takes a `Tone` can serve as the audio player.
- `fizzgrid.sound.SquareWave.fill(length)` returns raw signed 16-bit samples.
  `tone_for(event)` gives the tone settings for an event, and `tone_for(None)`
  gives the per-step tone.
- `fizzgrid.render.Renderer` draws a grid onto any pygame surface, or onto a
  window of its own when no surface is given. `load_textures` loads the three
  tile images.

The package also contains a few small helper modules:

- `fizzgrid.chars`: ASCII character classes and case conversion.
- `fizzgrid.memory`: zeroing, filling, searching, comparing, copying and moving
  bytes.
- `fizzgrid.textsearch`: searching strings, comparing them, and copying or
  concatenating within a size bound.
- `fizzgrid.transform`: `atoi`-style parsing, splitting, trimming, substrings
  and indexed mapping.
- `fizzgrid.output`: writing characters, strings and numbers to a stream.
- `fizzgrid.formatting`: a printf-style formatter for `%c %s %d %i %u %x %X %p %%`.
- `fizzgrid.linkedlist`: a singly linked list.

## What it does not do

The package ships no tile images, so you must provide the textures directory
yourself or run with `--no-window`. There is no keyboard control. The only
input the window responds to is being closed.