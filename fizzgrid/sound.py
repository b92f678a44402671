"""Square-wave tones played when the board changes."""

from __future__ import annotations

import os
from array import array
from dataclasses import dataclass
from typing import Optional

from fizzgrid.grid import Event

SAMPLE_RATE = 345678
AMPLITUDE = 99999
HALF_PERIOD = 200


def _as_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


@dataclass(frozen=True)
class Tone:
    """How a tone is played: output rate, channels, buffer size and length."""

    frequency: int
    channels: int
    samples: int
    duration_ms: int


class SquareWave:
    """A square wave whose phase carries on from one fill to the next.

    Samples are signed 16-bit values; the amplitude is truncated to that
    width exactly as a 16-bit store would.
    """

    def __init__(self, amplitude: int = AMPLITUDE, half_period: int = HALF_PERIOD) -> None:
        if half_period <= 0:
            raise ValueError("half period must be positive")
        self.high = _as_int16(amplitude)
        self.low = _as_int16(-amplitude)
        self.half_period = half_period
        self.phase = 0

    def fill(self, length: int) -> bytes:
        """Native-order 16-bit samples filling ``length`` bytes (rounded down to even)."""
        if length < 0:
            raise ValueError("length must not be negative")
        samples = array("h")
        for phase in range(self.phase, self.phase + length // 2):
            samples.append(self.high if (phase // self.half_period) % 2 else self.low)
        self.phase += length // 2
        return samples.tobytes()


_STEP_TONE = Tone(frequency=121212, channels=4, samples=4096, duration_ms=32)
_EVENT_TONES = {
    Event.FIZZBUZZ: Tone(frequency=0, channels=4, samples=8196, duration_ms=500),
    Event.FIZZ: Tone(frequency=SAMPLE_RATE, channels=4, samples=4096, duration_ms=90),
    Event.BUZZ: Tone(frequency=210000, channels=4, samples=4096, duration_ms=90),
}

_shared_wave = SquareWave()


def tone_for(event: Optional[Event]) -> Tone:
    """The tone for ``event``; None gives the tone played after every step."""
    return _STEP_TONE if event is None else _EVENT_TONES[event]


def play_tone(tone: Tone) -> bool:
    """Play ``tone`` on the audio device and wait until it is done.

    Returns False, after reporting the problem, when audio cannot be opened.
    """
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    try:
        pygame.mixer.init(
            frequency=tone.frequency, size=-16, channels=tone.channels, buffer=tone.samples
        )
    except pygame.error as exc:
        print(f"Audio error: {exc}")
        return False
    try:
        frequency, _size, channels = pygame.mixer.get_init()
        frames = frequency * tone.duration_ms // 1000
        data = _shared_wave.fill(frames * channels * 2)
        pygame.mixer.Sound(buffer=data).play()
        pygame.time.delay(tone.duration_ms)
    finally:
        pygame.mixer.quit()
    return True