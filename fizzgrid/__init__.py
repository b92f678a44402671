"""A FizzBuzz-driven tile grid animation with square-wave sound, plus small text and byte helpers."""

__version__ = "0.1.0"