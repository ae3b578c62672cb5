"""Status lines drawn at the top of the screen."""

from __future__ import annotations

from typing import TextIO

_BACKGROUND = "\x1b[48;5;0m"
_MAX_DELAY = 100


def _move_to(column: int, row: int) -> str:
    return f"\x1b[{row + 1};{column + 1}H"


def format_generation(generation: object) -> str:
    """Text of the generation counter, padded to a fixed width."""
    return f"Generation: {str(generation):<13}".ljust(25)


def format_population(population: object) -> str:
    """Text of the population counter, padded to a fixed width."""
    return f"Population: {str(population):<13}".ljust(25)


def format_speed(delay: int) -> str:
    """Text of the speed indicator; speed is the complement of the delay."""
    if not 0 <= delay <= _MAX_DELAY:
        raise ValueError(f"delay must be between 0 and {_MAX_DELAY}, got {delay}")
    return f"Speed: {_MAX_DELAY - delay:<10}"


def _write_at(stream: TextIO, column: int, row: int, text: str) -> None:
    stream.write(_move_to(column, row) + _BACKGROUND + text)
    stream.flush()


def print_generation(stream: TextIO, generation: object) -> None:
    _write_at(stream, 0, 0, format_generation(generation))


def print_population(stream: TextIO, population: object) -> None:
    _write_at(stream, 0, 1, format_population(population))


def print_speed(stream: TextIO, delay: int) -> None:
    _write_at(stream, 26, 0, format_speed(delay))