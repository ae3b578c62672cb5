"""Interactive terminal front end for the simulation."""

from __future__ import annotations

import contextlib
import os
import re
import select
import sys
import time
from dataclasses import dataclass
from typing import Iterator, TextIO

from lifeterm.grid import Grid
from lifeterm.printer import print_generation, print_population, print_speed

TOP_MARGIN = 2
BOTTOM_MARGIN = 1
VERTICAL_MARGIN = TOP_MARGIN + BOTTOM_MARGIN
HELP_TEXT = "q: quit    p: pause    speed: +-"
INITIAL_DELAY = 50
MAX_DELAY = 99

_CELL_COLOR = "\x1b[48;5;11m"
_BACKGROUND_COLOR = "\x1b[48;5;0m"
_ENABLE_MOUSE = "\x1b[?1000h\x1b[?1002h\x1b[?1003h\x1b[?1015h\x1b[?1006h"
_DISABLE_MOUSE = "\x1b[?1006l\x1b[?1015l\x1b[?1003l\x1b[?1002l\x1b[?1000l"
_ENTER_ALT_SCREEN = "\x1b[?1049h"
_LEAVE_ALT_SCREEN = "\x1b[?1049l"
_CLEAR_ALL = "\x1b[2J"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"

_SGR_MOUSE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
_OTHER_ESCAPE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|O.|.)?", re.DOTALL)
_UNMAPPED_CONTROLS = {"\t", "\n", "\r"}


def _move_to(column: int, row: int) -> str:
    return f"\x1b[{row + 1};{column + 1}H"


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a character, possibly held with Ctrl."""

    char: str
    ctrl: bool = False


@dataclass(frozen=True)
class MouseClick:
    """A left-button press at a zero-based screen position."""

    column: int
    row: int


def parse_events(data: bytes | str) -> list[KeyEvent | MouseClick]:
    """Decode raw terminal input into key presses and left clicks.

    Other mouse reports and escape sequences are dropped.
    """
    text = data.decode("utf-8", errors="ignore") if isinstance(data, bytes) else data
    events: list[KeyEvent | MouseClick] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "\x1b":
            mouse = _SGR_MOUSE.match(text, pos)
            if mouse:
                button = int(mouse.group(1))
                pressed = mouse.group(4) == "M"
                if pressed and button & 0b11 == 0 and not button & (32 | 64):
                    events.append(
                        MouseClick(int(mouse.group(2)) - 1, int(mouse.group(3)) - 1)
                    )
                pos = mouse.end()
                continue
            other = _OTHER_ESCAPE.match(text, pos)
            pos = other.end() if other else pos + 1
            continue
        code = ord(char)
        if 1 <= code <= 26 and char not in _UNMAPPED_CONTROLS:
            events.append(KeyEvent(chr(code + 96), ctrl=True))
        elif code >= 32 and code != 127:
            events.append(KeyEvent(char))
        pos += 1
    return events


class Game:
    """Simulation state plus the drawing it does on a terminal stream."""

    def __init__(self, stream: TextIO, width: int, height: int) -> None:
        if height < VERTICAL_MARGIN:
            raise ValueError(
                f"terminal must be at least {VERTICAL_MARGIN} rows tall, got {height}"
            )
        self.stream = stream
        self.width = width
        self.height = height
        self.grid = Grid(width, height - VERTICAL_MARGIN)
        self.paused = True
        self.delay = INITIAL_DELAY
        self.running = True

    def _emit(self, *parts: str) -> None:
        self.stream.write("".join(parts))
        self.stream.flush()

    def _interval(self) -> float:
        """Seconds between generations for the current delay."""
        return (8 * self.delay + 250) / 1000

    def handle_key(self, event: KeyEvent) -> None:
        if (event.char == "c" and event.ctrl) or (event.char == "q" and not event.ctrl):
            self.running = False
            return
        if event.ctrl:
            return
        if event.char == "p":
            self._emit(_DISABLE_MOUSE if self.paused else _ENABLE_MOUSE)
            self.paused = not self.paused
        elif event.char == "+":
            if self.delay > 0:
                self.delay -= 1
                print_speed(self.stream, self.delay)
        elif event.char == "-":
            if self.delay < MAX_DELAY:
                self.delay += 1
                print_speed(self.stream, self.delay)

    def handle_click(self, event: MouseClick) -> None:
        """Flip the cell under a click that lands inside the grid area."""
        row, column = event.row, event.column
        if row < TOP_MARGIN or row >= self.height - BOTTOM_MARGIN:
            return
        if not 0 <= column < self.grid.width:
            return
        self.grid.toggle_cell((column, row - TOP_MARGIN))
        color = _CELL_COLOR if self.grid[(column, row - TOP_MARGIN)] else _BACKGROUND_COLOR
        self._emit(color, _move_to(column, row), " ")
        print_population(self.stream, self.grid.population)

    def step(self) -> None:
        """Advance one generation and redraw the grid and counters."""
        self.grid.next_generation()
        parts = []
        for column in range(self.grid.width):
            for row in range(self.grid.height):
                parts.append(_CELL_COLOR if self.grid[(column, row)] else _BACKGROUND_COLOR)
                parts.append(_move_to(column, row + TOP_MARGIN))
                parts.append(" ")
        self._emit(*parts)
        print_generation(self.stream, self.grid.generation)
        print_population(self.stream, self.grid.population)

    def draw_ribbons(self) -> None:
        """Draw the help line at the bottom and the counters at the top."""
        self._emit(_move_to(0, self.height - 1), HELP_TEXT)
        print_generation(self.stream, self.grid.generation)
        print_population(self.stream, self.grid.population)
        print_speed(self.stream, self.delay)


@contextlib.contextmanager
def _raw_input(fd: int) -> Iterator[None]:
    import termios
    import tty

    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


@contextlib.contextmanager
def _screen(stream: TextIO) -> Iterator[None]:
    stream.write(
        _ENTER_ALT_SCREEN + _BACKGROUND_COLOR + _CLEAR_ALL + _ENABLE_MOUSE + _HIDE_CURSOR
    )
    stream.flush()
    try:
        yield
    finally:
        stream.write(_DISABLE_MOUSE + _SHOW_CURSOR + _LEAVE_ALT_SCREEN)
        stream.flush()


def run(stream: TextIO | None = None) -> None:
    """Run the interactive game on the controlling terminal until quit."""
    stream = stream if stream is not None else sys.stdout
    width, height = os.get_terminal_size(stream.fileno())
    game = Game(stream, width, height)
    fd = sys.stdin.fileno()

    with _raw_input(fd), _screen(stream):
        game.draw_ribbons()
        start = time.monotonic()
        while game.running:
            ready, _, _ = select.select([fd], [], [], 0.005)
            if ready:
                for event in parse_events(os.read(fd, 1024)):
                    if isinstance(event, KeyEvent):
                        game.handle_key(event)
                    else:
                        game.handle_click(event)
                    if not game.running:
                        break
                if not game.running:
                    break
            if game.paused or time.monotonic() - start < game._interval():
                continue
            game.step()
            start = time.monotonic()


def main(argv: list[str] | None = None) -> int:
    try:
        run()
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())