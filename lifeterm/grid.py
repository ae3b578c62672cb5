"""The cell grid and the rules that advance it."""

from __future__ import annotations

_NEIGHBOR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
)


class Grid:
    """A bounded field of cells addressed by ``(column, row)`` tuples.

    Cells outside the field count as dead; the edges do not wrap.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [False] * (width * height)
        self.population = 0
        self.generation = 0

    def _offset(self, index: tuple[int, int]) -> int:
        column, row = index
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(
                f"cell {index} is outside a {self.width}x{self.height} grid"
            )
        return row * self.width + column

    def __getitem__(self, index: tuple[int, int]) -> bool:
        return self._cells[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: bool) -> None:
        self._cells[self._offset(index)] = bool(value)

    def _is_alive(self, column: int, row: int) -> bool:
        if 0 <= column < self.width and 0 <= row < self.height:
            return self._cells[row * self.width + column]
        return False

    def _alive_neighbors(self, column: int, row: int) -> int:
        return sum(
            self._is_alive(column + dx, row + dy) for dx, dy in _NEIGHBOR_OFFSETS
        )

    def next_generation(self) -> None:
        """Apply one step of the rules to every cell."""
        to_toggle = []
        for column in range(self.width):
            for row in range(self.height):
                count = self._alive_neighbors(column, row)
                if self._is_alive(column, row):
                    if count < 2 or count > 3:
                        to_toggle.append((column, row))
                elif count == 3:
                    to_toggle.append((column, row))

        for index in to_toggle:
            self.toggle_cell(index)

        self.generation += 1

    def toggle_cell(self, index: tuple[int, int]) -> None:
        """Flip a cell between alive and dead, keeping the population count."""
        offset = self._offset(index)
        alive = not self._cells[offset]
        self._cells[offset] = alive
        self.population += 1 if alive else -1