"""A rectangular grid of cells."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Cell(Enum):
    DEAD = 0
    ALIVE = 1


class Grid:
    """A rows x cols grid of cells, all dead at first."""

    __slots__ = ("_rows", "_cols", "_cells")

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"grid size must not be negative: {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells = [Cell.DEAD] * (rows * cols)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], rows: int, cols: int) -> Grid:
        """Build a grid from cells listed row by row."""
        cells = list(cells)
        if len(cells) != rows * cols:
            raise ValueError(
                f"{len(cells)} cells do not fill a {rows}x{cols} grid"
            )
        grid = cls(rows, cols)
        grid._cells = cells
        return grid

    def size(self) -> tuple[int, int]:
        return self._rows, self._cols

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"cell ({row}, {col}) is outside the {self._rows}x{self._cols} grid"
            )
        return row * self._cols + col

    def get(self, row: int, col: int) -> Cell:
        return self._cells[self._index(row, col)]

    def set(self, value: Cell, row: int, col: int) -> None:
        self._cells[self._index(row, col)] = value

    def neighbours(self, row: int, col: int) -> list[tuple[int, int]]:
        """Coordinates of the up to eight cells around (row, col)."""
        top = row < self._rows - 1
        bottom = row > 0
        right = col < self._cols - 1
        left = col > 0

        result = []
        if top:
            result.append((row + 1, col))
        if bottom:
            result.append((row - 1, col))
        if right:
            result.append((row, col + 1))
        if left:
            result.append((row, col - 1))
        if top and right:
            result.append((row + 1, col + 1))
        if top and left:
            result.append((row + 1, col - 1))
        if bottom and right:
            result.append((row - 1, col + 1))
        if bottom and left:
            result.append((row - 1, col - 1))
        return result

    def copy(self) -> Grid:
        return Grid.from_cells(self._cells, self._rows, self._cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size() == other.size() and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"