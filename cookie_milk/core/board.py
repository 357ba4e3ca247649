from __future__ import annotations

from collections.abc import Iterator

from cookie_milk.core.cells import Cell, is_piece

Coord = tuple[int, int]


class Board:
    """Fixed-size grid surrounded by a wall ring.

    Columns 0 and `columns - 1` and the bottom row are walls. Row 0 is a wall only at
    its two corners; the rest of it is the open mouth pieces are dropped through.
    """

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 2 or columns < 3:
            raise ValueError(f"Board {rows}x{columns} has no playable cells (need rows >= 2, columns >= 3)")

        self.rows = rows
        self.columns = columns
        self._cells: list[list[Cell]] = [
            [Cell.wall if self._is_wall(row, column) else Cell.empty for column in range(columns)]
            for row in range(rows)
        ]

    def _is_wall(self, row: int, column: int) -> bool:
        return column == 0 or column == self.columns - 1 or row == self.rows - 1

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def cell(self, row: int, column: int) -> Cell:
        if not self.in_bounds(row, column):
            raise IndexError(f"({row}, {column}) is outside a {self.rows}x{self.columns} board")
        return self._cells[row][column]

    def is_playable(self, row: int, column: int) -> bool:
        return self.in_bounds(row, column) and not self._is_wall(row, column)

    @property
    def playable_columns(self) -> range:
        return range(1, self.columns - 1)

    @property
    def bottom_row(self) -> int:
        """Lowest row a piece can land in."""
        return self.rows - 2

    def set_piece(self, row: int, column: int, piece: Cell) -> None:
        # Cells only ever go empty -> piece, once.
        if not is_piece(piece):
            raise ValueError(f"{piece!r} is not a piece")
        current = self.cell(row, column)
        if current is not Cell.empty:
            raise ValueError(f"({row}, {column}) holds {current.value} and cannot be overwritten")
        self._cells[row][column] = piece

    def interior_cells(self) -> Iterator[Coord]:
        for row in range(self.bottom_row + 1):
            for column in self.playable_columns:
                yield row, column

    def has_empty(self) -> bool:
        return any(self._cells[row][column] is Cell.empty for row, column in self.interior_cells())

    def rows_as_cells(self) -> list[tuple[Cell, ...]]:
        return [tuple(row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows_as_cells() == other.rows_as_cells()

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, columns={self.columns})"
