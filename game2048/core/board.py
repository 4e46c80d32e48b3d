"""
Square grid holding the tiles of a 2048 game.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from numpy import asarray, empty, int64, ndarray, zeros

from game2048.core.side import Side
from game2048.core.tile import Tile


class Board:
    """
    A size x size grid where each cell holds zero or one tile.

    Column 0 is the left column and row 0 the bottom row, so ``board.tile(col, row)`` works like
    (x, y) coordinates. Cells are stored in a numpy object array indexed ``[row, col]``.
    """

    def __init__(self, size: int):
        """
        Initialize an empty board.

        Parameters
        ----------
        size : int
            Number of cells on one side of the board.
        """
        if size < 1:
            raise ValueError(f'Board size must be positive, got {size}')
        self._size = size
        self._grid: ndarray = empty((size, size), dtype=object)

    @classmethod
    def from_values(cls, raw_values: Sequence[Sequence[int]]) -> Board:
        """
        Build a board from raw tile values.

        Parameters
        ----------
        raw_values : Sequence[Sequence[int]]
            Square grid of values indexed ``[row][col]``, row 0 being the bottom row. 0 means empty.

        Returns
        -------
        Board
            The populated board.

        Raises
        ------
        ValueError
            If the grid is not square.
        """
        values = asarray(raw_values, dtype=int64)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise ValueError(f'Raw values must form a square grid, got shape {values.shape}')

        board = cls(values.shape[0])
        for row, col in zip(*values.nonzero()):
            board.add_tile(Tile.create(int(values[row, col]), int(col), int(row)))
        return board

    @property
    def size(self) -> int:
        """Get the size of the board."""
        return self._size

    def _check_bounds(self, col: int, row: int) -> None:
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise IndexError(f'Cell ({col}, {row}) is outside a {self._size}x{self._size} board')

    def tile(self, col: int, row: int) -> Tile | None:
        """
        Return the tile at (col, row), or None if the cell is empty.

        Raises
        ------
        IndexError
            If the coordinates are outside the board.
        """
        self._check_bounds(col, row)
        return self._grid[row, col]

    def clear(self) -> None:
        """Remove all tiles from the board."""
        self._grid[:, :] = None

    def add_tile(self, tile: Tile) -> None:
        """
        Place a tile at its own position.

        Raises
        ------
        ValueError
            If the cell is already occupied.
        """
        self._check_bounds(tile.col, tile.row)
        if self._grid[tile.row, tile.col] is not None:
            raise ValueError(f'Cell ({tile.col}, {tile.row}) is already occupied')
        self._grid[tile.row, tile.col] = tile

    def remove(self, tile: Tile) -> None:
        """Lift a tile off the board. Does nothing if the tile is not on the board."""
        self._check_bounds(tile.col, tile.row)
        if self._grid[tile.row, tile.col] is tile:
            self._grid[tile.row, tile.col] = None

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """
        Relocate a tile to (col, row).

        The tile is removed from its current cell when it is still there, and a copy carrying the
        new coordinates is stored at the destination.

        Parameters
        ----------
        col : int
            Destination column.
        row : int
            Destination row.
        tile : Tile
            The tile to move.

        Returns
        -------
        bool
            True if the tile ends up at a different position than the one it carried.

        Raises
        ------
        ValueError
            If the destination is held by another tile.
        """
        self._check_bounds(col, row)
        occupant = self._grid[row, col]
        if occupant is not None and occupant is not tile:
            raise ValueError(f'Cannot move onto occupied cell ({col}, {row})')

        self.remove(tile)
        self._grid[row, col] = tile.moved(col, row)
        return (col, row) != (tile.col, tile.row)

    def lane(self, side: Side, index: int) -> list[Tile]:
        """
        Collect the tiles of one lane, leading edge first.

        Parameters
        ----------
        side : Side
            Direction of the motion.
        index : int
            Lane index, in the motion-relative frame of ``side``.

        Returns
        -------
        list[Tile]
            Tiles of the lane ordered from the leading edge backwards, empty cells skipped.
        """
        tiles = []
        for along in reversed(range(self._size)):
            tile = self.tile(side.col(along, index, self._size), side.row(along, index, self._size))
            if tile is not None:
                tiles.append(tile)
        return tiles

    def values(self) -> ndarray:
        """
        Get the tile values as an integer array.

        Returns
        -------
        ndarray
            Array of shape (size, size) indexed ``[row, col]``, 0 for empty cells.
        """
        values = zeros((self._size, self._size), dtype=int64)
        for tile in self:
            values[tile.row, tile.col] = tile.value
        return values

    def __iter__(self) -> Iterator[Tile]:
        """Iterate over the tiles on the board, row by row from the bottom."""
        for tile in self._grid.flat:
            if tile is not None:
                yield tile
