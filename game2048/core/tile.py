"""
Immutable tile placed on a 2048 game board.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """
    A numbered tile at a given board position.

    Attributes
    ----------
    value : int
        Tile value, a power of two greater or equal to 2.
    col : int
        Column of the tile, 0 being the left column.
    row : int
        Row of the tile, 0 being the bottom row.

    Notes
    -----
    Tiles are never mutated: moving or merging a tile yields a new instance.
    """

    value: int
    col: int
    row: int

    @classmethod
    def create(cls, value: int, col: int, row: int) -> Tile:
        """
        Create a new tile.

        Parameters
        ----------
        value : int
            Tile value.
        col : int
            Column of the tile.
        row : int
            Row of the tile.

        Returns
        -------
        Tile
            The new tile.

        Raises
        ------
        ValueError
            If the value is not a power of two greater or equal to 2.
        """
        if value < 2 or value & (value - 1):
            raise ValueError(f'Tile value must be a power of two >= 2, got {value}')
        return cls(value=value, col=col, row=row)

    def moved(self, col: int, row: int) -> Tile:
        """Return a copy of this tile at (col, row)."""
        return Tile(value=self.value, col=col, row=row)

    def merged(self, other: Tile) -> Tile:
        """
        Merge this tile with another one of equal value.

        Parameters
        ----------
        other : Tile
            The tile absorbed by this one.

        Returns
        -------
        Tile
            A tile of twice the value, at this tile's position.
        """
        if other.value != self.value:
            raise ValueError(f'Cannot merge tiles of values {self.value} and {other.value}')
        return Tile(value=self.value * 2, col=self.col, row=self.row)
