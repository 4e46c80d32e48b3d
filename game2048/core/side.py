"""
Directions of a tilt and the coordinate transforms attached to them.
"""

from __future__ import annotations

from enum import Enum


class Side(Enum):
    """
    The four sides of the board tiles can be tilted toward.

    Each side converts motion-relative coordinates into board coordinates. In the motion-relative
    frame the local column runs along the direction of motion, ``size - 1`` being the leading edge
    (the side tiles slide toward), and the local row selects the lane.

    Notes
    -----
    Values follow the action numbering of the game (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_name(cls, name: str) -> Side:
        """
        Parse a direction name such as ``"up"`` or ``"LEFT"``.

        Raises
        ------
        ValueError
            If the name is not a known direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'Unknown direction: {name!r}') from None

    def col(self, local_col: int, local_row: int, size: int) -> int:
        """
        Board column of the motion-relative position (local_col, local_row).

        Parameters
        ----------
        local_col : int
            Position along the direction of motion.
        local_row : int
            Lane index.
        size : int
            Board size.

        Returns
        -------
        int
            The board column.
        """
        if self is Side.RIGHT:
            return local_col
        if self is Side.LEFT:
            return size - 1 - local_col
        return local_row

    def row(self, local_col: int, local_row: int, size: int) -> int:
        """
        Board row of the motion-relative position (local_col, local_row).

        Parameters
        ----------
        local_col : int
            Position along the direction of motion.
        local_row : int
            Lane index.
        size : int
            Board size.

        Returns
        -------
        int
            The board row.
        """
        if self is Side.UP:
            return local_col
        if self is Side.DOWN:
            return size - 1 - local_col
        return local_row
