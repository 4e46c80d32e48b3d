# -*- coding: utf-8 -*-
"""
This module provides the building blocks of a 2048 game.

It includes the immutable `Tile`, the `Side` directions with their coordinate transforms, the
`Board` grid, and the rules for merging lanes and checking which moves remain.
"""

from .board import Board
from .rules import (
    MAX_PIECE,
    at_least_one_move_exists,
    empty_space_exists,
    legal_sides,
    max_tile_exists,
    merge_lane,
)
from .side import Side
from .tile import Tile

__all__ = [
    "Board",
    "Side",
    "Tile",
    "MAX_PIECE",
    "merge_lane",
    "empty_space_exists",
    "max_tile_exists",
    "at_least_one_move_exists",
    "legal_sides",
]
