# -*- coding: utf-8 -*-
"""
Configuration of a 2048 game.
"""
from dataclasses import dataclass, field

from game2048.core.rules import MAX_PIECE


@dataclass
class GameConfig:
    """
    Game configuration.
    """

    size: int = 4  # Cells on one side of the board
    max_piece: int = MAX_PIECE  # Winning tile value
    start_tiles: int = 2  # Tiles spawned when a game starts

    # ##>: Tile spawn probabilities (90% for 2, 10% for 4).
    spawn_probs: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if self.max_piece < 4 or self.max_piece & (self.max_piece - 1):
            raise ValueError(f'max_piece must be a power of two >= 4, got {self.max_piece}')
        if not 0 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f'start_tiles must be in [0, {self.size * self.size}], got {self.start_tiles}')
        if not self.spawn_probs or abs(sum(self.spawn_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f'spawn_probs must sum to 1, got {self.spawn_probs}')
