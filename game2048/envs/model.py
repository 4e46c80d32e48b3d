"""State of a game of 2048, mutated by tilting the board."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from numpy import argwhere
from numpy.random import Generator, default_rng

from game2048.addons.config import GameConfig
from game2048.core.board import Board
from game2048.core.rules import at_least_one_move_exists, legal_sides, max_tile_exists, merge_lane
from game2048.core.side import Side
from game2048.core.tile import Tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)

Observer = Callable[['Model'], None]


class Model:
    """
    The state of a game of 2048.

    A model owns a board, the current score, the maximum score reached so far and whether the game
    has ended. Column C, row R of the board (row 0, column 0 being the lower-left corner) is
    ``model.tile(C, R)``.
    """

    def __init__(self, size: int = 4, config: GameConfig | None = None):
        """
        Initialize an empty game with a score of 0.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4). Ignored when ``config`` is given.
        config : GameConfig, optional
            Game configuration.
        """
        self.config = config if config is not None else GameConfig(size=size)
        self._board = Board(self.config.size)
        self._score = 0
        self._max_score = 0
        self._game_over = False
        self._observers: list[Observer] = []
        self._rng: Generator = default_rng()

    @classmethod
    def from_values(
        cls,
        raw_values: Sequence[Sequence[int]],
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
        config: GameConfig | None = None,
    ) -> Model:
        """
        Build a game from raw tile values. Mostly used for testing.

        Parameters
        ----------
        raw_values : Sequence[Sequence[int]]
            Square grid of tile values indexed ``[row][col]``, row 0 being the bottom row. 0 means empty.
        score : int, optional
            Current score.
        max_score : int, optional
            Maximum score so far.
        game_over : bool, optional
            Whether the game was already recorded as ended. Ignored when the board is not over.
        config : GameConfig, optional
            Game configuration. Its size is replaced by the size of ``raw_values``.

        Returns
        -------
        Model
            The new game.
        """
        board = Board.from_values(raw_values)
        if config is None:
            config = GameConfig(size=board.size)
        elif config.size != board.size:
            config = GameConfig(
                size=board.size,
                max_piece=config.max_piece,
                start_tiles=config.start_tiles,
                spawn_probs=dict(config.spawn_probs),
            )

        model = cls(config=config)
        model._board = board
        model._score = score
        model._max_score = max_score
        # ##: A recorded end only holds if the board is actually over.
        model._game_over = game_over and model.game_over
        return model

    @property
    def board(self) -> Board:
        """Get the game board."""
        return self._board

    @property
    def size(self) -> int:
        """Get the number of cells on one side of the board."""
        return self._board.size

    @property
    def score(self) -> int:
        """Get the current score."""
        return self._score

    @property
    def max_score(self) -> int:
        """Get the maximum score so far, updated when a game ends."""
        return self._max_score

    @property
    def game_over(self) -> bool:
        """
        Check if the game is over.

        Returns
        -------
        bool
            True if a tile reached the winning value or no move is possible.
        """
        return max_tile_exists(self._board, self.config.max_piece) or not at_least_one_move_exists(self._board)

    def tile(self, col: int, row: int) -> Tile | None:
        """Return the tile at (col, row), or None if the cell is empty."""
        return self._board.tile(col, row)

    def clear(self) -> None:
        """Clear the board and reset the score. The maximum score is kept."""
        self._board.clear()
        self._score = 0
        self._game_over = False

    def add_tile(self, tile: Tile) -> None:
        """Add a tile to the board. Its cell must be empty."""
        self._board.add_tile(tile)

    def add_random_tile(self) -> Tile | None:
        """
        Spawn a tile on a random empty cell.

        Returns
        -------
        Tile or None
            The new tile, or None if the board is full.

        Notes
        -----
        - Tile values and their probabilities come from ``config.spawn_probs`` (by default a 2 with
          probability 0.9 and a 4 with probability 0.1).
        - Filling the board may end the game, which updates the maximum score.
        """
        available_cells = argwhere(self._board.values() == 0)
        if len(available_cells) == 0:
            return None

        # ##: Randomly choose the tile value and its cell.
        values, probs = zip(*self.config.spawn_probs.items())
        value = int(self._rng.choice(values, p=probs))
        row, col = available_cells[self._rng.integers(len(available_cells))]

        tile = Tile.create(value, int(col), int(row))
        self._board.add_tile(tile)

        # ##: Filling the last empty cell may end the game.
        self._check_game_over()
        return tile

    def start(self, seed: int | None = None) -> None:
        """
        Start a new game: clear the board and spawn the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Random seed for reproducibility.
        """
        self._rng = default_rng(seed)
        self.clear()
        for _ in range(self.config.start_tiles):
            self.add_random_tile()

    def legal_sides(self) -> list[Side]:
        """Return the sides a tilt toward would change the board."""
        return legal_sides(self._board)

    def can_tilt(self, side: Side) -> bool:
        """Return True if tilting toward ``side`` would change the board."""
        return side in self.legal_sides()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback invoked with the model after every tilt.

        Parameters
        ----------
        observer : Callable[[Model], None]
            The callback.

        Returns
        -------
        Callable[[], None]
            A function removing the callback.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def tilt(self, side: Side) -> bool:
        """
        Tilt the board toward a side.

        Parameters
        ----------
        side : Side
            The side tiles slide toward.

        Returns
        -------
        bool
            True if any tile moved or merged.

        Notes
        -----
        - Two adjacent tiles of the same value in the direction of motion merge into one tile of
          twice the value, which is added to the score.
        - A tile produced by a merge does not merge again on the same tilt.
        - When three adjacent tiles have the same value, the leading two merge and the trailing one
          does not.
        """
        changed = False
        size = self._board.size

        for lane in range(size):
            tiles = self._board.lane(side, lane)
            score, merged_lane = merge_lane(tiles)
            if score:
                self._score += score
                changed = True

            # ##: Tiles absorbed by a merge leave the board.
            for tile in tiles:
                if not any(tile is kept for kept in merged_lane):
                    self._board.remove(tile)

            # ##: Pack the remaining tiles against the leading edge.
            for along, tile in zip(reversed(range(size)), merged_lane):
                col, row = side.col(along, lane, size), side.row(along, lane, size)
                changed = self._board.move(col, row, tile) or changed

        _logger.debug('Tilt %s: changed=%s, score=%d', side.name, changed, self._score)

        self._check_game_over()
        self._notify()
        return changed

    def _check_game_over(self) -> None:
        """Record the end of the game and update the maximum score."""
        if self._game_over or not self.game_over:
            return

        self._game_over = True
        self._max_score = max(self._max_score, self._score)
        _logger.info('Game over: score=%d, max score=%d', self._score, self._max_score)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    def __str__(self) -> str:
        lines = ['', '[']
        for row in reversed(range(self.size)):
            cells = []
            for col in range(self.size):
                tile = self.tile(col, row)
                cells.append('|    ' if tile is None else f'|{tile.value:4d}')
            lines.append(''.join(cells) + '|')
        over = 'over' if self.game_over else 'not over'
        lines.append(f'] {self.score} (max: {self.max_score}) (game is {over}) ')
        return '\n'.join(lines) + '\n'

    def __eq__(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return False
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
