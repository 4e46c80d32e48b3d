"""
Rules of the 2048 game: merging a lane and checking which moves remain on a board.
"""

from numpy import any as np_any

from game2048.core.board import Board
from game2048.core.side import Side
from game2048.core.tile import Tile

# ##>: Largest piece value; reaching it ends the game.
MAX_PIECE = 2048


def merge_lane(tiles: list[Tile]) -> tuple[int, list[Tile]]:
    """
    Merge adjacent equal tiles of a lane and compute the score.

    Parameters
    ----------
    tiles : list[Tile]
        Non-empty tiles of one lane, ordered from the leading edge backwards.

    Returns
    -------
    score : int
        Sum of the values of the merged tiles.
    merged_lane : list[Tile]
        The surviving tiles, in the same order. Tiles produced by a merge are new instances placed
        at the position of the leading tile of the pair; other tiles are returned as is.

    Notes
    -----
    - Merging starts at the leading edge, so of three equal tiles the two leading ones merge.
    - A tile produced by a merge does not merge again.
    """
    result = []
    score = 0

    i = 0
    while i < len(tiles) - 1:
        if tiles[i].value == tiles[i + 1].value:
            merged = tiles[i].merged(tiles[i + 1])
            result.append(merged)
            score += merged.value
            i += 2
        else:
            result.append(tiles[i])
            i += 1

    if i == len(tiles) - 1:
        result.append(tiles[-1])

    return score, result


def empty_space_exists(board: Board) -> bool:
    """Return True if at least one cell of the board is empty."""
    return not board.values().all()


def max_tile_exists(board: Board, max_piece: int = MAX_PIECE) -> bool:
    """
    Check if a tile reached the winning value.

    Parameters
    ----------
    board : Board
        The board to scan.
    max_piece : int, optional
        The winning tile value (default is 2048).

    Returns
    -------
    bool
        True if any tile is equal to ``max_piece``.
    """
    return any(tile.value == max_piece for tile in board)


def at_least_one_move_exists(board: Board) -> bool:
    """
    Check if any move is possible on the board.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    bool
        True if a cell is empty or two orthogonally adjacent cells hold equal values.
    """
    values = board.values()
    return bool(
        np_any(values == 0) or np_any(values[:-1] == values[1:]) or np_any(values[:, :-1] == values[:, 1:])
    )


def legal_sides(board: Board) -> list[Side]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    list[Side]
        Sides whose tilt slides or merges at least one tile, in action order.

    Notes
    -----
    Horizontal and vertical adjacencies are computed once and shared by opposite directions.
    """
    values = board.values()

    # ##>: Columns side by side, for left/right.
    left_cols, right_cols = values[:, :-1], values[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Rows on top of each other (row 0 is the bottom), for up/down.
    lower_rows, upper_rows = values[:-1, :], values[1:, :]
    v_can_merge = (lower_rows != 0) & (lower_rows == upper_rows)

    # ##>: A tile slides when the neighbouring cell toward the side is empty.
    can_slide = {
        Side.LEFT: (left_cols == 0) & (right_cols != 0),
        Side.UP: (upper_rows == 0) & (lower_rows != 0),
        Side.RIGHT: (right_cols == 0) & (left_cols != 0),
        Side.DOWN: (lower_rows == 0) & (upper_rows != 0),
    }
    can_merge = {Side.LEFT: h_can_merge, Side.UP: v_can_merge, Side.RIGHT: h_can_merge, Side.DOWN: v_can_merge}

    return [side for side in Side if can_slide[side].any() or can_merge[side].any()]
