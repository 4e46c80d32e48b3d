# -*- coding: utf-8 -*-
"""
Play 2048 games with random moves.
"""
import logging
from collections import Counter

from numpy.random import default_rng
from tqdm import trange

from game2048 import GameConfig, Model


def play(model: Model, seed: int | None = None, verbose: bool = False) -> int:
    """
    Play one game choosing uniformly among the legal directions.

    Parameters
    ----------
    model : Model
        The game to play. It is restarted first.
    seed : int, optional
        Random seed for reproducibility.
    verbose : bool, optional
        Print the board after each move (default is False).

    Returns
    -------
    int
        The number of moves played.
    """
    rng = default_rng(seed)
    model.start(seed=seed)
    if verbose:
        print(model)

    moves = 0
    while not model.game_over:
        sides = model.legal_sides()
        if not sides:
            break

        side = sides[rng.integers(len(sides))]
        model.tilt(side)
        model.add_random_tile()
        moves += 1

        if verbose:
            print(f'Next Action: "{side.name.lower()}"')
            print(model)
    return moves


def evaluate(length: int = 10, size: int = 4, seed: int | None = None, verbose: bool = False) -> dict[int, int]:
    """
    Play several random games.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    size : int, optional
        The size of the board (default is 4).
    seed : int, optional
        Random seed of the first game; following games use the next seeds.
    verbose : bool, optional
        Print every board.

    Returns
    -------
    dict[int, int]
        Frequency of the largest tile reached.
    """
    model = Model(config=GameConfig(size=size))
    score = []

    with trange(length) as period:
        for num in period:
            game_seed = None if seed is None else seed + num
            moves = play(model, seed=game_seed, verbose=verbose)

            # ##: Save max cells.
            score.append(int(model.board.values().max()))

            # ##: Log.
            period.set_description(f'Game: {num + 1}')
            period.set_postfix(score=model.score, max=model.max_score, moves=moves)

    print(f'Best score: {model.max_score}')
    return dict(Counter(score))


if __name__ == '__main__':
    from argparse import ArgumentParser

    parser = ArgumentParser(description='Play 2048 games with random moves.')
    parser.add_argument('--games', type=int, default=10)
    parser.add_argument('--size', type=int, default=4)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--verbose', action='store_true')
    parser.add_argument('--log-level', type=str, default='WARNING')
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(name)s %(levelname)s %(message)s')

    result = evaluate(length=args.games, size=args.size, seed=args.seed, verbose=args.verbose)
    print(f'Largest tiles: {dict(sorted(result.items()))}')
