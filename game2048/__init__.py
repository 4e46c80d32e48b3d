# -*- coding: utf-8 -*-
"""
Rules engine for the 2048 sliding-tile game.
"""

from .addons import GameConfig
from .core import Board, Side, Tile
from .envs import Model

__all__ = ["Board", "GameConfig", "Model", "Side", "Tile"]
