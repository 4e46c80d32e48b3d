# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `Model` class, which holds the board, the score and the game-over state,
and exposes the tilt operation.
"""

from .model import Model

__all__ = ["Model"]
