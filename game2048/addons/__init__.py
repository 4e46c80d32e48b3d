# -*- coding: utf-8 -*-
"""
Set of add-ons for this project.
"""
from .config import GameConfig

__all__ = ["GameConfig"]
