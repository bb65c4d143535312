"""Core cellular automata logic."""

from .config import LifeConfig
from .grid import Grid
from .engine import GameOfLife, advance, live_neighbors, next_state
from .patterns import Pattern, PatternLibrary

__all__ = ["LifeConfig", "Grid", "GameOfLife", "advance", "live_neighbors", "next_state", "Pattern", "PatternLibrary"]
