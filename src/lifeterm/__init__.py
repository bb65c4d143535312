"""Conway's Game of Life on a toroidal grid, rendered to the terminal."""

__version__ = "0.1.0"

from .core.config import LifeConfig
from .core.grid import Grid
from .core.engine import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["LifeConfig", "Grid", "GameOfLife", "Pattern", "PatternLibrary"]
