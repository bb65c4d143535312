"""Frame rendering for terminal and headless runs."""

import sys
import time
from typing import Callable, List, Optional, TextIO

from ..core.config import LifeConfig
from ..core.engine import GameOfLife

CLEAR_SCREEN = "\033[2J\033[H"
INSTRUCTIONS = "Press Ctrl+C to exit"


def format_frame(game: GameOfLife, config: LifeConfig, final: bool = False) -> str:
    """Format one frame: header, bordered grid and (except on the last frame) instructions.

    Args:
        game: Game whose current generation is drawn
        config: Supplies the live and dead glyphs
        final: Whether this is the closing frame of the run

    Returns:
        Frame text ending with a newline
    """
    label = "Final Generation" if final else "Generation"
    lines = [f"Conway's Game of Life - {label}: {game.generation} | Live Cells: {game.population}"]

    border = "─" * (game.grid.size + 2)
    lines.append("┌" + border + "┐")
    for row in game.grid.to_text(config.live_glyph, config.dead_glyph).split("\n"):
        lines.append("│ " + row + " │")
    lines.append("└" + border + "┘")

    if not final:
        lines.append(INSTRUCTIONS)

    return "\n".join(lines) + "\n"


class Renderer:
    """Displays frames and paces the simulation."""

    def __init__(self, config: LifeConfig) -> None:
        self.config = config

    def show(self, game: GameOfLife, final: bool = False) -> None:
        """Display the current state of a game."""
        raise NotImplementedError

    def wait(self, seconds: float) -> None:
        """Pause between generations."""
        raise NotImplementedError


class TerminalRenderer(Renderer):
    """Redraws frames in place on an ANSI terminal."""

    def __init__(
        self,
        config: LifeConfig,
        stream: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize terminal renderer.

        Args:
            config: Simulation configuration
            stream: Output stream (defaults to sys.stdout at render time)
            sleep: Function used to wait between frames
        """
        super().__init__(config)
        self._stream = stream
        self._sleep = sleep

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def show(self, game: GameOfLife, final: bool = False) -> None:
        self.stream.write(CLEAR_SCREEN)
        self.stream.write(format_frame(game, self.config, final))
        self.stream.flush()

    def wait(self, seconds: float) -> None:
        self._sleep(seconds)


class RecordingRenderer(Renderer):
    """Keeps frames in memory instead of drawing them. Never sleeps."""

    def __init__(self, config: LifeConfig) -> None:
        super().__init__(config)
        self.frames: List[str] = []
        self.delays: List[float] = []

    def show(self, game: GameOfLife, final: bool = False) -> None:
        self.frames.append(format_frame(game, self.config, final))

    def wait(self, seconds: float) -> None:
        self.delays.append(seconds)
