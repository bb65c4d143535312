"""Tests for frame rendering."""

from io import StringIO
from unittest.mock import Mock

import pytest

from lifeterm.core.config import LifeConfig
from lifeterm.core.engine import GameOfLife
from lifeterm.frontends.renderer import (
    CLEAR_SCREEN,
    INSTRUCTIONS,
    RecordingRenderer,
    Renderer,
    TerminalRenderer,
    format_frame,
)


class TestFormatFrame:
    """Test cases for frame formatting."""

    def test_glider_frame(self):
        """Test the full text of a small frame."""
        config = LifeConfig(size=5)
        game = GameOfLife.from_config(config)

        expected = (
            "Conway's Game of Life - Generation: 0 | Live Cells: 5\n"
            "┌───────┐\n"
            "│ ..... │\n"
            "│ ..... │\n"
            "│ ...X. │\n"
            "│ ....X │\n"
            "│ ..XXX │\n"
            "└───────┘\n"
            "Press Ctrl+C to exit\n"
        )
        assert format_frame(game, config) == expected

    def test_final_frame(self):
        """Test the header and missing instructions on the final frame."""
        config = LifeConfig(size=6)
        game = GameOfLife.from_config(config)
        game.advance()

        frame = format_frame(game, config, final=True)
        lines = frame.splitlines()

        assert lines[0] == "Conway's Game of Life - Final Generation: 1 | Live Cells: 5"
        assert INSTRUCTIONS not in frame
        assert lines[-1] == "└" + "─" * 8 + "┘"

    def test_border_width(self):
        """Test that the border is two wider than the grid."""
        config = LifeConfig()
        lines = format_frame(GameOfLife.from_config(config), config).splitlines()

        assert lines[1] == "┌" + "─" * 27 + "┐"
        assert len(lines) == 1 + 1 + 25 + 1 + 1
        assert all(len(line) == 29 for line in lines[1:-1])

    def test_custom_glyphs(self):
        """Test that configured glyphs are used."""
        config = LifeConfig(size=4, pattern="Block", live_glyph="#", dead_glyph=" ")
        lines = format_frame(GameOfLife.from_config(config), config).splitlines()

        assert lines[2:6] == [
            "│      │",
            "│      │",
            "│   ## │",
            "│   ## │",
        ]


class TestRenderers:
    """Test cases for the renderer implementations."""

    def test_base_renderer_is_abstract(self):
        """Test that the base renderer has no behavior of its own."""
        renderer = Renderer(LifeConfig())
        with pytest.raises(NotImplementedError):
            renderer.show(GameOfLife.from_config(LifeConfig()))
        with pytest.raises(NotImplementedError):
            renderer.wait(0.1)

    def test_terminal_renderer(self):
        """Test that the terminal renderer clears before each frame and sleeps."""
        config = LifeConfig(size=5)
        game = GameOfLife.from_config(config)
        stream = StringIO()
        sleep = Mock()
        renderer = TerminalRenderer(config, stream=stream, sleep=sleep)

        renderer.show(game)
        renderer.wait(config.delay)
        renderer.show(game, final=True)

        output = stream.getvalue()
        assert output.startswith(CLEAR_SCREEN)
        assert output.count(CLEAR_SCREEN) == 2
        assert output.endswith(format_frame(game, config, final=True))
        sleep.assert_called_once_with(0.2)

    def test_recording_renderer(self):
        """Test that the recording renderer keeps frames and delays."""
        config = LifeConfig(size=5)
        game = GameOfLife.from_config(config)
        renderer = RecordingRenderer(config)

        renderer.show(game)
        renderer.wait(0.5)

        assert renderer.frames == [format_frame(game, config)]
        assert renderer.delays == [0.5]
