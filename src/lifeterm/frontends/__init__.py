"""Frontend interfaces for cellular automata."""

from .renderer import Renderer, TerminalRenderer, RecordingRenderer, format_frame
from .cli import CLIGameOfLife

__all__ = ["Renderer", "TerminalRenderer", "RecordingRenderer", "format_frame", "CLIGameOfLife"]
