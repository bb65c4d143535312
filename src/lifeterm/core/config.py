"""Simulation configuration."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .patterns import PatternLibrary


@dataclass(frozen=True)
class LifeConfig:
    """Configuration for a terminal simulation run.

    The defaults reproduce the classic demo: a glider at the centre of a
    25x25 torus, 1000 generations at 200ms per frame.
    """

    size: int = 25
    live_glyph: str = "X"
    dead_glyph: str = "."
    delay: float = 0.2
    generations: int = 1000
    pattern: str = "Glider"
    offset: Optional[Tuple[int, int]] = None

    def anchor(self) -> Tuple[int, int]:
        """Resolve where the pattern's origin is placed."""
        if self.offset is None:
            center = self.size // 2
            return (center, center)
        return self.offset

    def validate(self, library: Optional[PatternLibrary] = None) -> List[str]:
        """Check the configuration.

        Args:
            library: Pattern library to resolve ``pattern`` against

        Returns:
            List of error messages, empty if the configuration is valid
        """
        errors = []

        size_ok = isinstance(self.size, int) and not isinstance(self.size, bool) and self.size > 0
        if not size_ok:
            errors.append("Grid size must be a positive integer")

        for label, glyph in (("Live", self.live_glyph), ("Dead", self.dead_glyph)):
            if not isinstance(glyph, str) or len(glyph) != 1:
                errors.append(f"{label} glyph must be a single character")

        if self.live_glyph == self.dead_glyph:
            errors.append("Live and dead glyphs must differ")

        delay_ok = isinstance(self.delay, (int, float)) and not isinstance(self.delay, bool)
        if not delay_ok:
            errors.append("Delay must be a number of seconds")
        elif self.delay < 0:
            errors.append("Delay must be non-negative")

        generations_ok = isinstance(self.generations, int) and not isinstance(self.generations, bool)
        if not generations_ok:
            errors.append("Generations must be an integer")
        elif self.generations < 0:
            errors.append("Generations must be non-negative")

        pattern = (library or PatternLibrary()).get_pattern(self.pattern)
        if pattern is None:
            errors.append(f"Unknown pattern '{self.pattern}'")
        elif size_ok and not pattern.fits(self.size):
            height, width = pattern.get_size()
            errors.append(f"Pattern '{self.pattern}' ({height}x{width}) does not fit a {self.size}x{self.size} grid")

        return errors

    def check(self, library: Optional[PatternLibrary] = None) -> None:
        """Raise if the configuration is invalid.

        Raises:
            ValueError: With every validation error joined together
        """
        errors = self.validate(library)
        if errors:
            raise ValueError("; ".join(errors))
