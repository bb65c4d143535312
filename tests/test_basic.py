"""Basic tests for the lifeterm package."""

from lifeterm import GameOfLife, Grid, LifeConfig, PatternLibrary


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10)
    assert grid.size == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_game_creation():
    """Test basic game creation."""
    grid = Grid(5)
    game = GameOfLife(grid)
    assert game.population == 0

    grid.set_cell(2, 2, True)
    assert game.population == 1


def test_pattern_library():
    """Test pattern library has the glider."""
    assert "Glider" in PatternLibrary().list_patterns()


def test_default_simulation():
    """Test the default glider stays at five cells."""
    game = GameOfLife.from_config(LifeConfig())
    for _ in range(100):
        game.advance()

    assert game.generation == 100
    assert game.population == 5
