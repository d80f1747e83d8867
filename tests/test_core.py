"""
Unit tests for core module.
"""
from pathlib import Path
import textwrap
import pytest

from darts_manager.core import (
    BoardGeometry, BullTarget, Hit, Config, load_yaml
)


def test_board_geometry():
    """Test BoardGeometry defaults."""
    board = BoardGeometry()
    assert board.num_sectors == 20
    assert board.sector_angle == 18.0
    assert len(board.sector_sequence) == 20
    assert board.sector_sequence[0] == 20  # Top sector
    assert sorted(board.sector_sequence) == list(range(1, 21))

    assert board.inner_bull_radius < board.outer_bull_radius
    assert board.triple_inner_radius < board.triple_outer_radius
    assert board.double_inner_radius < board.double_outer_radius
    assert board.double_outer_radius < board.outer_rim_radius


def test_board_geometry_is_frozen():
    """Layout constants cannot be changed."""
    board = BoardGeometry()
    with pytest.raises(AttributeError):
        board.inner_bull_radius = 7.0


def test_board_geometry_scale():
    """Surface radius maps onto the 50-unit board."""
    board = BoardGeometry()
    assert board.scale_from(200) == pytest.approx(0.25)
    assert board.scale_from(50) == pytest.approx(1.0)

    with pytest.raises(ValueError):
        board.scale_from(0)


def test_bull_target():
    """Bull selections carry fixed scores and labels."""
    assert BullTarget.BULL.score == 50
    assert BullTarget.OUTER_BULL.score == 25
    assert BullTarget.BULL.label == "Bull (50)"
    assert BullTarget("OUTER_BULL") is BullTarget.OUTER_BULL


def test_hit():
    """Test Hit dataclass."""
    hit = Hit(sector_number=20, multiplier=3, raw_score=60, description="3×20")
    assert not hit.is_bull
    assert hit.on_board
    assert hit.board_x == 50.0

    bull = Hit(sector_number=None, multiplier=1, raw_score=50, description="Bull (50)")
    assert bull.is_bull


def test_config_defaults(tmp_path: Path):
    """Missing YAML falls back to defaults."""
    config = Config(tmp_path / "missing.yaml")

    assert config.starting_score == 501
    assert config.default_player_name == "Player {id}"
    assert config.log_level == "INFO"


def test_config_overrides(tmp_path: Path):
    """YAML values merge over defaults section by section."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent("""
        game:
          starting_score: 301
        logging:
          level: debug
    """).strip())

    config = Config(config_path)

    assert config.starting_score == 301
    assert config.default_player_name == "Player {id}"
    assert config.log_level == "DEBUG"
    assert config.get_section("game")["starting_score"] == 301
    assert config.get("game", "missing", 7) == 7

    # Defaults stay untouched for later instances
    assert Config().starting_score == 501


def test_config_malformed_yaml(tmp_path: Path):
    """Unparseable YAML falls back to defaults."""
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("game: [starting_score: 301")

    config = Config(config_path)
    assert config.starting_score == 501


def test_load_yaml(tmp_path: Path):
    """Test YAML loading."""
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("game:\n  starting_score: 701\n")

    assert load_yaml(config_path) == {"game": {"starting_score": 701}}

    empty_path = tmp_path / "empty.yaml"
    empty_path.write_text("")
    assert load_yaml(empty_path) == {}


def test_load_nonexistent_yaml():
    """Test loading non-existent file."""
    with pytest.raises(FileNotFoundError):
        load_yaml(Path("nonexistent_file.yaml"))
