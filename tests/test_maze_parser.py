"""Tests for maze parser."""

import tempfile
from pathlib import Path

import pytest

from maze_solver.core import (
    MazeGrid,
    MazeLoadError,
    MazeParseError,
    load_maze_file,
    parse_maze_text,
    read_maze_dimensions,
    validate_maze_text,
)

# Sample maze for testing
SIMPLE_MAZE = """3 3
_ _ *
* _ _
* * $
"""

MAZES_DIR = Path(__file__).parent.parent / "mazes"


class TestParseMazeText:
    """Tests for parsing maze text."""

    def test_parse_simple_maze(self):
        """Test parsing a simple valid maze."""
        grid = parse_maze_text(SIMPLE_MAZE)

        assert isinstance(grid, MazeGrid)
        assert grid.dimensions() == (3, 3)
        assert grid.to_rows() == [
            ["_", "_", "*"],
            ["*", "_", "_"],
            ["*", "*", "$"],
        ]

    def test_parse_without_cell_separators(self):
        """Test that cells do not need whitespace between them."""
        grid = parse_maze_text("2 3\n__*\n*_$")
        assert grid.to_rows() == [["_", "_", "*"], ["*", "_", "$"]]

    def test_parse_single_line(self):
        """Test that the layout of whitespace does not matter."""
        grid = parse_maze_text("1 2 _ $")
        assert grid.to_rows() == [["_", "$"]]

    def test_parse_empty_maze_raises_error(self):
        """Test that empty maze raises MazeParseError."""
        with pytest.raises(MazeParseError, match="Maze text is empty"):
            parse_maze_text("")

    def test_parse_whitespace_only_raises_error(self):
        """Test that whitespace-only maze raises MazeParseError."""
        with pytest.raises(MazeParseError, match="Maze text is empty"):
            parse_maze_text("   \n   \n   ")

    def test_parse_missing_columns_raises_error(self):
        """Test that a header with one number raises MazeParseError."""
        with pytest.raises(MazeParseError, match="missing the column count"):
            parse_maze_text("3")

    def test_parse_non_integer_header_raises_error(self):
        """Test that the header must hold integers."""
        with pytest.raises(MazeParseError, match="row count must be an integer"):
            parse_maze_text("a 2\n_ $")

    @pytest.mark.parametrize("header", ["1_0 1", "\u0661 1", "1.0 1", "0x1 1"])
    def test_parse_header_requires_plain_digits(self, header):
        """Test that only ASCII digits with an optional sign form a count."""
        with pytest.raises(MazeParseError, match="row count must be an integer"):
            parse_maze_text(header + "\n" + "_ " * 10)

    def test_parse_signed_header(self):
        """Test that a leading plus sign is accepted."""
        grid = parse_maze_text("+1 +2\n_ $")
        assert grid.dimensions() == (1, 2)

    def test_read_dimensions_ignores_cells(self):
        """Test that dimensions are read without checking the cells."""
        assert read_maze_dimensions("3 4\n_") == (3, 4)

    def test_read_dimensions_bad_header(self):
        """Test that a missing column count is reported."""
        with pytest.raises(MazeParseError, match="missing the column count"):
            read_maze_dimensions("3")

    def test_parse_zero_dimension_raises_error(self):
        """Test that dimensions must be positive."""
        with pytest.raises(MazeParseError, match="column count must be positive"):
            parse_maze_text("1 0\n")

    def test_parse_too_few_cells_raises_error(self):
        """Test that missing cells raise MazeParseError."""
        with pytest.raises(MazeParseError, match="only 3 were found"):
            parse_maze_text("2 2\n_ _\n_")

    def test_parse_too_many_cells_raises_error(self):
        """Test that extra cells raise MazeParseError."""
        with pytest.raises(MazeParseError, match="but 5 were found"):
            parse_maze_text("2 2\n_ _\n_ $ _")

    def test_unknown_symbols_kept_by_default(self):
        """Test that unknown symbols are kept literally."""
        grid = parse_maze_text("1 3\n_ # $")
        assert grid.at(0, 1) == "#"

    def test_strict_rejects_unknown_symbols(self):
        """Test that strict parsing rejects unknown symbols."""
        with pytest.raises(MazeParseError, match=r"Invalid character '#' at position \(1, 0\)"):
            parse_maze_text("2 2\n_ _\n# $", strict=True)

    def test_strict_accepts_valid_symbols(self):
        """Test that strict parsing accepts _, * and $."""
        grid = parse_maze_text(SIMPLE_MAZE, strict=True)
        assert grid.dimensions() == (3, 3)


class TestLoadMazeFile:
    """Tests for loading maze files from filesystem."""

    def test_load_maze_file(self):
        """Test loading a maze from a file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False) as f:
            f.write(SIMPLE_MAZE)
            f.flush()

        grid = load_maze_file(f.name)
        assert grid.dimensions() == (3, 3)

        Path(f.name).unlink()

    def test_load_maze_file_not_found(self, tmp_path):
        """Test that a missing file raises MazeLoadError naming the file."""
        missing = tmp_path / "missing.txt"
        with pytest.raises(MazeLoadError, match="Cannot read from") as exc_info:
            load_maze_file(missing)
        assert exc_info.value.path == str(missing)

    def test_load_directory_raises_load_error(self, tmp_path):
        """Test that a directory cannot be loaded as a maze."""
        with pytest.raises(MazeLoadError):
            load_maze_file(tmp_path)

    def test_load_malformed_file_raises_parse_error(self, tmp_path):
        """Test that a readable but malformed file raises MazeParseError."""
        maze_file = tmp_path / "bad.txt"
        maze_file.write_text("2 2\n_ _\n")
        with pytest.raises(MazeParseError):
            load_maze_file(maze_file)

    def test_sample_mazes_are_valid(self):
        """Test that bundled mazes parse in strict mode."""
        maze_files = sorted(MAZES_DIR.glob("*.txt"))
        assert maze_files
        for maze_file in maze_files:
            grid = load_maze_file(maze_file, strict=True)
            assert grid.rows >= 1


class TestValidateMazeText:
    """Tests for maze validation helper."""

    def test_validate_valid_maze(self):
        """Test validation of valid maze returns True."""
        is_valid, error = validate_maze_text(SIMPLE_MAZE)
        assert is_valid is True
        assert error is None

    def test_validate_invalid_maze(self):
        """Test validation of invalid maze returns False with error."""
        is_valid, error = validate_maze_text("2 2\n_ _")
        assert is_valid is False
        assert "were found" in error

    def test_validate_strict(self):
        """Test that strict validation reports invalid symbols."""
        assert validate_maze_text("1 2\n_ ?") == (True, None)
        is_valid, error = validate_maze_text("1 2\n_ ?", strict=True)
        assert is_valid is False
        assert "Invalid character" in error
