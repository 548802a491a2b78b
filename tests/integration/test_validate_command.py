"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid design files and archives pass validation
- Malformed design files produce errors
- Placement warnings are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from wallcraft.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "designs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_design(self, runner: CliRunner) -> None:
        """A clean design passes with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "kitchen.json")])

        assert result.exit_code == 0
        assert "Kitchen: 1 blocks on a 300×150cm wall, 3 templates" in result.output
        assert "Validation passed. Design file is valid." in result.output

    def test_valid_archive(self, runner: CliRunner) -> None:
        """Every design of an archive is summarised."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "archive.json")])

        assert result.exit_code == 0
        assert "Hallway: 2 blocks" in result.output
        assert "Studio: 0 blocks on a 400×250cm wall, 2 templates" in result.output

    def test_placement_warnings(self, runner: CliRunner) -> None:
        """Overlapping and out-of-bounds blocks give exit code 2."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "overlapping.json")])

        assert result.exit_code == 2
        assert "Warning: Blocks a and b overlap" in result.output
        assert "Warning: Block c lies outside the tolerated wall bounds" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_stale_overflow_flag(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "stale.json"
        path.write_text(
            '{"name": "Stale", "wall": {"width": 100, "height": 100},'
            ' "blocks": [{"id": "s", "x": 0, "y": 0, "width": 60, "height": 30,'
            ' "isOverflow": true}], "blockTemplates": []}'
        )

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Block s has a stale overflow flag" in result.output

    def test_missing_blocks(self, runner: CliRunner) -> None:
        """A design without a blocks array cannot be imported."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "missing_blocks.json")])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "blocks: Field required" in result.output
        assert "Validation failed." in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        """Invalid JSON should fail with exit code 1."""
        path = tmp_path / "broken.json"
        path.write_text('{"name": "Broken",')

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 1" in result.output
