"""Integration tests for the designs CLI commands.

Every test uses its own store file under tmp_path.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from wallcraft.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "designs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def store(tmp_path: Path) -> Path:
    return tmp_path / "store" / "designs.json"


def invoke(runner: CliRunner, store: Path, *args: str):
    return runner.invoke(app, ["designs", *args, "--store", str(store)])


class TestDesignsCommands:
    """Tests for 'wallcraft designs ...'."""

    def test_list_empty_store(self, runner: CliRunner, store: Path) -> None:
        result = invoke(runner, store, "list")

        assert result.exit_code == 0
        assert "No saved designs." in result.output

    def test_save_and_list(self, runner: CliRunner, store: Path) -> None:
        result = invoke(runner, store, "save", str(FIXTURES_PATH / "kitchen.json"))
        assert result.exit_code == 0
        assert "Saved design 'Kitchen'" in result.output

        result = invoke(runner, store, "list")
        assert "[0] Kitchen - 1 blocks, 300×150cm, created 2024-03-01 10:00" in result.output

    def test_save_twice_updates_in_place(self, runner: CliRunner, store: Path) -> None:
        invoke(runner, store, "save", str(FIXTURES_PATH / "kitchen.json"))
        invoke(runner, store, "save", str(FIXTURES_PATH / "kitchen.json"))

        data = json.loads(store.read_text(encoding="utf-8"))
        assert len(data) == 1

    def test_import_archive(self, runner: CliRunner, store: Path) -> None:
        """Importing twice skips the names already stored."""
        archive = str(FIXTURES_PATH / "archive.json")

        first = invoke(runner, store, "import", archive)
        second = invoke(runner, store, "import", archive)
        third = invoke(runner, store, "import", archive, "--overwrite")

        assert "Imported 2, overwrote 0, skipped 0 design(s)" in first.output
        assert "Imported 0, overwrote 0, skipped 2 design(s)" in second.output
        assert "Imported 0, overwrote 2, skipped 0 design(s)" in third.output

    def test_import_gives_fresh_ids(self, runner: CliRunner, store: Path) -> None:
        invoke(runner, store, "import", str(FIXTURES_PATH / "archive.json"))

        ids = [d["id"] for d in json.loads(store.read_text(encoding="utf-8"))]
        assert "5b0e7a52-8d7c-4f8e-9a51-2f1c1f0a0001" not in ids
        assert len(set(ids)) == 2

    def test_import_invalid_file(self, runner: CliRunner, store: Path) -> None:
        result = invoke(runner, store, "import", str(FIXTURES_PATH / "missing_blocks.json"))

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert not store.exists()

    def test_show(self, runner: CliRunner, store: Path) -> None:
        invoke(runner, store, "save", str(FIXTURES_PATH / "kitchen.json"))

        result = invoke(runner, store, "show", "0")

        assert result.exit_code == 0
        assert json.loads(result.output)["name"] == "Kitchen"

    def test_show_out_of_range(self, runner: CliRunner, store: Path) -> None:
        result = invoke(runner, store, "show", "5")

        assert result.exit_code == 1
        assert "No design at index 5" in result.output

    def test_delete(self, runner: CliRunner, store: Path) -> None:
        invoke(runner, store, "import", str(FIXTURES_PATH / "archive.json"))

        result = invoke(runner, store, "delete", "0")

        assert result.exit_code == 0
        assert "Deleted design 'Hallway'" in result.output
        assert "[0] Studio" in invoke(runner, store, "list").output

    def test_export_all(self, runner: CliRunner, store: Path, tmp_path: Path) -> None:
        invoke(runner, store, "import", str(FIXTURES_PATH / "archive.json"))
        output = tmp_path / "export.json"

        result = invoke(runner, store, "export", "-o", str(output))

        assert result.exit_code == 0
        assert "Exported 2 designs to" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert "exportDate" in data
        assert [d["name"] for d in data["designs"]] == ["Hallway", "Studio"]

    def test_export_one(self, runner: CliRunner, store: Path, tmp_path: Path) -> None:
        invoke(runner, store, "import", str(FIXTURES_PATH / "archive.json"))
        output = tmp_path / "studio.json"

        result = invoke(runner, store, "export", "-o", str(output), "--index", "1")

        assert "Exported 1 design to" in result.output
        assert json.loads(output.read_text(encoding="utf-8"))["name"] == "Studio"

    def test_corrupt_store(self, runner: CliRunner, store: Path) -> None:
        store.parent.mkdir(parents=True)
        store.write_text("{}")

        result = invoke(runner, store, "list")

        assert result.exit_code == 1
        assert "must contain a JSON array" in result.output
