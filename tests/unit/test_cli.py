"""Tests for the roomplacer CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from roomplacer.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_room(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(room_file)])
        assert result.exit_code == 0
        assert "Validation passed: 8 furniture entities, 0 catalog entries." in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_unknown_kind(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "room.json"
        path.write_text(
            json.dumps(
                {"schema_version": "1.0", "furniture": [{"id": "s-1", "kind": "spaceship"}]}
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Unknown furniture kind 'spaceship'" in result.output

    def test_verbose_flag(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["--verbose", "validate", str(room_file)])
        assert result.exit_code == 0


class TestRandomizeCommand:
    """Tests for the randomize command."""

    def test_text_output(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["randomize", str(room_file)])
        assert result.exit_code == 0
        assert "ROOM LAYOUT" in result.output
        assert "/8" in result.output

    def test_json_output(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["randomize", str(room_file), "--format", "json"])
        assert result.exit_code == 0
        assert '"entities"' in result.output
        assert '"cat-1"' not in result.output

    def test_unknown_format(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["randomize", str(room_file), "-f", "yaml"])
        assert result.exit_code == 1
        assert "Unknown format: yaml" in result.output

    def test_output_file(self, runner: CliRunner, room_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "layout.json"
        result = runner.invoke(
            app, ["randomize", str(room_file), "-f", "json", "-o", str(output)]
        )
        assert result.exit_code == 0
        assert "Layout written to" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["total"] == 8
        assert len(data["entities"]) == 8

    def test_seed_makes_layout_repeat(self, runner: CliRunner, room_file: Path) -> None:
        first = runner.invoke(app, ["randomize", str(room_file), "--seed", "3", "-f", "json"])
        second = runner.invoke(app, ["randomize", str(room_file), "--seed", "3", "-f", "json"])
        assert first.output == second.output

    def test_missing_room_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["randomize", str(tmp_path / "missing.json")])
        assert result.exit_code == 1


class TestCheckCommand:
    """Tests for the check command."""

    def test_valid_position(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["check", str(room_file), "door", "--x", "500", "--z", "0"])
        assert result.exit_code == 0
        assert "OK: door at x=500.0, y=0.0, z=0.0" in result.output

    def test_rejected_position(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["check", str(room_file), "door", "--x", "500", "--z", "10"])
        assert result.exit_code == 1
        assert "REJECTED: door: Wall-mounted items must be on the wall" in result.output

    def test_unknown_kind(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(
            app, ["check", str(room_file), "spaceship", "--x", "500", "--z", "400"]
        )
        assert result.exit_code == 1
        assert "Unknown furniture type: spaceship" in result.output

    def test_collision_with_positioned_entity(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "room.json"
        path.write_text(
            json.dumps(
                {
                    "schema_version": "1.0",
                    "furniture": [
                        {"id": "couch-1", "kind": "couch", "position": {"x": 700, "z": 600}}
                    ],
                }
            ),
            encoding="utf-8",
        )
        args = ["check", str(path), "couch", "--x", "720", "--z", "600"]
        rejected = runner.invoke(app, args)
        assert rejected.exit_code == 1
        assert "Shadow would overlap with existing couch" in rejected.output

        moved = runner.invoke(app, [*args, "--exclude", "couch-1"])
        assert moved.exit_code == 0


class TestFindCommand:
    """Tests for the find command."""

    def test_finds_position(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["find", str(room_file), "lamp", "--seed", "5"])
        assert result.exit_code == 0
        assert result.output.startswith("OK: lamp at")

    def test_unknown_kind(self, runner: CliRunner, room_file: Path) -> None:
        result = runner.invoke(app, ["find", str(room_file), "spaceship"])
        assert result.exit_code == 1
        assert "Unknown furniture type: spaceship" in result.output


class TestHeightsCommand:
    """Tests for the heights command."""

    def test_painting_heights(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["heights", "painting-cat-large", "--seed", "1"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Y candidates for painting-cat-large (in try order):"
        assert lines[1] == "  1. 500"

    def test_fixed_height_kind(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["heights", "window"])
        assert result.exit_code == 0
        assert "  1. 150" in result.output

    def test_unknown_kind(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["heights", "spaceship"])
        assert result.exit_code == 1
        assert "Unknown furniture type: spaceship" in result.output
