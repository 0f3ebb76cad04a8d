"""Unit tests for validate command."""

from pathlib import Path

from listhub.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestValidateCommand:
    """Tests for listhub validate command."""

    def test_valid_definition(self, list_dir: Path) -> None:
        """A valid definition is reported with its source count."""
        result = runner.invoke(app, ["validate", "--list", str(list_dir / "listhub.toml")])

        assert result.exit_code == 0
        assert "List 'awesome' is valid: 2 source(s)" in result.stdout

    def test_show_sources(self, list_dir: Path) -> None:
        """--sources lists every source."""
        result = runner.invoke(
            app, ["validate", "--list", str(list_dir / "listhub.toml"), "--sources"]
        )

        assert result.exit_code == 0
        assert "README.md" in result.stdout
        assert "more.toml" in result.stdout

    def test_default_path(self, list_dir: Path, monkeypatch) -> None:
        """Without --list the working directory's listhub.toml is used."""
        monkeypatch.chdir(list_dir)

        result = runner.invoke(app, ["validate"])

        assert result.exit_code == 0

    def test_missing_definition(self, tmp_path: Path) -> None:
        """A missing definition fails."""
        result = runner.invoke(app, ["validate", "--list", str(tmp_path / "nope.toml")])

        assert result.exit_code == 1

    def test_invalid_definition(self, tmp_path: Path) -> None:
        """Unknown keys fail validation."""
        path = tmp_path / "list.json"
        path.write_text('{"id": "x", "sources": [{"type": "inline"}], "extra": true}')

        result = runner.invoke(app, ["validate", "--list", str(path)])

        assert result.exit_code == 1
