"""Tests for svgicons CLI."""

import yaml
import pytest
from typer.testing import CliRunner

from svgicons.cli import app

runner = CliRunner()


@pytest.fixture
def config_path(temp_dir, ui_dir, brand_dir):
    """Write an icons.yaml with a path set and a disk set."""
    path = temp_dir / "icons.yaml"
    path.write_text(yaml.dump({
        "default_class": "icon",
        "disks": {"brand": {"path": str(brand_dir)}},
        "sets": {
            "ui": {"path": str(ui_dir), "prefix": "ui", "class": "ui-icon"},
            "brand": {"disk": "brand", "prefix": "brand"},
        },
    }))
    return path


class TestShowCommand:
    """Tests for the show command."""

    def test_show(self, config_path):
        result = runner.invoke(app, ["show", "ui-arrow", "--config", str(config_path)])
        assert result.exit_code == 0
        assert '<svg class="icon ui-icon">A</svg>' in result.stdout

    def test_show_with_class_and_attr(self, config_path):
        result = runner.invoke(
            app,
            ["show", "ui-arrow", "--class", "extra", "-a", "id=x", "-c", str(config_path)],
        )
        assert result.exit_code == 0
        assert '<svg id="x" class="icon ui-icon extra">A</svg>' in result.stdout

    def test_show_missing(self, config_path):
        result = runner.invoke(app, ["show", "ui-missing", "-c", str(config_path)])
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_show_bad_attr(self, config_path):
        result = runner.invoke(app, ["show", "ui-arrow", "-a", "novalue", "-c", str(config_path)])
        assert result.exit_code == 1
        assert "Invalid attribute" in result.stdout


class TestSetsCommand:
    """Tests for the sets command."""

    def test_sets(self, config_path):
        result = runner.invoke(app, ["sets", "-c", str(config_path)])
        assert result.exit_code == 0
        assert "ui-icon" in result.stdout
        assert "disk:brand" in result.stdout

    def test_no_sets(self, temp_dir):
        result = runner.invoke(app, ["sets", "-c", str(temp_dir / "fresh.yaml")])
        assert result.exit_code == 0
        assert "No icon sets" in result.stdout

    def test_invalid_config(self, temp_dir):
        path = temp_dir / "icons.yaml"
        path.write_text(yaml.dump({"sets": {"ui": {"prefix": "ui"}}}))
        result = runner.invoke(app, ["sets", "-c", str(path)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout


class TestListCommand:
    """Tests for the list command."""

    def test_list_all(self, config_path):
        result = runner.invoke(app, ["list", "-c", str(config_path)])
        assert result.exit_code == 0
        for tag in ["ui-arrow", "ui-arrows.left", "brand-logo", "brand-social.github"]:
            assert tag in result.stdout
        assert "4 icon(s)" in result.stdout

    def test_list_one_set(self, config_path):
        result = runner.invoke(app, ["list", "brand", "-c", str(config_path)])
        assert result.exit_code == 0
        assert "brand-logo" in result.stdout
        assert "ui-arrow" not in result.stdout

    def test_list_unknown_set(self, config_path):
        result = runner.invoke(app, ["list", "nope", "-c", str(config_path)])
        assert result.exit_code == 1
        assert "Unknown icon set" in result.stdout


class TestInitCommand:
    """Tests for the init command."""

    def test_init(self, temp_dir):
        path = temp_dir / "icons.yaml"
        result = runner.invoke(app, ["init", "-c", str(path)])
        assert result.exit_code == 0
        assert "sets:" in path.read_text()

    def test_init_existing(self, temp_dir):
        path = temp_dir / "icons.yaml"
        path.write_text("sets: {}\n")
        result = runner.invoke(app, ["init", "-c", str(path)])
        assert result.exit_code == 1
        assert path.read_text() == "sets: {}\n"

    def test_init_force(self, temp_dir):
        path = temp_dir / "icons.yaml"
        path.write_text("sets: {}\n")
        result = runner.invoke(app, ["init", "--force", "-c", str(path)])
        assert result.exit_code == 0
        assert "default_class" in path.read_text()
