"""Tests for the tagdecorator command-line interface."""

from typer.testing import CliRunner

from tagdecorator import __version__
from tagdecorator.cli import app

runner = CliRunner()


class TestCheckConfig:
    """Tests for the check-config command."""

    def test_valid_yaml(self, fixtures_dir) -> None:
        result = runner.invoke(app, ["check-config", str(fixtures_dir / "decorator.yaml")])
        assert result.exit_code == 0
        assert "Configuration OK" in result.output
        assert "commandButton" in result.output

    def test_valid_xml(self, fixtures_dir) -> None:
        result = runner.invoke(app, ["check-config", str(fixtures_dir / "decorator.xml")])
        assert result.exit_code == 0

    def test_dangling_letter_fails(self, fixtures_dir) -> None:
        result = runner.invoke(app, ["check-config", str(fixtures_dir / "dangling.yaml")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_malformed_file_fails(self, fixtures_dir) -> None:
        result = runner.invoke(app, ["check-config", str(fixtures_dir / "malformed.yaml")])
        assert result.exit_code == 1


class TestDecorate:
    """Tests for the decorate command."""

    def test_mapping_applied(self, fixtures_dir) -> None:
        result = runner.invoke(
            app,
            [
                "decorate",
                '<custom:button xmlns:custom="urn:custom" value="Save"/>',
                "--config",
                str(fixtures_dir / "decorator.yaml"),
            ],
        )
        assert result.exit_code == 0
        assert "<h:commandButton>" in result.output
        assert "http://example.org/html" in result.output

    def test_default_configuration(self) -> None:
        result = runner.invoke(app, ["decorate", "<div/>"])
        assert result.exit_code == 0
        assert "xmlns:h" in result.output

    def test_invalid_tag(self) -> None:
        result = runner.invoke(app, ["decorate", "<div>"])
        assert result.exit_code == 1
        assert "Invalid tag" in result.output

    def test_configuration_error(self, fixtures_dir) -> None:
        result = runner.invoke(
            app,
            [
                "decorate",
                '<custom:button xmlns:custom="urn:custom"/>',
                "--config",
                str(fixtures_dir / "dangling.yaml"),
            ],
        )
        assert result.exit_code == 1
        assert "Configuration error" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output
