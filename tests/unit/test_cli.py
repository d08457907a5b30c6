"""Unit tests for CLI module"""

import logging
from pathlib import Path

from typer.testing import CliRunner

from formwright.cli.main import app

EXAMPLE = Path(__file__).parents[2] / "examples" / "sandwich_order" / "formwright.yaml"

runner = CliRunner()


def test_cli_help():
    """Test CLI help lists the available commands"""
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "validate" in result.stdout
    assert "show" in result.stdout


def test_cli_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "formwright version" in result.stdout


def test_validate_example():
    """
    GIVEN the bundled example configuration
    WHEN validate is run
    THEN every form resolves and the command succeeds
    """
    result = runner.invoke(app, ["validate", str(EXAMPLE)])

    assert result.exit_code == 0
    assert "sandwich: 5 field(s)" in result.stdout
    assert "1 form(s) resolved" in result.stdout


def test_validate_reports_invalid_config(tmp_path):
    config_file = tmp_path / "formwright.yaml"
    config_file.write_text("forms:\n  f:\n    fields:\n      n:\n        numeric: [5, 3]\n")

    result = runner.invoke(app, ["validate", str(config_file)])

    assert result.exit_code == 1
    assert "Invalid config" in result.stdout


def test_show_field_template():
    result = runner.invoke(app, ["show", str(EXAMPLE), "sandwich", "bread"])

    assert result.exit_code == 0
    assert "What kind of {&} would you like? {||}" in result.stdout
    assert "choice_format" in result.stdout


def test_show_form_level_usage():
    result = runner.invoke(app, ["show", str(EXAMPLE), "sandwich", "--usage", "navigation"])

    assert result.exit_code == 0
    assert "What do you want to change? {||}" in result.stdout


def test_show_unknown_field():
    result = runner.invoke(app, ["show", str(EXAMPLE), "sandwich", "cheese"])

    assert result.exit_code == 1


def test_validate_applies_configured_log_level(tmp_path):
    """
    GIVEN a config whose settings ask for DEBUG logging
    WHEN validate is run
    THEN the formwright logger is configured at that level
    """
    config_file = tmp_path / "formwright.yaml"
    config_file.write_text(
        "settings:\n  log_level: DEBUG\nforms:\n  f:\n    fields:\n      size: {}\n"
    )

    result = runner.invoke(app, ["validate", str(config_file)])

    assert result.exit_code == 0
    logger = logging.getLogger("formwright")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_show_applies_configured_log_level():
    result = runner.invoke(app, ["show", str(EXAMPLE), "sandwich", "bread"])

    assert result.exit_code == 0
    assert logging.getLogger("formwright").level == logging.INFO
