"""Unit tests for the 'formview render' CLI command.

Tests cover:
- Rendering nested YAML and JSON message files
- --attr, --catalog, --text-domain and --no-translate options
- --config handling and exit codes for configuration errors
"""

import json

import pytest
from click.testing import CliRunner

from formview.cli.main import main


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def messages_file(temp_dir):
    path = temp_dir / "email.yaml"
    path.write_text(
        "notEmpty: Value is required\n"
        "custom:\n"
        "  - Bad value\n"
    )
    return path


@pytest.fixture
def catalog_file(temp_dir):
    path = temp_dir / "fr.yaml"
    path.write_text(
        "default:\n"
        "  Value is required: Valeur requise\n"
        "forms:\n"
        "  Value is required: Champ obligatoire\n"
    )
    return path


@pytest.mark.unit
class TestRenderCommand:
    """Tests for successful renders."""

    def test_renders_nested_yaml(self, cli_runner, messages_file) -> None:
        result = cli_runner.invoke(main, ["render", str(messages_file)])
        assert result.exit_code == 0
        assert result.output.strip() == (
            "<ul><li>Value is required</li><li>Bad value</li></ul>"
        )

    def test_renders_json(self, cli_runner, temp_dir) -> None:
        path = temp_dir / "errors.json"
        path.write_text(json.dumps(["Required"]))
        result = cli_runner.invoke(main, ["render", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "<ul><li>Required</li></ul>"

    def test_empty_messages_print_nothing(self, cli_runner, temp_dir) -> None:
        path = temp_dir / "none.yaml"
        path.write_text("{}\n")
        result = cli_runner.invoke(main, ["render", str(path)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_attr_option(self, cli_runner, messages_file) -> None:
        result = cli_runner.invoke(
            main,
            ["render", str(messages_file), "--attr", "class=errors", "--attr", "id=e"],
        )
        assert result.exit_code == 0
        assert result.output.startswith('<ul class="errors" id="e"><li>')

    def test_malformed_attr_is_usage_error(self, cli_runner, messages_file) -> None:
        result = cli_runner.invoke(main, ["render", str(messages_file), "--attr", "x"])
        assert result.exit_code == 2
        assert "key=value" in result.output

    def test_catalog_translates(self, cli_runner, messages_file, catalog_file) -> None:
        result = cli_runner.invoke(
            main, ["render", str(messages_file), "--catalog", str(catalog_file)]
        )
        assert result.exit_code == 0
        assert "<li>Valeur requise</li>" in result.output

    def test_text_domain_option(self, cli_runner, messages_file, catalog_file) -> None:
        result = cli_runner.invoke(
            main,
            [
                "render",
                str(messages_file),
                "--catalog",
                str(catalog_file),
                "--text-domain",
                "forms",
            ],
        )
        assert result.exit_code == 0
        assert "<li>Champ obligatoire</li>" in result.output

    def test_no_translate(self, cli_runner, messages_file, catalog_file) -> None:
        result = cli_runner.invoke(
            main,
            [
                "render",
                str(messages_file),
                "--catalog",
                str(catalog_file),
                "--no-translate",
            ],
        )
        assert result.exit_code == 0
        assert "<li>Value is required</li>" in result.output

    def test_config_file(self, cli_runner, messages_file, temp_dir) -> None:
        config = temp_dir / "formview.yaml"
        config.write_text(
            "form_element_errors:\n"
            "  open_format: '<div%s>'\n"
            "  separator_string: '<br>'\n"
            "  close_string: '</div>'\n"
        )
        result = cli_runner.invoke(
            main, ["render", str(messages_file), "--config", str(config)]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "<div>Value is required<br>Bad value</div>"

    def test_numeric_leaf_with_catalog(self, cli_runner, temp_dir, catalog_file) -> None:
        path = temp_dir / "http.yaml"
        path.write_text("code: 404\nreason: Value is required\n")
        result = cli_runner.invoke(
            main, ["render", str(path), "--catalog", str(catalog_file)]
        )
        assert result.exit_code == 0
        assert result.output.strip() == (
            "<ul><li>404</li><li>Valeur requise</li></ul>"
        )


@pytest.mark.unit
class TestRenderCommandErrors:
    """Tests for error exit codes."""

    def test_missing_messages_file(self, cli_runner, temp_dir) -> None:
        result = cli_runner.invoke(main, ["render", str(temp_dir / "missing.yaml")])
        assert result.exit_code == 2

    def test_invalid_config_exits_2(self, cli_runner, messages_file, temp_dir) -> None:
        config = temp_dir / "formview.yaml"
        config.write_text("form_element_errors:\n  open_format: '<ul>'\n")
        result = cli_runner.invoke(
            main, ["render", str(messages_file), "--config", str(config)]
        )
        assert result.exit_code == 2
        assert "open_format" in result.output

    def test_missing_catalog_exits_2(self, cli_runner, messages_file, temp_dir) -> None:
        result = cli_runner.invoke(
            main,
            ["render", str(messages_file), "--catalog", str(temp_dir / "nope.yaml")],
        )
        assert result.exit_code == 2
        assert "File not found" in result.output

    def test_version(self, cli_runner) -> None:
        result = cli_runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_stray_percent_in_config_exits_2(
        self, cli_runner, messages_file, temp_dir
    ) -> None:
        config = temp_dir / "formview.yaml"
        config.write_text(
            "form_element_errors:\n  open_format: '<div style=\"width:100%\"%s>'\n"
        )
        result = cli_runner.invoke(
            main, ["render", str(messages_file), "--config", str(config)]
        )
        assert result.exit_code == 2
        assert "open_format" in result.output

    def test_directory_config_exits_2(self, cli_runner, messages_file, temp_dir) -> None:
        result = cli_runner.invoke(
            main, ["render", str(messages_file), "--config", str(temp_dir)]
        )
        assert result.exit_code == 2
        assert "Cannot read" in result.output

    def test_directory_catalog_exits_2(self, cli_runner, messages_file, temp_dir) -> None:
        result = cli_runner.invoke(
            main, ["render", str(messages_file), "--catalog", str(temp_dir)]
        )
        assert result.exit_code == 2
        assert "Cannot read" in result.output

    def test_invalid_utf8_messages_exits_2(self, cli_runner, temp_dir) -> None:
        path = temp_dir / "latin1.yaml"
        path.write_bytes(b"notEmpty: Valeur \xe9\n")
        result = cli_runner.invoke(main, ["render", str(path)])
        assert result.exit_code == 2
        assert "Cannot read" in result.output

    def test_unrecognized_env_boolean_exits_2(self, cli_runner, messages_file) -> None:
        result = cli_runner.invoke(
            main,
            ["render", str(messages_file)],
            env={"FORMVIEW_TRANSLATE_MESSAGES": "maybe"},
        )
        assert result.exit_code == 2
        assert "FORMVIEW_TRANSLATE_MESSAGES" in result.output
