"""Smoke tests for CLI commands.

Uses Click's CliRunner; every test points --config at a temporary file so
the user's real settings are never touched.
"""

import logging

import pytest
from click.testing import CliRunner

from colorconverter.cli import main as cli_main
from colorconverter.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the handlers setup_logging installs on the root logger."""
    yield
    root_logger = logging.getLogger()
    while cli_main._installed_handlers:
        handler = cli_main._installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def invoke(runner, config_file):
    """Invoke the CLI with a temporary settings file."""
    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ["--config", str(config_file), *args], **kwargs)
    return _invoke


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Color Converter" in result.output
        assert "--verbose" in result.output
        assert "--log-file" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize(
        "command", ["convert", "validate", "palette", "contrast", "formats", "config"]
    )
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestConvertCommand:
    """Test the convert command."""

    def test_to_rgb(self, invoke):
        result = invoke("convert", "#FF5733", "--to", "rgb")
        assert result.exit_code == 0
        assert result.output.strip() == "rgb(255,87,51)"

    def test_target_case_insensitive(self, invoke):
        result = invoke("convert", "#FF5733", "-t", "HSL")
        assert result.exit_code == 0
        assert result.output.strip() == "hsl(11,100%,60%)"

    def test_default_target_is_hex(self, invoke):
        result = invoke("convert", "rgb(255,87,51)")
        assert result.exit_code == 0
        assert result.output.strip() == "#FF5733"

    def test_invalid_color(self, invoke):
        result = invoke("convert", "#GG5733", "--to", "rgb")
        assert result.exit_code == 1
        assert "Invalid color" in result.output

    def test_invalid_target(self, invoke):
        result = invoke("convert", "#FF5733", "--to", "cmyk")
        assert result.exit_code != 0

    def test_corrupt_settings_file(self, invoke, config_file):
        config_file.write_text("{broken")
        result = invoke("convert", "#FF5733", "--to", "rgb")
        assert result.exit_code == 1
        assert "invalid syntax" in result.output


@pytest.mark.integration
class TestValidateCommand:
    """Test the validate command."""

    def test_all_valid(self, invoke):
        result = invoke("validate", "#F57", "rgb(255,87,51)", "hsl(11,100%,60%)")
        assert result.exit_code == 0
        assert "[OK] #F57 (hex)" in result.output
        assert "[OK] rgb(255,87,51) (rgb)" in result.output
        assert "[OK] hsl(11,100%,60%) (hsl)" in result.output

    def test_some_invalid(self, invoke):
        result = invoke("validate", "#F57", "rgb(256,0,0)")
        assert result.exit_code == 1
        assert "[OK] #F57 (hex)" in result.output
        assert "[FAIL] rgb(256,0,0)" in result.output

    def test_requires_argument(self, invoke):
        result = invoke("validate")
        assert result.exit_code != 0


@pytest.mark.integration
class TestPaletteCommand:
    """Test the palette command."""

    def test_default_complementary(self, invoke):
        result = invoke("palette", "#FF0000")
        assert result.exit_code == 0
        assert result.output.split() == ["#FF0000", "#00FFFF"]

    def test_triadic(self, invoke):
        result = invoke("palette", "#FF0000", "--type", "triadic")
        assert result.exit_code == 0
        assert result.output.split() == ["#FF0000", "#00FF00", "#0000FF"]

    def test_monochromatic_count(self, invoke):
        result = invoke("palette", "#808080", "-T", "monochromatic", "-n", "3")
        assert result.exit_code == 0
        assert result.output.split() == ["#333333", "#808080", "#CCCCCC"]

    def test_monochromatic_default_count(self, invoke):
        result = invoke("palette", "#3498DB", "--type", "monochromatic")
        assert result.exit_code == 0
        assert len(result.output.split()) == 5

    def test_invalid_color(self, invoke):
        result = invoke("palette", "nope", "--count", "0")
        assert result.exit_code == 1
        assert "Invalid color" in result.output

    def test_negative_count_rejected(self, invoke):
        result = invoke("palette", "#808080", "--type", "monochromatic", "--count", "-1")
        assert result.exit_code != 0


@pytest.mark.integration
class TestContrastCommand:
    """Test the contrast command."""

    def test_black_on_white(self, invoke):
        result = invoke("contrast", "#000000", "#FFFFFF")
        assert result.exit_code == 0
        assert "Contrast ratio: 21.00:1" in result.output
        assert "WCAG level: AAA" in result.output

    def test_large_text_only(self, invoke):
        result = invoke("contrast", "#777777", "#FFFFFF")
        assert result.exit_code == 0
        assert "Contrast ratio: 4.48:1" in result.output
        assert "WCAG level: AA Large" in result.output

    def test_invalid_background(self, invoke):
        result = invoke("contrast", "#000000", "white")
        assert result.exit_code == 1
        assert "Invalid color: 'white'" in result.output


@pytest.mark.integration
class TestFormatsCommand:
    """Test the formats command."""

    def test_lists_formats(self, invoke):
        result = invoke("formats")
        assert result.exit_code == 0
        for text in ("hex", "rgb", "hsl", "#FF5733", "rgb(255,87,51)", "hsl(11,100%,60%)"):
            assert text in result.output


@pytest.mark.integration
class TestConfigCommand:
    """Test the config commands and that settings reach other commands."""

    def test_show_defaults(self, invoke):
        result = invoke("config", "show")
        assert result.exit_code == 0
        assert "default_format: hex" in result.output
        assert "contrast_precision: 2" in result.output

    def test_path_not_created(self, invoke, config_file):
        result = invoke("config", "path")
        assert result.exit_code == 0
        assert str(config_file) in result.output
        assert "not created yet" in result.output

    def test_set_default_format(self, invoke, config_file):
        result = invoke("config", "set", "default-format", "rgb")
        assert result.exit_code == 0
        assert "[OK] default_format = rgb" in result.output
        assert config_file.exists()

        result = invoke("convert", "#FF5733")
        assert result.output.strip() == "rgb(255,87,51)"

    def test_lowercase_hex(self, invoke):
        assert invoke("config", "set", "uppercase_hex", "false").exit_code == 0

        result = invoke("convert", "rgb(255,87,51)", "--to", "hex")
        assert result.output.strip() == "#ff5733"

        result = invoke("palette", "#FF0000")
        assert result.output.split() == ["#ff0000", "#00ffff"]

    def test_contrast_precision(self, invoke):
        assert invoke("config", "set", "contrast-precision", "0").exit_code == 0
        result = invoke("contrast", "#000000", "#FFFFFF")
        assert "Contrast ratio: 21:1" in result.output

    def test_monochromatic_count(self, invoke):
        assert invoke("config", "set", "monochromatic-count", "2").exit_code == 0
        result = invoke("palette", "#3498DB", "--type", "monochromatic")
        assert len(result.output.split()) == 2

    def test_set_unknown_key(self, invoke, config_file):
        result = invoke("config", "set", "colour", "red")
        assert result.exit_code == 1
        assert "Invalid configuration value for 'colour'" in result.output
        assert not config_file.exists()

    def test_set_invalid_value(self, invoke, config_file):
        result = invoke("config", "set", "contrast-precision", "99")
        assert result.exit_code == 1
        assert "contrast_precision" in result.output
        assert not config_file.exists()

    def test_reset(self, invoke):
        invoke("config", "set", "default-format", "hsl")
        result = invoke("config", "reset", "--yes")
        assert result.exit_code == 0
        assert "[OK] Settings reset to defaults" in result.output
        assert invoke("convert", "rgb(255,0,0)").output.strip() == "#FF0000"

    def test_reset_aborted(self, invoke, config_file):
        result = invoke("config", "reset", input="n\n")
        assert result.exit_code == 0
        assert "Aborted" in result.output
        assert not config_file.exists()


@pytest.mark.integration
class TestLogging:
    """Test the global logging options."""

    def test_log_file(self, invoke, temp_dir):
        log_file = temp_dir / "logs" / "colorconverter.log"
        result = invoke("--log-file", str(log_file), "convert", "#FF5733", "--to", "rgb")
        assert result.exit_code == 0
        assert log_file.exists()

    def test_verbose(self, invoke):
        result = invoke("-vv", "convert", "#FF5733", "--to", "rgb")
        assert result.exit_code == 0
        assert "rgb(255,87,51)" in result.output
