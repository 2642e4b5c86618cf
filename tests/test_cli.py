from contextlib import contextmanager

from rich.style import Style
from typer.testing import CliRunner

from contrast_tools.cli import _format_swatch, app
from contrast_tools.config import Config
from contrast_tools.hexcolors import relative_luminance_hex
from contrast_tools.runtime import Services

runner = CliRunner()


@contextmanager
def fake_application_services(**_kwargs):
    yield Services(
        config=Config(),
        background="#0e0c13",
        background_luminance=relative_luminance_hex("#0e0c13"),
        contrast=7.0,
    )


def test_correct_plain_prints_corrected_colors(monkeypatch):
    monkeypatch.setattr("contrast_tools.cli.application_services", fake_application_services)

    result = runner.invoke(app, ["correct", "--plain", "#000", "#003", "#030", "#300"])

    assert result.exit_code == 0
    assert result.output.split() == ["#9a9a9a", "#9494dd", "#37b237", "#d88383"]


def test_correct_table_lists_each_color(monkeypatch):
    monkeypatch.setattr("contrast_tools.cli.application_services", fake_application_services)

    result = runner.invoke(app, ["correct", "#003", "#ffffff"])

    assert result.exit_code == 0
    assert "#9494dd" in result.output
    assert "unchanged" in result.output


def test_correct_rejects_invalid_color(monkeypatch):
    monkeypatch.setattr("contrast_tools.cli.application_services", fake_application_services)

    result = runner.invoke(app, ["correct", "#12"])

    assert result.exit_code != 0


def test_contrast_command_shows_levels(monkeypatch):
    monkeypatch.setattr("contrast_tools.cli.application_services", fake_application_services)

    result = runner.invoke(app, ["contrast", "#000", "--background", "#fff"])

    assert result.exit_code == 0
    assert "21.00:1" in result.output
    assert "AAA-Large" in result.output


def test_luminance_command_prints_value(monkeypatch):
    monkeypatch.setattr("contrast_tools.cli.application_services", fake_application_services)

    result = runner.invoke(app, ["luminance", "#fff"])

    assert result.exit_code == 0
    assert "1.00000" in result.output


def test_format_swatch_picks_readable_text_color():
    light = _format_swatch("#ABC")
    assert light.plain == " #ABC "
    assert light.style == Style(color="black", bgcolor="#aabbcc", bold=True)

    dark = _format_swatch("#0e0c13")
    assert dark.style == Style(color="white", bgcolor="#0e0c13", bold=True)


def test_format_swatch_invalid_color_falls_back_to_default():
    text = _format_swatch("invalid")
    assert text.plain == " invalid "
    assert text.style == Style(color="white", bgcolor="grey27", bold=True)


def test_correct_rejects_unreachable_contrast(monkeypatch):
    monkeypatch.setattr("contrast_tools.cli.application_services", fake_application_services)

    result = runner.invoke(app, ["correct", "--contrast", "20", "#003"])

    assert result.exit_code != 0
