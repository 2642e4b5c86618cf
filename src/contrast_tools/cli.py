"""Command line interface for contrast tools."""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

import typer
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .commands import (
    CommandError,
    ContrastParams,
    CorrectParams,
    LuminanceParams,
    compare_colors,
    correct_color,
    measure_luminance,
)
from .hexcolors import InvalidFormatError, rgb_to_string_hex, string_hex_to_rgb
from .luminance import calculate_contrast, relative_luminance
from .runtime import ConfigurationError, application_services

app = typer.Typer(add_completion=True)
console = Console()

T = TypeVar("T")


def _invoke(callback: Callable[[object], T]) -> T:
    try:
        with application_services(console=console) as services:
            return callback(services)
    except ConfigurationError as exc:  # pragma: no cover - exercised via CLI usage
        raise typer.BadParameter(str(exc)) from exc
    except CommandError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def correct(
    colors: List[str] = typer.Argument(..., help="Hex colors to correct, e.g. '#003'"),
    background: Optional[str] = typer.Option(
        None, "--background", "-b", help="Background hex color (defaults to config)"
    ),
    contrast: Optional[float] = typer.Option(
        None, "--contrast", "-c", min=1.0, help="Desired WCAG contrast ratio"
    ),
    plain: bool = typer.Option(False, "--plain", help="Print only the corrected colors"),
) -> None:
    """Adjust colors until they reach the desired contrast on the background."""

    results = _invoke(
        lambda services: [
            correct_color(
                services, CorrectParams(color=color, background=background, contrast=contrast)
            )
            for color in colors
        ]
    )
    if plain:
        for result in results:
            console.print(result.corrected, highlight=False)
        return

    table = Table(title=f"Background {results[0].background}", show_lines=False)
    table.add_column("Input")
    table.add_column("Corrected")
    table.add_column("Contrast")
    table.add_column("Target")
    for result in results:
        table.add_row(
            _format_swatch(result.color),
            _format_swatch(result.corrected),
            f"{result.contrast:.2f}",
            f"{result.desired_contrast:g}" + ("" if result.changed else " (unchanged)"),
        )
    console.print(table)


@app.command()
def luminance(
    color: str = typer.Argument(..., help="Hex color to measure"),
) -> None:
    """Print the WCAG relative luminance of a color."""

    result = _invoke(lambda services: measure_luminance(services, LuminanceParams(color=color)))
    text = _format_swatch(result.normalized)
    text.append(f" {result.luminance:.5f}")
    console.print(text)


@app.command()
def contrast(
    foreground: str = typer.Argument(..., help="Foreground hex color"),
    background: Optional[str] = typer.Option(
        None, "--background", "-b", help="Background hex color (defaults to config)"
    ),
) -> None:
    """Show the contrast ratio between two colors and the WCAG levels it meets."""

    result = _invoke(
        lambda services: compare_colors(
            services, ContrastParams(foreground=foreground, background=background)
        )
    )
    console.print(
        Text.assemble(
            _format_swatch(result.foreground),
            " on ",
            _format_swatch(result.background),
            f" {result.ratio:.2f}:1",
        )
    )
    table = Table(show_lines=False)
    table.add_column("Level")
    table.add_column("Result")
    for level, passed in result.levels.items():
        table.add_row(level, "[green]pass[/green]" if passed else "[red]fail[/red]")
    console.print(table)


def _format_swatch(color: str) -> Text:
    try:
        rgb = string_hex_to_rgb(color.strip())
    except InvalidFormatError:
        return Text(f" {color} ", style=Style(color="white", bgcolor="grey27", bold=True))
    luminance = relative_luminance(rgb)
    if calculate_contrast(luminance, 0.0) >= calculate_contrast(luminance, 1.0):
        text_color = "black"
    else:
        text_color = "white"
    style = Style(color=text_color, bgcolor=rgb_to_string_hex(rgb), bold=True)
    return Text(f" {color} ", style=style)


if __name__ == "__main__":
    app()
