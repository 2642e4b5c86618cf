"""FastMCP server exposing contrast-tools commands for agents."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, Callable, TypeVar

from fastmcp import FastMCP

from .commands import (
    CommandError,
    ContrastParams,
    CorrectParams,
    LuminanceParams,
    compare_colors,
    correct_color,
    measure_luminance,
)
from .runtime import ConfigurationError, application_services

server = FastMCP("contrast-tools")

T = TypeVar("T")


def _to_serializable(value: Any) -> Any:
    if is_dataclass(value):
        return {key: _to_serializable(val) for key, val in asdict(value).items()}
    if isinstance(value, list):
        return [_to_serializable(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_serializable(val) for key, val in value.items()}
    return value


def _with_services(func: Callable[[Any], T]) -> T:
    try:
        with application_services(console=None) as services:
            return func(services)
    except ConfigurationError as exc:
        raise RuntimeError(str(exc)) from exc
    except CommandError as exc:
        raise ValueError(str(exc)) from exc


@server.tool("correct")
def correct_tool(
    color: str,
    background: str | None = None,
    contrast: float | None = None,
) -> Any:
    result = _with_services(
        lambda services: correct_color(
            services,
            CorrectParams(color=color, background=background, contrast=contrast),
        )
    )
    return _to_serializable(result)


@server.tool("luminance")
def luminance_tool(color: str) -> Any:
    result = _with_services(
        lambda services: measure_luminance(services, LuminanceParams(color=color))
    )
    return _to_serializable(result)


@server.tool("contrast")
def contrast_tool(foreground: str, background: str | None = None) -> Any:
    result = _with_services(
        lambda services: compare_colors(
            services, ContrastParams(foreground=foreground, background=background)
        )
    )
    return _to_serializable(result)


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    server.run()
