"""Runtime helpers for constructing shared application services."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional
import logging
import math

from rich.console import Console

from .config import Config, load_config
from .hexcolors import InvalidFormatError, relative_luminance_hex
from .luminance import WCAG_AA_NORMAL

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing or unusable."""


@dataclass(slots=True)
class Services:
    """Resolved settings shared across entry points."""

    config: Config
    background: str
    background_luminance: float
    contrast: float


def _resolve_contrast(config: Config) -> float:
    try:
        contrast = config.get_contrast()
    except ValueError as exc:
        raise ConfigurationError(
            f"Contrast ratio must be a number. Check {config.contrast_env}."
        ) from exc
    if not math.isfinite(contrast) or contrast < 1:
        raise ConfigurationError(
            f"Contrast ratio must be a finite number of at least 1, got {contrast}."
        )
    return contrast


@contextmanager
def application_services(*, console: Optional[Console] = None) -> Iterator[Services]:
    """Yield initialized services for a single command execution."""

    try:
        config = load_config()
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    background = config.get_background()
    try:
        background_luminance = relative_luminance_hex(background)
    except InvalidFormatError as exc:
        raise ConfigurationError(
            f"Background color {background!r} is not a hex color. "
            f"Set the environment variable {config.background_env} or fix config.toml."
        ) from exc

    contrast = _resolve_contrast(config)
    if contrast < WCAG_AA_NORMAL:
        message = (
            f"Contrast ratio {contrast:g} is below the WCAG AA minimum of {WCAG_AA_NORMAL:g} for text."
        )
        if console is not None:
            console.print(f"[yellow]Warning: {message}[/yellow]")
        else:
            logger.warning(message)

    yield Services(
        config=config,
        background=background,
        background_luminance=background_luminance,
        contrast=contrast,
    )
