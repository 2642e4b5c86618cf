"""Shared command implementations used by the CLI, API, and MCP layers."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Dict, Optional

from .colors import RGBColor
from .correction import correct_contrast, target_luminance
from .hexcolors import InvalidFormatError, rgb_to_string_hex, string_hex_to_rgb
from .luminance import calculate_contrast, relative_luminance, wcag_levels
from .runtime import Services


# Rounding slack when checking that a target luminance lies in [0, 1].
_LUMINANCE_TOLERANCE = 1e-9


class CommandError(RuntimeError):
    """Raised when command parameters are invalid."""


@dataclass(slots=True)
class CorrectParams:
    color: str
    background: Optional[str] = None
    contrast: Optional[float] = None


@dataclass(slots=True)
class CorrectResponse:
    color: str
    corrected: str
    changed: bool
    background: str
    desired_contrast: float
    target_luminance: float
    luminance: float
    contrast: float


@dataclass(slots=True)
class LuminanceParams:
    color: str


@dataclass(slots=True)
class LuminanceResponse:
    color: str
    normalized: str
    luminance: float


@dataclass(slots=True)
class ContrastParams:
    foreground: str
    background: Optional[str] = None


@dataclass(slots=True)
class ContrastResponse:
    foreground: str
    background: str
    ratio: float
    levels: Dict[str, bool]


def _parse(color: str, *, role: str) -> RGBColor:
    try:
        return string_hex_to_rgb(color.strip())
    except InvalidFormatError as exc:
        raise CommandError(f"Invalid {role} color {color!r}: expected #rgb or #rrggbb.") from exc


def _resolve_background(services: Services, background: Optional[str]) -> tuple[str, float]:
    if not background:
        return services.background, services.background_luminance
    return background, relative_luminance(_parse(background, role="background"))


def correct_color(services: Services, params: CorrectParams) -> CorrectResponse:
    """Correct a single color against the configured or requested background."""

    desired = services.contrast if params.contrast is None else float(params.contrast)
    if not math.isfinite(desired) or desired < 1:
        raise CommandError("Contrast ratio must be a finite number of at least 1.")

    background, background_luminance = _resolve_background(services, params.background)
    target = target_luminance(background_luminance, desired)
    if not -_LUMINANCE_TOLERANCE <= target <= 1 + _LUMINANCE_TOLERANCE:
        raise CommandError(
            f"Contrast ratio {desired:g} is not reachable on background {background}."
        )

    rgb = _parse(params.color, role="input")
    corrected = correct_contrast(
        rgb,
        background_luminance,
        desired,
        max_steps=services.config.correction.max_steps,
        damping_exponent=services.config.correction.damping_exponent,
    )
    luminance = relative_luminance(corrected)
    return CorrectResponse(
        color=params.color,
        corrected=rgb_to_string_hex(corrected),
        changed=corrected is not rgb,
        background=background,
        desired_contrast=desired,
        target_luminance=target,
        luminance=luminance,
        contrast=calculate_contrast(luminance, background_luminance),
    )


def measure_luminance(services: Services, params: LuminanceParams) -> LuminanceResponse:
    rgb = _parse(params.color, role="input")
    return LuminanceResponse(
        color=params.color,
        normalized=rgb_to_string_hex(rgb),
        luminance=relative_luminance(rgb),
    )


def compare_colors(services: Services, params: ContrastParams) -> ContrastResponse:
    """Report the contrast ratio of a foreground color and the WCAG levels it meets."""

    background, background_luminance = _resolve_background(services, params.background)
    foreground = _parse(params.foreground, role="foreground")
    ratio = calculate_contrast(relative_luminance(foreground), background_luminance)
    return ContrastResponse(
        foreground=params.foreground,
        background=background,
        ratio=ratio,
        levels=wcag_levels(ratio),
    )
