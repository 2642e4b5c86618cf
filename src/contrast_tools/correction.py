"""Lightness search that nudges a color to a target WCAG contrast ratio."""

from __future__ import annotations

import logging
import sys

from .colors import HSLColor, RGBColor, hsl_to_rgb, rgb_to_hsl
from .luminance import LUMINANCE_OFFSET, calculate_contrast, relative_luminance

logger = logging.getLogger(__name__)

# Steps taken by the lightness binary search; 9 steps resolve to 1/512.
MAX_SEARCH_STEPS = 9

# Steepness of the saturation falloff applied near black and white.
SATURATION_DAMPING_EXPONENT = 7


def target_luminance(background_luminance: float, desired_contrast: float) -> float:
    """Solve the contrast formula for the luminance a new color must have.

    Bright backgrounds (``>= 0.5``) ask for a darker color, everything else
    for a brighter one.
    """

    if background_luminance >= 0.5:
        return (background_luminance + LUMINANCE_OFFSET) / desired_contrast - LUMINANCE_OFFSET
    return desired_contrast * (background_luminance + LUMINANCE_OFFSET) - LUMINANCE_OFFSET


def correct_contrast(
    rgb: RGBColor,
    background_luminance: float,
    desired_contrast: float,
    *,
    max_steps: int = MAX_SEARCH_STEPS,
    damping_exponent: int = SATURATION_DAMPING_EXPONENT,
) -> RGBColor:
    """Return a color resembling ``rgb`` with at least ``desired_contrast``.

    Colors that already reach the requested contrast are returned as-is. For
    the rest hue is kept, saturation is damped towards the lightness extremes
    and lightness is binary searched until the luminance matches the target or
    ``max_steps`` is exhausted. The last lightness visited is used either way.
    """

    if calculate_contrast(relative_luminance(rgb), background_luminance) >= desired_contrast:
        return rgb

    hsl = rgb_to_hsl(rgb)

    # HSL reports near-black colors as highly saturated; pull saturation down
    # as lightness approaches either end.
    base = -hsl.l if hsl.l > 0.5 else hsl.l - 1
    saturation = hsl.s * (base ** damping_exponent + 1)

    target = target_luminance(background_luminance, desired_contrast)

    lightness = 0.5
    step = 0.5
    for _ in range(max_steps):
        current = relative_luminance(hsl_to_rgb(HSLColor(hsl.h, saturation, lightness)))
        if abs(target - current) < sys.float_info.epsilon:
            break
        lightness = lightness - step if current > target else lightness + step
        step /= 2

    logger.debug(
        "Corrected %s towards luminance %.5f (lightness %.5f, saturation %.5f)",
        rgb,
        target,
        lightness,
        saturation,
    )
    return hsl_to_rgb(HSLColor(hsl.h, saturation, lightness))
