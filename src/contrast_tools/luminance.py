"""WCAG 2.1 relative luminance and contrast ratio calculations."""

from __future__ import annotations

from typing import Dict

from .colors import RGBColor

# ITU-R BT.709 primaries; green takes whatever red and blue leave over.
WHITE_R = 0.2126
WHITE_B = 0.0722
WHITE_G = 1 - WHITE_R - WHITE_B

LUMINANCE_OFFSET = 0.05

WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0
WCAG_AAA_NORMAL = 7.0
WCAG_AAA_LARGE = 4.5


def gamma_to_linear(channel: float) -> float:
    """Decode a gamma-encoded sRGB channel value into linear light."""

    if channel == 0 or channel == 1:
        return channel
    if channel < 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGBColor) -> float:
    """Return the relative luminance (the Y of CIE XYZ) of ``rgb``."""

    return (
        WHITE_R * gamma_to_linear(rgb.r)
        + WHITE_G * gamma_to_linear(rgb.g)
        + WHITE_B * gamma_to_linear(rgb.b)
    )


def calculate_contrast(y1: float, y2: float) -> float:
    """Return the WCAG contrast ratio between two relative luminances."""

    return (max(y1, y2) + LUMINANCE_OFFSET) / (min(y1, y2) + LUMINANCE_OFFSET)


def wcag_levels(ratio: float) -> Dict[str, bool]:
    return {
        "AA": ratio >= WCAG_AA_NORMAL,
        "AA-Large": ratio >= WCAG_AA_LARGE,
        "AAA": ratio >= WCAG_AAA_NORMAL,
        "AAA-Large": ratio >= WCAG_AAA_LARGE,
    }
