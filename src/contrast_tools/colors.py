"""Color value types and RGB/HSL conversion helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RGBColor:
    """Normalized sRGB color with channels in ``[0, 1]``."""

    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class HSLColor:
    """HSL color; hue is expressed in fractional turns."""

    h: float
    s: float
    l: float  # noqa: E741


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    while t < 0:
        t += 1
    while t > 1:
        t -= 1

    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert an :class:`HSLColor` into an :class:`RGBColor`."""

    h, s, l = hsl.h, hsl.s, hsl.l  # noqa: E741
    if s == 0:
        return RGBColor(l, l, l)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return RGBColor(
        _hue_to_rgb(p, q, h + 1 / 3),
        _hue_to_rgb(p, q, h),
        _hue_to_rgb(p, q, h - 1 / 3),
    )


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Convert an :class:`RGBColor` into an :class:`HSLColor`.

    Achromatic colors map to ``h == 0`` and ``s == 0``. When several channels
    share the maximum the hue sector is picked by checking red, then green,
    then blue.
    """

    r, g, b = rgb.r, rgb.g, rgb.b
    high = max(r, g, b)
    low = min(r, g, b)

    l = (high + low) / 2  # noqa: E741
    if high == low:
        return HSLColor(0.0, 0.0, l)

    d = high - low
    s = d / (2 - high - low) if l > 0.5 else d / (high + low)

    if high == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return HSLColor(h / 6, s, l)
