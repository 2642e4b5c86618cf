"""Helpers for hex color strings such as ``#0055cc`` or ``#abd``."""

from __future__ import annotations

import math
import string

from .colors import RGBColor
from .correction import correct_contrast
from .luminance import relative_luminance

_HEX_DIGITS = set(string.hexdigits)


class InvalidFormatError(ValueError):
    """Raised when a string is not a valid hex color."""


def hex_to_rgb(value: int) -> RGBColor:
    """Convert an integer such as ``0x304050`` into an :class:`RGBColor`."""

    return RGBColor(
        (value >> 16) / 255,
        ((value >> 8) & 0xFF) / 255,
        (value & 0xFF) / 255,
    )


def rgb_to_hex(rgb: RGBColor) -> int:
    return (
        (math.floor(rgb.r * 255) << 16)
        | (math.floor(rgb.g * 255) << 8)
        | math.floor(rgb.b * 255)
    )


def rgb_to_string_hex(rgb: RGBColor) -> str:
    """Format ``rgb`` as a lowercase ``#rrggbb`` string."""

    return f"#{rgb_to_hex(rgb):06x}"


def string_hex_to_hex(text: str) -> int:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` into an integer.

    Alpha components are accepted but discarded.
    """

    if not text.startswith("#") or any(ch not in _HEX_DIGITS for ch in text[1:]):
        raise InvalidFormatError(f"String is not a valid hex color string: {text!r}")

    if len(text) in (7, 9):
        r = int(text[1:3], 16)
        g = int(text[3:5], 16)
        b = int(text[5:7], 16)
        return (r << 16) | (g << 8) | b

    if len(text) in (4, 5):
        r = int(text[1], 16)
        g = int(text[2], 16)
        b = int(text[3], 16)
        return (r << 20) | (r << 16) | (g << 12) | (g << 8) | (b << 4) | b

    raise InvalidFormatError(f"String is not a valid hex color string: {text!r}")


def string_hex_to_rgb(text: str) -> RGBColor:
    return hex_to_rgb(string_hex_to_hex(text))


def correct_contrast_hex(text: str, background_luminance: float, desired_contrast: float) -> str:
    """Run :func:`correct_contrast` on a hex string and format the result."""

    return rgb_to_string_hex(
        correct_contrast(string_hex_to_rgb(text), background_luminance, desired_contrast)
    )


def relative_luminance_hex(text: str) -> float:
    return relative_luminance(string_hex_to_rgb(text))
