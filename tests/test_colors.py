import pytest

from contrast_tools.colors import HSLColor, RGBColor, _hue_to_rgb, hsl_to_rgb, rgb_to_hsl


@pytest.mark.parametrize("value", [0.0, 0.2, 0.5, 0.75, 1.0])
def test_rgb_to_hsl_achromatic_has_no_hue_or_saturation(value):
    hsl = rgb_to_hsl(RGBColor(value, value, value))
    assert hsl == HSLColor(0.0, 0.0, value)


@pytest.mark.parametrize(
    "rgb, expected_hue",
    [
        (RGBColor(1.0, 0.0, 0.0), 0.0),
        (RGBColor(0.0, 1.0, 0.0), 1 / 3),
        (RGBColor(0.0, 0.0, 1.0), 2 / 3),
        (RGBColor(1.0, 1.0, 0.0), 1 / 6),
        (RGBColor(0.0, 1.0, 1.0), 1 / 2),
        (RGBColor(1.0, 0.0, 1.0), 5 / 6),
    ],
)
def test_rgb_to_hsl_primary_and_secondary_hues(rgb, expected_hue):
    hsl = rgb_to_hsl(rgb)
    assert hsl.h == pytest.approx(expected_hue)
    assert hsl.s == pytest.approx(1.0)
    assert hsl.l == pytest.approx(0.5)


def test_rgb_to_hsl_uses_light_branch_for_saturation():
    hsl = rgb_to_hsl(RGBColor(1.0, 0.6, 0.6))
    assert hsl.l == pytest.approx(0.8)
    assert hsl.s == pytest.approx(0.4 / (2 - 1.6))


def test_hsl_to_rgb_without_saturation_is_grey():
    assert hsl_to_rgb(HSLColor(0.4, 0.0, 0.3)) == RGBColor(0.3, 0.3, 0.3)


def test_hsl_to_rgb_pure_red():
    assert hsl_to_rgb(HSLColor(0.0, 1.0, 0.5)) == RGBColor(1.0, 0.0, 0.0)


@pytest.mark.parametrize("t", [0.25, 1.25, 2.25, -0.75, -1.75])
def test_hue_helper_wraps_any_number_of_turns(t):
    assert _hue_to_rgb(0.0, 1.0, t) == pytest.approx(_hue_to_rgb(0.0, 1.0, 0.25))


@pytest.mark.parametrize(
    "hsl",
    [
        HSLColor(0.0, 0.0, 0.0),
        HSLColor(0.3, 0.0, 0.42),
        HSLColor(0.0, 1.0, 0.5),
        HSLColor(0.1, 0.4, 0.2),
        HSLColor(0.45, 0.9, 0.65),
        HSLColor(0.7, 0.25, 0.9),
        HSLColor(0.95, 0.6, 0.35),
        HSLColor(0.5, 1.0, 1.0),
    ],
)
def test_hsl_round_trip_reproduces_rgb(hsl):
    rgb = hsl_to_rgb(hsl)
    again = hsl_to_rgb(rgb_to_hsl(rgb))
    assert again.r == pytest.approx(rgb.r, abs=1e-9)
    assert again.g == pytest.approx(rgb.g, abs=1e-9)
    assert again.b == pytest.approx(rgb.b, abs=1e-9)


def test_color_values_are_immutable():
    color = RGBColor(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color.r = 0.5  # type: ignore[misc]
