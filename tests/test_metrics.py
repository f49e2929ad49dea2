# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""Tests for luminance, brightness, temperature and color-blind safety."""

import pytest

from hueguard.analysis.metrics import (
    analyze_brightness,
    analyze_temperature,
    brightness_category,
    classify_temperature,
    is_color_blind_safe,
    perceived_brightness,
    relative_luminance,
)
from hueguard.schema import BrightnessCategory, ColorValue, Temperature

BLACK = ColorValue(0, 0, 0)
WHITE = ColorValue(255, 255, 255)
RED = ColorValue(255, 0, 0)
GREEN = ColorValue(0, 255, 0)


class TestRelativeLuminance:

    def test_bounds(self):
        assert relative_luminance(BLACK) == 0.0
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_primaries_use_wcag_weights(self):
        assert relative_luminance(RED) == pytest.approx(0.2126)
        assert relative_luminance(GREEN) == pytest.approx(0.7152)
        assert relative_luminance(ColorValue(0, 0, 255)) == pytest.approx(0.0722)

    def test_unrounded(self):
        value = relative_luminance(ColorValue(119, 119, 119))
        assert value == pytest.approx(0.18447, abs=1e-4)
        assert round(value, 2) != value


class TestPerceivedBrightness:

    def test_known_values(self):
        assert perceived_brightness(BLACK) == 0
        assert perceived_brightness(WHITE) == 255
        assert perceived_brightness(RED) == 76
        assert perceived_brightness(ColorValue(128, 128, 128)) == 128

    def test_monotone_in_each_channel(self):
        for channel in range(3):
            previous = -1
            for value in range(0, 256, 15):
                rgb = [40, 40, 40]
                rgb[channel] = value
                current = perceived_brightness(ColorValue(*rgb))
                assert current >= previous
                previous = current


class TestBrightnessCategory:

    @pytest.mark.parametrize("brightness, expected", [
        (0, BrightnessCategory.VERY_DARK),
        (50, BrightnessCategory.VERY_DARK),
        (51, BrightnessCategory.DARK),
        (101, BrightnessCategory.DARK),
        (102, BrightnessCategory.MEDIUM),
        (153, BrightnessCategory.LIGHT),
        (203, BrightnessCategory.LIGHT),
        (204, BrightnessCategory.VERY_LIGHT),
        (255, BrightnessCategory.VERY_LIGHT),
    ])
    def test_breakpoints(self, brightness, expected):
        assert brightness_category(brightness) is expected

    def test_monotone(self):
        ranks = [brightness_category(b).rank for b in range(256)]
        assert ranks == sorted(ranks)

    def test_analyze_brightness(self):
        result = analyze_brightness(ColorValue(128, 128, 128))
        assert result.perceived_brightness == 128
        assert result.brightness_category is BrightnessCategory.MEDIUM
        assert result.is_light

    def test_is_light_threshold(self):
        assert not analyze_brightness(ColorValue(127, 127, 127)).is_light


class TestTemperature:

    @pytest.mark.parametrize("hue, temperature, category, kelvin, warmth", [
        (0, Temperature.WARM, "red", 1900, 1.0),
        (29.9, Temperature.WARM, "red", 1900, 1.0),
        (30, Temperature.WARM, "orange", 2700, 0.8),
        (60, Temperature.NEUTRAL, "yellow", 3000, 0.3),
        (120, Temperature.NEUTRAL, "yellow-green", 4000, 0.0),
        (150, Temperature.COOL, "green-cyan", 5000, -0.5),
        (240, Temperature.COOL, "blue", 6500, -1.0),
        (280, Temperature.COOL, "purple", 7000, -0.7),
        (300, Temperature.WARM, "magenta-red", 2000, 0.9),
        (359.5, Temperature.WARM, "magenta-red", 2000, 0.9),
    ])
    def test_bands(self, hue, temperature, category, kelvin, warmth):
        result = classify_temperature(hue)
        assert result.temperature is temperature
        assert result.hue_category == category
        assert result.kelvin_approximation == kelvin
        assert result.warmth_score == warmth

    def test_red_and_green(self):
        assert analyze_temperature(RED).temperature is Temperature.WARM
        assert analyze_temperature(GREEN).temperature is Temperature.NEUTRAL

    def test_achromatic_reports_red_band(self):
        assert analyze_temperature(WHITE).hue_category == "red"

    def test_band_edge_uses_unrounded_hue(self):
        # Hue 29.65 stays below the 30 degree edge instead of rounding up to it
        just_below = ColorValue(255, 126, 0)
        assert just_below.hsl.h == pytest.approx(29.65, abs=0.01)
        assert analyze_temperature(just_below).hue_category == "red"

        just_above = ColorValue(255, 128, 0)
        assert just_above.hsl.h == pytest.approx(30.12, abs=0.01)
        assert analyze_temperature(just_above).hue_category == "orange"


class TestColorBlindSafe:

    def test_saturated_red_unsafe(self):
        assert not is_color_blind_safe(RED)

    def test_blue_safe(self):
        assert is_color_blind_safe(ColorValue(0, 0, 255))

    def test_grays_safe(self):
        assert is_color_blind_safe(ColorValue(128, 128, 128))

    def test_extreme_lightness_safe(self):
        assert is_color_blind_safe(ColorValue.from_hsl(0, 100, 90))
        assert is_color_blind_safe(ColorValue.from_hsl(120, 100, 10))
