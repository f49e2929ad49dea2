# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Perceptual metrics for a single color.

Two brightness measures coexist here and are not interchangeable:

- ``relative_luminance``: WCAG 2.x, gamma-decoded, feeds every contrast ratio
- ``perceived_brightness``: 0.299/0.587/0.114 weights on raw 8-bit channels,
  feeds the brightness categories and the light/dark flag
"""

from __future__ import annotations

from types import MappingProxyType

from hueguard.schema import (
    BrightnessAnalysis,
    BrightnessCategory,
    ColorValue,
    Temperature,
    TemperatureAnalysis,
)
from hueguard.analysis.colorspace import round_channel, wcag_linearize


# Exclusive upper bounds on perceived brightness, dark → light
BRIGHTNESS_BREAKPOINTS = (
    (51, BrightnessCategory.VERY_DARK),
    (102, BrightnessCategory.DARK),
    (153, BrightnessCategory.MEDIUM),
    (204, BrightnessCategory.LIGHT),
)

# (exclusive upper hue bound, temperature, hue family, kelvin, warmth)
# Hues at or beyond 300 fall through to the magenta-red band.
TEMPERATURE_BANDS = (
    (30.0, Temperature.WARM, "red", 1900, 1.0),
    (60.0, Temperature.WARM, "orange", 2700, 0.8),
    (90.0, Temperature.NEUTRAL, "yellow", 3000, 0.3),
    (150.0, Temperature.NEUTRAL, "yellow-green", 4000, 0.0),
    (210.0, Temperature.COOL, "green-cyan", 5000, -0.5),
    (270.0, Temperature.COOL, "blue", 6500, -1.0),
    (300.0, Temperature.COOL, "purple", 7000, -0.7),
)
_MAGENTA_RED_BAND = (Temperature.WARM, "magenta-red", 2000, 0.9)

WCAG_LUMINANCE_WEIGHTS = MappingProxyType({"r": 0.2126, "g": 0.7152, "b": 0.0722})


def relative_luminance(color: ColorValue) -> float:
    """
    WCAG relative luminance in [0, 1].

    0.2126 R + 0.7152 G + 0.0722 B over WCAG-linearized channels.
    """
    return (
        WCAG_LUMINANCE_WEIGHTS["r"] * wcag_linearize(color.r)
        + WCAG_LUMINANCE_WEIGHTS["g"] * wcag_linearize(color.g)
        + WCAG_LUMINANCE_WEIGHTS["b"] * wcag_linearize(color.b)
    )


def perceived_brightness(color: ColorValue) -> int:
    """Perceived brightness 0.299R + 0.587G + 0.114B, rounded to 0-255."""
    return round_channel(0.299 * color.r + 0.587 * color.g + 0.114 * color.b)


def brightness_category(brightness: int) -> BrightnessCategory:
    """Bucket a perceived brightness at the fixed 51/102/153/204 breakpoints."""
    for upper, category in BRIGHTNESS_BREAKPOINTS:
        if brightness < upper:
            return category
    return BrightnessCategory.VERY_LIGHT


def classify_temperature(hue: float) -> TemperatureAnalysis:
    """
    Classify a hue (degrees) into its temperature band.

    A lookup table, not a formula: each band carries a fixed Kelvin value
    and warmth score.
    """
    if hue >= 0:
        for upper, temperature, category, kelvin, warmth in TEMPERATURE_BANDS:
            if hue < upper:
                return TemperatureAnalysis(
                    temperature=temperature,
                    hue_category=category,
                    kelvin_approximation=kelvin,
                    warmth_score=warmth,
                )
    temperature, category, kelvin, warmth = _MAGENTA_RED_BAND
    return TemperatureAnalysis(
        temperature=temperature,
        hue_category=category,
        kelvin_approximation=kelvin,
        warmth_score=warmth,
    )


def analyze_brightness(color: ColorValue) -> BrightnessAnalysis:
    """Perceived brightness, relative luminance, category and light flag."""
    brightness = perceived_brightness(color)
    return BrightnessAnalysis(
        perceived_brightness=brightness,
        relative_luminance=relative_luminance(color),
        brightness_category=brightness_category(brightness),
        is_light=brightness > 127,
    )


def analyze_temperature(color: ColorValue) -> TemperatureAnalysis:
    """Temperature classification from the color's HSL hue."""
    return classify_temperature(color.hsl.h)


def is_color_blind_safe(color: ColorValue) -> bool:
    """
    Rough check that a color stays distinguishable for red/green deficiencies.

    Hues in [0, 60] and [90, 150] are problematic. A color is still treated
    as safe when its saturation is 30% or less, or its lightness is
    extreme (< 20% or > 80%).
    """
    h, s, l = color.hsl
    problematic_hue = 0 <= h <= 60 or 90 <= h <= 150
    saturated = s > 30
    extreme_lightness = l < 20 or l > 80
    return not problematic_hue or not saturated or extreme_lightness
