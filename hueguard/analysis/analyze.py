# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Whole-color analysis: brightness, temperature, contrast, accessibility and
an optional distance to a comparison color, plus a scored summary.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from hueguard.schema import (
    AccessibilityAnalysis,
    AnalysisSummary,
    BrightnessAnalysis,
    BrightnessCategory,
    ColorAnalysis,
    ColorValue,
    ContrastAnalysis,
    Temperature,
    TemperatureAnalysis,
)
from hueguard.analysis.contrast import analyze_accessibility, analyze_contrast
from hueguard.analysis.distance import analyze_distance
from hueguard.analysis.metrics import analyze_brightness, analyze_temperature


_MAX_SUMMARY_ITEMS = 3
_MAX_RECOMMENDATIONS = 5
_EXTREME_BRIGHTNESS = (BrightnessCategory.VERY_DARK, BrightnessCategory.VERY_LIGHT)
# Best contrast below which a color should never carry text
_UNUSABLE_CONTRAST = 3.0

_BRIGHTNESS_ADVICE = MappingProxyType({
    BrightnessCategory.VERY_DARK: "Consider using white or light text on this background",
    BrightnessCategory.VERY_LIGHT: "Consider using dark text on this background",
})
_TEMPERATURE_ADVICE = MappingProxyType({
    Temperature.WARM: "This warm color works well for energetic, friendly designs",
    Temperature.COOL: "This cool color works well for professional, calming designs",
})


def _accessibility_notes(
    accessibility: AccessibilityAnalysis,
    contrast: ContrastAnalysis,
) -> list[str]:
    notes = []
    if not accessibility.wcag_aa_normal:
        notes.append("Does not meet WCAG AA standards for normal text")
    if not accessibility.color_blind_safe:
        notes.append("May be difficult for color-blind users")
    if contrast.best_contrast < _UNUSABLE_CONTRAST:
        notes.append("Very low contrast - avoid using for text")
    return notes


def _recommendations(
    accessibility: AccessibilityAnalysis,
    brightness: BrightnessAnalysis,
    temperature: TemperatureAnalysis,
) -> list[str]:
    recommendations = list(accessibility.recommendations)
    advice = _BRIGHTNESS_ADVICE.get(brightness.brightness_category)
    if advice:
        recommendations.append(advice)
    advice = _TEMPERATURE_ADVICE.get(temperature.temperature)
    if advice:
        recommendations.append(advice)
    return recommendations[:_MAX_RECOMMENDATIONS]


def analyze_color(
    color: ColorValue,
    compare_color: Optional[ColorValue] = None,
) -> ColorAnalysis:
    """
    Run every single-color analysis on ``color``.

    Args:
        color: Color to analyze
        compare_color: When given, ΔE distances to it are included

    Returns:
        ColorAnalysis, ``distance`` is None without a comparison color
    """
    brightness = analyze_brightness(color)
    temperature = analyze_temperature(color)
    contrast = analyze_contrast(color)
    accessibility = analyze_accessibility(color)

    return ColorAnalysis(
        color=color,
        brightness=brightness,
        temperature=temperature,
        contrast=contrast,
        accessibility=accessibility,
        distance=(
            analyze_distance(color, compare_color)
            if compare_color is not None else None
        ),
        accessibility_notes=tuple(_accessibility_notes(accessibility, contrast)),
        recommendations=tuple(
            _recommendations(accessibility, brightness, temperature)
        ),
    )


def summarize_analysis(analysis: ColorAnalysis) -> AnalysisSummary:
    """
    Score an analysis out of 100 and pick its top issues and strengths.

    Starts at 100: failing AA for normal text costs 30 (passing AAA earns
    10), not being color-blind safe costs 20, medium brightness costs 10.
    The score is clamped to [0, 100].
    """
    issues = []
    strengths = []
    score = 100

    accessibility = analysis.accessibility
    if not accessibility.wcag_aa_normal:
        issues.append("Poor contrast for text")
        score -= 30
    elif accessibility.wcag_aaa_normal:
        strengths.append("Excellent contrast for text")
        score += 10
    else:
        strengths.append("Good contrast for text")

    if not accessibility.color_blind_safe:
        issues.append("May be problematic for color-blind users")
        score -= 20
    else:
        strengths.append("Color-blind friendly")

    category = analysis.brightness.brightness_category
    if category in _EXTREME_BRIGHTNESS:
        strengths.append("High contrast potential")
    elif category is BrightnessCategory.MEDIUM:
        issues.append("Medium brightness may limit contrast options")
        score -= 10

    temperature = analysis.temperature.temperature
    if temperature is not Temperature.NEUTRAL:
        strengths.append(f"Clear {temperature.value} temperature")

    return AnalysisSummary(
        overall_score=max(0, min(100, score)),
        primary_issues=tuple(issues[:_MAX_SUMMARY_ITEMS]),
        strengths=tuple(strengths[:_MAX_SUMMARY_ITEMS]),
    )
