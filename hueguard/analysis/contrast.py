# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Contrast engine: WCAG contrast ratio, simplified APCA score, and the
lightness search for better foreground/background combinations.

WCAG thresholds:
- AA: 4.5:1 normal text, 3:1 large text
- AAA: 7:1 normal text, 4.5:1 large text

The APCA score here is a simplified variant, not the full APCA 0.0.98G
algorithm. Its values are part of the published output and must be
reproduced as-is.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Optional, Union

from hueguard.schema import (
    AccessibilityAnalysis,
    AlternativeCombinations,
    BackgroundChoice,
    ColorValue,
    ContrastAdjustment,
    ContrastAnalysis,
    ContrastCheck,
    ContrastReport,
    Standard,
    TextSize,
)
from hueguard.analysis.colorspace import apca_linearize, round_half_up
from hueguard.analysis.metrics import (
    is_color_blind_safe,
    perceived_brightness,
    relative_luminance,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

WCAG_THRESHOLDS = MappingProxyType({
    (Standard.WCAG_AA, TextSize.NORMAL): 4.5,
    (Standard.WCAG_AA, TextSize.LARGE): 3.0,
    (Standard.WCAG_AAA, TextSize.NORMAL): 7.0,
    (Standard.WCAG_AAA, TextSize.LARGE): 4.5,
})

APCA_THRESHOLDS = MappingProxyType({
    TextSize.NORMAL: 75.0,
    TextSize.LARGE: 60.0,
})

APCA_WEIGHTS = (0.2126729, 0.7151522, 0.072175)

# Exponents: normal polarity (dark text on light background) and reverse
_APCA_NORM_BG = 0.56
_APCA_NORM_TXT = 0.57
_APCA_REV_TXT = 0.62
_APCA_REV_BG = 0.65
_APCA_SCALE = 1.14
_APCA_NOISE_FLOOR = 0.1
_APCA_OFFSET = 0.027

# Lightness offsets (HSL percentage points) tried by the alternative search
LIGHTNESS_OFFSETS = (-40, -30, -20, 20, 30, 40)
_MIN_LIGHTNESS_CHANGE = 5
_MAX_ALTERNATIVES = 5

_WHITE = ColorValue(255, 255, 255)


def _text_size(value: Union[TextSize, str]) -> TextSize:
    return value if isinstance(value, TextSize) else TextSize(value)


def _standard(value: Union[Standard, str]) -> Standard:
    return value if isinstance(value, Standard) else Standard(value)


# =============================================================================
# WCAG contrast
# =============================================================================


def contrast_ratio(l1: float, l2: float) -> float:
    """
    WCAG contrast ratio between two relative luminances.

    (max + 0.05) / (min + 0.05). Symmetric, in [1, 21], unrounded.
    """
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def color_contrast_ratio(color1: ColorValue, color2: ColorValue) -> float:
    """Unrounded WCAG contrast ratio between two colors."""
    return contrast_ratio(relative_luminance(color1), relative_luminance(color2))


def calculate_apca(foreground: ColorValue, background: ColorValue) -> float:
    """
    Simplified APCA lightness contrast (Lc), rounded to 2 decimals.

    Positive when the background is lighter than the text. Values with
    magnitude under the noise floor report as 0.
    """
    fg_lum = sum(w * apca_linearize(c) for w, c in zip(APCA_WEIGHTS, foreground.rgb))
    bg_lum = sum(w * apca_linearize(c) for w, c in zip(APCA_WEIGHTS, background.rgb))

    if bg_lum > fg_lum:
        # Light background, dark text
        contrast = (bg_lum ** _APCA_NORM_BG - fg_lum ** _APCA_NORM_TXT) * _APCA_SCALE
    else:
        # Dark background, light text
        contrast = (bg_lum ** _APCA_REV_BG - fg_lum ** _APCA_REV_TXT) * _APCA_SCALE

    # The offset is subtracted for both polarities
    if abs(contrast) < _APCA_NOISE_FLOOR:
        contrast = 0.0
    else:
        contrast -= _APCA_OFFSET

    return round_half_up(contrast * 100, 2)


def check_contrast(
    foreground: ColorValue,
    background: ColorValue,
    text_size: Union[TextSize, str] = TextSize.NORMAL,
    standard: Union[Standard, str] = Standard.WCAG_AA,
) -> ContrastCheck:
    """
    Judge a foreground/background pair.

    ``passes`` follows AA by default, AAA for ``WCAG_AAA``, and the APCA
    magnitude (75 normal / 60 large) for ``APCA``. The AA/AAA flags are
    always reported.

    Args:
        foreground: Text color
        background: Surface color
        text_size: "normal" or "large"
        standard: "WCAG_AA", "WCAG_AAA" or "APCA"
    """
    text_size = _text_size(text_size)
    standard = _standard(standard)

    ratio = color_contrast_ratio(foreground, background)
    wcag_aa = ratio >= WCAG_THRESHOLDS[(Standard.WCAG_AA, text_size)]
    wcag_aaa = ratio >= WCAG_THRESHOLDS[(Standard.WCAG_AAA, text_size)]

    passes = wcag_aa
    apca_score: Optional[float] = None
    if standard is Standard.APCA:
        apca_score = calculate_apca(foreground, background)
        passes = abs(apca_score) >= APCA_THRESHOLDS[text_size]
    elif standard is Standard.WCAG_AAA:
        passes = wcag_aaa

    return ContrastCheck(
        ratio=round_half_up(ratio, 2),
        wcag_aa=wcag_aa,
        wcag_aaa=wcag_aaa,
        passes=passes,
        text_size=text_size,
        standard=standard,
        apca_score=apca_score,
    )


# =============================================================================
# Single-color contrast and accessibility
# =============================================================================


def analyze_contrast(color: ColorValue) -> ContrastAnalysis:
    """Contrast against pure white and pure black, and which one wins."""
    luminance = relative_luminance(color)
    against_white = contrast_ratio(1.0, luminance)
    against_black = contrast_ratio(luminance, 0.0)
    best_background = (
        BackgroundChoice.WHITE if against_white > against_black
        else BackgroundChoice.BLACK
    )
    return ContrastAnalysis(
        against_white=round_half_up(against_white, 2),
        against_black=round_half_up(against_black, 2),
        best_contrast=round_half_up(max(against_white, against_black), 2),
        best_background=best_background,
    )


def analyze_accessibility(color: ColorValue) -> AccessibilityAnalysis:
    """
    WCAG flags judged on the color's best contrast (white or black).

    Recommendations are plain English strings for the caller to surface.
    """
    best = analyze_contrast(color).best_contrast
    aa_normal = best >= WCAG_THRESHOLDS[(Standard.WCAG_AA, TextSize.NORMAL)]
    color_blind_safe = is_color_blind_safe(color)

    recommendations = []
    if not aa_normal:
        recommendations.append(
            "Consider using a darker or lighter shade for better contrast"
        )
    if not color_blind_safe:
        recommendations.append(
            "This color may be difficult for color-blind users to distinguish"
        )
    if best < 3.0:
        recommendations.append(
            "This color has very low contrast and should not be used for text"
        )

    return AccessibilityAnalysis(
        wcag_aa_normal=aa_normal,
        wcag_aa_large=best >= WCAG_THRESHOLDS[(Standard.WCAG_AA, TextSize.LARGE)],
        wcag_aaa_normal=best >= WCAG_THRESHOLDS[(Standard.WCAG_AAA, TextSize.NORMAL)],
        wcag_aaa_large=best >= WCAG_THRESHOLDS[(Standard.WCAG_AAA, TextSize.LARGE)],
        color_blind_safe=color_blind_safe,
        recommendations=tuple(recommendations),
    )


# =============================================================================
# Alternative combinations
# =============================================================================


def _lightness_candidates(
    color: ColorValue,
    judge,
) -> list[ContrastAdjustment]:
    """Shift lightness by each fixed offset and judge every candidate."""
    h, s, l = color.hsl
    candidates = []
    for offset in LIGHTNESS_OFFSETS:
        new_lightness = max(0.0, min(100.0, l + offset))
        if abs(new_lightness - l) < _MIN_LIGHTNESS_CHANGE:
            continue
        try:
            adjusted = ColorValue.from_hsl(h, s, new_lightness)
        except (TypeError, ValueError):
            # Underivable candidates are left out of the search
            continue
        check = judge(adjusted)
        candidates.append(ContrastAdjustment(
            color=adjusted,
            contrast_ratio=check.ratio,
            passes=check.passes,
            apca_score=check.apca_score,
        ))
    candidates.sort(key=lambda adj: adj.contrast_ratio, reverse=True)
    return candidates[:_MAX_ALTERNATIVES]


def find_alternative_combinations(
    foreground: ColorValue,
    background: ColorValue,
    text_size: Union[TextSize, str] = TextSize.NORMAL,
    standard: Union[Standard, str] = Standard.WCAG_AA,
) -> Optional[AlternativeCombinations]:
    """
    Search lighter/darker variants of each side of a failing pair.

    Hue and saturation are held; lightness moves by each offset in
    ``LIGHTNESS_OFFSETS``. Returns None when the pair already meets the AA
    threshold for its text size.

    Returns:
        Up to 5 foreground and 5 background adjustments, best ratio first
    """
    text_size = _text_size(text_size)
    standard = _standard(standard)

    current = check_contrast(foreground, background, text_size, standard)
    if current.ratio >= WCAG_THRESHOLDS[(Standard.WCAG_AA, text_size)]:
        return None

    fg_adjustments = _lightness_candidates(
        foreground,
        lambda fg: check_contrast(fg, background, text_size, standard),
    )
    bg_adjustments = _lightness_candidates(
        background,
        lambda bg: check_contrast(foreground, bg, text_size, standard),
    )
    logger.debug(
        "Alternative search for %s on %s: %d foreground, %d background candidates",
        foreground.hex, background.hex, len(fg_adjustments), len(bg_adjustments),
    )
    return AlternativeCombinations(
        foreground_adjustments=tuple(fg_adjustments),
        background_adjustments=tuple(bg_adjustments),
    )


def contrast_recommendations(
    foreground: ColorValue,
    background: ColorValue,
    check: ContrastCheck,
) -> tuple[str, ...]:
    """Plain English advice for a contrast verdict."""
    if check.passes:
        if check.wcag_aaa:
            return ("Excellent contrast - meets AAA standards",)
        return ("Good contrast - meets AA standards",)

    recommendations = ["This color combination does not meet accessibility standards"]
    if check.ratio < 3.0:
        recommendations.append("Consider using colors with more contrast difference")

    fg_brightness = perceived_brightness(foreground)
    bg_brightness = perceived_brightness(background)
    if abs(fg_brightness - bg_brightness) < 100:
        if fg_brightness > 127:
            recommendations.append("Try using a darker foreground color")
        else:
            recommendations.append("Try using a lighter foreground color")
        if bg_brightness > 127:
            recommendations.append("Try using a darker background color")
        else:
            recommendations.append("Try using a lighter background color")

    return tuple(recommendations)


def _contrast_notes(check: ContrastCheck) -> list[str]:
    # Ratios print the way a number prints in the response body: 21, 4.5, 4.48
    notes = []
    if not check.wcag_aa:
        notes.append(
            f"Contrast ratio {check.ratio:g}:1 does not meet WCAG AA standards"
        )
    if check.wcag_aaa:
        notes.append(
            f"Excellent contrast ratio {check.ratio:g}:1 meets WCAG AAA standards"
        )
    return notes


def check_contrast_report(
    foreground: ColorValue,
    background: ColorValue,
    text_size: Union[TextSize, str] = TextSize.NORMAL,
    standard: Union[Standard, str] = Standard.WCAG_AA,
) -> ContrastReport:
    """Contrast verdict with recommendations, alternatives and notes."""
    check = check_contrast(foreground, background, text_size, standard)
    return ContrastReport(
        foreground=foreground,
        background=background,
        check=check,
        recommendations=contrast_recommendations(foreground, background, check),
        alternatives=find_alternative_combinations(
            foreground, background, check.text_size, check.standard,
        ),
        accessibility_notes=tuple(_contrast_notes(check)),
    )


def contrast_against_white(color: ColorValue) -> float:
    """Rounded contrast ratio of a color on pure white."""
    return check_contrast(color, _WHITE).ratio
