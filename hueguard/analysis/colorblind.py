# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Color vision deficiency simulation.

Single-pass transform per color:
1. Decode sRGB with a plain 2.2 gamma (not the WCAG or APCA curves)
2. Apply the deficiency family's 3×3 matrix, or collapse to BT.709
   luminance on linear values for monochromacy
3. Blend original and simulated linear values by severity / 100
4. Clamp and re-encode with 1/2.2

Anomalous variants (protanomaly etc.) share the matrix of their dichromat
family; severity is what makes them partial.

Matrices based on Brettel, Viénot and Mollon, JOSA 1997.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Sequence, Union

import numpy as np

from hueguard.schema import (
    AccessibilityImpact,
    ColorValue,
    DeficiencyType,
    SimulationReport,
    SimulationResult,
    SimulationSummary,
)
from hueguard.analysis.colorspace import gamma_decode, gamma_encode, round_half_up
from hueguard.analysis.distance import delta_e_cie76

logger = logging.getLogger(__name__)


# =============================================================================
# Matrices
# =============================================================================


def _frozen(values: list) -> np.ndarray:
    matrix = np.array(values, dtype=np.float64)
    matrix.setflags(write=False)
    return matrix


# Row-major, applied as M · [R, G, B]ᵀ on linear values
_PROTANOPIA = _frozen([
    [0.567, 0.433, 0.0],
    [0.558, 0.442, 0.0],
    [0.0, 0.242, 0.758],
])

_DEUTERANOPIA = _frozen([
    [0.625, 0.375, 0.0],
    [0.7, 0.3, 0.0],
    [0.0, 0.3, 0.7],
])

_TRITANOPIA = _frozen([
    [0.95, 0.05, 0.0],
    [0.0, 0.433, 0.567],
    [0.0, 0.475, 0.525],
])

CVD_MATRICES = MappingProxyType({
    DeficiencyType.PROTANOPIA: _PROTANOPIA,
    DeficiencyType.PROTANOMALY: _PROTANOPIA,
    DeficiencyType.DEUTERANOPIA: _DEUTERANOPIA,
    DeficiencyType.DEUTERANOMALY: _DEUTERANOPIA,
    DeficiencyType.TRITANOPIA: _TRITANOPIA,
    DeficiencyType.TRITANOMALY: _TRITANOPIA,
})

# BT.709 weights applied directly to 2.2-decoded values
_MONOCHROME_WEIGHTS = _frozen([0.2126, 0.7152, 0.0722])

# (exclusive upper bound on difference score, impact)
IMPACT_BREAKPOINTS = (
    (5.0, AccessibilityImpact.NONE),
    (15.0, AccessibilityImpact.MINIMAL),
    (30.0, AccessibilityImpact.MODERATE),
)

# Difference above which a color counts as significantly affected
_AFFECTED_THRESHOLD = 5.0
_HIGH_DISTORTION = 20.0
# Average difference above which alternative combinations are suggested
_SUGGEST_ALTERNATIVES = 15.0

_FAMILY_ADVICE = MappingProxyType({
    "prot": (
        "Avoid red-green color combinations",
        "Use blue and yellow for better differentiation",
    ),
    "deuter": (
        "Avoid green-red color combinations",
        "Use blue and orange for better contrast",
    ),
    "trit": (
        "Avoid blue-yellow color combinations",
        "Use red and green for better differentiation",
    ),
    "mono": (
        "Ensure sufficient brightness contrast between colors",
        "Use patterns, textures, or labels in addition to color",
    ),
})


def _deficiency(value: Union[DeficiencyType, str]) -> DeficiencyType:
    return value if isinstance(value, DeficiencyType) else DeficiencyType(value)


def _check_severity(severity: float) -> float:
    if isinstance(severity, bool) or not isinstance(severity, (int, float)):
        raise TypeError(f"Severity must be a number, got {type(severity).__name__}")
    if not 0 <= severity <= 100:
        raise ValueError(f"Severity must be 0-100, got {severity}")
    return severity


# =============================================================================
# Single color
# =============================================================================


def simulate_deficiency(
    color: ColorValue,
    deficiency: Union[DeficiencyType, str],
    severity: float = 100,
) -> ColorValue:
    """
    Simulate how ``color`` appears with a color vision deficiency.

    Args:
        color: Input color
        deficiency: Deficiency type (enum member or its string value)
        severity: 0 (no effect) to 100 (full effect)

    Returns:
        The simulated color. Severity 0 returns the input within ±1 per
        channel.
    """
    deficiency = _deficiency(deficiency)
    _check_severity(severity)

    linear = np.array([gamma_decode(c) for c in color.rgb], dtype=np.float64)

    if deficiency is DeficiencyType.MONOCHROMACY:
        transformed = np.full(3, float(np.dot(_MONOCHROME_WEIGHTS, linear)))
    else:
        transformed = CVD_MATRICES[deficiency] @ linear

    blended = linear + (transformed - linear) * (severity / 100)

    return ColorValue(*(gamma_encode(float(v)) for v in blended))


def color_difference(color1: ColorValue, color2: ColorValue) -> float:
    """Raw (unweighted) L*a*b* Euclidean distance between two colors."""
    return delta_e_cie76(color1.lab, color2.lab)


def classify_impact(difference: float) -> AccessibilityImpact:
    """Bucket a difference score: <5 none, <15 minimal, <30 moderate, else severe."""
    for upper, impact in IMPACT_BREAKPOINTS:
        if difference < upper:
            return impact
    return AccessibilityImpact.SEVERE


def _simulate(
    color: ColorValue,
    deficiency: DeficiencyType,
    severity: float,
) -> tuple[SimulationResult, float]:
    simulated = simulate_deficiency(color, deficiency, severity)
    difference = color_difference(color, simulated)
    result = SimulationResult(
        original=color,
        simulated=simulated,
        difference_score=round_half_up(difference, 2),
        impact=classify_impact(difference),
    )
    return result, difference


def simulate_color(
    color: ColorValue,
    deficiency: Union[DeficiencyType, str],
    severity: float = 100,
) -> SimulationResult:
    """Simulate one color and score how much it changed."""
    result, _ = _simulate(color, _deficiency(deficiency), severity)
    return result


# =============================================================================
# Batch
# =============================================================================


def _family(deficiency: DeficiencyType) -> str:
    for prefix in _FAMILY_ADVICE:
        if deficiency.value.startswith(prefix):
            return prefix
    raise ValueError(f"No advice family for {deficiency.value}")


def _recommendations(
    deficiency: DeficiencyType,
    results: Sequence[SimulationResult],
    average_difference: float,
) -> tuple[str, ...]:
    name = deficiency.value
    severe = sum(1 for r in results if r.impact is AccessibilityImpact.SEVERE)
    moderate = sum(1 for r in results if r.impact is AccessibilityImpact.MODERATE)

    recommendations = []
    if severe > 0:
        recommendations.append(f"{severe} colors are severely affected by {name}")
        recommendations.append(
            "Consider using alternative colors with better differentiation"
        )
    if moderate > 0:
        recommendations.append(f"{moderate} colors show moderate changes for {name} users")

    recommendations.extend(_FAMILY_ADVICE[_family(deficiency)])

    if average_difference > _HIGH_DISTORTION:
        recommendations.append("Consider using high-contrast color schemes")
        recommendations.append(
            "Test with actual users who have color vision deficiencies"
        )

    recommendations.append("Use text labels or icons in addition to color coding")
    recommendations.append("Ensure sufficient contrast ratios for text readability")
    return tuple(recommendations)


def simulate_colorblindness(
    colors: Sequence[ColorValue],
    deficiency: Union[DeficiencyType, str],
    severity: float = 100,
) -> SimulationReport:
    """
    Simulate a deficiency over a list of colors.

    All inputs are validated before any color is transformed: one bad
    entry fails the whole call. Results follow input order.

    Args:
        colors: Non-empty sequence of ColorValue
        deficiency: Deficiency type (enum member or its string value)
        severity: 0 (no effect) to 100 (full effect)

    Raises:
        ValueError: Empty list, unknown deficiency, severity out of range
        TypeError: An entry is not a ColorValue
    """
    if not colors:
        raise ValueError("At least one color is required")
    deficiency = _deficiency(deficiency)
    _check_severity(severity)
    for index, color in enumerate(colors):
        if not isinstance(color, ColorValue):
            raise TypeError(
                f"Color at index {index} must be a ColorValue, "
                f"got {type(color).__name__}"
            )

    logger.debug(
        "Simulating %s at severity %s for %d colors",
        deficiency.value, severity, len(colors),
    )

    results = []
    total_difference = 0.0
    affected = 0
    for color in colors:
        result, difference = _simulate(color, deficiency, severity)
        if difference > _AFFECTED_THRESHOLD:
            affected += 1
        total_difference += difference
        results.append(result)

    average_difference = total_difference / len(colors)

    concerns = []
    if affected > 0:
        concerns.append(
            f"{affected} out of {len(colors)} colors are significantly affected"
        )
    if average_difference > _HIGH_DISTORTION:
        concerns.append("High overall color distortion detected")
    if deficiency.is_anomaly and severity > 50:
        concerns.append("Moderate to severe color vision anomaly simulation")

    notes = []
    if affected > 0:
        notes.append(
            f"{affected} colors show significant changes for {deficiency.value} users"
        )
    if average_difference > _SUGGEST_ALTERNATIVES:
        notes.append(
            "Consider using alternative color combinations for better accessibility"
        )

    return SimulationReport(
        deficiency_type=deficiency,
        severity=severity,
        results=tuple(results),
        summary=SimulationSummary(
            total_colors=len(colors),
            colors_affected=affected,
            average_difference=round_half_up(average_difference, 2),
            accessibility_concerns=tuple(concerns),
        ),
        recommendations=_recommendations(deficiency, results, average_difference),
        accessibility_notes=tuple(notes),
    )
