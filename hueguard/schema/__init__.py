# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors and analysis results.

All types in this module are immutable (frozen dataclasses).
Every engine call produces fresh records; nothing is shared or mutated.
"""

from hueguard.schema.color_value import HSL, LAB, RGB, ColorValue
from hueguard.schema.results import (
    AccessibilityAnalysis,
    AccessibilityImpact,
    AlternativeCombinations,
    AnalysisSummary,
    BackgroundChoice,
    BrightnessAnalysis,
    BrightnessCategory,
    ColorAnalysis,
    ColorPairing,
    ComplianceChange,
    ContrastAdjustment,
    ContrastAnalysis,
    ContrastCheck,
    ContrastImprovement,
    ContrastReport,
    DeficiencyType,
    DistanceAnalysis,
    HuePreservation,
    OptimizationReport,
    OptimizationResult,
    OptimizationSummary,
    PerceptualDifference,
    SimulationReport,
    SimulationResult,
    SimulationSummary,
    Standard,
    Temperature,
    TemperatureAnalysis,
    TextSize,
    UseCase,
)

__all__ = [
    # Color value
    "ColorValue",
    "RGB",
    "HSL",
    "LAB",
    # Enumerations
    "TextSize",
    "Standard",
    "DeficiencyType",
    "UseCase",
    "BrightnessCategory",
    "Temperature",
    "BackgroundChoice",
    "PerceptualDifference",
    "AccessibilityImpact",
    # Color analysis
    "BrightnessAnalysis",
    "TemperatureAnalysis",
    "ContrastAnalysis",
    "AccessibilityAnalysis",
    "DistanceAnalysis",
    "ColorAnalysis",
    "AnalysisSummary",
    # Contrast checking
    "ContrastCheck",
    "ContrastAdjustment",
    "AlternativeCombinations",
    "ContrastReport",
    # Colorblindness simulation
    "SimulationResult",
    "SimulationSummary",
    "SimulationReport",
    # Accessibility optimization
    "ContrastImprovement",
    "ComplianceChange",
    "HuePreservation",
    "OptimizationResult",
    "ColorPairing",
    "OptimizationSummary",
    "OptimizationReport",
]
