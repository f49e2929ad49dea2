# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Hueguard -- Color analysis and accessibility compliance engine.

Measures perceptual properties of sRGB colors, judges contrast against
WCAG 2.x and a simplified APCA score, simulates color vision deficiencies
and nudges palettes toward accessible variants.

Quick start::

    from hueguard import ColorValue, check_contrast

    fg = ColorValue.from_hex("#333333")
    bg = ColorValue.from_hex("#FFFFFF")
    check_contrast(fg, bg).ratio   # 12.63
"""

from __future__ import annotations

__version__ = "1.0.0"

from hueguard.analysis import (
    OptimizationConfig,
    analyze_color,
    calculate_apca,
    check_contrast,
    check_contrast_report,
    optimize_for_accessibility,
    simulate_colorblindness,
    summarize_analysis,
)
from hueguard.schema import (
    ColorAnalysis,
    ColorValue,
    DeficiencyType,
    Standard,
    TextSize,
    UseCase,
)

__all__ = [
    # Core API
    "analyze_color",
    "summarize_analysis",
    "check_contrast",
    "check_contrast_report",
    "calculate_apca",
    "simulate_colorblindness",
    "optimize_for_accessibility",
    "OptimizationConfig",
    # Types (commonly needed)
    "ColorValue",
    "ColorAnalysis",
    "TextSize",
    "Standard",
    "DeficiencyType",
    "UseCase",
    # Version
    "__version__",
]
