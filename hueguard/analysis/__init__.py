# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Color analysis engines.

Pure functions over ColorValue inputs. Each call returns fresh, immutable
result records; no engine holds state between calls.
"""

from hueguard.analysis.analyze import analyze_color, summarize_analysis
from hueguard.analysis.colorblind import (
    classify_impact,
    color_difference,
    simulate_color,
    simulate_colorblindness,
    simulate_deficiency,
)
from hueguard.analysis.contrast import (
    analyze_accessibility,
    analyze_contrast,
    calculate_apca,
    check_contrast,
    check_contrast_report,
    color_contrast_ratio,
    contrast_ratio,
    contrast_recommendations,
    find_alternative_combinations,
)
from hueguard.analysis.distance import (
    analyze_distance,
    classify_difference,
    delta_e_cie76,
    delta_e_cie94,
    delta_e_cie2000,
)
from hueguard.analysis.metrics import (
    analyze_brightness,
    analyze_temperature,
    brightness_category,
    classify_temperature,
    is_color_blind_safe,
    perceived_brightness,
    relative_luminance,
)
from hueguard.analysis.optimize import (
    OptimizationConfig,
    apply_use_case_rule,
    colors_equal,
    hue_distance,
    optimize_color,
    optimize_for_accessibility,
    recommend_pairings,
)

__all__ = [
    # Whole-color analysis
    "analyze_color",
    "summarize_analysis",
    # Perceptual metrics
    "relative_luminance",
    "perceived_brightness",
    "brightness_category",
    "classify_temperature",
    "analyze_brightness",
    "analyze_temperature",
    "is_color_blind_safe",
    # Contrast
    "contrast_ratio",
    "color_contrast_ratio",
    "calculate_apca",
    "check_contrast",
    "check_contrast_report",
    "analyze_contrast",
    "analyze_accessibility",
    "find_alternative_combinations",
    "contrast_recommendations",
    # Distance
    "delta_e_cie76",
    "delta_e_cie94",
    "delta_e_cie2000",
    "classify_difference",
    "analyze_distance",
    # Colorblindness
    "simulate_deficiency",
    "simulate_color",
    "simulate_colorblindness",
    "color_difference",
    "classify_impact",
    # Optimization
    "OptimizationConfig",
    "apply_use_case_rule",
    "colors_equal",
    "hue_distance",
    "optimize_color",
    "optimize_for_accessibility",
    "recommend_pairings",
]
