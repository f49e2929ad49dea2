# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Result records for the analysis engine.

Design principles:
- Immutable: All records are frozen dataclasses
- Fresh per call: No identity or state beyond the call that produced them
- Serializable: ``to_dict()`` is JSON-ready, colors serialize as hex

Numeric fields are already rounded by the engine (2 decimals for ratios,
ΔE values and APCA scores). Relative luminance is left unrounded and
perceived brightness is an integer.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hueguard.schema.color_value import ColorValue


# =============================================================================
# Enumerations
# =============================================================================


class TextSize(Enum):
    """WCAG text size category."""
    NORMAL = "normal"
    LARGE = "large"


class Standard(Enum):
    """Accessibility standard a contrast check is judged against."""
    WCAG_AA = "WCAG_AA"
    WCAG_AAA = "WCAG_AAA"
    APCA = "APCA"


class DeficiencyType(Enum):
    """Simulated color vision deficiency."""
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    MONOCHROMACY = "monochromacy"

    @property
    def is_anomaly(self) -> bool:
        """True for the partial (anomalous trichromacy) variants."""
        return self.value.endswith("anomaly")


class UseCase(Enum):
    """UI role a color is optimized for."""
    TEXT = "text"
    BACKGROUND = "background"
    ACCENT = "accent"
    INTERACTIVE = "interactive"


class BrightnessCategory(Enum):
    """Five ordered buckets over perceived brightness."""
    VERY_DARK = "very_dark"
    DARK = "dark"
    MEDIUM = "medium"
    LIGHT = "light"
    VERY_LIGHT = "very_light"

    @property
    def rank(self) -> int:
        """Position in the dark → light ordering (0-4)."""
        return _BRIGHTNESS_ORDER.index(self)


_BRIGHTNESS_ORDER = (
    BrightnessCategory.VERY_DARK,
    BrightnessCategory.DARK,
    BrightnessCategory.MEDIUM,
    BrightnessCategory.LIGHT,
    BrightnessCategory.VERY_LIGHT,
)


class Temperature(Enum):
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


class BackgroundChoice(Enum):
    WHITE = "white"
    BLACK = "black"


class PerceptualDifference(Enum):
    """Qualitative bucket over the CIE2000 distance."""
    IDENTICAL = "identical"
    VERY_SIMILAR = "very_similar"
    SIMILAR = "similar"
    DIFFERENT = "different"
    VERY_DIFFERENT = "very_different"


class AccessibilityImpact(Enum):
    """How strongly a deficiency simulation changes a color."""
    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SEVERE = "severe"


# =============================================================================
# Color analysis
# =============================================================================


@dataclass(frozen=True, slots=True)
class BrightnessAnalysis:
    """
    Attributes:
        perceived_brightness: 0.299R + 0.587G + 0.114B, rounded (0-255)
        relative_luminance: WCAG relative luminance (0-1), unrounded
        brightness_category: Bucket at 51/102/153/204
        is_light: perceived_brightness > 127
    """
    perceived_brightness: int
    relative_luminance: float
    brightness_category: BrightnessCategory
    is_light: bool

    def to_dict(self) -> dict:
        return {
            "perceived_brightness": self.perceived_brightness,
            "relative_luminance": self.relative_luminance,
            "brightness_category": self.brightness_category.value,
            "is_light": self.is_light,
        }


@dataclass(frozen=True, slots=True)
class TemperatureAnalysis:
    """
    Hue-band classification.

    Attributes:
        temperature: warm / cool / neutral
        hue_category: Descriptive hue family (e.g. "yellow-green")
        kelvin_approximation: Illustrative light-source temperature
        warmth_score: -1 (cool) to 1 (warm)
    """
    temperature: Temperature
    hue_category: str
    kelvin_approximation: int
    warmth_score: float

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature.value,
            "hue_category": self.hue_category,
            "kelvin_approximation": self.kelvin_approximation,
            "warmth_score": self.warmth_score,
        }


@dataclass(frozen=True, slots=True)
class ContrastAnalysis:
    """Contrast of a color against pure white and pure black."""
    against_white: float
    against_black: float
    best_contrast: float
    best_background: BackgroundChoice

    def to_dict(self) -> dict:
        return {
            "against_white": self.against_white,
            "against_black": self.against_black,
            "best_contrast": self.best_contrast,
            "best_background": self.best_background.value,
        }


@dataclass(frozen=True, slots=True)
class AccessibilityAnalysis:
    """WCAG pass/fail flags judged on a color's best contrast."""
    wcag_aa_normal: bool
    wcag_aa_large: bool
    wcag_aaa_normal: bool
    wcag_aaa_large: bool
    color_blind_safe: bool
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "wcag_aa_normal": self.wcag_aa_normal,
            "wcag_aa_large": self.wcag_aa_large,
            "wcag_aaa_normal": self.wcag_aaa_normal,
            "wcag_aaa_large": self.wcag_aaa_large,
            "color_blind_safe": self.color_blind_safe,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class DistanceAnalysis:
    """Delta-E distances between two colors (2 decimals)."""
    cie76: float
    cie94: float
    cie2000: float
    perceptual_difference: PerceptualDifference

    def to_dict(self) -> dict:
        return {
            "cie76": self.cie76,
            "cie94": self.cie94,
            "cie2000": self.cie2000,
            "perceptual_difference": self.perceptual_difference.value,
        }


@dataclass(frozen=True, slots=True)
class ColorAnalysis:
    """
    Complete analysis of one color.

    ``distance`` is only present when a comparison color was supplied.
    ``accessibility_notes`` flag problems; ``recommendations`` (at most 5)
    extend the accessibility advice with brightness and temperature hints.
    """
    color: ColorValue
    brightness: BrightnessAnalysis
    temperature: TemperatureAnalysis
    contrast: ContrastAnalysis
    accessibility: AccessibilityAnalysis
    distance: Optional[DistanceAnalysis] = None
    accessibility_notes: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        result = {
            "color": self.color.hex,
            "brightness": self.brightness.to_dict(),
            "temperature": self.temperature.to_dict(),
            "contrast": self.contrast.to_dict(),
            "accessibility": self.accessibility.to_dict(),
        }
        if self.distance is not None:
            result["distance"] = self.distance.to_dict()
        result["accessibility_notes"] = list(self.accessibility_notes)
        result["recommendations"] = list(self.recommendations)
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True, slots=True)
class AnalysisSummary:
    """Overall score (0-100) with the top issues and strengths (3 each)."""
    overall_score: int
    primary_issues: tuple[str, ...]
    strengths: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "primary_issues": list(self.primary_issues),
            "strengths": list(self.strengths),
        }


# =============================================================================
# Contrast checking
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastCheck:
    """
    Foreground/background contrast verdict.

    Attributes:
        ratio: WCAG contrast ratio (1-21), 2 decimals
        wcag_aa: Passes AA for the text size
        wcag_aaa: Passes AAA for the text size
        passes: Verdict under the requested standard
        apca_score: Signed APCA Lc, only for the APCA standard
    """
    ratio: float
    wcag_aa: bool
    wcag_aaa: bool
    passes: bool
    text_size: TextSize = TextSize.NORMAL
    standard: Standard = Standard.WCAG_AA
    apca_score: Optional[float] = None

    def to_dict(self) -> dict:
        result = {
            "ratio": self.ratio,
            "wcag_aa": self.wcag_aa,
            "wcag_aaa": self.wcag_aaa,
            "passes": self.passes,
            "text_size": self.text_size.value,
            "standard": self.standard.value,
        }
        if self.apca_score is not None:
            result["apca_score"] = self.apca_score
        return result


@dataclass(frozen=True, slots=True)
class ContrastAdjustment:
    """One candidate color from the alternative-combination search."""
    color: ColorValue
    contrast_ratio: float
    passes: bool
    apca_score: Optional[float] = None

    def to_dict(self) -> dict:
        result = {
            "color": self.color.hex,
            "contrast_ratio": self.contrast_ratio,
            "passes": self.passes,
        }
        if self.apca_score is not None:
            result["apca_score"] = self.apca_score
        return result


@dataclass(frozen=True, slots=True)
class AlternativeCombinations:
    """Best lightness adjustments for each side (at most 5, best first)."""
    foreground_adjustments: tuple[ContrastAdjustment, ...]
    background_adjustments: tuple[ContrastAdjustment, ...]

    def to_dict(self) -> dict:
        return {
            "foreground_adjustments": [a.to_dict() for a in self.foreground_adjustments],
            "background_adjustments": [a.to_dict() for a in self.background_adjustments],
        }


@dataclass(frozen=True, slots=True)
class ContrastReport:
    """Full answer to a contrast check, with advice and alternatives."""
    foreground: ColorValue
    background: ColorValue
    check: ContrastCheck
    recommendations: tuple[str, ...]
    alternatives: Optional[AlternativeCombinations] = None
    accessibility_notes: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        compliance = {
            "wcag_aa": self.check.wcag_aa,
            "wcag_aaa": self.check.wcag_aaa,
            "passes": self.check.passes,
        }
        if self.check.standard is Standard.APCA:
            compliance["apca_passes"] = self.check.passes
        result = {
            "foreground": self.foreground.hex,
            "background": self.background.hex,
            "contrast_ratio": self.check.ratio,
            "text_size": self.check.text_size.value,
            "standard": self.check.standard.value,
            "compliance": compliance,
            "recommendations": list(self.recommendations),
            "accessibility_notes": list(self.accessibility_notes),
        }
        if self.check.apca_score is not None:
            result["apca_score"] = self.check.apca_score
        if self.alternatives is not None:
            result["alternative_combinations"] = self.alternatives.to_dict()
        return result


# =============================================================================
# Colorblindness simulation
# =============================================================================


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """
    One simulated color.

    Attributes:
        original: Input color
        simulated: Color as perceived with the deficiency
        difference_score: Raw Lab Euclidean distance (2 decimals)
        impact: Bucket over the unrounded difference
    """
    original: ColorValue
    simulated: ColorValue
    difference_score: float
    impact: AccessibilityImpact

    def to_dict(self) -> dict:
        return {
            "original_color": self.original.hex,
            "simulated_color": self.simulated.hex,
            "difference_score": self.difference_score,
            "accessibility_impact": self.impact.value,
        }


@dataclass(frozen=True, slots=True)
class SimulationSummary:
    total_colors: int
    colors_affected: int
    average_difference: float
    accessibility_concerns: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "total_colors": self.total_colors,
            "colors_affected": self.colors_affected,
            "average_difference": self.average_difference,
            "accessibility_concerns": list(self.accessibility_concerns),
        }


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Batch simulation; ``results`` follow input order."""
    deficiency_type: DeficiencyType
    severity: float
    results: tuple[SimulationResult, ...]
    summary: SimulationSummary
    recommendations: tuple[str, ...]
    accessibility_notes: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "deficiency_type": self.deficiency_type.value,
            "severity": self.severity,
            "results": [r.to_dict() for r in self.results],
            "summary": self.summary.to_dict(),
            "recommendations": list(self.recommendations),
            "accessibility_notes": list(self.accessibility_notes),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# =============================================================================
# Accessibility optimization
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastImprovement:
    """Contrast against white before and after optimization."""
    before: float
    after: float
    improvement_percentage: float

    def to_dict(self) -> dict:
        return {
            "before": self.before,
            "after": self.after,
            "improvement_percentage": self.improvement_percentage,
        }


@dataclass(frozen=True, slots=True)
class ComplianceChange:
    wcag_aa_before: bool
    wcag_aa_after: bool
    wcag_aaa_before: bool
    wcag_aaa_after: bool

    def to_dict(self) -> dict:
        return {
            "wcag_aa_before": self.wcag_aa_before,
            "wcag_aa_after": self.wcag_aa_after,
            "wcag_aaa_before": self.wcag_aaa_before,
            "wcag_aaa_after": self.wcag_aaa_after,
        }


@dataclass(frozen=True, slots=True)
class HuePreservation:
    hue_changed: bool
    hue_difference: float

    def to_dict(self) -> dict:
        return {
            "hue_changed": self.hue_changed,
            "hue_difference": self.hue_difference,
        }


@dataclass(frozen=True, slots=True)
class OptimizationResult:
    """One (color × use case) optimization outcome."""
    original: ColorValue
    optimized: ColorValue
    use_case: UseCase
    optimization_applied: bool
    changes_made: tuple[str, ...]
    contrast_improvement: ContrastImprovement
    accessibility_compliance: ComplianceChange
    hue_preservation: HuePreservation

    def to_dict(self) -> dict:
        return {
            "original_color": self.original.hex,
            "optimized_color": self.optimized.hex,
            "use_case": self.use_case.value,
            "optimization_applied": self.optimization_applied,
            "changes_made": list(self.changes_made),
            "contrast_improvement": self.contrast_improvement.to_dict(),
            "accessibility_compliance": self.accessibility_compliance.to_dict(),
            "hue_preservation": self.hue_preservation.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ColorPairing:
    """Optimized text color on an optimized background color."""
    foreground: ColorValue
    background: ColorValue
    contrast_ratio: float
    compliant: bool
    use_case: str = "text_on_background"

    def to_dict(self) -> dict:
        return {
            "foreground": self.foreground.hex,
            "background": self.background.hex,
            "contrast_ratio": self.contrast_ratio,
            "use_case": self.use_case,
            "compliant": self.compliant,
        }


@dataclass(frozen=True, slots=True)
class OptimizationSummary:
    total_colors: int
    colors_optimized: int
    colors_preserved: int
    average_contrast_improvement: float
    compliance_rate_before: float
    compliance_rate_after: float

    def to_dict(self) -> dict:
        return {
            "total_colors": self.total_colors,
            "colors_optimized": self.colors_optimized,
            "colors_preserved": self.colors_preserved,
            "average_contrast_improvement": self.average_contrast_improvement,
            "compliance_rate_before": self.compliance_rate_before,
            "compliance_rate_after": self.compliance_rate_after,
        }


@dataclass(frozen=True, slots=True)
class OptimizationReport:
    """Batch optimization; results are color-major, then use-case order."""
    target_standard: Standard
    preserve_hue: bool
    results: tuple[OptimizationResult, ...]
    summary: OptimizationSummary
    recommended_pairings: tuple[ColorPairing, ...]
    accessibility_notes: tuple[str, ...]
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "target_standard": self.target_standard.value,
            "preserve_hue": self.preserve_hue,
            "optimization_results": [r.to_dict() for r in self.results],
            "summary": self.summary.to_dict(),
            "recommended_pairings": [p.to_dict() for p in self.recommended_pairings],
            "accessibility_notes": list(self.accessibility_notes),
            "recommendations": list(self.recommendations),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
