# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Accessibility optimizer.

Not a search: each use case has one fixed lightness/saturation rule that is
evaluated once. Hue is passed through untouched by every rule.

Rules (HSL percentages):
- text:        l > 50 → max(20, l - 30); s → min(100, s + 10)
- background:  l < 80 → max(85, l + 20); s > 30 → max(10, s - 20)
- accent:      l > 70 or l < 30 → 50; s < 60 → min(80, s + 20)
- interactive: l > 60 → max(40, l - 20); l < 40 → min(60, l + 20);
               s < 50 → min(70, s + 15)

Contrast improvement is always measured on pure white, whatever the use
case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from hueguard.schema import (
    ColorPairing,
    ColorValue,
    ComplianceChange,
    ContrastImprovement,
    HuePreservation,
    OptimizationReport,
    OptimizationResult,
    OptimizationSummary,
    Standard,
    UseCase,
)
from hueguard.analysis.colorspace import round_channel, round_half_up
from hueguard.analysis.contrast import (
    analyze_accessibility,
    check_contrast,
    contrast_against_white,
)

logger = logging.getLogger(__name__)


BRAND_PRESERVED_NOTE = "Color preserved as brand color"

# Channel difference below which two colors count as unchanged
_CHANNEL_TOLERANCE = 2
# HSL change (points or degrees) worth reporting
_REPORTABLE_CHANGE = 5
_MAX_PAIRINGS = 10
_TARGET_COMPLIANCE_RATE = 80


@dataclass(frozen=True)
class OptimizationConfig:
    """Configuration for a batch optimization."""

    # Standard the compliance rates are judged against (WCAG_AA or WCAG_AAA)
    target_standard: Standard = Standard.WCAG_AA

    # Kept for compatibility: no rule alters hue either way. Only the change
    # report and the recommendations read it.
    preserve_hue: bool = True

    # Colors returned unmodified, matched by value. Hex strings are parsed.
    preserve_brand_colors: tuple[ColorValue, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalize string values and validate the standard and brand colors."""
        standard = self.target_standard
        if not isinstance(standard, Standard):
            standard = Standard(standard)
        if standard is Standard.APCA:
            raise ValueError("Target standard must be WCAG_AA or WCAG_AAA")
        object.__setattr__(self, "target_standard", standard)

        brand_colors = []
        for index, color in enumerate(self.preserve_brand_colors):
            if isinstance(color, str):
                color = ColorValue.from_hex(color)
            elif not isinstance(color, ColorValue):
                raise TypeError(
                    f"Brand color at index {index} must be a ColorValue or hex "
                    f"string, got {type(color).__name__}"
                )
            brand_colors.append(color)
        object.__setattr__(self, "preserve_brand_colors", tuple(brand_colors))


def _use_case(value: Union[UseCase, str]) -> UseCase:
    return value if isinstance(value, UseCase) else UseCase(value)


# =============================================================================
# Rules
# =============================================================================


def _text_rule(s: float, l: float) -> tuple[float, float]:
    if l > 50:
        l = max(20, l - 30)
    return min(100, s + 10), l


def _background_rule(s: float, l: float) -> tuple[float, float]:
    if l < 80:
        l = max(85, l + 20)
    if s > 30:
        s = max(10, s - 20)
    return s, l


def _accent_rule(s: float, l: float) -> tuple[float, float]:
    if l > 70 or l < 30:
        l = 50
    if s < 60:
        s = min(80, s + 20)
    return s, l


def _interactive_rule(s: float, l: float) -> tuple[float, float]:
    if l > 60:
        l = max(40, l - 20)
    elif l < 40:
        l = min(60, l + 20)
    if s < 50:
        s = min(70, s + 15)
    return s, l


_RULES = {
    UseCase.TEXT: _text_rule,
    UseCase.BACKGROUND: _background_rule,
    UseCase.ACCENT: _accent_rule,
    UseCase.INTERACTIVE: _interactive_rule,
}


def apply_use_case_rule(color: ColorValue, use_case: Union[UseCase, str]) -> ColorValue:
    """Apply the fixed lightness/saturation rule for a use case. Hue is kept."""
    h, s, l = color.hsl
    new_s, new_l = _RULES[_use_case(use_case)](s, l)
    return ColorValue.from_hsl(h, new_s, new_l)


def colors_equal(color1: ColorValue, color2: ColorValue) -> bool:
    """True when every channel differs by less than 2."""
    return all(
        abs(c1 - c2) < _CHANNEL_TOLERANCE
        for c1, c2 in zip(color1.rgb, color2.rgb)
    )


def hue_distance(color1: ColorValue, color2: ColorValue) -> float:
    """
    Shortest angle between two hues, in degrees (0-180).

    A gray has no meaningful hue (HSL reports 0), so the distance is 0
    whenever either color has zero saturation.
    """
    hsl1, hsl2 = color1.hsl, color2.hsl
    if hsl1.s == 0 or hsl2.s == 0:
        return 0.0
    difference = abs(hsl1.h - hsl2.h) % 360
    return min(difference, 360 - difference)


# =============================================================================
# Single color
# =============================================================================


def _describe_changes(
    original: ColorValue,
    optimized: ColorValue,
    preserve_hue: bool,
) -> list[str]:
    before = original.hsl
    after = optimized.hsl
    changes = []
    if abs(before.l - after.l) > _REPORTABLE_CHANGE:
        changes.append(
            f"Lightness adjusted from {round_channel(before.l)}% "
            f"to {round_channel(after.l)}%"
        )
    if abs(before.s - after.s) > _REPORTABLE_CHANGE:
        changes.append(
            f"Saturation adjusted from {round_channel(before.s)}% "
            f"to {round_channel(after.s)}%"
        )
    if not preserve_hue and hue_distance(original, optimized) > _REPORTABLE_CHANGE:
        changes.append(
            f"Hue adjusted from {round_channel(before.h)}° "
            f"to {round_channel(after.h)}°"
        )
    return changes


def optimize_color(
    color: ColorValue,
    use_case: Union[UseCase, str],
    *,
    preserve_hue: bool = True,
    preserve_brand: bool = False,
) -> OptimizationResult:
    """
    Optimize one color for one use case.

    Args:
        color: Input color
        use_case: "text", "background", "accent" or "interactive"
        preserve_hue: Reporting flag only; the rules never rotate hue
        preserve_brand: Skip the rule and report the color unmodified

    Returns:
        OptimizationResult. ``optimization_applied`` is decided by the RGB
        channel tolerance, not by comparing HSL. The hue record uses
        ``hue_distance``, so a color washed out to gray reports no change.
    """
    use_case = _use_case(use_case)

    if preserve_brand:
        optimized = color
        applied = False
        changes = [BRAND_PRESERVED_NOTE]
    else:
        optimized = apply_use_case_rule(color, use_case)
        applied = not colors_equal(color, optimized)
        changes = _describe_changes(color, optimized, preserve_hue) if applied else []

    contrast_before = contrast_against_white(color)
    contrast_after = contrast_against_white(optimized)
    improvement = (
        (contrast_after - contrast_before) / contrast_before * 100
        if contrast_before > 0 else 0.0
    )

    compliance_before = analyze_accessibility(color)
    compliance_after = analyze_accessibility(optimized)

    hue_difference = hue_distance(color, optimized)

    return OptimizationResult(
        original=color,
        optimized=optimized,
        use_case=use_case,
        optimization_applied=applied,
        changes_made=tuple(changes),
        contrast_improvement=ContrastImprovement(
            before=contrast_before,
            after=contrast_after,
            improvement_percentage=round_half_up(improvement, 2),
        ),
        accessibility_compliance=ComplianceChange(
            wcag_aa_before=compliance_before.wcag_aa_normal,
            wcag_aa_after=compliance_after.wcag_aa_normal,
            wcag_aaa_before=compliance_before.wcag_aaa_normal,
            wcag_aaa_after=compliance_after.wcag_aaa_normal,
        ),
        hue_preservation=HuePreservation(
            hue_changed=hue_difference > _REPORTABLE_CHANGE,
            hue_difference=round_half_up(hue_difference, 2),
        ),
    )


# =============================================================================
# Batch
# =============================================================================


def _compliant(result: OptimizationResult, standard: Standard, after: bool) -> bool:
    compliance = result.accessibility_compliance
    if standard is Standard.WCAG_AAA:
        return compliance.wcag_aaa_after if after else compliance.wcag_aaa_before
    return compliance.wcag_aa_after if after else compliance.wcag_aa_before


def recommend_pairings(
    results: Sequence[OptimizationResult],
    target_standard: Standard = Standard.WCAG_AA,
) -> tuple[ColorPairing, ...]:
    """
    Pair every optimized text color with every optimized background color.

    Returns:
        Up to 10 pairings, best contrast first
    """
    texts = [r for r in results if r.use_case is UseCase.TEXT]
    backgrounds = [r for r in results if r.use_case is UseCase.BACKGROUND]

    pairings = []
    for text in texts:
        for background in backgrounds:
            check = check_contrast(text.optimized, background.optimized)
            compliant = (
                check.wcag_aaa if target_standard is Standard.WCAG_AAA
                else check.wcag_aa
            )
            pairings.append(ColorPairing(
                foreground=text.optimized,
                background=background.optimized,
                contrast_ratio=check.ratio,
                compliant=compliant,
            ))

    pairings.sort(key=lambda p: p.contrast_ratio, reverse=True)
    return tuple(pairings[:_MAX_PAIRINGS])


def _accessibility_notes(
    results: Sequence[OptimizationResult],
    target_standard: Standard,
) -> tuple[str, ...]:
    notes = []
    optimized = sum(1 for r in results if r.optimization_applied)
    if optimized > 0:
        notes.append(f"{optimized} colors were optimized for better accessibility")

    improved = sum(
        1 for r in results
        if not _compliant(r, target_standard, after=False)
        and _compliant(r, target_standard, after=True)
    )
    if improved > 0:
        notes.append(f"{improved} colors now meet {target_standard.value} standards")

    hue_changes = sum(1 for r in results if r.hue_preservation.hue_changed)
    if hue_changes > 0:
        notes.append(f"{hue_changes} colors had hue adjustments for accessibility")
    return tuple(notes)


def _recommendations(
    results: Sequence[OptimizationResult],
    rate_before: float,
    rate_after: float,
    preserve_hue: bool,
) -> tuple[str, ...]:
    recommendations = []
    improvement = rate_after - rate_before
    if improvement > 20:
        recommendations.append("Significant accessibility improvements achieved")
    elif improvement > 0:
        recommendations.append("Moderate accessibility improvements made")

    if rate_after < _TARGET_COMPLIANCE_RATE:
        recommendations.append("Consider further adjustments for better compliance")

    if preserve_hue:
        recommendations.append("Hue preservation maintained brand consistency")
    else:
        recommendations.append("Hue adjustments may require brand guideline updates")

    still_failing = sum(
        1 for r in results if not r.accessibility_compliance.wcag_aa_after
    )
    if still_failing > 0:
        recommendations.append(f"{still_failing} colors still need manual review")

    recommendations.append("Test optimized colors with actual users")
    recommendations.append("Validate color combinations in real UI contexts")
    return tuple(recommendations)


def optimize_for_accessibility(
    palette: Sequence[ColorValue],
    use_cases: Sequence[Union[UseCase, str]],
    config: Optional[OptimizationConfig] = None,
) -> OptimizationReport:
    """
    Optimize every palette color for every requested use case.

    All inputs are validated before any rule runs. Results are ordered by
    palette color first, then by use case in the order given.

    Args:
        palette: Non-empty sequence of ColorValue
        use_cases: Non-empty sequence of use cases
        config: Standard, hue flag and brand colors (defaults if None)

    Raises:
        ValueError: Empty palette or use cases, unknown use case
        TypeError: A palette entry is not a ColorValue
    """
    if config is None:
        config = OptimizationConfig()
    if not palette:
        raise ValueError("Palette must contain at least one color")
    if not use_cases:
        raise ValueError("At least one use case is required")
    for index, color in enumerate(palette):
        if not isinstance(color, ColorValue):
            raise TypeError(
                f"Color at index {index} must be a ColorValue, "
                f"got {type(color).__name__}"
            )
    cases = [_use_case(uc) for uc in use_cases]
    brand_colors = frozenset(config.preserve_brand_colors)

    logger.debug(
        "Optimizing %d colors for %s (target %s)",
        len(palette), ", ".join(uc.value for uc in cases),
        config.target_standard.value,
    )

    results = []
    for color in palette:
        preserve = color in brand_colors
        if preserve:
            logger.debug("Preserving brand color %s", color.hex)
        for use_case in cases:
            results.append(optimize_color(
                color,
                use_case,
                preserve_hue=config.preserve_hue,
                preserve_brand=preserve,
            ))

    total = len(results)
    optimized = sum(1 for r in results if r.optimization_applied)
    compliant_before = sum(
        1 for r in results if _compliant(r, config.target_standard, after=False)
    )
    compliant_after = sum(
        1 for r in results if _compliant(r, config.target_standard, after=True)
    )
    average_improvement = (
        sum(r.contrast_improvement.improvement_percentage for r in results) / total
    )
    rate_before = compliant_before / total * 100
    rate_after = compliant_after / total * 100

    return OptimizationReport(
        target_standard=config.target_standard,
        preserve_hue=config.preserve_hue,
        results=tuple(results),
        summary=OptimizationSummary(
            total_colors=len(palette),
            colors_optimized=optimized,
            colors_preserved=total - optimized,
            average_contrast_improvement=round_half_up(average_improvement, 2),
            compliance_rate_before=round_half_up(rate_before, 2),
            compliance_rate_after=round_half_up(rate_after, 2),
        ),
        recommended_pairings=recommend_pairings(results, config.target_standard),
        accessibility_notes=_accessibility_notes(results, config.target_standard),
        recommendations=_recommendations(
            results, rate_before, rate_after, config.preserve_hue,
        ),
    )
