# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""Tests for color vision deficiency simulation."""

import numpy as np
import pytest

from hueguard.analysis.colorblind import (
    CVD_MATRICES,
    classify_impact,
    color_difference,
    simulate_color,
    simulate_colorblindness,
    simulate_deficiency,
)
from hueguard.schema import AccessibilityImpact, ColorValue, DeficiencyType

BLACK = ColorValue(0, 0, 0)
WHITE = ColorValue(255, 255, 255)
RED = ColorValue(255, 0, 0)
GREEN = ColorValue(0, 255, 0)
BLUE = ColorValue(0, 0, 255)

SAMPLE_COLORS = [
    BLACK, WHITE, RED, GREEN, BLUE,
    ColorValue(18, 52, 86), ColorValue(200, 100, 50), ColorValue(250, 200, 10),
]


# ---------------------------------------------------------------------------
# Single color transform
# ---------------------------------------------------------------------------

class TestSimulateDeficiency:

    @pytest.mark.parametrize("deficiency", list(DeficiencyType))
    def test_zero_severity_is_identity(self, deficiency):
        for color in SAMPLE_COLORS:
            simulated = simulate_deficiency(color, deficiency, severity=0)
            assert all(abs(a - b) <= 1 for a, b in zip(simulated.rgb, color.rgb))

    def test_monochromacy_collapses_channels(self):
        for color in SAMPLE_COLORS:
            simulated = simulate_deficiency(color, DeficiencyType.MONOCHROMACY)
            assert simulated.r == simulated.g == simulated.b

    @pytest.mark.parametrize("deficiency", list(DeficiencyType))
    def test_white_and_black_unchanged(self, deficiency):
        assert simulate_deficiency(WHITE, deficiency) == WHITE
        assert simulate_deficiency(BLACK, deficiency) == BLACK

    def test_protanopia_red(self):
        simulated = simulate_deficiency(RED, DeficiencyType.PROTANOPIA)
        # Linear (1, 0, 0) maps to (0.567, 0.558, 0)
        assert simulated.b == 0
        assert abs(simulated.r - simulated.g) <= 2
        assert 190 <= simulated.r <= 200

    def test_anomaly_shares_family_matrix(self):
        assert CVD_MATRICES[DeficiencyType.PROTANOMALY] is CVD_MATRICES[DeficiencyType.PROTANOPIA]
        full = simulate_deficiency(RED, "protanomaly", 100)
        assert full == simulate_deficiency(RED, "protanopia", 100)

    def test_partial_severity_lies_between(self):
        half = simulate_deficiency(RED, DeficiencyType.DEUTERANOPIA, 50)
        full = simulate_deficiency(RED, DeficiencyType.DEUTERANOPIA, 100)
        assert full.g <= half.g <= RED.g or full.g >= half.g >= RED.g
        assert half != RED

    def test_matrices_read_only(self):
        matrix = CVD_MATRICES[DeficiencyType.TRITANOPIA]
        with pytest.raises(ValueError):
            matrix[0, 0] = 1.0
        np.testing.assert_allclose(matrix.sum(axis=1), 1.0)

    @pytest.mark.parametrize("severity", [-1, 100.5, 250])
    def test_severity_out_of_range(self, severity):
        with pytest.raises(ValueError, match="Severity"):
            simulate_deficiency(RED, DeficiencyType.PROTANOPIA, severity)

    def test_severity_not_a_number(self):
        with pytest.raises(TypeError):
            simulate_deficiency(RED, DeficiencyType.PROTANOPIA, "high")

    def test_unknown_deficiency(self):
        with pytest.raises(ValueError):
            simulate_deficiency(RED, "achromatopsia")


class TestImpact:

    @pytest.mark.parametrize("difference, expected", [
        (0.0, AccessibilityImpact.NONE),
        (4.99, AccessibilityImpact.NONE),
        (5.0, AccessibilityImpact.MINIMAL),
        (15.0, AccessibilityImpact.MODERATE),
        (29.99, AccessibilityImpact.MODERATE),
        (30.0, AccessibilityImpact.SEVERE),
    ])
    def test_breakpoints(self, difference, expected):
        assert classify_impact(difference) is expected

    def test_color_difference_identity(self):
        assert color_difference(RED, RED) == 0.0

    def test_red_under_protanopia_is_severe(self):
        result = simulate_color(RED, DeficiencyType.PROTANOPIA)
        assert result.difference_score > 30
        assert result.impact is AccessibilityImpact.SEVERE

    def test_gray_unaffected(self):
        result = simulate_color(ColorValue(128, 128, 128), DeficiencyType.DEUTERANOPIA)
        assert result.impact is AccessibilityImpact.NONE


# ---------------------------------------------------------------------------
# Batch simulation
# ---------------------------------------------------------------------------

class TestSimulateColorblindness:

    def test_results_follow_input_order(self):
        colors = [RED, GREEN, BLUE]
        report = simulate_colorblindness(colors, "deuteranopia")
        assert [r.original for r in report.results] == colors
        assert report.summary.total_colors == 3

    def test_summary_and_recommendations(self):
        report = simulate_colorblindness([RED, GREEN], DeficiencyType.PROTANOPIA)
        assert report.summary.colors_affected == 2
        assert report.summary.accessibility_concerns[0] == (
            "2 out of 2 colors are significantly affected"
        )
        assert "Avoid red-green color combinations" in report.recommendations
        assert report.recommendations[-2:] == (
            "Use text labels or icons in addition to color coding",
            "Ensure sufficient contrast ratios for text readability",
        )

    def test_grays_have_no_concerns(self):
        grays = [ColorValue(v, v, v) for v in (0, 64, 128, 255)]
        report = simulate_colorblindness(grays, DeficiencyType.TRITANOPIA)
        assert report.summary.colors_affected == 0
        assert report.summary.accessibility_concerns == ()
        assert report.recommendations[0] == "Avoid blue-yellow color combinations"

    def test_notes(self):
        report = simulate_colorblindness([RED, GREEN], DeficiencyType.PROTANOPIA)
        assert report.accessibility_notes == (
            "2 colors show significant changes for protanopia users",
            "Consider using alternative color combinations for better accessibility",
        )
        assert report.to_dict()["accessibility_notes"] == list(report.accessibility_notes)

    def test_grays_have_no_notes(self):
        grays = [ColorValue(v, v, v) for v in (0, 64, 128, 255)]
        report = simulate_colorblindness(grays, DeficiencyType.DEUTERANOPIA)
        assert report.accessibility_notes == ()

    def test_monochromacy_advice(self):
        report = simulate_colorblindness([RED], DeficiencyType.MONOCHROMACY)
        assert "Use patterns, textures, or labels in addition to color" in report.recommendations

    def test_anomaly_concern(self):
        report = simulate_colorblindness([RED], DeficiencyType.PROTANOMALY, severity=60)
        assert (
            "Moderate to severe color vision anomaly simulation"
            in report.summary.accessibility_concerns
        )
        mild = simulate_colorblindness([RED], DeficiencyType.PROTANOMALY, severity=50)
        assert (
            "Moderate to severe color vision anomaly simulation"
            not in mild.summary.accessibility_concerns
        )

    def test_empty_list(self):
        with pytest.raises(ValueError, match="At least one color"):
            simulate_colorblindness([], DeficiencyType.PROTANOPIA)

    def test_bad_entry_fails_whole_call(self):
        with pytest.raises(TypeError, match="index 1"):
            simulate_colorblindness([RED, "#00FF00"], DeficiencyType.PROTANOPIA)

    def test_bad_severity_fails_before_work(self):
        with pytest.raises(ValueError):
            simulate_colorblindness([RED], DeficiencyType.PROTANOPIA, severity=101)

    def test_to_json(self):
        report = simulate_colorblindness([RED], "protanopia")
        assert '"deficiency_type": "protanopia"' in report.to_json()
