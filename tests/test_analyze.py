# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""Tests for whole-color analysis and its scored summary."""

import json

import pytest

from hueguard import analyze_color, summarize_analysis
from hueguard.schema import (
    BackgroundChoice,
    BrightnessCategory,
    ColorValue,
    PerceptualDifference,
    Temperature,
)

BLACK = ColorValue(0, 0, 0)
WHITE = ColorValue(255, 255, 255)
RED = ColorValue(255, 0, 0)
BLUE = ColorValue(0, 0, 255)
GREEN = ColorValue(0, 255, 0)
GRAY = ColorValue(128, 128, 128)


class TestAnalyzeColor:

    def test_bundle(self):
        analysis = analyze_color(RED)
        assert analysis.color == RED
        assert analysis.brightness.perceived_brightness == 76
        assert analysis.temperature.temperature is Temperature.WARM
        assert analysis.contrast.best_background is BackgroundChoice.BLACK
        assert analysis.accessibility.wcag_aa_normal
        assert analysis.distance is None

    def test_with_comparison(self):
        analysis = analyze_color(RED, GREEN)
        assert analysis.distance is not None
        assert analysis.distance.perceptual_difference is PerceptualDifference.VERY_DIFFERENT

    def test_comparison_with_itself(self):
        analysis = analyze_color(GRAY, GRAY)
        assert analysis.distance.cie2000 == 0.0

    def test_to_dict(self):
        d = analyze_color(RED).to_dict()
        assert d["color"] == "#FF0000"
        assert "distance" not in d
        assert d["brightness"]["brightness_category"] == "dark"

    def test_to_json_with_distance(self):
        data = json.loads(analyze_color(RED, GREEN).to_json())
        assert data["distance"]["perceptual_difference"] == "very_different"

    def test_notes_and_advice_serialized(self):
        analysis = analyze_color(RED)
        d = analysis.to_dict()
        assert d["accessibility_notes"] == list(analysis.accessibility_notes)
        assert d["recommendations"] == list(analysis.recommendations)


class TestAnalysisAdvice:

    def test_red(self):
        analysis = analyze_color(RED)
        assert analysis.accessibility_notes == ("May be difficult for color-blind users",)
        assert analysis.recommendations == (
            "This color may be difficult for color-blind users to distinguish",
            "This warm color works well for energetic, friendly designs",
        )

    def test_very_dark_suggests_light_text(self):
        analysis = analyze_color(BLACK)
        assert analysis.accessibility_notes == ()
        assert analysis.recommendations[0] == (
            "Consider using white or light text on this background"
        )

    def test_very_light_suggests_dark_text(self):
        analysis = analyze_color(WHITE)
        assert "Consider using dark text on this background" in analysis.recommendations
        assert (
            "Consider using white or light text on this background"
            not in analysis.recommendations
        )

    def test_cool_color(self):
        analysis = analyze_color(BLUE)
        assert analysis.recommendations == (
            "Consider using white or light text on this background",
            "This cool color works well for professional, calming designs",
        )

    def test_neutral_medium_color_has_no_extra_advice(self):
        # Yellow-green band, medium brightness
        color = ColorValue.from_hsl(120, 20, 45)
        analysis = analyze_color(color)
        assert analysis.temperature.temperature is Temperature.NEUTRAL
        assert analysis.recommendations == analysis.accessibility.recommendations

    @pytest.mark.parametrize("hex_color", ["#000000", "#FF0000", "#00FF00", "#3366CC", "#F0E68C"])
    def test_recommendations_bounded(self, hex_color):
        assert len(analyze_color(ColorValue.from_hex(hex_color)).recommendations) <= 5


class TestSummarizeAnalysis:

    def test_black(self):
        summary = summarize_analysis(analyze_color(BLACK))
        # AAA (+10) clamps back to 100
        assert summary.overall_score == 100
        assert summary.primary_issues == ()
        assert summary.strengths == (
            "Excellent contrast for text",
            "Color-blind friendly",
            "High contrast potential",
        )

    def test_red(self):
        summary = summarize_analysis(analyze_color(RED))
        # AA only, not color-blind safe, dark brightness, warm
        assert summary.overall_score == 80
        assert summary.primary_issues == ("May be problematic for color-blind users",)
        assert summary.strengths == ("Good contrast for text", "Clear warm temperature")

    def test_gray(self):
        summary = summarize_analysis(analyze_color(GRAY))
        assert analyze_color(GRAY).brightness.brightness_category is BrightnessCategory.MEDIUM
        assert summary.overall_score == 90
        assert summary.primary_issues == ("Medium brightness may limit contrast options",)

    def test_at_most_three_items(self):
        for color in (BLACK, RED, GREEN, GRAY, ColorValue(120, 200, 40)):
            summary = summarize_analysis(analyze_color(color))
            assert len(summary.primary_issues) <= 3
            assert len(summary.strengths) <= 3

    @pytest.mark.parametrize("hex_color", ["#000000", "#FFFFFF", "#808080", "#3366CC"])
    def test_score_bounded(self, hex_color):
        summary = summarize_analysis(analyze_color(ColorValue.from_hex(hex_color)))
        assert 0 <= summary.overall_score <= 100
