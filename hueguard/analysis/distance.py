# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (ΔE) in CIE L*a*b*.

Three variants are reported side by side:
- CIE76: plain Euclidean distance
- CIE94: chroma/hue weighted distance (graphic-arts constants)
- CIE2000 (simplified): an approximation that mixes the adjusted chroma
  difference with the unadjusted a*/b* differences. It is NOT the full
  CIEDE2000 formula; its values are part of the published output.

Reference thresholds (CIE2000 scale, 0-100):
- < 1:    identical
- < 2.3:  very similar (just noticeable difference)
- < 5:    similar
- < 10:   different
- >= 10:  very different
"""

from __future__ import annotations

import math

from hueguard.schema import ColorValue, DistanceAnalysis, PerceptualDifference
from hueguard.schema.color_value import LAB
from hueguard.analysis.colorspace import round_half_up


# CIE94 graphic-arts constants
_CIE94_K1 = 0.045
_CIE94_K2 = 0.015
_CIE94_KL = 1.0
_CIE94_KC = 1.0
_CIE94_KH = 1.0

_TWENTY_FIVE_POW_7 = 25.0 ** 7

DIFFERENCE_BREAKPOINTS = (
    (1.0, PerceptualDifference.IDENTICAL),
    (2.3, PerceptualDifference.VERY_SIMILAR),
    (5.0, PerceptualDifference.SIMILAR),
    (10.0, PerceptualDifference.DIFFERENT),
)


def delta_e_cie76(lab1: LAB, lab2: LAB) -> float:
    """Euclidean distance in L*a*b*: sqrt(ΔL² + Δa² + Δb²)."""
    return math.sqrt(
        (lab2.l - lab1.l) ** 2
        + (lab2.a - lab1.a) ** 2
        + (lab2.b - lab1.b) ** 2
    )


def delta_e_cie94(lab1: LAB, lab2: LAB) -> float:
    """
    CIE94 ΔE with kL = kC = kH = 1, k1 = 0.045, k2 = 0.015.

    The weighting functions use the first color's chroma, so the metric is
    not symmetric. The hue term's radicand Δa² + Δb² - ΔC² can dip below
    zero through rounding; it is clamped to 0.
    """
    delta_l = lab1.l - lab2.l
    delta_a = lab1.a - lab2.a
    delta_b = lab1.b - lab2.b

    c1 = math.hypot(lab1.a, lab1.b)
    c2 = math.hypot(lab2.a, lab2.b)
    delta_c = c1 - c2

    delta_h = math.sqrt(max(0.0, delta_a ** 2 + delta_b ** 2 - delta_c ** 2))

    s_l = 1.0
    s_c = 1.0 + _CIE94_K1 * c1
    s_h = 1.0 + _CIE94_K2 * c1

    return math.sqrt(
        (delta_l / (_CIE94_KL * s_l)) ** 2
        + (delta_c / (_CIE94_KC * s_c)) ** 2
        + (delta_h / (_CIE94_KH * s_h)) ** 2
    )


def delta_e_cie2000(lab1: LAB, lab2: LAB) -> float:
    """
    Simplified CIE2000 ΔE.

    Applies the a* rotation factor G to get adjusted chroma, then combines
    ΔL, the adjusted ΔC', and the unadjusted Δa and Δb, halved.
    """
    delta_l = lab2.l - lab1.l
    delta_a = lab2.a - lab1.a
    delta_b = lab2.b - lab1.b

    c1 = math.hypot(lab1.a, lab1.b)
    c2 = math.hypot(lab2.a, lab2.b)
    c_bar_7 = ((c1 + c2) / 2) ** 7

    g = 0.5 * (1 - math.sqrt(c_bar_7 / (c_bar_7 + _TWENTY_FIVE_POW_7)))

    c1_prime = math.hypot(lab1.a * (1 + g), lab1.b)
    c2_prime = math.hypot(lab2.a * (1 + g), lab2.b)
    delta_c_prime = c2_prime - c1_prime

    return math.sqrt(
        delta_l ** 2 + delta_c_prime ** 2 + delta_a ** 2 + delta_b ** 2
    ) / 2


def classify_difference(cie2000: float) -> PerceptualDifference:
    """Bucket a CIE2000 value (upper bounds exclusive, ascending)."""
    for upper, bucket in DIFFERENCE_BREAKPOINTS:
        if cie2000 < upper:
            return bucket
    return PerceptualDifference.VERY_DIFFERENT


def analyze_distance(color1: ColorValue, color2: ColorValue) -> DistanceAnalysis:
    """
    All three ΔE variants between two colors, rounded to 2 decimals.

    The qualitative bucket is judged on the unrounded CIE2000 value.
    """
    lab1 = color1.lab
    lab2 = color2.lab
    cie2000 = delta_e_cie2000(lab1, lab2)
    return DistanceAnalysis(
        cie76=round_half_up(delta_e_cie76(lab1, lab2), 2),
        cie94=round_half_up(delta_e_cie94(lab1, lab2), 2),
        cie2000=round_half_up(cie2000, 2),
        perceptual_difference=classify_difference(cie2000),
    )
