# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""Tests for linearization curves, HSL, Lab and hex conversions."""

import numpy as np
import pytest

from hueguard.analysis.colorspace import (
    apca_linearize,
    gamma_decode,
    gamma_encode,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz_d50,
    round_channel,
    round_half_up,
    wcag_linearize,
)


class TestRounding:

    def test_half_up_on_ties(self):
        assert round_half_up(0.125, 2) == pytest.approx(0.13)
        assert round_half_up(2.5, 0) == 3.0

    def test_negative_values_round_toward_positive(self):
        assert round_half_up(-1.005 * 100, 0) == pytest.approx(-100.0)
        assert round_half_up(-2.5, 0) == -2.0

    def test_round_channel(self):
        assert round_channel(127.5) == 128
        assert round_channel(127.49) == 127
        assert isinstance(round_channel(3.0), int)


class TestLinearization:

    def test_endpoints(self):
        for fn in (wcag_linearize, apca_linearize, gamma_decode):
            assert fn(0) == 0.0
            assert fn(255) == pytest.approx(1.0)

    def test_piecewise_segments(self):
        # 10/255 = 0.0392 is on the linear segment, 11/255 = 0.0431 on the power one
        for fn in (wcag_linearize, apca_linearize):
            assert fn(10) == pytest.approx((10 / 255) / 12.92)
            assert fn(11) == pytest.approx(((11 / 255 + 0.055) / 1.055) ** 2.4)

    def test_gamma_decode_is_plain_power(self):
        assert gamma_decode(128) == pytest.approx((128 / 255) ** 2.2)

    def test_gamma_roundtrip(self):
        for channel in (0, 1, 17, 64, 128, 200, 254, 255):
            assert abs(gamma_encode(gamma_decode(channel)) - channel) <= 1

    def test_gamma_encode_clamps(self):
        assert gamma_encode(-0.5) == 0
        assert gamma_encode(1.7) == 255


class TestHSL:

    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 100.0, 50.0))
        h, s, l = rgb_to_hsl(0, 255, 0)
        assert h == pytest.approx(120.0)
        h, s, l = rgb_to_hsl(0, 0, 255)
        assert h == pytest.approx(240.0)

    def test_achromatic(self):
        assert rgb_to_hsl(128, 128, 128)[:2] == (0.0, 0.0)
        assert rgb_to_hsl(255, 255, 255) == (0.0, 0.0, 100.0)
        assert rgb_to_hsl(0, 0, 0) == (0.0, 0.0, 0.0)

    def test_hue_in_range(self):
        h, _, _ = rgb_to_hsl(255, 0, 1)
        assert 0.0 <= h < 360.0

    def test_hsl_to_rgb(self):
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(120, 100, 25) == (0, 128, 0)
        assert hsl_to_rgb(0, 0, 100) == (255, 255, 255)

    def test_hsl_to_rgb_wraps_and_clamps(self):
        assert hsl_to_rgb(360, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50)
        assert hsl_to_rgb(0, 150, 120) == (255, 255, 255)

    def test_roundtrip(self):
        for rgb in [(18, 52, 86), (200, 100, 50), (1, 2, 3), (250, 250, 10)]:
            back = hsl_to_rgb(*rgb_to_hsl(*rgb))
            assert all(abs(a - b) <= 1 for a, b in zip(back, rgb))


class TestLab:

    def test_white_is_reference(self):
        L, a, b = rgb_to_lab(255, 255, 255)
        assert L == pytest.approx(100.0, abs=0.01)
        assert a == pytest.approx(0.0, abs=0.05)
        assert b == pytest.approx(0.0, abs=0.05)

    def test_black(self):
        assert rgb_to_lab(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_red_d50(self):
        L, a, b = rgb_to_lab(255, 0, 0)
        assert L == pytest.approx(54.29, abs=0.1)
        assert a == pytest.approx(80.8, abs=0.5)
        assert b == pytest.approx(69.9, abs=0.5)

    def test_vectorized_shape(self):
        xyz = rgb_to_xyz_d50(np.zeros((4, 2, 3)))
        assert xyz.shape == (4, 2, 3)


class TestHex:

    def test_parse(self):
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    def test_format_uppercase(self):
        assert rgb_to_hex(255, 128, 0) == "#FF8000"
        assert rgb_to_hex(0, 0, 0) == "#000000"

    @pytest.mark.parametrize("value", ["#FFF", "#GGGGGG", "", "#+1+1+1"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            hex_to_rgb(value)
