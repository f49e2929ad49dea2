# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Color space helpers.

Three different sRGB linearizations live side by side in this module and
are deliberately kept apart:

- ``wcag_linearize``: WCAG 2.x piecewise curve (threshold 0.03928)
- ``apca_linearize``: piecewise sRGB curve used by the APCA score (threshold 0.04045)
- ``gamma_decode`` / ``gamma_encode``: plain 2.2 power curve used by the
  colorblindness simulator

Each feeds a different documented formula. Swapping one for another
changes published contrast and simulation values.

CIE L*a*b* follows the conversion chain sRGB → XYZ (D65) → XYZ (D50,
Bradford) → Lab, with the D50 reference white.
"""

from __future__ import annotations

import math
import string

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Rounding
# =============================================================================


def round_half_up(value: float, ndigits: int = 2) -> float:
    """
    Round with ties going toward +infinity.

    Python's ``round`` uses banker's rounding; reported values (contrast
    ratios, ΔE, APCA scores) are rounded half-up instead so that 2.345
    reports as 2.35.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_channel(value: float) -> int:
    """Round a channel value half-up to the nearest integer."""
    return int(math.floor(value + 0.5))


# =============================================================================
# Linearization curves
# =============================================================================


def wcag_linearize(channel: int) -> float:
    """
    WCAG 2.x sRGB → linear conversion for one 8-bit channel.

    - For c <= 0.03928: c / 12.92
    - Otherwise: ((c + 0.055) / 1.055) ^ 2.4
    """
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def apca_linearize(channel: int) -> float:
    """sRGB → linear conversion used by the APCA score (threshold 0.04045)."""
    c = channel / 255
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def gamma_decode(channel: int) -> float:
    """Simple 2.2 power decode of one 8-bit channel to [0, 1]."""
    return (channel / 255) ** 2.2


def gamma_encode(linear: float) -> int:
    """Inverse of gamma_decode: clamp to [0, 1], apply 1/2.2, scale and round."""
    clamped = max(0.0, min(1.0, linear))
    return round_channel(clamped ** (1 / 2.2) * 255)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert 8-bit sRGB to HSL.

    Returns:
        (h, s, l) with h in degrees [0, 360), s and l in percent [0, 100].
        Achromatic colors report h = 0 and s = 0.
    """
    rn, gn, bn = r / 255, g / 255, b / 255
    high = max(rn, gn, bn)
    low = min(rn, gn, bn)
    delta = high - low
    lightness = (high + low) / 2

    if delta == 0:
        return 0.0, 0.0, lightness * 100

    saturation = delta / (1 - abs(2 * lightness - 1))

    if high == rn:
        hue = ((gn - bn) / delta) % 6
    elif high == gn:
        hue = (bn - rn) / delta + 2
    else:
        hue = (rn - gn) / delta + 4

    hue = (hue * 60) % 360.0
    return hue, min(saturation, 1.0) * 100, lightness * 100


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit sRGB.

    Hue wraps modulo 360; saturation and lightness are clamped to [0, 100].
    """
    h = h % 360.0
    s = max(0.0, min(100.0, s)) / 100
    l = max(0.0, min(100.0, l)) / 100

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    if h < 60:
        rp, gp, bp = chroma, x, 0.0
    elif h < 120:
        rp, gp, bp = x, chroma, 0.0
    elif h < 180:
        rp, gp, bp = 0.0, chroma, x
    elif h < 240:
        rp, gp, bp = 0.0, x, chroma
    elif h < 300:
        rp, gp, bp = x, 0.0, chroma
    else:
        rp, gp, bp = chroma, 0.0, x

    return (
        round_channel((rp + m) * 255),
        round_channel((gp + m) * 255),
        round_channel((bp + m) * 255),
    )


# =============================================================================
# sRGB → CIE L*a*b* (D50)
# =============================================================================

# Linear sRGB to XYZ, sRGB's own D65 white
_SRGB_TO_XYZ_D65 = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# Bradford chromatic adaptation D65 → D50
_BRADFORD_D65_TO_D50 = np.array([
    [1.0478112, 0.0228866, -0.0501270],
    [0.0295424, 0.9904844, -0.0170491],
    [-0.0092345, 0.0150436, 0.7521316],
], dtype=np.float64)

_D50_WHITE = np.array([96.422, 100.0, 82.521], dtype=np.float64)

_LAB_EPSILON = 216 / 24389
_LAB_KAPPA = 24389 / 27

for _matrix in (_SRGB_TO_XYZ_D65, _BRADFORD_D65_TO_D50, _D50_WHITE):
    _matrix.setflags(write=False)


def srgb_uint8_to_linear(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB values to linear light with the standard sRGB curve.

    Args:
        rgb: Array of shape (..., 3) with values in [0, 255]
    """
    srgb = np.asarray(rgb, dtype=np.float64) / 255.0
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def rgb_to_xyz_d50(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB to CIE XYZ adapted to D50, scaled so Y(white) = 100.

    Args:
        rgb: Array of shape (..., 3) with values in [0, 255]
    """
    linear = srgb_uint8_to_linear(rgb)
    xyz_d65 = np.einsum('...j,ij->...i', linear, _SRGB_TO_XYZ_D65) * 100.0
    return np.einsum('...j,ij->...i', xyz_d65, _BRADFORD_D65_TO_D50)


def xyz_d50_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ (D50, Y in [0, 100]) to CIE L*a*b*.

    Returns:
        Array of shape (..., 3) with (L, a, b); L in [0, 100]
    """
    ratio = np.asarray(xyz, dtype=np.float64) / _D50_WHITE
    f = np.where(
        ratio > _LAB_EPSILON,
        np.cbrt(ratio),
        (_LAB_KAPPA * ratio + 16.0) / 116.0,
    )
    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def rgb_to_lab(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert one 8-bit sRGB color to CIE L*a*b* (D50)."""
    lab = xyz_d50_to_lab(rgb_to_xyz_d50(np.array([r, g, b], dtype=np.float64)))
    return float(lab[0]), float(lab[1]), float(lab[2])


# =============================================================================
# Hex
# =============================================================================


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Convert a ``#RRGGBB`` (or ``RRGGBB``) string to channel integers.

    Raises:
        ValueError: If the string is not a six digit hex triplet
    """
    digits = hex_color.strip().lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Hex color must have 6 digits, got '{hex_color}'")
    if any(ch not in string.hexdigits for ch in digits):
        raise ValueError(f"Invalid hex color '{hex_color}'")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format channel integers as an uppercase ``#RRGGBB`` string."""
    return f"#{r:02X}{g:02X}{b:02X}"
