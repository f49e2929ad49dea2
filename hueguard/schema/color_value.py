# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
ColorValue -- the immutable color handed to every engine function.

A ColorValue stores only its 8-bit sRGB channels. The HSL and CIE L*a*b*
views are derived on demand, so all three always describe the same color.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import NamedTuple, Optional


class RGB(NamedTuple):
    """8-bit sRGB channels (0-255)."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""
    h: float
    s: float
    l: float


class LAB(NamedTuple):
    """CIE L*a*b* (D50). L in [0, 100], a/b roughly [-128, 127]."""
    l: float
    a: float
    b: float


@dataclass(frozen=True, slots=True)
class ColorValue:
    """
    A single sRGB color.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)

    Usage:
        red = ColorValue(255, 0, 0)
        teal = ColorValue.from_hsl(180, 60, 40)
        navy = ColorValue.from_hex("#000080")
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are 8-bit integers."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Channel {name} must be an int, got {type(value).__name__}"
                )
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> ColorValue:
        """Build from 8-bit channels."""
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> ColorValue:
        """
        Build from HSL.

        Hue wraps modulo 360; saturation and lightness are clamped to [0, 100].
        """
        from hueguard.analysis.colorspace import hsl_to_rgb
        return cls(*hsl_to_rgb(h, s, l))

    @classmethod
    def from_hex(cls, hex_color: str) -> ColorValue:
        """Build from a ``#RRGGBB`` string (leading ``#`` optional)."""
        from hueguard.analysis.colorspace import hex_to_rgb
        return cls(*hex_to_rgb(hex_color))

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def rgb(self) -> RGB:
        return RGB(self.r, self.g, self.b)

    @property
    def hsl(self) -> HSL:
        from hueguard.analysis.colorspace import rgb_to_hsl
        return HSL(*rgb_to_hsl(self.r, self.g, self.b))

    @property
    def lab(self) -> LAB:
        from hueguard.analysis.colorspace import rgb_to_lab
        return LAB(*rgb_to_lab(self.r, self.g, self.b))

    @property
    def hex(self) -> str:
        """Uppercase hex string like "#3941C8"."""
        from hueguard.analysis.colorspace import rgb_to_hex
        return rgb_to_hex(self.r, self.g, self.b)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary with all three views."""
        hsl = self.hsl
        lab = self.lab
        return {
            "hex": self.hex,
            "rgb": {"r": self.r, "g": self.g, "b": self.b},
            "hsl": {"h": hsl.h, "s": hsl.s, "l": hsl.l},
            "lab": {"l": lab.l, "a": lab.a, "b": lab.b},
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ColorValue:
        """Deserialize from dictionary (``rgb`` preferred, ``hex`` accepted)."""
        if "rgb" in data:
            rgb = data["rgb"]
            return cls(rgb["r"], rgb["g"], rgb["b"])
        return cls.from_hex(data["hex"])

    def __str__(self) -> str:
        return self.hex
