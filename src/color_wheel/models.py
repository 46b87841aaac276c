from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

Hex = str


def round_half_up(x: float) -> int:
    # browsers round channels and percentages this way, not half-to-even
    return int(math.floor(x + 0.5))


def normalize_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    h = float(h) % 360.0
    # tiny negatives wrap to exactly 360.0 in float arithmetic
    return 0.0 if h >= 360.0 else h


@dataclass(frozen=True)
class RGBColor:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise ValueError(f"{name} must be an int, got {v!r}")
            if not 0 <= v <= 255:
                raise ValueError(f"{name} out of range [0,255]: {v}")

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __str__(self) -> str:
        return f"{self.r}, {self.g}, {self.b}"


@dataclass(frozen=True)
class HSLColor:
    h: float  # degrees, [0, 360)
    s: float  # [0, 1]
    l: float  # [0, 1]

    def __post_init__(self) -> None:
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"hue out of range [0,360): {self.h}")
        if not 0.0 <= self.s <= 1.0:
            raise ValueError(f"saturation out of range [0,1]: {self.s}")
        if not 0.0 <= self.l <= 1.0:
            raise ValueError(f"lightness out of range [0,1]: {self.l}")

    def __str__(self) -> str:
        h = round_half_up(self.h) % 360
        s, l = round_half_up(self.s * 100), round_half_up(self.l * 100)
        return f"{h}, {s}%, {l}%"


@dataclass(frozen=True)
class ColorInfo:
    hex: Hex
    rgb: RGBColor
    hsl: HSLColor
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "hex": self.hex,
            "rgb": str(self.rgb),
            "hsl": str(self.hsl),
        }


@dataclass(frozen=True)
class PaletteColor(ColorInfo):
    position: int = 0

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")

    @classmethod
    def at(cls, info: ColorInfo, position: int) -> "PaletteColor":
        return cls(info.hex, info.rgb, info.hsl, info.name, position)

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["position"] = self.position
        return out


__all__ = [
    "Hex",
    "RGBColor",
    "HSLColor",
    "ColorInfo",
    "PaletteColor",
    "normalize_hue",
    "round_half_up",
]
