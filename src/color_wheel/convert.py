"""Conversions between hex strings, 8-bit RGB and HSL.

Scalar functions work on plain Python numbers and return the value types in
:mod:`color_wheel.models`.  ``hsl_to_rgb_array`` is the NumPy twin of
``hsl_to_rgb`` used for rendering whole images; both share the same
piecewise hue function and the same half-up rounding so that a rendered pixel
and a hit-tested point never disagree by more than float noise.
"""

from __future__ import annotations

import string

import numpy as np
from coloraide import Color

from .models import Hex, HSLColor, RGBColor, normalize_hue, round_half_up

FIT_HEX = {"method": "clip"}


def canon_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError(f"invalid hex: {s!r}")
    return "#" + raw.lower()


def _hue2rgb(p: float, q: float, t: float) -> float:
    t = t % 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGBColor:
    """HSL -> 8-bit RGB.  ``h`` is a hue fraction (degrees / 360).

    ``s`` and ``l`` are expected in [0, 1]; the caller clamps.
    """
    if s == 0:
        v = round_half_up(l * 255)
        return RGBColor(v, v, v)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    r = _hue2rgb(p, q, h + 1 / 3)
    g = _hue2rgb(p, q, h)
    b = _hue2rgb(p, q, h - 1 / 3)
    return RGBColor(*(min(255, max(0, round_half_up(c * 255))) for c in (r, g, b)))


def hsl_to_rgb_array(h, s, l) -> np.ndarray:
    """Vectorized :func:`hsl_to_rgb`; returns uint8 array of shape (..., 3)."""
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=np.float64),
        np.asarray(s, dtype=np.float64),
        np.asarray(l, dtype=np.float64),
    )
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    def hue2rgb(t: np.ndarray) -> np.ndarray:
        t = np.mod(t, 1.0)
        return np.select(
            [t < 1 / 6, t < 1 / 2, t < 2 / 3],
            [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
            default=p,
        )

    rgb = np.stack([hue2rgb(h + 1 / 3), hue2rgb(h), hue2rgb(h - 1 / 3)], axis=-1)
    gray = (s == 0)[..., None]
    rgb = np.where(gray, l[..., None], rgb)
    return np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255).astype(np.uint8)


def rgb_to_hex(r: int, g: int, b: int) -> Hex:
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def hex_to_rgb(hex_str: str) -> RGBColor:
    raw = canon_hex(hex_str)[1:]
    return RGBColor(*(int(raw[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hsl(r: int, g: int, b: int) -> HSLColor:
    r1, g1, b1 = r / 255.0, g / 255.0, b / 255.0
    hi, lo = max(r1, g1, b1), min(r1, g1, b1)
    l = (hi + lo) / 2
    if hi == lo:
        return HSLColor(0.0, 0.0, l)

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == r1:
        h = (g1 - b1) / d + (6 if g1 < b1 else 0)
    elif hi == g1:
        h = (b1 - r1) / d + 2
    else:
        h = (r1 - g1) / d + 4
    return HSLColor(normalize_hue(h * 60.0), min(1.0, s), l)


def parse_color(text: str) -> Hex:
    """Any CSS colour string (name, rgb(), hsl(), hex) -> '#rrggbb'."""
    try:
        return canon_hex(text)
    except ValueError:
        pass
    try:
        col = Color(text.strip())
    except (ValueError, AttributeError) as exc:
        raise ValueError(f"invalid color: {text!r}") from exc
    return canon_hex(col.convert("srgb").to_string(hex=True, fit=FIT_HEX))


__all__ = [
    "canon_hex",
    "hsl_to_rgb",
    "hsl_to_rgb_array",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "parse_color",
]
