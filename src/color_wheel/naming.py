"""Approximate, human-readable color names.

The thresholds below are heuristics, not a perceptual nearest-neighbour
match.  They are kept literal: callers (and saved palettes) depend on the
exact boundaries, e.g. a channel spread of 14 is gray while 15 is not.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .convert import (
    canon_hex,
    hex_to_rgb,
    hsl_to_rgb,
    parse_color,
    rgb_to_hex,
    rgb_to_hsl,
)
from .models import ColorInfo, Hex, HSLColor, RGBColor, normalize_hue

log = logging.getLogger(__name__)

EXACT_COLORS: dict[Hex, str] = {
    "#000000": "Black",
    "#FFFFFF": "White",
    "#FF0000": "Red",
    "#00FF00": "Green",
    "#0000FF": "Blue",
    "#FFFF00": "Yellow",
    "#FF00FF": "Magenta",
    "#00FFFF": "Cyan",
    "#808080": "Gray",
}

GRAY_SPREAD = 15
GRAY_STEPS = (
    (50, "Very Dark Gray"),
    (100, "Dark Gray"),
    (150, "Medium Gray"),
    (200, "Light Gray"),
)
DARK_BELOW = 80
LIGHT_ABOVE = 180


def color_name(hex_str: Hex) -> str:
    r, g, b = hex_to_rgb(hex_str)

    exact = EXACT_COLORS.get(canon_hex(hex_str).upper())
    if exact:
        return exact

    hi, lo = max(r, g, b), min(r, g, b)
    if hi - lo < GRAY_SPREAD:
        for limit, label in GRAY_STEPS:
            if hi < limit:
                return label
        return "Very Light Gray"

    name = ""
    if r > g and r > b:
        name = "Orange" if g > b else "Red"
    elif g > r and g > b:
        name = "Yellow" if r > b else "Green"
    elif b > r and b > g:
        name = "Purple" if r > g else "Blue"

    if not name:
        # two channels tie for the maximum
        return "Custom Color"

    lightness = (hi + lo) / 2
    if lightness < DARK_BELOW:
        return "Dark " + name
    if lightness > LIGHT_ABOVE:
        return "Light " + name
    return name


def color_info(hue: float, s: float, l: float) -> ColorInfo:
    """Full ColorInfo for an HSL color, ``hue`` in degrees."""
    hue = normalize_hue(hue)
    rgb = hsl_to_rgb(hue / 360.0, s, l)
    hex_ = rgb_to_hex(*rgb)
    return ColorInfo(hex_, rgb, HSLColor(hue, s, l), color_name(hex_))


def _numbers(text: str, count: int) -> list[float]:
    parts = [p.strip().rstrip("%") for p in str(text).split(",")]
    if len(parts) != count:
        raise ValueError(f"expected {count} comma-separated values, got {text!r}")
    return [float(p) for p in parts]


def from_display(d: Mapping[str, Any]) -> ColorInfo:
    """Rebuild a ColorInfo from its ``to_dict`` form, keeping the shown values.

    ``rgb`` is "r, g, b" and ``hsl`` is "h, s%, l%".  Raises KeyError or
    ValueError on malformed input.
    """
    r, g, b = (int(v) for v in _numbers(d["rgb"], 3))
    h, s, l = _numbers(d["hsl"], 3)
    return ColorInfo(
        canon_hex(str(d["hex"])),
        RGBColor(r, g, b),
        HSLColor(normalize_hue(h), s / 100.0, l / 100.0),
        str(d["name"]),
    )


def describe(text: str) -> ColorInfo:
    """ColorInfo for any CSS color string."""
    hex_ = parse_color(text)
    rgb = hex_to_rgb(hex_)
    info = ColorInfo(hex_, rgb, rgb_to_hsl(*rgb), color_name(hex_))
    log.debug("described %r as %s (%s)", text, info.hex, info.name)
    return info


__all__ = ["EXACT_COLORS", "color_name", "color_info", "describe", "from_display"]
