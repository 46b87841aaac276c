from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

from .models import PaletteColor, normalize_hue
from .naming import color_info

log = logging.getLogger(__name__)

HARMONY_SATURATION = 0.7
HARMONY_LIGHTNESS = 0.5


class NoBaseColorError(ValueError):
    """Harmony requested before any base color was picked."""

    def __init__(self, message: str = "Please select a color from the wheel first"):
        super().__init__(message)


class HarmonyRule(str, Enum):
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"

    @classmethod
    def parse(cls, value: "str | HarmonyRule") -> "HarmonyRule":
        """Accept enum members, values, and camel/snake spellings."""
        if isinstance(value, cls):
            return value
        key = (value or "").strip().lower().replace("_", "-")
        if key == "splitcomplementary":
            key = cls.SPLIT_COMPLEMENTARY.value
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"unknown harmony rule '{value}'; expected one of "
                + ", ".join(r.value for r in cls)
            ) from None


# base hue comes first except for analogous, which leads with the -30 neighbour
OFFSETS: Mapping[HarmonyRule, tuple[float, ...]] = {
    HarmonyRule.COMPLEMENTARY: (0, 180),
    HarmonyRule.TRIADIC: (0, 120, 240),
    HarmonyRule.TETRADIC: (0, 90, 180, 270),
    HarmonyRule.ANALOGOUS: (-30, 0, 30, 60),
    HarmonyRule.SPLIT_COMPLEMENTARY: (0, 150, 210),
}


def harmony_hues(base_hue: float, rule: str | HarmonyRule) -> list[float]:
    return [normalize_hue(base_hue + off) for off in OFFSETS[HarmonyRule.parse(rule)]]


def generate(
    base_hue: float | None,
    rule: str | HarmonyRule,
    *,
    saturation: float = HARMONY_SATURATION,
    lightness: float = HARMONY_LIGHTNESS,
) -> list[PaletteColor]:
    """Colors related to ``base_hue`` (degrees) by ``rule``, in offset order."""
    rule = HarmonyRule.parse(rule)
    if base_hue is None:
        log.warning("harmony '%s' requested with no base color", rule.value)
        raise NoBaseColorError()

    palette = [
        PaletteColor.at(color_info(h, saturation, lightness), i)
        for i, h in enumerate(harmony_hues(base_hue, rule))
    ]
    log.debug(
        "%s from %.1f: %s", rule.value, base_hue, " ".join(c.hex for c in palette)
    )
    return palette


__all__ = [
    "HarmonyRule",
    "NoBaseColorError",
    "OFFSETS",
    "generate",
    "harmony_hues",
]
