from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .models import PaletteColor, normalize_hue
from .naming import color_info

log = logging.getLogger(__name__)

SIZE = 5
STEP = 360.0 / SIZE  # 72 degrees
SAT_RANGE = (0.6, 1.0)
LIGHT_RANGE = (0.4, 0.8)


@dataclass(frozen=True)
class RandomPalette:
    base_hue: float
    colors: list[PaletteColor]


def _draw(rng: np.random.Generator, lo: float, hi: float) -> float:
    # Generator.uniform may return ``hi`` through float rounding; keep [lo, hi)
    v = float(rng.uniform(lo, hi))
    return v if v < hi else lo


def generate_random(rng: np.random.Generator | None = None) -> RandomPalette:
    """Five evenly spaced hues from a random seed hue, each with its own
    random saturation and lightness."""
    rng = rng if rng is not None else np.random.default_rng()
    base = normalize_hue(_draw(rng, 0.0, 360.0))

    colors = []
    for i in range(SIZE):
        hue = normalize_hue(base + i * STEP)
        s = _draw(rng, *SAT_RANGE)
        l = _draw(rng, *LIGHT_RANGE)
        colors.append(PaletteColor.at(color_info(hue, s, l), i))

    log.debug("random palette from %.2f: %s", base, " ".join(c.hex for c in colors))
    return RandomPalette(base, colors)


__all__ = ["RandomPalette", "generate_random"]
