from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from .convert import hsl_to_rgb_array
from .models import ColorInfo, HSLColor, normalize_hue
from .naming import color_info

log = logging.getLogger(__name__)

WHEEL_LIGHTNESS = 0.5
INNER_RATIO = 0.25


@dataclass(frozen=True)
class Selection:
    color: ColorInfo
    base_hue: float | None  # hue harmonies are built from after this pick


@dataclass(frozen=True)
class Wheel:
    """Hit-testing and rendering for a hue/saturation disk.

    The outer ring maps polar angle to hue and radial distance to
    saturation at fixed lightness.  The inner disk of ``inner_radius`` is a
    neutral ramp, white at the center and black at its edge.
    """

    radius: float
    inner_radius: float | None = None

    def __post_init__(self) -> None:
        if self.inner_radius is None:
            object.__setattr__(self, "inner_radius", self.radius * INNER_RATIO)
        if not 0 < self.inner_radius < self.radius:
            raise ValueError(
                f"need 0 < inner_radius < radius, got {self.inner_radius}, {self.radius}"
            )

    @classmethod
    def from_ratio(cls, radius: float, inner_ratio: float = INNER_RATIO) -> "Wheel":
        return cls(radius, radius * inner_ratio)

    def point_to_color(self, dx: float, dy: float) -> HSLColor | None:
        dist = math.hypot(dx, dy)
        if dist > self.radius:
            return None

        r0 = self.inner_radius
        if dist <= r0:
            return HSLColor(0.0, 0.0, 1.0 - dist / r0)

        hue = normalize_hue(math.degrees(math.atan2(dy, dx)))
        sat = min(1.0, max(0.0, (dist - r0) / (self.radius - r0)))
        return HSLColor(hue, sat, WHEEL_LIGHTNESS)

    def pick(
        self, dx: float, dy: float, base_hue: float | None = None
    ) -> Selection | None:
        """Select the color under a pointer offset from the wheel center.

        Chromatic points replace the base hue.  The neutral disk keeps the
        caller's ``base_hue``, or starts it at 0 when nothing was selected
        yet.  Points outside the wheel give None.
        """
        hsl = self.point_to_color(dx, dy)
        if hsl is None:
            return None
        info = color_info(hsl.h, hsl.s, hsl.l)
        if hsl.s > 0:
            base_hue = hsl.h
        elif base_hue is None:
            base_hue = 0.0
        log.debug("picked %s at (%.1f, %.1f)", info.hex, dx, dy)
        return Selection(info, base_hue)

    def render(self) -> np.ndarray:
        """RGBA image of side ``2 * ceil(radius) + 1``, centered on the wheel."""
        return _render(float(self.radius), float(self.inner_radius))


@lru_cache(maxsize=8)
def _render(radius: float, inner: float) -> np.ndarray:
    half = int(math.ceil(radius))
    offs = np.arange(-half, half + 1, dtype=np.float64)
    dx, dy = np.meshgrid(offs, offs)  # rows are dy, columns dx
    dist = np.hypot(dx, dy)

    hue = np.degrees(np.arctan2(dy, dx)) % 360.0
    sat = np.clip((dist - inner) / (radius - inner), 0.0, 1.0)
    light = np.full_like(dist, WHEEL_LIGHTNESS)

    core = dist <= inner
    sat = np.where(core, 0.0, sat)
    light = np.where(core, 1.0 - dist / inner, light)

    img = np.zeros(dist.shape + (4,), dtype=np.uint8)
    img[..., :3] = hsl_to_rgb_array(hue / 360.0, sat, light)
    img[..., 3] = np.where(dist <= radius, 255, 0).astype(np.uint8)
    img[dist > radius, :3] = 0
    img.setflags(write=False)
    log.info("rendered %dx%d wheel (r=%.1f, r0=%.1f)", img.shape[1], img.shape[0], radius, inner)
    return img


__all__ = ["Wheel", "Selection", "WHEEL_LIGHTNESS"]
