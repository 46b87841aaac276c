from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask

from .harmony import HARMONY_LIGHTNESS, HARMONY_SATURATION
from .wheel import INNER_RATIO, Wheel

log = logging.getLogger(__name__)

ENV_PREFIX = "COLOR_WHEEL"

DEFAULTS: Mapping[str, Any] = {
    "WHEEL_RADIUS": 130,  # 300px canvas minus a 20px margin
    "WHEEL_INNER_RATIO": INNER_RATIO,
    "HARMONY_SATURATION": HARMONY_SATURATION,
    "HARMONY_LIGHTNESS": HARMONY_LIGHTNESS,
    "LOG_LEVEL": "INFO",
}


def load_config(app: Flask, overrides: Mapping[str, Any] | None = None) -> None:
    """Defaults, then ``COLOR_WHEEL_*`` environment variables, then overrides."""
    app.config.update(DEFAULTS)
    # values are parsed as JSON, so COLOR_WHEEL_WHEEL_RADIUS=160 is an int
    app.config.from_prefixed_env(ENV_PREFIX)
    if overrides:
        app.config.update(overrides)

    for key in ("HARMONY_SATURATION", "HARMONY_LIGHTNESS"):
        v = float(app.config[key])
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"{key} must be within [0, 1], got {v}")
        app.config[key] = v
    log.debug(
        "wheel radius %s, inner ratio %s",
        app.config["WHEEL_RADIUS"],
        app.config["WHEEL_INNER_RATIO"],
    )


def wheel_from_config(config: Mapping[str, Any]) -> Wheel:
    return Wheel.from_ratio(
        float(config["WHEEL_RADIUS"]), float(config["WHEEL_INNER_RATIO"])
    )


__all__ = ["DEFAULTS", "ENV_PREFIX", "load_config", "wheel_from_config"]
