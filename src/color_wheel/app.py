from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from flask import Flask, Response, jsonify, render_template, request

from . import catalog, share
from .config import load_config, wheel_from_config
from .harmony import HarmonyRule, NoBaseColorError, generate
from .models import normalize_hue
from .naming import describe, from_display
from .random_palette import generate_random

log = logging.getLogger(__name__)


def parse_float(val: str | None, name: str) -> float:
    try:
        x = float(val)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number") from None
    if not math.isfinite(x):
        raise ValueError(f"{name} must be a finite number")
    return x


def parse_hue(val: str | None) -> float | None:
    """Optional hue in degrees; empty or missing means no base color yet."""
    if val is None or not val.strip():
        return None
    return normalize_hue(parse_float(val, "hue"))


def error(message: str, status: int = 400, **extra: Any):
    return jsonify({"error": message, **extra}), status


def attachment(data: bytes, filename: str) -> Response:
    return Response(
        data,
        mimetype="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# ----------------------------- Flask app ----------------------------------


def create_app(test_config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates")
    load_config(app, test_config)
    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )
    wheel = wheel_from_config(app.config)

    @app.route("/")
    def index():
        return render_template(
            "index.html",
            rules=[r.value for r in HarmonyRule],
            color_categories=list(catalog.COLOR_CATEGORIES),
            scheme_categories=list(catalog.COLOR_SCHEMES),
        )

    @app.route("/api/wheel")
    def wheel_pixels():
        img = wheel.render()
        return jsonify(
            {
                "radius": wheel.radius,
                "innerRadius": wheel.inner_radius,
                "size": img.shape[0],
                "pixels": img.ravel().tolist(),
            }
        )

    @app.route("/api/pick")
    def pick():
        try:
            dx = parse_float(request.args.get("dx"), "dx")
            dy = parse_float(request.args.get("dy"), "dy")
            base = parse_hue(request.args.get("base"))
        except ValueError as e:
            return error(str(e))

        sel = wheel.pick(dx, dy, base)
        if sel is None:
            # outside the wheel: nothing changes
            return jsonify({"color": None, "baseHue": base})
        return jsonify({"color": sel.color.to_dict(), "baseHue": sel.base_hue})

    @app.route("/api/harmony")
    def harmony():
        try:
            rule = HarmonyRule.parse(request.args.get("rule", ""))
            hue = parse_hue(request.args.get("hue"))
        except ValueError as e:
            return error(str(e), supported=[r.value for r in HarmonyRule])

        try:
            palette = generate(
                hue,
                rule,
                saturation=app.config["HARMONY_SATURATION"],
                lightness=app.config["HARMONY_LIGHTNESS"],
            )
        except NoBaseColorError as e:
            return jsonify({"warning": str(e)}), 409
        except Exception as exc:
            log.exception("Harmony generation failed")
            return error(str(exc), 500)

        return jsonify(
            {
                "rule": rule.value,
                "baseHue": hue,
                "colors": [c.to_dict() for c in palette],
            }
        )

    @app.route("/api/random")
    def random_palette():
        result = generate_random()
        return jsonify(
            {
                "baseHue": result.base_hue,
                "colors": [c.to_dict() for c in result.colors],
            }
        )

    @app.route("/api/color")
    def color():
        try:
            info = describe(request.args.get("value", ""))
        except ValueError as e:
            return error(str(e))
        return jsonify(info.to_dict())

    @app.route("/api/library")
    def library():
        colors = catalog.search_colors(
            request.args.get("q", ""), request.args.get("category") or None
        )
        return jsonify([c.to_dict() for c in colors])

    @app.route("/api/schemes")
    def schemes():
        found = catalog.search_schemes(
            request.args.get("q", ""), request.args.get("category") or None
        )
        return jsonify([s.to_dict() for s in found])

    @app.route("/api/export/palette", methods=["POST"])
    def export_palette():
        body = request.get_json(silent=True) or {}
        raw = body.get("colors") or []
        try:
            # full color dicts export as displayed; bare strings are described
            colors = [
                from_display(c) if isinstance(c, dict) else describe(str(c))
                for c in raw
            ]
            base = body.get("baseHue")
            base = None if base is None else normalize_hue(parse_float(base, "baseHue"))
        except (KeyError, ValueError) as e:
            return error(f"invalid palette: {e}")

        out: dict[str, Any] = {}
        notice = share.export_palette(
            colors, base, lambda data, name: out.update(data=data, name=name)
        )
        if not notice.ok:
            return error(notice.message)
        return attachment(out["data"], out["name"])

    @app.route("/api/export/scheme/<name>")
    def export_scheme(name: str):
        scheme = catalog.find_scheme(name)
        if scheme is None:
            return error(f"unknown scheme '{name}'", 404)

        out: dict[str, Any] = {}
        share.export_scheme(scheme, lambda data, fn: out.update(data=data, name=fn))
        return attachment(out["data"], out["name"])

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
