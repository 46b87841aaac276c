import json

import pytest

from color_wheel.app import create_app


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "WHEEL_RADIUS": 100})
    return app.test_client()


def test_index(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"Color Wheel" in res.data
    assert b'data-rule="split-complementary"' in res.data


def test_wheel_pixels(client):
    body = client.get("/api/wheel").get_json()
    assert body["radius"] == 100
    assert body["innerRadius"] == 25
    assert body["size"] == 201
    assert len(body["pixels"]) == 201 * 201 * 4


def test_pick(client):
    body = client.get("/api/pick?dx=100&dy=0").get_json()
    assert body["color"]["hex"] == "#ff0000"
    assert body["color"]["hsl"] == "0, 100%, 50%"
    assert body["baseHue"] == 0.0

    body = client.get("/api/pick?dx=0&dy=0&base=45").get_json()
    assert body["color"]["name"] == "White"
    assert body["baseHue"] == 45.0


def test_pick_outside_is_ignored(client):
    res = client.get("/api/pick?dx=500&dy=0&base=45")
    assert res.status_code == 200
    assert res.get_json() == {"color": None, "baseHue": 45.0}


def test_pick_bad_input(client):
    assert client.get("/api/pick?dx=left&dy=0").status_code == 400
    assert client.get("/api/pick?dx=nan&dy=0").status_code == 400
    assert client.get("/api/pick?dx=0&dy=0&base=inf").status_code == 400


def test_gray_pick_enables_harmony(client):
    body = client.get("/api/pick?dx=0&dy=0").get_json()
    assert body["color"]["name"] == "White"
    assert body["baseHue"] == 0.0

    res = client.get(f"/api/harmony?rule=complementary&hue={body['baseHue']}")
    assert res.status_code == 200
    assert [c["hsl"] for c in res.get_json()["colors"]] == [
        "0, 70%, 50%",
        "180, 70%, 50%",
    ]


def test_harmony(client):
    body = client.get("/api/harmony?rule=triadic&hue=0").get_json()
    assert body["rule"] == "triadic"
    assert [c["hsl"] for c in body["colors"]] == [
        "0, 70%, 50%",
        "120, 70%, 50%",
        "240, 70%, 50%",
    ]
    assert [c["position"] for c in body["colors"]] == [0, 1, 2]


def test_harmony_without_base_color(client):
    res = client.get("/api/harmony?rule=triadic")
    assert res.status_code == 409
    assert res.get_json()["warning"] == "Please select a color from the wheel first"


def test_harmony_bad_params(client):
    res = client.get("/api/harmony?rule=mono&hue=0")
    assert res.status_code == 400
    assert "triadic" in res.get_json()["supported"]
    assert client.get("/api/harmony?rule=triadic&hue=abc").status_code == 400
    assert client.get("/api/harmony?rule=triadic&hue=nan").status_code == 400


def test_random(client):
    body = client.get("/api/random").get_json()
    assert 0 <= body["baseHue"] < 360
    assert len(body["colors"]) == 5


def test_color_lookup(client):
    body = client.get("/api/color?value=red").get_json()
    assert body == {
        "name": "Red",
        "hex": "#ff0000",
        "rgb": "255, 0, 0",
        "hsl": "0, 100%, 50%",
    }
    assert client.get("/api/color?value=nonsense").status_code == 400


def test_library_and_schemes(client):
    assert len(client.get("/api/library?q=coral").get_json()) == 3
    assert len(client.get("/api/library?category=Browns").get_json()) == 8
    schemes = client.get("/api/schemes", query_string={"category": "Web Safe"}).get_json()
    assert len(schemes) == 5
    assert schemes[0]["name"] == "Web Safe Grays"


def test_export_palette(client):
    res = client.post(
        "/api/export/palette", json={"colors": ["#ff0000", "#00ff00"], "baseHue": 0}
    )
    assert res.status_code == 200
    assert "color-wheel-palette.json" in res.headers["Content-Disposition"]
    doc = json.loads(res.data)
    assert [c["name"] for c in doc["colors"]] == ["Red", "Green"]
    assert doc["baseHue"] == 0.0
    assert doc["generatedAt"].endswith("Z")


def test_export_palette_keeps_displayed_values(client):
    shown = {
        "name": "Light Red",
        "hex": "#F28C8C",
        "rgb": "242, 140, 140",
        "hsl": "0, 79%, 75%",
    }
    res = client.post(
        "/api/export/palette", json={"colors": [dict(shown, position=0)], "baseHue": 0}
    )
    assert res.status_code == 200
    assert json.loads(res.data)["colors"] == [dict(shown, hex="#f28c8c")]

    bad = dict(shown, hsl="0, 79%")
    res = client.post("/api/export/palette", json={"colors": [bad]})
    assert res.status_code == 400


def test_export_empty_palette(client):
    res = client.post("/api/export/palette", json={"colors": []})
    assert res.status_code == 400
    assert res.get_json()["error"] == "No palette generated yet"


def test_export_scheme(client):
    res = client.get("/api/export/scheme/tailwind-slate")
    assert res.status_code == 200
    assert "tailwind-slate-scheme.json" in res.headers["Content-Disposition"]
    assert json.loads(res.data)["name"] == "Tailwind Slate"
    assert client.get("/api/export/scheme/nope").status_code == 404


def test_env_config(monkeypatch):
    monkeypatch.setenv("COLOR_WHEEL_WHEEL_RADIUS", "80")
    app = create_app({"TESTING": True})
    assert app.config["WHEEL_RADIUS"] == 80
    assert app.test_client().get("/api/wheel").get_json()["size"] == 161


def test_bad_config():
    with pytest.raises(ValueError):
        create_app({"HARMONY_SATURATION": 2})
    with pytest.raises(ValueError):
        create_app({"WHEEL_INNER_RATIO": 1.5})
