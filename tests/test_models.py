import numpy as np
import pytest

from color_wheel.models import HSLColor, PaletteColor, RGBColor, normalize_hue
from color_wheel.naming import color_info


@pytest.mark.parametrize("rgb", [(256, 0, 0), (-1, 0, 0), (1.5, 0, 0), (True, 0, 0)])
def test_rgb_validation(rgb):
    with pytest.raises(ValueError):
        RGBColor(*rgb)


def test_rgb_accepts_numpy_ints():
    assert tuple(RGBColor(np.uint8(1), np.int64(2), 3)) == (1, 2, 3)


@pytest.mark.parametrize("hsl", [(360, 0, 0), (-1, 0, 0), (0, 1.1, 0), (0, 0, -0.1)])
def test_hsl_validation(hsl):
    with pytest.raises(ValueError):
        HSLColor(*hsl)


def test_display_strings():
    assert str(RGBColor(1, 2, 3)) == "1, 2, 3"
    assert str(HSLColor(359.7, 0.255, 0.5)) == "0, 26%, 50%"
    assert str(HSLColor(2.5, 0.125, 0.5)) == "3, 13%, 50%"


def test_normalize_hue():
    assert normalize_hue(-30) == 330
    assert normalize_hue(720) == 0
    assert normalize_hue(-1e-20) == 0.0


def test_palette_color():
    pc = PaletteColor.at(color_info(120, 0.7, 0.5), 2)
    assert pc.position == 2
    assert pc.to_dict()["position"] == 2
    with pytest.raises(ValueError):
        PaletteColor.at(color_info(0, 0.5, 0.5), -1)
