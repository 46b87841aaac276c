import pytest

from color_wheel.convert import hsl_to_rgb, rgb_to_hex
from color_wheel.harmony import HarmonyRule, NoBaseColorError, generate, harmony_hues


def hues(palette):
    return [c.hsl.h for c in palette]


def test_rule_hues():
    assert hues(generate(0, "complementary")) == [0, 180]
    assert hues(generate(0, HarmonyRule.TRIADIC)) == [0, 120, 240]
    assert hues(generate(40, "analogous")) == [10, 40, 70, 100]
    assert hues(generate(0, "split-complementary")) == [0, 150, 210]
    assert hues(generate(300, "tetradic")) == [300, 30, 120, 210]


def test_hues_wrap_below_zero():
    assert harmony_hues(10, "analogous") == [340, 10, 40, 70]


def test_positions_follow_offset_order():
    palette = generate(200, "tetradic")
    assert [c.position for c in palette] == [0, 1, 2, 3]


def test_fixed_saturation_and_lightness():
    for c in generate(77, "triadic"):
        assert (c.hsl.s, c.hsl.l) == (0.7, 0.5)
        assert c.hex == rgb_to_hex(*hsl_to_rgb(c.hsl.h / 360, 0.7, 0.5))
        assert str(c.hsl).endswith("70%, 50%")


def test_complementary_colors():
    first, second = generate(0, "complementary")
    assert (first.hex, first.name) == ("#d92626", "Red")
    assert second.hex == "#26d9d9"


def test_overrides():
    (c,) = generate(0, "complementary", saturation=1.0, lightness=0.5)[:1]
    assert c.hex == "#ff0000"


def test_no_base_color_is_a_precondition_error():
    with pytest.raises(NoBaseColorError) as exc:
        generate(None, "triadic")
    assert isinstance(exc.value, ValueError)
    assert "select a color" in str(exc.value)


@pytest.mark.parametrize(
    "raw, rule",
    [
        ("splitComplementary", HarmonyRule.SPLIT_COMPLEMENTARY),
        ("split_complementary", HarmonyRule.SPLIT_COMPLEMENTARY),
        (" Triadic ", HarmonyRule.TRIADIC),
    ],
)
def test_rule_spellings(raw, rule):
    assert HarmonyRule.parse(raw) is rule


def test_unknown_rule():
    with pytest.raises(ValueError, match="unknown harmony rule"):
        generate(0, "monochrome")
