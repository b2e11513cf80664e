"""Test blends and gradients.

Tests for palettelab.core.blend:
    - Endpoints of every blend space
    - Lab midpoint of black and white is a neutral gray
    - Shortest-arc hue interpolation
    - CIELUV, LuvLCh, OkLab and OkLch midpoints
    - Multi-stop gradients and their argument checks

Run:
    pytest tests/test_blend.py -v
"""

import pytest

from palettelab.core import blend
from palettelab.core.color import Color

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
TEAL = Color(0.1, 0.6, 0.55)


# ---------------------------------------------------------------------------
# Two-color blends
# ---------------------------------------------------------------------------


class TestBlendEndpoints:
    @pytest.mark.parametrize("space", sorted(blend.BLENDERS))
    def test_endpoints(self, space: str) -> None:
        fn = blend.BLENDERS[space]
        assert fn(RED, TEAL, 0.0).values() == pytest.approx(RED.values(), abs=1e-3)
        assert fn(RED, TEAL, 1.0).values() == pytest.approx(TEAL.values(), abs=1e-3)

    def test_lab_endpoints(self) -> None:
        assert blend.blend_lab(BLACK, WHITE, 0.0).values() == pytest.approx(BLACK.values(), abs=1e-3)
        assert blend.blend_lab(BLACK, WHITE, 1.0).values() == pytest.approx(WHITE.values(), abs=1e-3)


class TestBlendLab:
    def test_midpoint_is_neutral(self) -> None:
        mid = blend.blend_lab(BLACK, WHITE, 0.5)
        assert mid.r == pytest.approx(mid.g, abs=1e-3)
        assert mid.g == pytest.approx(mid.b, abs=1e-3)
        assert mid.lab()[0] == pytest.approx(50.0, abs=0.1)

    def test_midpoint_differs_from_rgb_midpoint(self) -> None:
        lab_mid = blend.blend_lab(BLACK, WHITE, 0.5)
        rgb_mid = blend.blend_rgb(BLACK, WHITE, 0.5)
        assert rgb_mid.values() == pytest.approx((0.5, 0.5, 0.5))
        assert abs(lab_mid.r - rgb_mid.r) > 0.01

    def test_extrapolation_stays_in_gamut(self) -> None:
        assert blend.blend_lab(BLACK, WHITE, 2.0).is_valid()
        assert blend.blend_lab(RED, BLUE, -1.0).is_valid()


class TestBlendHue:
    def test_shortest_arc(self) -> None:
        # red (0) to blue (240) goes backwards through magenta
        mid = blend.blend_hsv(RED, BLUE, 0.5)
        assert mid.hsv()[0] == pytest.approx(300.0, abs=1e-6)

    def test_gray_borrows_hue(self) -> None:
        gray = Color(0.5, 0.5, 0.5)
        mid = blend.blend_hsv(gray, RED, 0.5)
        assert mid.hsv()[0] == pytest.approx(0.0, abs=1e-6)

    def test_interp_angle_wraps(self) -> None:
        assert blend._interp_angle(350.0, 10.0, 0.5) == pytest.approx(0.0, abs=1e-9)
        assert blend._interp_angle(10.0, 350.0, 0.25) == pytest.approx(5.0)


class TestPerceptualSpaces:
    def test_luv_midpoint(self) -> None:
        mid = blend.blend_luv(BLACK, WHITE, 0.5)
        assert mid.luv()[0] == pytest.approx(50.0, abs=0.1)
        assert mid.r == pytest.approx(mid.b, abs=1e-3)

    def test_oklab_midpoint(self) -> None:
        mid = blend.blend_oklab(BLACK, WHITE, 0.5)
        assert mid.oklab() == pytest.approx((0.5, 0.0, 0.0), abs=1e-3)

    @pytest.mark.parametrize("fn, view", [(blend.blend_luvlch, "luvlch"), (blend.blend_oklch, "oklch")])
    def test_gray_borrows_hue(self, fn, view) -> None:
        gray = Color(0.5, 0.5, 0.5)
        red_hue = getattr(RED, view)()[2]
        assert getattr(fn(gray, RED, 0.5), view)()[2] == pytest.approx(red_hue, abs=0.5)


# ---------------------------------------------------------------------------
# Gradients
# ---------------------------------------------------------------------------


class TestGradient:
    def test_length_and_endpoints(self) -> None:
        colors = blend.gradient([BLACK, WHITE], 7)
        assert len(colors) == 7
        assert colors[0].values() == pytest.approx(BLACK.values(), abs=1e-3)
        assert colors[-1].values() == pytest.approx(WHITE.values(), abs=1e-3)

    def test_lightness_is_monotonic(self) -> None:
        lightness = [color.lab()[0] for color in blend.gradient([BLACK, WHITE], 10)]
        assert lightness == sorted(lightness)

    def test_passes_through_middle_stop(self) -> None:
        colors = blend.gradient([RED, TEAL, BLUE], 5, space="rgb")
        assert colors[2].values() == pytest.approx(TEAL.values(), abs=1e-9)

    def test_single_step(self) -> None:
        assert blend.gradient([RED, BLUE], 1) == [RED]

    @pytest.mark.parametrize("space", sorted(blend.BLENDERS))
    def test_every_space(self, space: str) -> None:
        colors = blend.gradient([RED, BLUE], 4, space=space)
        assert len(colors) == 4
        assert all(len(color.hex()) == 7 for color in colors)

    def test_rejects_single_stop(self) -> None:
        with pytest.raises(ValueError):
            blend.gradient([RED], 5)

    def test_rejects_zero_steps(self) -> None:
        with pytest.raises(ValueError):
            blend.gradient([RED, BLUE], 0)

    def test_rejects_unknown_space(self) -> None:
        with pytest.raises(ValueError, match="unknown blend space"):
            blend.gradient([RED, BLUE], 5, space="cmyk")
