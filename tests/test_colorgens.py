"""Test single random color generators.

Tests for palettelab.core.colorgens:
    - HSV ("fast") generators stay inside their saturation / value ranges
    - HCL generators return in-gamut colors with the requested chroma and lightness
    - Seeded sources are reproducible
    - An impossible chroma range raises GenerationError

Run:
    pytest tests/test_colorgens.py -v
"""

import random

import pytest

from palettelab.core import colorgens as gens
from palettelab.core import config as c
from palettelab.core.errors import GenerationError

TOL = 1e-6


class TestFastColors:
    @pytest.mark.parametrize("seed", range(5))
    def test_fast_warm_ranges(self, seed: int) -> None:
        _, s, v = gens.fast_warm_color(random.Random(seed)).hsv()
        assert c.FAST_WARM_COLOR_SATURATION[0] - TOL <= s <= c.FAST_WARM_COLOR_SATURATION[1] + TOL
        assert c.FAST_WARM_COLOR_VALUE[0] - TOL <= v <= c.FAST_WARM_COLOR_VALUE[1] + TOL

    @pytest.mark.parametrize("seed", range(5))
    def test_fast_happy_ranges(self, seed: int) -> None:
        _, s, v = gens.fast_happy_color(random.Random(seed)).hsv()
        assert c.FAST_HAPPY_COLOR_SATURATION[0] - TOL <= s <= c.FAST_HAPPY_COLOR_SATURATION[1] + TOL
        assert c.FAST_HAPPY_COLOR_VALUE[0] - TOL <= v <= c.FAST_HAPPY_COLOR_VALUE[1] + TOL

    def test_three_draws(self, scripted) -> None:
        rand = scripted([0.5, 0.0, 1.0])
        color = gens.fast_warm_color(rand)
        assert rand.calls == 3
        assert color.hsv() == pytest.approx((180.0, 0.5, 0.6))


class TestHclColors:
    @pytest.mark.parametrize("seed", range(5))
    def test_warm(self, seed: int) -> None:
        color = gens.warm_color(random.Random(seed))
        _, chroma, L = color.hcl()
        assert color.is_valid()
        assert c.WARM_COLOR_CHROMA[0] - TOL <= chroma <= c.WARM_COLOR_CHROMA[1] + TOL
        assert c.WARM_COLOR_LIGHTNESS[0] - TOL <= L <= c.WARM_COLOR_LIGHTNESS[1] + TOL

    @pytest.mark.parametrize("seed", range(5))
    def test_happy(self, seed: int) -> None:
        color = gens.happy_color(random.Random(seed))
        _, chroma, L = color.hcl()
        assert color.is_valid()
        assert c.HAPPY_COLOR_CHROMA[0] - TOL <= chroma <= c.HAPPY_COLOR_CHROMA[1] + TOL
        assert c.HAPPY_COLOR_LIGHTNESS[0] - TOL <= L <= c.HAPPY_COLOR_LIGHTNESS[1] + TOL

    def test_deterministic(self) -> None:
        assert gens.happy_color(random.Random(11)) == gens.happy_color(random.Random(11))
        assert gens.warm_color(random.Random(11)) == gens.warm_color(random.Random(11))

    def test_out_of_gamut_chroma_raises(self, monkeypatch, seeded) -> None:
        monkeypatch.setattr(c, "HAPPY_COLOR_CHROMA", (500.0, 600.0))
        monkeypatch.setattr(c, "COLOR_MAX_ATTEMPTS", 50)
        with pytest.raises(GenerationError, match="after 50 draws"):
            gens.happy_color(seeded)
