"""Test constrained random palettes.

Tests for palettelab.core.palette:
    - Exact cardinality, including n == 0 with no random draws
    - Every accepted color honors the profile (hue, saturation, value,
      Lab lightness band, pairwise separation)
    - Same seed -> same palette
    - Draw order is hue, saturation, value
    - Bounded rejection raises GenerationError
    - Evenly spaced ("fast") palettes

Run:
    pytest tests/test_palette.py -v
"""

import itertools
import random

import pytest

from palettelab.core import palette as pal
from palettelab.core.color import Color
from palettelab.core.difference import distance_lab
from palettelab.core.errors import GenerationError, PalettelabError

TOL = 1e-6


def _in_hue_ranges(h, hue_ranges) -> bool:
    return any(lo - TOL <= h <= hi + TOL for lo, hi in hue_ranges) or h < TOL


def _check_profile(colors, profile) -> None:
    lo_l, hi_l = profile.lightness
    for color in colors:
        h, s, v = color.hsv()
        assert _in_hue_ranges(h, profile.hue_ranges)
        assert profile.saturation[0] - TOL <= s <= profile.saturation[1] + TOL
        assert profile.value[0] - TOL <= v <= profile.value[1] + TOL
        assert lo_l <= color.lab()[0] <= hi_l
    for a, b in itertools.combinations(colors, 2):
        assert distance_lab(a, b) >= profile.min_separation


# ---------------------------------------------------------------------------
# Cardinality
# ---------------------------------------------------------------------------


class TestCardinality:
    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10])
    def test_warm(self, n: int) -> None:
        assert len(pal.generate_warm_palette(n, random.Random(n))) == n

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10])
    def test_happy(self, n: int) -> None:
        assert len(pal.generate_happy_palette(n, random.Random(n))) == n

    def test_zero_draws_nothing(self, exploding) -> None:
        assert pal.generate_warm_palette(0, exploding) == []
        assert pal.generate_happy_palette(0, exploding) == []

    def test_negative_size(self, seeded) -> None:
        with pytest.raises(ValueError):
            pal.generate_warm_palette(-1, seeded)
        with pytest.raises(ValueError):
            pal.fast_happy_palette(-3, seeded)


# ---------------------------------------------------------------------------
# Profile constraints
# ---------------------------------------------------------------------------


class TestConstraints:
    @pytest.mark.parametrize("seed", [1, 7, 42, 1234])
    def test_warm_profile(self, seed: int) -> None:
        _check_profile(pal.generate_warm_palette(8, random.Random(seed)), pal.WARM)

    @pytest.mark.parametrize("seed", [1, 7, 42, 1234])
    def test_happy_profile(self, seed: int) -> None:
        _check_profile(pal.generate_happy_palette(8, random.Random(seed)), pal.HAPPY)

    def test_colors_are_in_gamut(self, seeded) -> None:
        for color in pal.generate_happy_palette(10, seeded):
            assert isinstance(color, Color)
            assert color.is_valid()

    def test_profiles_registry(self) -> None:
        assert pal.PROFILES == {"warm": pal.WARM, "happy": pal.HAPPY}


# ---------------------------------------------------------------------------
# Determinism and draw order
# ---------------------------------------------------------------------------


class TestDeterminism:
    def test_same_seed_same_palette(self) -> None:
        first = pal.generate_warm_palette(6, random.Random(99))
        second = pal.generate_warm_palette(6, random.Random(99))
        assert first == second

    def test_different_seeds_differ(self) -> None:
        first = pal.generate_happy_palette(6, random.Random(1))
        second = pal.generate_happy_palette(6, random.Random(2))
        assert first != second

    def test_draw_order_is_hue_saturation_value(self, scripted) -> None:
        rand = scripted([0.0, 0.0, 0.0])
        palette = pal.generate_warm_palette(1, rand)
        assert palette == [Color.from_hsv(0.0, 0.5, 0.35)]
        assert rand.calls == 3

    def test_hue_draw_spans_range_union(self, scripted) -> None:
        # 85 degrees of warm hue in total: 0.8 lands 8 degrees into [335, 360)
        rand = scripted([0.8])
        assert pal._draw_hue(rand, pal.WARM.hue_ranges) == pytest.approx(343.0)

    def test_hue_draw_first_range(self, scripted) -> None:
        rand = scripted([0.5])
        assert pal._draw_hue(rand, pal.WARM.hue_ranges) == pytest.approx(42.5)


# ---------------------------------------------------------------------------
# Bounded rejection
# ---------------------------------------------------------------------------


class TestGenerationError:
    def test_unreachable_separation(self, seeded) -> None:
        profile = pal.HAPPY._replace(name="spread", lightness=(0.0, 100.0), min_separation=1000.0)
        with pytest.raises(GenerationError, match="accepted 1 of 2"):
            pal.generate_palette(2, profile, seeded)

    def test_unreachable_lightness(self, scripted) -> None:
        profile = pal.WARM._replace(lightness=(101.0, 102.0))
        rand = scripted(itertools.repeat(0.5))
        with pytest.raises(GenerationError) as excinfo:
            pal.generate_palette(3, profile, rand)
        assert rand.calls == 3 * pal.max_attempts(3)
        assert isinstance(excinfo.value, PalettelabError)

    def test_max_attempts(self) -> None:
        assert pal.max_attempts(0) == 1000
        assert pal.max_attempts(1) == 1000
        assert pal.max_attempts(5) == 5000

    def test_is_acceptable(self) -> None:
        dark = Color.from_hsv(20.0, 0.6, 0.45)
        assert pal.is_acceptable(dark, [], pal.WARM)
        assert not pal.is_acceptable(dark, [dark], pal.WARM)
        assert not pal.is_acceptable(Color(1.0, 1.0, 1.0), [], pal.WARM)


# ---------------------------------------------------------------------------
# Evenly spaced palettes
# ---------------------------------------------------------------------------


class TestFastPalettes:
    def test_hues_are_evenly_spaced(self, seeded) -> None:
        colors = pal.fast_happy_palette(4, seeded)
        hues = [color.hsv()[0] for color in colors]
        assert hues == pytest.approx([0.0, 90.0, 180.0, 270.0], abs=1e-6)

    def test_two_draws_per_color(self, scripted) -> None:
        rand = scripted(itertools.repeat(0.25))
        assert len(pal.fast_warm_palette(5, rand)) == 5
        assert rand.calls == 10

    def test_zero(self, exploding) -> None:
        assert pal.fast_warm_palette(0, exploding) == []

    def test_deterministic(self) -> None:
        assert pal.fast_warm_palette(6, random.Random(3)) == pal.fast_warm_palette(6, random.Random(3))
