#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/palette.py

"""
Constrained random palettes.

Candidates are drawn in HSV (hue, then saturation, then value), converted to
sRGB and accepted only if their Lab lightness falls inside the profile's band
and they sit at least `min_separation` (Lab distance) away from every color
already accepted. The random source is any object with a `random()` method
returning floats in [0, 1), e.g. `random.Random(seed)`; identical sources
produce identical palettes.
"""

from typing import Dict, List, NamedTuple, Sequence, Tuple

from . import config as c
from .color import Color
from .difference import distance_lab
from .errors import GenerationError

Range = Tuple[float, float]


class PaletteProfile(NamedTuple):
    """Sampling ranges and acceptance rules for one visual category."""

    name: str
    hue_ranges: Sequence[Range]
    saturation: Range
    value: Range
    lightness: Range
    min_separation: float


WARM = PaletteProfile(
    name="warm",
    hue_ranges=c.WARM_HUE_RANGES,
    saturation=c.WARM_SATURATION,
    value=c.WARM_VALUE,
    lightness=c.WARM_LIGHTNESS,
    min_separation=c.WARM_MIN_SEPARATION,
)

HAPPY = PaletteProfile(
    name="happy",
    hue_ranges=c.HAPPY_HUE_RANGES,
    saturation=c.HAPPY_SATURATION,
    value=c.HAPPY_VALUE,
    lightness=c.HAPPY_LIGHTNESS,
    min_separation=c.HAPPY_MIN_SEPARATION,
)

PROFILES: Dict[str, PaletteProfile] = {
    WARM.name: WARM,
    HAPPY.name: HAPPY,
}


def _draw(rand, bounds: Range) -> float:
    lo, hi = bounds
    return lo + rand.random() * (hi - lo)


def _draw_hue(rand, hue_ranges: Sequence[Range]) -> float:
    """One uniform draw spread over the union of the hue ranges."""
    total = sum(hi - lo for lo, hi in hue_ranges)
    offset = rand.random() * total
    for lo, hi in hue_ranges:
        width = hi - lo
        if offset < width:
            return (lo + offset) % c.HUE_MAX
        offset -= width
    # Only reachable through float rounding on the last range
    return hue_ranges[-1][1] % c.HUE_MAX


def propose(profile: PaletteProfile, rand) -> Color:
    """Draw one candidate: hue, then saturation, then value."""
    h = _draw_hue(rand, profile.hue_ranges)
    s = _draw(rand, profile.saturation)
    v = _draw(rand, profile.value)
    return Color.from_hsv(h, s, v)


def is_acceptable(candidate: Color, accepted: Sequence[Color], profile: PaletteProfile) -> bool:
    """Lightness inside the band and far enough from every accepted color."""
    L, _, _ = candidate.lab()
    lo, hi = profile.lightness
    if not lo <= L <= hi:
        return False
    return all(distance_lab(candidate, other) >= profile.min_separation for other in accepted)


def max_attempts(n: int) -> int:
    return max(c.PALETTE_MIN_ATTEMPTS, n * c.PALETTE_ATTEMPTS_PER_COLOR)


def generate_palette(n: int, profile: PaletteProfile, rand) -> List[Color]:
    """
    Generate `n` colors satisfying `profile` by rejection sampling.

    Raises GenerationError when the safety bound of candidates is exhausted
    before `n` colors are accepted, and ValueError for a negative `n`.
    n == 0 returns an empty list without touching the random source.
    """
    if n < 0:
        raise ValueError(f"palette size must be non-negative, got {n}")

    accepted: List[Color] = []
    limit = max_attempts(n)
    attempts = 0

    while len(accepted) < n:
        if attempts >= limit:
            raise GenerationError(
                f"{profile.name} palette: accepted {len(accepted)} of {n} colors "
                f"after {attempts} candidates"
            )
        attempts += 1
        candidate = propose(profile, rand)
        if is_acceptable(candidate, accepted, profile):
            accepted.append(candidate)

    return accepted


def generate_warm_palette(n: int, rand) -> List[Color]:
    """Dark, muted reds, oranges and yellows."""
    return generate_palette(n, WARM, rand)


def generate_happy_palette(n: int, rand) -> List[Color]:
    """Bright, saturated colors of any hue."""
    return generate_palette(n, HAPPY, rand)


# ==========================================
# Evenly Spaced Palettes
# ==========================================


def _fast_palette(n: int, saturation: Range, value: Range, rand) -> List[Color]:
    if n < 0:
        raise ValueError(f"palette size must be non-negative, got {n}")
    return [
        Color.from_hsv(i * (c.HUE_MAX / n), _draw(rand, saturation), _draw(rand, value))
        for i in range(n)
    ]


def fast_warm_palette(n: int, rand) -> List[Color]:
    """Hues evenly spread around the wheel with warm saturation and value. No rejection."""
    return _fast_palette(n, c.FAST_WARM_SATURATION, c.FAST_WARM_VALUE, rand)


def fast_happy_palette(n: int, rand) -> List[Color]:
    """Hues evenly spread around the wheel, bright and saturated. No rejection."""
    return _fast_palette(n, c.FAST_HAPPY_SATURATION, c.FAST_HAPPY_VALUE, rand)
