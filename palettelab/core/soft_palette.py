#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/soft_palette.py

from typing import Callable, List, NamedTuple, Optional, Tuple

from . import config as c
from . import conversions as conv
from .color import Color
from .errors import GenerationError

Lab = Tuple[float, float, float]


class SoftPaletteSettings(NamedTuple):
    """
    Tuning for soft_palette_ex.

    check_color restricts the usable Lab space; it receives (L, a, b) with L
    in [0, 100]. iterations bounds the k-means passes. many_samples switches
    to a finer sampling grid, for constraints that carve the space oddly.
    """

    check_color: Optional[Callable[[float, float, float], bool]] = None
    iterations: int = c.SOFT_ITERATIONS
    many_samples: bool = False


def _intn(rand, n: int) -> int:
    return min(int(rand.random() * n), n - 1)


def _grid(lo: float, hi: float, step: float) -> List[float]:
    return [lo + i * step for i in range(int(round((hi - lo) / step)) + 1)]


def _dist_sq(p: Lab, q: Lab) -> float:
    return (p[0] - q[0]) ** c.EXP_2 + (p[1] - q[1]) ** c.EXP_2 + (p[2] - q[2]) ** c.EXP_2


def _is_usable(lab: Lab, settings: SoftPaletteSettings) -> bool:
    if not Color(*conv.lab_to_rgb_unclamped(*lab)).is_valid():
        return False
    return settings.check_color is None or bool(settings.check_color(*lab))


def _samples(settings: SoftPaletteSettings) -> List[Lab]:
    if settings.many_samples:
        step_l, step_ab = c.SOFT_MANY_STEP_L, c.SOFT_MANY_STEP_AB
    else:
        step_l, step_ab = c.SOFT_STEP_L, c.SOFT_STEP_AB

    ls = _grid(*c.SOFT_L_RANGE, step_l)
    abs_ = _grid(*c.SOFT_AB_RANGE, step_ab)
    return [
        (L, a, b)
        for L in ls
        for a in abs_
        for b in abs_
        if _is_usable((L, a, b), settings)
    ]


def _nearest(point: Lab, candidates: List[Lab]) -> int:
    best, best_d = 0, float("inf")
    for i, cand in enumerate(candidates):
        d = _dist_sq(point, cand)
        if d < best_d:
            best, best_d = i, d
    return best


def soft_palette_ex(n: int, settings: SoftPaletteSettings, rand) -> List[Color]:
    """
    Generate n distinct colors by k-means clustering of the usable Lab space.

    The space is sampled on a regular grid, keeping in-gamut points that pass
    settings.check_color. Initial means are distinct random samples. When a
    cluster mean leaves the usable space (only possible with a check_color)
    or a cluster runs empty, the nearest unused sample takes its place, so
    the result degrades to k-medoids instead of failing.

    Raises GenerationError when fewer usable samples than n exist.
    """
    if n < 0:
        raise ValueError(f"palette size must be non-negative, got {n}")
    if n == 0:
        return []

    samples = _samples(settings)
    if len(samples) < n:
        raise GenerationError(
            f"soft palette: {n} colors requested but only {len(samples)} samples are usable; "
            "try many_samples or a looser check_color"
        )
    if len(samples) == n:
        return [Color.from_lab(*s) for s in samples]

    chosen = set()
    means: List[Lab] = []
    while len(means) < n:
        idx = _intn(rand, len(samples))
        if idx not in chosen:
            chosen.add(idx)
            means.append(samples[idx])

    for _ in range(settings.iterations):
        clusters: List[List[Lab]] = [[] for _ in means]
        for sample in samples:
            clusters[_nearest(sample, means)].append(sample)

        mean_set = set(means)
        used = [s in mean_set for s in samples]

        new_means: List[Lab] = []
        for members in clusters:
            free = [i for i, u in enumerate(used) if not u] or list(range(len(samples)))
            if not members:
                # Reseed an empty cluster from an unused sample
                idx = free[_intn(rand, len(free))]
                used[idx] = True
                new_means.append(samples[idx])
                continue

            count = len(members)
            avg = (
                sum(m[0] for m in members) / count,
                sum(m[1] for m in members) / count,
                sum(m[2] for m in members) / count,
            )
            if _is_usable(avg, settings):
                new_means.append(avg)
                continue

            # Medoid fallback: closest sample not already standing in for a mean
            idx = free[_nearest(avg, [samples[i] for i in free])]
            used[idx] = True
            new_means.append(samples[idx])

        if new_means == means:
            break
        means = new_means

    return [Color.from_lab(*m) for m in means]


def soft_palette(n: int, rand) -> List[Color]:
    """Soft palette over the whole sRGB gamut with default settings."""
    return soft_palette_ex(n, SoftPaletteSettings(), rand)


def _warm_check(L: float, a: float, b: float) -> bool:
    _, chroma, _ = conv.lab_to_hcl(L, a, b)
    lo_c, hi_c = c.SOFT_WARM_CHROMA
    lo_l, hi_l = c.SOFT_WARM_LIGHTNESS
    return lo_c <= chroma <= hi_c and lo_l <= L <= hi_l


def _happy_check(L: float, a: float, b: float) -> bool:
    _, chroma, _ = conv.lab_to_hcl(L, a, b)
    lo_l, hi_l = c.SOFT_HAPPY_LIGHTNESS
    return chroma >= c.SOFT_HAPPY_MIN_CHROMA and lo_l <= L <= hi_l


def soft_warm_palette(n: int, rand) -> List[Color]:
    """Muted, darker colors: HCL chroma 10..40, lightness 20..50."""
    return soft_palette_ex(n, SoftPaletteSettings(check_color=_warm_check), rand)


def soft_happy_palette(n: int, rand) -> List[Color]:
    """Saturated mid-light colors: HCL chroma at least 30, lightness 40..80."""
    return soft_palette_ex(n, SoftPaletteSettings(check_color=_happy_check), rand)
