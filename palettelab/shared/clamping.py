#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/clamping.py


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))
