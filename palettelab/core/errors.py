#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/errors.py


class PalettelabError(Exception):
    """Base class for errors raised by palettelab."""


class FormatError(PalettelabError, ValueError):
    """Raised when a hex color string is not exactly '#RRGGBB'."""


class GenerationError(PalettelabError, RuntimeError):
    """
    Raised when a rejection sampler gives up after its safety bound.

    This points at a profile whose ranges are too narrow (or whose separation
    is too large) for the requested count.
    """
