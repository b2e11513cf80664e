#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/command_registry.py

from . import (
    convert,
    distance,
    gradient,
    palette,
)

SUBCOMMANDS = {
    'convert': convert,
    'distance': distance,
    'gradient': gradient,
    'palette': palette,
}
