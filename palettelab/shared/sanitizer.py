#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/sanitizer.py

import argparse
import re

from palettelab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes loose hex input into the strict '#RRGGBB' form.
    Accepts a missing '#', lowercase digits and 3-digit shorthand ('F80' -> '#FF8800').
    Returns an empty string when the input is not a 3- or 6-digit hex code.
    """
    if value is None:
        return ""
    s = str(value).strip().lstrip("#").upper()

    # Only 3 or 6 hexadecimal digits are accepted, nothing else
    if not re.fullmatch(r"[0-9A-F]{3}|[0-9A-F]{6}", s):
        return ""
    if len(s) == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        s = "".join([ch * 2 for ch in s])
    return f"{c.HEX_PREFIX}{s}"


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)

    # Check if the original string explicitly starts with a negative sign
    is_negative = s.strip().startswith("-")

    # Regex [0-9] extracts only the numeric digits
    digits_only = "".join(re.findall(r"[0-9]", s))

    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_alnum_only(value: str) -> str:
    """
    Extracts only letters and digits from a string, lowercasing them.
    Useful for cleaning up profile, metric and format identifiers.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z0-9]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = normalize_hex(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_string_clean(v: str) -> str:
    """Validator for identifier options (e.g., format or profile names)."""
    cleaned = _extract_alnum_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "hex": handle_hex,
    "colorspace": handle_string_clean,
    "distance_metric": handle_string_clean,
    "to_format": handle_string_clean,
    "profile": handle_string_clean,

    "count": handle_int_range(0, c.MAX_COUNT),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
    "steps": handle_int_range(1, c.MAX_STEPS),
}
