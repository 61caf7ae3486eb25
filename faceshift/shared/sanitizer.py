#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/shared/sanitizer.py

import argparse
import math
import re
from typing import Tuple

from faceshift.core import config as c


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
    Normalizes hex input into '#' plus 3, 6, 9 or 12 uppercase digits.
    Shorthand 'F' and 'FF' are repeated, other odd lengths are padded
    with zeros or truncated to 6 digits.
    """
    if value is None:
        return ""
    s = str(value).replace("#", "").replace(" ", "").upper()

    # Keep only valid hexadecimal characters, ignoring any garbage input
    extracted = "".join(re.findall(r"[0-9A-F]", s))

    if not extracted:
        return ""

    L = len(extracted)
    if L in (3, 6, 9, 12):
        return f"#{extracted}"
    if L == 1:
        # 'A' becomes 'AAAAAA'
        return f"#{extracted * 6}"
    if L == 2:
        # 'AB' becomes 'ABABAB'
        return f"#{extracted * 3}"
    if L < 6:
        return f"#{extracted.ljust(6, '0')}"

    return f"#{extracted[:6]}"


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its sign.
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))

    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Parses a floating-point number, falling back to extracting digits from
    a noisy string while preserving the sign and keeping only the first
    decimal point encountered.
    """
    if value is None:
        return None

    s = str(value)
    try:
        val = float(s)
        if math.isfinite(val):
            return val
    except ValueError:
        pass
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    # Return None if string is empty or just a lonely dot
    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up output formats.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


def _extract_identifier(value: str) -> str:
    """
    Extracts a face or mode identifier: lowercase letters, digits and
    dashes, with surrounding dashes stripped.
    """
    if value is None:
        return ""
    s = str(value).strip().lower()
    return "".join(re.findall(r"[a-z0-9\-]", s)).strip("-")


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex color CLI arguments."""
    cleaned = normalize_hex(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_color_name(v: str) -> str:
    """Validator for color names; digits are kept for names like 'gray50'."""
    cleaned = re.sub(r"[^0-9a-z]", "", str(v).lower()) if v is not None else ""
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color name: '{raw}'")
    return cleaned


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (output formats)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_identifier(v: str) -> str:
    """Validator for face and mode names such as 'font-lock-string-face'."""
    cleaned = _extract_identifier(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid identifier: '{raw}'")
    return cleaned


def handle_hue_name(v: str) -> str:
    """Validator for hue names; case is kept so config hues match exactly."""
    cleaned = "".join(re.findall(r"[A-Za-z0-9_\-]", str(v).strip())) if v is not None else ""
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hue name: '{raw}'")
    return cleaned


def handle_parent_pair(v: str) -> Tuple[str, str]:
    """Validator for 'child:parent' context derivation pairs."""
    child, sep, parent = str(v).partition(":")
    child, parent = _extract_identifier(child), _extract_identifier(parent)
    if not sep or not child or not parent:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"expected CHILD:PARENT, got '{raw}'")
    return child, parent


def handle_float_any(v: str) -> float:
    """Validator for unbounded floating-point CLI arguments."""
    val = _extract_signed_float(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")
    return val


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that clamps an integer
    into the [min_v, max_v] range.
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


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that clamps a float
    into the [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "color_name": handle_color_name,
    "hue": handle_hue_name,
    "output": handle_string_clean,
    "face": handle_identifier,
    "context": handle_identifier,
    "parent": handle_parent_pair,
    "float": handle_float_any,
    "intensity": handle_float_range(0.0, 1.0),
    "precision": handle_int_range(c.MIN_PRECISION, c.MAX_PRECISION),
}
