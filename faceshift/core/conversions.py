#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/core/conversions.py

import functools
import re
from typing import Tuple

from . import config as c
from .errors import UnknownColorError
from .names import WEB_COLORS

Color = Tuple[float, float, float]

LRU_CACHE_SIZE = 1024
RGB_MAX = 255.0


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.UNIT, v))


def _channel_max(precision: int) -> int:
    return c.HEX_BASE ** precision - 1


def _norm_name_key(s: str) -> str:
    return re.sub(r"[^0-9a-z]", "", s.lower())


def encode_hex(color: Color, precision: int = c.DEFAULT_PRECISION) -> str:
    """Encode a color as '#' followed by `precision` hex digits per channel.

    Channels outside [0, 1] are clipped to the nearest bound before
    scaling, so 1.5 encodes as FF and -0.2 as 00 at two digits.
    """
    top = _channel_max(precision)
    digits = "".join(
        f"{int(round(_clamp01(channel) * top)):0{precision}X}" for channel in color
    )
    return f"#{digits}"


def decode_hex(value: str) -> Color:
    """Decode #RGB, #RRGGBB, #RRRGGGBBB or #RRRRGGGGBBBB into unit floats."""
    s = str(value).strip().lstrip("#")
    n, rem = divmod(len(s), 3)
    if rem or not (c.MIN_PRECISION <= n <= c.MAX_PRECISION) or re.fullmatch(r"[0-9A-Fa-f]+", s) is None:
        raise UnknownColorError(value)
    top = _channel_max(n)
    return tuple(int(s[i * n : (i + 1) * n], 16) / top for i in range(3))


@functools.lru_cache(maxsize=LRU_CACHE_SIZE)
def name_to_rgb(name: str) -> Color:
    """Resolve a color name or hex string to an RGB triple of unit floats."""
    if name is None:
        raise UnknownColorError(name)
    s = str(name).strip()
    if s.startswith("#"):
        return decode_hex(s)

    hex_code = WEB_COLORS.get(_norm_name_key(s))
    if hex_code is None:
        raise UnknownColorError(name)
    return decode_hex(hex_code)


def to_rgb255(color: Color) -> Tuple[int, int, int]:
    """Scale a unit color to clipped 8-bit integers for terminal output."""
    return tuple(int(round(_clamp01(channel) * RGB_MAX)) for channel in color)
