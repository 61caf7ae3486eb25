#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/shared/preview.py

import os
import re
import sys
from typing import Optional

from faceshift.core import config as c
from faceshift.core.conversions import name_to_rgb, to_rgb255
from faceshift.core.errors import UnknownColorError

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
SWATCH = " " * 8
VALUE_WIDTH = 13                   # len("#RRRRGGGGBBBB")
TITLE_WIDTH = 28


def ensure_truecolor() -> None:
    """Set COLORTERM so the swatches below render as 24-bit color."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def swatch(value: Optional[str]) -> str:
    """Colored block followed by the color value, or a dim marker when unset."""
    if value is None or value == c.UNSPECIFIED:
        return f"{c.MSG_BOLD_COLORS['dim']}{c.UNSPECIFIED:<{len(SWATCH) + 2 + VALUE_WIDTH}}{c.RESET}"
    try:
        r, g, b = to_rgb255(name_to_rgb(value))
    except UnknownColorError:
        return f"{c.MSG_BOLD_COLORS['error']}{'?' * len(SWATCH)}{c.RESET}  {value}"
    return f"\033[48;2;{r};{g};{b}m{SWATCH}{c.RESET}  {c.BOLD_WHITE}{value:<{VALUE_WIDTH}}{c.RESET}"


def print_color_block(value: str, title: str = "color", end: str = "\n") -> None:
    padding = " " * max(0, TITLE_WIDTH - get_visible_len(title))
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch(value)}", end=end)


def print_shift_block(old: Optional[str], new: str, title: str) -> None:
    """Print a face property before and after the shift on one line."""
    padding = " " * max(0, TITLE_WIDTH - get_visible_len(title))
    arrow = f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}"
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch(old)}  {arrow}  {swatch(new)}")
