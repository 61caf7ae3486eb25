#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/logic/shift/renderer.py

import json
from typing import Dict, List, Optional, Tuple

from faceshift.core import config as c
from faceshift.core.matrix import Role, validate_matrix
from faceshift.shared.preview import print_color_block, print_shift_block
from .engine import Override
from .host import FaceTable


def _dump(data, fmt: str) -> None:
    print(json.dumps(data, indent=4 if fmt == "prettyjson" else None))


def _cell_label(cell):
    return cell.value if isinstance(cell, Role) else cell


def render_hues(shifts: Dict[str, list], fmt: str = "text") -> None:
    """Print the available hues, with their matrices in JSON formats."""
    if fmt == "text":
        for hue in sorted(shifts):
            print(hue)
        return
    data = {
        hue: [[_cell_label(x) for x in row] for row in validate_matrix(matrix)]
        for hue, matrix in sorted(shifts.items())
    }
    _dump(data, fmt)


def render_overrides(overrides: List[Override], table: FaceTable, hue: str, fmt: str = "text") -> None:
    """Print installed overrides (text) or the shifted theme (json)."""
    if fmt != "text":
        _dump(table.snapshot(), fmt)
        return

    print()
    label = f"{c.MSG_BOLD_COLORS['info']}{hue}{c.RESET}"
    print(f"{c.BOLD_WHITE}shift{c.RESET}   {label}   {c.MSG_BOLD_COLORS['dim']}{len(overrides)} overrides{c.RESET}")
    print()
    for o in overrides:
        print_shift_block(o.old, o.new, f"{o.face} {c.MSG_BOLD_COLORS['dim']}{o.prop[:2]}{c.RESET}")
    print()


def render_preview(value: str, title: str, shifted: List[Tuple[str, Optional[str]]], fmt: str = "text") -> None:
    """Print a base color followed by its shifted version for each hue."""
    if fmt != "text":
        _dump({"color": value, "shifts": dict(shifted)}, fmt)
        return

    print()
    print_color_block(value, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for hue, new in shifted:
        print_color_block(new, f"{c.MSG_BOLD_COLORS['info']}{hue}{c.RESET}")
    print()
