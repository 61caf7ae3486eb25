#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/core/matrix.py

import enum
import math
from typing import Tuple, Union

from . import config as c
from .conversions import Color
from .errors import ShiftConfigError


class Role(enum.Enum):
    """Symbolic matrix cell, substituted by a settings scalar on resolution."""

    INTENSITY = "intensity"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"


Cell = Union[float, Role]
TransformMatrix = Tuple[Tuple[Cell, Cell, Cell], ...]
ResolvedMatrix = Tuple[Tuple[float, float, float], ...]


def parse_cell(cell) -> Cell:
    """Turn a raw configuration cell (number, Role or role alias) into a Cell."""
    if isinstance(cell, Role):
        return cell
    if isinstance(cell, str):
        # 'm' and 'M' differ, longer spellings are case-insensitive
        alias = c.ROLE_ALIASES.get(cell)
        if alias is None and len(cell) > 1:
            alias = c.ROLE_ALIASES.get(cell.lower())
        if alias is None:
            raise ShiftConfigError(f"unknown matrix symbol: '{cell}'")
        return Role(alias)
    if isinstance(cell, bool) or not isinstance(cell, (int, float)):
        raise ShiftConfigError(f"invalid matrix cell: {cell!r}")
    if not math.isfinite(cell):
        raise ShiftConfigError(f"non-finite matrix cell: {cell!r}")
    return float(cell)


def validate_matrix(matrix) -> TransformMatrix:
    """Check that `matrix` is exactly 3x3 and return it with parsed cells."""
    if not isinstance(matrix, (list, tuple)) or len(matrix) != c.MATRIX_SIZE:
        raise ShiftConfigError(f"matrix must have {c.MATRIX_SIZE} rows: {matrix!r}")
    rows = []
    for row in matrix:
        if not isinstance(row, (list, tuple)) or len(row) != c.MATRIX_SIZE:
            raise ShiftConfigError(f"matrix row must have {c.MATRIX_SIZE} cells: {row!r}")
        rows.append(tuple(parse_cell(cell) for cell in row))
    return tuple(rows)


def validate_scalars(intensity: float, minimum: float, maximum: float) -> None:
    """Reject scalar settings that are not finite numbers."""
    for name, value in (("intensity", intensity), ("minimum", minimum), ("maximum", maximum)):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ShiftConfigError(f"{name} must be a finite number, got {value!r}")


def resolve_matrix(matrix, intensity: float, minimum: float, maximum: float) -> ResolvedMatrix:
    """Substitute every symbolic cell with the matching scalar.

    Numeric cells pass through unchanged. The result holds floats only.
    """
    values = {
        Role.INTENSITY: intensity,
        Role.MINIMUM: minimum,
        Role.MAXIMUM: maximum,
    }
    resolved = []
    for row in matrix:
        cells = (parse_cell(cell) for cell in row)
        resolved.append(tuple(float(values[x]) if isinstance(x, Role) else x for x in cells))
    return tuple(resolved)


def apply_matrix(matrix: ResolvedMatrix, color: Color) -> Color:
    """Multiply the RGB vector by the matrix: out[i] = sum(matrix[i][j] * color[j])."""
    return tuple(sum(cell * channel for cell, channel in zip(row, color)) for row in matrix)


def clamp_to_unit_range(color: Color) -> Color:
    """Force-fit pass: channels below 1.0 are raised to 1.0, the rest are kept.

    Not a [0, 1] clamp. Channels above 1.0 are left for encode_hex to clip.
    """
    return tuple(c.UNIT if channel < c.UNIT else channel for channel in color)
