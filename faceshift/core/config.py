#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/core/config.py

# ==========================================
# Shift Defaults
# ==========================================

DEFAULT_INTENSITY = 0.9            # Scale applied to the channels a hue dims
DEFAULT_MINIMUM = 0.0              # Value of every off-diagonal cell
DEFAULT_MAXIMUM = 1.0              # Scale applied to the channels a hue keeps
DEFAULT_FORCE_FIT = False          # Run the force-fit pass after the matrix product
DEFAULT_PRECISION = 2              # Hex digits per channel in the encoded result

MIN_PRECISION = 1                  # #RGB
MAX_PRECISION = 4                  # #RRRRGGGGBBBB

UNIT = 1.0                         # Normalized channel maximum
HEX_BASE = 16
MATRIX_SIZE = 3                    # Rows and columns of every transform matrix

# ==========================================
# Symbolic Matrix Cells
# ==========================================

# Spellings accepted in configuration data for the three substitutable roles.
# Single letters follow the compact notation of the built-in table below.
ROLE_ALIASES = {
    "i": "intensity",
    "intensity": "intensity",
    "m": "minimum",
    "min": "minimum",
    "minimum": "minimum",
    "M": "maximum",
    "max": "maximum",
    "maximum": "maximum",
}

# Built-in hue matrices. Every row keeps its own channel on the diagonal
# (dimmed by "i" or kept at "M") and takes "m" from the two others.
SHIFTS = {
    "blue": [
        ["i", "m", "m"],
        ["m", "M", "m"],
        ["m", "m", "M"],
    ],
    "pink": [
        ["M", "m", "m"],
        ["m", "i", "m"],
        ["m", "m", "M"],
    ],
    "yellow": [
        ["M", "m", "m"],
        ["m", "M", "m"],
        ["m", "m", "i"],
    ],
    "peach": [
        ["M", "m", "m"],
        ["m", "i", "m"],
        ["m", "m", "i"],
    ],
    "green": [
        ["i", "m", "m"],
        ["m", "M", "m"],
        ["m", "m", "i"],
    ],
    "purple": [
        ["i", "m", "m"],
        ["m", "i", "m"],
        ["m", "m", "M"],
    ],
}

# ==========================================
# Faces & Properties
# ==========================================

# Faces shifted regardless of the theme, followed by every face in the
# theme carrying the syntax highlighting prefix.
FIXED_FACES = [
    "default",
    "cursor",
    "highlight",
    "region",
]
FACE_PREFIX = "font-lock-"

FOREGROUND = "foreground"
BACKGROUND = "background"
PROPERTIES = (FOREGROUND, BACKGROUND)

# Value of a face property that carries no explicit color
UNSPECIFIED = "unspecified"

HOOK_SUFFIX = "-hook"
DEFAULT_CONTEXT = "fundamental-mode"

# ==========================================
# CLI UI & Data Structures
# ==========================================

OUTPUT_FORMATS = ["text", "json", "prettyjson"]

# Keys accepted in a --config JSON file
CONFIG_KEYS = [
    "intensity",
    "minimum",
    "maximum",
    "force_fit",
    "precision",
    "shifts",
    "faces",
    "ignore",
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
