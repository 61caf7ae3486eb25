#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/core/errors.py


class FaceShiftError(Exception):
    """Base class for every error raised by faceshift."""


class ShiftConfigError(FaceShiftError, ValueError):
    """Raised when shift settings, a hue table or a matrix are malformed."""


class UnknownColorError(FaceShiftError, KeyError):
    """Raised when a color name or hex string cannot be resolved to RGB."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown color: '{self.name}'"
