#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/logic/shift/resolver.py

import argparse
import json
import sys
from typing import Any, Dict, Optional

from faceshift.core import config as c
from faceshift.core.errors import ShiftConfigError
from .engine import ShiftSettings, expand_faces
from .host import ContextTree, FaceTable


def _read_json(path: str, what: str) -> Any:
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as e:
        raise ShiftConfigError(f"cannot read {what} '{path}': {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ShiftConfigError(f"invalid JSON in {what} '{path}': {e.msg} (line {e.lineno})") from e


def load_config(path: str) -> Dict[str, Any]:
    """Read a JSON settings file, rejecting unknown keys."""
    data = _read_json(path, "config")
    if not isinstance(data, dict):
        raise ShiftConfigError(f"config '{path}' must hold a JSON object")
    unknown = sorted(set(data) - set(c.CONFIG_KEYS))
    if unknown:
        raise ShiftConfigError(f"unknown config keys in '{path}': {', '.join(unknown)}")
    return data


def settings_from_mapping(data: Dict[str, Any], base: Optional[ShiftSettings] = None) -> ShiftSettings:
    """Overlay a config mapping on `base` (defaults when None).

    'shifts' entries extend the built-in hue table; a hue with the same
    name replaces the built-in one.
    """
    settings = base or ShiftSettings()
    for key in ("intensity", "minimum", "maximum", "force_fit", "precision"):
        if key in data:
            setattr(settings, key, data[key])
    if "shifts" in data:
        if not isinstance(data["shifts"], dict):
            raise ShiftConfigError("'shifts' must map hue names to matrices")
        settings.shifts.update(data["shifts"])
    for key in ("faces", "ignore"):
        if key in data:
            value = data[key]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ShiftConfigError(f"'{key}' must be a list of names")
            setattr(settings, key, list(value))
    if not isinstance(settings.force_fit, bool):
        raise ShiftConfigError(f"force_fit must be true or false, got {settings.force_fit!r}")
    settings.validate()
    return settings


def load_settings(args: argparse.Namespace) -> ShiftSettings:
    """Defaults, then the --config file, then explicit command line flags."""
    settings = ShiftSettings()
    config_path = getattr(args, "config", None)
    if config_path:
        settings = settings_from_mapping(load_config(config_path), settings)

    overrides = {}
    for key in ("intensity", "minimum", "maximum", "precision"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    if getattr(args, "force_fit", False):
        overrides["force_fit"] = True
    if getattr(args, "faces", None):
        overrides["faces"] = list(args.faces)
    if getattr(args, "ignore", None):
        overrides["ignore"] = settings.ignore + list(args.ignore)
    return settings_from_mapping(overrides, settings)


def load_theme(path: str) -> FaceTable:
    """Read a JSON theme of the form {face: {"foreground": ..., "background": ...}}."""
    data = _read_json(path, "theme")
    if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
        raise ShiftConfigError(f"theme '{path}' must map face names to attribute objects")
    for face, attrs in data.items():
        for prop in c.PROPERTIES:
            value = attrs.get(prop)
            if value is not None and not isinstance(value, str):
                raise ShiftConfigError(
                    f"theme '{path}': {face} {prop} must be a color string or null, got {value!r}"
                )
    return FaceTable(data)


def build_contexts(args: argparse.Namespace) -> ContextTree:
    """Context tree from repeated --parents CHILD:PARENT flags."""
    tree = ContextTree(current=getattr(args, "mode", None) or c.DEFAULT_CONTEXT)
    for child, parent in getattr(args, "parents", None) or []:
        tree.derive(child, parent)
    return tree
