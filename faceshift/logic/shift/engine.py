#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/logic/shift/engine.py

import copy
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional

from faceshift.core import config as c
from faceshift.core.conversions import Color, encode_hex, name_to_rgb
from faceshift.core.errors import ShiftConfigError, UnknownColorError
from faceshift.core.matrix import (
    ResolvedMatrix,
    apply_matrix,
    clamp_to_unit_range,
    resolve_matrix,
    validate_matrix,
    validate_scalars,
)
from faceshift.shared.logger import log
from .host import ContextProvider, FaceSource, HookRegistry, OverrideSink, hook_name


@dataclass
class ShiftSettings:
    """Scalars, hue table and face list a shift action is built from."""

    intensity: float = c.DEFAULT_INTENSITY
    minimum: float = c.DEFAULT_MINIMUM
    maximum: float = c.DEFAULT_MAXIMUM
    force_fit: bool = c.DEFAULT_FORCE_FIT
    precision: int = c.DEFAULT_PRECISION
    shifts: Dict[str, list] = field(default_factory=lambda: copy.deepcopy(c.SHIFTS))
    faces: List[str] = field(default_factory=lambda: list(c.FIXED_FACES))
    ignore: List[str] = field(default_factory=list)

    def validate(self) -> None:
        validate_scalars(self.intensity, self.minimum, self.maximum)
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) \
                or not c.MIN_PRECISION <= self.precision <= c.MAX_PRECISION:
            raise ShiftConfigError(
                f"precision must be an integer from {c.MIN_PRECISION} to {c.MAX_PRECISION}, "
                f"got {self.precision!r}"
            )
        for hue, matrix in self.shifts.items():
            try:
                validate_matrix(matrix)
            except ShiftConfigError as e:
                raise ShiftConfigError(f"hue '{hue}': {e}") from e

    def matrix_for(self, hue: str) -> ResolvedMatrix:
        """Look up and resolve the matrix of `hue` against the current scalars."""
        if hue not in self.shifts:
            known = ", ".join(sorted(self.shifts)) or "none"
            raise ShiftConfigError(f"unknown hue: '{hue}' (known hues: {known})")
        self.validate()
        return resolve_matrix(validate_matrix(self.shifts[hue]), self.intensity, self.minimum, self.maximum)


class Override(NamedTuple):
    """One installed override and the value it replaced."""

    cookie: int
    face: str
    prop: str
    old: str
    new: str


def transform_color(color: Color, matrix: ResolvedMatrix, force_fit: bool) -> Color:
    """Apply the matrix, then the force-fit clamp when enabled."""
    shifted = apply_matrix(matrix, color)
    if force_fit:
        shifted = clamp_to_unit_range(shifted)
    return shifted


def shift_face_color(
    current_color_name: Optional[str],
    matrix: ResolvedMatrix,
    force_fit: bool,
    precision: int = c.DEFAULT_PRECISION,
    lookup: Callable[[str], Color] = name_to_rgb,
) -> Optional[str]:
    """Shift one face property and return the new hex value.

    Returns None when the property has no explicit color, in which case
    nothing should be installed. Unresolvable names raise UnknownColorError.
    """
    if current_color_name is None or current_color_name == c.UNSPECIFIED:
        return None
    color = lookup(current_color_name)
    return encode_hex(transform_color(color, matrix, force_fit), precision)


class ShiftAction:
    """Zero-argument action applying one resolved hue matrix to a face set.

    The matrix is resolved once, when the action is built. Each call
    installs fresh overrides unless the current context is ignored.
    """

    def __init__(
        self,
        hue: str,
        matrix: ResolvedMatrix,
        faces: Iterable[str],
        ignored_contexts: Iterable[str],
        source: FaceSource,
        sink: OverrideSink,
        contexts: ContextProvider,
        force_fit: bool = c.DEFAULT_FORCE_FIT,
        precision: int = c.DEFAULT_PRECISION,
        lookup: Callable[[str], Color] = name_to_rgb,
    ):
        self.hue = hue
        self.matrix = matrix
        self.faces = list(faces)
        self.ignored_contexts = frozenset(ignored_contexts)
        self.source = source
        self.sink = sink
        self.contexts = contexts
        self.force_fit = force_fit
        self.precision = precision
        self.lookup = lookup
        self.installed: List[Override] = []

    def __repr__(self) -> str:
        return f"ShiftAction(hue={self.hue!r}, faces={len(self.faces)})"

    def is_ignored(self) -> bool:
        if not self.ignored_contexts:
            return False
        return self.contexts.is_descendant_of(self.contexts.current_context(), self.ignored_contexts)

    def __call__(self) -> List[Override]:
        if self.is_ignored():
            return []

        applied = []
        for face in self.faces:
            for prop in c.PROPERTIES:
                old = self.source.face_attribute(face, prop)
                try:
                    new = shift_face_color(old, self.matrix, self.force_fit, self.precision, self.lookup)
                except UnknownColorError as e:
                    log("warning", f"{face} {prop}: {e}, left unchanged")
                    continue
                if new is None:
                    continue
                cookie = self.sink.install_override(face, prop, new)
                applied.append(Override(cookie, face, prop, old, new))

        self.installed.extend(applied)
        return applied

    def revert(self) -> int:
        """Remove every override this action installed; returns how many were removed."""
        removed = sum(1 for o in self.installed if self.sink.remove_override(o.cookie))
        self.installed = []
        return removed


def expand_faces(settings: ShiftSettings, source: FaceSource, prefix: Optional[str] = c.FACE_PREFIX) -> List[str]:
    """Configured faces the source defines, then every source face under `prefix`.

    Sources that cannot list their faces get the configured faces as is.
    """
    if not hasattr(source, "faces_with_prefix"):
        return list(settings.faces)
    prefixed = source.faces_with_prefix(prefix) if prefix else []
    faces = []
    for face in list(settings.faces) + prefixed:
        if source.has_face(face) and face not in faces:
            faces.append(face)
    return faces


def build_shift_action(
    hue_name: str,
    ignored_contexts: Iterable[str] = (),
    *,
    source: FaceSource,
    contexts: ContextProvider,
    sink: Optional[OverrideSink] = None,
    settings: Optional[ShiftSettings] = None,
    faces: Optional[Iterable[str]] = None,
    lookup: Callable[[str], Color] = name_to_rgb,
) -> ShiftAction:
    """Build the action shifting `faces` toward `hue_name`.

    Without `faces`, the configured faces plus every prefixed face the
    source defines are shifted.

    Raises ShiftConfigError here, not on invocation, for an unknown hue,
    a malformed matrix or non-finite scalars.
    """
    settings = settings or ShiftSettings()
    matrix = settings.matrix_for(hue_name)
    return ShiftAction(
        hue=hue_name,
        matrix=matrix,
        faces=expand_faces(settings, source) if faces is None else faces,
        ignored_contexts=ignored_contexts,
        source=source,
        sink=source if sink is None else sink,
        contexts=contexts,
        force_fit=settings.force_fit,
        precision=settings.precision,
        lookup=lookup,
    )


def setup(
    hook_map: Dict[str, str],
    hooks: HookRegistry,
    *,
    source: FaceSource,
    contexts: ContextProvider,
    sink: Optional[OverrideSink] = None,
    settings: Optional[ShiftSettings] = None,
    faces: Optional[Iterable[str]] = None,
) -> Dict[str, ShiftAction]:
    """Register one shift action per `context -> hue` pair on the context's hook.

    All actions are built before any is registered, so a bad hue leaves
    the registry untouched.
    """
    settings = settings or ShiftSettings()
    faces = None if faces is None else list(faces)
    actions = {
        context: build_shift_action(
            hue,
            settings.ignore,
            source=source,
            contexts=contexts,
            sink=sink,
            settings=settings,
            faces=faces,
        )
        for context, hue in hook_map.items()
    }
    for context, action in actions.items():
        hooks.add_hook(hook_name(context), action)
    return actions


def teardown(actions: Dict[str, ShiftAction], hooks: HookRegistry) -> int:
    """Unregister actions added by setup() and remove their overrides."""
    removed = 0
    for context, action in actions.items():
        hooks.remove_hook(hook_name(context), action)
        removed += action.revert()
    return removed


def shift_by_hues(value: str, settings: ShiftSettings, hues: Iterable[str]) -> List[tuple]:
    """Shift a single color value toward each hue in turn."""
    return [
        (hue, shift_face_color(value, settings.matrix_for(hue), settings.force_fit, settings.precision))
        for hue in hues
    ]
