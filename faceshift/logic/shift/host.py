#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/logic/shift/host.py
"""
Editor-side collaborators of the shift engine.

The engine only talks to the protocols below. The in-memory classes
model an editor theme closely enough to drive the CLI and the tests:
a face table with an additive override stack, a tree of contexts
(modes) where a context can derive from a parent, and named hooks run
when a context is activated.
"""

import itertools
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from faceshift.core import config as c


class FaceSource(Protocol):
    """Read access to face definitions."""

    def face_attribute(self, face: str, prop: str) -> str: ...


class OverrideSink(Protocol):
    """Installs and removes stacked per-face overrides."""

    def install_override(self, face: str, prop: str, value: str) -> int: ...

    def remove_override(self, cookie: int) -> bool: ...


class ContextProvider(Protocol):
    """Current context and derivation checks over the context hierarchy."""

    def current_context(self) -> str: ...

    def is_descendant_of(self, context: str, candidates: Iterable[str]) -> bool: ...


class FaceTable:
    """Face definitions plus a stack of overrides layered on top of them."""

    def __init__(self, faces: Optional[Dict[str, Dict[str, Optional[str]]]] = None):
        self._base = {name: dict(attrs or {}) for name, attrs in (faces or {}).items()}
        self._overrides: Dict[int, Tuple[str, str, str]] = {}
        self._cookies = itertools.count(1)

    def face_list(self) -> List[str]:
        return list(self._base)

    def has_face(self, face: str) -> bool:
        return face in self._base

    def faces_with_prefix(self, prefix: str) -> List[str]:
        return [face for face in self._base if face.startswith(prefix)]

    def face_attribute(self, face: str, prop: str) -> str:
        """Value from the face definition, ignoring overrides."""
        value = self._base.get(face, {}).get(prop)
        return c.UNSPECIFIED if value is None else value

    def effective_attribute(self, face: str, prop: str) -> str:
        """Value after overrides; the most recently installed one wins."""
        for o_face, o_prop, value in reversed(list(self._overrides.values())):
            if o_face == face and o_prop == prop:
                return value
        return self.face_attribute(face, prop)

    def install_override(self, face: str, prop: str, value: str) -> int:
        cookie = next(self._cookies)
        self._overrides[cookie] = (face, prop, value)
        return cookie

    def remove_override(self, cookie: int) -> bool:
        return self._overrides.pop(cookie, None) is not None

    def overrides(self) -> List[Tuple[int, str, str, str]]:
        return [(cookie, *entry) for cookie, entry in self._overrides.items()]

    def snapshot(self) -> Dict[str, Dict[str, str]]:
        """Effective theme: every face with overrides applied."""
        result = {face: dict(attrs) for face, attrs in self._base.items()}
        for face, prop, _ in self._overrides.values():
            result.setdefault(face, {})[prop] = self.effective_attribute(face, prop)
        return result


class ContextTree:
    """Contexts (modes) where each context may derive from one parent."""

    def __init__(self, parents: Optional[Dict[str, str]] = None, current: str = c.DEFAULT_CONTEXT):
        self._parents = dict(parents or {})
        self._current = current

    def derive(self, child: str, parent: str) -> None:
        self._parents[child] = parent

    def ancestry(self, context: str) -> List[str]:
        """The context followed by its parents, closest first."""
        chain = []
        while context is not None and context not in chain:
            chain.append(context)
            context = self._parents.get(context)
        return chain

    def is_descendant_of(self, context: str, candidates: Iterable[str]) -> bool:
        wanted = set(candidates)
        return any(ctx in wanted for ctx in self.ancestry(context))

    def current_context(self) -> str:
        return self._current

    def set_current(self, context: str) -> None:
        self._current = context


class HookRegistry:
    """Named lists of zero-argument functions."""

    def __init__(self):
        self._hooks: Dict[str, List[Callable[[], object]]] = defaultdict(list)

    def add_hook(self, name: str, fn: Callable[[], object]) -> None:
        if fn not in self._hooks[name]:
            self._hooks[name].append(fn)

    def remove_hook(self, name: str, fn: Callable[[], object]) -> bool:
        try:
            self._hooks[name].remove(fn)
        except ValueError:
            return False
        return True

    def hooks(self, name: str) -> List[Callable[[], object]]:
        return list(self._hooks.get(name, []))

    def run_hooks(self, name: str) -> List[object]:
        return [fn() for fn in self.hooks(name)]


def hook_name(context: str) -> str:
    return f"{context}{c.HOOK_SUFFIX}"


def activate_context(context: str, contexts: ContextTree, hooks: HookRegistry) -> List[object]:
    """Enter `context`: make it current, then run its hooks and those of its
    parents, outermost parent first."""
    contexts.set_current(context)
    results = []
    for ctx in reversed(contexts.ancestry(context)):
        results.extend(hooks.run_hooks(hook_name(ctx)))
    return results
