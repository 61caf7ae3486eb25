"""Tests for the in-memory face table, context tree and hook registry."""

from faceshift.core import config as c
from faceshift.logic.shift.host import (
    ContextTree,
    FaceTable,
    activate_context,
    hook_name,
)


class TestFaceTable:
    """Test FaceTable."""

    def test_face_attribute(self, face_table):
        """Explicit values are returned, missing or null ones are unspecified."""
        assert face_table.face_attribute("default", "foreground") == "#808080"
        assert face_table.face_attribute("region", "foreground") == c.UNSPECIFIED
        assert face_table.face_attribute("font-lock-string-face", "background") == c.UNSPECIFIED
        assert face_table.face_attribute("no-such-face", "foreground") == c.UNSPECIFIED

    def test_faces_with_prefix(self, face_table):
        """Prefix matching keeps theme order."""
        assert face_table.faces_with_prefix("font-lock-") == [
            "font-lock-keyword-face",
            "font-lock-string-face",
        ]

    def test_overrides_stack(self, face_table):
        """The latest override wins; removing it uncovers the previous one."""
        first = face_table.install_override("default", "foreground", "#111111")
        second = face_table.install_override("default", "foreground", "#222222")

        assert face_table.effective_attribute("default", "foreground") == "#222222"
        assert face_table.remove_override(second)
        assert face_table.effective_attribute("default", "foreground") == "#111111"
        assert face_table.remove_override(first)
        assert face_table.effective_attribute("default", "foreground") == "#808080"

    def test_remove_out_of_order(self, face_table):
        """Overrides can be removed independently of install order."""
        first = face_table.install_override("default", "foreground", "#111111")
        face_table.install_override("default", "foreground", "#222222")
        face_table.remove_override(first)

        assert face_table.effective_attribute("default", "foreground") == "#222222"

    def test_remove_unknown_cookie(self, face_table):
        """Removing twice reports False the second time."""
        cookie = face_table.install_override("default", "background", "#FFFFFF")

        assert face_table.remove_override(cookie) is True
        assert face_table.remove_override(cookie) is False

    def test_cookies_unique(self):
        """Every install returns a new cookie."""
        table = FaceTable()
        cookies = {table.install_override("default", "foreground", "#000000") for _ in range(5)}

        assert len(cookies) == 5

    def test_snapshot(self, face_table):
        """The snapshot applies overrides and keeps other attributes."""
        face_table.install_override("default", "foreground", "#010203")
        face_table.install_override("new-face", "background", "#040506")
        snap = face_table.snapshot()

        assert snap["default"] == {"foreground": "#010203", "background": "black"}
        assert snap["new-face"] == {"background": "#040506"}
        assert snap["mode-line"] == {"foreground": "#808080", "background": "#C86432"}

    def test_input_not_shared(self, theme_data):
        """The table copies its input."""
        table = FaceTable(theme_data)
        theme_data["default"]["foreground"] = "#FFFFFF"

        assert table.face_attribute("default", "foreground") == "#808080"


class TestContextTree:
    """Test ContextTree."""

    def test_ancestry(self, contexts):
        """Ancestry lists the context and its parents, closest first."""
        assert contexts.ancestry("python-mode") == ["python-mode", "prog-mode", "fundamental-mode"]
        assert contexts.ancestry("unknown-mode") == ["unknown-mode"]

    def test_is_descendant_of(self, contexts):
        """Membership includes the context itself and its ancestors."""
        assert contexts.is_descendant_of("python-mode", {"python-mode"})
        assert contexts.is_descendant_of("python-mode", ["prog-mode"])
        assert contexts.is_descendant_of("python-mode", ["text-mode", "fundamental-mode"])
        assert not contexts.is_descendant_of("python-mode", ["text-mode"])
        assert not contexts.is_descendant_of("prog-mode", ["python-mode"])
        assert not contexts.is_descendant_of("python-mode", [])

    def test_cycle(self):
        """A derivation cycle does not loop forever."""
        tree = ContextTree({"a-mode": "b-mode", "b-mode": "a-mode"})

        assert tree.ancestry("a-mode") == ["a-mode", "b-mode"]
        assert not tree.is_descendant_of("a-mode", ["c-mode"])

    def test_current(self):
        """The current context defaults to fundamental-mode."""
        tree = ContextTree()

        assert tree.current_context() == c.DEFAULT_CONTEXT
        tree.set_current("org-mode")
        assert tree.current_context() == "org-mode"


class TestHookRegistry:
    """Test HookRegistry and activate_context."""

    def test_run_in_order(self, hooks):
        """Hooks run in registration order and return their results."""
        hooks.add_hook("x-hook", lambda: 1)
        hooks.add_hook("x-hook", lambda: 2)

        assert hooks.run_hooks("x-hook") == [1, 2]
        assert hooks.run_hooks("missing-hook") == []

    def test_no_duplicates(self, hooks):
        """Adding the same function twice registers it once."""
        def fn():
            return "ran"

        hooks.add_hook("x-hook", fn)
        hooks.add_hook("x-hook", fn)

        assert hooks.run_hooks("x-hook") == ["ran"]

    def test_remove(self, hooks):
        """Removed hooks no longer run."""
        def fn():
            return "ran"

        hooks.add_hook("x-hook", fn)

        assert hooks.remove_hook("x-hook", fn) is True
        assert hooks.remove_hook("x-hook", fn) is False
        assert hooks.run_hooks("x-hook") == []

    def test_hook_name(self):
        """Hook names append '-hook' to the context."""
        assert hook_name("python-mode") == "python-mode-hook"

    def test_activate_runs_parents_first(self, contexts, hooks):
        """Activation sets the context and runs hooks outermost parent first."""
        for ctx in ("fundamental-mode", "prog-mode", "python-mode", "text-mode"):
            hooks.add_hook(hook_name(ctx), lambda ctx=ctx: ctx)

        assert activate_context("python-mode", contexts, hooks) == [
            "fundamental-mode",
            "prog-mode",
            "python-mode",
        ]
        assert contexts.current_context() == "python-mode"
