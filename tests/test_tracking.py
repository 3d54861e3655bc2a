"""Tests for glob matching and tracking policy resolution."""

import pytest

from size_impact.tracking import compile_pattern, is_tracked, matches, resolve_tracking


class TestGlobMatching:
    @pytest.mark.parametrize(
        "pattern,identity",
        [
            ("a.js", "a.js"),
            ("*.js", "a.js"),
            ("**/*", "a.js"),
            ("**/*", "dir/sub/a.js"),
            ("**/*.map", "dir/a.js.map"),
            ("dir/**", "dir/sub/a.js"),
            ("dir/", "dir/a.js"),
            ("file.?s", "file.js"),
            ("./**/*", "a.js"),
            ("**/*", "./a.js"),
            ("src/**/index.js", "src/index.js"),
        ],
    )
    def test_matches(self, pattern, identity):
        assert matches(pattern, identity)

    @pytest.mark.parametrize(
        "pattern,identity",
        [
            ("a.js", "b.js"),
            ("*.js", "dir/a.js"),
            ("a.js", "dir/a.js"),
            ("**/*.map", "a.js"),
            ("dir/", "other/a.js"),
            ("file.?s", "file.jss"),
            ("a.js", "a.jsx"),
            ("a.js", "a-js"),
        ],
    )
    def test_does_not_match(self, pattern, identity):
        assert not matches(pattern, identity)

    def test_dot_in_pattern_is_literal(self):
        assert compile_pattern("a.js").match("aXjs") is None


class TestTrackingPolicy:
    def test_no_match_defaults_to_untracked(self):
        assert is_tracked("a.js", {"*.css": True}) is False

    def test_missing_policy_tracks_nothing(self):
        assert is_tracked("a.js", None) is False
        assert is_tracked("a.js", {}) is False

    def test_last_match_wins(self):
        config = {"**/*": True, "bar.js": False}
        assert is_tracked("foo.js", config) is True
        assert is_tracked("bar.js", config) is False

    def test_order_matters(self):
        config = {"bar.js": False, "**/*": True}
        assert is_tracked("bar.js", config) is True

    def test_resolve_returns_none_without_match(self):
        assert resolve_tracking("a.js", {"*.css": True}) is None
        assert resolve_tracking("a.js", {"*.js": False}) is False

    def test_map_files_excluded_by_default_config(self):
        config = {"**/*": True, "**/*.map": False}
        assert is_tracked("dist/main.js", config)
        assert not is_tracked("dist/main.js.map", config)
