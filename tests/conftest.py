"""Shared test fixtures for size-impact tests."""

import pytest


@pytest.fixture
def renamed_snapshots():
    """Base/head pair where a manifest tracks renames, additions and deletions."""
    base = {
        "dist": {
            "manifest": {
                "dir/file.js": "dir/file.base.js",
                "old.js": "old.base.js",
            },
            "trackingConfig": {"**/*": True},
            "report": {
                "dir/file.base.js": {"size": 10, "hash": "hash1"},
                "old.base.js": {"size": 20, "hash": "hash2"},
                "whatever.js": {"size": 30, "hash": "hash3"},
            },
        }
    }
    head = {
        "dist": {
            "manifest": {
                "dir/file.js": "dir/file.head.js",
                "new.js": "new.head.js",
            },
            "trackingConfig": {"**/*": True},
            "report": {
                "dir/file.head.js": {"size": 100, "hash": "hash4"},
                "new.head.js": {"size": 200, "hash": "hash5"},
                "whatever.js": {"size": 300, "hash": "hash6"},
            },
        }
    }
    return base, head


@pytest.fixture
def plain_format_size():
    """Formatter that keeps raw numbers readable in assertions."""

    def format_size(size, diff=False):
        if diff and size > 0:
            return f"+{size}"
        return str(size)

    return format_size


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("SIZE_IMPACT_UNITS", "SIZE_IMPACT_TRANSFORMATIONS",
                 "SIZE_IMPACT_SNAPSHOT_FILE", "SIZE_IMPACT_VERBOSITY"):
        monkeypatch.delenv(name, raising=False)
    return home
