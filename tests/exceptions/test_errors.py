"""Tests for the exception hierarchy."""

from pathlib import Path

from size_impact.exceptions import (
    ConfigurationError,
    InvalidConfigError,
    SizeImpactError,
    SnapshotError,
    SnapshotFileError,
    SnapshotStructureError,
)


class TestSnapshotStructureError:
    def test_locates_entry(self):
        error = SnapshotStructureError("report entry is missing size", "dist", "a.js")
        assert isinstance(error, SnapshotError)
        assert isinstance(error, SizeImpactError)
        assert error.details == {"reason": "report entry is missing size", "group": "dist", "key": "a.js"}
        assert str(error).startswith("Malformed snapshot entry: dist/a.js (")

    def test_group_level(self):
        error = SnapshotStructureError("group snapshot must be an object", "dist")
        assert error.key is None
        assert str(error).startswith("Malformed snapshot group: dist")

    def test_snapshot_level(self):
        error = SnapshotStructureError("snapshot must be an object, got list")
        assert error.message == "Malformed snapshot"


class TestOtherErrors:
    def test_snapshot_file_error(self):
        error = SnapshotFileError(Path("base.json"), "file does not exist")
        assert str(error) == "Cannot read snapshot file: base.json (path=base.json, reason=file does not exist)"

    def test_invalid_config_error(self):
        error = InvalidConfigError("units", "metric", "unknown units")
        assert isinstance(error, ConfigurationError)
        assert error.details["value"] == "metric"

    def test_plain_message(self):
        assert str(SizeImpactError("boom")) == "boom"
