"""Tests for snapshot normalization."""

import pytest

from size_impact.exceptions import SnapshotStructureError
from size_impact.snapshot.models import (
    FileRecord,
    GroupSnapshot,
    SizeRecord,
    normalize_size_record,
    normalize_snapshot,
)


class TestSizeRecord:
    def test_scalar_size_becomes_raw(self):
        record = normalize_size_record({"size": 10, "hash": "h"}, "dist", "a.js")
        assert record == SizeRecord(size_map={"raw": 10}, hash="h")
        assert record.size == 10

    def test_size_map_kept(self):
        record = normalize_size_record({"sizeMap": {"raw": 10, "gzip": 3}}, "dist", "a.js")
        assert record.size_map == {"raw": 10, "gzip": 3}
        assert record.hash is None

    def test_size_fills_missing_raw(self):
        record = normalize_size_record({"size": 10, "sizeMap": {"gzip": 3}}, "dist", "a.js")
        assert record.size_map == {"gzip": 3, "raw": 10}

    def test_size_map_wins_over_size(self):
        record = normalize_size_record({"size": 10, "sizeMap": {"raw": 11}}, "dist", "a.js")
        assert record.size == 11

    def test_to_dict_round_trips_scalar_shape(self):
        assert SizeRecord({"raw": 5}, "h").to_dict() == {"size": 5, "hash": "h"}

    @pytest.mark.parametrize(
        "entry",
        [
            {"hash": "h"},
            {"size": -1},
            {"size": 1.5},
            {"size": True},
            {"size": "10"},
            {"sizeMap": [1]},
            {"sizeMap": {"gzip": -2}},
            {"size": 1, "hash": 12},
            "10",
        ],
    )
    def test_malformed_entries(self, entry):
        with pytest.raises(SnapshotStructureError) as exc_info:
            normalize_size_record(entry, "dist", "a.js")
        assert exc_info.value.group == "dist"
        assert exc_info.value.key == "a.js"


class TestNormalizeSnapshot:
    def test_defaults(self):
        snapshot = normalize_snapshot({"dist": {}})
        assert snapshot == {"dist": GroupSnapshot(manifest=None, tracking_config=None, report={})}

    def test_none_is_empty(self):
        assert normalize_snapshot(None) == {}

    def test_full_group(self):
        snapshot = normalize_snapshot(
            {
                "dist": {
                    "manifest": {"a.js": "a.1.js"},
                    "trackingConfig": {"**/*": True},
                    "report": {"a.1.js": {"size": 1, "hash": "h"}},
                }
            }
        )
        group = snapshot["dist"]
        assert group.manifest == {"a.js": "a.1.js"}
        assert group.tracking_config == {"**/*": True}
        assert group.report["a.1.js"].size == 1

    def test_idempotent(self):
        once = normalize_snapshot({"dist": {"report": {"a.js": {"size": 1}}}})
        assert normalize_snapshot(once) == once

    def test_tracking_config_order_preserved(self):
        snapshot = normalize_snapshot({"dist": {"trackingConfig": {"b": True, "a": False}}})
        assert list(snapshot["dist"].tracking_config) == ["b", "a"]

    @pytest.mark.parametrize(
        "group",
        [
            {"report": []},
            {"manifest": "a.js"},
            {"manifest": {"a.js": 1}},
            {"trackingConfig": ["**/*"]},
            {"trackingConfig": {"**/*": "yes"}},
        ],
    )
    def test_malformed_groups(self, group):
        with pytest.raises(SnapshotStructureError) as exc_info:
            normalize_snapshot({"dist": group})
        assert exc_info.value.group == "dist"


class TestFileRecord:
    def test_from_size_record(self):
        record = FileRecord.from_size_record("a.1.js", SizeRecord({"raw": 3}, "h"))
        assert record.to_dict() == {"relativeUrl": "a.1.js", "size": 3, "hash": "h"}
