"""Tests for the pull request comment document."""

from size_impact.compare import compare_snapshots
from size_impact.report.comment import (
    COMMENT_HEADING_PATTERN,
    generate_comment_body,
    is_size_impact_comment,
)


class TestGenerateCommentBody:
    def test_heading_and_details(self, renamed_snapshots, plain_format_size):
        body = generate_comment_body(
            compare_snapshots(*renamed_snapshots),
            base_ref="main",
            head_ref="feature",
            transformations=["raw"],
            format_size=plain_format_size,
        )

        assert body.startswith("<h4>Overall size impact on main: +540</h4>")
        assert "<summary>Merging feature into main</summary>" in body
        assert '<h5 id="dist">dist</h5>' in body
        assert body.rstrip().endswith("</details>")
        assert COMMENT_HEADING_PATTERN.search(body)

    def test_several_transformations_in_heading(self, plain_format_size):
        base = {"dist": {"trackingConfig": {"**/*": True}, "report": {"a.js": {"sizeMap": {"raw": 10, "gzip": 5}}}}}
        head = {"dist": {"trackingConfig": {"**/*": True}, "report": {"a.js": {"sizeMap": {"raw": 4, "gzip": 6}}}}}
        body = generate_comment_body(
            compare_snapshots(base, head),
            base_ref="main",
            head_ref="feature",
            transformations=["raw", "gzip"],
            format_size=plain_format_size,
        )
        assert "<h4>Overall size impact on main: raw -6, gzip +1</h4>" in body

    def test_empty_comparison_gives_empty_body(self, plain_format_size):
        body = generate_comment_body(
            {},
            base_ref="main",
            head_ref="feature",
            transformations=["raw"],
            format_size=plain_format_size,
        )
        assert body == ""

    def test_no_change_still_renders(self, plain_format_size):
        snapshot = {"dist": {"trackingConfig": {"**/*": True}, "report": {"a.js": {"size": 1}}}}
        body = generate_comment_body(
            compare_snapshots(snapshot, snapshot),
            base_ref="main",
            head_ref="feature",
            transformations=["raw"],
            format_size=plain_format_size,
        )
        assert "Overall size impact on main: 0" in body
        assert "No impact on files in dist group." in body

    def test_generated_by_link(self, renamed_snapshots, plain_format_size):
        body = generate_comment_body(
            compare_snapshots(*renamed_snapshots),
            base_ref="main",
            head_ref="feature",
            transformations=["raw"],
            format_size=plain_format_size,
            generated_by_link="https://example.com/size-impact",
        )
        assert body.endswith('<sub>Generated by <a href="https://example.com/size-impact">size-impact</a></sub>')


class TestCommentRecognition:
    def test_is_size_impact_comment(self):
        assert is_size_impact_comment("<h4>Overall size impact on main: +1 kB</h4>")
        assert not is_size_impact_comment("LGTM")
