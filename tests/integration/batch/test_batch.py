"""Integration tests for batch formatting over a directory tree"""

import json
from pathlib import Path

import pytest

from mdfix.config import Settings
from mdfix.core.batch import BatchReport, FileResult, FileStatus, fix_files, fix_paths


MESSY = "### Title\ntext\n5. a\n9. b\n"
FIXED = "# Title\n\ntext\n\n1. a\n2. b\n"


@pytest.fixture(name="tree")
def tree_fixture(tmp_path):
    """docs/ with one file needing fixes, one already clean, one nested, and a non-markdown file."""
    docs = tmp_path / "docs"
    (docs / "guide").mkdir(parents=True)
    (docs / "messy.md").write_text(MESSY)
    (docs / "clean.md").write_text(FIXED)
    (docs / "guide" / "nested.md").write_text("## Nested\n")
    (docs / "notes.txt").write_text("### not markdown\n")
    return docs


def test_fix_paths_rewrites_only_changed_files(tree):
    report = fix_paths([tree])
    by_name = {Path(r.path).name: r for r in report.results}

    assert set(by_name) == {"messy.md", "clean.md", "nested.md"}
    assert by_name["messy.md"].status == FileStatus.changed
    assert by_name["messy.md"].written
    assert by_name["clean.md"].status == FileStatus.unchanged
    assert not by_name["clean.md"].written
    assert (tree / "messy.md").read_text() == FIXED
    assert (tree / "guide" / "nested.md").read_text() == "# Nested\n"
    assert (tree / "notes.txt").read_text() == "### not markdown\n"
    assert report.changed == 2
    assert report.written == 2
    assert report.unchanged == 1


def test_dry_run_writes_nothing(tree):
    report = fix_paths([tree], write=False, with_diff=True)
    messy = next(r for r in report.results if r.path.endswith("messy.md"))

    assert messy.status == FileStatus.changed
    assert not messy.written
    assert "-### Title" in messy.diff
    assert "+# Title" in messy.diff
    assert messy.added > 0
    assert (tree / "messy.md").read_text() == MESSY


def test_undecodable_file_reported_and_batch_continues(tree):
    (tree / "binary.md").write_bytes(b"\xff\xfe### x\n")
    report = fix_paths([tree])
    bad = next(r for r in report.results if r.path.endswith("binary.md"))

    assert bad.status == FileStatus.error
    assert "read failed" in bad.error
    assert (tree / "messy.md").read_text() == FIXED


def test_missing_path_reported(tmp_path):
    report = fix_paths([tmp_path / "nope"])
    assert report.errors == 1
    assert report.results[0].error == "path not found"


def test_write_failure_reported(tree, monkeypatch):
    def refuse(self, data):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(Path, "write_bytes", refuse)
    report = fix_paths([tree])
    messy = next(r for r in report.results if r.path.endswith("messy.md"))

    assert messy.status == FileStatus.error
    assert "write failed" in messy.error
    assert report.errors == 2
    assert (tree / "messy.md").read_text() == MESSY


def test_fix_files_with_settings(tmp_path):
    f = tmp_path / "a.md"
    f.write_text(MESSY)
    report = fix_files([f], Settings(fix_lists=False))
    assert report.written == 1
    assert f.read_text() == "# Title\n\ntext\n\n5. a\n9. b\n"


def test_report_serializes_counts(tree):
    """The JSON report carries the totals next to the per-file results."""
    (tree / "binary.md").write_bytes(b"\xff\xfe")
    data = json.loads(fix_paths([tree], write=False).model_dump_json())

    statuses = {Path(r["path"]).name: r["status"] for r in data["results"]}
    assert statuses["messy.md"] == "changed"
    assert statuses["binary.md"] == "error"
    assert data["changed"] == 2
    assert data["unchanged"] == 1
    assert data["errors"] == 1
    assert data["written"] == 0


def test_counts_in_model_dump():
    report = BatchReport(results=[FileResult(path="a.md", status=FileStatus.changed, written=True)])
    assert report.model_dump()["changed"] == 1
    assert report.model_dump()["written"] == 1
