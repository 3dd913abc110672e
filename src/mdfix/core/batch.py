"""Batch mode: reformat discovered files and write back only what changed"""

from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field, computed_field

from mdfix.config import Settings
from mdfix.core.discover import discover_files
from mdfix.core.pipeline import reformat
from mdfix.core.utils.diff import line_changes, unified_diff
from mdfix.logging import get_logger


logger = get_logger("batch")


class FileStatus(str, Enum):
    """Outcome of formatting one file"""
    changed = "changed"
    unchanged = "unchanged"
    error = "error"


class FileResult(BaseModel):
    """Per-file entry of a batch report."""
    path: str
    status: FileStatus
    written: bool = False
    added: int = 0
    deleted: int = 0
    diff: Optional[str] = None
    error: Optional[str] = None


class BatchReport(BaseModel):
    """Results of one batch run, in processing order."""
    results: list[FileResult] = Field(default_factory=list)

    def _count(self, status: FileStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @computed_field
    @property
    def changed(self) -> int:
        return self._count(FileStatus.changed)

    @computed_field
    @property
    def unchanged(self) -> int:
        return self._count(FileStatus.unchanged)

    @computed_field
    @property
    def errors(self) -> int:
        return self._count(FileStatus.error)

    @computed_field
    @property
    def written(self) -> int:
        return sum(1 for r in self.results if r.written)


def fix_file(path: Path, settings: Settings, write: bool = True, with_diff: bool = False) -> FileResult:
    """Reformat one file. Read, decode, and write failures are recorded, not raised."""
    try:
        original = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read markdown file %s: %s", path, e)
        return FileResult(path=str(path), status=FileStatus.error, error=f"read failed: {e}")

    fixed = reformat(original, settings)
    if fixed == original:
        logger.debug("No changes needed for %s", path)
        return FileResult(path=str(path), status=FileStatus.unchanged)

    changes = line_changes(original, fixed)
    result = FileResult(
        path=str(path),
        status=FileStatus.changed,
        added=changes.added,
        deleted=changes.deleted,
        diff=unified_diff(original, fixed, str(path)) if with_diff else None,
    )
    if not write:
        return result

    try:
        path.write_bytes(fixed.encode("utf-8"))
    except OSError as e:
        logger.error("Failed to write markdown file %s: %s", path, e)
        result.status = FileStatus.error
        result.error = f"write failed: {e}"
        return result
    result.written = True
    logger.debug("Fixed markdown formatting in %s", path)
    return result


def fix_files(
    files: Iterable[Path],
    settings: Settings = None,
    write: bool = True,
    with_diff: bool = False,
    ) -> BatchReport:
    """Reformat each file in order; one bad file never stops the batch."""
    settings = settings or Settings()
    report = BatchReport()
    for path in files:
        report.results.append(fix_file(path, settings, write, with_diff))
    logger.debug(
        "Markdown fixing completed: %d changed, %d unchanged, %d errors",
        report.changed, report.unchanged, report.errors,
    )
    return report


def fix_paths(
    paths: Iterable[Path],
    settings: Settings = None,
    write: bool = True,
    with_diff: bool = False,
    ) -> BatchReport:
    """Discover matching files under each path (file or directory) and reformat them.

    A path that does not exist is reported as an error entry.
    """
    settings = settings or Settings()
    files: dict[Path, None] = {}
    missing: list[FileResult] = []
    for root in paths:
        if not root.exists():
            logger.warning("Path not found: %s", root)
            missing.append(FileResult(path=str(root), status=FileStatus.error, error="path not found"))
            continue
        for p in discover_files(root, settings.file_pattern):
            files.setdefault(p, None)

    logger.debug("Processing %d markdown file(s)", len(files))
    report = fix_files(files, settings, write, with_diff)
    report.results = missing + report.results
    return report
