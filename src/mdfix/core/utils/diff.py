"""Change stats and unified diffs between a file's original and reformatted text"""

import difflib
from typing import NamedTuple


class LineChanges(NamedTuple):
    added: int
    deleted: int


def line_changes(original: str, fixed: str) -> LineChanges:
    """Count lines added and deleted by reformatting; a replaced line counts as both."""
    matcher = difflib.SequenceMatcher(None, original.splitlines(), fixed.splitlines(), autojunk=False)
    added = deleted = 0
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag != "equal":
            deleted += i2 - i1
            added += j2 - j1
    return LineChanges(added, deleted)


def _diff_lines(text: str) -> list[str]:
    lines = text.splitlines(keepends=True)
    if lines and not lines[-1].endswith(("\n", "\r")):
        lines[-1] += "\n\\ No newline at end of file\n"
    return lines


def unified_diff(original: str, fixed: str, path: str, context: int = 3) -> str:
    """Render a git-style diff for path; empty string when nothing changed."""
    return "".join(difflib.unified_diff(
        _diff_lines(original), _diff_lines(fixed),
        fromfile=f"a/{path}", tofile=f"b/{path}", n=context,
    ))
