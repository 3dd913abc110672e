"""Blank-line reconciliation around headings, lists, and code blocks"""

import re
from enum import Enum

from mdfix.core.classify import FENCE_RE, classify_line
from mdfix.core.models import BlockMarker, LineKind


NOTICE_RE = re.compile(r'^(?:\*([^*]+)\*|_([^_]+)_)\s*$')
NOTICE_TEXT_RE = re.compile(r'Last [Uu]pdated|Last [Aa]rchived')


class SpacingKind(str, Enum):
    heading = "heading"
    list = "list"
    code_start = "code_start"
    code_content = "code_content"
    code_end = "code_end"
    code = "code"                   # marker line: a whole extracted block
    text = "text"
    empty = "empty"


_BREAK_BEFORE = {SpacingKind.heading, SpacingKind.code_start, SpacingKind.code}
_BREAK_AFTER = {SpacingKind.heading, SpacingKind.code_end, SpacingKind.code}


def promote_notices(lines: list[str]) -> list[str]:
    """Rewrite a whole-line *Last updated ...* / *Last archived ...* emphasis as a level-3 heading."""
    out = []
    for line in lines:
        if (m := NOTICE_RE.match(line)) and NOTICE_TEXT_RE.search(text := m.group(1) or m.group(2)):
            line = f"### {text.strip()}"
        out.append(line)
    return out


def _spacing_kind(line: str, prev: SpacingKind | None) -> SpacingKind:
    """Category of a non-blank line outside any raw fence."""
    if isinstance(line, BlockMarker):
        return SpacingKind.code
    kind = classify_line(line).kind
    if kind == LineKind.heading:
        return SpacingKind.heading
    if kind == LineKind.list_item:
        return SpacingKind.list
    if kind == LineKind.code_delimiter:
        return SpacingKind.code_start
    if prev == SpacingKind.list and line[:1].isspace():
        return SpacingKind.list
    return SpacingKind.text


def _needs_break(prev: SpacingKind, cur: SpacingKind) -> bool:
    """Whether two adjacent non-blank lines must be separated by a blank line."""
    if cur in _BREAK_BEFORE or prev in _BREAK_AFTER:
        return True
    return (prev == SpacingKind.list) != (cur == SpacingKind.list)


def reconcile_spacing(lines: list[str], default_language: str | None = "text") -> list[str]:
    """Return lines with canonical blank-line placement.

    Existing blank lines are kept (runs collapse to one); a blank line is
    added wherever a structural boundary requires one. Leading and trailing
    blank lines are dropped. Lines inside a raw fence are copied verbatim, and
    a bare opening fence (or marker) is tagged with default_language.
    """
    out: list[str] = []
    prev: SpacingKind | None = None
    pending_blank = False
    in_fence = False

    for line in lines:
        if in_fence:
            out.append(line)
            if FENCE_RE.match(line):
                in_fence = False
                prev = SpacingKind.code_end
            else:
                prev = SpacingKind.code_content
            continue

        if not line.strip():
            pending_blank = bool(out)
            continue

        kind = _spacing_kind(line, prev)
        if kind == SpacingKind.code:
            line = line.with_language(default_language)
        elif kind == SpacingKind.code_start:
            in_fence = True
            if default_language and line.strip() == "```":
                line = line.rstrip() + default_language

        if out and (pending_blank or _needs_break(prev, kind)):
            out.append("")
        out.append(line)
        pending_blank = False
        prev = kind

    return out


def strip_trailing_blanks(lines: list[str]) -> list[str]:
    """Drop blank lines at the end of the stream."""
    end = len(lines)
    while end and not lines[end - 1].strip():
        end -= 1
    return lines[:end]


def join_lines(lines: list[str]) -> str:
    """Join lines with a single trailing newline; an empty document stays empty."""
    return "\n".join(lines) + "\n" if lines else ""
