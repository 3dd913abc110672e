"""Line splitting and per-line structural classification"""

import re

from mdfix.core.models import ClassifiedLine, LineKind


FENCE_RE   = re.compile(r'^\s*```')
HEADING_RE = re.compile(r'^(#+)\s')
ORDERED_RE = re.compile(r'^(\s*)(\d+)\. ')
BULLET_RE  = re.compile(r'^(\s*)[-*+]\s')


def split_lines(text: str) -> list[str]:
    """Split text on \\n, \\r\\n, or \\r, dropping the terminators."""
    return re.split(r'\r\n|\r|\n', text.removesuffix('\n').removesuffix('\r')) if text else []


def classify_line(line: str) -> ClassifiedLine:
    """Tag a single line. Precedence: fence, heading, ordered item, bullet, blank, text."""
    if FENCE_RE.match(line):
        return ClassifiedLine(line, LineKind.code_delimiter)
    if m := HEADING_RE.match(line):
        return ClassifiedLine(line, LineKind.heading, depth=len(m.group(1)))
    if m := ORDERED_RE.match(line):
        return ClassifiedLine(line, LineKind.list_item, indent=len(m.group(1)), numeral=int(m.group(2)))
    if m := BULLET_RE.match(line):
        return ClassifiedLine(line, LineKind.list_item, indent=len(m.group(1)))
    if not line.strip():
        return ClassifiedLine(line, LineKind.blank)
    return ClassifiedLine(line, LineKind.text)


def classify(lines: list[str]) -> list[ClassifiedLine]:
    """Classify every line in document order."""
    return [classify_line(line) for line in lines]


def indent_width(line: str) -> int:
    """Count of leading whitespace characters."""
    return len(line) - len(line.lstrip())
