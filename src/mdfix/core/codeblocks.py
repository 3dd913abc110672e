"""Fenced code block extraction behind marker lines, and verbatim restore"""

from mdfix.core.classify import FENCE_RE, indent_width
from mdfix.core.errors import RestorationError
from mdfix.core.models import BlockMarker, CodeBlockSpan
from mdfix.logging import get_logger


logger = get_logger("codeblocks")


class CodeBlockTable:
    """Marker id -> span. Each span can be taken exactly once."""

    def __init__(self) -> None:
        self._spans: dict[int, CodeBlockSpan] = {}
        self._next_id = 1

    def add(self, start: int, end: int, lines: list[str], terminated: bool = True) -> BlockMarker:
        """Store a span and return the marker line that replaces it."""
        block_id = self._next_id
        self._next_id += 1
        self._spans[block_id] = CodeBlockSpan(block_id, start, end, tuple(lines), terminated)
        opening = lines[0]
        return BlockMarker(block_id, opening[:indent_width(opening)])

    def take(self, block_id: int) -> CodeBlockSpan:
        """Remove and return a span; RestorationError if already taken or unknown."""
        try:
            return self._spans.pop(block_id)
        except KeyError:
            raise RestorationError(f"No code block left for marker {block_id}") from None

    def __len__(self) -> int:
        return len(self._spans)

    def __contains__(self, block_id: int) -> bool:
        return block_id in self._spans


def extract_code_blocks(lines: list[str]) -> tuple[list[str], CodeBlockTable]:
    """Replace each fenced span with a single marker line.

    Everything after an opening fence is span content up to and including
    the next delimiter line. A fence still open at end of document keeps the
    rest of the document as its content.
    """
    table = CodeBlockTable()
    stream: list[str] = []
    buffer: list[str] = []
    start = 0
    inside = False

    for i, line in enumerate(lines):
        if not inside:
            if FENCE_RE.match(line):
                inside = True
                start = i
                buffer = [line]
            else:
                stream.append(line)
            continue

        buffer.append(line)
        if FENCE_RE.match(line):
            stream.append(table.add(start, i, buffer))
            inside = False
            buffer = []

    if inside:
        logger.debug("Unterminated code fence at line %d; keeping remainder verbatim", start + 1)
        stream.append(table.add(start, len(lines) - 1, buffer, terminated=False))

    return stream, table


def _opening_fence(line: str, language: str | None) -> str:
    """Tag a bare opening fence with language; tagged fences are left alone."""
    if language and line.strip() == "```":
        return line.rstrip() + language
    return line


def restore_code_blocks(stream: list[str], table: CodeBlockTable) -> list[str]:
    """Swap marker lines back for their verbatim spans.

    Only BlockMarker instances are restored; a plain string with the same
    text is user content and stays as is. A marker whose span is gone keeps
    its text in the output.
    """
    out: list[str] = []
    for line in stream:
        if not isinstance(line, BlockMarker):
            out.append(line)
            continue
        try:
            span = table.take(line.block_id)
        except RestorationError as e:
            logger.warning("%s; leaving marker text in place", e)
            out.append(str(line))
            continue
        out.append(_opening_fence(span.lines[0], line.language))
        out.extend(span.lines[1:])
    return out
