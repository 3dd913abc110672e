"""Intermediate data models for the classify, extract, and rewrite passes"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    """Structural category of a single markdown line"""
    heading = "heading"
    list_item = "list_item"
    code_delimiter = "code_delimiter"
    blank = "blank"
    text = "text"


@dataclass(frozen=True)
class ClassifiedLine:
    """A raw line plus its derived category. Never stored beyond one pass."""
    text:    str
    kind:    LineKind
    depth:   Optional[int] = None     # heading depth (count of leading '#')
    indent:  Optional[int] = None     # list items: count of leading whitespace chars
    numeral: Optional[int] = None     # ordered list items only; None for bullets

    @property
    def is_ordered_item(self) -> bool:
        return self.kind == LineKind.list_item and self.numeral is not None


@dataclass
class HeadingEntry:
    """Heading position and depth before/after normalization."""
    index:     int
    raw_depth: int
    depth:     int


@dataclass(frozen=True)
class CodeBlockSpan:
    """A fenced region held aside while the other passes run."""
    block_id:   int
    start:      int                  # line index of the opening fence
    end:        int                  # line index of the closing fence (or last line if unterminated)
    lines:      tuple[str, ...]      # verbatim, both delimiters included
    terminated: bool = True


class BlockMarker(str):
    """Placeholder line standing in for one extracted code block.

    The text embeds NUL characters so it cannot match anything a user typed,
    and restore matches on the type and block_id, never on the text. The
    marker keeps the fence's indentation so list context is not broken.
    """

    block_id: int
    indent: str
    language: Optional[str]

    def __new__(cls, block_id: int, indent: str = "", language: Optional[str] = None):
        obj = super().__new__(cls, f"{indent}\x00code-block:{block_id}\x00")
        obj.block_id = block_id
        obj.indent = indent
        obj.language = language
        return obj

    def with_language(self, language: Optional[str]) -> "BlockMarker":
        """Return a copy that will tag a bare opening fence with language on restore."""
        return BlockMarker(self.block_id, self.indent, language)

    def __repr__(self) -> str:
        return f"BlockMarker({self.block_id!r}, indent={self.indent!r}, language={self.language!r})"
