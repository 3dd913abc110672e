"""Leading YAML frontmatter is held aside so no pass can rewrite it"""

import re

import yaml

from mdfix.core.classify import HEADING_RE
from mdfix.core.spacing import NOTICE_TEXT_RE
from mdfix.logging import get_logger


FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)', re.DOTALL)

logger = get_logger("frontmatter")


def _has_notice_heading(block: str) -> bool:
    """True if a line reads as a promoted *Last updated* notice (a YAML comment)."""
    return any(HEADING_RE.match(line) and NOTICE_TEXT_RE.search(line) for line in block.splitlines())


def is_frontmatter(block: str) -> bool:
    """Whether the text between the '---' lines is a YAML header.

    It must be blank or load as a non-empty mapping. A block holding a
    promoted notice heading never counts: the same block before promotion
    was not YAML, and the answer must not change between runs.
    """
    if not block.strip():
        return True
    if _has_notice_heading(block):
        return False
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        logger.debug("Leading '---' block is not YAML frontmatter: %s", e)
        return False
    return isinstance(data, dict) and bool(data)


def split_frontmatter(text: str) -> tuple[str, str]:
    """Return (header, body); header is the verbatim frontmatter block or ''.

    A thematic break pair at the top of a document, or one wrapping only
    comments, is left to the body.
    """
    m = FRONTMATTER_RE.match(text)
    if not m or not is_frontmatter(m.group(1)):
        return "", text

    header = m.group(0)
    if not header.endswith("\n"):
        header += "\n"
    return header, text[m.end():]


def join_frontmatter(header: str, body: str) -> str:
    """Re-attach a header with one blank line before the body."""
    if not header:
        return body
    body = body.lstrip("\r\n")
    return f"{header}\n{body}" if body else header
