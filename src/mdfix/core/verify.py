"""Code integrity check using markdown-it tokens"""

from markdown_it import MarkdownIt


CODE_TOKENS = ('fence', 'code_block')


def _make_parser(preset: str) -> MarkdownIt:
    return MarkdownIt(preset, options_update={"linkify": False})


def code_contents(text: str, preset: str = 'gfm-like') -> list[str]:
    """Return the content of every fenced and indented code block, in document order."""
    return [tok.content for tok in _make_parser(preset).parse(text) if tok.type in CODE_TOKENS]


def code_blocks_intact(before: str, after: str, preset: str = 'gfm-like') -> bool:
    """True when both texts hold the same code, block for block."""
    return code_contents(before, preset) == code_contents(after, preset)
