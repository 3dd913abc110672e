"""Pipeline orchestration: extract, normalize, renumber, respace, restore"""

from functools import partial
from typing import Callable

from mdfix.config import Settings
from mdfix.core.classify import split_lines
from mdfix.core.codeblocks import extract_code_blocks, restore_code_blocks
from mdfix.core.errors import StageError, ValidationError
from mdfix.core.frontmatter import join_frontmatter, split_frontmatter
from mdfix.core.headings import normalize_headings
from mdfix.core.lists import renumber_lists
from mdfix.core.spacing import join_lines, promote_notices, reconcile_spacing, strip_trailing_blanks
from mdfix.core.verify import code_blocks_intact
from mdfix.logging import get_logger


Stage = Callable[[list[str]], list[str]]

logger = get_logger("pipeline")


def fail_soft(name: str, stage: Stage) -> Stage:
    """Wrap a pass so that any failure hands its input on unchanged."""
    def run(lines: list[str]) -> list[str]:
        try:
            return stage(list(lines))
        except Exception as e:
            logger.warning("%s pass failed, skipping it: %s", name, e)
            return lines
    run.__name__ = f"fail_soft_{name}"
    return run


def build_stages(settings: Settings) -> list[Stage]:
    """Return the enabled passes, in order, each behind a fail-soft boundary."""
    stages: list[tuple[str, Stage]] = []
    if settings.promote_notices:
        stages.append(("notices", promote_notices))
    if settings.fix_headings:
        stages.append(("headings", normalize_headings))
    if settings.fix_lists:
        stages.append(("lists", renumber_lists))
    if settings.fix_spacing:
        stages.append(("spacing", partial(reconcile_spacing, default_language=settings.default_code_language)))
    return [fail_soft(name, stage) for name, stage in stages]


def _reformat_body(body: str, settings: Settings) -> str:
    """Run the passes over a frontmatter-free body."""
    stream, table = extract_code_blocks(split_lines(body))
    for stage in build_stages(settings):
        stream = stage(stream)

    restored = restore_code_blocks(strip_trailing_blanks(stream), table)
    if len(table):
        raise StageError(f"{len(table)} code block(s) were dropped from the line stream")

    out = join_lines(restored)
    if settings.verify_code_blocks and not code_blocks_intact(body, out, settings.parser_config):
        raise StageError("fenced code content differs after formatting")
    return out


def reformat(content: str | None, settings: Settings = None) -> str | ValidationError:
    """Normalize headings, ordered lists, and blank lines of a markdown document.

    None and '' come back as ''. Anything else that is not a str is answered
    with a ValidationError *returned*, not raised. Past validation this never
    raises: a failing pass is skipped, and a failure outside the passes
    returns the input unchanged.
    """
    if content is None:
        return ""
    if not isinstance(content, str):
        return ValidationError(f"expected markdown text (str), got {type(content).__name__}")
    if not content:
        return content

    settings = settings or Settings()
    try:
        if settings.preserve_frontmatter:
            header, body = split_frontmatter(content)
        else:
            header, body = "", content
        return join_frontmatter(header, _reformat_body(body, settings))
    except Exception as e:
        logger.warning("Formatting failed, returning input unchanged: %s", e)
        return content
