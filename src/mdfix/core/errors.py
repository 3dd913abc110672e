"""Error taxonomy for the formatting pipeline"""


class MarkdownFixError(Exception):
    """Base class for all mdfix errors."""


class ValidationError(MarkdownFixError, TypeError):
    """Input is not a markdown string. Returned to the caller, never retried."""


class StageError(MarkdownFixError):
    """A pass cannot process the current line stream (e.g. malformed fence nesting)."""


class RestorationError(MarkdownFixError):
    """A code block marker has no span left to restore."""
