"""Custom fixer registry and registration of the markdown fixer"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from mdfix.config import Settings
from mdfix.core.pipeline import reformat
from mdfix.logging import get_logger


MARKDOWN_FIXER_ID = "markdown"

FixFn = Callable[[str, str], str]

logger = get_logger("registry")


@dataclass(frozen=True)
class Fixer:
    """A named content fixer applied to files whose name matches file_pattern."""
    name:         str
    fix:          FixFn
    description:  str = ""
    file_pattern: str = r".*"

    def matches(self, file_path: str) -> bool:
        return re.search(self.file_pattern, str(file_path)) is not None


class FixerRegistry:
    """Fixers keyed by a stable identifier, applied in registration order."""

    def __init__(self) -> None:
        self._fixers: dict[str, Fixer] = {}

    def register(self, fixer_id: str, fixer: Fixer) -> None:
        """Add or replace a fixer. Raises ValueError for a nameless or non-callable fixer."""
        if not fixer_id or not fixer.name or not callable(fixer.fix):
            raise ValueError(f"Custom fixer '{fixer_id}' requires an id, a name, and a fix function")
        self._fixers[fixer_id] = fixer
        logger.debug("Registered custom fixer: %s (%s)", fixer.name, fixer_id)

    def unregister(self, fixer_id: str) -> bool:
        """Remove a fixer; False if it was not registered."""
        return self._fixers.pop(fixer_id, None) is not None

    def get(self, fixer_id: str) -> Optional[Fixer]:
        return self._fixers.get(fixer_id)

    def fixers_for(self, file_path: str) -> list[Fixer]:
        """Fixers whose pattern matches file_path."""
        return [f for f in self._fixers.values() if f.matches(file_path)]

    def apply(self, content: str, file_path: str) -> str:
        """Run every matching fixer over content. A fixer that fails or returns a non-str is skipped."""
        for fixer in self.fixers_for(file_path):
            try:
                result = fixer.fix(content, file_path)
            except Exception as e:
                logger.warning("Fixer %s failed on %s: %s", fixer.name, file_path, e)
                continue
            if isinstance(result, str):
                content = result
            else:
                logger.warning("Fixer %s returned %s for %s; ignoring", fixer.name, type(result).__name__, file_path)
        return content

    def __contains__(self, fixer_id: str) -> bool:
        return fixer_id in self._fixers

    def __len__(self) -> int:
        return len(self._fixers)


def register_markdown_fixer(registry: Optional[FixerRegistry], settings: Settings = None) -> Optional[FixerRegistry]:
    """Register the markdown fixer under MARKDOWN_FIXER_ID. Returns the registry, or None if none was given."""
    if registry is None:
        logger.warning("No fixer registry provided; markdown fixer not registered")
        return None
    settings = settings or Settings()

    def fix(content: str, file_path: str) -> str:
        logger.debug("Applying markdown fixes to %s", file_path)
        return reformat(content, settings)

    registry.register(MARKDOWN_FIXER_ID, Fixer(
        name="Markdown Formatting",
        description="Fixes common markdown formatting issues",
        file_pattern=settings.file_pattern,
        fix=fix,
    ))
    return registry
