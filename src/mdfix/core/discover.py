"""Markdown file discovery for batch mode"""

import re
from pathlib import Path


def discover_files(path: Path, pattern: str = r'\.md$') -> list[Path]:
    """Return sorted files under path whose name matches pattern, or [path] if a single file."""
    regex = re.compile(pattern)
    if path.is_file():
        return [path] if regex.search(path.name) else []
    return sorted(p for p in path.rglob('*') if p.is_file() and regex.search(p.name))
