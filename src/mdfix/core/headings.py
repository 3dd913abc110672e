"""Heading depth normalization: rebase to 1 and remove skipped levels"""

from mdfix.core.classify import HEADING_RE
from mdfix.core.models import HeadingEntry


def compute_heading_depths(raw_depths: list[int]) -> list[int]:
    """Return corrected depths for headings given in document order.

    The shallowest heading becomes depth 1 and no heading may sit more than
    one level below the heading before it:

        >>> compute_heading_depths([3, 5, 4, 3])
        [1, 2, 2, 1]
    """
    if not raw_depths:
        return []
    min_depth = min(raw_depths)
    depths = [d - min_depth + 1 for d in raw_depths]

    expected = 2
    ancestors = [1]
    for i, depth in enumerate(depths):
        if depth > expected:
            depths[i] = expected
            expected += 1
        elif depth == expected:
            expected += 1
        else:
            while ancestors and ancestors[-1] >= depth:
                ancestors.pop()
            ancestors.append(depth)
            expected = depth + 1
    return depths


def collect_headings(lines: list[str]) -> list[HeadingEntry]:
    """Find heading lines and their raw depths."""
    entries = []
    for i, line in enumerate(lines):
        if m := HEADING_RE.match(line):
            depth = len(m.group(1))
            entries.append(HeadingEntry(index=i, raw_depth=depth, depth=depth))
    return entries


def normalize_headings(lines: list[str]) -> list[str]:
    """Rewrite each heading's leading '#' run to its corrected depth."""
    entries = collect_headings(lines)
    if not entries:
        return list(lines)

    for entry, depth in zip(entries, compute_heading_depths([e.raw_depth for e in entries])):
        entry.depth = depth

    out = list(lines)
    for entry in entries:
        if entry.depth != entry.raw_depth:
            out[entry.index] = '#' * entry.depth + out[entry.index][entry.raw_depth:]
    return out
