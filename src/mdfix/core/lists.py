"""Ordered list renumbering with one counter per indentation width"""

from mdfix.core.classify import ORDERED_RE, classify_line
from mdfix.core.models import LineKind


def renumber_lists(lines: list[str]) -> list[str]:
    """Renumber ordered items 1, 2, 3, ... independently at each indentation width.

    Blank lines keep a run open. Going back to a shallower (or equal) width
    forgets every deeper counter, so a nested list restarts at 1 the next
    time it appears. Unindented prose ends all runs; indented prose (an item
    continuation) and bullet items leave the counters alone.
    """
    counters: dict[int, int] = {}
    out: list[str] = []

    for line in lines:
        if m := ORDERED_RE.match(line):
            w = len(m.group(1))
            counters[w] = counters.get(w, 0) + 1
            for deeper in [k for k in counters if k > w]:
                del counters[deeper]
            out.append(f"{m.group(1)}{counters[w]}{line[m.end(2):]}")
            continue

        kind = classify_line(line).kind
        if kind not in (LineKind.blank, LineKind.list_item) and not line[:1].isspace():
            counters.clear()
        out.append(line)

    return out
