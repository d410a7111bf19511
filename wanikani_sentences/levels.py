"""Level-range parsing.

Accepted forms: "12", "3,5,8", "4-9" and any comma-separated mix of them,
e.g. "4,5-7,9-12,15".
"""

from __future__ import annotations

import logging


LOGGER = logging.getLogger(__name__)


def _to_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_levels(text: str) -> list[int]:
    """Return the ascending, deduplicated levels named by ``text``.

    Malformed tokens are dropped one at a time; the rest of the input is kept.
    A reversed range such as "9-4" expands to nothing. Levels below 1 are dropped.
    A range splits at its first hyphen only, so "1-2-3" is discarded rather than
    read as 1-2, and "-3" is a malformed range rather than 0-3.
    """

    result: set[int] = set()
    if not text:
        return []

    for part in (p.strip() for p in text.split(",")):
        if not part:
            continue
        if "-" in part:
            head, _, tail = part.partition("-")
            start, end = _to_int(head), _to_int(tail)
            if start is None or end is None:
                LOGGER.debug("Discarding malformed range token: %r", part)
                continue
            result.update(range(start, end + 1))
        else:
            num = _to_int(part)
            if num is None:
                LOGGER.debug("Discarding malformed level token: %r", part)
                continue
            result.add(num)

    return sorted(n for n in result if n >= 1)


def format_levels(levels: list[int]) -> str:
    """Join levels back into a compact spec, collapsing consecutive runs."""

    ordered = sorted(set(levels))
    runs: list[str] = []
    i = 0
    while i < len(ordered):
        j = i
        while j + 1 < len(ordered) and ordered[j + 1] == ordered[j] + 1:
            j += 1
        runs.append(str(ordered[i]) if i == j else f"{ordered[i]}-{ordered[j]}")
        i = j + 1
    return ",".join(runs)
