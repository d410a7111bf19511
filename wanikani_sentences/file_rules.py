"""Filename rules for exported sentence files.

Per-level text:  wanikani_level_<n>_<suffix>.txt
Combined text:   wanikani_all_levels_<suffix>.txt
Full JSON:       wanikani_sentences.json
"""

from __future__ import annotations

from pathlib import Path
import re

PREFIX = "wanikani"
JSON_FILENAME = f"{PREFIX}_sentences.json"
FILENAME_RE = re.compile(
    r"^wanikani_(?:level_(?P<level>\d+)|all_levels)_(?P<suffix>japanese|english|sentences)\.txt$"
    r"|^wanikani_sentences\.json$"
)
LEVEL_RE = re.compile(r"(\d+)")


def level_slug(label: str) -> str:
    """'Level 5' -> 'level_5'. Labels without a number are slugified as-is."""
    m = LEVEL_RE.search(label or "")
    if m:
        return f"level_{int(m.group(1))}"
    return re.sub(r"[^a-z0-9]+", "_", (label or "").lower()).strip("_") or "level"


def build_level_filename(label: str, suffix: str) -> str:
    return f"{PREFIX}_{level_slug(label)}_{suffix}.txt"


def build_combined_filename(suffix: str) -> str:
    return f"{PREFIX}_all_levels_{suffix}.txt"


def validate_filename(name: str) -> bool:
    return FILENAME_RE.match(Path(name).name) is not None


def validate_batch(names: list[str]) -> bool:
    return len(names) == len(set(names)) and all(validate_filename(n) for n in names)
