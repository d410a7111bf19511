"""Example sentence extraction from WaniKani subjects.

The subject payload is not contractually stable across API revisions and
subject types, so extraction is best-effort. Strategies are tried in order
and the first one returning at least one sentence wins:

1) ``data.context_sentences``
2) any other list of objects in ``data`` that carries sentence-like keys
3) a single pseudo-sentence built from ``characters`` and the first meaning
4) nothing
"""

from __future__ import annotations

from typing import Any, Callable

from .models import SentenceRecord, SubjectGroup


JAPANESE_KEYS = ("ja", "japanese", "jp", "sentence")
ENGLISH_KEYS = ("en", "english", "translation")
GENERIC_TEXT_KEYS = ("text",)
SENTENCE_HINT_KEYS = frozenset(JAPANESE_KEYS + ENGLISH_KEYS + GENERIC_TEXT_KEYS)

Strategy = Callable[[dict[str, Any]], list[SentenceRecord]]


def _subject_data(subject: dict[str, Any]) -> dict[str, Any]:
    data = subject.get("data")
    return data if isinstance(data, dict) else {}


def _first_text(entry: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        value = entry.get(key)
        if value is not None:
            return str(value)
    return ""


def _map_entries(
    subject: dict[str, Any],
    entries: list[Any],
    japanese_keys: tuple[str, ...] = JAPANESE_KEYS,
) -> list[SentenceRecord]:
    subject_id = subject.get("id", "")
    records: list[SentenceRecord] = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            continue
        records.append(
            SentenceRecord(
                id=f"{subject_id}-{idx}",
                japanese=_first_text(entry, japanese_keys),
                english=_first_text(entry, ENGLISH_KEYS),
            )
        )
    return records


def from_context_sentences(subject: dict[str, Any]) -> list[SentenceRecord]:
    entries = _subject_data(subject).get("context_sentences")
    if not isinstance(entries, list) or not entries:
        return []
    return _map_entries(subject, entries)


def from_sentence_like_lists(subject: dict[str, Any]) -> list[SentenceRecord]:
    for key, value in _subject_data(subject).items():
        if key == "context_sentences":
            continue
        if not isinstance(value, list) or not value or not isinstance(value[0], dict):
            continue
        if any(isinstance(item, dict) and SENTENCE_HINT_KEYS.intersection(item) for item in value):
            return _map_entries(subject, value, JAPANESE_KEYS + GENERIC_TEXT_KEYS)
    return []


def _first_meaning(data: dict[str, Any]) -> str:
    meanings = data.get("meanings")
    if not isinstance(meanings, list):
        return ""
    candidates = [m for m in meanings if isinstance(m, dict) and m.get("meaning")]
    primary = [m for m in candidates if m.get("primary")]
    chosen = (primary or candidates)[:1]
    return str(chosen[0]["meaning"]) if chosen else ""


def from_characters(subject: dict[str, Any]) -> list[SentenceRecord]:
    data = _subject_data(subject)
    characters = subject.get("characters") or data.get("characters")
    if not characters:
        return []
    return [
        SentenceRecord(
            id=f"{subject.get('id', '')}-0",
            japanese=str(characters),
            english=_first_meaning(data),
        )
    ]


STRATEGIES: list[tuple[str, Strategy]] = [
    ("context_sentences", from_context_sentences),
    ("sentence_like_lists", from_sentence_like_lists),
    ("characters_fallback", from_characters),
]


def extract_sentences(subject: dict[str, Any]) -> list[SentenceRecord]:
    """Return the sentences of ``subject`` from the first matching strategy."""

    if not isinstance(subject, dict):
        return []
    for _name, strategy in STRATEGIES:
        records = strategy(subject)
        if records:
            return records
    return []


def group_subject(subject: dict[str, Any]) -> SubjectGroup | None:
    sentences = extract_sentences(subject)
    if not sentences:
        return None
    subject_id = subject.get("id")
    characters = subject.get("characters") or _subject_data(subject).get("characters")
    label = str(characters) if characters else f"Subject {subject_id}"
    return SubjectGroup(subject_id=subject_id, label=label, sentences=sentences)
