"""Records produced by the extractor and consumed by the exporter."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class SentenceRecord:
    id: str
    japanese: str
    english: str


@dataclass(frozen=True)
class SubjectGroup:
    subject_id: Any
    label: str
    sentences: list[SentenceRecord] = field(default_factory=list)


# "Level 5" -> groups, in ascending level order.
LevelResultMap = dict[str, list[SubjectGroup]]


def level_label(level: int) -> str:
    return f"Level {level}"


def results_to_dict(results: LevelResultMap) -> dict[str, list[dict[str, Any]]]:
    return {label: [asdict(group) for group in groups] for label, groups in results.items()}


def results_from_dict(payload: dict[str, Any]) -> LevelResultMap:
    """Rebuild a result map from its JSON form (see ``results_to_dict``)."""

    results: LevelResultMap = {}
    for label, groups in payload.items():
        results[label] = [
            SubjectGroup(
                subject_id=g.get("subject_id"),
                label=str(g.get("label", "")),
                sentences=[
                    SentenceRecord(
                        id=str(s.get("id", "")),
                        japanese=str(s.get("japanese", "")),
                        english=str(s.get("english", "")),
                    )
                    for s in g.get("sentences", [])
                ],
            )
            for g in groups
        ]
    return results
