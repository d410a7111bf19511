"""Export of grouped sentences as text or JSON files.

Serialization is pure: the same results and mode always give the same
filenames and bytes. Delivery goes through ``ExportQueue``, which spaces
consecutive files so a download manager does not drop rapid successive files.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import json
import logging
import time
from typing import Any, Callable

from .delivery import DeliverySink
from .errors import InputError
from .file_rules import JSON_FILENAME, build_combined_filename, build_level_filename, validate_batch
from .models import LevelResultMap, SentenceRecord, SubjectGroup, results_to_dict


LOGGER = logging.getLogger(__name__)

TEXT_MIME = "text/plain;charset=utf-8"
JSON_MIME = "application/json"


class ExportMode(str, Enum):
    japanese_only = "japanese-only"
    english_only = "english-only"
    bilingual = "bilingual"
    json_full = "json-full"

    @classmethod
    def parse(cls, value: "ExportMode | str") -> "ExportMode":
        try:
            return cls(value)
        except ValueError as exc:
            choices = ", ".join(m.value for m in cls)
            raise InputError(f"Unknown export mode: {value!r} (expected one of {choices})") from exc


FILENAME_SUFFIX = {
    ExportMode.japanese_only: "japanese",
    ExportMode.english_only: "english",
    ExportMode.bilingual: "sentences",
}


@dataclass(frozen=True)
class ExportFile:
    filename: str
    payload: bytes
    mime_type: str


def _sentence_line(sentence: SentenceRecord, mode: ExportMode) -> str:
    if mode is ExportMode.japanese_only:
        return sentence.japanese
    if mode is ExportMode.english_only:
        return sentence.english
    return f"{sentence.japanese}\t{sentence.english}"


def _group_block(group: SubjectGroup, mode: ExportMode) -> str:
    lines = [f"# {group.label} (subject {group.subject_id})"]
    lines.extend(_sentence_line(s, mode) for s in group.sentences)
    return "\n".join(lines)


def render_level_text(groups: list[SubjectGroup], mode: ExportMode) -> str:
    return "\n\n".join(_group_block(g, mode) for g in groups)


def _text_file(filename: str, text: str) -> ExportFile:
    return ExportFile(filename=filename, payload=(text + "\n").encode("utf-8"), mime_type=TEXT_MIME)


def serialize(results: LevelResultMap, mode: ExportMode | str, per_level: bool = True) -> list[ExportFile]:
    """Encode ``results`` into export files for ``mode``.

    Text modes give one file per level, or one combined file when
    ``per_level`` is false. JSON mode always gives a single file.
    """

    mode = ExportMode.parse(mode)

    if mode is ExportMode.json_full:
        body = json.dumps(results_to_dict(results), ensure_ascii=False, indent=2)
        return [ExportFile(filename=JSON_FILENAME, payload=(body + "\n").encode("utf-8"), mime_type=JSON_MIME)]

    suffix = FILENAME_SUFFIX[mode]
    files: list[ExportFile]
    if per_level:
        files = [
            _text_file(build_level_filename(label, suffix), render_level_text(groups, mode))
            for label, groups in results.items()
        ]
    else:
        if not results:
            return []
        sections = [f"== {label} ==\n{render_level_text(groups, mode)}" for label, groups in results.items()]
        files = [_text_file(build_combined_filename(suffix), "\n\n".join(sections))]

    if not validate_batch([f.filename for f in files]):
        raise InputError("Export filenames are not unique for this result set.")
    return files


class ExportQueue:
    """Deliver files in order with a fixed pause between consecutive files."""

    def __init__(
        self,
        sink: DeliverySink,
        delay_sec: float = 0.3,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.sink = sink
        self.delay_sec = max(0.0, float(delay_sec))
        self._sleep = sleep

    def deliver(self, files: list[ExportFile]) -> list[Any]:
        delivered: list[Any] = []
        for idx, f in enumerate(files):
            if idx > 0 and self.delay_sec:
                self._sleep(self.delay_sec)
            delivered.append(self.sink(f.filename, f.payload, f.mime_type))
        LOGGER.info("Delivered %d file(s)", len(files))
        return delivered

    def export(self, results: LevelResultMap, mode: ExportMode | str, per_level: bool = True) -> list[ExportFile]:
        files = serialize(results, mode, per_level=per_level)
        LOGGER.info("Exporting mode=%s files=%d", ExportMode.parse(mode).value, len(files))
        self.deliver(files)
        return files
