"""File delivery sinks.

A sink receives one exported file per call and persists or forwards it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Protocol


LOGGER = logging.getLogger(__name__)


class DeliverySink(Protocol):
    def __call__(self, filename: str, payload: bytes, mime_type: str) -> Any: ...


class DirectorySink:
    """Write each delivered file under ``base_dir``."""

    def __init__(self, base_dir: str | Path) -> None:
        self.base_dir = Path(base_dir).expanduser()

    def __call__(self, filename: str, payload: bytes, mime_type: str) -> Path:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        path = self.base_dir / Path(filename).name
        path.write_bytes(payload)
        LOGGER.info("Saved %s (%s, %d bytes)", path, mime_type, len(payload))
        return path


@dataclass
class MemorySink:
    deliveries: list[tuple[str, bytes, str]] = field(default_factory=list)

    def __call__(self, filename: str, payload: bytes, mime_type: str) -> None:
        self.deliveries.append((filename, payload, mime_type))

    @property
    def filenames(self) -> list[str]:
        return [name for name, _, _ in self.deliveries]
