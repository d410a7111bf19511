from __future__ import annotations

import argparse
from datetime import datetime
import logging
import os
from pathlib import Path
import sys
from typing import Any

from wanikani_sentences.config import cfg_get, load_config
from wanikani_sentences.credentials import FileTokenStore, resolve_token
from wanikani_sentences.delivery import DirectorySink
from wanikani_sentences.errors import SentenceFetcherError
from wanikani_sentences.exporter import ExportMode, ExportQueue, serialize
from wanikani_sentences.fetcher import SentenceLibrary
from wanikani_sentences.levels import format_levels, parse_levels
from wanikani_sentences.models import LevelResultMap


LOGGER = logging.getLogger("pipeline")

TOKEN_ENV = "WANIKANI_API_TOKEN"


def print_results(results: LevelResultMap) -> None:
    """Print sentences grouped by level and subject."""

    if not results:
        print("No sentences found.")
        return
    for label, groups in results.items():
        print(f"=== {label} ===")
        for group in groups:
            print(f"[{group.label}]")
            for s in group.sentences:
                print(f"  {s.japanese}")
                print(f"  {s.english}")
        print()


def _export_modes(mode: str) -> list[ExportMode]:
    if mode == "all":
        return list(ExportMode)
    return [ExportMode.parse(mode)]


def step_fetch(cfg: dict[str, Any], level_text: str, token: str) -> LevelResultMap:
    """Run fetch step: parse levels -> fetch pages -> extract sentences."""

    levels = parse_levels(level_text)
    LOGGER.info("Requested levels: %s", format_levels(levels) or "(none)")

    def on_progress(total: int) -> None:
        LOGGER.info("Fetched %d subjects so far", total)

    library = SentenceLibrary(cfg, token)
    return library.refresh(level_text, progress=on_progress)


def step_export(cfg: dict[str, Any], results: LevelResultMap, mode: str, per_level: bool) -> list[str]:
    """Serialize every requested mode and deliver the files with spacing."""

    out_dir = Path(str(cfg_get(cfg, "export.output_dir", "./exports")))
    queue = ExportQueue(DirectorySink(out_dir), delay_sec=float(cfg_get(cfg, "export.delay_sec", 0.3)))

    files = []
    for export_mode in _export_modes(mode):
        files.extend(serialize(results, export_mode, per_level=per_level))
    queue.deliver(files)
    return [f.filename for f in files]


def run_pipeline(cfg: dict[str, Any], args: argparse.Namespace) -> None:
    """Run fetch then export. On failure exits with status 1."""

    try:
        store = FileTokenStore(str(cfg_get(cfg, "credentials.token_file", "~/.config/wanikani_sentences/token.json")))
        token = resolve_token(args.token, os.environ.get(TOKEN_ENV), store)

        LOGGER.info("[STEP] fetch start")
        results = step_fetch(cfg, args.levels, token)
        LOGGER.info("[STEP] fetch success levels=%d", len(results))
        print_results(results)

        if args.no_export:
            return
        if not results:
            LOGGER.warning("[STEP] export skipped: nothing to export")
            return

        LOGGER.info("[STEP] export start mode=%s", args.mode)
        per_level = bool(cfg_get(cfg, "export.per_level", True)) and not args.combined
        names = step_export(cfg, results, args.mode, per_level)
        LOGGER.info("[STEP] export success files=%s", ", ".join(names))

    except SentenceFetcherError as exc:
        LOGGER.error("Pipeline failed: %s", exc.message)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Pipeline failed: %s", exc)
        sys.exit(1)


def _setup_logging(cfg: dict[str, Any]) -> None:
    logs_dir = Path(cfg_get(cfg, "paths.logs_dir", "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"fetch_{datetime.now().strftime('%Y%m%d')}.log"

    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(
        level=logging.INFO,
        format=fmt,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
        force=True,
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="WaniKani example sentence fetcher")
    p.add_argument("--levels", required=True, help="Levels, e.g. 4,5-7,9-12,15")
    p.add_argument("--token", default=None, help=f"API token (default: ${TOKEN_ENV} or saved token)")
    p.add_argument(
        "--mode",
        choices=[m.value for m in ExportMode] + ["all"],
        default=ExportMode.bilingual.value,
        help="Export format",
    )
    p.add_argument("--combined", action="store_true", help="Write one text file for all levels")
    p.add_argument("--out", default=None, help="Export directory")
    p.add_argument("--delay", type=float, default=None, help="Seconds between exported files")
    p.add_argument("--no-export", action="store_true", help="Only print the fetched sentences")
    p.add_argument("--config", default="config.yaml", help="Config file path")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    # Load config first with lightweight fallback logging.
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    cfg = load_config(args.config)
    if args.out:
        cfg["export"]["output_dir"] = args.out
    if args.delay is not None:
        cfg["export"]["delay_sec"] = args.delay

    # Reconfigure with file handler.
    _setup_logging(cfg)

    LOGGER.info("Pipeline start levels=%s mode=%s", args.levels, args.mode)
    run_pipeline(cfg, args)


if __name__ == "__main__":
    main()
