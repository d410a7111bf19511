"""WaniKani subject fetching.

Pages are followed through ``pages.next_url`` one at a time, and levels are
fetched one after another. Nothing is retried: any non-success status aborts
the whole fetch and no partial result is returned.
"""

from __future__ import annotations

from contextlib import nullcontext
import logging
from typing import Any, Callable, ContextManager
from urllib.parse import urlencode

import requests

from .config import cfg_get
from .errors import AuthError, InputError, NetworkError
from .extractor import group_subject
from .levels import parse_levels
from .models import LevelResultMap, SubjectGroup, level_label


LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


def build_headers(token: str, cfg: dict[str, Any]) -> dict[str, str]:
    headers = {"Authorization": f"Bearer {token}"}
    revision = str(cfg_get(cfg, "api.revision", "") or "")
    if revision:
        headers["Wanikani-Revision"] = revision
    return headers


def build_subjects_url(level: int, cfg: dict[str, Any]) -> str:
    base_url = str(cfg_get(cfg, "api.base_url", "https://api.wanikani.com/v2")).rstrip("/")
    params: dict[str, Any] = {"levels": level}
    subject_types = str(cfg_get(cfg, "api.subject_types", "") or "").strip()
    if subject_types:
        params["types"] = subject_types
    return f"{base_url}/subjects?{urlencode(params, safe=',')}"


def _next_url(body: dict[str, Any]) -> str | None:
    pages = body.get("pages")
    if not isinstance(pages, dict):
        return None
    return pages.get("next_url") or None


def _session_scope(session: requests.Session | None) -> ContextManager[requests.Session]:
    """Use the caller's session as-is, or a private one closed on exit."""
    if session is not None:
        return nullcontext(session)
    return requests.Session()


def _get_page(session: requests.Session, url: str, headers: dict[str, str], timeout: float) -> dict[str, Any]:
    try:
        resp = session.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise NetworkError(f"Request failed: {url}: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        raise NetworkError(
            f"HTTP {resp.status_code} {resp.reason}: {url}",
            status_code=resp.status_code,
            reason=resp.reason or "",
        )

    try:
        body = resp.json()
    except ValueError as exc:
        raise NetworkError(f"Invalid JSON body: {url}", status_code=resp.status_code) from exc
    return body if isinstance(body, dict) else {}


def fetch_all(
    start_url: str,
    headers: dict[str, str],
    session: requests.Session | None = None,
    progress: ProgressCallback | None = None,
    timeout: float = 30,
) -> list[dict[str, Any]]:
    """Fetch every page starting at ``start_url`` and return all ``data`` items.

    Args:
        start_url: First page URL.
        headers: Request headers, including the bearer token.
        session: Optional shared session; a private one is used otherwise.
        progress: Called with the running item count after each page.
        timeout: Per-request timeout in seconds.

    Raises:
        NetworkError: On a non-success status, transport failure or non-JSON body.
    """

    items: list[dict[str, Any]] = []
    url: str | None = start_url
    page_no = 0
    with _session_scope(session) as sess:
        while url:
            page_no += 1
            body = _get_page(sess, url, headers, timeout)
            data = body.get("data")
            if isinstance(data, list):
                items.extend(data)
            LOGGER.debug("Fetched page %d (%d items so far): %s", page_no, len(items), url)
            if progress is not None:
                progress(len(items))
            url = _next_url(body)
    return items


def group_subjects(subjects: list[dict[str, Any]]) -> list[SubjectGroup]:
    groups: list[SubjectGroup] = []
    for subject in subjects:
        group = group_subject(subject)
        if group is not None:
            groups.append(group)
    return groups


def fetch_sentences(
    levels: list[int],
    token: str,
    cfg: dict[str, Any],
    session: requests.Session | None = None,
    progress: ProgressCallback | None = None,
) -> LevelResultMap:
    """Fetch and group example sentences for each level.

    Returns a new map keyed by "Level N". Levels without any sentence are left
    out. Raises before touching the network when the token or level list is empty.
    """

    if not token or not token.strip():
        raise AuthError("API token is required.")
    if not levels:
        raise InputError("Please enter valid level(s).")

    timeout = float(cfg_get(cfg, "fetch.timeout_sec", 30))
    headers = build_headers(token.strip(), cfg)

    results: LevelResultMap = {}
    with _session_scope(session) as sess:
        for level in levels:
            url = build_subjects_url(level, cfg)
            LOGGER.info("Fetching level %d", level)
            try:
                subjects = fetch_all(url, headers, session=sess, progress=progress, timeout=timeout)
            except NetworkError as exc:
                raise NetworkError(
                    f"Failed to fetch level {level}: {exc.message}",
                    status_code=exc.status_code,
                    reason=exc.reason,
                ) from exc
            groups = group_subjects(subjects)
            sentence_count = sum(len(g.sentences) for g in groups)
            LOGGER.info(
                "Level %d: subjects=%d groups=%d sentences=%d",
                level,
                len(subjects),
                len(groups),
                sentence_count,
            )
            if groups:
                results[level_label(level)] = groups
    return results


class SentenceLibrary:
    """Holds the most recent complete fetch result.

    ``results`` is only replaced after a fetch succeeds for every level; a
    failed refresh leaves the previous snapshot untouched.
    """

    def __init__(self, cfg: dict[str, Any], token: str, session: requests.Session | None = None) -> None:
        self.cfg = cfg
        self.token = token
        self.session = session
        self.results: LevelResultMap = {}

    def refresh(self, level_text: str, progress: ProgressCallback | None = None) -> LevelResultMap:
        levels = parse_levels(level_text)
        if not levels:
            raise InputError("Please enter valid level(s).")
        fresh = fetch_sentences(levels, self.token, self.cfg, session=self.session, progress=progress)
        self.results = fresh
        return fresh
