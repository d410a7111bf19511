from copy import deepcopy
import json
from unittest.mock import MagicMock, Mock

import pytest
import requests

from wanikani_sentences.config import DEFAULT_CONFIG


def make_response(body=None, status_code=200, reason="OK", url="https://api.wanikani.com/v2/subjects"):
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.url = url
    resp.encoding = "utf-8"
    resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
    return resp


def make_page(items, next_url=None):
    return {"object": "collection", "data": items, "pages": {"next_url": next_url, "per_page": 1000}}


def make_subject(subject_id, characters="食べる", context=None, meanings=None, **extra):
    data = {"characters": characters, "meanings": meanings or [{"meaning": "To Eat", "primary": True}]}
    if context is not None:
        data["context_sentences"] = context
    data.update(extra)
    return {"id": subject_id, "object": "vocabulary", "data": data}


@pytest.fixture
def cfg():
    return deepcopy(DEFAULT_CONFIG)


@pytest.fixture
def session_for():
    """Build a fake requests session that serves responses in order."""

    def _build(*responses):
        session = Mock()
        session.get.side_effect = list(responses)
        return session

    return _build


@pytest.fixture
def private_session(monkeypatch):
    """Replace ``requests.Session()`` with a fake usable as a context manager."""

    session = MagicMock()
    session.__enter__.return_value = session
    session.__exit__.return_value = False
    monkeypatch.setattr("wanikani_sentences.fetcher.requests.Session", lambda: session)
    return session
