"""Shared fixtures: an in-process requests adapter that records traffic."""

import json
import os
import sys
from typing import Any, List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import (  # noqa: E402
    HTTP_PROXY_ENV,
    PROXY_PASSWORD_ENV,
    PROXY_USER_ENV,
    SOCKS5_PROXY_ENV,
    VERIFY_TLS_ENV,
)


class RecordingAdapter(BaseAdapter):
    """Answers every request with a canned response and keeps what it saw."""

    def __init__(self, status_code: int = 200, body: Any = None, error: Optional[Exception] = None) -> None:
        super().__init__()
        self.status_code = status_code
        self.body = {"ok": True, "result": True} if body is None else body
        self.error = error
        self.requests: List[requests.PreparedRequest] = []
        self.send_kwargs: List[dict] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        response = requests.Response()
        response.status_code = self.status_code
        response._content = self.body if isinstance(self.body, bytes) else json.dumps(self.body).encode("utf-8")
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].body)


@pytest.fixture()
def adapter() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture(autouse=True)
def clean_proxy_env(monkeypatch):
    """Start every test without proxy settings from the host environment."""
    for name in (HTTP_PROXY_ENV, SOCKS5_PROXY_ENV, PROXY_USER_ENV, PROXY_PASSWORD_ENV, VERIFY_TLS_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def make_adapter():
    """Factory for adapters with a custom status, body or raised error."""
    return RecordingAdapter
