"""Shared fixtures: listing pages and a fake HTTP layer."""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest  # type: ignore
import requests


def listing_html(header: List[str], rows: List[List[str]]) -> str:
    """Build a listing page with a `table.data` manifest."""
    head = "".join(f"<td>{label}</td>" for label in header)
    body = "".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
    )
    return (
        "<html><body><h1>Pallet 12345</h1>"
        '<table class="layout"><tr><td>Not the manifest</td></tr></table>'
        f'<table class="data"><tr class="header">{head}</tr>{body}</table>'
        "</body></html>"
    )


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200, chunk_size: int = 8192) -> None:
        self.text = text
        self.status_code = status_code
        self.encoding = "utf-8"
        self.chunk_size = chunk_size
        self.closed = False

    def iter_content(self, chunk_size: int = 1):
        data = self.text.encode(self.encoding)
        for start in range(0, len(data), self.chunk_size):
            yield data[start:start + self.chunk_size]

    def close(self) -> None:
        self.closed = True

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeGet:
    """Records calls and returns a canned response or raises an exception."""

    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[Exception] = None) -> None:
        self.response = response or FakeResponse()
        self.exc = exc
        self.calls: List[Dict[str, object]] = []

    def __call__(self, url: str, **kwargs: object) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def sample_html() -> str:
    return listing_html(
        ["Height", "Width", "Length", "Pallet"],
        [["5'", "4'", "10'", "2"]],
    )


@pytest.fixture
def fake_get(monkeypatch: pytest.MonkeyPatch):
    """Patch `requests.get` and `Session.get`; tests set `.response` or `.exc`."""
    fake = FakeGet()
    monkeypatch.setattr(requests, "get", fake)
    monkeypatch.setattr(requests.Session, "get", lambda self, url, **kw: fake(url, **kw))
    return fake
