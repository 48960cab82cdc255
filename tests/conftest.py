"""
Shared fixtures.

Qt runs on the offscreen platform; no test touches the network: the movie
API is replaced by `FakeClient` and image downloads are recorded instead of
sent.
"""

import os
import tempfile
import threading
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault(
    "MOVIE_BROWSER_LOG_PATH", str(Path(tempfile.gettempdir()) / "movie_browser_tests.log")
)

import pytest
from PySide6.QtWidgets import QApplication

from movieBrowser.gui.remote_image import RemoteImageLabel
from movieBrowser.metadata.api_clients import MovieAPIError


class FakeClient:
    """Stands in for MovieAPIClient: returns *payload* or raises *error*."""

    timeout = 1

    def __init__(self, payload=None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls = 0

    def fetch_page(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


class SlowClient:
    """A fetch that outlasts its own timeout until the test sets *release*."""

    timeout = 0.05

    def __init__(self, payload=None):
        self.payload = payload if payload is not None else {"data": []}
        self.started = threading.Event()
        self.release = threading.Event()

    def fetch_page(self):
        self.started.set()
        self.release.wait(10)
        return self.payload


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole run."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def image_requests(monkeypatch):
    """Record image URLs instead of downloading them."""
    requested = []

    def fake_request(self, url):
        requested.append(url)

    monkeypatch.setattr(RemoteImageLabel, "_request", fake_request)
    return requested


@pytest.fixture
def make_client():
    def factory(payload=None, error=None):
        return FakeClient(payload, error)
    return factory


@pytest.fixture
def slow_client():
    client = SlowClient()
    yield client
    client.release.set()


@pytest.fixture
def http_500():
    return MovieAPIError("HTTP error! Status: 500", status=500)
