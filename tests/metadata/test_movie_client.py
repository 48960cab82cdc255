"""
Tests for MovieAPIClient against a fake requests session.
"""

import json

import pytest
import requests

from movieBrowser.metadata.api_clients import MovieAPIClient, MovieAPIError
from movieBrowser.metadata.api_clients.movie_client import extract_movie_list


def make_response(status_code=200, body=None, raw=None):
    """A real requests.Response carrying *body* as JSON (or *raw* bytes)."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = "https://movies.test/paginated"
    resp._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def client_for(session):
    return MovieAPIClient(url="https://movies.test/paginated", timeout=3, session=session)


class TestFetchPage:
    """GET once, return the body, wrap every failure in MovieAPIError."""

    def test_returns_decoded_body(self):
        body = {"data": [{"id": 1}], "current_page": 1}
        session = FakeSession(make_response(200, body))
        assert client_for(session).fetch_page() == body

    def test_single_get_without_params(self):
        session = FakeSession(make_response(200, {"data": []}))
        client_for(session).fetch_page()
        assert session.calls == [("https://movies.test/paginated", {"timeout": 3})]

    @pytest.mark.parametrize("status", [300, 301, 304, 399, 404, 500, 503])
    def test_non_2xx_raises_with_status(self, status):
        session = FakeSession(make_response(status, {"data": [{"id": 1}]}))
        with pytest.raises(MovieAPIError) as exc:
            client_for(session).fetch_page()
        assert exc.value.status == status
        assert str(status) in str(exc.value)

    def test_connection_error(self):
        session = FakeSession(error=requests.ConnectionError("refused"))
        with pytest.raises(MovieAPIError) as exc:
            client_for(session).fetch_page()
        assert exc.value.status is None

    def test_timeout(self):
        session = FakeSession(error=requests.Timeout("slow"))
        with pytest.raises(MovieAPIError):
            client_for(session).fetch_page()

    def test_body_not_json(self):
        session = FakeSession(make_response(200, raw=b"<html>oops</html>"))
        with pytest.raises(MovieAPIError):
            client_for(session).fetch_page()

    def test_close_closes_session(self):
        session = FakeSession()
        client_for(session).close()
        assert session.closed


class TestExtractMovieList:

    def test_data_list(self):
        assert extract_movie_list({"data": [{"id": 1}]}) == [{"id": 1}]
        assert extract_movie_list({"data": []}) == []

    @pytest.mark.parametrize("payload", [
        {},
        {"data": None},
        {"data": {"id": 1}},
        {"data": "movies"},
        [{"id": 1}],
        None,
        "oops",
    ])
    def test_no_data_list(self, payload):
        assert extract_movie_list(payload) is None
