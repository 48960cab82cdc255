# movieBrowser/metadata/api_clients/movie_client.py
from __future__ import annotations

from typing import Any, Optional

import requests

from movieBrowser.settings import MOVIE_API_URL, HTTP_TIMEOUT
from movieBrowser.utils import log_debug


class MovieAPIError(RuntimeError):
    """Transport, HTTP-status or body-decoding failure of the movie API."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class MovieAPIClient:
    """
    Thin wrapper around the paginated movie endpoint.

    Only the first page is ever requested: one ``GET``, no parameters, no
    auth. The decoded JSON body is returned as-is; deciding whether it holds
    movies is the caller's job (see ``extract_movie_list``).
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        url: str = MOVIE_API_URL,
        timeout: float = HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def fetch_page(self) -> Any:
        """
        GET the list endpoint and return the decoded JSON body.

        Raises
        ------
        MovieAPIError
            Connection problems, timeouts, non-2xx statuses and bodies that
            are not JSON.
        """
        log_debug(f"GET {self.url}")
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise MovieAPIError(f"Request to {self.url} failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:     # Response.ok lets 3xx through
            raise MovieAPIError(f"HTTP error! Status: {resp.status_code}", status=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:                 # requests' JSONDecodeError
            raise MovieAPIError(f"Response from {self.url} is not JSON", status=resp.status_code) from exc

        log_debug(f"API response: {len(extract_movie_list(payload) or [])} movies")
        return payload

    def close(self) -> None:
        self.session.close()


def extract_movie_list(payload: Any) -> Optional[list]:
    """The body's ``data`` list, or None when the body has none."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return payload["data"]
    return None
