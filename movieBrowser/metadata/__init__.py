"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – MovieRecord / MovieDetails dataclasses + fallback resolvers
* api_clients – the movie list HTTP client
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieBrowser.metadata.core.models import CastMember, MovieDetails, MovieRecord
from movieBrowser.metadata.core.normalizers import (
    build_details,
    card_key,
    resolve_card_label,
    resolve_poster,
)

# ── API client ────────────────────────────────────────────────────────────
from movieBrowser.metadata.api_clients.movie_client import MovieAPIClient, MovieAPIError

__all__ = [
    "CastMember",
    "MovieDetails",
    "MovieRecord",
    "build_details",
    "card_key",
    "resolve_card_label",
    "resolve_poster",
    "MovieAPIClient",
    "MovieAPIError",
]
