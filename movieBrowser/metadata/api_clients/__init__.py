"""Outbound HTTP clients. One shared instance per process."""
from movieBrowser.metadata.api_clients.movie_client import MovieAPIClient, MovieAPIError

__all__ = ["MovieAPIClient", "MovieAPIError"]
