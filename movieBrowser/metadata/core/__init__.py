"""
Dataclasses for movie records and the pure fallback resolvers that turn
them into display strings.
"""
from movieBrowser.metadata.core.models import CastMember, MovieDetails, MovieRecord

__all__ = ["CastMember", "MovieDetails", "MovieRecord"]
