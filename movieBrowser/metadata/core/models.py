# Movie record dataclasses (+ the canonical detail shape)
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

@dataclass(slots=True, eq=False)
class MovieRecord:
    """
    One entry of the API's ``data`` array.

    The API has no fixed schema, so every field it is known to use is an
    optional attribute; the untouched mapping stays available as ``raw``.
    Compared by identity: the selected record is a reference into the list.
    """
    id: Any = None
    title: str | None = None
    name: str | None = None
    original_title: str | None = None
    release_date: str | None = None
    year: Any = None
    poster_path: str | None = None
    poster: str | None = None
    director: Any = None
    directors: Any = None
    overview: str | None = None
    plot: str | None = None
    description: str | None = None
    vote_average: Any = None
    rating: Any = None
    cast: Any = None
    actors: Any = None
    credits: Any = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: Any) -> "MovieRecord":
        if not isinstance(data, Mapping):
            return cls()
        known = {f.name for f in fields(cls)} - {"raw"}
        return cls(**{k: data[k] for k in known if k in data}, raw=dict(data))


@dataclass(slots=True, frozen=True)
class CastMember:
    name: str
    photo: str
    fallback_photo: str


@dataclass(slots=True, frozen=True)
class MovieDetails:
    """Normalized view of a MovieRecord, as shown in the detail overlay."""
    title: str
    year: str
    director: str
    plot: str
    poster: str
    rating: str
    release_date: str
    cast: tuple[CastMember, ...] = ()

    @property
    def heading(self) -> str:
        return f"{self.title} ({self.year})"
