"""metadata.core.normalizers
Fallback resolution for loosely-structured movie records.

Each chain the UI relies on is one pure function here. "Present" follows
JavaScript-style truthiness, which is what the API data was written for:
``None``, ``""``, ``0`` and empty containers all fall through to the next
candidate.
"""

from __future__ import annotations
import re
import urllib.parse
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from movieBrowser.metadata.core.models import CastMember, MovieDetails, MovieRecord
from movieBrowser.settings import (
    ACTOR_PHOTO_FALLBACK, ACTOR_PHOTO_PLACEHOLDER, CARD_POSTER_PLACEHOLDER,
    DETAIL_POSTER_PLACEHOLDER, NO_PLOT, NO_RATING, UNKNOWN, UNKNOWN_ACTOR,
    UNKNOWN_DIRECTOR, UNTITLED_MOVIE,
)

_YEAR_RE = re.compile(r"\b(\d{4})\b")


def first_present(*candidates: Any) -> Any:
    """Return the first truthy candidate, or None."""
    for value in candidates:
        if value:
            return value
    return None


def _text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ───────────────────────────── identity ─────────────────────────────────
def card_key(record: MovieRecord) -> str:
    """Key used to tell cards apart: ``id`` when present, else ``title``."""
    key = first_present(record.id, record.title)
    return "" if key is None else _text(key)


def resolve_title(record: MovieRecord) -> str:
    title = first_present(record.title, record.name, record.original_title)
    return _text(title) if title else UNTITLED_MOVIE


def parse_release_year(value: Any) -> Optional[int]:
    """Year of an ISO-ish date string ('2021-10-22', '2021'); None if unparsable."""
    if not value:
        return None
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10]).year
    except ValueError:
        pass
    m = _YEAR_RE.search(text)
    return int(m.group(1)) if m else None


def resolve_year(record: MovieRecord) -> Optional[str]:
    """Release year from ``release_date``, else the literal ``year`` field."""
    year = parse_release_year(record.release_date)
    if year is not None:
        return str(year)
    return _text(record.year) if record.year else None


def format_title_year(title: str, year: Optional[str]) -> str:
    return f"{title} ({year})" if year else title


def resolve_card_label(record: MovieRecord) -> str:
    return format_title_year(resolve_title(record), resolve_year(record))


def resolve_poster(record: MovieRecord, placeholder: str = CARD_POSTER_PLACEHOLDER) -> str:
    poster = first_present(record.poster_path, record.poster)
    return str(poster) if poster else placeholder


# ───────────────────────────── detail fields ────────────────────────────
def resolve_director(record: MovieRecord) -> str:
    director = first_present(record.director, record.directors)
    if not director:
        return UNKNOWN_DIRECTOR
    if isinstance(director, Mapping):
        name = director.get("name")
        return str(name) if name else UNKNOWN_DIRECTOR
    if isinstance(director, (list, tuple)):
        names = [
            d.get("name") if isinstance(d, Mapping) else d
            for d in director
        ]
        return ", ".join(str(n) for n in names if n) or UNKNOWN_DIRECTOR
    return str(director)


def resolve_plot(record: MovieRecord) -> str:
    plot = first_present(record.overview, record.plot, record.description)
    return str(plot) if plot else NO_PLOT


def resolve_rating(record: MovieRecord) -> str:
    rating = first_present(record.vote_average, record.rating)
    return _text(rating) if rating else NO_RATING


def resolve_release_date(record: MovieRecord) -> str:
    released = first_present(record.release_date, record.year)
    return _text(released) if released else UNKNOWN


def resolve_cast(record: MovieRecord) -> list:
    """
    Raw actor entries from the first of ``cast``, ``actors`` or
    ``credits.cast`` that is a list; empty when none is.
    """
    if isinstance(record.cast, (list, tuple)):
        return list(record.cast)
    if isinstance(record.actors, (list, tuple)):
        return list(record.actors)
    credits = record.credits
    if isinstance(credits, Mapping) and isinstance(credits.get("cast"), (list, tuple)):
        return list(credits["cast"])
    return []


def resolve_actor_name(actor: Any) -> str:
    if isinstance(actor, str):
        return actor or UNKNOWN_ACTOR
    if not isinstance(actor, Mapping):
        return UNKNOWN_ACTOR
    name = first_present(actor.get("name"), actor.get("actor_name"))
    return str(name) if name else UNKNOWN_ACTOR


def actor_placeholder(name: str, template: str = ACTOR_PHOTO_PLACEHOLDER) -> str:
    """Generated avatar URL labelled with the first character of *name*."""
    return template.format(initial=urllib.parse.quote_plus(name[:1]))


def normalize_actor(actor: Any) -> CastMember:
    name = resolve_actor_name(actor)
    photo = None
    if isinstance(actor, Mapping):
        photo = first_present(actor.get("profile_path"), actor.get("photo"), actor.get("image"))
    return CastMember(
        name=name,
        photo=str(photo) if photo else actor_placeholder(name),
        fallback_photo=actor_placeholder(name, ACTOR_PHOTO_FALLBACK),
    )


def build_details(record: MovieRecord) -> MovieDetails:
    """Canonical detail record for the overlay."""
    return MovieDetails(
        title=resolve_title(record),
        year=resolve_year(record) or UNKNOWN,
        director=resolve_director(record),
        plot=resolve_plot(record),
        poster=resolve_poster(record, DETAIL_POSTER_PLACEHOLDER),
        rating=resolve_rating(record),
        release_date=resolve_release_date(record),
        cast=tuple(normalize_actor(a) for a in resolve_cast(record)),
    )
