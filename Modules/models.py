# Records exchanged with the Movie Planner service, plus client-side DTOs
from __future__ import annotations

from dataclasses import dataclass

PLAN_TO_WATCH = "PLAN_TO_WATCH"
HAVE_WATCHED = "HAVE_WATCHED"

STATUS_LABELS = {
    PLAN_TO_WATCH: "Plan to Watch",
    HAVE_WATCHED: "Have Watched",
}

FILTER_ALL = "ALL"
FILTER_OPTIONS = [FILTER_ALL, PLAN_TO_WATCH, HAVE_WATCHED]


def valid_rating(value) -> int | None:
    """Returns the rating as an int when it is a whole number in 1..5, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer() or number < 1 or number > 5:
        return None
    return int(number)


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    title: str
    year: int
    genres: list[str]
    description: str
    image_url: str


@dataclass
class MovieRecord:
    id: str
    title: str
    status: str
    rating: int | None = None
    review: str | None = None
    image_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> MovieRecord:
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            status=data.get("status") or "",
            rating=valid_rating(data.get("rating")),
            review=data.get("review") or None,
            image_url=data.get("imageUrl") or None,
        )

    @property
    def is_watched(self) -> bool:
        return self.status == HAVE_WATCHED

    @property
    def is_rated(self) -> bool:
        return self.is_watched and self.rating is not None


@dataclass(frozen=True)
class RatingSummary:
    title: str
    average_rating: float
    rounded_rating: int
    rating_count: int

    @classmethod
    def from_dict(cls, data: dict) -> RatingSummary:
        return cls(
            title=data.get("title") or "",
            average_rating=float(data.get("averageRating") or 0.0),
            rounded_rating=int(round(float(data.get("roundedRating") or 0))),
            rating_count=int(data.get("ratingCount") or 0),
        )


@dataclass(frozen=True)
class ReviewInput:
    """Outcome of the review dialog."""
    rating: int | None
    review: str | None
    warning: str | None = None


@dataclass
class NewMovieForm:
    title: str = ""
    status: str = PLAN_TO_WATCH
    rating: int | None = None
    review: str = ""
    poster_url: str = ""
