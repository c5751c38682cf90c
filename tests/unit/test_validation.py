from __future__ import annotations

import pytest

from Modules.models import MovieRecord, valid_rating
from Modules.validation import (
    INVALID_RATING,
    ValidationError,
    blank_to_none,
    parse_review_input,
    require_credentials,
)


@pytest.mark.parametrize("raw, expected", [
    ("4", 4),
    (" 5 ", 5),
    ("3.0", 3),
    ("4.5", None),
    ("0", None),
    ("6", None),
    ("abc", None),
    (None, None),
    (True, None),
    (2, 2),
])
def test_valid_rating(raw, expected):
    assert valid_rating(raw) == expected


def test_require_credentials_trims():
    assert require_credentials(" alice ", " pw ") == ("alice", "pw")

    with pytest.raises(ValidationError, match="Username and password are required."):
        require_credentials("alice", "   ")


def test_blank_to_none():
    assert blank_to_none("   ") is None
    assert blank_to_none(None) is None
    assert blank_to_none(" ok ") == "ok"


def test_review_input_blank_rating_keeps_default():
    result = parse_review_input("", "  loved it ", default_rating=3)

    assert result.rating == 3
    assert result.review == "loved it"
    assert result.warning is None


def test_review_input_invalid_rating_warns_and_keeps_default():
    result = parse_review_input("11", "", default_rating=None, invalid_message="nope")

    assert result.rating is None
    assert result.review is None
    assert result.warning == "nope"


def test_review_input_valid_rating_overrides_default():
    result = parse_review_input(" 2 ", None, default_rating=5)

    assert result.rating == 2
    assert result.warning is None


def test_review_input_default_message():
    assert parse_review_input("x", "").warning == INVALID_RATING


def test_unrated_watched_record_is_not_rated():
    record = MovieRecord.from_dict({"id": "1", "title": "Heat", "status": "HAVE_WATCHED", "rating": None})

    assert record.is_watched
    assert not record.is_rated
