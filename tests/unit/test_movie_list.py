from __future__ import annotations

import pytest

from conftest import FakeResponse

from Modules.models import FILTER_ALL, HAVE_WATCHED, PLAN_TO_WATCH, MovieRecord, NewMovieForm, ReviewInput
from Modules.MovieList import (
    ERROR_KEY,
    create_movie,
    delete_movie,
    filter_movies,
    load_movies,
    mark_watched,
    personal_stars,
    status_pill,
    update_movie_status,
)

A = MovieRecord(id="1", title="A", status=PLAN_TO_WATCH)
B = MovieRecord(id="2", title="B", status=HAVE_WATCHED, review="great")
C = MovieRecord(id="3", title="Great Escape", status=HAVE_WATCHED, rating=4)

SERVER_LIST = [
    {"id": "1", "title": "A", "status": PLAN_TO_WATCH},
    {"id": "2", "title": "B", "status": HAVE_WATCHED, "review": "great"},
]


@pytest.fixture
def listing(http):
    http.route("GET", "/movies", FakeResponse(200, SERVER_LIST))
    return http


def test_status_filter_then_search():
    movies = [A, B]

    assert filter_movies(movies, HAVE_WATCHED, "great") == [B]
    assert filter_movies(movies, HAVE_WATCHED, "zzz") == []


def test_search_covers_title_status_and_review():
    movies = [A, B, C]

    assert filter_movies(movies, FILTER_ALL, "GREAT") == [B, C]
    assert filter_movies(movies, FILTER_ALL, "plan_to") == [A]
    assert filter_movies(movies, FILTER_ALL, "  ") == movies
    assert filter_movies(movies, PLAN_TO_WATCH, "") == [A]


def test_load_replaces_cached_list(db, listing, logged_in, state):
    state["movies"] = [C]

    assert load_movies(db, logged_in, state)

    assert [m.title for m in state["movies"]] == ["A", "B"]


def test_load_failure_keeps_previous_list(db, http, logged_in, state):
    http.route("GET", "/movies", FakeResponse(500))
    state["movies"] = [C]

    assert not load_movies(db, logged_in, state)
    assert state["movies"] == [C]
    assert state[ERROR_KEY] == "HTTP 500"


def test_create_watched_without_rating_is_blocked(db, http, logged_in, state):
    form = NewMovieForm(title="Heat", status=HAVE_WATCHED, rating=None)

    assert not create_movie(db, logged_in, state, form)
    assert http.calls == []
    assert state["form_error"] == "Please select a rating 1–5 for watched movies."


def test_create_without_title_is_blocked(db, http, logged_in, state):
    assert not create_movie(db, logged_in, state, NewMovieForm(title="   "))
    assert http.calls == []
    assert state["form_error"] == "Please enter a title"


def test_create_then_refetches(db, listing, logged_in, state):
    listing.route("POST", "/movies", FakeResponse(201, {}))
    form = NewMovieForm(title=" Heat ", status=HAVE_WATCHED, rating=4, review="  ", poster_url=" ")

    assert create_movie(db, logged_in, state, form)

    post, get = listing.calls
    assert post.json == {"title": "Heat", "status": HAVE_WATCHED, "imageUrl": None, "rating": 4, "review": None}
    assert (get.method, get.path) == ("GET", "/movies")
    assert len(state["movies"]) == 2


def test_create_planned_ignores_rating_and_review(db, listing, logged_in, state):
    listing.route("POST", "/movies", FakeResponse(201, {}))
    form = NewMovieForm(title="Heat", status=PLAN_TO_WATCH, rating=3, review="meh",
                        poster_url="http://img/heat.jpg")

    create_movie(db, logged_in, state, form)

    assert listing.calls[0].json == {"title": "Heat", "status": PLAN_TO_WATCH, "imageUrl": "http://img/heat.jpg"}


def test_update_status_sends_only_status(db, listing, logged_in, state):
    listing.route("PUT", "/movies?id=2", FakeResponse(200, {}))

    assert update_movie_status(db, logged_in, state, "2", PLAN_TO_WATCH)

    assert listing.calls[0].json == {"status": PLAN_TO_WATCH}
    assert listing.calls_to("GET", "/movies")


def test_mark_watched_does_not_resend_poster(db, listing, logged_in, state):
    listing.route("PUT", "/movies?id=3", FakeResponse(200, {}))
    movie = MovieRecord(id="3", title="Heat", status=PLAN_TO_WATCH, image_url="http://img/heat.jpg")

    mark_watched(db, logged_in, state, movie, ReviewInput(rating=5, review="Classic"))

    assert listing.calls[0].json == {"status": HAVE_WATCHED, "rating": 5, "review": "Classic"}


def test_unconfirmed_delete_sends_nothing(db, http, logged_in, state):
    state["movies"] = [A, B]

    assert not delete_movie(db, logged_in, state, "1", confirmed=False)
    assert http.calls == []
    assert state["movies"] == [A, B]


def test_confirmed_delete_accepts_204(db, listing, logged_in, state):
    listing.route("DELETE", "/movies?id=1", FakeResponse(204))

    assert delete_movie(db, logged_in, state, "1", confirmed=True)
    assert [c.method for c in listing.calls] == ["DELETE", "GET"]


def test_failed_mutation_skips_refetch(db, http, logged_in, state):
    http.route("DELETE", "/movies?id=1", FakeResponse(404))

    assert not delete_movie(db, logged_in, state, "1", confirmed=True)
    assert [c.method for c in http.calls] == ["DELETE"]
    assert state[ERROR_KEY] == "HTTP 404"


@pytest.mark.parametrize("method, path, action", [
    ("GET", "/movies", lambda db, s, st: load_movies(db, s, st)),
    ("POST", "/movies", lambda db, s, st: create_movie(db, s, st, NewMovieForm(title="Heat"))),
    ("PUT", "/movies?id=1", lambda db, s, st: update_movie_status(db, s, st, "1", HAVE_WATCHED)),
    ("DELETE", "/movies?id=1", lambda db, s, st: delete_movie(db, s, st, "1", confirmed=True)),
])
def test_any_401_clears_session_and_redirects(db, http, logged_in, state, redirects, method, path, action):
    http.route(method, path, FakeResponse(401))

    assert not action(db, logged_in, state)

    assert logged_in.store.load() == {}
    assert redirects == ["auth"]
    assert not state.get(ERROR_KEY)


def test_personal_stars():
    assert personal_stars(None) == ""
    assert personal_stars(0) == ""
    assert personal_stars(2) == "★★☆☆☆"


def test_status_pill_escapes_unknown_status():
    pill = status_pill("<img src=x onerror=alert(1)>")

    assert "<img" not in pill
    assert "&lt;img src=x onerror=alert(1)&gt;" in pill
    assert ">Have Watched</span>" in status_pill(HAVE_WATCHED)
