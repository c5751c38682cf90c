from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from Api.MoviePlanner_Connection import MoviePlannerConnection
from Modules.auth import SessionStateStore, SessionContext, TOKEN_SLOT, USERNAME_SLOT

BASE_URL = "http://api.test"

NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, body=NO_JSON):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._body


@dataclass
class Call:
    method: str
    path: str
    headers: dict = field(default_factory=dict)
    json: object = None


class FakeHttp:
    """Stands in for requests.Session: canned responses per (method, path), every call recorded."""

    def __init__(self):
        self.calls = []
        self.routes = {}

    def route(self, method, path, response):
        self.routes[(method, path)] = response

    def request(self, method, url, headers=None, json=None, timeout=None):
        path = url[len(BASE_URL):]
        self.calls.append(Call(method, path, dict(headers or {}), json))
        response = self.routes.get((method, path))
        if isinstance(response, Exception):
            raise response
        if response is None:
            return FakeResponse(404, {"error": "not found"})
        return response

    def calls_to(self, method, path=None):
        return [c for c in self.calls if c.method == method and (path is None or c.path == path)]

    def close(self):
        pass


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def db(http):
    return MoviePlannerConnection(BASE_URL, http=http)


@pytest.fixture
def redirects():
    return []


@pytest.fixture
def session(redirects):
    ctx = SessionContext(SessionStateStore())
    ctx.subscribe("redirect", lambda: redirects.append("auth"))
    return ctx


@pytest.fixture
def logged_in(session):
    session.store.save({TOKEN_SLOT: "tok-123", USERNAME_SLOT: "alice"})
    return session


@pytest.fixture
def state():
    return {}
