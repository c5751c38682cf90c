import logging
from urllib.parse import quote

import requests

from Modules.config import API_BASE_URL, API_TIMEOUT
from Modules.models import MovieRecord, RatingSummary

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-success response from the Movie Planner service."""

    def __init__(self, status, message):
        super().__init__(message)
        self.status = status
        self.message = message


class UnauthorizedError(ApiError):
    def __init__(self, message="Unauthorized"):
        super().__init__(401, message)


class TransportError(ApiError):
    """Network failure or an unreadable body; there is no HTTP status to report."""

    def __init__(self, message):
        super().__init__(None, message)


# Movie Planner REST Connection
class MoviePlannerConnection:
    def __init__(self, base_url, http=None, timeout=None):
        self.base_url = base_url.rstrip("/")
        self.http = http or requests.Session()
        self.timeout = timeout

    def close(self):
        self.http.close()

    def _request(self, method, path, token=None, payload=None):
        headers = {}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        if payload is not None:
            headers["Content-Type"] = "application/json"

        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            return self.http.request(method, url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(str(e) or "Network error") from e

    @staticmethod
    def _json_or_empty(response):
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _json_list(response):
        try:
            data = response.json()
        except ValueError as e:
            raise TransportError("Malformed response from server") from e
        if not isinstance(data, list):
            raise TransportError("Malformed response from server")
        return data

    @staticmethod
    def _parse_rows(rows, factory):
        try:
            return [factory(row) for row in rows]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise TransportError("Malformed response from server") from e

    @staticmethod
    def _raise_for_status(response):
        if response.status_code == 401:
            raise UnauthorizedError()
        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, f"HTTP {response.status_code}")

    def _authenticate(self, path, username, password, fallback):
        response = self._request("POST", path, payload={"username": username, "password": password})
        data = self._json_or_empty(response)
        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, data.get("error") or fallback)
        return data

    # ---------- Auth ----------
    def register(self, username, password):
        self._authenticate("/auth/register", username, password, "Registration failed")

    def login(self, username, password):
        """Returns the session token; a success body without one is an error."""
        data = self._authenticate("/auth/login", username, password, "Login failed")
        token = data.get("sessionToken")
        if not token:
            raise ApiError(None, "No session token returned from server.")
        return token

    # ---------- Ratings ----------
    def list_ratings(self):
        response = self._request("GET", "/ratings")
        self._raise_for_status(response)
        return self._parse_rows(self._json_list(response), RatingSummary.from_dict)

    # ---------- Movies ----------
    def list_movies(self, token):
        response = self._request("GET", "/movies", token=token)
        self._raise_for_status(response)
        return self._parse_rows(self._json_list(response), MovieRecord.from_dict)

    def create_movie(self, token, payload):
        response = self._request("POST", "/movies", token=token, payload=payload)
        self._raise_for_status(response)

    def update_movie(self, token, movie_id, changes):
        """PUT a partial record; fields left out keep their server-side values."""
        response = self._request("PUT", f"/movies?id={quote(str(movie_id), safe='')}", token=token, payload=changes)
        self._raise_for_status(response)

    def delete_movie(self, token, movie_id):
        response = self._request("DELETE", f"/movies?id={quote(str(movie_id), safe='')}", token=token)
        self._raise_for_status(response)


def Connect():
    return MoviePlannerConnection(API_BASE_URL, timeout=API_TIMEOUT)
