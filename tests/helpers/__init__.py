"""Test helper utilities."""

import threading
from typing import Any, Callable, Dict, List, Optional, Tuple
from unittest.mock import Mock
from urllib.parse import urlparse

import requests


def make_response(payload: Any = None, status: int = 200, bad_json: bool = False) -> Mock:
    """Build a stand-in for ``requests.Response``."""
    resp = Mock(spec=requests.Response)
    resp.status_code = status
    if bad_json:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error", response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


class RoutedSession:
    """Fake ``requests.Session`` that answers by URL path and records every call.

    Route values may be a JSON payload, a prepared response from
    :func:`make_response`, an exception to raise, or a callable taking the
    query params and returning any of those.
    """

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.calls: List[Tuple[str, Optional[Dict[str, str]]]] = []
        self._lock = threading.Lock()
        self.closed = False

    def get(self, url: str, params: Optional[Dict[str, str]] = None, timeout: Optional[float] = None):
        path = urlparse(url).path
        with self._lock:
            self.calls.append((path, params))
        route = self.routes[path]
        if callable(route) and not isinstance(route, Mock):
            route = route(params)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, Mock):
            return route
        return make_response(route)

    def params_for(self, path: str) -> List[Optional[Dict[str, str]]]:
        with self._lock:
            return [params for p, params in self.calls if p == path]

    def close(self) -> None:
        self.closed = True


def default_routes(
    total: int = 42,
    by_programme: Optional[list] = None,
    by_year: Optional[list] = None,
    top_schools: Optional[list] = None,
) -> Dict[str, Any]:
    return {
        "/api/total-registrations": {"total": total},
        "/api/registrations-by-programme": by_programme or [],
        "/api/registrations-by-year": by_year or [],
        "/api/top-schools": top_schools or [],
    }
