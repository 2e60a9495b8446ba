"""HTTP client for the Registration Statistics Service.

Wraps the four read endpoints used by the dashboard. Filter values equal to
the ``"all"`` sentinel are never sent: the query parameter is left out.
"""

from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from config.config import (
    ALL_SENTINEL,
    API_BASE_URL,
    BY_PROGRAMME_PATH,
    BY_YEAR_PATH,
    REQUEST_TIMEOUT_S,
    TOP_SCHOOLS_LIMIT,
    TOP_SCHOOLS_PATH,
    TOTAL_REGISTRATIONS_PATH,
)
from config.schemas import ProgrammeBreakdown, TopSchools, YearBreakdown
from registrations.errors import RegistrationApiError
from utils.logging import get_logger
from utils.validation import (
    PROGRAMME_FIELDS,
    SCHOOL_FIELDS,
    YEAR_FIELDS,
    PayloadValidationError,
    validate_records,
    validate_total,
)

logger = get_logger(__name__)


def filter_params(name: str, value: str) -> Dict[str, str]:
    """Build query parameters for an optional filter.

    Returns an empty dict when ``value`` is the ``"all"`` sentinel so the
    parameter is omitted rather than sent empty.
    """
    if value == ALL_SENTINEL:
        return {}
    return {name: value}


class RegistrationStatsClient:
    """Read-only client for the registration statistics endpoints."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        timeout: float = REQUEST_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        url = urljoin(self.base_url, path.lstrip("/"))
        logger.debug(f"GET {url} params={params or {}}")
        try:
            resp = self.session.get(url, params=params or None, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise RegistrationApiError(path, f"HTTP {status}", status_code=status) from e
        except requests.RequestException as e:
            raise RegistrationApiError(path, f"request failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise RegistrationApiError(path, "response body is not valid JSON") from e

    def total_registrations(self) -> int:
        """Total number of registrations; never filtered."""
        payload = self._get(TOTAL_REGISTRATIONS_PATH)
        try:
            return validate_total(payload)
        except PayloadValidationError as e:
            raise RegistrationApiError(TOTAL_REGISTRATIONS_PATH, str(e)) from e

    def registrations_by_programme(self, year: str = ALL_SENTINEL) -> ProgrammeBreakdown:
        """Registrations per study programme, optionally restricted to one academic year."""
        payload = self._get(BY_PROGRAMME_PATH, filter_params("year", year))
        try:
            return validate_records(payload, PROGRAMME_FIELDS)
        except PayloadValidationError as e:
            raise RegistrationApiError(BY_PROGRAMME_PATH, str(e)) from e

    def registrations_by_year(self, programme: str = ALL_SENTINEL) -> YearBreakdown:
        """Registrations per academic year, optionally restricted to one programme."""
        payload = self._get(BY_YEAR_PATH, filter_params("programme", programme))
        try:
            return validate_records(payload, YEAR_FIELDS)
        except PayloadValidationError as e:
            raise RegistrationApiError(BY_YEAR_PATH, str(e)) from e

    def top_schools(self) -> TopSchools:
        """Secondary schools with the most registrations; never filtered."""
        payload = self._get(TOP_SCHOOLS_PATH)
        try:
            schools = validate_records(payload, SCHOOL_FIELDS)
        except PayloadValidationError as e:
            raise RegistrationApiError(TOP_SCHOOLS_PATH, str(e)) from e
        if len(schools) > TOP_SCHOOLS_LIMIT:
            logger.warning(
                f"{TOP_SCHOOLS_PATH} returned {len(schools)} rows, keeping first {TOP_SCHOOLS_LIMIT}"
            )
        return schools[:TOP_SCHOOLS_LIMIT]

    def close(self) -> None:
        self.session.close()
