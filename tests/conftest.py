"""Test configuration and shared fixtures."""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from registrations.client import RegistrationStatsClient
from tests.helpers import RoutedSession, default_routes

API_URL = "http://registrations.test"


@pytest.fixture
def programme_rows():
    return [
        {"study_programme": "CS", "count": 10},
        {"study_programme": "EE", "count": 5},
    ]


@pytest.fixture
def year_rows():
    return [
        {"academic_year": "2022/23", "count": 7},
        {"academic_year": "2023/24", "count": 8},
    ]


@pytest.fixture
def school_rows():
    return [
        {"secondary_school": "Northside High", "count": 12},
        {"secondary_school": "St. Mary's", "count": 9},
        {"secondary_school": "Lakeview Academy", "count": 4},
    ]


@pytest.fixture
def session(programme_rows, year_rows, school_rows):
    return RoutedSession(default_routes(
        total=42,
        by_programme=programme_rows,
        by_year=year_rows,
        top_schools=school_rows,
    ))


@pytest.fixture
def client(session):
    return RegistrationStatsClient(API_URL, timeout=2, session=session)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
