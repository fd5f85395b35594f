"""
Shared test fixtures — test client and seeded country profiles.
"""

import pytest
from fastapi.testclient import TestClient

from buildcalc.countries import get_profile
from buildcalc.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def us_profile():
    """Imperial profile (United States)."""
    return get_profile("US")


@pytest.fixture
def gb_profile():
    """Metric profile (United Kingdom)."""
    return get_profile("GB")


@pytest.fixture
def metric_defaults(gb_profile):
    return gb_profile.defaults


@pytest.fixture
def imperial_defaults(us_profile):
    return us_profile.defaults
