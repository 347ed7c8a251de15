# tests/conftest.py

"""
Pytest Fixtures - Shared stores, gateways and candidates for all tests

Every fixture works against a temporary JSON store and an in-process
spreadsheet endpoint (httpx.MockTransport); nothing touches the network.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from ospa.core.dependencies import get_candidate_service
from ospa.main import app
from ospa.models.candidate import Candidate
from ospa.models.enumerations import Level, Rank
from ospa.repositories.json_store import JsonFileCandidateStore
from ospa.services.candidate_service import CandidateService
from ospa.services.sync_gateway import SheetsSyncGateway

SYNC_URL = "https://sheets.example.test/macros/s/deploy/exec"
SYNC_TOKEN = "s3cret"


# =============================================================================
# STORE / GATEWAY FIXTURES
# =============================================================================

@pytest.fixture
def store(tmp_path):
    """Empty JSON file store in a temp directory."""
    return JsonFileCandidateStore(path=tmp_path / "ospa_store.json")


@pytest.fixture
def sync_requests():
    """Requests received by the fake spreadsheet endpoint."""
    return []


@pytest.fixture
def make_gateway(sync_requests):
    """Factory for a gateway wired to the fake spreadsheet endpoint."""

    def _make(status_code=200, url=SYNC_URL, token=SYNC_TOKEN, connect_error=False):
        def handler(request):
            sync_requests.append(request)
            if connect_error:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(status_code, json={"result": "success"})

        return SheetsSyncGateway(url, token=token, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def gateway(make_gateway):
    return make_gateway()


@pytest.fixture
def service(store, gateway, tmp_path):
    return CandidateService(store, gateway, export_dir=tmp_path / "exports")


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture
def client(service):
    """TestClient whose candidate service uses the temp store and fake endpoint."""
    app.dependency_overrides[get_candidate_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# CANDIDATE FIXTURES
# =============================================================================

@pytest.fixture
def candidate():
    """
    Nominee with one National 1st individual contest (20), one Division 2nd
    group contest (6) and every interview dimension Commendable (10): 36.00.
    """
    c = Candidate(name="Maria Santos", school="Rizal High School", division="Pasig")
    c.add_instance("individual", Level.NATIONAL, rank=Rank.FIRST)
    c.add_instance("group", Level.DIVISION, rank=Rank.SECOND)
    for dimension in ("principles", "leadership", "experience", "growth", "communication"):
        c.set_interview(dimension, 2.0)
    return c


@pytest.fixture
def candidate_payload():
    """camelCase request body for the same 36.00 nominee."""
    return {
        "name": "Maria Santos",
        "school": "Rizal High School",
        "division": "Pasig",
        "level": "Secondary",
        "performanceRating": True,
        "achievements": {
            "individual": [{"level": "National", "rank": "1st"}],
            "group": [{"level": "Division", "rank": "2nd"}],
        },
        "interview": {
            "principles": 2.0,
            "leadership": 2.0,
            "experience": 2.0,
            "growth": 2.0,
            "communication": 2.0,
        },
    }
