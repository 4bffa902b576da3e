"""Tests for FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def nda_form() -> dict:
    """A complete one-way NDA form in wizard (camelCase) shape."""
    return {
        "category": "business_ops",
        "contractType": "nda_one_way",
        "creatorName": "ana lima",
        "counterpartyName": "acme co",
        "creatorCityState": "austin, tx",
        "projectDescription": "Unreleased product roadmaps",
        "endDateOrOngoing": "2 years",
    }


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns app info."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Clausecraft"
    assert data["status"] == "operational"


def test_health_check(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_list_contract_types(client: TestClient) -> None:
    """Test the template catalogue lists every category and template."""
    response = client.get("/api/v1/contracts/types")
    assert response.status_code == 200
    data = response.json()
    assert [entry["category"] for entry in data] == [
        "brand",
        "creator_collab",
        "service_provider",
        "rights_release",
        "business_ops",
        "community",
    ]
    templates = [template for entry in data for template in entry["templates"]]
    assert len(templates) == 22
    nda = next(t for t in templates if t["contract_type"] == "nda_mutual")
    assert nda["title"] == "MUTUAL NON-DISCLOSURE AGREEMENT"


def test_sanitize_endpoint(client: TestClient, nda_form: dict) -> None:
    """Test sanitize returns the cleaned form with camelCase keys."""
    response = client.post("/api/v1/contracts/sanitize", json=nda_form)
    assert response.status_code == 200
    data = response.json()
    assert data["creatorName"] == "Ana Lima"
    assert data["counterpartyName"] == "Acme Co"
    assert data["creatorCityState"] == "Austin, TX"
    assert data["governingLawRegion"] == "TX"


def test_sanitize_accepts_snake_case(client: TestClient) -> None:
    """Test field names are accepted in snake_case too."""
    response = client.post(
        "/api/v1/contracts/sanitize",
        json={"contract_type": "guest_release", "creator_name": "ben ortiz lol"},
    )
    assert response.status_code == 200
    assert response.json()["creatorName"] == "Ben Ortiz"


def test_validate_endpoint_reports_errors(client: TestClient) -> None:
    """Test validation errors and warnings come back as data."""
    response = client.post(
        "/api/v1/contracts/validate",
        json={"contractType": "nda_mutual", "creatorName": "Ana 🔥"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert "Counterparty name is required" in data["errors"]
    assert "NDA duration must be specified" in data["errors"]
    assert data["warnings"] == ["Creator name contains informal language. Please use professional terms."]


def test_validate_endpoint_valid(client: TestClient, nda_form: dict) -> None:
    """Test a complete form validates."""
    response = client.post("/api/v1/contracts/validate", json=nda_form)
    assert response.json() == {"valid": True, "errors": [], "warnings": []}


def test_generate_endpoint(client: TestClient, nda_form: dict) -> None:
    """Test generation returns the contract text and parsed sections."""
    response = client.post("/api/v1/contracts/generate", json=nda_form)
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "NON-DISCLOSURE AGREEMENT"
    assert data["contract"].startswith("NON-DISCLOSURE AGREEMENT\n\n1. ")
    assert "DISCLAIMER" in data["contract"]
    assert data["validation"]["valid"] is True
    assert data["sections"][0]["number"] == "1"
    assert data["sections"][-1]["title"] == "DISCLAIMER"
    assert data["form"]["creatorName"] == "Ana Lima"


def test_generate_does_not_block_on_errors(client: TestClient) -> None:
    """Test an incomplete form still produces a preview."""
    response = client.post("/api/v1/contracts/generate", json={"contractType": "service_editor"})
    assert response.status_code == 200
    data = response.json()
    assert data["validation"]["valid"] is False
    assert data["contract"].startswith("EDITOR SERVICE AGREEMENT")


def test_export_endpoint(client: TestClient, nda_form: dict) -> None:
    """Test export returns a downloadable text file."""
    response = client.post("/api/v1/contracts/export", json=nda_form)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="nda-one-way-')
    assert disposition.endswith('.txt"')
    assert "SIGNATURES" in response.text
    assert "Ana Lima" in response.text


def test_export_rejects_invalid_form(client: TestClient) -> None:
    """Test export is blocked when validation fails."""
    response = client.post("/api/v1/contracts/export", json={"contractType": "nda_one_way"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["message"] == "Contract form is incomplete"
    assert "Creator name is required" in detail["errors"]
