import pytest
from fastapi.testclient import TestClient

from jobboard.dependencies import get_company_service
from jobboard.domain.companies.entities import Company
from jobboard.domain.companies.services import CompanyDomainService
from jobboard.main import create_app

from conftest import FakeCompanyRepository


@pytest.fixture
def app():
    repository = FakeCompanyRepository(
        [Company(id="c1", company_name="Acme"), Company(id="c2", company_name="Globex")]
    )
    app = create_app()
    app.dependency_overrides[get_company_service] = lambda: CompanyDomainService(repository)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def test_list_companies(client):
    response = client.get("/api/v1/companies", params={"limit": "1"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert [c["companyName"] for c in data["companies"]] == ["Acme"]
    assert data["pagination"]["totalCompanies"] == 2
    assert data["pagination"]["hasNextPage"] is True


def test_company_detail_and_missing(client):
    assert client.get("/api/v1/companies/c2").json()["data"]["companyName"] == "Globex"

    missing = client.get("/api/v1/companies/nope")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "RES_1207"


def test_search_companies(client):
    response = client.get("/api/v1/companies/search", params={"q": "ac"})

    assert response.status_code == 200
    assert isinstance(response.json()["data"], list)


def test_company_by_name_prefers_exact_match(client):
    response = client.get("/api/v1/companies/by-name", params={"name": "globex"})

    assert response.status_code == 200
    assert response.json()["data"]["_id"] == "c2"


def test_company_by_name_falls_back_to_partial_match(client):
    response = client.get("/api/v1/companies/by-name", params={"name": "cm"})

    assert response.json()["data"]["companyName"] == "Acme"


def test_company_by_name_requires_name_and_reports_misses(client):
    missing_name = client.get("/api/v1/companies/by-name")
    assert missing_name.status_code == 400
    assert missing_name.json()["error"]["code"] == "VAL_1101"

    unknown = client.get("/api/v1/companies/by-name", params={"name": "Initech"})
    assert unknown.status_code == 404
    assert unknown.json()["error"]["code"] == "RES_1207"
