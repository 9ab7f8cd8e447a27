import pytest
from fastapi.testclient import TestClient

from jobboard.dependencies import get_database
from jobboard.main import create_app


class FakeMongo:
    def __init__(self, healthy):
        self.healthy = healthy

    async def ping(self):
        return self.healthy


@pytest.mark.parametrize(
    "healthy,status,database",
    [(True, "healthy", "healthy"), (False, "degraded", "unavailable")],
)
def test_health_reports_database_state(healthy, status, database):
    app = create_app()
    app.dependency_overrides[get_database] = lambda: FakeMongo(healthy)

    response = TestClient(app).get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == status
    assert body["services"] == {"database": database}
    assert body["version"] == "1.0.0"
