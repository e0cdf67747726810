from unittest.mock import patch

import pytest

from modules.core import views


class TestHealthCheck:
    def test_healthy(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert set(data["services"]) == {"database", "cache"}

    @pytest.mark.parametrize("service", ["database", "cache"])
    def test_reports_each_probe(self, client, service):
        probe = client.get("/health").json()["services"][service]
        assert probe["status"] == "up"
        assert "response_time_ms" in probe

    def test_no_authentication_required(self, api_client):
        assert api_client.get("/health").status_code == 200

    def test_failed_probe_returns_503(self, client):
        def _down():
            raise ConnectionError("cache unreachable")

        with patch.dict(views.PROBES, {"cache": _down}):
            response = client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["cache"] == {"status": "down"}
        assert data["services"]["database"]["status"] == "up"
