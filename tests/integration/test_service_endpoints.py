"""
Integration tests for the operational endpoints and request middleware.

Tests cover:
- /health and /ready (including an unreachable store)
- /metrics exposition
- /api-docs
- Correlation id propagation
"""

from api.src.middleware.request_logging import CORRELATION_HEADER


class TestHealth:
    """Tests for health and readiness."""

    def test_health(self, client, settings):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == settings.app_name

    def test_ready(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["checks"] == {"document_store": "healthy"}

    def test_not_ready_when_store_unreachable(self, client, mongo_client):
        mongo_client.reachable = False

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


class TestMetrics:
    """Tests for /metrics."""

    def test_metrics_exposes_request_counter(self, client):
        client.get("/api/composers")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "http_requests_total" in response.text
        assert 'endpoint="/api/composers"' in response.text


class TestDocs:
    """Tests for the interactive documentation."""

    def test_api_docs_served(self, client):
        assert client.get("/api-docs").status_code == 200

    def test_openapi_lists_routes(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        assert "/api/composers/{composer_id}" in paths
        assert "/api/customers/{username}/invoices" in paths
        assert "/api/teams/{team_id}/players" in paths
        assert "/api/login" in paths


class TestCorrelationId:
    """Tests for correlation id handling."""

    def test_echoes_supplied_id(self, client):
        response = client.get("/health", headers={CORRELATION_HEADER: "abc-123"})

        assert response.headers[CORRELATION_HEADER] == "abc-123"

    def test_generates_id(self, client):
        response = client.get("/health")

        assert response.headers[CORRELATION_HEADER]
