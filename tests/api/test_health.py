def test_health_check(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_correlation_id_echoed(client):
    response = client.get("/api/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_generated(client):
    response = client.get("/api/health")
    assert response.headers["X-Correlation-ID"]
