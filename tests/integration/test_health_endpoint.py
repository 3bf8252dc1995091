def test_health_check(client):
    response = client.get("/-/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "laravel-build"
    assert "version" in body


def test_health_is_not_a_project_name(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert "laravel new health" in response.text
