def test_security_headers(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.headers.get("X-Frame-Options") == "DENY"
    assert response.headers.get("X-Content-Type-Options") == "nosniff"
    assert response.headers.get("Cache-Control") == "no-store"


def test_route_headers_win(client):
    response = client.get("/api/v1/categories/")
    assert response.headers.get("Cache-Control") == "public, max-age=3600"
    assert response.headers.get("Referrer-Policy") == "no-referrer"
