def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "OK"


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/does-not-exist")

    assert resp.status_code == 404
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "Route not found"
    assert body["path"] == "/api/does-not-exist"


def test_wrong_method_is_json_405(client):
    resp = client.patch("/api/menus")

    assert resp.status_code == 405
    assert resp.get_json()["success"] is False
