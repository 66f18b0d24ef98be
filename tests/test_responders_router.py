"""Tests for the responders router."""


def test_list_responders(client, setup_canned_responder, setup_http_responder):
    response = client.get("/responders")
    assert response.status_code == 200
    data = response.json()
    assert [r["name"] for r in data] == ["default", "qwen"]
    assert data[0] == {
        "id": str(setup_canned_responder.id),
        "name": "default",
        "kind": "none",
    }
    assert "endpoint_url" not in data[1]


def test_list_responders_empty(client):
    assert client.get("/responders").json() == []


def test_list_responders_requires_auth(anonymous_client):
    assert anonymous_client.get("/responders").status_code == 401
