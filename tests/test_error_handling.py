"""Error envelope tests for failures outside the user handlers."""

import logging

from fastapi.testclient import TestClient


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": {"status": 404, "message": "Not Found"}}


def test_wrong_method_uses_error_envelope(client: TestClient) -> None:
    response = client.patch("/users/1", json={"hobby": "Dancing"})

    assert response.status_code == 405
    assert response.json() == {"error": {"status": 405, "message": "Method Not Allowed"}}


def test_malformed_json_returns_400(client: TestClient) -> None:
    response = client.post(
        "/users",
        content=b'{"firstName": "X",',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["status"] == 400
    assert body["error"]["message"].startswith("Invalid request body")


def test_unexpected_exception_returns_500(app, caplog) -> None:
    async def explode() -> None:
        raise RuntimeError("boom")

    app.add_api_route("/explode", explode)
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="user_directory_api.app.core.errors"):
        response = client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {"error": {"status": 500, "message": "Internal Server Error"}}
    records = [r for r in caplog.records if r.name == "user_directory_api.app.core.errors"]
    assert records and records[0].exc_info is not None


def test_client_errors_are_logged_with_trace(client: TestClient, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="user_directory_api.app.core.errors"):
        client.get("/users/99")

    warnings = [r for r in caplog.records if r.name == "user_directory_api.app.core.errors"]
    assert len(warnings) == 1
    assert warnings[0].levelno == logging.WARNING
    assert warnings[0].exc_info is not None
