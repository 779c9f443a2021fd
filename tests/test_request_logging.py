"""Request logging middleware tests."""

import logging

from fastapi.testclient import TestClient


LOGGER_NAME = "user_directory_api.app.core.middleware"


def _messages(caplog) -> list:
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


def test_logs_incoming_request_before_response(client: TestClient, caplog) -> None:
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        client.get("/users")

    assert _messages(caplog) == [
        "Incoming Request: GET /users",
        "Response Sent: GET /users -> Status 200",
    ]


def test_logs_status_set_by_error_handler(client: TestClient, caplog) -> None:
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        client.delete("/users/99")

    assert _messages(caplog)[-1] == "Response Sent: DELETE /users/99 -> Status 404"


def test_logs_query_string(client: TestClient, caplog) -> None:
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        client.get("/users?verbose=1")

    assert _messages(caplog)[0] == "Incoming Request: GET /users?verbose=1"


def test_logs_created_status(client: TestClient, caplog) -> None:
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        response = client.post("/users", json={"firstName": "X", "lastName": "Y", "hobby": "Z"})

    assert response.status_code == 201
    assert _messages(caplog)[-1] == "Response Sent: POST /users -> Status 201"


def test_logs_500_for_unhandled_exception(app, caplog) -> None:
    async def explode() -> None:
        raise RuntimeError("boom")

    app.add_api_route("/explode", explode)
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        client.get("/explode")

    assert _messages(caplog) == [
        "Incoming Request: GET /explode",
        "Response Sent: GET /explode -> Status 500",
    ]


def test_logging_does_not_alter_response(client: TestClient) -> None:
    response = client.get("/users/1")

    assert response.status_code == 200
    assert response.json()["firstName"] == "Anshika"
