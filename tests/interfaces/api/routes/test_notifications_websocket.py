"""Realtime notification feed over the websocket endpoint."""

from __future__ import annotations

import pytest
from starlette.websockets import WebSocketDisconnect

from learnsmart.application.use_cases.notifications import fan_out_queue
from learnsmart.interfaces.api.routes.auth import issue_token

SCOPE = {"course": "BTech", "branch": "CSE", "semester": "1"}


def _create_note(client, headers, title="Sets"):
    response = client.post(
        "/notes/", json={"title": title, "content": "", **SCOPE}, headers=headers
    )
    assert response.status_code == 201
    fan_out_queue.drain()


def test_socket_requires_a_valid_token(client) -> None:
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/notifications/ws") as websocket:
            websocket.receive_json()
    assert exc_info.value.code == 1008

    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/notifications/ws?token=junk") as websocket:
            websocket.receive_json()


def test_socket_sends_unread_on_connect(client, main_admin, make_user, auth_headers) -> None:
    student = make_user("student@example.com")
    _create_note(client, auth_headers(main_admin))

    with client.websocket_connect(f"/notifications/ws?token={issue_token(student)}") as websocket:
        message = websocket.receive_json()
        assert message["type"] == "init"
        assert [item["title"] for item in message["data"]] == ["New Study Material Available"]

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        websocket.send_json({"type": "ack", "ids": [message["data"][0]["id"]]})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    count = client.get("/notifications/unread-count", headers=auth_headers(student))
    assert count.json() == {"count": 0}


def test_socket_receives_new_notifications(client, main_admin, make_user, auth_headers) -> None:
    student = make_user("student@example.com")

    with client.websocket_connect(f"/notifications/ws?token={issue_token(student)}") as websocket:
        assert websocket.receive_json() == {"type": "init", "data": []}

        _create_note(client, auth_headers(main_admin), title="Graphs")

        message = websocket.receive_json()
        assert message["type"] == "notification"
        assert message["data"]["user_id"] == student.id
        assert message["data"]["content"] == (
            'A new note "Graphs" has been added for BTech - CSE (1 Semester)'
        )
        assert message["data"]["read"] is False
