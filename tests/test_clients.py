"""Tests for the agent directory and message exchange clients.

Requests go through httpx.MockTransport; nothing touches the network.
"""

import json

import httpx
import pytest

from cowchat.clients import (
    AgentDirectoryClient,
    DecodeError,
    MessageClient,
    NoActiveAgents,
    ProtocolError,
    TransportError,
)
from cowchat.state import AgentInfo

BASE_URL = "http://agents.test/api"


def refusing_transport():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.MockTransport(handler)


def corrupt_gzip_transport(status_code=200):
    """Claims a gzip body but sends bytes that do not decompress."""
    def handler(request):
        return httpx.Response(status_code, headers={"content-encoding": "gzip"}, content=b"not gzip at all")
    return httpx.MockTransport(handler)


class TestAgentDirectoryClient:

    def test_requests_agents_endpoint(self, recording_transport, agents_payload):
        transport = recording_transport(json_body=agents_payload(("a1", "Aria", "active")))
        AgentDirectoryClient(BASE_URL + "/", transport=transport).discover()
        request = transport.requests[0]
        assert request.method == "GET"
        assert str(request.url) == f"{BASE_URL}/agents"

    def test_single_active_agent(self, recording_transport, agents_payload):
        """Exactly one active agent among several is returned alone."""
        transport = recording_transport(json_body=agents_payload(
            ("a1", "Aria", "active"), ("a2", "Bo", "inactive"),
        ))
        agents = AgentDirectoryClient(BASE_URL, transport=transport).discover()
        assert agents == (AgentInfo("a1", "Aria", "active"),)

    def test_several_active_agents_keep_order(self, recording_transport, agents_payload):
        transport = recording_transport(json_body=agents_payload(
            ("a2", "Bo", "active"), ("a3", "Cy", "stopped"), ("a1", "Aria", "active"),
        ))
        agents = AgentDirectoryClient(BASE_URL, transport=transport).discover()
        assert [a.id for a in agents] == ["a2", "a1"]

    def test_status_match_is_exact(self, recording_transport, agents_payload):
        """'Active' and 'active ' are not active."""
        transport = recording_transport(json_body=agents_payload(
            ("a1", "Aria", "Active"), ("a2", "Bo", "active "),
        ))
        with pytest.raises(NoActiveAgents, match="no active agents found"):
            AgentDirectoryClient(BASE_URL, transport=transport).discover()

    def test_empty_listing(self, recording_transport, agents_payload):
        transport = recording_transport(json_body=agents_payload())
        with pytest.raises(NoActiveAgents):
            AgentDirectoryClient(BASE_URL, transport=transport).discover()

    def test_list_agents_keeps_inactive(self, recording_transport, agents_payload):
        transport = recording_transport(json_body=agents_payload(
            ("a1", "Aria", "active"), ("a2", "Bo", "inactive"),
        ))
        agents = AgentDirectoryClient(BASE_URL, transport=transport).list_agents()
        assert len(agents) == 2

    def test_bad_status(self, recording_transport):
        transport = recording_transport(status_code=503, text="down")
        with pytest.raises(ProtocolError, match="API returned status 503") as excinfo:
            AgentDirectoryClient(BASE_URL, transport=transport).discover()
        assert excinfo.value.status_code == 503

    @pytest.mark.parametrize("body", [
        "not json",
        json.dumps({"success": True}),
        json.dumps({"data": {"agents": [{"id": "a1"}]}}),
    ])
    def test_malformed_body(self, recording_transport, body):
        transport = recording_transport(text=body)
        with pytest.raises(DecodeError, match="failed to decode response"):
            AgentDirectoryClient(BASE_URL, transport=transport).discover()

    def test_transport_error(self):
        client = AgentDirectoryClient(BASE_URL, transport=refusing_transport())
        with pytest.raises(TransportError, match="failed to connect to agent API"):
            client.discover()

    def test_corrupt_content_encoding(self):
        client = AgentDirectoryClient(BASE_URL, transport=corrupt_gzip_transport())
        with pytest.raises(DecodeError, match="failed to decode response"):
            client.discover()


class TestMessageClient:

    @pytest.fixture
    def reply_body(self):
        return {
            "success": True,
            "data": {
                "message": {"text": "Hello, human."},
                "messageId": "m-1",
                "name": "Aria",
                "roomId": "r-1",
                "source": "agent",
            },
        }

    def test_send_returns_reply(self, recording_transport, reply_body, identity):
        transport = recording_transport(status_code=201, json_body=reply_body)
        client = MessageClient(BASE_URL, transport=transport)
        assert client.send("a1", "hi", identity) == "Hello, human."

    def test_request_shape(self, recording_transport, reply_body, identity):
        """POST to the agent's message endpoint with the session identity."""
        transport = recording_transport(status_code=201, json_body=reply_body)
        MessageClient(BASE_URL, source="cowui", transport=transport).send("a1", "hi there", identity)
        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/agents/a1/message"
        assert json.loads(request.content) == {
            "text": "hi there",
            "senderId": "user-1234",
            "source": "cowui",
            "entityId": "user-1234",
            "userName": "Tester",
        }

    def test_room_id_included_when_set(self, identity):
        body = MessageClient(BASE_URL, room_id="room-9").build_body("x", identity)
        assert body["roomId"] == "room-9"

    def test_room_id_omitted_by_default(self, identity):
        assert "roomId" not in MessageClient(BASE_URL).build_body("x", identity)

    def test_status_200_is_failure(self, recording_transport, reply_body, identity):
        """Only 201 Created counts as success."""
        transport = recording_transport(status_code=200, json_body=reply_body)
        with pytest.raises(ProtocolError):
            MessageClient(BASE_URL, transport=transport).send("a1", "hi", identity)

    def test_error_keeps_raw_body(self, recording_transport, identity):
        transport = recording_transport(status_code=500, text="boom")
        with pytest.raises(ProtocolError) as excinfo:
            MessageClient(BASE_URL, transport=transport).send("a1", "hi", identity)
        assert excinfo.value.body == "boom"
        assert excinfo.value.status_code == 500
        assert str(excinfo.value) == "API error (status 500): boom"

    def test_malformed_reply(self, recording_transport, identity):
        transport = recording_transport(status_code=201, json_body={"success": True, "data": {}})
        with pytest.raises(DecodeError):
            MessageClient(BASE_URL, transport=transport).send("a1", "hi", identity)

    def test_timeout_is_transport_error(self, identity):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)
        client = MessageClient(BASE_URL, transport=httpx.MockTransport(handler))
        with pytest.raises(TransportError):
            client.send("a1", "hi", identity)

    def test_corrupt_content_encoding(self, identity):
        client = MessageClient(BASE_URL, transport=corrupt_gzip_transport(status_code=201))
        with pytest.raises(DecodeError, match="failed to decode response"):
            client.send("a1", "hi", identity)
