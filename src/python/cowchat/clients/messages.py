"""Message exchange client: POST <base>/agents/<id>/message."""

import logging
from typing import Optional

import httpx

from custom_types import MessageRequestBody
from ..state import SessionIdentity
from .base import AgentApiClient
from .errors import ProtocolError
from .schemas import MessageResponse

logger = logging.getLogger(__name__)


class MessageClient(AgentApiClient):
    """Sends one utterance to an agent and returns its reply."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        source: str = "cowui",
        room_id: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the message client.

        Args:
            base_url: API root, e.g. http://localhost:3000/api
            timeout: HTTP timeout in seconds
            source: Literal identifying this client in every request
            room_id: Optional room to post into; omitted from the body when None
            transport: Optional transport override
        """
        super().__init__(base_url, timeout, transport)
        self.source = source
        self.room_id = room_id

    def build_body(self, text: str, identity: SessionIdentity) -> MessageRequestBody:
        body: MessageRequestBody = {
            "text": text,
            "senderId": identity.user_id,
            "source": self.source,
            "entityId": identity.user_id,
            "userName": identity.user_name,
        }
        if self.room_id:
            body["roomId"] = self.room_id
        return body

    def send(self, agent_id: str, text: str, identity: SessionIdentity) -> str:
        """Send a message and return the agent's reply text.

        No retry: a failure is reported once and the user resubmits.

        Args:
            agent_id: Target agent
            text: Utterance to send
            identity: Session identity of the sender

        Returns:
            The reply text

        Raises:
            TransportError: If the service cannot be reached
            ProtocolError: If the status is not 201; carries the raw body
            DecodeError: If the body is not a message response
        """
        response = self._request(
            "POST",
            f"/agents/{agent_id}/message",
            json=self.build_body(text, identity),
        )
        if response.status_code != 201:
            body = response.text
            raise ProtocolError(
                f"API error (status {response.status_code}): {body}",
                status_code=response.status_code,
                body=body,
            )
        reply = self._decode(response, MessageResponse)
        logger.debug("Reply from %s (%s): %d chars", reply.data.name or agent_id,
                     reply.data.messageId, len(reply.data.message.text))
        return reply.data.message.text
