"""Agent directory client: GET <base>/agents."""

import logging

from enums import AgentStatus
from ..state import AgentInfo
from .base import AgentApiClient
from .errors import NoActiveAgents, ProtocolError
from .schemas import AgentsResponse

logger = logging.getLogger(__name__)


class AgentDirectoryClient(AgentApiClient):
    """Looks up the agents known to the remote service."""

    def list_agents(self) -> list[AgentInfo]:
        """Fetch every agent the service reports, whatever its status.

        Raises:
            TransportError: If the service cannot be reached
            ProtocolError: If the status code is not 200
            DecodeError: If the body is not an agents listing
        """
        response = self._request("GET", "/agents")
        if response.status_code != 200:
            raise ProtocolError(
                f"API returned status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        listing = self._decode(response, AgentsResponse)
        return [AgentInfo(id=a.id, name=a.name, status=a.status) for a in listing.data.agents]

    def discover(self) -> tuple[AgentInfo, ...]:
        """Fetch the active agents, in the order the service lists them.

        A single-element result means the lone active agent should be used
        directly; anything longer is a candidate list for the user.

        Raises:
            NoActiveAgents: If no agent has status exactly "active"
            TransportError, ProtocolError, DecodeError: As for list_agents
        """
        agents = self.list_agents()
        active = tuple(a for a in agents if a.status == AgentStatus.ACTIVE)
        logger.info("Directory listed %d agents, %d active", len(agents), len(active))
        if not active:
            raise NoActiveAgents()
        return active
