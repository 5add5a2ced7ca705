"""Execution of the network effects scheduled by the state machine.

`OperationRunner.run` is called off the UI thread. It always returns exactly
one result event, so the caller only has to post that event back onto the
UI message queue.
"""

import logging

from config_manager import ConfigManager
from .clients import AgentDirectoryClient, ChatClientError, MessageClient
from .events import AgentFound, AgentsListed, DiscoveryFailed, ReplyReceived, ResultEvent, SendFailed
from .machine import DiscoverAgents, SendMessage

logger = logging.getLogger(__name__)


class OperationRunner:
    """Runs DiscoverAgents and SendMessage effects against the agent API."""

    def __init__(self, directory: AgentDirectoryClient, messages: MessageClient):
        self.directory = directory
        self.messages = messages

    def run(self, effect: DiscoverAgents | SendMessage) -> ResultEvent:
        """Run one effect to completion.

        Args:
            effect: The network effect returned by the state machine

        Returns:
            The result event to feed back into the state machine

        Raises:
            TypeError: If effect is not a network effect
        """
        if isinstance(effect, DiscoverAgents):
            return self._discover()
        if isinstance(effect, SendMessage):
            return self._send(effect)
        raise TypeError(f"Not a network effect: {effect!r}")

    def _discover(self) -> ResultEvent:
        try:
            agents = self.directory.discover()
        except ChatClientError as e:
            return DiscoveryFailed(reason=str(e))
        if len(agents) == 1:
            return AgentFound(agent=agents[0])
        return AgentsListed(agents=agents)

    def _send(self, effect: SendMessage) -> ResultEvent:
        try:
            reply = self.messages.send(effect.agent_id, effect.text, effect.identity)
        except ChatClientError as e:
            return SendFailed(reason=str(e), text=effect.text)
        return ReplyReceived(text=reply)


def create_runner(config: ConfigManager, base_url: str | None = None) -> OperationRunner:
    """Build an OperationRunner from configuration.

    Args:
        config: Loaded configuration
        base_url: Optional override for the configured API base URL

    Returns:
        Runner with both clients pointed at the same service
    """
    url = base_url or config.get_base_url()
    timeout = config.get_timeout()
    logger.info("Using agent API at %s (timeout %.0fs)", url, timeout)
    return OperationRunner(
        directory=AgentDirectoryClient(url, timeout=timeout),
        messages=MessageClient(url, timeout=timeout, source=config.get_source()),
    )
