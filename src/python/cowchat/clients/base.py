"""Shared HTTP plumbing for the agent API clients."""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import DecodeError, TransportError

# Remove logging we otherwise get by default
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AgentApiClient:
    """Base client for the agent API.

    Holds configuration only. A fresh httpx.Client is opened per request, so
    instances can be shared across worker threads.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. http://localhost:3000/api
            timeout: HTTP timeout in seconds
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, **kwargs)
        except httpx.DecodingError as e:
            # Body arrived but its content encoding is corrupt
            raise DecodeError(f"failed to decode response: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"failed to connect to agent API: {e}") from e
        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    @staticmethod
    def _decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"failed to decode response: {e}") from e
