"""Response schemas for the agent API using Pydantic models."""

from typing import Optional
from pydantic import BaseModel, Field


class AgentRecord(BaseModel):
    """One agent entry from GET /agents."""
    id: str = Field(..., description="Stable agent identifier")
    name: str = Field(..., description="Display name")
    status: str = Field(..., description="Lifecycle status, e.g. 'active'")


class AgentsData(BaseModel):
    agents: list[AgentRecord] = Field(default_factory=list)


class AgentsResponse(BaseModel):
    """Body of GET /agents."""
    success: bool = False
    data: AgentsData


class ReplyMessage(BaseModel):
    text: str


class MessageData(BaseModel):
    message: ReplyMessage
    messageId: Optional[str] = None
    name: Optional[str] = None
    roomId: Optional[str] = None
    source: Optional[str] = None


class MessageResponse(BaseModel):
    """Body of POST /agents/<id>/message."""
    success: bool = False
    data: MessageData
