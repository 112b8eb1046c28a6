from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from enum import Enum

class PersonaId(str, Enum):
    COUNSELING = "counseling"
    NUTRITION = "nutrition"

class TurnRole(str, Enum):
    USER = "user"
    MODEL = "model"

# Request Models
class MessageRequest(BaseModel):
    """Request body for the persona endpoints."""
    message: Optional[Any] = Field(default=None, description="User's message to the persona")

    def text(self) -> Optional[str]:
        """Return the message if it is a non-empty string, otherwise None."""
        if isinstance(self.message, str) and self.message:
            return self.message
        return None

# Response Models
class ReplyResponse(BaseModel):
    """Response body carrying the model's full reply."""
    reply: str = Field(..., description="Concatenated model reply")

# Error Models
class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str = Field(..., description="Human-readable error message")

# Internal Models
class Persona(BaseModel):
    """A role identifier paired with its fixed system prompt."""
    model_config = ConfigDict(frozen=True)

    identifier: PersonaId = Field(..., description="Persona identifier")
    system_prompt: str = Field(..., description="Natural-language system instruction")

class ConversationTurn(BaseModel):
    """One user or model turn in a persona's history."""
    model_config = ConfigDict(frozen=True)

    role: TurnRole = Field(..., description="Who produced the text")
    text: str = Field(..., description="Turn text")

# Health Check Model
class HealthCheckResponse(BaseModel):
    """Health check response model."""
    status: str = Field(default="healthy", description="Service health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Health check timestamp")
    version: str = Field(..., description="API version")
    uptime: float = Field(..., description="Service uptime in seconds")
    history_lengths: Dict[str, int] = Field(default_factory=dict, description="Turns held per persona")
