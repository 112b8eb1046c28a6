from .api_models import (
    # Enums
    PersonaId,
    TurnRole,

    # Request Models
    MessageRequest,

    # Response Models
    ReplyResponse,
    HealthCheckResponse,

    # Error Models
    ErrorResponse,

    # Internal Models
    Persona,
    ConversationTurn,
)
