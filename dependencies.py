from fastapi import HTTPException, Request, status
import structlog

from services.history_store import ConversationStore
from services.model_service import ModelSessionManager

logger = structlog.get_logger(__name__)

# Application-owned state, created at startup and shared by all requests
def get_conversation_store(request: Request) -> ConversationStore:
    """Get the per-persona conversation store."""
    return request.app.state.conversation_store

def get_model_service(request: Request) -> ModelSessionManager:
    """Get the model session manager."""
    manager = getattr(request.app.state, "model_service", None)
    if manager is None:
        logger.error("Model service requested before startup completed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )
    return manager
