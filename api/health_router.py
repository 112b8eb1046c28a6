import time
from fastapi import APIRouter, Depends
from models.api_models import HealthCheckResponse
from services.history_store import ConversationStore
from dependencies import get_conversation_store
from config.settings import settings

router = APIRouter()

# Global variable for tracking uptime
app_start_time = time.time()

@router.get("/health", response_model=HealthCheckResponse)
async def health_check(store: ConversationStore = Depends(get_conversation_store)):
    """Health check endpoint."""
    return HealthCheckResponse(
        version=settings.version,
        uptime=time.time() - app_start_time,
        history_lengths=store.lengths()
    )
