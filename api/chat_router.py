from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from models.api_models import MessageRequest, PersonaId, ReplyResponse, ErrorResponse
from services.errors import InvalidMessageError
from services.history_store import ConversationStore
from services.model_service import ModelSessionManager
from dependencies import get_conversation_store, get_model_service

router = APIRouter()
logger = structlog.get_logger(__name__)

MESSAGE_REQUIRED = "Message is required"
INTERNAL_ERROR = "Internal server error"

_responses = {
    400: {"model": ErrorResponse, "description": "Message missing or empty"},
    500: {"model": ErrorResponse, "description": "Model or network failure"},
}

@router.post("/counseling",
             response_model=ReplyResponse,
             responses=_responses,
             summary="Talk to the counseling persona",
             description="Mental health support with a running conversation context")
async def counseling(
    request: MessageRequest,
    store: ConversationStore = Depends(get_conversation_store),
    model_service: ModelSessionManager = Depends(get_model_service)
):
    """
    POST /counseling

    Request Body:
    {
        "message": "I feel anxious today"
    }

    Response:
    {
        "reply": "I'm sorry you're feeling anxious..."
    }
    """
    return await _handle(PersonaId.COUNSELING, request, store, model_service)

@router.post("/nutrition",
             response_model=ReplyResponse,
             responses=_responses,
             summary="Talk to the nutrition persona",
             description="Personalized meal planning with a running conversation context")
async def nutrition(
    request: MessageRequest,
    store: ConversationStore = Depends(get_conversation_store),
    model_service: ModelSessionManager = Depends(get_model_service)
):
    """POST /nutrition, same contract as /counseling."""
    return await _handle(PersonaId.NUTRITION, request, store, model_service)

# =====================================================
# HELPER FUNCTIONS
# =====================================================

async def _handle(
    persona: PersonaId,
    request: MessageRequest,
    store: ConversationStore,
    model_service: ModelSessionManager
) -> ReplyResponse:
    """Validate the message, run the persona's model call and wrap the reply."""
    message = request.text()
    if message is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MESSAGE_REQUIRED)

    history = store.get(persona)
    try:
        reply = await model_service.respond(persona, message, history)
    except InvalidMessageError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MESSAGE_REQUIRED)
    except Exception as e:
        logger.error("Failed to get persona reply",
                     persona=persona.value,
                     error=str(e),
                     exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR
        )

    return ReplyResponse(reply=reply)
