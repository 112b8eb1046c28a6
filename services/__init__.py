from .errors import (
    PocketCareError,
    ConfigurationError,
    UnknownPersonaError,
    InvalidMessageError,
    ModelProviderError,
    EmptyReplyError,
)
from .history_store import ConversationHistory, ConversationStore
from .model_service import (
    ModelBinding,
    ModelProvider,
    GeminiBinding,
    GeminiProvider,
    ModelSessionManager,
)
