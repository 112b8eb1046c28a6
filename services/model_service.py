from abc import ABC, abstractmethod
from contextlib import AsyncExitStack
from typing import AsyncIterator, Dict, Iterable, Sequence

import structlog
from google import genai
from google.genai import types

from models.api_models import ConversationTurn, Persona, PersonaId
from services.errors import (
    ConfigurationError,
    EmptyReplyError,
    InvalidMessageError,
    ModelProviderError,
    UnknownPersonaError,
)
from services.history_store import ConversationHistory

logger = structlog.get_logger(__name__)

class ModelBinding(ABC):
    """A persona bound to an externally configured model instance."""

    def __init__(self, persona: Persona):
        self.persona = persona

    @abstractmethod
    def stream(self, history: Sequence[ConversationTurn], message: str) -> AsyncIterator[str]:
        """Send ``message`` with ``history`` as prior context and yield reply fragments.

        Each call starts a fresh request; a partially consumed stream cannot be
        resumed.
        """

class ModelProvider(ABC):
    """Creates model bindings for personas."""

    @abstractmethod
    def bind(self, persona: Persona) -> ModelBinding:
        ...

class GeminiBinding(ModelBinding):
    """Gemini model pre-configured with the persona's system instruction."""

    def __init__(self, client: genai.Client, model: str, persona: Persona):
        super().__init__(persona)
        self.client = client
        self.model = model
        self.config = types.GenerateContentConfig(system_instruction=persona.system_prompt)

    async def stream(self, history: Sequence[ConversationTurn], message: str) -> AsyncIterator[str]:
        chat = self.client.aio.chats.create(
            model=self.model,
            config=self.config,
            history=[_to_content(turn) for turn in history],
        )
        async for chunk in await chat.send_message_stream(message):
            # Chunks carrying only metadata have no text
            if chunk.text:
                yield chunk.text

class GeminiProvider(ModelProvider):
    """Model provider backed by the Google GenAI SDK."""

    def __init__(self, api_key: str, model: str):
        if not api_key:
            raise ConfigurationError("GOOGLE_API_KEY not found in environment variables")
        self.client = genai.Client(api_key=api_key)
        self.model = model

    def bind(self, persona: Persona) -> ModelBinding:
        return GeminiBinding(self.client, self.model, persona)

def _to_content(turn: ConversationTurn) -> types.Content:
    return types.Content(role=turn.role.value, parts=[types.Part(text=turn.text)])

class ModelSessionManager:
    """Runs persona model calls against their shared conversation histories.

    One binding per persona is created up front and kept for the manager's
    lifetime. With ``serialize`` enabled, at most one model call per persona
    is in flight at a time, so exchanges land in the history in arrival
    order. Without it, overlapping calls see the same prior history and
    their exchanges are appended in completion order.

    Provider calls have no timeout, so with ``serialize`` enabled a hung call
    blocks every later request to the same persona.
    """

    def __init__(self, provider: ModelProvider, personas: Iterable[Persona], serialize: bool = True):
        self.provider = provider
        self.serialize = serialize
        self.logger = logger.bind(service="model_session")
        self.bindings: Dict[PersonaId, ModelBinding] = {}
        for persona in personas:
            self.bindings[persona.identifier] = provider.bind(persona)
        self.logger.info(
            "Model bindings created",
            personas=[p.value for p in self.bindings],
            serialize=serialize
        )

    def binding_for(self, persona: PersonaId) -> ModelBinding:
        try:
            return self.bindings[PersonaId(persona)]
        except (ValueError, KeyError):
            raise UnknownPersonaError(f"No model binding for persona: {persona}", persona=str(persona)) from None

    async def respond(self, persona: PersonaId, user_message: str, history: ConversationHistory) -> str:
        """Get the full reply to ``user_message`` and record the exchange in ``history``.

        The history is only touched after the fragment stream has been
        consumed to the end, so a failed call leaves it as it was.

        Raises:
            InvalidMessageError: the message is empty or not a string.
            ModelProviderError: the provider call failed or produced no text.
        """
        if not isinstance(user_message, str) or not user_message:
            raise InvalidMessageError("Message is required")

        binding = self.binding_for(persona)
        async with AsyncExitStack() as stack:
            if self.serialize:
                await stack.enter_async_context(history.lock)

            prior = history.snapshot()
            reply = await self._collect(binding, prior, user_message)
            history.append_exchange(user_message, reply)

        self.logger.info(
            "Reply produced",
            persona=binding.persona.identifier.value,
            message_length=len(user_message),
            reply_length=len(reply),
            history_length=len(history)
        )
        return reply

    async def _collect(self, binding: ModelBinding, prior: Sequence[ConversationTurn], user_message: str) -> str:
        """Consume the whole fragment stream and join it in arrival order."""
        fragments = []
        try:
            async for fragment in binding.stream(prior, user_message):
                fragments.append(fragment)
        except Exception as e:
            raise ModelProviderError(
                "Model call failed",
                persona=binding.persona.identifier.value,
                cause=str(e)
            ) from e

        reply = "".join(fragments)
        if not reply:
            raise EmptyReplyError("Model returned an empty reply", persona=binding.persona.identifier.value)

        self.logger.debug(
            "Fragment stream consumed",
            persona=binding.persona.identifier.value,
            fragments=len(fragments)
        )
        return reply
