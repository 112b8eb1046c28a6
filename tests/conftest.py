import asyncio
from typing import Dict, List, Optional, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app
from models.api_models import ConversationTurn, Persona, PersonaId
from services.model_service import ModelBinding, ModelProvider


class FakeBinding(ModelBinding):
    """Yields canned fragments and records the context of every call."""

    def __init__(self, persona: Persona, provider: "FakeProvider"):
        super().__init__(persona)
        self.provider = provider
        self.calls: List[Tuple[List[ConversationTurn], str]] = []

    async def stream(self, history: Sequence[ConversationTurn], message: str):
        self.calls.append((list(history), message))
        self.provider.started.append(message)
        gate = self.provider.gates.get(message)
        if gate is not None:
            await gate.wait()
        if self.provider.error is not None:
            raise self.provider.error
        for fragment in self.provider.fragments_for(self.persona.identifier, message):
            yield fragment
        if self.provider.midstream_error is not None:
            raise self.provider.midstream_error


class FakeProvider(ModelProvider):
    def __init__(self, fragments: Optional[List[str]] = None):
        self.fragments = fragments
        self.error: Optional[Exception] = None
        self.midstream_error: Optional[Exception] = None
        self.gates: Dict[str, asyncio.Event] = {}
        self.started: List[str] = []
        self.bindings: Dict[PersonaId, FakeBinding] = {}

    def fragments_for(self, persona: PersonaId, message: str) -> List[str]:
        if self.fragments is not None:
            return self.fragments
        return [f"[{persona.value}] ", "reply to: ", message]

    def bind(self, persona: Persona) -> FakeBinding:
        binding = FakeBinding(persona, self)
        self.bindings[persona.identifier] = binding
        return binding


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def app(provider):
    return create_app(Settings(google_api_key="test-key"), provider=provider)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def store(app):
    return app.state.conversation_store
