import asyncio
from typing import Dict, Iterable, Iterator, List, Tuple, Union

from models.api_models import ConversationTurn, PersonaId, TurnRole
from services.errors import UnknownPersonaError

class ConversationHistory:
    """Ordered, append-only log of turns for one persona.

    Turns are added in user/model pairs once a reply is complete, so at rest
    the log always holds whole exchanges. It is never truncated; it lives as
    long as the process.
    """

    def __init__(self, persona: PersonaId):
        self.persona = persona
        self.lock = asyncio.Lock()
        self._turns: List[ConversationTurn] = []

    def snapshot(self) -> Tuple[ConversationTurn, ...]:
        """Immutable copy of the current turns, in insertion order."""
        return tuple(self._turns)

    def append_exchange(self, user_text: str, reply_text: str) -> None:
        """Append a user turn followed by the model turn that answered it."""
        self._turns.extend((
            ConversationTurn(role=TurnRole.USER, text=user_text),
            ConversationTurn(role=TurnRole.MODEL, text=reply_text),
        ))

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"ConversationHistory(persona={self.persona.value!r}, turns={len(self._turns)})"

class ConversationStore:
    """Owns one ConversationHistory per persona for the application's lifetime."""

    def __init__(self, personas: Iterable[Union[PersonaId, str]]):
        self._histories: Dict[PersonaId, ConversationHistory] = {}
        for persona in personas:
            persona_id = PersonaId(persona)
            self._histories[persona_id] = ConversationHistory(persona_id)

    def get(self, persona: Union[PersonaId, str]) -> ConversationHistory:
        try:
            return self._histories[PersonaId(persona)]
        except (ValueError, KeyError):
            raise UnknownPersonaError(f"No history for persona: {persona}", persona=str(persona)) from None

    def lengths(self) -> Dict[str, int]:
        return {persona.value: len(history) for persona, history in self._histories.items()}
