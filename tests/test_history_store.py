import pytest

from models.api_models import PersonaId, TurnRole
from personas import PERSONAS
from services.errors import UnknownPersonaError
from services.history_store import ConversationStore


def test_store_starts_empty_per_persona():
    store = ConversationStore(PERSONAS)
    assert store.lengths() == {"counseling": 0, "nutrition": 0}
    assert store.get("counseling") is store.get(PersonaId.COUNSELING)
    assert store.get(PersonaId.COUNSELING) is not store.get(PersonaId.NUTRITION)


def test_append_exchange_keeps_pairs_in_order():
    history = ConversationStore(PERSONAS).get(PersonaId.NUTRITION)
    history.append_exchange("q1", "a1")
    history.append_exchange("q2", "a2")

    assert [(t.role, t.text) for t in history] == [
        (TurnRole.USER, "q1"), (TurnRole.MODEL, "a1"),
        (TurnRole.USER, "q2"), (TurnRole.MODEL, "a2"),
    ]


def test_snapshot_is_detached_from_later_appends():
    history = ConversationStore(PERSONAS).get(PersonaId.COUNSELING)
    history.append_exchange("q1", "a1")
    snapshot = history.snapshot()
    history.append_exchange("q2", "a2")

    assert len(snapshot) == 2
    assert len(history) == 4


def test_turns_are_immutable():
    history = ConversationStore(PERSONAS).get(PersonaId.COUNSELING)
    history.append_exchange("q", "a")
    with pytest.raises(Exception):
        history.snapshot()[0].text = "changed"


def test_unknown_persona():
    with pytest.raises(UnknownPersonaError):
        ConversationStore(PERSONAS).get("yoga")
