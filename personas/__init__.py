"""Static persona registry.

Each persona pairs an identifier with the system prompt its model binding is
created with. The set is fixed at import time and never changes.
"""
from typing import Dict, Union

from models.api_models import Persona, PersonaId
from services.errors import UnknownPersonaError

from .counseling import COUNSELING_PROMPT
from .nutrition import NUTRITION_PROMPT

PERSONAS: Dict[PersonaId, Persona] = {
    PersonaId.COUNSELING: Persona(identifier=PersonaId.COUNSELING, system_prompt=COUNSELING_PROMPT),
    PersonaId.NUTRITION: Persona(identifier=PersonaId.NUTRITION, system_prompt=NUTRITION_PROMPT),
}

def get_persona(identifier: Union[PersonaId, str]) -> Persona:
    """Look up a persona by enum member or raw string."""
    try:
        return PERSONAS[PersonaId(identifier)]
    except (ValueError, KeyError):
        raise UnknownPersonaError(f"Unknown persona: {identifier}", persona=str(identifier)) from None
