from .prompt import COUNSELING_PROMPT
