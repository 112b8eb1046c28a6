from .prompt import NUTRITION_PROMPT
