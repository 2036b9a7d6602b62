"""Prompt dialogs."""

from .choice_prompt import ChoicePrompt
from .confirm_prompt import ConfirmPrompt
from .number_prompt import NumberPrompt, parse_number
from .prompt import Prompt, PromptValidator, PromptValidatorContext
from .text_prompt import TextPrompt

__all__ = [
    "ChoicePrompt",
    "ConfirmPrompt",
    "NumberPrompt",
    "Prompt",
    "PromptValidator",
    "PromptValidatorContext",
    "TextPrompt",
    "parse_number",
]
