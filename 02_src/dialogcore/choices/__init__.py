"""Choice rendering, recognition and culture models."""

from .culture import PromptCultureModel, PromptCultureModels
from .factory import ChoiceFactory, ChoiceFactoryOptions
from .recognizer import FindChoicesOptions, find_choices, recognize_choices, tokenize

__all__ = [
    "ChoiceFactory",
    "ChoiceFactoryOptions",
    "FindChoicesOptions",
    "PromptCultureModel",
    "PromptCultureModels",
    "find_choices",
    "recognize_choices",
    "tokenize",
]
