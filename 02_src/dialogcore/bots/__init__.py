"""Sample bots hosted by the application."""

from .color_survey import COLORS, ColorSurveyDialog

__all__ = ["COLORS", "ColorSurveyDialog"]
