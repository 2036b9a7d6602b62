"""Rendering of choice lists into outbound messages."""

from dataclasses import dataclass

from ..models import Activity, Choice, InputHints, ListStyle
from .culture import PromptCultureModels

# Above these limits AUTO style switches from inline to a numbered list.
MAX_INLINE_TITLE_LENGTH = 20
MAX_INLINE_CHOICES = 3


@dataclass
class ChoiceFactoryOptions:
    """Connectors used for inline rendering."""

    inline_separator: str = ", "
    inline_or: str = " or "
    inline_or_more: str = ", or "
    include_numbers: bool = True

    @classmethod
    def for_locale(cls, locale: str | None) -> "ChoiceFactoryOptions":
        culture = PromptCultureModels.get_culture(locale)
        return cls(
            inline_separator=culture.separator,
            inline_or=culture.inline_or,
            inline_or_more=culture.inline_or_more,
            include_numbers=True,
        )


class ChoiceFactory:
    """Builds message activities that present a set of choices."""

    @staticmethod
    def to_choices(choices: list[Choice | str] | None) -> list[Choice]:
        return [
            Choice(value=c) if isinstance(c, str) else c for c in choices or []
        ]

    @staticmethod
    def inline(
        choices: list[Choice | str],
        text: str | None = None,
        speak: str | None = None,
        options: ChoiceFactoryOptions | None = None,
    ) -> Activity:
        """Render choices on one line: ``text (1) a, (2) b, or (3) c``."""
        choices = ChoiceFactory.to_choices(choices)
        opt = options or ChoiceFactoryOptions()

        parts = []
        count = len(choices)
        for index, choice in enumerate(choices):
            title = choice.display_title
            label = f"({index + 1}) {title}" if opt.include_numbers else title
            if index == 0:
                connector = ""
            elif index == count - 1:
                connector = opt.inline_or if count == 2 else opt.inline_or_more
            else:
                connector = opt.inline_separator
            parts.append(connector + label)

        body = "".join(parts)
        txt = f"{text} {body}" if text else body
        return Activity.message(txt, speak=speak, input_hint=InputHints.EXPECTING_INPUT)

    @staticmethod
    def list_style(
        choices: list[Choice | str],
        text: str | None = None,
        speak: str | None = None,
        options: ChoiceFactoryOptions | None = None,
    ) -> Activity:
        """Render choices one per line, numbered or bulleted."""
        choices = ChoiceFactory.to_choices(choices)
        opt = options or ChoiceFactoryOptions()

        lines = [
            f"{index + 1}. {choice.display_title}"
            if opt.include_numbers
            else f"- {choice.display_title}"
            for index, choice in enumerate(choices)
        ]
        body = "\n   ".join(lines)
        txt = f"{text}\n\n   {body}" if text else f"   {body}"
        return Activity.message(txt, speak=speak, input_hint=InputHints.EXPECTING_INPUT)

    @staticmethod
    def for_channel(
        choices: list[Choice | str],
        text: str | None = None,
        speak: str | None = None,
        options: ChoiceFactoryOptions | None = None,
    ) -> Activity:
        """Pick inline for a few short titles, a list otherwise."""
        choices = ChoiceFactory.to_choices(choices)
        max_title_length = max((len(c.display_title) for c in choices), default=0)

        if max_title_length <= MAX_INLINE_TITLE_LENGTH and len(choices) <= MAX_INLINE_CHOICES:
            return ChoiceFactory.inline(choices, text, speak, options)
        return ChoiceFactory.list_style(choices, text, speak, options)

    @staticmethod
    def render(
        choices: list[Choice | str],
        prompt: Activity | None,
        style: ListStyle,
        options: ChoiceFactoryOptions | None = None,
    ) -> Activity:
        """Append choices to a prompt activity using the requested style."""
        text = prompt.text if prompt else None
        speak = prompt.speak if prompt else None

        if style == ListStyle.INLINE:
            msg = ChoiceFactory.inline(choices, text, speak, options)
        elif style == ListStyle.LIST:
            msg = ChoiceFactory.list_style(choices, text, speak, options)
        elif style == ListStyle.NONE:
            msg = Activity.message(text, speak=speak)
        else:
            msg = ChoiceFactory.for_channel(choices, text, speak, options)

        if prompt is not None:
            msg.input_hint = prompt.input_hint or msg.input_hint
            msg.attachments = list(prompt.attachments)
        return msg
