"""Locale-specific connectors used when rendering and recognizing prompts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptCultureModel:
    """Separators and yes/no words for one locale."""

    locale: str
    separator: str
    inline_or: str
    inline_or_more: str
    yes_in_language: str
    no_in_language: str


class PromptCultureModels:
    """Supported cultures and locale normalization."""

    BULGARIAN = PromptCultureModel("bg-bg", ", ", " или ", ", или ", "да", "Не")
    CHINESE = PromptCultureModel("zh-cn", "， ", " 要么 ", "， 要么 ", "是的", "不")
    DUTCH = PromptCultureModel("nl-nl", ", ", " of ", ", of ", "Ja", "Nee")
    ENGLISH = PromptCultureModel("en-us", ", ", " or ", ", or ", "Yes", "No")
    FRENCH = PromptCultureModel("fr-fr", ", ", " ou ", ", ou ", "Oui", "Non")
    GERMAN = PromptCultureModel("de-de", ", ", " oder ", ", oder ", "Ja", "Nein")
    ITALIAN = PromptCultureModel("it-it", ", ", " o ", " o ", "Si", "No")
    JAPANESE = PromptCultureModel("ja-jp", "、 ", " または ", "、 または ", "はい", "いいえ")
    PORTUGUESE = PromptCultureModel("pt-br", ", ", " ou ", ", ou ", "Sim", "Não")
    SPANISH = PromptCultureModel("es-es", ", ", " o ", ", o ", "Sí", "No")
    TURKISH = PromptCultureModel("tr-tr", ", ", " veya ", ", veya ", "Evet", "Hayır")

    @classmethod
    def get_supported_cultures(cls) -> list[PromptCultureModel]:
        return [
            cls.BULGARIAN,
            cls.CHINESE,
            cls.DUTCH,
            cls.ENGLISH,
            cls.FRENCH,
            cls.GERMAN,
            cls.ITALIAN,
            cls.JAPANESE,
            cls.PORTUGUESE,
            cls.SPANISH,
            cls.TURKISH,
        ]

    @classmethod
    def map_to_nearest_language(cls, locale: str | None) -> str | None:
        """Normalize a locale to the closest supported culture.

        ``"EN_us"`` and ``"en"`` both map to ``"en-us"``. Locales whose
        language is not supported are returned normalized but unmapped.
        """
        if not locale:
            return locale

        normalized = locale.strip().lower().replace("_", "-")
        supported = [culture.locale for culture in cls.get_supported_cultures()]
        if normalized in supported:
            return normalized

        language = normalized.split("-")[0]
        for culture_locale in supported:
            if culture_locale.split("-")[0] == language:
                return culture_locale

        return normalized

    @classmethod
    def get_culture(cls, locale: str | None) -> PromptCultureModel:
        """Culture for a locale, falling back to English."""
        mapped = cls.map_to_nearest_language(locale)
        for culture in cls.get_supported_cultures():
            if culture.locale == mapped:
                return culture
        return cls.ENGLISH
