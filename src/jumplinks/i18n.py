"""Internationalization (i18n) support using gettext."""

import gettext as gettext_module
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DOMAIN = "jumplinks"
LOCALE_DIR = Path(__file__).parent / "locales"

_ui_language = "en"
_translation: gettext_module.NullTranslations | None = None


def initialize(ui_language: str = "en") -> None:
    """Initialize translation system with the admin UI language.

    Call once at application startup, before field trees are composed.

    Args:
        ui_language: Language code for labels, descriptions and notes
    """
    global _ui_language, _translation

    _ui_language = ui_language
    _translation = None

    logger.debug(f"Translation initialized: UI={ui_language}")


def _get_translation() -> gettext_module.NullTranslations:
    global _translation

    if _translation is None:
        _translation = _load_translation(_ui_language)
    return _translation


def gettext(message: str) -> str:
    """Translate a UI message (labels, descriptions, notes)."""
    return _get_translation().gettext(message)


def _load_translation(language: str | None = None) -> gettext_module.NullTranslations:
    """Load gettext translation object, falling back to msgid on any miss.

    Args:
        language: Language code (e.g., "de", "en", "pt_BR").
                  If None, returns NullTranslations.
    """
    if not language:
        logger.debug("No language specified, using NullTranslations")
        return gettext_module.NullTranslations()

    try:
        translation = gettext_module.translation(
            domain=DOMAIN,
            localedir=str(LOCALE_DIR),
            languages=[language],
            fallback=True,
        )
        logger.debug(f"Loaded translation for language: {language}")
        return translation
    except OSError as e:
        logger.warning(f"Failed to load translation for {language}: {e}, using fallback")
        return gettext_module.NullTranslations()
