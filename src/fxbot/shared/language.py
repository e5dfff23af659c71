# src/fxbot/shared/language.py
"""
Language Management - Localized Reply Strings

This module holds the fixed reply strings the bot sends back to users
and a translate function for looking them up by language.

Files that USE this module:
- fxbot.adapters.formatting.formatter (uses translate for error replies)
- fxbot.config.settings (validates DEFAULT_LANGUAGE against SUPPORTED_LANGUAGES)

Files that this module USES:
- None (pure lookup tables)
"""
import logging
from typing import Dict

logger = logging.getLogger(__name__)

# Language constants
LANG_ENGLISH = "en"
LANG_CHINESE = "zh"

SUPPORTED_LANGUAGES = (LANG_CHINESE, LANG_ENGLISH)

# Translation dictionaries
TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_ENGLISH: {
        "service_unreachable": "Exchange rate service is unreachable, please try again later.",
        "unknown_currency": "Unknown currency code.",
        "invalid_format": "Invalid currency format. Try USD/EUR or /EUR.",
    },
    LANG_CHINESE: {
        "service_unreachable": "匯率服務無法連線，請稍後再試",
        "unknown_currency": "查無此匯率代號",
        "invalid_format": "匯率代號輸入錯誤",
    },
}


def translate(key: str, lang: str = LANG_CHINESE) -> str:
    """
    Look up the fixed reply string for a message key.
    
    Args:
        key: Translation key
        lang: Language code ('zh' or 'en'); unknown languages fall back to English
        
    Returns:
        Translated string, or key if translation not found
    """
    if lang not in TRANSLATIONS:
        logger.warning("Language '%s' not in TRANSLATIONS, using English fallback", lang)
    lang_dict = TRANSLATIONS.get(lang, TRANSLATIONS[LANG_ENGLISH])
    return lang_dict.get(key, key)
