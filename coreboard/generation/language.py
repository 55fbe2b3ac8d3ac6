"""Language code helpers."""

import re

from .models import DEFAULT_LANGUAGE


LANGUAGE_NAMES = {
    "en": "English",
    "es": "Spanish",
    "pt": "Portuguese",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "ca": "Catalan",
    "nl": "Dutch",
    "pl": "Polish",
    "ro": "Romanian",
    "ru": "Russian",
    "ar": "Arabic",
    "he": "Hebrew",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
}

# ISO 639-2 codes still used by older clients
THREE_LETTER_CODES = {
    "eng": "en",
    "spa": "es",
    "por": "pt",
}


def get_two_letter_code(language: str) -> str:
    """Reduce 'en', 'en-US' or 'eng' to a two letter code, falling back to English."""
    if language in THREE_LETTER_CODES:
        return THREE_LETTER_CODES[language]
    if len(language) == 2:
        return language
    if re.match(r'^[a-z]{2}-[A-Z]{2}$', language):
        return language.split("-")[0].lower()
    return DEFAULT_LANGUAGE


def get_language_name(language: str) -> str:
    """English name of a language, or the code itself when unknown."""
    return LANGUAGE_NAMES.get(get_two_letter_code(language), language)
