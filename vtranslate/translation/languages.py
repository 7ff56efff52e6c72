"""
Language catalog and per-language translation profiles.

SUPPORTED_LANGUAGES are the languages the translation client advertises;
ALL_LANGUAGES is the wider catalog offered by the language pickers. Any
language without a profile is sent to the model by name with no extra
guidance.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class LanguageProfile:
    """How a target language is named and styled in the prompt."""
    name: str
    instructions: Optional[str] = None


LANGUAGE_PROFILES: Dict[str, LanguageProfile] = {
    "Japanese": LanguageProfile(
        "日本語",
        "Use appropriate keigo and natural Japanese expressions. Include kanji where appropriate."
    ),
    "Spanish": LanguageProfile(
        "Español",
        "Consider regional variations and use neutral Spanish."
    ),
    "Hindi": LanguageProfile(
        "हिंदी",
        "Use Devanagari script and maintain formal Hindi."
    ),
    "Chinese": LanguageProfile(
        "中文",
        "Use Simplified Chinese characters and maintain formal tone."
    ),
    "Korean": LanguageProfile(
        "한국어",
        "Use appropriate honorifics and maintain formal Korean."
    ),
    "French": LanguageProfile(
        "Français",
        "Use proper French grammar and maintain formal tone."
    ),
    "German": LanguageProfile(
        "Deutsch",
        'Use proper German grammar and formal "Sie" form.'
    ),
    "Italian": LanguageProfile(
        "Italiano",
        "Use proper Italian grammar and maintain formal tone."
    ),
    "Portuguese": LanguageProfile(
        "Português",
        "Use proper Portuguese grammar and maintain formal tone."
    ),
    "Russian": LanguageProfile(
        "Русский",
        "Use proper Russian grammar and maintain formal tone."
    ),
    "Arabic": LanguageProfile(
        "العربية",
        "Use Modern Standard Arabic and proper diacritics."
    ),
    "English": LanguageProfile(
        "English",
        "Use proper grammar and maintain formal tone."
    ),
}

SUPPORTED_LANGUAGES: List[str] = [
    "English", "Japanese", "Spanish", "Hindi", "Chinese", "Korean",
    "French", "German", "Italian", "Portuguese", "Russian", "Arabic",
]

# Used when the supported list cannot be obtained from the client
FALLBACK_LANGUAGES: List[str] = [
    "English", "Spanish", "French", "German", "Italian", "Portuguese",
    "Russian", "Japanese", "Korean", "Chinese", "Arabic", "Hindi",
]

ALL_LANGUAGES: List[str] = sorted([
    'Afrikaans', 'Albanian', 'Amharic', 'Arabic', 'Armenian', 'Assamese',
    'Aymara', 'Azerbaijani', 'Bambara', 'Basque', 'Belarusian', 'Bengali',
    'Bhojpuri', 'Bosnian', 'Bulgarian', 'Catalan', 'Cebuano', 'Chichewa',
    'Chinese (Simplified)', 'Chinese (Traditional)', 'Corsican', 'Croatian',
    'Czech', 'Danish', 'Dhivehi', 'Dogri', 'Dutch', 'English', 'Esperanto',
    'Estonian', 'Ewe', 'Filipino', 'Finnish', 'French', 'Frisian', 'Galician',
    'Georgian', 'German', 'Greek', 'Guarani', 'Gujarati', 'Haitian Creole',
    'Hausa', 'Hawaiian', 'Hebrew', 'Hindi', 'Hmong', 'Hungarian', 'Icelandic',
    'Igbo', 'Ilocano', 'Indonesian', 'Irish', 'Italian', 'Japanese', 'Javanese',
    'Kannada', 'Kazakh', 'Khmer', 'Kinyarwanda', 'Konkani', 'Korean', 'Krio',
    'Kurdish (Kurmanji)', 'Kurdish (Sorani)', 'Kyrgyz', 'Lao', 'Latin',
    'Latvian', 'Lingala', 'Lithuanian', 'Luganda', 'Luxembourgish', 'Macedonian',
    'Maithili', 'Malagasy', 'Malay', 'Malayalam', 'Maltese', 'Maori', 'Marathi',
    'Meiteilon (Manipuri)', 'Mizo', 'Mongolian', 'Myanmar (Burmese)', 'Nepali',
    'Norwegian', 'Odia (Oriya)', 'Oromo', 'Pashto', 'Persian', 'Polish',
    'Portuguese', 'Punjabi', 'Quechua', 'Romanian', 'Russian', 'Samoan',
    'Sanskrit', 'Scots Gaelic', 'Sepedi', 'Serbian', 'Sesotho', 'Shona',
    'Sindhi', 'Sinhala', 'Slovak', 'Slovenian', 'Somali', 'Spanish', 'Sundanese',
    'Swahili', 'Swedish', 'Tajik', 'Tamil', 'Tatar', 'Telugu', 'Thai', 'Tigrinya',
    'Tsonga', 'Turkish', 'Turkmen', 'Twi', 'Ukrainian', 'Urdu', 'Uyghur', 'Uzbek',
    'Vietnamese', 'Welsh', 'Xhosa', 'Yiddish', 'Yoruba', 'Zulu',
])


def get_language_profile(language: str) -> LanguageProfile:
    """Profile for a language, or the bare name when none is defined."""
    return LANGUAGE_PROFILES.get(language, LanguageProfile(language))


def filter_languages(query: str = "", exclude: Iterable[str] = ()) -> List[str]:
    """Catalog languages matching a case-insensitive search, minus exclusions."""
    excluded = set(exclude)
    needle = query.strip().lower()
    return [
        lang for lang in ALL_LANGUAGES
        if lang not in excluded and needle in lang.lower()
    ]
