"""Language to country tables.

A table maps a language code to the ISO country codes whose visitors should
get that language. Country codes are stored uppercase.

Within one table a country should appear under a single language. The
built-in table lists a few countries under several languages (e.g. ``CA``
under ``en`` and ``fr``); lookups resolve these to the language declared
first, which is why ``DEFAULT_LANGUAGE_TO_COUNTRIES`` keeps its order.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

LanguageTable = Mapping[str, frozenset[str]]


def normalize_country(country: str) -> str:
    """Uppercase and strip a country code."""
    return country.strip().upper()


def build_table(mapping: Mapping[str, Iterable[str]]) -> LanguageTable:
    """Freeze a language -> countries mapping, normalizing country codes.

    Args:
        mapping: Language code to iterable of country codes.

    Returns:
        Read-only mapping of language code to frozenset of uppercase codes.
    """
    return MappingProxyType(
        {
            language: frozenset(
                normalize_country(country) for country in countries if country.strip()
            )
            for language, countries in mapping.items()
        }
    )


def flatten_table(
    mapping: Mapping[str, Iterable[str]],
) -> dict[str, str]:
    """Invert a language -> countries mapping into country -> language.

    The first language listing a country keeps it.

    Args:
        mapping: Language code to iterable of country codes, in priority order.

    Returns:
        Country code (uppercase) to language code.
    """
    flat: dict[str, str] = {}
    for language, countries in mapping.items():
        for country in countries:
            code = normalize_country(country)
            if code:
                flat.setdefault(code, language)
    return flat


_DEFAULT_LANGUAGE_TO_COUNTRIES: dict[str, tuple[str, ...]] = {
    "en": (
        "US", "GB", "CA", "AU", "NZ", "IE", "ZA", "JM", "BS", "BZ", "BB", "TT",
        "GY", "SR", "VC", "AG", "KN", "LC", "GD", "TC", "VG", "KY", "BM", "VI",
        "PR", "GU", "AS", "MP", "UM", "IN", "PK", "SG", "MY", "NG", "PH",
    ),
    "fr": (
        "FR", "BE", "CH", "DJ", "GQ", "CA", "CD", "CF", "CG", "CI", "CM", "KM",
        "GA", "GN", "HT", "LU", "MC", "MG", "ML", "MQ", "NC", "NE", "PF", "RE",
        "RW", "SC", "SN", "TD", "TG",
    ),
    "es": (
        "ES", "MX", "AR", "CO", "PE", "CL", "VE", "GT", "CU", "BO", "DO", "EC",
        "HN", "NI", "PA", "PY", "SV", "UY", "CR", "PR", "GQ", "PH",
    ),
    "de": ("DE", "AT", "CH", "LI", "LU"),
    "ru": ("RU", "BY", "KZ", "KG", "MD", "TJ", "TM", "UA", "UZ"),
    "zh": ("CN", "TW", "HK", "MO", "SG", "MY"),
    "ja": ("JP",),
    "it": ("IT", "SM", "VA", "CH"),
    "pt": ("PT", "BR", "AO", "CV", "GW", "MZ", "ST", "TL"),
    "nl": ("NL",),
    "pl": ("PL",),
    "tr": ("TR",),
    "ko": ("KR",),
    "sv": ("SE",),
    "no": ("NO",),
    "da": ("DK",),
    "fi": ("FI",),
    "el": ("GR",),
    "hu": ("HU",),
    "cs": ("CZ",),
    "sk": ("SK",),
    "ro": ("RO",),
    "bg": ("BG",),
    "sl": ("SI",),
    "lt": ("LT",),
    "lv": ("LV",),
    "et": ("EE",),
    "is": ("IS",),
    "he": ("IL",),
    "ar": (
        "DZ", "BH", "TD", "DJ", "EG", "IQ", "JO", "KW", "LB", "LY", "MR", "MA",
        "OM", "PS", "QA", "SA", "SO", "SD", "SS", "SY", "TN", "AE", "YE", "KM",
    ),
}

# Process-wide, read-only
DEFAULT_LANGUAGE_TO_COUNTRIES: LanguageTable = build_table(
    _DEFAULT_LANGUAGE_TO_COUNTRIES
)

# Country -> language for the built-in table, first declared language wins
DEFAULT_COUNTRY_TO_LANGUAGE: Mapping[str, str] = MappingProxyType(
    flatten_table(_DEFAULT_LANGUAGE_TO_COUNTRIES)
)
