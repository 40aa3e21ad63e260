"""Languages accepted as languages of preference."""

from enum import StrEnum


class Language(StrEnum):
    """Language and country codes."""

    ARABIC_UNITED_ARAB_EMIRATES = "ar_AE"
    CZECH_CZECHIA = "cs_CZ"
    GERMAN_GERMANY = "de_DE"
    ENGLISH_UNITED_ARAB_EMIRATES = "en_AE"
    ENGLISH_AUSTRALIA = "en_AU"
    ENGLISH_CANADA = "en_CA"
    ENGLISH_UNITED_KINGDOM = "en_GB"
    ENGLISH_INDIA = "en_IN"
    ENGLISH_SINGAPORE = "en_SG"
    ENGLISH_UNITED_STATES = "en_US"
    SPANISH_SPAIN = "es_ES"
    SPANISH_MEXICO = "es_MX"
    SPANISH_UNITED_STATES = "es_US"
    FRENCH_CANADA = "fr_CA"
    FRENCH_FRANCE = "fr_FR"
    ITALIAN_ITALY = "it_IT"
    JAPANESE_JAPAN = "ja_JP"
    KOREAN_KOREA = "ko_KR"
    DUTCH_NETHERLANDS = "nl_NL"
    POLISH_POLAND = "pl_PL"
    PORTUGUESE_BRAZIL = "pt_BR"
    TURKISH_TURKEY = "tr_TR"
    CHINESE_CHINA = "zh_CN"
    CHINESE_TAIWAN = "zh_TW"