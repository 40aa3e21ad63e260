"""Currencies accepted as a currency of preference."""

from enum import StrEnum


class Currency(StrEnum):
    """ISO 4217 currency codes."""

    UNITED_ARAB_EMIRATES_DIRHAM = "AED"
    ARMENIAN_DRAM = "AMD"
    ARGENTINE_PESO = "ARS"
    AUSTRALIAN_DOLLAR = "AUD"
    ARUBAN_FLORIN = "AWG"
    AZERBAIJANI_MANAT = "AZN"
    BULGARIAN_LEV = "BGN"
    BRUNEIAN_DOLLAR = "BND"
    BOLIVIAN_BOLIVIANO = "BOB"
    BRAZILIAN_REAL = "BRL"
    BAHAMIAN_DOLLAR = "BSD"
    BELIZE_DOLLAR = "BZD"
    CANADIAN_DOLLAR = "CAD"
    CHILEAN_PESO = "CLP"
    CHINESE_YUAN_RENMINBI = "CNY"
    COLOMBIAN_PESO = "COP"
    COSTA_RICAN_COLON = "CRC"
    DOMINICAN_PESO = "DOP"
    EGYPTIAN_POUND = "EGP"
    EURO = "EUR"
    BRITISH_POUND = "GBP"
    GHANAIAN_CEDI = "GHS"
    GUATEMALAN_QUETZAL = "GTQ"
    HONG_KONG_DOLLAR = "HKD"
    HONDURAN_LEMPIRA = "HNL"
    HUNGARIAN_FORINT = "HUF"
    INDONESIAN_RUPIAH = "IDR"
    ISRAELI_SHEKEL = "ILS"
    INDIAN_RUPEE = "INR"
    JAMAICAN_DOLLAR = "JMD"
    JAPANESE_YEN = "JPY"
    KENYAN_SHILLING = "KES"
    CAMBODIAN_RIEL = "KHR"
    SOUTH_KOREAN_WON = "KRW"
    CAYMANIAN_DOLLAR = "KYD"
    KAZAKHSTANI_TENGE = "KZT"
    LEBANESE_POUND = "LBP"
    MOROCCAN_DIRHAM = "MAD"
    MONGOLIAN_TUGHRIK = "MNT"
    MACANESE_PATACA = "MOP"
    MAURITIAN_RUPEE = "MUR"
    MEXICAN_PESO = "MXN"
    MALAYSIAN_RINGGIT = "MYR"
    NAMIBIAN_DOLLAR = "NAD"
    NIGERIAN_NAIRA = "NGN"
    NORWEGIAN_KRONE = "NOK"
    NEW_ZEALAND_DOLLAR = "NZD"
    PANAMANIAN_BALBOA = "PAB"
    PERUVIAN_SOL = "PEN"
    PHILIPPINE_PESO = "PHP"
    PARAGUAYAN_GUARANI = "PYG"
    QATARI_RIYAL = "QAR"
    RUSSIAN_RUBLE = "RUB"
    SAUDI_ARABIAN_RIYAL = "SAR"
    SINGAPORE_DOLLAR = "SGD"
    THAI_BAHT = "THB"
    TURKISH_LIRA = "TRY"
    TRINIDADIAN_DOLLAR = "TTD"
    TAIWAN_NEW_DOLLAR = "TWD"
    TANZANIAN_SHILLING = "TZS"
    UNITED_STATES_DOLLAR = "USD"
    URUGUAYAN_PESO = "UYU"
    VIETNAMESE_DONG = "VND"
    EASTERN_CARIBBEAN_DOLLAR = "XCD"
    SOUTH_AFRICAN_RAND = "ZAR"