"""Marketplace locales with their service host, region and marketplace."""

from enum import StrEnum
from typing import NamedTuple


class _Endpoint(NamedTuple):
    host: str
    region: str
    marketplace: str


class Locale(StrEnum):
    """A marketplace locale."""

    AUSTRALIA = "AU"
    BRAZIL = "BR"
    CANADA = "CA"
    FRANCE = "FR"
    GERMANY = "DE"
    INDIA = "IN"
    ITALY = "IT"
    JAPAN = "JP"
    MEXICO = "MX"
    NETHERLANDS = "NL"
    SINGAPORE = "SG"
    SPAIN = "ES"
    TURKEY = "TR"
    UNITED_ARAB_EMIRATES = "AE"
    UNITED_KINGDOM = "UK"
    UNITED_STATES = "US"

    def host(self) -> str:
        """Return the service host for this locale."""
        return _ENDPOINTS[self.value].host

    def region(self) -> str:
        """Return the signing region for this locale."""
        return _ENDPOINTS[self.value].region

    def marketplace(self) -> str:
        """Return the marketplace domain for this locale."""
        return _ENDPOINTS[self.value].marketplace

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Tell whether ``value`` names a known locale."""
        return isinstance(value, str) and value in _ENDPOINTS


_ENDPOINTS: dict[str, _Endpoint] = {
    Locale.AUSTRALIA.value: _Endpoint("webservices.amazon.com.au", "us-west-2", "www.amazon.com.au"),
    Locale.BRAZIL.value: _Endpoint("webservices.amazon.com.br", "us-east-1", "www.amazon.com.br"),
    Locale.CANADA.value: _Endpoint("webservices.amazon.ca", "us-east-1", "www.amazon.ca"),
    Locale.FRANCE.value: _Endpoint("webservices.amazon.fr", "eu-west-1", "www.amazon.fr"),
    Locale.GERMANY.value: _Endpoint("webservices.amazon.de", "eu-west-1", "www.amazon.de"),
    Locale.INDIA.value: _Endpoint("webservices.amazon.in", "eu-west-1", "www.amazon.in"),
    Locale.ITALY.value: _Endpoint("webservices.amazon.it", "eu-west-1", "www.amazon.it"),
    Locale.JAPAN.value: _Endpoint("webservices.amazon.co.jp", "us-west-2", "www.amazon.co.jp"),
    Locale.MEXICO.value: _Endpoint("webservices.amazon.com.mx", "us-east-1", "www.amazon.com.mx"),
    Locale.NETHERLANDS.value: _Endpoint("webservices.amazon.nl", "eu-west-1", "www.amazon.nl"),
    Locale.SINGAPORE.value: _Endpoint("webservices.amazon.sg", "us-west-2", "www.amazon.sg"),
    Locale.SPAIN.value: _Endpoint("webservices.amazon.es", "eu-west-1", "www.amazon.es"),
    Locale.TURKEY.value: _Endpoint("webservices.amazon.com.tr", "eu-west-1", "www.amazon.com.tr"),
    Locale.UNITED_ARAB_EMIRATES.value: _Endpoint("webservices.amazon.ae", "eu-west-1", "www.amazon.ae"),
    Locale.UNITED_KINGDOM.value: _Endpoint("webservices.amazon.co.uk", "eu-west-1", "www.amazon.co.uk"),
    Locale.UNITED_STATES.value: _Endpoint("webservices.amazon.com", "us-east-1", "www.amazon.com"),
}