import pytest

from paapi5.api.locale import Locale

CASES = [
    ("AU", "webservices.amazon.com.au", "us-west-2", "www.amazon.com.au"),
    ("BR", "webservices.amazon.com.br", "us-east-1", "www.amazon.com.br"),
    ("CA", "webservices.amazon.ca", "us-east-1", "www.amazon.ca"),
    ("FR", "webservices.amazon.fr", "eu-west-1", "www.amazon.fr"),
    ("DE", "webservices.amazon.de", "eu-west-1", "www.amazon.de"),
    ("IN", "webservices.amazon.in", "eu-west-1", "www.amazon.in"),
    ("IT", "webservices.amazon.it", "eu-west-1", "www.amazon.it"),
    ("JP", "webservices.amazon.co.jp", "us-west-2", "www.amazon.co.jp"),
    ("MX", "webservices.amazon.com.mx", "us-east-1", "www.amazon.com.mx"),
    ("NL", "webservices.amazon.nl", "eu-west-1", "www.amazon.nl"),
    ("SG", "webservices.amazon.sg", "us-west-2", "www.amazon.sg"),
    ("ES", "webservices.amazon.es", "eu-west-1", "www.amazon.es"),
    ("TR", "webservices.amazon.com.tr", "eu-west-1", "www.amazon.com.tr"),
    ("AE", "webservices.amazon.ae", "eu-west-1", "www.amazon.ae"),
    ("UK", "webservices.amazon.co.uk", "eu-west-1", "www.amazon.co.uk"),
    ("US", "webservices.amazon.com", "us-east-1", "www.amazon.com"),
]


@pytest.mark.parametrize("code,host,region,marketplace", CASES)
def test_locale_endpoints(code, host, region, marketplace):
    locale = Locale(code)
    assert locale.host() == host
    assert locale.region() == region
    assert locale.marketplace() == marketplace


def test_valid_locale():
    assert Locale.is_valid(Locale.UNITED_STATES) is True
    assert Locale.is_valid("US") is True


def test_invalid_locale():
    assert Locale.is_valid("Fake Country") is False
    assert Locale.is_valid(None) is False


def test_invalid_locale_cannot_be_constructed():
    with pytest.raises(ValueError):
        Locale("Fake Country")


def test_locale_from_code():
    assert Locale("UK") is Locale.UNITED_KINGDOM
    assert Locale("UK").host() == "webservices.amazon.co.uk"