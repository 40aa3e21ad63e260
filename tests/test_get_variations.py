import pytest

from paapi5.api.currency import Currency
from paapi5.api.get_variations import GetVariationsParams, GetVariationsResponse
from paapi5.api.language import Language
from paapi5.api.param_types import Condition, Merchant
from paapi5.api.resource import Resource


@pytest.fixture
def params():
    return GetVariationsParams(
        asin="0545162076",
        condition=Condition.NEW,
        currency_of_preference=Currency.UNITED_STATES_DOLLAR,
        languages_of_preference=[Language.ENGLISH_UNITED_STATES, Language.SPANISH_UNITED_STATES],
        merchant=Merchant.ALL_MERCHANTS,
        offer_count=7,
        resources=[Resource.BROWSE_NODE_INFO_BROWSE_NODES, Resource.CUSTOMER_REVIEWS_COUNT],
        variation_count=3,
        variation_page=5,
    )


def test_payload(params):
    payload = params.payload()
    assert payload["ASIN"] == "0545162076"
    assert payload["Condition"] == Condition.NEW
    assert payload["CurrencyOfPreference"] == Currency.UNITED_STATES_DOLLAR
    assert len(payload["LanguagesOfPreference"]) == 2
    assert payload["Merchant"] == Merchant.ALL_MERCHANTS
    assert payload["OfferCount"] == 7
    assert len(payload["Resources"]) == 2
    assert payload["VariationCount"] == 3
    assert payload["VariationPage"] == 5
    assert len(params.resources) == 2


def test_empty_params_keep_asin_only():
    assert GetVariationsParams().payload() == {"ASIN": ""}


def test_counts_of_one_left_out():
    payload = GetVariationsParams(asin="X", offer_count=1, variation_count=1, variation_page=1).payload()
    assert payload == {"ASIN": "X"}


def test_response_from_dict():
    response = GetVariationsResponse.from_dict(
        {
            "VariationsResult": {
                "Items": [{"ASIN": "A"}, {"ASIN": "B"}],
                "VariationSummary": {"PageCount": 1, "VariationCount": 2},
            }
        }
    )
    result = response.variations_result
    assert [i.asin for i in result.items] == ["A", "B"]
    assert result.variation_summary.variation_count == 2
    assert result.variation_summary.page_count == 1