import pytest

from paapi5.api.currency import Currency
from paapi5.api.get_items import GetItemsParams, GetItemsResponse
from paapi5.api.language import Language
from paapi5.api.param_types import Condition, Merchant
from paapi5.api.resource import Resource


@pytest.fixture
def params():
    return GetItemsParams(
        condition=Condition.NEW,
        currency_of_preference=Currency.UNITED_STATES_DOLLAR,
        resources=[Resource.BROWSE_NODE_INFO_BROWSE_NODES, Resource.ITEM_INFO_TITLE],
        item_ids=["B07HDBZN7Q", "B07QTVKNNQ", "1119293499"],
        languages_of_preference=[Language.ENGLISH_UNITED_STATES, Language.SPANISH_UNITED_STATES],
        merchant=Merchant.AMAZON,
        offer_count=7,
    )


def test_payload(params):
    payload = params.payload()
    assert len(payload["Resources"]) == 2
    assert len(payload["ItemIds"]) == 3
    assert payload["Condition"] == Condition.NEW
    assert payload["CurrencyOfPreference"] == Currency.UNITED_STATES_DOLLAR
    assert len(payload["LanguagesOfPreference"]) == 2
    assert payload["Merchant"] == Merchant.AMAZON
    assert payload["OfferCount"] == 7
    assert len(params.resources) == 2


def test_item_id_type_is_asin(params):
    assert params.payload()["ItemIdType"] == "ASIN"


def test_zero_item_ids():
    with pytest.raises(ValueError, match="One or more item ids required"):
        GetItemsParams().payload()


def test_offer_count_of_one_left_out():
    payload = GetItemsParams(item_ids=["A"], offer_count=1).payload()
    assert payload == {"ItemIdType": "ASIN", "ItemIds": ["A"]}


def test_response_from_dict():
    response = GetItemsResponse.from_dict(
        {
            "ItemsResult": {
                "Items": [
                    {"ASIN": "0892131349", "DetailPageURL": "https://www.example.com/dp/1"},
                    {"ASIN": "1119293499", "ItemInfo": {"Title": {"DisplayValue": "A Book"}}},
                ]
            }
        }
    )
    items = response.items_result.items
    assert len(items) == 2
    assert items[0].detail_page_url == "https://www.example.com/dp/1"
    assert items[1].item_info.title.display_value == "A Book"