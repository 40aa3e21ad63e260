# paapi5

Building blocks for the Amazon Product Advertising API 5.0: the enumerations the
API uses, request parameter objects that build the JSON request body, a check of
which resources each operation accepts, and dataclass models for the objects found
in its responses.

The package has no runtime dependencies.

## Installation

```
pip install paapi5
```

## Locales

`paapi5.api.locale.Locale` names a store and knows its service host, signing region
and marketplace:

```python
from paapi5.api.locale import Locale

locale = Locale.GERMANY          # or Locale("DE")
locale.host()         # "webservices.amazon.de"
locale.region()       # "eu-west-1"
locale.marketplace()  # "www.amazon.de"

Locale.is_valid("US")            # True
Locale.is_valid("Fake Country")  # False
```

## Enumerations

All of these are string enums, so they serialise to JSON as their values:

- `paapi5.api.currency.Currency`, for example `Currency.UNITED_STATES_DOLLAR` (`"USD"`)
- `paapi5.api.language.Language`, for example `Language.ENGLISH_UNITED_STATES` (`"en_US"`)
- `paapi5.api.resource.Resource`, for example `Resource.ITEM_INFO_TITLE` (`"ItemInfo.Title"`)
- `paapi5.api.operation.Operation`: `GET_BROWSE_NODES`, `GET_ITEMS`, `GET_VARIATIONS`, `SEARCH_ITEMS`
- `paapi5.api.param_types`: `Condition`, `Availability`, `DeliveryFlag`, `Merchant`, `SortBy`

`paapi5.api.param_types.Properties` is a `dict` of strings with `add`, `remove` and
`exists` methods, used for search properties.

## Request parameters

Each operation has a parameter dataclass whose `payload()` method returns the request
body as a dictionary. Only fields that are set are included.

| Module                        | Parameters             |
|-------------------------------|------------------------|
| `paapi5.api.get_browse_nodes` | `GetBrowseNodesParams` |
| `paapi5.api.get_items`        | `GetItemsParams`       |
| `paapi5.api.get_variations`   | `GetVariationsParams`  |
| `paapi5.api.search_items`     | `SearchItemsParams`    |

```python
from paapi5.api.get_items import GetItemsParams
from paapi5.api.resource import Resource

params = GetItemsParams(
    item_ids=["B00AP06III", "0451494946"],
    resources=[Resource.ITEM_INFO_TITLE],
)
params.payload()
# {"ItemIdType": "ASIN",
#  "ItemIds": ["B00AP06III", "0451494946"],
#  "Resources": [Resource.ITEM_INFO_TITLE]}
```

`payload()` raises `ValueError` when a required field is missing:
`GetItemsParams` without item ids ("One or more item ids required") and
`GetBrowseNodesParams` without browse node ids ("One or more browse node ids required").
`OfferCount`, `VariationCount` and `VariationPage` are sent only when greater than 1
for `GetItems` and `GetVariations`.

## Resource validation

`Operation.validate` checks a list of resources against an operation and raises
`paapi5.api.operation.InvalidResourceError` (a `ValueError`) for the first one it
does not accept:

```python
from paapi5.api.operation import Operation
from paapi5.api.resource import Resource

Operation.GET_ITEMS.validate([Resource.VARIATION_SUMMARY_VARIATION_DIMENSION])
# InvalidResourceError: Invalid resource "VariationSummary.VariationDimension" for operation "GetItems"
```

## Response models

`paapi5.api.models` holds dataclasses for the objects in API responses, such as
`ItemsResult`, `Item`, `BrowseNodesResult`, `BrowseNode`, `VariationsResult`,
`SearchResult`, `OfferListing` and `OfferV2Listing`. Each is built from a decoded
JSON object with `from_dict`; keys that are absent or `null` keep their defaults:

```python
from paapi5.api.models import ItemsResult

result = ItemsResult.from_dict(
    {"Items": [{"ASIN": "B00AP06III",
                "DetailPageURL": "https://example.com/item",
                "ItemInfo": {"Title": {"DisplayValue": "A title"}}}]}
)
result.items[0].item_info.title.display_value  # "A title"
```

## What this package does not do

It does not send requests. There is no HTTP client, no request signing and no
command-line tool: you build the body with `payload()`, send and sign it yourself,
and decode the JSON you get back with the models.

## Running the tests

```
pip install -e ".[test]"
pytest
```