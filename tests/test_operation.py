import pytest

from paapi5.api.operation import InvalidResourceError, Operation
from paapi5.api.resource import Resource

OPERATION_NAMES = ("GetBrowseNodes", "GetItems", "GetVariations", "SearchItems")


def test_valid_resources_for_get_browse_nodes():
    result = Operation.GET_BROWSE_NODES.validate(
        [Resource.BROWSE_NODES_ANCESTOR, Resource.BROWSE_NODES_CHILDREN]
    )
    assert result is None
    with pytest.raises(InvalidResourceError):
        Operation.GET_ITEMS.validate([Resource.BROWSE_NODES_ANCESTOR])


def test_invalid_resources_message():
    with pytest.raises(InvalidResourceError) as excinfo:
        Operation.GET_ITEMS.validate(
            [Resource.BROWSE_NODES_ANCESTOR, Resource.BROWSE_NODES_CHILDREN]
        )
    assert str(excinfo.value) == 'Invalid resource "BrowseNodes.Ancestor" for operation "GetItems"'


def test_error_reports_first_invalid_resource():
    with pytest.raises(InvalidResourceError) as excinfo:
        Operation.GET_ITEMS.validate(
            [Resource.ITEM_INFO_TITLE, Resource.VARIATION_SUMMARY_VARIATION_DIMENSION, Resource.SEARCH_REFINEMENTS]
        )
    assert excinfo.value.resource == Resource.VARIATION_SUMMARY_VARIATION_DIMENSION
    assert excinfo.value.operation == Operation.GET_ITEMS
    assert str(excinfo.value) == (
        'Invalid resource "VariationSummary.VariationDimension" for operation "GetItems"'
    )


def test_error_is_value_error():
    with pytest.raises(ValueError, match="Invalid resource"):
        Operation.SEARCH_ITEMS.validate([Resource.BROWSE_NODES_CHILDREN])


def test_unknown_resource_is_rejected():
    with pytest.raises(InvalidResourceError) as excinfo:
        Operation.GET_ITEMS.validate(["Not.A.Resource"])
    assert str(excinfo.value) == 'Invalid resource "Not.A.Resource" for operation "GetItems"'


def test_plain_string_resource_is_accepted():
    assert Operation.GET_ITEMS.validate(["ItemInfo.Title"]) is None
    with pytest.raises(InvalidResourceError):
        Operation.GET_BROWSE_NODES.validate(["ItemInfo.Title"])


@pytest.mark.parametrize(
    ("operation", "resource", "allowed"),
    [
        (Operation.GET_VARIATIONS, Resource.VARIATION_SUMMARY_PRICE_HIGHEST_PRICE, True),
        (Operation.SEARCH_ITEMS, Resource.VARIATION_SUMMARY_PRICE_LOWEST_PRICE, False),
        (Operation.SEARCH_ITEMS, Resource.SEARCH_REFINEMENTS, True),
        (Operation.GET_ITEMS, Resource.SEARCH_REFINEMENTS, False),
        (Operation.GET_ITEMS, Resource.OFFERS_V2_LISTINGS_PRICE, True),
        (Operation.SEARCH_ITEMS, Resource.OFFERS_V2_LISTINGS_DEAL_DETAILS, True),
        (Operation.GET_VARIATIONS, Resource.OFFERS_V2_LISTINGS_PRICE, False),
        (Operation.GET_BROWSE_NODES, Resource.PARENT_ASIN, False),
        (Operation.GET_VARIATIONS, Resource.PARENT_ASIN, True),
    ],
)
def test_resource_operation_compatibility(operation, resource, allowed):
    if allowed:
        assert operation.validate([resource]) is None
    else:
        with pytest.raises(InvalidResourceError) as excinfo:
            operation.validate([resource])
        assert excinfo.value.resource == resource


def test_every_resource_is_valid_for_some_operation():
    unaccepted = []
    for resource in Resource:
        accepted = []
        for name in OPERATION_NAMES:
            try:
                Operation(name).validate([Resource(resource.value)])
            except InvalidResourceError:
                continue
            accepted.append(name)
        if not accepted:
            unaccepted.append(resource)
    assert unaccepted == []


def test_empty_resource_list_passes_for_all_operations():
    results = [Operation(name).validate([]) for name in OPERATION_NAMES]
    assert results == [None, None, None, None]


def test_operation_values():
    assert [op.value for op in Operation] == list(OPERATION_NAMES)
    assert Operation("GetItems").lower() == "getitems"