"""API operations and the resources each of them accepts."""

from collections.abc import Iterable
from enum import StrEnum

from paapi5.api.resource import Resource


class InvalidResourceError(ValueError):
    """Raised when a resource cannot be requested from an operation."""

    def __init__(self, resource: str, operation: str) -> None:
        self.resource = resource
        self.operation = operation
        super().__init__(f'Invalid resource "{resource}" for operation "{operation}"')


class Operation(StrEnum):
    """A Product Advertising API operation."""

    GET_BROWSE_NODES = "GetBrowseNodes"
    GET_ITEMS = "GetItems"
    GET_VARIATIONS = "GetVariations"
    SEARCH_ITEMS = "SearchItems"

    def validate(self, resources: Iterable[str]) -> None:
        """Raise InvalidResourceError for the first resource this operation does not accept."""
        for resource in resources:
            if self not in _RESOURCE_OPERATIONS.get(resource, frozenset()):
                raise InvalidResourceError(resource, self)


_BROWSE_NODES_ONLY = frozenset({Operation.GET_BROWSE_NODES})
_ITEM_OPERATIONS = frozenset({Operation.GET_ITEMS, Operation.GET_VARIATIONS, Operation.SEARCH_ITEMS})
_VARIATIONS_ONLY = frozenset({Operation.GET_VARIATIONS})
_SEARCH_ONLY = frozenset({Operation.SEARCH_ITEMS})
_OFFERS_V2_OPERATIONS = frozenset({Operation.GET_ITEMS, Operation.SEARCH_ITEMS})

_BROWSE_NODE_RESOURCES = (
    Resource.BROWSE_NODES_ANCESTOR,
    Resource.BROWSE_NODES_CHILDREN,
)

_ITEM_RESOURCES = (
    Resource.BROWSE_NODE_INFO_BROWSE_NODES,
    Resource.BROWSE_NODE_INFO_BROWSE_NODES_ANCESTOR,
    Resource.BROWSE_NODE_INFO_BROWSE_NODES_SALES_RANK,
    Resource.BROWSE_NODE_INFO_WEBSITE_SALES_RANK,
    Resource.CUSTOMER_REVIEWS_COUNT,
    Resource.CUSTOMER_REVIEWS_STAR_RATING,
    Resource.IMAGES_PRIMARY_SMALL,
    Resource.IMAGES_PRIMARY_MEDIUM,
    Resource.IMAGES_PRIMARY_LARGE,
    Resource.IMAGES_VARIANTS_SMALL,
    Resource.IMAGES_VARIANTS_MEDIUM,
    Resource.IMAGES_VARIANTS_LARGE,
    Resource.ITEM_INFO_BY_LINE_INFO,
    Resource.ITEM_INFO_CONTENT_INFO,
    Resource.ITEM_INFO_CONTENT_RATING,
    Resource.ITEM_INFO_CLASSIFICATIONS,
    Resource.ITEM_INFO_EXTERNAL_IDS,
    Resource.ITEM_INFO_FEATURES,
    Resource.ITEM_INFO_MANUFACTURE_INFO,
    Resource.ITEM_INFO_PRODUCT_INFO,
    Resource.ITEM_INFO_TECHNICAL_INFO,
    Resource.ITEM_INFO_TITLE,
    Resource.ITEM_INFO_TRADE_IN_INFO,
    Resource.OFFERS_LISTINGS_AVAILABILITY_MAX_ORDER_QUANTITY,
    Resource.OFFERS_LISTINGS_AVAILABILITY_MESSAGE,
    Resource.OFFERS_LISTINGS_AVAILABILITY_MIN_ORDER_QUANTITY,
    Resource.OFFERS_LISTINGS_AVAILABILITY_TYPE,
    Resource.OFFERS_LISTINGS_CONDITION,
    Resource.OFFERS_LISTINGS_CONDITION_SUB_CONDITION,
    Resource.OFFERS_LISTINGS_DELIVERY_INFO_IS_AMAZON_FULFILLED,
    Resource.OFFERS_LISTINGS_DELIVERY_INFO_IS_FREE_SHIPPING_ELIGIBLE,
    Resource.OFFERS_LISTINGS_DELIVERY_INFO_IS_PRIME_ELIGIBLE,
    Resource.OFFERS_LISTINGS_DELIVERY_INFO_SHIPPING_CHARGES,
    Resource.OFFERS_LISTINGS_IS_BUY_BOX_WINNER,
    Resource.OFFERS_LISTINGS_LOYALTY_POINTS_POINTS,
    Resource.OFFERS_LISTINGS_MERCHANT_INFO,
    Resource.OFFERS_LISTINGS_PRICE,
    Resource.OFFERS_LISTINGS_PROGRAM_ELIGIBILITY_IS_PRIME_EXCLUSIVE,
    Resource.OFFERS_LISTINGS_PROGRAM_ELIGIBILITY_IS_PRIME_PANTRY,
    Resource.OFFERS_LISTINGS_PROMOTIONS,
    Resource.OFFERS_LISTINGS_SAVING_BASIS,
    Resource.OFFERS_SUMMARIES_HIGHEST_PRICE,
    Resource.OFFERS_SUMMARIES_LOWEST_PRICE,
    Resource.OFFERS_SUMMARIES_OFFER_COUNT,
    Resource.PARENT_ASIN,
    Resource.RENTAL_OFFERS_LISTINGS_AVAILABILITY_MAX_ORDER_QUANTITY,
    Resource.RENTAL_OFFERS_LISTINGS_AVAILABILITY_MESSAGE,
    Resource.RENTAL_OFFERS_LISTINGS_AVAILABILITY_MIN_ORDER_QUANTITY,
    Resource.RENTAL_OFFERS_LISTINGS_AVAILABILITY_TYPE,
    Resource.RENTAL_OFFERS_LISTINGS_BASE_PRICE,
    Resource.RENTAL_OFFERS_LISTINGS_CONDITION,
    Resource.RENTAL_OFFERS_LISTINGS_CONDITION_SUB_CONDITION,
    Resource.RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_IS_AMAZON_FULFILLED,
    Resource.RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_IS_FREE_SHIPPING_ELIGIBLE,
    Resource.RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_IS_PRIME_ELIGIBLE,
    Resource.RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_SHIPPING_CHARGES,
    Resource.RENTAL_OFFERS_LISTINGS_MERCHANT_INFO,
)

_VARIATION_RESOURCES = (
    Resource.VARIATION_SUMMARY_PRICE_HIGHEST_PRICE,
    Resource.VARIATION_SUMMARY_PRICE_LOWEST_PRICE,
    Resource.VARIATION_SUMMARY_VARIATION_DIMENSION,
)

_OFFERS_V2_RESOURCES = (
    Resource.OFFERS_V2_LISTINGS_PRICE,
    Resource.OFFERS_V2_LISTINGS_AVAILABILITY,
    Resource.OFFERS_V2_LISTINGS_CONDITION,
    Resource.OFFERS_V2_LISTINGS_MERCHANT_INFO,
    Resource.OFFERS_V2_LISTINGS_IS_BUY_BOX_WINNER,
    Resource.OFFERS_V2_LISTINGS_DEAL_DETAILS,
    Resource.OFFERS_V2_LISTINGS_TYPE,
    Resource.OFFERS_V2_LISTINGS_LOYALTY_POINTS,
)

_RESOURCE_OPERATIONS: dict[str, frozenset[Operation]] = {
    **dict.fromkeys(_BROWSE_NODE_RESOURCES, _BROWSE_NODES_ONLY),
    **dict.fromkeys(_ITEM_RESOURCES, _ITEM_OPERATIONS),
    **dict.fromkeys(_VARIATION_RESOURCES, _VARIATIONS_ONLY),
    Resource.SEARCH_REFINEMENTS: _SEARCH_ONLY,
    **dict.fromkeys(_OFFERS_V2_RESOURCES, _OFFERS_V2_OPERATIONS),
}