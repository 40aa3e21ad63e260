"""Enumerations and property bags used in request parameters."""

from enum import StrEnum


class Condition(StrEnum):
    """Product condition filter."""

    ANY = "Any"
    NEW = "New"
    USED = "Used"
    COLLECTIBLE = "Collectible"
    REFURBISHED = "Refurbished"


class Availability(StrEnum):
    """Product availability filter."""

    AVAILABLE = "Available"
    INCLUDE_OUT_OF_STOCK = "IncludeOutOfStock"


class DeliveryFlag(StrEnum):
    """Delivery program filter."""

    AMAZON_GLOBAL = "AmazonGlobal"
    FREE_SHIPPING = "FreeShipping"
    FULFILLED_BY_AMAZON = "FulfilledByAmazon"
    PRIME = "Prime"


class Merchant(StrEnum):
    """Merchant filter."""

    ALL_MERCHANTS = "All"
    AMAZON = "Amazon"


class SortBy(StrEnum):
    """Search result ordering."""

    AVG_CUSTOMER_REVIEWS = "AvgCustomerReviews"
    FEATURED = "Featured"
    NEWEST_ARRIVALS = "NewestArrivals"
    PRICE_HIGH_TO_LOW = "Price:HighToLow"
    PRICE_LOW_TO_HIGH = "Price:LowToHigh"
    RELEVANCE = "Relevance"


class Properties(dict[str, str]):
    """String key/value pairs sent as search properties."""

    def add(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``."""
        self[key] = value

    def remove(self, key: str) -> None:
        """Delete ``key`` if present."""
        self.pop(key, None)

    def exists(self, key: str) -> bool:
        """Tell whether ``key`` is present."""
        return key in self