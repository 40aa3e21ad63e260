"""Parameters and response of the SearchItems operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from paapi5.api.currency import Currency
from paapi5.api.language import Language
from paapi5.api.models import ApiError, Model, SearchResult
from paapi5.api.param_types import Availability, Condition, DeliveryFlag, Merchant, Properties, SortBy
from paapi5.api.resource import Resource


@dataclass
class SearchItemsResponse(Model):
    """Response returned by SearchItems."""

    errors: list[ApiError] = field(default_factory=list, metadata={"json": "Errors"})
    search_result: SearchResult = field(default_factory=SearchResult, metadata={"json": "SearchResult"})


@dataclass
class SearchItemsParams:
    """Parameters accepted by SearchItems."""

    actor: str = ""
    artist: str = ""
    author: str = ""
    availability: Availability | None = None
    brand: str = ""
    browse_node_id: str = ""
    condition: Condition | None = None
    currency_of_preference: Currency | None = None
    delivery_flags: list[DeliveryFlag] = field(default_factory=list)
    item_count: int = 0
    item_page: int = 0
    keywords: str = ""
    languages_of_preference: list[Language] = field(default_factory=list)
    max_price: int = 0
    merchant: Merchant | None = None
    min_price: int = 0
    min_reviews_rating: int = 0
    min_saving_percent: int = 0
    offer_count: int = 0
    properties: Properties = field(default_factory=Properties)
    resources: list[Resource] = field(default_factory=list)
    search_index: str = ""
    sort_by: SortBy | None = None
    title: str = ""

    def payload(self) -> dict[str, Any]:
        """Build the request body from the parameters that are set."""
        body: dict[str, Any] = {}
        scalars = (
            ("Actor", self.actor),
            ("Artist", self.artist),
            ("Author", self.author),
            ("Availability", self.availability),
            ("Brand", self.brand),
            ("BrowseNodeId", self.browse_node_id),
            ("Condition", self.condition),
            ("CurrencyOfPreference", self.currency_of_preference),
            ("Keywords", self.keywords),
            ("Merchant", self.merchant),
        )
        body.update((key, value) for key, value in scalars if value)
        if self.properties:
            body["Properties"] = self.properties
        more = (
            ("SearchIndex", self.search_index),
            ("SortBy", self.sort_by),
            ("Title", self.title),
        )
        body.update((key, value) for key, value in more if value)
        counts = (
            ("ItemCount", self.item_count),
            ("ItemPage", self.item_page),
            ("MaxPrice", self.max_price),
            ("MinPrice", self.min_price),
            ("MinReviewsRating", self.min_reviews_rating),
            ("MinSavingPercent", self.min_saving_percent),
            ("OfferCount", self.offer_count),
        )
        body.update((key, value) for key, value in counts if value > 0)
        lists = (
            ("DeliveryFlags", self.delivery_flags),
            ("LanguagesOfPreference", self.languages_of_preference),
            ("Resources", self.resources),
        )
        body.update((key, list(value)) for key, value in lists if value)
        return body