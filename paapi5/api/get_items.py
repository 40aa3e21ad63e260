"""Parameters and response of the GetItems operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from paapi5.api.currency import Currency
from paapi5.api.language import Language
from paapi5.api.models import ApiError, ItemsResult, Model
from paapi5.api.param_types import Condition, Merchant
from paapi5.api.resource import Resource


@dataclass
class GetItemsResponse(Model):
    """Response returned by GetItems."""

    errors: list[ApiError] = field(default_factory=list, metadata={"json": "Errors"})
    items_result: ItemsResult = field(default_factory=ItemsResult, metadata={"json": "ItemsResult"})


@dataclass
class GetItemsParams:
    """Parameters accepted by GetItems."""

    condition: Condition | None = None
    currency_of_preference: Currency | None = None
    item_ids: list[str] = field(default_factory=list)
    languages_of_preference: list[Language] = field(default_factory=list)
    merchant: Merchant | None = None
    offer_count: int = 0
    resources: list[Resource] = field(default_factory=list)

    def payload(self) -> dict[str, Any]:
        """Build the request body; at least one item id is required."""
        body: dict[str, Any] = {"ItemIdType": "ASIN"}
        if self.condition:
            body["Condition"] = self.condition
        if self.currency_of_preference:
            body["CurrencyOfPreference"] = self.currency_of_preference
        if not self.item_ids:
            raise ValueError("One or more item ids required")
        body["ItemIds"] = list(self.item_ids)
        if self.languages_of_preference:
            body["LanguagesOfPreference"] = list(self.languages_of_preference)
        if self.merchant:
            body["Merchant"] = self.merchant
        if self.offer_count > 1:
            body["OfferCount"] = self.offer_count
        if self.resources:
            body["Resources"] = list(self.resources)
        return body