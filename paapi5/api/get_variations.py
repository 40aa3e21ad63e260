"""Parameters and response of the GetVariations operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from paapi5.api.currency import Currency
from paapi5.api.language import Language
from paapi5.api.models import ApiError, Model, VariationsResult
from paapi5.api.param_types import Condition, Merchant
from paapi5.api.resource import Resource


@dataclass
class GetVariationsResponse(Model):
    """Response returned by GetVariations."""

    errors: list[ApiError] = field(default_factory=list, metadata={"json": "Errors"})
    variations_result: VariationsResult = field(
        default_factory=VariationsResult, metadata={"json": "VariationsResult"}
    )


@dataclass
class GetVariationsParams:
    """Parameters accepted by GetVariations."""

    asin: str = ""
    condition: Condition | None = None
    currency_of_preference: Currency | None = None
    languages_of_preference: list[Language] = field(default_factory=list)
    merchant: Merchant | None = None
    offer_count: int = 0
    resources: list[Resource] = field(default_factory=list)
    variation_count: int = 0
    variation_page: int = 0

    def payload(self) -> dict[str, Any]:
        """Build the request body."""
        body: dict[str, Any] = {"ASIN": self.asin}
        if self.condition:
            body["Condition"] = self.condition
        if self.currency_of_preference:
            body["CurrencyOfPreference"] = self.currency_of_preference
        if self.languages_of_preference:
            body["LanguagesOfPreference"] = list(self.languages_of_preference)
        if self.merchant:
            body["Merchant"] = self.merchant
        if self.offer_count > 1:
            body["OfferCount"] = self.offer_count
        if self.resources:
            body["Resources"] = list(self.resources)
        if self.variation_count > 1:
            body["VariationCount"] = self.variation_count
        if self.variation_page > 1:
            body["VariationPage"] = self.variation_page
        return body